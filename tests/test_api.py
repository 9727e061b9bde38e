def add_room(client, number=101, category="Standard", price="100.00"):
    return client.post("/api/rooms", json={
        "room_number": number, "category": category, "price_per_night": price,
    })


def book(client, number=101, name="Alice", check_in="2024-01-01", check_out="2024-01-03"):
    return client.post("/api/book", json={
        "name": name, "contact_info": "a@x.com", "room_number": number,
        "check_in": check_in, "check_out": check_out,
    })


def test_add_and_list_rooms(client):
    r = add_room(client)
    assert r.status_code == 201
    rooms = client.get("/api/rooms").get_json()
    assert rooms == [{
        "room_number": 101, "category": "Standard", "status": "Vacant", "price_per_night": "100.00",
    }]


def test_add_room_rejects_bad_input(client):
    assert add_room(client, number="one-oh-one").status_code == 400
    assert add_room(client, category="Penthouse").status_code == 400
    assert add_room(client, price="-5").status_code == 400
    assert client.get("/api/rooms").get_json() == []


def test_book_and_check_out(client):
    add_room(client)
    r = book(client)
    assert r.status_code == 201
    j = r.get_json()
    assert j["booking_id"] == 1
    assert j["total_cost"] == "200.00"
    assert client.get("/api/rooms/101").get_json()["status"] == "Occupied"
    assert client.get("/api/available").get_json() == []

    r = client.post("/api/checkout", json={"room_number": 101})
    assert r.status_code == 200
    assert r.get_json()["guest_name"] == "Alice"
    assert r.get_json()["total_cost"] == "200.00"
    assert client.get("/api/rooms/101").get_json()["status"] == "Vacant"


def test_book_occupied_room_conflicts(client):
    add_room(client)
    book(client)
    r = book(client, name="Bob")
    assert r.status_code == 409
    assert r.get_json()["reason"] == "room_not_available"
    assert len(client.get("/api/bookings").get_json()) == 1


def test_book_with_bad_dates(client):
    add_room(client)
    r = book(client, check_in="2024-01-03", check_out="2024-01-01")
    assert r.status_code == 400
    assert r.get_json()["reason"] == "invalid_dates"
    r = book(client, check_in="01/01/2024")
    assert r.status_code == 400
    assert "check_in" in r.get_json()["error"]


def test_unknown_room_is_not_found(client):
    assert client.get("/api/rooms/999").status_code == 404
    r = book(client, number=999)
    assert r.status_code == 404
    assert r.get_json()["reason"] == "invalid_room_number"
    assert client.post("/api/checkout", json={"room_number": 999}).status_code == 404


def test_check_out_vacant_room(client):
    add_room(client)
    r = client.post("/api/checkout", json={"room_number": 101})
    assert r.status_code == 409
    assert r.get_json()["reason"] == "room_not_occupied"


def test_guests_and_search(client):
    add_room(client, 101)
    add_room(client, 102)
    book(client, 101)
    book(client, 102)
    guests = client.get("/api/guests").get_json()
    assert guests == [{"name": "Alice", "contact_info": "a@x.com", "bookings": [1, 2]}]

    j = client.get("/api/search_guest?name=Alice").get_json()
    assert [b["room_number"] for b in j["bookings"]] == [101, 102]
    assert client.get("/api/search_guest?name=Nobody").status_code == 404


def test_non_object_body_is_rejected(client):
    assert client.post("/api/rooms", json=[1, 2]).status_code == 400
    assert client.post("/api/book", json=["Alice", 101]).status_code == 400
    assert client.post("/api/checkout", json=101).status_code == 400
    assert client.get("/api/rooms").get_json() == []


def test_room_number_must_be_a_whole_number(client):
    add_room(client)
    for value in (101.9, 101.0, True, "101.9", [101]):
        r = client.post("/api/book", json={
            "name": "Alice", "room_number": value,
            "check_in": "2024-01-01", "check_out": "2024-01-03",
        })
        assert r.status_code == 400, value
    assert add_room(client, number=102.5).status_code == 400
    assert client.get("/api/bookings").get_json() == []
    # integer strings are accepted
    assert book(client, number="101").status_code == 201


def test_null_name_and_contact_are_not_stored(client):
    add_room(client)
    r = client.post("/api/book", json={
        "name": None, "contact_info": None, "room_number": 101,
        "check_in": "2024-01-01", "check_out": "2024-01-03",
    })
    assert r.status_code == 400
    assert r.get_json()["error"] == "name required"
    assert client.post("/api/book", json={
        "name": 42, "room_number": 101, "check_in": "2024-01-01", "check_out": "2024-01-03",
    }).status_code == 400
    assert client.get("/api/guests").get_json() == []

    r = client.post("/api/book", json={
        "name": "Alice", "contact_info": None, "room_number": 101,
        "check_in": "2024-01-01", "check_out": "2024-01-03",
    })
    assert r.status_code == 201
    assert client.get("/api/guests").get_json()[0]["contact_info"] == ""
