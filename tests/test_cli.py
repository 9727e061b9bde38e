from decimal import Decimal

import pytest

import cli
from models import RoomCategory, RoomStatus


@pytest.fixture
def feed(monkeypatch):
    def _feed(*answers):
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(it))
    return _feed


def test_book_and_check_out_through_menu(hotel, feed, capsys):
    hotel.add_room(101, RoomCategory.STANDARD, Decimal("100"))
    feed(
        "3", "Alice", "a@x.com", "101", "2024-01-01", "2024-01-03",
        "4", "101",
        "6",
    )
    cli.run(hotel)
    out = capsys.readouterr().out
    assert "Booking successful! Booking ID: 1, Total Cost: 200" in out
    assert "Guest Alice checked out. Total bill: 200" in out
    assert hotel.find_room(101).status == RoomStatus.VACANT


def test_unknown_room_is_reported_before_dates_are_asked(hotel, feed, capsys):
    feed("3", "Alice", "a@x.com", "999", "6")
    cli.run(hotel)
    assert "Room number 999 does not exist." in capsys.readouterr().out
    assert hotel.bookings == []


def test_bad_input_returns_to_menu(hotel, feed, capsys):
    hotel.add_room(101, RoomCategory.STANDARD, Decimal("100"))
    feed(
        "3", "Alice", "", "one-oh-one",
        "3", "Alice", "", "101", "tomorrow",
        "2", "102", "Penthouse",
        "9",
        "6",
    )
    cli.run(hotel)
    out = capsys.readouterr().out
    assert out.count("Invalid input format. Please try again.") == 3
    assert "Invalid choice. Please try again." in out
    assert hotel.bookings == [] and hotel.guests == []
    assert len(hotel.rooms) == 1


def test_add_room_and_listings(hotel, feed, capsys):
    feed("2", "201", "suite", "250", "1", "5", "6")
    cli.run(hotel)
    out = capsys.readouterr().out
    assert "Room 201 added successfully!" in out
    assert "Room 201 - Suite - Vacant - $250/night" in out
    assert "Booking List:" in out


def test_main_seeds_and_exits(data_dir, feed):
    feed("6")
    assert cli.main(["--data-dir", data_dir, "--seed"]) == 0
    with open(f"{data_dir}/rooms.txt") as f:
        assert f.read().splitlines()[0] == "101,Standard,Vacant,100"


def test_main_reports_corrupt_data(data_dir):
    with open(f"{data_dir}/rooms.txt", "w") as f:
        f.write("not,a,room\n")
    assert cli.main(["--data-dir", data_dir]) == 1


def test_ctrl_c_inside_an_action_exits_cleanly(hotel, monkeypatch, capsys):
    answers = iter(["3", "Alice"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", fake_input)
    cli.run(hotel)
    assert "Exiting the system. Goodbye!" in capsys.readouterr().out
    assert hotel.guests == []
