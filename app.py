# app.py
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from flask import Flask, current_app, jsonify, request

from models import Booking, Failure, Guest, Outcome, Room, RoomCategory, RoomStatus
from store import HotelStore
import settings

logger = logging.getLogger(__name__)

FAILURE_STATUS = {
    Failure.INVALID_ROOM_NUMBER: 404,
    Failure.ROOM_NOT_AVAILABLE: 409,
    Failure.ROOM_NOT_OCCUPIED: 409,
    Failure.NO_ACTIVE_BOOKING: 409,
    Failure.INVALID_DATES: 400,
}


# Helper functions
def room_dict(r: Room) -> dict:
    return {
        "room_number": r.room_number,
        "category": r.category.value,
        "status": r.status.value,
        "price_per_night": str(r.price_per_night),
    }


def booking_dict(b: Booking) -> dict:
    return {
        "booking_id": b.booking_id,
        "room_number": b.room_number,
        "guest_name": b.guest_name,
        "check_in_date": b.check_in_date.isoformat(),
        "check_out_date": b.check_out_date.isoformat(),
        "total_cost": str(b.total_cost),
    }


def guest_dict(g: Guest) -> dict:
    return {
        "name": g.name,
        "contact_info": g.contact_info,
        "bookings": [b.booking_id for b in g.bookings],
    }


def failure_response(outcome: Outcome):
    return jsonify({"error": outcome.message, "reason": outcome.failure.value}), FAILURE_STATUS[outcome.failure]


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def parse_room_number(value) -> int:
    if value is None:
        raise ValueError("room_number required")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError("room_number must be an integer")


def parse_text(data: dict, field: str) -> str:
    value = data.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip()


def parse_price(value) -> Decimal:
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("price_per_night must be a number")
    if not price.is_finite() or price < 0:
        raise ValueError("price_per_night must be a non-negative number")
    return price


def parse_iso_date(value, field: str) -> date:
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValueError(f"{field} must be ISO date YYYY-MM-DD")


def get_store() -> HotelStore:
    return current_app.config["HOTEL_STORE"]


def create_app(store: Optional[HotelStore] = None) -> Flask:
    app = Flask(__name__)
    app.config["HOTEL_STORE"] = store if store is not None else HotelStore.open(settings.DATA_DIR)

    @app.errorhandler(ValueError)
    def invalid_input(e):
        logger.info("Invalid input on %s: %s", request.path, e)
        return jsonify({"error": str(e)}), 400

    @app.route("/api/rooms", methods=["GET", "POST"])
    def api_rooms():
        hotel = get_store()
        if request.method == "GET":
            return jsonify([room_dict(r) for r in hotel.rooms])

        data = json_body()
        rno = parse_room_number(data.get("room_number"))
        try:
            category = RoomCategory(data.get("category", RoomCategory.STANDARD.value))
        except ValueError:
            raise ValueError("category must be one of " + ", ".join(c.value for c in RoomCategory))
        price = parse_price(data.get("price_per_night", 0))

        outcome = hotel.add_room(rno, category, price)
        return jsonify({"ok": True, "room": room_dict(outcome.value)}), 201

    @app.route("/api/rooms/<int:rno>", methods=["GET"])
    def api_room(rno):
        outcome = get_store().validate_room_number(rno)
        if not outcome.ok:
            return failure_response(outcome)
        return jsonify(room_dict(outcome.value))

    @app.route("/api/available")
    def api_available():
        return jsonify([room_dict(r) for r in get_store().rooms_by_status(RoomStatus.VACANT)])

    @app.route("/api/book", methods=["POST"])
    def api_book():
        hotel = get_store()
        data = json_body()
        rno = parse_room_number(data.get("room_number"))
        name = parse_text(data, "name")
        if not name:
            raise ValueError("name required")
        contact = parse_text(data, "contact_info")
        check_in = parse_iso_date(data.get("check_in"), "check_in")
        check_out = parse_iso_date(data.get("check_out"), "check_out")

        exists = hotel.validate_room_number(rno)
        if not exists.ok:
            return failure_response(exists)

        outcome = hotel.book_room(name, contact, rno, check_in, check_out)
        if not outcome.ok:
            return failure_response(outcome)
        booking = outcome.value
        return jsonify({
            "ok": True,
            "booking_id": booking.booking_id,
            "total_cost": str(booking.total_cost),
            "message": outcome.message,
        }), 201

    @app.route("/api/checkout", methods=["POST"])
    def api_checkout():
        hotel = get_store()
        data = json_body()
        rno = parse_room_number(data.get("room_number"))

        exists = hotel.validate_room_number(rno)
        if not exists.ok:
            return failure_response(exists)

        outcome = hotel.check_out(rno)
        if not outcome.ok:
            return failure_response(outcome)
        booking = outcome.value
        return jsonify({
            "guest_name": booking.guest_name,
            "total_cost": str(booking.total_cost),
            "message": outcome.message,
        }), 200

    @app.route("/api/bookings")
    def api_bookings():
        return jsonify([booking_dict(b) for b in get_store().bookings])

    @app.route("/api/guests")
    def api_guests():
        return jsonify([guest_dict(g) for g in get_store().guests])

    @app.route("/api/search_guest")
    def api_search_guest():
        name = request.args.get("name", "").strip()
        guest = get_store().find_guest(name) if name else None
        if guest is None:
            return jsonify({"error": "guest not found"}), 404
        return jsonify({
            "guest": guest_dict(guest),
            "bookings": [booking_dict(b) for b in guest.bookings],
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    app = create_app()
    if settings.SEED_ROOMS:
        app.config["HOTEL_STORE"].seed_default_rooms()
    app.run(host=settings.FLASK_HOST, port=settings.FLASK_PORT, debug=settings.FLASK_DEBUG)
