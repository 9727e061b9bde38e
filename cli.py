#!/usr/bin/env python3
# cli.py - interactive console menu for the hotel store
# Usage:
#   hotel-cli [--data-dir DIR] [--seed]
#
# Notes:
# - Data is loaded once at startup and saved after every change.
# - Ctrl+C or option 6 exits.

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation

from models import RoomCategory, StorageError
from store import HotelStore
import settings

logger = logging.getLogger(__name__)

MENU = """
Hotel Room Reservation and Management System
1. Display Rooms
2. Add a Room
3. Book a Room
4. Check-Out
5. Display Bookings
6. Exit"""


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Hotel room reservation and management console")
    ap.add_argument("--data-dir", default=settings.DATA_DIR, help="Directory of the data files, default %(default)s")
    ap.add_argument("--seed", action="store_true", default=settings.SEED_ROOMS,
                    help="Add the stock rooms 101-103 when no rooms exist")
    return ap.parse_args(argv)


def read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def read_date(prompt: str) -> date:
    return date.fromisoformat(input(prompt).strip())


def read_price(prompt: str) -> Decimal:
    try:
        price = Decimal(input(prompt).strip())
    except InvalidOperation:
        raise ValueError("price must be a number")
    if not price.is_finite() or price < 0:
        raise ValueError("price must be a non-negative number")
    return price


def read_category(prompt: str) -> RoomCategory:
    raw = input(prompt).strip()
    for c in RoomCategory:
        if c.value.lower() == raw.lower():
            return c
    raise ValueError(f"unknown room category {raw!r}")


def show_rooms(hotel: HotelStore):
    print("Room List:")
    for line in hotel.display_rooms():
        print(line)


def show_bookings(hotel: HotelStore):
    print("Booking List:")
    for line in hotel.display_bookings():
        print(line)


def add_room(hotel: HotelStore):
    rno = read_int("Enter room number: ")
    names = "/".join(c.value for c in RoomCategory)
    category = read_category(f"Enter room type ({names}): ")
    price = read_price("Enter price per night: ")
    print(hotel.add_room(rno, category, price).message)


def book_room(hotel: HotelStore):
    guest_name = input("Enter guest name: ").strip()
    contact_info = input("Enter contact info: ").strip()
    rno = read_int("Enter room number: ")
    exists = hotel.validate_room_number(rno)
    if not exists.ok:
        print(exists.message)
        return
    check_in = read_date("Enter check-in date (yyyy-mm-dd): ")
    check_out = read_date("Enter check-out date (yyyy-mm-dd): ")
    print(hotel.book_room(guest_name, contact_info, rno, check_in, check_out).message)


def check_out(hotel: HotelStore):
    rno = read_int("Enter room number to check-out: ")
    exists = hotel.validate_room_number(rno)
    if not exists.ok:
        print(exists.message)
        return
    print(hotel.check_out(rno).message)


ACTIONS = {
    "1": show_rooms,
    "2": add_room,
    "3": book_room,
    "4": check_out,
    "5": show_bookings,
}


def run(hotel: HotelStore):
    while True:
        print(MENU)
        try:
            choice = input("Enter your choice: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting the system. Goodbye!")
            return

        if choice == "6":
            print("Exiting the system. Goodbye!")
            return

        action = ACTIONS.get(choice)
        if action is None:
            print("Invalid choice. Please try again.")
            continue

        try:
            action(hotel)
        except ValueError as e:
            logger.debug("Rejected input: %s", e)
            print("Invalid input format. Please try again.")
        except OSError as e:
            logger.error("Could not save hotel data: %s", e)
        except (EOFError, KeyboardInterrupt):
            print("\nExiting the system. Goodbye!")
            return


def main(argv=None):
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = parse_args(argv)

    try:
        hotel = HotelStore.open(args.data_dir)
    except StorageError as e:
        logger.error("Could not load hotel data: %s", e)
        return 1

    if args.seed:
        hotel.seed_default_rooms()

    run(hotel)
    return 0


if __name__ == "__main__":
    sys.exit(main())
