# storage.py - flat text persistence for rooms, guests and bookings
#
# One record per line, comma-separated, no header:
#   rooms.txt     room_number,category,status,price_per_night
#   guests.txt    name,contact_info
#   bookings.txt  booking_id,room_number,guest_name,check_in,check_out,total_cost
#
# Fields holding a comma, quote or newline are quoted (csv minimal quoting);
# every other line is plain comma-joined text.

import csv
import logging
import os
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from models import Booking, Guest, Room, RoomCategory, RoomStatus, StorageError
import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def room_to_row(room: Room) -> List[str]:
    return [str(room.room_number), room.category.value, room.status.value, str(room.price_per_night)]


def room_from_row(row: Sequence[str]) -> Room:
    number, category, status, price = row
    return Room(
        room_number=int(number),
        category=RoomCategory(category),
        status=RoomStatus(status),
        price_per_night=Decimal(price),
    )


def guest_to_row(guest: Guest) -> List[str]:
    return [guest.name, guest.contact_info]


def guest_from_row(row: Sequence[str]) -> Guest:
    name, contact_info = row
    return Guest(name=name, contact_info=contact_info)


def booking_to_row(b: Booking) -> List[str]:
    return [
        str(b.booking_id),
        str(b.room_number),
        b.guest_name,
        b.check_in_date.isoformat(),
        b.check_out_date.isoformat(),
        str(b.total_cost),
    ]


def booking_from_row(row: Sequence[str]) -> Booking:
    booking_id, room_number, guest_name, check_in, check_out, total_cost = row
    return Booking(
        booking_id=int(booking_id),
        room_number=int(room_number),
        guest_name=guest_name,
        check_in_date=date.fromisoformat(check_in),
        check_out_date=date.fromisoformat(check_out),
        total_cost=Decimal(total_cost),
    )


class Storage:
    """Reads and writes the three record files under one data directory."""

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = data_dir or settings.DATA_DIR
        self.rooms_path = os.path.join(self.data_dir, settings.ROOMS_FILE)
        self.guests_path = os.path.join(self.data_dir, settings.GUESTS_FILE)
        self.bookings_path = os.path.join(self.data_dir, settings.BOOKINGS_FILE)

    # --- save ---

    def save(self, rooms: Iterable[Room], guests: Iterable[Guest], bookings: Iterable[Booking]) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        self._write(self.rooms_path, (room_to_row(r) for r in rooms))
        self._write(self.guests_path, (guest_to_row(g) for g in guests))
        self._write(self.bookings_path, (booking_to_row(b) for b in bookings))

    def _write(self, path: str, rows: Iterable[List[str]]) -> None:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerows(rows)

    # --- load ---

    def load_rooms(self) -> List[Room]:
        return self._read(self.rooms_path, room_from_row)

    def load_guests(self) -> List[Guest]:
        return self._read(self.guests_path, guest_from_row)

    def load_bookings(self) -> List[Booking]:
        return self._read(self.bookings_path, booking_from_row)

    def _read(self, path: str, parse: Callable[[Sequence[str]], T]) -> List[T]:
        if not os.path.exists(path):
            logger.info("No data file at %s, starting empty", path)
            return []

        records: List[T] = []
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            try:
                for row in reader:
                    if not row:
                        continue
                    records.append(parse(row))
            except (csv.Error, ValueError, InvalidOperation) as e:
                raise StorageError(f"{path}:{reader.line_num}: malformed record ({e})") from e
        logger.debug("Loaded %d records from %s", len(records), path)
        return records
