# store.py - in-memory hotel state with save-on-every-mutation
import logging
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional

from models import Booking, Failure, Guest, Outcome, Room, RoomCategory, RoomStatus
from storage import Storage

logger = logging.getLogger(__name__)

DEFAULT_ROOMS = [
    (101, RoomCategory.STANDARD, Decimal("100")),
    (102, RoomCategory.DELUXE, Decimal("150")),
    (103, RoomCategory.SUITE, Decimal("200")),
]


class HotelStore:
    """Owns the room, guest and booking collections.

    Every successful mutation rewrites all three backing files when the store
    has a ``Storage``. Without one the store is purely in memory.

    ``load()`` appends to whatever is already held, so it is meant to be
    called once, before any mutation.
    """

    def __init__(self, storage: Optional[Storage] = None, clock: Callable[[], date] = date.today):
        self.storage = storage
        self.clock = clock
        self.rooms: List[Room] = []
        self.guests: List[Guest] = []
        self.bookings: List[Booking] = []

    @classmethod
    def open(cls, data_dir: Optional[str] = None, **kwargs) -> "HotelStore":
        store = cls(Storage(data_dir), **kwargs)
        store.load()
        return store

    # --- lookups ---

    def find_room(self, room_number: int, status: Optional[RoomStatus] = None) -> Optional[Room]:
        for r in self.rooms:
            if r.room_number == room_number and (status is None or r.status == status):
                return r
        return None

    def find_guest(self, name: str) -> Optional[Guest]:
        # guests are keyed by exact name
        for g in self.guests:
            if g.name == name:
                return g
        return None

    def rooms_by_status(self, status: RoomStatus) -> List[Room]:
        return [r for r in self.rooms if r.status == status]

    def validate_room_number(self, room_number: int) -> Outcome:
        room = self.find_room(room_number)
        if room is None:
            return Outcome.fail(Failure.INVALID_ROOM_NUMBER, f"Room number {room_number} does not exist.")
        return Outcome.success(room)

    # --- mutators ---

    def add_room(self, room_number: int, category: RoomCategory, price_per_night: Decimal) -> Outcome:
        if self.find_room(room_number) is not None:
            logger.warning("Room %s already exists; adding a duplicate", room_number)

        room = Room(
            room_number=room_number,
            category=category,
            status=RoomStatus.VACANT,
            price_per_night=Decimal(str(price_per_night)),
        )
        self.rooms.append(room)
        logger.info("Added room %s (%s, %s/night)", room_number, category.value, room.price_per_night)
        self.save()
        return Outcome.success(room, f"Room {room_number} added successfully!")

    def book_room(
        self,
        guest_name: str,
        contact_info: str,
        room_number: int,
        check_in_date: date,
        check_out_date: date,
    ) -> Outcome:
        if check_in_date >= check_out_date:
            logger.info("Rejected booking for room %s: check-in %s not before check-out %s",
                        room_number, check_in_date, check_out_date)
            return Outcome.fail(Failure.INVALID_DATES, "Check-in date must be before check-out date.")

        # a missing room and an occupied one are reported the same way
        room = self.find_room(room_number, RoomStatus.VACANT)
        if room is None:
            logger.info("Rejected booking for room %s: not available", room_number)
            return Outcome.fail(Failure.ROOM_NOT_AVAILABLE, "Room is not available.")

        guest = self.find_guest(guest_name)
        if guest is None:
            guest = Guest(name=guest_name, contact_info=contact_info)
            self.guests.append(guest)

        # ids stay gapless only because bookings are never removed
        booking_id = len(self.bookings) + 1
        nights = (check_out_date - check_in_date).days
        booking = Booking(
            booking_id=booking_id,
            room_number=room_number,
            guest_name=guest_name,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            total_cost=room.price_per_night * nights,
        )

        self.bookings.append(booking)
        guest.bookings.append(booking)
        room.status = RoomStatus.OCCUPIED

        logger.info("Booking %s: room %s for %s, %d night(s), total %s",
                    booking_id, room_number, guest_name, nights, booking.total_cost)
        self.save()
        return Outcome.success(
            booking, f"Booking successful! Booking ID: {booking_id}, Total Cost: {booking.total_cost}"
        )

    def check_out(self, room_number: int, today: Optional[date] = None) -> Outcome:
        room = self.find_room(room_number, RoomStatus.OCCUPIED)
        if room is None:
            return Outcome.fail(Failure.ROOM_NOT_OCCUPIED, "Room is not occupied.")

        today = today or self.clock()
        booking = next(
            (b for b in self.bookings if b.room_number == room_number and b.check_out_date >= today),
            None,
        )
        if booking is None:
            # the room is left Occupied for manual follow-up
            logger.warning("Room %s is occupied but has no booking ending on or after %s", room_number, today)
            return Outcome.fail(Failure.NO_ACTIVE_BOOKING, "No active booking found for this room.")

        room.status = RoomStatus.VACANT
        logger.info("Checked out %s from room %s (booking %s)", booking.guest_name, room_number, booking.booking_id)
        self.save()
        return Outcome.success(
            booking, f"Guest {booking.guest_name} checked out. Total bill: {booking.total_cost}"
        )

    def seed_default_rooms(self) -> int:
        if self.rooms:
            return 0
        for number, category, price in DEFAULT_ROOMS:
            self.add_room(number, category, price)
        return len(DEFAULT_ROOMS)

    # --- listings ---

    def display_rooms(self) -> List[str]:
        return [
            f"Room {r.room_number} - {r.category.value} - {r.status.value} - ${r.price_per_night}/night"
            for r in self.rooms
        ]

    def display_bookings(self) -> List[str]:
        return [
            f"Booking ID: {b.booking_id}, Room: {b.room_number}, Guest: {b.guest_name}, "
            f"Check-In: {b.check_in_date.isoformat()}, Check-Out: {b.check_out_date.isoformat()}, "
            f"Total Cost: {b.total_cost}"
            for b in self.bookings
        ]

    # --- persistence ---

    def save(self) -> None:
        if self.storage is None:
            return
        self.storage.save(self.rooms, self.guests, self.bookings)

    def load(self) -> None:
        if self.storage is None:
            return
        rooms = self.storage.load_rooms()
        guests = self.storage.load_guests()
        bookings = self.storage.load_bookings()

        self.rooms.extend(rooms)
        self.guests.extend(guests)
        self.bookings.extend(bookings)

        for b in bookings:
            guest = self.find_guest(b.guest_name)
            if guest is None:
                logger.warning("Booking %s refers to unknown guest %r", b.booking_id, b.guest_name)
                continue
            guest.bookings.append(b)

        logger.info("Loaded %d rooms, %d guests, %d bookings", len(rooms), len(guests), len(bookings))
