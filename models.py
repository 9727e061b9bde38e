# models.py
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional


class RoomCategory(str, Enum):
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"


class RoomStatus(str, Enum):
    VACANT = "Vacant"
    OCCUPIED = "Occupied"
    UNDER_MAINTENANCE = "UnderMaintenance"


@dataclass
class Room:
    room_number: int
    category: RoomCategory = RoomCategory.STANDARD
    status: RoomStatus = RoomStatus.VACANT
    price_per_night: Decimal = Decimal("0")


@dataclass(frozen=True)
class Booking:
    booking_id: int
    room_number: int
    guest_name: str
    check_in_date: date
    check_out_date: date    # exclusive
    total_cost: Decimal

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days


@dataclass
class Guest:
    name: str
    contact_info: str = ""
    bookings: List[Booking] = field(default_factory=list)


class Failure(str, Enum):
    INVALID_DATES = "invalid_dates"
    ROOM_NOT_AVAILABLE = "room_not_available"
    ROOM_NOT_OCCUPIED = "room_not_occupied"
    NO_ACTIVE_BOOKING = "no_active_booking"
    INVALID_ROOM_NUMBER = "invalid_room_number"


@dataclass
class Outcome:
    """Result of a store operation: a value on success, a tagged failure otherwise."""
    value: Any = None
    failure: Optional[Failure] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Any, message: str = "") -> "Outcome":
        return cls(value=value, message=message)

    @classmethod
    def fail(cls, failure: Failure, message: str) -> "Outcome":
        return cls(failure=failure, message=message)


class HotelError(Exception):
    pass


class StorageError(HotelError):
    pass
