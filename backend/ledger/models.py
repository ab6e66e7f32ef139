from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class RoomType(StrEnum):
    STANDARD = "STANDARD"
    JUNIOR_SUITE = "JUNIOR_SUITE"
    MASTER_SUITE = "MASTER_SUITE"


@dataclass(frozen=True)
class RoomSnapshot:
    room_number: int
    room_type: RoomType
    price_per_night: int


@dataclass(frozen=True)
class UserSnapshot:
    user_id: int
    balance_at_booking: int


@dataclass
class Room:
    room_number: int
    room_type: RoomType
    price_per_night: int

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(
            room_number=self.room_number,
            room_type=self.room_type,
            price_per_night=self.price_per_night,
        )


@dataclass
class User:
    user_id: int
    balance: int

    def snapshot(self) -> UserSnapshot:
        return UserSnapshot(user_id=self.user_id, balance_at_booking=self.balance)


@dataclass(frozen=True)
class Booking:
    """A committed stay. Holds snapshots only, never the live Room or User."""

    booking_id: int
    room: RoomSnapshot
    guest: UserSnapshot
    check_in: date
    check_out: date
    total_cost: int

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
