from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from ..models import Booking, Room, RoomType, User


class LedgerStore(Protocol):
    def begin(self) -> AbstractContextManager[object]: ...

    def find_room(self, room_number: int) -> Room | None: ...

    def find_user(self, user_id: int) -> User | None: ...

    def upsert_room(self, room_number: int, room_type: RoomType, price_per_night: int) -> tuple[Room, bool]: ...

    def upsert_user(self, user_id: int, balance: int) -> tuple[User, bool]: ...

    def set_user_balance(self, user_id: int, balance: int) -> None: ...

    def bookings_for_room(self, room_number: int) -> tuple[Booking, ...]: ...

    def get_booking(self, booking_id: int) -> Booking | None: ...

    def next_booking_id(self) -> int: ...

    def add_booking(self, booking: Booking) -> None: ...

    def list_rooms(self) -> tuple[Room, ...]: ...

    def list_users(self) -> tuple[User, ...]: ...

    def list_bookings(self) -> tuple[Booking, ...]: ...

    def clear(self) -> None: ...
