from __future__ import annotations

import itertools
import threading
from contextlib import AbstractContextManager
from dataclasses import replace
from typing import List

from ..models import Booking, Room, RoomType, User


class InMemoryStore:
    """List-backed store. Insertion order is kept for newest-first listings.

    Entities handed out are copies; mutation goes through the upsert and
    balance methods only.
    """

    def __init__(self) -> None:
        self._rooms: List[Room] = []
        self._users: List[User] = []
        self._bookings: List[Booking] = []
        self._booking_ids = itertools.count(1)
        self._lock = threading.RLock()

    def begin(self) -> AbstractContextManager[object]:
        return self._lock

    def _room(self, room_number: int) -> Room | None:
        return next((room for room in self._rooms if room.room_number == room_number), None)

    def _user(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.user_id == user_id), None)

    def find_room(self, room_number: int) -> Room | None:
        room = self._room(room_number)
        return replace(room) if room is not None else None

    def find_user(self, user_id: int) -> User | None:
        user = self._user(user_id)
        return replace(user) if user is not None else None

    def upsert_room(self, room_number: int, room_type: RoomType, price_per_night: int) -> tuple[Room, bool]:
        room = self._room(room_number)
        created = room is None
        if room is None:
            room = Room(room_number=room_number, room_type=room_type, price_per_night=price_per_night)
            self._rooms.append(room)
        else:
            room.room_type = room_type
            room.price_per_night = price_per_night
        return replace(room), created

    def upsert_user(self, user_id: int, balance: int) -> tuple[User, bool]:
        user = self._user(user_id)
        created = user is None
        if user is None:
            user = User(user_id=user_id, balance=balance)
            self._users.append(user)
        else:
            user.balance = balance
        return replace(user), created

    def set_user_balance(self, user_id: int, balance: int) -> None:
        user = self._user(user_id)
        if user is None:
            raise KeyError(user_id)
        user.balance = balance

    def bookings_for_room(self, room_number: int) -> tuple[Booking, ...]:
        return tuple(b for b in self._bookings if b.room.room_number == room_number)

    def get_booking(self, booking_id: int) -> Booking | None:
        return next((b for b in self._bookings if b.booking_id == booking_id), None)

    def next_booking_id(self) -> int:
        # Consumes an id; call only when committing.
        return next(self._booking_ids)

    def add_booking(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def list_rooms(self) -> tuple[Room, ...]:
        return tuple(replace(room) for room in self._rooms)

    def list_users(self) -> tuple[User, ...]:
        return tuple(replace(user) for user in self._users)

    def list_bookings(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    def clear(self) -> None:
        """Drop all rooms, users and bookings. Booking ids keep counting."""
        self._rooms.clear()
        self._users.clear()
        self._bookings.clear()
