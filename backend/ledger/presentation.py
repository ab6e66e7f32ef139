"""Console rendering of the ledger, newest entries first.

Bookings are printed from their snapshots only; the live room and user are
never consulted.
"""

import sys
from typing import TextIO

from .domain.repositories import LedgerStore
from .models import Booking, Room, User
from .usecases.bookings import list_bookings_newest_first
from .usecases.inventory import list_rooms_newest_first, list_users_newest_first


def format_room(room: Room) -> str:
    return f"Room #{room.room_number} | Type: {room.room_type} | Price/Night: {room.price_per_night}"


def format_booking(booking: Booking) -> str:
    room, guest = booking.room, booking.guest
    return (
        f"Booking #{booking.booking_id} | "
        f"Room: #{room.room_number} ({room.room_type}, {room.price_per_night}/night) | "
        f"User: #{guest.user_id} (balance at booking: {guest.balance_at_booking}) | "
        f"Check-in: {booking.check_in} | Check-out: {booking.check_out} | "
        f"Nights: {booking.nights} | Total: {booking.total_cost}"
    )


def format_user(user: User) -> str:
    return f"User #{user.user_id} | Balance: {user.balance}"


def print_all(store: LedgerStore, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== ROOMS (newest to oldest) ===", file=out)
    for room in list_rooms_newest_first(store):
        print(format_room(room), file=out)

    print("\n=== BOOKINGS (newest to oldest) ===", file=out)
    for booking in list_bookings_newest_first(store):
        print(format_booking(booking), file=out)


def print_all_users(store: LedgerStore, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== USERS (newest to oldest) ===", file=out)
    for user in list_users_newest_first(store):
        print(format_user(user), file=out)
