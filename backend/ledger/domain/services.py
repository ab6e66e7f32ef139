from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..models import Booking
from .errors import InsufficientBalanceError, InvalidDateRangeError, RoomNotAvailableError


@dataclass(frozen=True)
class BookingContext:
    """Live state read from the store right before a booking is validated."""

    user_id: int
    balance: int
    room_number: int
    price_per_night: int
    room_bookings: tuple[Booking, ...]


def validate_date_range(check_in: date, check_out: date) -> int:
    """Return the number of nights. A zero-night stay is invalid."""
    if not check_in < check_out:
        raise InvalidDateRangeError(check_in=check_in, check_out=check_out)
    return (check_out - check_in).days


def stays_overlap(existing_in: date, existing_out: date, new_in: date, new_out: date) -> bool:
    # half-open: a check-in on another stay's check-out day is not a conflict
    return existing_in < new_out and new_in < existing_out


def find_conflict(bookings: Iterable[Booking], check_in: date, check_out: date) -> Booking | None:
    for booking in bookings:
        if stays_overlap(booking.check_in, booking.check_out, check_in, check_out):
            return booking
    return None


def validate_booking(context: BookingContext, *, check_in: date, check_out: date) -> int:
    """
    Pure validation: prices the stay at the current rate, then checks balance and availability.
    Returns the total cost if OK. Raises domain errors otherwise.
    """
    nights = validate_date_range(check_in, check_out)
    total_cost = nights * context.price_per_night

    if context.balance < total_cost:
        raise InsufficientBalanceError(
            user_id=context.user_id,
            required=total_cost,
            available=context.balance,
        )

    conflict = find_conflict(context.room_bookings, check_in, check_out)
    if conflict is not None:
        raise RoomNotAvailableError(
            room_number=context.room_number,
            check_in=check_in,
            check_out=check_out,
            conflicting_booking_id=conflict.booking_id,
            conflicting_check_in=conflict.check_in,
            conflicting_check_out=conflict.check_out,
        )
    return total_cost
