import logging
from datetime import date

from ..domain.errors import DomainError, RoomNotFoundError, UserNotFoundError
from ..domain.repositories import LedgerStore
from ..domain.services import BookingContext, validate_booking, validate_date_range
from ..models import Booking

logger = logging.getLogger(__name__)


def book_room(
    store: LedgerStore,
    *,
    user_id: int,
    room_number: int,
    check_in: date,
    check_out: date,
) -> Booking:
    try:
        booking = _book_room(store, user_id=user_id, room_number=room_number, check_in=check_in, check_out=check_out)
    except DomainError as exc:
        logger.warning("Booking failed [%s]: %s", exc.code, exc)
        raise

    logger.info(
        "Booking #%d created - User #%d booked Room #%d from %s to %s for %d (Balance: %d -> %d)",
        booking.booking_id,
        user_id,
        room_number,
        check_in,
        check_out,
        booking.total_cost,
        booking.guest.balance_at_booking,
        booking.guest.balance_at_booking - booking.total_cost,
    )
    return booking


def _book_room(
    store: LedgerStore,
    *,
    user_id: int,
    room_number: int,
    check_in: date,
    check_out: date,
) -> Booking:
    validate_date_range(check_in, check_out)

    user = store.find_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id=user_id)
    room = store.find_room(room_number)
    if room is None:
        raise RoomNotFoundError(room_number=room_number)

    context = BookingContext(
        user_id=user.user_id,
        balance=user.balance,
        room_number=room.room_number,
        price_per_night=room.price_per_night,
        room_bookings=store.bookings_for_room(room_number),
    )
    total_cost = validate_booking(context, check_in=check_in, check_out=check_out)

    # Nothing below may fail a check: snapshots first, then balance and booking together.
    room_snapshot = room.snapshot()
    user_snapshot = user.snapshot()
    store.set_user_balance(user.user_id, user.balance - total_cost)
    booking = Booking(
        booking_id=store.next_booking_id(),
        room=room_snapshot,
        guest=user_snapshot,
        check_in=check_in,
        check_out=check_out,
        total_cost=total_cost,
    )
    store.add_booking(booking)
    return booking


def list_bookings_newest_first(store: LedgerStore) -> list[Booking]:
    return list(reversed(store.list_bookings()))


def get_booking(store: LedgerStore, *, booking_id: int) -> Booking | None:
    return store.get_booking(booking_id)
