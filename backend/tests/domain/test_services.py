from datetime import date

import pytest
from ledger.domain.errors import InsufficientBalanceError, InvalidDateRangeError, RoomNotAvailableError
from ledger.domain.services import (
    BookingContext,
    find_conflict,
    stays_overlap,
    validate_booking,
    validate_date_range,
)
from ledger.models import Booking, RoomSnapshot, RoomType, UserSnapshot


def _day(d: int) -> date:
    return date(2026, 7, d)


def _booking(booking_id: int, check_in: date, check_out: date) -> Booking:
    return Booking(
        booking_id=booking_id,
        room=RoomSnapshot(room_number=1, room_type=RoomType.STANDARD, price_per_night=1000),
        guest=UserSnapshot(user_id=1, balance_at_booking=50000),
        check_in=check_in,
        check_out=check_out,
        total_cost=(check_out - check_in).days * 1000,
    )


def _context(balance: int = 50000, price: int = 1000, bookings: tuple[Booking, ...] = ()) -> BookingContext:
    return BookingContext(user_id=1, balance=balance, room_number=1, price_per_night=price, room_bookings=bookings)


def test_date_range_returns_nights() -> None:
    assert validate_date_range(date(2026, 6, 30), date(2026, 7, 7)) == 7


@pytest.mark.parametrize(
    "check_in,check_out",
    [(_day(7), _day(7)), (_day(7), date(2026, 6, 30))],
)
def test_date_range_rejects_zero_and_reversed(check_in: date, check_out: date) -> None:
    with pytest.raises(InvalidDateRangeError) as excinfo:
        validate_date_range(check_in, check_out)
    assert excinfo.value.check_in == check_in
    assert excinfo.value.check_out == check_out


@pytest.mark.parametrize(
    "new_in,new_out,expected",
    [
        (7, 12, True),  # starts during
        (1, 7, True),  # ends during
        (1, 15, True),  # contains
        (6, 9, True),  # contained
        (10, 15, False),  # back-to-back after
        (1, 5, False),  # back-to-back before
        (15, 20, False),
    ],
)
def test_stays_overlap_is_half_open(new_in: int, new_out: int, expected: bool) -> None:
    assert stays_overlap(_day(5), _day(10), _day(new_in), _day(new_out)) is expected
    assert stays_overlap(_day(new_in), _day(new_out), _day(5), _day(10)) is expected


def test_find_conflict_returns_first_overlapping_booking() -> None:
    bookings = [_booking(1, _day(1), _day(3)), _booking(2, _day(5), _day(10)), _booking(3, _day(8), _day(9))]
    conflict = find_conflict(bookings, _day(7), _day(12))
    assert conflict is not None
    assert conflict.booking_id == 2
    assert find_conflict(bookings, _day(3), _day(5)) is None


def test_validate_booking_prices_at_current_rate() -> None:
    assert validate_booking(_context(price=1000), check_in=_day(7), check_out=_day(8)) == 1000
    assert validate_booking(_context(price=2500), check_in=_day(7), check_out=_day(10)) == 7500


def test_validate_booking_accepts_exact_balance() -> None:
    assert validate_booking(_context(balance=3000), check_in=_day(1), check_out=_day(4)) == 3000


def test_validate_booking_rejects_insufficient_balance() -> None:
    with pytest.raises(InsufficientBalanceError) as excinfo:
        validate_booking(_context(balance=5000, price=2000), check_in=date(2026, 6, 30), check_out=_day(7))
    assert excinfo.value.required == 14000
    assert excinfo.value.available == 5000


def test_validate_booking_checks_balance_before_availability() -> None:
    ctx = _context(balance=100, bookings=(_booking(1, _day(5), _day(10)),))
    with pytest.raises(InsufficientBalanceError):
        validate_booking(ctx, check_in=_day(6), check_out=_day(9))


def test_validate_booking_reports_conflicting_interval() -> None:
    ctx = _context(bookings=(_booking(4, _day(5), _day(10)),))
    with pytest.raises(RoomNotAvailableError) as excinfo:
        validate_booking(ctx, check_in=_day(7), check_out=_day(12))
    err = excinfo.value
    assert err.room_number == 1
    assert err.conflicting_booking_id == 4
    assert (err.conflicting_check_in, err.conflicting_check_out) == (_day(5), _day(10))
