import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ..deps import get_store, to_http_error
from ..domain.errors import DomainError
from ..infrastructure.repositories import InMemoryStore
from ..schemas import BookingCreate, BookingRead
from ..usecases import bookings as booking_usecase
from ..utils.audit_log import emit_audit_log

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    store: InMemoryStore = Depends(get_store),
) -> BookingRead:
    with store.begin():
        try:
            booking = booking_usecase.book_room(
                store,
                user_id=payload.user_id,
                room_number=payload.room_number,
                check_in=payload.check_in,
                check_out=payload.check_out,
            )
        except DomainError as exc:
            try:
                emit_audit_log(
                    action="booking.rejected",
                    room_number=payload.room_number,
                    user_id=payload.user_id,
                    check_in=payload.check_in,
                    check_out=payload.check_out,
                    error_code=exc.code.value,
                )
            except RuntimeError:
                logger.exception("Audit log failed for rejected booking [%s]", exc.code.value)
            raise to_http_error(exc)

    try:
        emit_audit_log(
            action="booking.created",
            booking_id=booking.booking_id,
            room_number=booking.room.room_number,
            user_id=booking.guest.user_id,
            check_in=booking.check_in,
            check_out=booking.check_out,
            amount=booking.total_cost,
            extra={"balance_from": booking.guest.balance_at_booking},
        )
    except RuntimeError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed")
    return BookingRead.from_domain(booking)


@router.get("", response_model=List[BookingRead])
def list_bookings(store: InMemoryStore = Depends(get_store)) -> list[BookingRead]:
    return [BookingRead.from_domain(b) for b in booking_usecase.list_bookings_newest_first(store)]


@router.get("/{booking_id}", response_model=BookingRead)
def get_booking(
    booking_id: int = Path(..., ge=1),
    store: InMemoryStore = Depends(get_store),
) -> BookingRead:
    booking = booking_usecase.get_booking(store, booking_id=booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="booking not found")
    return BookingRead.from_domain(booking)
