from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ..config import Settings
from ..deps import get_app_settings, get_store, to_http_error
from ..domain.errors import DomainError
from ..infrastructure.repositories import InMemoryStore
from ..schemas import RoomRead, RoomUpsert
from ..usecases import inventory as inventory_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.put("/{room_number}", response_model=RoomRead)
def put_room(
    payload: RoomUpsert,
    room_number: int = Path(...),
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> RoomRead:
    with store.begin():
        try:
            room, created = inventory_usecase.set_room(
                store,
                room_number=room_number,
                room_type=payload.room_type,
                price_per_night=payload.price_per_night,
                reject_negative=settings.reject_negative_amounts,
            )
        except DomainError as exc:
            raise to_http_error(exc)

    try:
        emit_audit_log(
            action="room.created" if created else "room.updated",
            room_number=room.room_number,
            amount=room.price_per_night,
            extra={"room_type": room.room_type},
        )
    except RuntimeError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed")
    return RoomRead.from_domain(room)


@router.get("", response_model=List[RoomRead])
def list_rooms(store: InMemoryStore = Depends(get_store)) -> list[RoomRead]:
    return [RoomRead.from_domain(room) for room in inventory_usecase.list_rooms_newest_first(store)]
