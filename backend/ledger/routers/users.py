from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ..config import Settings
from ..deps import get_app_settings, get_store, to_http_error
from ..domain.errors import DomainError
from ..infrastructure.repositories import InMemoryStore
from ..schemas import UserRead, UserUpsert
from ..usecases import inventory as inventory_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/{user_id}", response_model=UserRead)
def put_user(
    payload: UserUpsert,
    user_id: int = Path(...),
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> UserRead:
    with store.begin():
        try:
            user, created = inventory_usecase.set_user(
                store,
                user_id=user_id,
                balance=payload.balance,
                reject_negative=settings.reject_negative_amounts,
            )
        except DomainError as exc:
            raise to_http_error(exc)

    try:
        emit_audit_log(
            action="user.created" if created else "user.updated",
            user_id=user.user_id,
            amount=user.balance,
        )
    except RuntimeError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed")
    return UserRead.from_domain(user)


@router.get("", response_model=List[UserRead])
def list_users(store: InMemoryStore = Depends(get_store)) -> list[UserRead]:
    return [UserRead.from_domain(user) for user in inventory_usecase.list_users_newest_first(store)]
