from functools import lru_cache

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder

from .config import Settings, get_settings
from .domain.errors import DomainError, ErrorCode
from .infrastructure.repositories import InMemoryStore

_STATUS_BY_CODE = {
    ErrorCode.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NEGATIVE_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROOM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INSUFFICIENT_BALANCE: status.HTTP_409_CONFLICT,
    ErrorCode.ROOM_NOT_AVAILABLE: status.HTTP_409_CONFLICT,
}


@lru_cache
def get_store() -> InMemoryStore:
    return InMemoryStore()


def get_app_settings() -> Settings:
    return get_settings()


def to_http_error(exc: DomainError) -> HTTPException:
    detail = {"code": exc.code.value, "message": str(exc), **jsonable_encoder(exc.details())}
    return HTTPException(status_code=_STATUS_BY_CODE[exc.code], detail=detail)
