"""Domain errors raised by the booking pipeline and the administrative upserts."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from enum import StrEnum
from typing import Any, ClassVar


class ErrorCode(StrEnum):
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    ROOM_NOT_AVAILABLE = "ROOM_NOT_AVAILABLE"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"


class DomainError(Exception):
    """Base error. Subclasses are dataclasses whose fields describe the failure."""

    code: ClassVar[ErrorCode]

    def details(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(eq=False)
class InvalidDateRangeError(DomainError):
    check_in: date
    check_out: date

    code: ClassVar[ErrorCode] = ErrorCode.INVALID_DATE_RANGE

    def __str__(self) -> str:
        return f"Invalid date range: check-in ({self.check_in}) must be before check-out ({self.check_out})"


@dataclass(eq=False)
class UserNotFoundError(DomainError):
    user_id: int

    code: ClassVar[ErrorCode] = ErrorCode.USER_NOT_FOUND

    def __str__(self) -> str:
        return f"User #{self.user_id} not found"


@dataclass(eq=False)
class RoomNotFoundError(DomainError):
    room_number: int

    code: ClassVar[ErrorCode] = ErrorCode.ROOM_NOT_FOUND

    def __str__(self) -> str:
        return f"Room #{self.room_number} not found"


@dataclass(eq=False)
class InsufficientBalanceError(DomainError):
    user_id: int
    required: int
    available: int

    code: ClassVar[ErrorCode] = ErrorCode.INSUFFICIENT_BALANCE

    def __str__(self) -> str:
        return (
            f"User #{self.user_id} has insufficient balance. "
            f"Required: {self.required}, Current: {self.available}"
        )


@dataclass(eq=False)
class RoomNotAvailableError(DomainError):
    room_number: int
    check_in: date
    check_out: date
    conflicting_booking_id: int
    conflicting_check_in: date
    conflicting_check_out: date

    code: ClassVar[ErrorCode] = ErrorCode.ROOM_NOT_AVAILABLE

    def __str__(self) -> str:
        return (
            f"Room #{self.room_number} is not available for the period from {self.check_in} to {self.check_out} "
            f"(booking #{self.conflicting_booking_id}: {self.conflicting_check_in} to {self.conflicting_check_out})"
        )


@dataclass(eq=False)
class NegativeAmountError(DomainError):
    field: str
    value: int

    code: ClassVar[ErrorCode] = ErrorCode.NEGATIVE_AMOUNT

    def __str__(self) -> str:
        return f"{self.field} must not be negative (got {self.value})"
