from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from typing import Any, Literal, Optional

from .request_id import get_request_id

AuditAction = Literal[
    "room.created",
    "room.updated",
    "user.created",
    "user.updated",
    "booking.created",
    "booking.rejected",
]

_audit_logger = logging.getLogger("audit")
_audit_logger.setLevel(logging.INFO)
if not _audit_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _audit_logger.addHandler(handler)
_audit_logger.propagate = False


def _to_json_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "value"):
        return str(value.value)
    return value


def emit_audit_log(
    *,
    action: AuditAction,
    booking_id: Optional[int] = None,
    room_number: Optional[int] = None,
    user_id: Optional[int] = None,
    check_in: Optional[date] = None,
    check_out: Optional[date] = None,
    amount: Optional[int] = None,
    error_code: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit one JSON audit line. Raises RuntimeError if logging fails."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": "info",
        "action": action,
        "request_id": get_request_id(),
        "booking_id": booking_id,
        "room_number": room_number,
        "user_id": user_id,
        "check_in": check_in,
        "check_out": check_out,
        "amount": amount,
        "error_code": error_code,
    }
    if extra:
        payload.update(extra)

    compact_payload = {k: _to_json_value(v) for k, v in payload.items() if v is not None}
    try:
        _audit_logger.info(json.dumps(compact_payload, ensure_ascii=True))
    except Exception as exc:
        raise RuntimeError("failed to emit audit log") from exc
