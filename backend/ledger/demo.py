"""Replays the reference booking scenario against a fresh in-memory store.

Run with: python -m ledger.demo
"""

import logging
import sys
from typing import TextIO
from zoneinfo import ZoneInfo

from .config import get_settings
from .domain.errors import DomainError
from .domain.repositories import LedgerStore
from .infrastructure.repositories import InMemoryStore
from .models import RoomType
from .presentation import print_all, print_all_users
from .usecases.bookings import book_room
from .usecases.inventory import set_room, set_user
from .utils.time import local_midnight, to_calendar_date

logger = logging.getLogger(__name__)


def _attempt_booking(
    store: LedgerStore,
    tz: ZoneInfo,
    user_id: int,
    room_number: int,
    check_in: tuple[int, int, int],
    check_out: tuple[int, int, int],
) -> None:
    try:
        book_room(
            store,
            user_id=user_id,
            room_number=room_number,
            check_in=to_calendar_date(local_midnight(*check_in, tz), tz),
            check_out=to_calendar_date(local_midnight(*check_out, tz), tz),
        )
    except DomainError as exc:
        logger.info("Rejected as expected: %s", exc.code)


def run_scenario(store: LedgerStore, out: TextIO | None = None, tz: ZoneInfo | None = None) -> None:
    tz = tz or get_settings().tzinfo

    logger.info("--- Step 1: Creating 3 rooms ---")
    set_room(store, room_number=1, room_type=RoomType.STANDARD, price_per_night=1000)
    set_room(store, room_number=2, room_type=RoomType.JUNIOR_SUITE, price_per_night=2000)
    set_room(store, room_number=3, room_type=RoomType.MASTER_SUITE, price_per_night=3000)

    logger.info("--- Step 2: Creating 2 users ---")
    set_user(store, user_id=1, balance=5000)
    set_user(store, user_id=2, balance=10000)

    logger.info("--- Step 3: User 1 books Room 2 (30 Jun - 07 Jul 2026), expect insufficient balance ---")
    _attempt_booking(store, tz, 1, 2, (2026, 6, 30), (2026, 7, 7))

    logger.info("--- Step 4: User 1 books Room 2 with reversed dates, expect invalid date range ---")
    _attempt_booking(store, tz, 1, 2, (2026, 7, 7), (2026, 6, 30))

    logger.info("--- Step 5: User 1 books Room 1 (07 - 08 Jul 2026) ---")
    _attempt_booking(store, tz, 1, 1, (2026, 7, 7), (2026, 7, 8))

    logger.info("--- Step 6: User 2 books Room 1 (07 - 09 Jul 2026), expect room not available ---")
    _attempt_booking(store, tz, 2, 1, (2026, 7, 7), (2026, 7, 9))

    logger.info("--- Step 7: User 2 books Room 3 (07 - 08 Jul 2026) ---")
    _attempt_booking(store, tz, 2, 3, (2026, 7, 7), (2026, 7, 8))

    logger.info("--- Step 8: Updating Room 1 (STANDARD -> MASTER_SUITE, 1000 -> 10000) ---")
    set_room(store, room_number=1, room_type=RoomType.MASTER_SUITE, price_per_night=10000)

    logger.info("--- Step 9: Printing all results ---")
    print_all(store, out)
    print_all_users(store, out)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    run_scenario(InMemoryStore(), sys.stdout, settings.tzinfo)
    return 0


if __name__ == "__main__":
    sys.exit(main())
