import logging

from ..domain.errors import NegativeAmountError
from ..domain.repositories import LedgerStore
from ..models import Room, RoomType, User

logger = logging.getLogger(__name__)


def set_room(
    store: LedgerStore,
    *,
    room_number: int,
    room_type: RoomType,
    price_per_night: int,
    reject_negative: bool = False,
) -> tuple[Room, bool]:
    """Create the room, or update type and price in place. Existing bookings keep their snapshots."""
    if reject_negative and price_per_night < 0:
        raise NegativeAmountError(field="price_per_night", value=price_per_night)

    previous = store.find_room(room_number)
    room, created = store.upsert_room(room_number, room_type, price_per_night)
    if previous is None:
        logger.info("Created Room #%d: %s at %d per night", room_number, room_type, price_per_night)
    else:
        logger.info(
            "Updating Room #%d: %s -> %s, Price: %d -> %d",
            room_number,
            previous.room_type,
            room_type,
            previous.price_per_night,
            price_per_night,
        )
    return room, created


def set_user(
    store: LedgerStore,
    *,
    user_id: int,
    balance: int,
    reject_negative: bool = False,
) -> tuple[User, bool]:
    if reject_negative and balance < 0:
        raise NegativeAmountError(field="balance", value=balance)

    previous = store.find_user(user_id)
    user, created = store.upsert_user(user_id, balance)
    if previous is None:
        logger.info("Created User #%d with balance %d", user_id, balance)
    else:
        logger.info("Updating User #%d: Balance %d -> %d", user_id, previous.balance, balance)
    return user, created


def list_rooms_newest_first(store: LedgerStore) -> list[Room]:
    return list(reversed(store.list_rooms()))


def list_users_newest_first(store: LedgerStore) -> list[User]:
    return list(reversed(store.list_users()))
