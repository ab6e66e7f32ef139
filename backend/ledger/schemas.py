from datetime import date

from pydantic import BaseModel, Field

from .models import Booking, Room, RoomType, User


class RoomUpsert(BaseModel):
    room_type: RoomType
    price_per_night: int


class RoomRead(BaseModel):
    room_number: int
    room_type: RoomType
    price_per_night: int

    @classmethod
    def from_domain(cls, room: Room) -> "RoomRead":
        return cls(room_number=room.room_number, room_type=room.room_type, price_per_night=room.price_per_night)


class UserUpsert(BaseModel):
    balance: int


class UserRead(BaseModel):
    user_id: int
    balance: int

    @classmethod
    def from_domain(cls, user: User) -> "UserRead":
        return cls(user_id=user.user_id, balance=user.balance)


class BookingCreate(BaseModel):
    user_id: int
    room_number: int
    check_in: date
    check_out: date


class BookingRead(BaseModel):
    booking_id: int
    room_number: int
    room_type: RoomType
    price_per_night: int = Field(description="Rate in effect when the booking was made")
    user_id: int
    balance_at_booking: int
    check_in: date
    check_out: date
    nights: int
    total_cost: int

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingRead":
        return cls(
            booking_id=booking.booking_id,
            room_number=booking.room.room_number,
            room_type=booking.room.room_type,
            price_per_night=booking.room.price_per_night,
            user_id=booking.guest.user_id,
            balance_at_booking=booking.guest.balance_at_booking,
            check_in=booking.check_in,
            check_out=booking.check_out,
            nights=booking.nights,
            total_cost=booking.total_cost,
        )
