"""Pydantic DTOs for the hotel reservation desk."""

from datetime import date

from pydantic import BaseModel, Field


class RoomCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    room_number: int = Field(..., examples=[101])
    room_type: str = Field(..., min_length=1, examples=["Single"])
    price_per_night: float = Field(..., examples=[100.0])


class RoomUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    room_type: str = Field(..., min_length=1)
    price_per_night: float


class ReservationCreate(BaseModel):
    guest_name: str = Field(..., min_length=1, examples=["Alice"])
    room_number: int
    start_date: date
    end_date: date


class GuestCreate(BaseModel):
    name: str = Field(..., min_length=1)
    phone_number: str = ""
    email: str = ""
