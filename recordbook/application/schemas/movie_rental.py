"""Pydantic DTOs for the movie rental counter."""

from pydantic import BaseModel, Field


class MovieCreate(BaseModel):
    movie_id: int
    title: str = Field(..., min_length=1, examples=["Alien"])
    genre: str = Field(..., min_length=1, examples=["Sci-Fi"])


class CustomerCreate(BaseModel):
    customer_id: int
    name: str = Field(..., min_length=1)
    phone_number: str = ""


class CustomerUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    phone_number: str = ""
