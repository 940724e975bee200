"""Pydantic DTOs (Data Transfer Objects) for the budgeting tool."""

from decimal import Decimal

from pydantic import BaseModel, Field


class TransactionCreate(BaseModel):
    """Schema for recording a new transaction."""

    description: str = Field(..., min_length=1, examples=["Coffee"])
    amount: Decimal = Field(..., gt=0, examples=["4.50"])
    is_expense: bool = Field(True)
    category: str = Field(..., min_length=1, examples=["Food"])


class TransactionUpdate(BaseModel):
    """Schema for editing a transaction — description and date are kept."""

    amount: Decimal = Field(..., gt=0)
    is_expense: bool
    category: str = Field(..., min_length=1)
