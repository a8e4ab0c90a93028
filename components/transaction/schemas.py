"""Pydantic schemas for transaction data validation."""

import datetime
from typing import Optional
from pydantic import BaseModel


class TransactionBase(BaseModel):
    """
    Base transaction payload.

    Fields are optional here so that missing values reach the repository,
    which reports them as a validation error.
    """
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    category: Optional[str] = None


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    pass


class TransactionUpdate(TransactionBase):
    """Schema for transaction replacement."""
    id: Optional[int] = None


class TransactionDelete(BaseModel):
    """Schema for transaction deletion."""
    id: Optional[int] = None


class Transaction(BaseModel):
    """Schema for transaction response."""
    id: int
    amount: float
    description: str
    date: datetime.date
    category: Optional[str] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True
