"""Pydantic schemas for budget data validation."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BudgetUpsert(BaseModel):
    """Schema for budget create-or-replace."""
    category: Optional[str] = None
    amount: Optional[float] = None
    month: Optional[str] = None


class BudgetDelete(BaseModel):
    """Schema for budget deletion."""
    id: Optional[int] = None


class Budget(BaseModel):
    """Schema for budget response."""
    id: int
    category: str
    amount: float
    month: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
