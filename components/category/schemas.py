"""Pydantic schemas for category reference data."""

from pydantic import BaseModel


class Category(BaseModel):
    """Schema for a registry entry."""
    id: str
    name: str
    color: str


class CategoryOption(BaseModel):
    """Schema for a dropdown option."""
    value: str
    label: str
