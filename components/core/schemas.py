"""Core schemas for the application."""

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Schema for health check response."""
    service_name: str
    status: str


class Message(BaseModel):
    """Schema for confirmation and error bodies."""
    message: str


class Revision(BaseModel):
    """Schema for per-collection mutation counters."""
    transactions: int
    budgets: int
