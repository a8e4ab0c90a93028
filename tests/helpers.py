"""Lightweight stand-ins for stored records."""

from datetime import date
from types import SimpleNamespace


def make_transaction(amount, category=None, on="2024-02-01", description="test"):
    return SimpleNamespace(
        amount=amount,
        category=category,
        date=date.fromisoformat(on),
        description=description,
    )


def make_budget(category, amount, month="2024-02", id=1):
    return SimpleNamespace(id=id, category=category, amount=amount, month=month)
