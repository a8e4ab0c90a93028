"""Required-field checks applied at the store boundary."""

import re
from typing import Any

import pandas as pd

from components.core.exceptions import ValidationError

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def is_missing(value: Any) -> bool:
    """True for None, blank strings and NaN numbers."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return bool(pd.isna(value))
    return False


def require_fields(message: str = "Missing required fields", **fields: Any) -> None:
    """Raise ValidationError naming every missing field."""
    missing = [name for name, value in fields.items() if is_missing(value)]
    if missing:
        raise ValidationError(f"{message}: {', '.join(missing)}")


def validate_month(month: str) -> str:
    """Ensure a month token has the YYYY-MM form."""
    if not MONTH_PATTERN.match(month):
        raise ValidationError(f"Invalid month: {month}. Expected YYYY-MM")
    return month
