from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional

from ..core.constants import DAY_NAMES, DEFAULT_DATE_FORMAT, MONTH_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DEFAULT_DATE_FORMAT).date()


def parse_optional_date(value: Optional[str], field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(DEFAULT_DATE_FORMAT) if value else None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def day_name(value: date) -> str:
    """Indonesian weekday name for a calendar date."""
    return DAY_NAMES[value.weekday()]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]
