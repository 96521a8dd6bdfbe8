from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str, field_name: str) -> str:
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"{field_name} is required")
    try:
        parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    return v


def parse_api_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse the ISO timestamps returned by the backend.

    Accepts plain dates, naive timestamps and the trailing 'Z' form.
    """
    if not value:
        return None
    v = str(value).strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        try:
            return datetime.combine(parse_iso_date(v[:10]), datetime.min.time())
        except ValueError:
            return None


def format_display_date(value: Optional[str]) -> str:
    parsed = parse_api_datetime(value)
    if parsed is None:
        return value or ""
    return parsed.strftime("%m/%d/%Y")
