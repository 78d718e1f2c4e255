from __future__ import annotations

from datetime import date, datetime


def parse_draw_date(value) -> date:
    """Accepts a date, a datetime, or an ISO string ("2026-12-01" or a full timestamp)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # datetime.fromisoformat only takes a trailing "Z" from 3.11 on
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise ValueError(f"Invalid draw date: {value!r}") from e


def is_draw_due(draw_date: date | None, today: date | None = None) -> bool:
    if draw_date is None:
        return False
    today = today or date.today()
    return today >= draw_date


def draw_year(today: date | None = None) -> int:
    return (today or date.today()).year
