from __future__ import annotations

from datetime import date, datetime

import pytest

from santa_draw.services.schedule import draw_year, is_draw_due, parse_draw_date


def test_parse_draw_date_accepts_iso_strings() -> None:
    assert parse_draw_date("2026-12-01") == date(2026, 12, 1)
    assert parse_draw_date("2026-12-01T18:30:00Z") == date(2026, 12, 1)
    assert parse_draw_date(datetime(2026, 12, 1, 9, 0)) == date(2026, 12, 1)


@pytest.mark.parametrize(
    "value",
    ["", "tomorrow", "2026-13-01", None, "2026-12-0199", "2026-12-01 nonsense", "2026-12-01xyz"],
)
def test_parse_draw_date_rejects_garbage(value) -> None:
    with pytest.raises(ValueError):
        parse_draw_date(value)


def test_is_draw_due() -> None:
    draw = date(2026, 12, 1)
    assert not is_draw_due(draw, date(2026, 11, 30))
    assert is_draw_due(draw, date(2026, 12, 1))
    assert is_draw_due(draw, date(2027, 1, 5))
    assert not is_draw_due(None, date(2027, 1, 5))


def test_draw_year() -> None:
    assert draw_year(date(2026, 12, 24)) == 2026
