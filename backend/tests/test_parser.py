"""Tests for the lenient value parsers."""
from __future__ import annotations

from datetime import date

import pytest

from backend.catalog.parser import parse_date, parse_int, parse_runtime, parse_score


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2021-01-02", date(2021, 1, 2)),
        ("2021/01/02", date(2021, 1, 2)),
        ("2019年07月15日", date(2019, 7, 15)),
        ("2021-01-02T10:00:00+09:00", date(2021, 1, 2)),
        ("", None),
        ("unknown", None),
        (None, None),
    ],
)
def test_parse_date(value, expected) -> None:
    """Supported date layouts parse; anything else yields None."""

    assert parse_date(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("PT1H0M12S", 60),
        ("PT45M", 45),
        ("01:02:03", 62),
        ("62:03", 62),
        ("120分", 120),
        ("95 min", 95),
        ("90", 90),
        ("", 0),
        ("soon", 0),
    ],
)
def test_parse_runtime(value, expected) -> None:
    """Durations, clock strings and minute counts convert to minutes."""

    assert parse_runtime(value) == expected


def test_parse_score_and_int_fall_back_to_zero() -> None:
    """Unparseable numbers become zero."""

    assert parse_score("4.5") == 4.5
    assert parse_score("rating: 3") == 3.0
    assert parse_score("n/a") == 0.0
    assert parse_int("160cm") == 160
    assert parse_int("1,200") == 1200
    assert parse_int("") == 0
    assert parse_int("n/a") == 0
