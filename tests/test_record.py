"""Tests for output record formatting."""

from __future__ import annotations

import io

import pytest

from skycalc.properties import Property
from skycalc.record import Record, write_values
from skycalc.time_utils import Instant
from skycalc.values import DistanceValue, NumberValue, RiseSetTime

PROPS = [Property.DISTANCE, Property.MAGNITUDE, Property.RISE]
VALUES = [DistanceValue(1.25), NumberValue(-1.234), RiseSetTime(None)]


def test_record_pads_and_resets() -> None:
    """Fields are padded to width, trailing space is dropped, write re-initializes."""
    out = io.StringIO()
    record = Record('|')
    record.append('ab', 4)
    record.append('c')
    assert record.get_line() == 'ab  |c'
    record.write(out)
    assert record.get_line() == ''
    record.write(out)
    assert out.getvalue() == 'ab  |c\n'


def test_space_format() -> None:
    """Values are joined by single spaces."""
    out = io.StringIO()
    write_values(out, PROPS, VALUES)
    assert out.getvalue() == '1.25 AU -1.23 never\n'


def test_csv_format_with_date() -> None:
    """Ephemeris rows lead with the date."""
    out = io.StringIO()
    write_values(out, PROPS, VALUES, 'csv', date=Instant.from_calendar(2000, 1, 2, 3, 4, 5))
    assert out.getvalue() == '2000-01-02T03:04:05,1.25 AU,-1.23,never\n'


def test_table_format() -> None:
    """Labels are padded to a common width, one property per line."""
    out = io.StringIO()
    write_values(out, PROPS, VALUES, 'table', date=Instant.from_calendar(2000, 1, 1))
    assert out.getvalue().splitlines() == [
        'Date:      2000-01-01T00:00:00',
        'Distance:  1.25 AU',
        'Magnitude: -1.23',
        'Rise Time: never',
    ]


def test_unknown_format() -> None:
    """Unknown formats are rejected."""
    with pytest.raises(ValueError, match='Unknown output format'):
        write_values(io.StringIO(), PROPS, VALUES, 'json')
