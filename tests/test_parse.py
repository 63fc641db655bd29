"""Tests for literal parsing (dates, angles, steps, lat/long, names)."""

from __future__ import annotations

import math

import pytest

from skycalc import parse
from skycalc.catalog import read_catalog
from skycalc.errors import (
    BadCsv,
    BadInterval,
    InvalidAngle,
    InvalidDate,
    InvalidNumber,
    LatitudeOutOfRange,
    UnknownObject,
    UnknownProperty,
)
from skycalc.properties import PROPERTY_TABLE, Property
from skycalc.time_utils import Instant
from skycalc.timestep import Months, Seconds


def test_unix_forms_and_calendar_agree() -> None:
    """@N, Nu and the equivalent calendar date parse to the same instant."""
    at_form = parse.parse_date('@86400')
    u_form = parse.parse_date('86400u')
    calendar = parse.parse_date('1970-01-02')
    assert at_form == u_form == calendar
    assert parse.parse_date('1970-01-02t00:00:00') == calendar
    assert parse.parse_date('1970-01-02T00:00') == calendar


def test_julian_day_suffix_is_not_unix() -> None:
    """86400jd is a Julian Date, not Unix seconds."""
    jd = parse.parse_date('86400jd')
    assert jd.jd() == pytest.approx(86400.0, abs=1e-6)
    assert parse.parse_date('86400j') == jd
    assert jd != parse.parse_date('86400u')


def test_j2000_julian_date() -> None:
    """2451545j is noon on 2000-01-01."""
    assert parse.parse_date('2451545j') == Instant(0, 43200.0)


def test_rfc3339_with_offset() -> None:
    """RFC 3339 offsets are converted to UTC."""
    utc = parse.parse_date('2000-01-06t12:00:00z')
    assert utc == Instant.from_calendar(2000, 1, 6, 12)
    assert parse.parse_date('2000-01-06T17:30:00+05:30') == utc
    assert parse.parse_date('2000-01-06T07:00:00-05:00') == utc


def test_negative_unix_seconds_with_suffix() -> None:
    """-86400u is not a relative step, so it falls through to Unix seconds."""
    assert parse.parse_date('-86400u') == Instant.from_calendar(1969, 12, 31)


def test_relative_dates_move_from_now(monkeypatch: pytest.MonkeyPatch) -> None:
    """+STEP and -STEP are offsets from the current clock."""
    monkeypatch.setattr('skycalc.time_utils._time.time', lambda: 86400.0)
    assert parse.parse_date('now') == Instant.from_calendar(1970, 1, 2)
    assert parse.parse_date('+1d') == Instant.from_calendar(1970, 1, 3)
    assert parse.parse_date('-12h') == Instant.from_calendar(1970, 1, 1, 12)
    assert parse.parse_date('+1mon') == Instant.from_calendar(1970, 2, 2)


@pytest.mark.parametrize('token', ['', 'yesterday', '2000-13-01', '2000-02-30', '12:00', '@x'])
def test_invalid_dates(token: str) -> None:
    """Unrecognized date literals raise InvalidDate."""
    with pytest.raises(InvalidDate, match='Invalid date'):
        parse.parse_date(token)


def test_angle_sign_rules() -> None:
    """w negates e and s negates n; degree suffixes are equivalent."""
    assert parse.parse_angle('10w') == -parse.parse_angle('10e')
    assert parse.parse_angle('10s') == -parse.parse_angle('10n')
    assert parse.parse_angle('10d') == 10.0
    assert parse.parse_angle('10deg') == 10.0
    assert parse.parse_angle('10°') == 10.0
    assert parse.parse_angle(' 10E ') == 10.0


def test_south_negates_in_latitude_and_longitude() -> None:
    """The s suffix negates in every parsing path."""
    assert parse.parse_latitude('10s') == -10.0
    assert parse.parse_longitude('10s') == -10.0
    assert parse.parse_latlong('10s,20w') == (-10.0, -20.0)


def test_angle_radians() -> None:
    """rad converts to degrees."""
    assert parse.parse_angle(f'{math.pi}rad') == pytest.approx(180.0)


def test_invalid_angle() -> None:
    """Angles without a unit suffix are rejected by parse_angle."""
    with pytest.raises(InvalidAngle):
        parse.parse_angle('10')
    with pytest.raises(InvalidAngle):
        parse.parse_angle('tenw')


@pytest.mark.parametrize('token', ['90.5', '-91', '91n', '91s', '91d', '91deg', '91°', '2rad'])
def test_latitude_over_ninety_rejected(token: str) -> None:
    """Latitude magnitudes strictly above 90 degrees are rejected for all forms."""
    with pytest.raises(LatitudeOutOfRange):
        parse.parse_latitude(token)


def test_latitude_at_pole_accepted() -> None:
    """Exactly 90 degrees is a valid latitude."""
    assert parse.parse_latitude('90n') == 90.0
    assert parse.parse_latitude('-90') == -90.0


def test_latlong_forms() -> None:
    """LAT,LONG accepts bare numbers or suffixed angles; none means no location."""
    assert parse.parse_latlong('51.48n,0.0e') == (51.48, 0.0)
    assert parse.parse_latlong('40.7,-74') == (40.7, -74.0)
    assert parse.parse_latlong('None') is None


@pytest.mark.parametrize('token', ['10', '10,20,30', ''])
def test_latlong_needs_two_fields(token: str) -> None:
    """Anything other than two fields is a CSV error."""
    with pytest.raises(BadCsv):
        parse.parse_latlong(token)


def test_parse_number() -> None:
    """Bare decimals parse; anything else is a bad number."""
    assert parse.parse_number('-1.5e2') == -150.0
    with pytest.raises(InvalidNumber, match='Bad number'):
        parse.parse_number('1.5x')


def test_steps() -> None:
    """Second-based units give Seconds; y and mon give calendar Months."""
    assert parse.parse_step('1w') == Seconds(604800.0)
    assert parse.parse_step('2d') == Seconds(172800.0)
    assert parse.parse_step('1.5h') == Seconds(5400.0)
    assert parse.parse_step('10min') == Seconds(600.0)
    assert parse.parse_step('30s') == Seconds(30.0)
    assert parse.parse_step('3mon') == Months(3)
    assert parse.parse_step('2y') == Months(24)
    assert parse.parse_step('1.5y') == Months(18)


def test_bad_step() -> None:
    """A step without a unit is a bad interval."""
    with pytest.raises(BadInterval):
        parse.parse_step('5')


def test_every_property_alias_resolves() -> None:
    """Each alias in the table maps back to its property; every property has one."""
    for alias, prop in PROPERTY_TABLE.items():
        assert parse.parse_property(alias) is prop
        assert parse.parse_property(alias.upper()) is prop
    assert set(PROPERTY_TABLE.values()) == set(Property)
    assert parse.parse_property('phaseprecent') is Property.ILLUM_FRAC


def test_parse_properties_splits_commas() -> None:
    """Comma lists and separate tokens combine in order."""
    props = parse.parse_properties(['equ,horiz', 'phase'])
    assert props == [Property.EQUATORIAL, Property.HORIZONTAL, Property.PHASE_DEFAULT]


def test_unknown_property() -> None:
    """Unknown property names raise UnknownProperty."""
    with pytest.raises(UnknownProperty, match='Unknown property'):
        parse.parse_properties(['equ,colour'])


def test_parse_object() -> None:
    """Object names are case-insensitive; unknown names are rejected."""
    catalog = read_catalog()
    assert parse.parse_object('Moon', catalog).name == 'moon'
    assert parse.parse_object('PLUTO', catalog).number == 9
    with pytest.raises(UnknownObject):
        parse.parse_object('vulcan', catalog)


def test_ephemeris_range() -> None:
    """START,STEP,END parses into its three parts."""
    start, step, end = parse.parse_ephemeris_range('2000-01-01,1d,2000-01-05')
    assert start == Instant(0, 0.0)
    assert step == Seconds(86400.0)
    assert end == Instant(4, 0.0)


def test_ephemeris_range_errors() -> None:
    """Wrong field count and non-forward steps are rejected."""
    with pytest.raises(BadCsv):
        parse.parse_ephemeris_range('2000-01-01,1d')
    with pytest.raises(BadInterval):
        parse.parse_ephemeris_range('2000-01-01,0d,2000-01-05')
    with pytest.raises(BadInterval):
        parse.parse_ephemeris_range('2000-01-01,-1d,2000-01-05')


def test_fractional_steps_truncate_in_months() -> None:
    """Years become months before truncation; fractional months truncate."""
    assert parse.parse_step('0.5y') == Months(6)
    assert parse.parse_step('2.7mon') == Months(2)
    assert parse.parse_step('0.05y') == Months(0)
