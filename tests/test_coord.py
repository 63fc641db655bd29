"""Tests for coordinate transforms."""

from __future__ import annotations

import pytest

from skycalc.astro.coord import Coord, sidereal_time
from skycalc.time_utils import Instant


def test_of_date_is_near_identity_at_j2000() -> None:
    """At J2000 only the tiny frame bias separates the two frames."""
    coord = Coord(120.0, 30.0)
    mean = coord.of_date(Instant.from_calendar(2000, 1, 1, 12))
    assert mean.ra_deg == pytest.approx(120.0, abs=1e-4)
    assert mean.dec_deg == pytest.approx(30.0, abs=1e-4)


def test_of_date_precesses_equinox_point() -> None:
    """Over 24 years the J2000 equinox moves about 0.31 deg in RA and 0.13 deg in Dec."""
    mean = Coord(0.0, 0.0).of_date(Instant.from_calendar(2024, 1, 1, 12))
    assert mean.ra_deg == pytest.approx(0.307, abs=0.01)
    assert mean.dec_deg == pytest.approx(0.134, abs=0.01)


def test_horizon_uses_coordinates_of_date() -> None:
    """A star transits when local sidereal time equals its RA of date, not its J2000 RA."""
    date = Instant.from_calendar(2024, 3, 1, 3)
    star = Coord(150.0, 10.0)
    mean = star.of_date(date)
    lat = 40.0
    lon = mean.ra_deg - sidereal_time(date)
    az, alt = star.horizon(date, lat, lon)
    assert az == pytest.approx(180.0, abs=1e-3)
    assert alt == pytest.approx(90.0 - lat + mean.dec_deg, abs=1e-3)
    assert abs(mean.ra_deg - star.ra_deg) > 0.2
