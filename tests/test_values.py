"""Tests for value rendering and phase bucketing."""

from __future__ import annotations

import pytest

from skycalc.angle_utils import dms_string, latitude_degrees
from skycalc.time_utils import Instant
from skycalc.values import (
    NEVER,
    NORTHERN_EMOJIS,
    PHASE_NAMES,
    SOUTHERN_EMOJIS,
    AngleValue,
    AngleView,
    DistanceValue,
    IllumFracView,
    NumberValue,
    PhaseDefaultView,
    PhaseEmojiView,
    PhaseNameView,
    PhaseValue,
    RiseSetTime,
    illuminated_fraction,
    phase_index,
    render,
)


@pytest.mark.parametrize(
    ('fraction', 'angle', 'expected'),
    [
        (0.0, 0.0, 0),
        (0.0399, 10.0, 0),
        (0.04, 10.0, 1),
        (0.04, 350.0, 7),
        (0.4599, 80.0, 1),
        (0.46, 80.0, 2),
        (0.46, 280.0, 6),
        (0.5399, 90.0, 2),
        (0.54, 90.0, 3),
        (0.54, 200.0, 5),
        (0.9599, 200.0, 5),
        (0.96, 170.0, 4),
        (1.0, 180.0, 4),
    ],
)
def test_phase_index_boundaries(fraction: float, angle: float, expected: int) -> None:
    """Thresholds are half-open on the right; the angle picks waxing or waning."""
    assert phase_index(fraction, angle) == expected


def test_phase_index_reaches_every_bucket() -> None:
    """All eight phase indices are reachable."""
    samples = [
        (0.01, 0.0),
        (0.2, 45.0),
        (0.5, 90.0),
        (0.7, 60.0),
        (0.99, 180.0),
        (0.7, 225.0),
        (0.5, 270.0),
        (0.2, 315.0),
    ]
    assert sorted(phase_index(f, a) for f, a in samples) == list(range(8))


def test_illuminated_fraction() -> None:
    """Fraction is 0 at new, 1/2 at quarter and 1 at full."""
    assert illuminated_fraction(0.0) == pytest.approx(0.0)
    assert illuminated_fraction(90.0) == pytest.approx(0.5)
    assert illuminated_fraction(180.0) == pytest.approx(1.0)
    assert illuminated_fraction(270.0) == pytest.approx(0.5)


def test_render_phase_views() -> None:
    """Each phase view renders its own text from the same angle."""
    full = 180.0
    assert render(PhaseValue(full, PhaseNameView())) == 'Full'
    assert render(PhaseValue(full, IllumFracView())) == '100.0'
    assert render(PhaseValue(full, PhaseEmojiView())) == '🌕'
    assert render(PhaseValue(full, PhaseDefaultView())) == '🌕 Full (100.0%)'
    assert render(PhaseValue(0.0, PhaseDefaultView())) == '🌑 New (0.0%)'
    assert render(PhaseValue(270.0, PhaseNameView())) == 'Last Quarter'


def test_southern_emojis_are_mirrored() -> None:
    """Crescents and quarters swap sides south of the equator."""
    assert SOUTHERN_EMOJIS[0] == NORTHERN_EMOJIS[0]
    assert SOUTHERN_EMOJIS[4] == NORTHERN_EMOJIS[4]
    assert SOUTHERN_EMOJIS[1] == NORTHERN_EMOJIS[7]
    assert SOUTHERN_EMOJIS[2] == NORTHERN_EMOJIS[6]
    assert render(PhaseValue(45.0, PhaseEmojiView(northern=False))) == '🌘'
    assert render(PhaseValue(45.0, PhaseEmojiView(northern=True))) == '🌒'
    assert len(PHASE_NAMES) == len(NORTHERN_EMOJIS) == 8


def test_render_angle_views() -> None:
    """Angle, latitude, raw and time views."""
    assert render(AngleValue(12.5, AngleView.ANGLE)) == '12°30′00.0″'
    assert render(AngleValue(-10.0, AngleView.ANGLE)) == '350°00′00.0″'
    assert render(AngleValue(-12.5, AngleView.LATITUDE)) == '-12°30′00.0″'
    assert render(AngleValue(12.5, AngleView.LATITUDE)) == '+12°30′00.0″'
    assert render(AngleValue(370.25, AngleView.RAW)) == '10.25000'
    assert render(AngleValue(187.5, AngleView.TIME)) == '12h30m00s'


def test_latitude_wraps_past_pole() -> None:
    """Latitudes beyond the poles reflect back into [-90, 90]."""
    assert latitude_degrees(100.0) == pytest.approx(80.0)
    assert latitude_degrees(-100.0) == pytest.approx(-80.0)
    assert latitude_degrees(270.0) == pytest.approx(-90.0)


def test_dms_carries_rounded_seconds() -> None:
    """Seconds that round up to 60 carry into minutes."""
    assert dms_string(59.99999) == '60°00′00.0″'


def test_render_distance_and_number() -> None:
    """Distances keep full precision; numbers use two decimals."""
    assert render(DistanceValue(1.5)) == '1.5 AU'
    assert render(NumberValue(-26.7432)) == '-26.74'


def test_render_rise_set() -> None:
    """A missing event renders as the never sentinel; otherwise as a date."""
    assert render(RiseSetTime(None)) == NEVER == 'never'
    assert render(RiseSetTime(Instant.from_calendar(2000, 1, 6, 7, 5, 9.9))) == (
        '2000-01-06T07:05:09'
    )
