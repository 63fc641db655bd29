"""Typed property values, their views, and rendering to text.

A value carries a computed result plus a view tag chosen by the resolver;
``render`` turns any (value, view) pair into its text form. Rendering has no
failure paths: once a value exists it can be shown.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from skycalc.angle_utils import dms_string, hms_string, latitude_degrees, normalize_degrees
from skycalc.astro.coord import Coord
from skycalc.frame import RefFrame
from skycalc.time_utils import Instant, format_instant

NEVER = 'never'

PHASE_NAMES = (
    'New',
    'Waxing Crescent',
    'First Quarter',
    'Waxing Gibbous',
    'Full',
    'Waning Gibbous',
    'Last Quarter',
    'Waning Crescent',
)
NORTHERN_EMOJIS = ('🌑', '🌒', '🌓', '🌔', '🌕', '🌖', '🌗', '🌘')
# Seen from the southern hemisphere the lit side is mirrored.
SOUTHERN_EMOJIS = tuple(NORTHERN_EMOJIS[-i] for i in range(len(NORTHERN_EMOJIS)))


class AngleView(Enum):
    ANGLE = 'angle'
    LATITUDE = 'latitude'
    RAW = 'raw'
    TIME = 'time'


@dataclass(frozen=True)
class EquatorialView:
    pass


@dataclass(frozen=True)
class HorizontalView:
    frame: RefFrame


@dataclass(frozen=True)
class EclipticView:
    date: Instant


CoordView = Union[EquatorialView, HorizontalView, EclipticView]


@dataclass(frozen=True)
class PhaseDefaultView:
    northern: bool = True


@dataclass(frozen=True)
class PhaseEmojiView:
    northern: bool = True


@dataclass(frozen=True)
class PhaseNameView:
    pass


@dataclass(frozen=True)
class IllumFracView:
    pass


PhaseView = Union[PhaseDefaultView, PhaseEmojiView, PhaseNameView, IllumFracView]


@dataclass(frozen=True)
class CoordValue:
    coord: Coord
    view: CoordView


@dataclass(frozen=True)
class AngleValue:
    degrees: float
    view: AngleView


@dataclass(frozen=True)
class DistanceValue:
    au: float


@dataclass(frozen=True)
class NumberValue:
    value: float


@dataclass(frozen=True)
class PhaseValue:
    """Phase angle in degrees on the lunation scale (0 new, 180 full)."""

    angle_deg: float
    view: PhaseView


@dataclass(frozen=True)
class RiseSetTime:
    """Time of rising or setting; None when there is no such event that day."""

    date: Instant | None


Value = Union[CoordValue, AngleValue, DistanceValue, NumberValue, PhaseValue, RiseSetTime]


def illuminated_fraction(angle_deg: float) -> float:
    """Lit fraction of the disk for a phase angle in degrees."""
    return (1.0 - math.cos(math.radians(angle_deg))) / 2.0


def phase_index(fraction: float, angle_deg: float) -> int:
    """Bucket a phase into 0..7 (New .. Waning Crescent).

    Intervals are half-open on the right: [0.04, 0.46) is a crescent,
    [0.46, 0.54) a quarter, [0.54, 0.96) gibbous; below 0.04 is New and
    0.96 or more is Full. Angles above 90 degrees select the waning side.
    """
    waning = angle_deg > 90.0
    if fraction < 0.04:
        return 0
    if fraction < 0.46:
        return 7 if waning else 1
    if fraction < 0.54:
        return 6 if waning else 2
    if fraction < 0.96:
        return 5 if waning else 3
    return 4


def render_angle(degrees: float, view: AngleView) -> str:
    if view is AngleView.ANGLE:
        return dms_string(normalize_degrees(degrees))
    if view is AngleView.LATITUDE:
        return dms_string(latitude_degrees(degrees), signed=True)
    if view is AngleView.RAW:
        return f'{normalize_degrees(degrees):.5f}'
    return hms_string(degrees)


def render_date(date: Instant) -> str:
    return format_instant(date)


def _render_pair(first: float, first_view: AngleView, second: float) -> str:
    return f'{render_angle(first, first_view)} {render_angle(second, AngleView.LATITUDE)}'


def _render_coord(coord: Coord, view: CoordView) -> str:
    match view:
        case EquatorialView():
            return _render_pair(coord.ra_deg, AngleView.TIME, coord.dec_deg)
        case HorizontalView(frame=frame):
            # The resolver only builds horizontal views for frames with a location.
            assert frame.latlong is not None
            lat, lon = frame.latlong
            az, alt = coord.horizon(frame.date, lat, lon)
            return _render_pair(az, AngleView.ANGLE, alt)
        case EclipticView(date=date):
            lon, lat = coord.ecliptic(date)
            return _render_pair(lon, AngleView.ANGLE, lat)
    raise AssertionError(f'unhandled coordinate view {view!r}')


def _render_phase(angle_deg: float, view: PhaseView) -> str:
    fraction = illuminated_fraction(angle_deg)
    idx = phase_index(fraction, angle_deg)
    match view:
        case PhaseDefaultView(northern=northern):
            emoji = NORTHERN_EMOJIS[idx] if northern else SOUTHERN_EMOJIS[idx]
            return f'{emoji} {PHASE_NAMES[idx]} ({fraction * 100.0:.1f}%)'
        case PhaseEmojiView(northern=northern):
            return NORTHERN_EMOJIS[idx] if northern else SOUTHERN_EMOJIS[idx]
        case PhaseNameView():
            return PHASE_NAMES[idx]
        case IllumFracView():
            return f'{fraction * 100.0:.1f}'
    raise AssertionError(f'unhandled phase view {view!r}')


def render(value: Value) -> str:
    """Text form of a value."""
    match value:
        case CoordValue(coord=coord, view=view):
            return _render_coord(coord, view)
        case AngleValue(degrees=degrees, view=view):
            return render_angle(degrees, view)
        case DistanceValue(au=au):
            return f'{au} AU'
        case NumberValue(value=number):
            return f'{number:.2f}'
        case PhaseValue(angle_deg=angle_deg, view=view):
            return _render_phase(angle_deg, view)
        case RiseSetTime(date=None):
            return NEVER
        case RiseSetTime(date=date):
            return render_date(date)
    raise AssertionError(f'unhandled value {value!r}')
