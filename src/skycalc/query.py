"""Property resolution and query running.

``resolve`` computes one property of one object in one reference frame.
Base properties go straight to the astronomy layer; derived properties
resolve a base property and rewrap its value with a different view.
``run`` resolves an ordered list of properties, and ``run_ephemeris``
repeats that over a stepped range of dates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import replace

from skycalc.astro.bodies import Moon, Planet, Sun
from skycalc.astro.coord import Coord
from skycalc.catalog import CelObj
from skycalc.constants import SECONDS_PER_HOUR
from skycalc.errors import MissingLocation, ResolutionError, UndefinedForObject
from skycalc.frame import RefFrame
from skycalc.properties import Property
from skycalc.time_utils import Instant
from skycalc.timestep import Step, ephemeris_dates
from skycalc.values import (
    AngleValue,
    AngleView,
    CoordValue,
    DistanceValue,
    EclipticView,
    EquatorialView,
    HorizontalView,
    IllumFracView,
    NumberValue,
    PhaseDefaultView,
    PhaseEmojiView,
    PhaseNameView,
    PhaseValue,
    PhaseView,
    RiseSetTime,
    Value,
)

logger = logging.getLogger(__name__)


def _require_location(frame: RefFrame) -> tuple[float, float]:
    if frame.latlong is None:
        raise MissingLocation()
    return frame.latlong


def _equatorial(obj: CelObj, frame: RefFrame) -> Coord:
    value = resolve(obj, Property.EQUATORIAL, frame)
    if not isinstance(value, CoordValue):
        raise AssertionError(f'equatorial resolution returned {value!r}')
    return value.coord


def _phase_angle(obj: CelObj, frame: RefFrame) -> float:
    value = resolve(obj, Property.PHASE_DEFAULT, frame)
    if not isinstance(value, PhaseValue):
        raise AssertionError(f'phase resolution returned {value!r}')
    return value.angle_deg


def _rewrap_phase(obj: CelObj, frame: RefFrame, view: PhaseView) -> PhaseValue:
    return PhaseValue(_phase_angle(obj, frame), view)


def _rise_or_set(obj: CelObj, frame: RefFrame, rising: bool) -> RiseSetTime:
    lat, lon = _require_location(frame)
    coord = _equatorial(obj, frame)
    times = coord.riseset(frame.date, lat, lon)
    if times is None:
        return RiseSetTime(None)
    hours = times[0] if rising else times[1]
    return RiseSetTime(frame.date.at_time_of_day(hours * SECONDS_PER_HOUR))


def resolve(obj: CelObj, prop: Property, frame: RefFrame) -> Value:
    """Compute one property of an object in a reference frame.

    Parameters:
        obj: Sun, Moon or Planet.
        prop: Requested property.
        frame: Date and optional observer location.

    Returns:
        The value, with its view already chosen.

    Raises:
        MissingLocation: Horizontal, rise or set requested without a lat/long.
        UndefinedForObject: Phase requested for the Sun.
    """
    match (prop, obj):
        case (Property.EQUATORIAL, Sun() | Moon() | Planet()):
            return CoordValue(obj.location(frame.date), EquatorialView())
        case (Property.HORIZONTAL, _):
            _require_location(frame)
            return CoordValue(_equatorial(obj, frame), HorizontalView(frame))
        case (Property.ECLIPTIC, _):
            return CoordValue(_equatorial(obj, frame), EclipticView(frame.date))
        case (Property.RISE, _):
            return _rise_or_set(obj, frame, rising=True)
        case (Property.SET, _):
            return _rise_or_set(obj, frame, rising=False)
        case (Property.DISTANCE, Sun() | Moon() | Planet()):
            return DistanceValue(obj.distance(frame.date))
        case (Property.MAGNITUDE, Sun() | Moon() | Planet()):
            return NumberValue(obj.magnitude(frame.date))
        case (Property.ANG_DIA, Sun() | Moon() | Planet()):
            return AngleValue(obj.angdia(frame.date), AngleView.ANGLE)
        case (Property.PHASE_DEFAULT, Sun()):
            raise UndefinedForObject("Can't get phase of the Sun")
        case (Property.PHASE_DEFAULT, Moon() | Planet()):
            return PhaseValue(obj.phaseangle(frame.date), PhaseDefaultView(frame.northern))
        case (Property.PHASE_EMOJI, _):
            return _rewrap_phase(obj, frame, PhaseEmojiView(frame.northern))
        case (Property.PHASE_NAME, _):
            return _rewrap_phase(obj, frame, PhaseNameView())
        case (Property.ILLUM_FRAC, _):
            return _rewrap_phase(obj, frame, IllumFracView())
    raise AssertionError(f'no resolution for {prop!r} of {obj!r}')


def run(obj: CelObj, props: Sequence[Property], frame: RefFrame) -> list[Value]:
    """Resolve each property in order; the first failure aborts the query.

    Raises:
        ResolutionError: The failing property's error, with ``prop`` set.
    """
    values: list[Value] = []
    for prop in props:
        try:
            values.append(resolve(obj, prop, frame))
        except ResolutionError as e:
            e.prop = prop
            logger.debug('Query for %s failed on %s: %s', obj.name, prop.label, e)
            raise
    return values


def run_ephemeris(
    obj: CelObj,
    props: Sequence[Property],
    frame: RefFrame,
    start: Instant,
    step: Step,
    end: Instant,
) -> Iterator[tuple[Instant, list[Value]]]:
    """Run the query at ``start`` and every step after it, strictly before ``end``.

    Each row uses a copy of ``frame`` with its date replaced.
    """
    for date in ephemeris_dates(start, step, end):
        yield date, run(obj, props, replace(frame, date=date))
