"""Celestial bodies: the Sun, the Moon and the planets.

Each body answers location, distance, magnitude and angular diameter for an
instant; the Moon and planets also answer phase angle. The Sun has no phase
angle because it is the light source.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import cspyce
import numpy as np

from skycalc.astro.coord import Coord
from skycalc.astro.positions import (
    earth_heliocentric,
    moon_geocentric,
    planet_heliocentric,
    sun_geocentric,
)
from skycalc.constants import (
    AU_KM,
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
    JUPITER_NUM,
    MARS_NUM,
    MERCURY_NUM,
    MOON_MAGNITUDE_COEFFS,
    MOON_RADIUS_KM,
    NEPTUNE_NUM,
    PLANET_MAGNITUDE_COEFFS,
    PLANET_RADIUS_KM,
    PLUTO_NUM,
    SATURN_NUM,
    SECONDS_PER_HOUR,
    SUN_ABSOLUTE_MAGNITUDE,
    SUN_RADIUS_KM,
    URANUS_NUM,
    VENUS_NUM,
)

if TYPE_CHECKING:
    from skycalc.time_utils import Instant

DPR = 180.0 / math.pi


def angular_diameter(radius_km: float, distance_au: float) -> float:
    """Apparent diameter in degrees of a sphere at the given distance."""
    return 2.0 * math.degrees(math.atan2(radius_km, distance_au * AU_KM))


def solar_phase_angle(helio: np.ndarray, geo: np.ndarray) -> float:
    """Sun-object-observer angle in degrees, from heliocentric and geocentric vectors."""
    return cspyce.vsep(-helio, -geo) * DPR


def lunation_angle(phase_now: float, phase_later: float) -> float:
    """Phase angle on the 0..360 lunation scale.

    0 at new (fully dark), 180 at full. Below 180 the lit fraction is growing,
    above 180 it is shrinking, decided by whether the Sun-object-observer
    angle decreases over the next hour.
    """
    if phase_later <= phase_now:
        return HALF_CIRCLE_DEGREES - phase_now
    return (HALF_CIRCLE_DEGREES + phase_now) % DEGREES_PER_CIRCLE


@dataclass(frozen=True)
class Sun:
    """The Sun."""

    name: str = 'sun'

    def location(self, date: Instant) -> Coord:
        return Coord.from_vector(sun_geocentric(date))

    def distance(self, date: Instant) -> float:
        """Distance from the Earth in AU."""
        return float(np.linalg.norm(sun_geocentric(date)))

    def magnitude(self, date: Instant) -> float:
        return SUN_ABSOLUTE_MAGNITUDE + 5.0 * math.log10(self.distance(date))

    def angdia(self, date: Instant) -> float:
        return angular_diameter(SUN_RADIUS_KM, self.distance(date))


@dataclass(frozen=True)
class Moon:
    """The Moon."""

    name: str = 'moon'

    def location(self, date: Instant) -> Coord:
        return Coord.from_vector(moon_geocentric(date))

    def distance(self, date: Instant) -> float:
        """Distance from the Earth in AU."""
        return float(np.linalg.norm(moon_geocentric(date)))

    def _solar_phase(self, date: Instant) -> float:
        geo = moon_geocentric(date)
        return solar_phase_angle(earth_heliocentric(date) + geo, geo)

    def phaseangle(self, date: Instant) -> float:
        """Lunation-scale phase angle in degrees (see lunation_angle)."""
        return lunation_angle(
            self._solar_phase(date), self._solar_phase(date.shifted(SECONDS_PER_HOUR))
        )

    def magnitude(self, date: Instant) -> float:
        v0, c1, c4 = MOON_MAGNITUDE_COEFFS
        i = self._solar_phase(date)
        return v0 + c1 * i + c4 * i**4

    def angdia(self, date: Instant) -> float:
        return angular_diameter(MOON_RADIUS_KM, self.distance(date))


@dataclass(frozen=True)
class Planet:
    """A planet, identified by its number (1=Mercury .. 9=Pluto)."""

    name: str
    number: int
    radius_km: float = field(compare=False)
    magnitude_coeffs: tuple[float, float, float, float] = field(compare=False)

    def _vectors(self, date: Instant) -> tuple[np.ndarray, np.ndarray]:
        """Heliocentric and geocentric positions (AU)."""
        helio = planet_heliocentric(self.number, date)
        return helio, helio - earth_heliocentric(date)

    def _solar_phase(self, date: Instant) -> float:
        helio, geo = self._vectors(date)
        return solar_phase_angle(helio, geo)

    def location(self, date: Instant) -> Coord:
        _, geo = self._vectors(date)
        return Coord.from_vector(geo)

    def distance(self, date: Instant) -> float:
        """Distance from the Earth in AU."""
        _, geo = self._vectors(date)
        return float(np.linalg.norm(geo))

    def phaseangle(self, date: Instant) -> float:
        """Lunation-scale phase angle in degrees (see lunation_angle)."""
        return lunation_angle(
            self._solar_phase(date), self._solar_phase(date.shifted(SECONDS_PER_HOUR))
        )

    def magnitude(self, date: Instant) -> float:
        helio, geo = self._vectors(date)
        i = solar_phase_angle(helio, geo)
        v0, c1, c2, c3 = self.magnitude_coeffs
        r = float(np.linalg.norm(helio))
        delta = float(np.linalg.norm(geo))
        return v0 + 5.0 * math.log10(r * delta) + c1 * i + c2 * i**2 + c3 * i**3

    def angdia(self, date: Instant) -> float:
        return angular_diameter(self.radius_km, self.distance(date))


def _planet(name: str, number: int) -> Planet:
    return Planet(name, number, PLANET_RADIUS_KM[number], PLANET_MAGNITUDE_COEFFS[number])


SUN = Sun()
MOON = Moon()
MERCURY = _planet('mercury', MERCURY_NUM)
VENUS = _planet('venus', VENUS_NUM)
MARS = _planet('mars', MARS_NUM)
JUPITER = _planet('jupiter', JUPITER_NUM)
SATURN = _planet('saturn', SATURN_NUM)
URANUS = _planet('uranus', URANUS_NUM)
NEPTUNE = _planet('neptune', NEPTUNE_NUM)
PLUTO = _planet('pluto', PLUTO_NUM)

PLANETS = (MERCURY, VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE, PLUTO)
