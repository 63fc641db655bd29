"""Astronomy layer: body positions, coordinate transforms and rise/set.

Built on pyerfa's analytic theories and cspyce vector geometry, so no
kernel files are needed.
"""

from skycalc.astro.bodies import (
    JUPITER,
    MARS,
    MERCURY,
    MOON,
    NEPTUNE,
    PLANETS,
    PLUTO,
    SATURN,
    SUN,
    URANUS,
    VENUS,
    Moon,
    Planet,
    Sun,
)
from skycalc.astro.coord import Coord, sidereal_time

__all__ = [
    'JUPITER',
    'MARS',
    'MERCURY',
    'MOON',
    'NEPTUNE',
    'PLANETS',
    'PLUTO',
    'SATURN',
    'SUN',
    'URANUS',
    'VENUS',
    'Coord',
    'Moon',
    'Planet',
    'Sun',
    'sidereal_time',
]
