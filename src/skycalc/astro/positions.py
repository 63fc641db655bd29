"""Position vectors of the Sun, Moon and planets from analytic theories.

All vectors are J2000 equatorial, in AU. Earth and the major planets come
from the ERFA routines (epv00, plan94, moon98); Pluto, which plan94 does not
cover, is propagated as a two-body orbit from its J2000 mean elements.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import cspyce
import erfa
import numpy as np

from skycalc.constants import (
    AU_KM,
    EARTH_NUM,
    GM_SUN_KM3_S2,
    OBLIQUITY_J2000_RAD,
    PLUTO_ELEMENTS,
    PLUTO_NUM,
)

if TYPE_CHECKING:
    from skycalc.time_utils import Instant


def earth_heliocentric(date: Instant) -> np.ndarray:
    """Heliocentric position of the Earth."""
    tt1, tt2 = date.tt_jd()
    pvh, _ = erfa.epv00(tt1, tt2)
    return np.array(pvh['p'], dtype=np.float64)


def sun_geocentric(date: Instant) -> np.ndarray:
    """Geocentric position of the Sun."""
    return -earth_heliocentric(date)


def moon_geocentric(date: Instant) -> np.ndarray:
    """Geocentric position of the Moon."""
    tt1, tt2 = date.tt_jd()
    pv = erfa.moon98(tt1, tt2)
    return np.array(pv['p'], dtype=np.float64)


def pluto_elements() -> list[float]:
    """Pluto's J2000 mean elements in the form cspyce.conics expects (km, rad, s)."""
    a_au, ecc, inc, mean_lon, peri_lon, node = PLUTO_ELEMENTS
    return [
        a_au * (1.0 - ecc) * AU_KM,
        ecc,
        math.radians(inc),
        math.radians(node),
        math.radians(peri_lon - node),
        math.radians(mean_lon - peri_lon),
        0.0,
        GM_SUN_KM3_S2,
    ]


def pluto_heliocentric(date: Instant) -> np.ndarray:
    """Heliocentric position of Pluto (two-body, J2000 mean elements)."""
    state = cspyce.conics(pluto_elements(), date.tdb())
    ecliptic = np.array(state[:3], dtype=np.float64) / AU_KM
    # Ecliptic to equatorial: rotate by -obliquity about the x axis.
    rot = cspyce.rotate(-OBLIQUITY_J2000_RAD, 1)
    return np.array(cspyce.mxv(rot, ecliptic), dtype=np.float64)


def planet_heliocentric(number: int, date: Instant) -> np.ndarray:
    """Heliocentric position of a planet.

    Parameters:
        number: 1=Mercury .. 8=Neptune, 9=Pluto (3 gives the Earth).
        date: Instant of observation.

    Returns:
        Position vector in AU.

    Raises:
        ValueError: If number is not a planet.
    """
    if number == EARTH_NUM:
        return earth_heliocentric(date)
    if number == PLUTO_NUM:
        return pluto_heliocentric(date)
    if not 1 <= number <= 8:
        raise ValueError(f'Unknown planet number {number!r}')
    tt1, tt2 = date.tt_jd()
    pv = erfa.plan94(tt1, tt2, number)
    return np.array(pv['p'], dtype=np.float64)
