"""Equatorial coordinates and their transforms (horizon, ecliptic, rise/set)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import cspyce
import erfa

from skycalc.angle_utils import normalize_degrees
from skycalc.constants import (
    DEGREES_PER_HOUR_RA,
    SIDEREAL_PER_SOLAR,
    STANDARD_ALTITUDE_DEG,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skycalc.time_utils import Instant

DPR = 180.0 / math.pi


def sidereal_time(date: Instant) -> float:
    """Greenwich mean sidereal time in degrees [0, 360)."""
    ut1, ut2 = date.ut_jd()
    tt1, tt2 = date.tt_jd()
    return normalize_degrees(erfa.gmst06(ut1, ut2, tt1, tt2) * DPR)


@dataclass(frozen=True)
class Coord:
    """Geocentric J2000 right ascension and declination in degrees."""

    ra_deg: float
    dec_deg: float

    @classmethod
    def from_vector(cls, vec: Sequence[float]) -> Coord:
        """Coordinate of the direction of a rectangular vector."""
        _, ra, dec = cspyce.recrad(vec)
        return cls(normalize_degrees(ra * DPR), dec * DPR)

    def of_date(self, date: Instant) -> Coord:
        """This J2000 direction referred to the mean equator and equinox of date.

        Uses the IAU 2006 bias-precession matrix, the frame that mean sidereal
        time is measured in.
        """
        tt1, tt2 = date.tt_jd()
        rbp = erfa.pmat06(tt1, tt2)
        vec = cspyce.radrec(1.0, math.radians(self.ra_deg), math.radians(self.dec_deg))
        return Coord.from_vector(cspyce.mxv(rbp, vec))

    def horizon(self, date: Instant, lat_deg: float, lon_deg: float) -> tuple[float, float]:
        """Azimuth (from north through east) and altitude in degrees.

        Parameters:
            date: Instant of observation; its time of day sets the hour angle.
            lat_deg: Observer geodetic latitude (north positive).
            lon_deg: Observer longitude (east positive).
        """
        mean = self.of_date(date)
        lst = sidereal_time(date) + lon_deg
        ha = math.radians(lst - mean.ra_deg)
        az, alt = erfa.hd2ae(ha, math.radians(mean.dec_deg), math.radians(lat_deg))
        return (normalize_degrees(az * DPR), alt * DPR)

    def ecliptic(self, date: Instant) -> tuple[float, float]:
        """Ecliptic longitude and latitude (of date) in degrees."""
        tt1, tt2 = date.tt_jd()
        lon, lat = erfa.eqec06(tt1, tt2, math.radians(self.ra_deg), math.radians(self.dec_deg))
        return (normalize_degrees(lon * DPR), lat * DPR)

    def riseset(
        self, date: Instant, lat_deg: float, lon_deg: float
    ) -> tuple[float, float] | None:
        """UT times of day (hours) of rising and setting on the date's UTC day.

        The coordinate is held fixed for the whole day. Returns None when the
        object stays above (circumpolar) or below the horizon all day.
        """
        mean = self.of_date(date)
        phi = math.radians(lat_deg)
        dec = math.radians(mean.dec_deg)
        denom = math.cos(phi) * math.cos(dec)
        if denom == 0.0:
            return None
        cos_h = (math.sin(math.radians(STANDARD_ALTITUDE_DEG)) - math.sin(phi) * math.sin(dec)) / denom
        if not -1.0 <= cos_h <= 1.0:
            return None
        half_arc = math.degrees(math.acos(cos_h))
        gmst0 = sidereal_time(date.at_time_of_day(0.0))
        rate = DEGREES_PER_HOUR_RA * SIDEREAL_PER_SOLAR
        rise = normalize_degrees(mean.ra_deg - half_arc - lon_deg - gmst0) / rate
        set_ = normalize_degrees(mean.ra_deg + half_arc - lon_deg - gmst0) / rate
        return (rise, set_)
