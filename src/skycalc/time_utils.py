"""UTC instants and time conversion wrappers around rms-julian."""

from __future__ import annotations

import logging
import math
import time as _time
from dataclasses import dataclass

import julian

from skycalc.config import get_leapsecs_path
from skycalc.constants import (
    JD_OF_DAY_ZERO,
    JD_OF_J2000,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_DAY,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False

# Sub-microsecond float noise is not allowed to push a rendered second down.
_TRUNCATION_SLACK = 1.0e-6


def _ensure_leapsecs() -> None:
    """Load leap seconds file if not already loaded.

    rms-julian requires a NAIF LSK (e.g. naif0012.tls). If no file is
    configured, or the configured one cannot be read, falls back to
    rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    try:
        julian.load_lsk()
    except Exception as fallback_err:
        logger.error(
            'Loading rms-julian bundled LSK failed: %s',
            fallback_err,
            exc_info=True,
        )
        raise
    _leapsecs_loaded = True


def day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert calendar date to days since 2000-01-01.

    Day-of-month values past the end of the month follow rms-julian's
    arithmetic (they roll into the following month).
    """
    return int(julian.day_from_ymd(year, month, day))


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert days since 2000-01-01 to (year, month, day)."""
    y, m, d = julian.ymd_from_day(day)
    return (int(y), int(m), int(d))


def hms_from_sec(sec: int) -> tuple[int, int, int]:
    """Convert whole seconds within a day to (hour, minute, second)."""
    h, m, s = julian.hms_from_sec(sec)
    return (int(h), int(m), int(s))


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """True if (year, month, day) names a real calendar date."""
    if not 1 <= month <= 12 or day < 1:
        return False
    try:
        return ymd_from_day(day_from_ymd(year, month, day)) == (year, month, day)
    except (ValueError, TypeError, LookupError):
        return False


@dataclass(frozen=True, order=True)
class Instant:
    """A UTC instant: days since 2000-01-01 plus seconds into that day.

    Always normalized so that ``0 <= sec < 86400``; ordering therefore
    follows time.
    """

    day: int
    sec: float

    @classmethod
    def from_day_sec(cls, day: int, sec: float) -> Instant:
        """Build an instant, carrying whole days out of ``sec``."""
        carry = math.floor(sec / SECONDS_PER_DAY)
        sec -= carry * SECONDS_PER_DAY
        if sec >= SECONDS_PER_DAY:
            carry += 1
            sec -= SECONDS_PER_DAY
        return cls(int(day) + carry, sec)

    @classmethod
    def from_jd(cls, jd: float) -> Instant:
        """Instant from a (UTC) Julian Date."""
        days = jd - JD_OF_DAY_ZERO
        day = math.floor(days)
        return cls.from_day_sec(day, (days - day) * SECONDS_PER_DAY)

    @classmethod
    def from_unix(cls, seconds: float) -> Instant:
        """Instant from seconds since 1970-01-01T00:00:00 UTC."""
        return cls.from_day_sec(UNIX_EPOCH_DAY, seconds)

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> Instant:
        """Instant from UTC calendar fields."""
        sec = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        return cls.from_day_sec(day_from_ymd(year, month, day), sec)

    @classmethod
    def now(cls) -> Instant:
        """The current instant from the system clock."""
        return cls.from_unix(_time.time())

    def jd(self) -> float:
        """Julian Date (UTC)."""
        return JD_OF_DAY_ZERO + self.day + self.sec / SECONDS_PER_DAY

    def unix(self) -> float:
        """Seconds since 1970-01-01T00:00:00 UTC, ignoring leap seconds."""
        return (self.day - UNIX_EPOCH_DAY) * SECONDS_PER_DAY + self.sec

    def calendar(self) -> tuple[int, int, int]:
        """UTC calendar date as (year, month, day)."""
        return ymd_from_day(self.day)

    def clock(self) -> tuple[int, int, int]:
        """UTC time of day as (hour, minute, whole seconds), truncated."""
        return hms_from_sec(min(int(self.sec), int(SECONDS_PER_DAY) - 1))

    def truncated(self) -> Instant:
        """This instant with the fractional second dropped."""
        return Instant.from_day_sec(self.day, math.floor(self.sec + _TRUNCATION_SLACK))

    def shifted(self, seconds: float) -> Instant:
        """This instant moved by ``seconds`` (negative moves backward)."""
        return Instant.from_day_sec(self.day, self.sec + seconds)

    def at_time_of_day(self, seconds: float) -> Instant:
        """The same UTC calendar day at ``seconds`` past midnight."""
        return Instant.from_day_sec(self.day, seconds)

    def tdb(self) -> float:
        """Ephemeris time (TDB seconds past J2000) via rms-julian."""
        _ensure_leapsecs()
        tai = julian.tai_from_day_sec(self.day, self.sec)
        return float(julian.tdb_from_tai(tai))

    def tt_jd(self) -> tuple[float, float]:
        """Two-part terrestrial-time Julian Date for pyerfa (TT taken equal to TDB)."""
        return (JD_OF_J2000, self.tdb() / SECONDS_PER_DAY)

    def ut_jd(self) -> tuple[float, float]:
        """Two-part UT Julian Date for pyerfa (UT1 taken equal to UTC)."""
        return (JD_OF_DAY_ZERO + self.day, self.sec / SECONDS_PER_DAY)


def format_instant(instant: Instant) -> str:
    """Format as ``YYYY-MM-DDThh:mm:ss`` UTC with seconds truncated."""
    whole = instant.truncated()
    y, mo, d = whole.calendar()
    h, mi, s = whole.clock()
    return f'{y:04d}-{mo:02d}-{d:02d}T{h:02d}:{mi:02d}:{s:02d}'
