"""Literal parsing: dates, angles, steps, lat/long, property and object names.

Every parser strips and lower-cases its token, then either returns one typed
value or raises a ParseError subclass naming the token. Parsers never fall
back from one kind of literal to another.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping

from skycalc.catalog import CelObj
from skycalc.constants import (
    MONTHS_PER_YEAR,
    QUARTER_CIRCLE_DEGREES,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
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
from skycalc.time_utils import Instant, is_valid_ymd
from skycalc.timestep import BACKWARD, FORWARD, Months, Seconds, Step, advance, is_forward

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?')

_CALENDAR_RE = re.compile(
    r'(?P<y>[+-]?\d{4,})-(?P<mo>\d{1,2})-(?P<d>\d{1,2})'
    r'(?:[t ](?P<h>\d{1,2}):(?P<mi>\d{2})(?::(?P<s>\d{2}))?)?'
)

_RFC3339_RE = re.compile(
    r'(?P<y>\d{4})-(?P<mo>\d{2})-(?P<d>\d{2})[t ]'
    r'(?P<h>\d{2}):(?P<mi>\d{2}):(?P<s>\d{2}(?:\.\d+)?)'
    r'(?P<tz>z|[+-]\d{2}:\d{2})'
)

# Angle suffixes in the order they are tried, with the sign they apply.
_DEGREE_SUFFIXES: tuple[tuple[str, float], ...] = (
    ('e', 1.0),
    ('w', -1.0),
    ('n', 1.0),
    ('s', -1.0),
    ('d', 1.0),
    ('deg', 1.0),
    ('°', 1.0),
)

# Step suffixes in the order they are tried.
_SECOND_SUFFIXES: tuple[tuple[str, float], ...] = (
    ('w', SECONDS_PER_WEEK),
    ('d', SECONDS_PER_DAY),
    ('h', SECONDS_PER_HOUR),
    ('min', SECONDS_PER_MINUTE),
    ('s', 1.0),
)


def _clean(token: str) -> str:
    return token.strip().lower()


def _to_number(text: str) -> float | None:
    """Parse a plain signed decimal, or None."""
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def _suffix_num(text: str, suffix: str) -> float | None:
    """Number preceding ``suffix`` in ``text``, or None if it is not exactly that."""
    if not text.endswith(suffix):
        return None
    return _to_number(text[: -len(suffix)])


def parse_number(token: str) -> float:
    """Parse a bare signed decimal number.

    Raises:
        InvalidNumber: If the token is not a finite decimal number.
    """
    value = _to_number(_clean(token))
    if value is None:
        raise InvalidNumber(token)
    return value


def parse_step(token: str) -> Step:
    """Parse a step such as ``3d``, ``1.5h``, ``2mon`` or ``1y``.

    Years and months give a calendar ``Months`` step; the other units give a
    fixed ``Seconds`` step. Years are converted to months before truncating
    toward zero, so ``1.5y`` is 18 months; a fractional month count such as
    ``2.7mon`` truncates to 2.

    Raises:
        BadInterval: If no unit suffix matches.
    """
    s = _clean(token)
    n = _suffix_num(s, 'y')
    if n is not None:
        return Months(int(n * MONTHS_PER_YEAR))
    n = _suffix_num(s, 'mon')
    if n is not None:
        return Months(int(n))
    for suffix, scale in _SECOND_SUFFIXES:
        n = _suffix_num(s, suffix)
        if n is not None:
            return Seconds(n * scale)
    raise BadInterval(token)


def _parse_calendar(s: str) -> Instant | None:
    match = _CALENDAR_RE.fullmatch(s)
    if match is None:
        return None
    year, month, day = int(match['y']), int(match['mo']), int(match['d'])
    hour = int(match['h'] or 0)
    minute = int(match['mi'] or 0)
    second = int(match['s'] or 0)
    if not is_valid_ymd(year, month, day) or hour > 23 or minute > 59 or second > 59:
        return None
    return Instant.from_calendar(year, month, day, hour, minute, second)


def _parse_rfc3339(s: str) -> Instant | None:
    match = _RFC3339_RE.fullmatch(s)
    if match is None:
        return None
    year, month, day = int(match['y']), int(match['mo']), int(match['d'])
    hour, minute, second = int(match['h']), int(match['mi']), float(match['s'])
    if not is_valid_ymd(year, month, day) or hour > 23 or minute > 59 or second >= 61.0:
        return None
    offset = 0.0
    tz = match['tz']
    if tz != 'z':
        off_h, off_m = int(tz[1:3]), int(tz[4:6])
        if off_h > 23 or off_m > 59:
            return None
        offset = off_h * SECONDS_PER_HOUR + off_m * SECONDS_PER_MINUTE
        if tz[0] == '-':
            offset = -offset
    local = Instant.from_calendar(year, month, day, hour, minute, second)
    return local.shifted(-offset)


def parse_date(token: str) -> Instant:
    """Parse a date literal.

    Accepted forms, tried in order until one succeeds:

    * ``now``
    * ``+STEP`` / ``-STEP``: now moved forward/backward by a step
    * ``@N``: Unix seconds
    * ``Nu``: Unix seconds; ``Njd`` or ``Nj``: Julian Date
    * RFC 3339 timestamps (``2000-01-06t12:00:00z``, ``...+05:30``)
    * ``YYYY-MM-DDtHH:MM:SS``, ``YYYY-MM-DDtHH:MM``, ``YYYY-MM-DD``

    Raises:
        InvalidDate: If no form matches.
    """
    s = _clean(token)
    if s == 'now':
        return Instant.now()
    if s[:1] in ('+', '-'):
        try:
            step = parse_step(s[1:])
        except BadInterval:
            logger.debug('Date %r is not a relative step', token)
        else:
            direction = FORWARD if s[0] == '+' else BACKWARD
            return advance(Instant.now(), step, direction)
    if s.startswith('@'):
        n = _to_number(s[1:])
        if n is not None:
            return Instant.from_unix(n)
    n = _suffix_num(s, 'u')
    if n is not None:
        return Instant.from_unix(n)
    for suffix in ('jd', 'j'):
        n = _suffix_num(s, suffix)
        if n is not None:
            return Instant.from_jd(n)
    date = _parse_rfc3339(s)
    if date is None:
        date = _parse_calendar(s)
    if date is None:
        raise InvalidDate(token)
    return date


def parse_angle(token: str) -> float:
    """Parse an angle with a unit suffix; return degrees.

    ``e``, ``n``, ``d``, ``deg`` and ``°`` are degrees; ``w`` and ``s`` are
    degrees negated (west, south); ``rad`` is radians.

    Raises:
        InvalidAngle: If no suffix matches.
    """
    s = _clean(token)
    for suffix, sign in _DEGREE_SUFFIXES:
        n = _suffix_num(s, suffix)
        if n is not None:
            return sign * n
    n = _suffix_num(s, 'rad')
    if n is not None:
        return math.degrees(n)
    raise InvalidAngle(token)


def parse_longitude(token: str) -> float:
    """Parse a bare number of degrees or an angle token."""
    n = _to_number(_clean(token))
    if n is not None:
        return n
    return parse_angle(token)


def parse_latitude(token: str) -> float:
    """Parse a latitude (bare degrees or angle token).

    Raises:
        LatitudeOutOfRange: If the magnitude exceeds 90 degrees.
        InvalidAngle: If the token is neither a number nor an angle.
    """
    value = parse_longitude(token)
    if abs(value) > QUARTER_CIRCLE_DEGREES:
        raise LatitudeOutOfRange(token)
    return value


def parse_latlong(token: str) -> tuple[float, float] | None:
    """Parse ``LAT,LONG`` into degrees, or ``none`` into None.

    Raises:
        BadCsv: If there are not exactly two fields.
    """
    s = _clean(token)
    if s == 'none':
        return None
    fields = s.split(',')
    if len(fields) != 2:
        raise BadCsv(token, 'expected LAT,LONG')
    return (parse_latitude(fields[0]), parse_longitude(fields[1]))


def parse_property(token: str, table: Mapping[str, Property] = PROPERTY_TABLE) -> Property:
    """Look up a property by name or alias (case-insensitive).

    Raises:
        UnknownProperty: If the name is not in the table.
    """
    prop = table.get(_clean(token))
    if prop is None:
        raise UnknownProperty(token)
    return prop


def parse_properties(
    tokens: Iterable[str], table: Mapping[str, Property] = PROPERTY_TABLE
) -> list[Property]:
    """Parse property tokens, each of which may be a comma-separated list."""
    props: list[Property] = []
    for token in tokens:
        for name in token.split(','):
            if name.strip():
                props.append(parse_property(name, table))
    return props


def parse_object(token: str, catalog: Mapping[str, CelObj]) -> CelObj:
    """Look up a celestial object by name.

    Raises:
        UnknownObject: If the name is not in the catalog.
    """
    obj = catalog.get(_clean(token))
    if obj is None:
        raise UnknownObject(token)
    return obj


def parse_ephemeris_range(token: str) -> tuple[Instant, Step, Instant]:
    """Parse ``START,STEP,END``.

    Raises:
        BadCsv: If there are not exactly three fields.
        BadInterval: If the step does not move forward in time.
        InvalidDate: From the start or end field.
    """
    fields = token.split(',')
    if len(fields) != 3:
        raise BadCsv(token, 'expected START,STEP,END')
    start = parse_date(fields[0])
    step = parse_step(fields[1])
    end = parse_date(fields[2])
    if not is_forward(step):
        raise BadInterval(fields[1], 'ephemeris step must move forward in time')
    return (start, step, end)
