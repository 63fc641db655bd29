"""Stepping instants by fixed durations or calendar months."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from skycalc.constants import MONTHS_PER_YEAR
from skycalc.errors import BadInterval
from skycalc.time_utils import Instant, day_from_ymd

FORWARD = 1
BACKWARD = -1


@dataclass(frozen=True)
class Seconds:
    """A fixed-length step."""

    seconds: float


@dataclass(frozen=True)
class Months:
    """A calendar step; month (and year) lengths vary."""

    months: int


Step = Union[Seconds, Months]


def add_months(date: Instant, months: int) -> Instant:
    """Move a date by whole calendar months, keeping day-of-month and time of day.

    Month overflow rolls into years. A day-of-month past the end of the target
    month is handled by rms-julian's ``day_from_ymd``.
    """
    year, month, day = date.calendar()
    total = month - 1 + months
    year += total // MONTHS_PER_YEAR
    month = total % MONTHS_PER_YEAR + 1
    return Instant(day_from_ymd(year, month, day), date.sec)


def advance(date: Instant, step: Step, direction: int = FORWARD) -> Instant:
    """Move ``date`` by one ``step`` in ``direction`` (FORWARD or BACKWARD)."""
    if isinstance(step, Seconds):
        return date.shifted(direction * step.seconds)
    return add_months(date, direction * step.months)


def step_forward(date: Instant, step: Step) -> Instant:
    return advance(date, step, FORWARD)


def step_back(date: Instant, step: Step) -> Instant:
    return advance(date, step, BACKWARD)


def is_forward(step: Step) -> bool:
    """True if the step moves time forward."""
    if isinstance(step, Seconds):
        return step.seconds > 0
    return step.months > 0


def ephemeris_dates(start: Instant, step: Step, end: Instant) -> Iterator[Instant]:
    """Yield ``start`` and each following step while strictly before ``end``.

    Raises:
        BadInterval: If the step does not move forward.
    """
    if not is_forward(step):
        raise BadInterval(repr(step), 'ephemeris step must move forward in time')
    date = start
    while date.jd() < end.jd():
        yield date
        date = advance(date, step, FORWARD)
