"""Exception types for literal parsing and property resolution.

Every failure here is caused by unsatisfiable input; none is retryable.
Internal invariant violations in the resolver are raised as AssertionError
and are deliberately not part of this hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skycalc.properties import Property


class SkyCalcError(ValueError):
    """Base class for all user-facing skycalc errors."""


class ParseError(SkyCalcError):
    """A text token could not be turned into a typed literal."""

    reason = 'Invalid literal'

    def __init__(self, token: str, detail: str | None = None) -> None:
        self.token = token
        self.detail = detail
        message = f'{self.reason}: {token!r}'
        if detail:
            message = f'{message} ({detail})'
        super().__init__(message)


class InvalidDate(ParseError):
    reason = 'Invalid date'


class InvalidAngle(ParseError):
    reason = 'Invalid angle'


class InvalidNumber(ParseError):
    reason = 'Bad number'


class BadInterval(ParseError):
    reason = 'Bad interval'


class BadCsv(ParseError):
    reason = 'Bad CSV'


class UnknownProperty(ParseError):
    reason = 'Unknown property'


class UnknownObject(ParseError):
    reason = 'Unknown object'


class LatitudeOutOfRange(ParseError):
    reason = 'Latitude over 90 degrees'


class ResolutionError(SkyCalcError):
    """A property could not be computed for the given object and frame.

    ``prop`` is filled in by the query runner with the property that failed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.prop: Property | None = None


class MissingLocation(ResolutionError):
    """Property needs an observer latitude/longitude and none was given."""

    def __init__(self, message: str = 'Need to specify a lat/long with -l') -> None:
        super().__init__(message)


class UndefinedForObject(ResolutionError):
    """Property has no meaning for this object (e.g. phase of the Sun)."""
