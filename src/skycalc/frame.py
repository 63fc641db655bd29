"""Reference frame: the instant and optional observer location of a query."""

from __future__ import annotations

from dataclasses import dataclass

from skycalc.time_utils import Instant


@dataclass(frozen=True)
class RefFrame:
    """Observation context.

    ``latlong`` is (latitude, longitude) in degrees, north and east positive,
    or None when the observer location is unknown.
    """

    date: Instant
    latlong: tuple[float, float] | None = None

    @property
    def northern(self) -> bool:
        """Observer hemisphere; northern when the location is unknown."""
        if self.latlong is None:
            return True
        return self.latlong[0] >= 0.0
