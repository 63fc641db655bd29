"""Positions, phases and rise/set times of the Sun, Moon and planets.

This package provides a command-line calculator for celestial-object
properties:
- Literal parsing: dates, angles, steps, observer lat/long, names
- Property resolution: equatorial, horizontal and ecliptic coordinates,
  distance, magnitude, phase, angular diameter, rise and set
- Ephemeris tables: a query repeated over stepped dates

Positions come from pyerfa's analytic theories with cspyce vector geometry;
rms-julian handles calendar and time-scale conversions.
"""

__all__: list[str] = []
