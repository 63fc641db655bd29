"""Name → celestial object table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Union

from skycalc.astro.bodies import MOON, PLANETS, SUN, Moon, Planet, Sun

CelObj = Union[Sun, Moon, Planet]


def read_catalog() -> Mapping[str, CelObj]:
    """Build the read-only catalog of known objects, keyed by lower-case name."""
    table: dict[str, CelObj] = {'sun': SUN, 'moon': MOON}
    for planet in PLANETS:
        table[planet.name] = planet
    return MappingProxyType(table)
