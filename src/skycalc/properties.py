"""Requested property kinds and their accepted names."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Property(Enum):
    """A property that can be asked of a celestial object; value is the canonical name."""

    EQUATORIAL = 'equ'
    HORIZONTAL = 'horiz'
    ECLIPTIC = 'ecl'
    DISTANCE = 'dist'
    MAGNITUDE = 'mag'
    PHASE_DEFAULT = 'phase'
    PHASE_NAME = 'phasename'
    PHASE_EMOJI = 'phaseemoji'
    ILLUM_FRAC = 'illumfrac'
    ANG_DIA = 'angdia'
    RISE = 'rise'
    SET = 'set'

    @property
    def label(self) -> str:
        """Human-readable name used in table output and error messages."""
        return PROPERTY_LABELS[self]

    def __str__(self) -> str:
        return self.label


PROPERTY_LABELS: Mapping[Property, str] = MappingProxyType(
    {
        Property.EQUATORIAL: 'Coordinates (RA/De)',
        Property.HORIZONTAL: 'Coordinates (Azi/Alt)',
        Property.ECLIPTIC: 'Coordinates (Ecliptic)',
        Property.DISTANCE: 'Distance',
        Property.MAGNITUDE: 'Magnitude',
        Property.PHASE_DEFAULT: 'Phase',
        Property.PHASE_EMOJI: 'Phase Emoji',
        Property.PHASE_NAME: 'Phase Name',
        Property.ILLUM_FRAC: 'Illuminated Frac.',
        Property.ANG_DIA: 'Angular Diameter',
        Property.RISE: 'Rise Time',
        Property.SET: 'Set Time',
    }
)

_ALIASES: dict[Property, tuple[str, ...]] = {
    Property.EQUATORIAL: ('equ', 'equa', 'equatorial'),
    Property.HORIZONTAL: ('horiz', 'horizontal'),
    Property.ECLIPTIC: ('ecl', 'ecliptic'),
    Property.DISTANCE: ('dist', 'distance'),
    Property.MAGNITUDE: ('mag', 'magnitude', 'brightness'),
    Property.PHASE_DEFAULT: ('phase',),
    Property.PHASE_EMOJI: ('phaseemoji',),
    Property.PHASE_NAME: ('phasename',),
    Property.ILLUM_FRAC: ('illumfrac', 'phasepercent', 'phaseprecent'),
    Property.ANG_DIA: ('angdia',),
    Property.RISE: ('rise',),
    Property.SET: ('set',),
}

# Lower-case alias -> Property
PROPERTY_TABLE: Mapping[str, Property] = MappingProxyType(
    {alias: prop for prop, aliases in _ALIASES.items() for alias in aliases}
)
