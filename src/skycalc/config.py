"""Configuration: leap-second kernel and CLI defaults from environment."""

import os
from pathlib import Path

DEFAULT_LATLONG = 'none'
DEFAULT_FORMAT = 'space'
OUTPUT_FORMATS = ('space', 'csv', 'table')


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then a .tls file under SPICE_PATH. None means
    rms-julian's bundled LSK is used.

    Returns:
        Path string to LSK file, or None.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    spice_path = os.environ.get('SPICE_PATH', '').strip()
    if not spice_path:
        return None
    base = Path(spice_path)
    for name in ('naif0012.tls', 'naif0011.tls', 'naif0010.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return None


def get_default_latlong() -> str:
    """Return the observer location token used when -l is not given (SKYCALC_LATLONG).

    Returns:
        Lat/long token, e.g. ``'51.5n,0.1w'`` or ``'none'``.
    """
    return os.environ.get('SKYCALC_LATLONG', '').strip() or DEFAULT_LATLONG


def get_default_format() -> str:
    """Return the output format used when -T is not given (SKYCALC_FORMAT).

    Unknown values fall back to ``'space'``.

    Returns:
        One of OUTPUT_FORMATS.
    """
    fmt = os.environ.get('SKYCALC_FORMAT', '').strip().lower()
    if fmt in OUTPUT_FORMATS:
        return fmt
    return DEFAULT_FORMAT
