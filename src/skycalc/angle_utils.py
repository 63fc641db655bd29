"""Angle normalization and sexagesimal formatting."""

from __future__ import annotations

from skycalc.constants import (
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HALF_CIRCLE_DEGREES,
    QUARTER_CIRCLE_DEGREES,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def normalize_degrees(value: float) -> float:
    """Fold an angle into [0, 360)."""
    folded = value % DEGREES_PER_CIRCLE
    # -1e-18 % 360 rounds to 360.0
    if folded >= DEGREES_PER_CIRCLE:
        folded = 0.0
    return folded


def latitude_degrees(value: float) -> float:
    """Wrap an angle into [-90, 90] as a latitude.

    The angle is first folded into [-180, 180); values beyond the poles are
    reflected back (100 becomes 80, -100 becomes -80).
    """
    folded = normalize_degrees(value + HALF_CIRCLE_DEGREES) - HALF_CIRCLE_DEGREES
    if folded > QUARTER_CIRCLE_DEGREES:
        return HALF_CIRCLE_DEGREES - folded
    if folded < -QUARTER_CIRCLE_DEGREES:
        return -HALF_CIRCLE_DEGREES - folded
    return folded


def degminsec(value: float, ndecimal: int = 1) -> tuple[int, int, float]:
    """Split an unsigned angle into degrees, arcminutes and arcseconds.

    Seconds are rounded to ``ndecimal`` places first so that carries
    propagate (59.96" becomes 1' 00.0").
    """
    ntens = 10**ndecimal
    units = round(abs(value) * ARCSEC_PER_DEGREE * ntens)
    isec, frac = divmod(units, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    return (ideg, imin, isec + frac / ntens)


def clock(value: float) -> tuple[int, int, int]:
    """Angle in degrees as hours, minutes and whole seconds of time (truncated)."""
    total = int(normalize_degrees(value) / DEGREES_PER_HOUR_RA * SECONDS_PER_HOUR)
    hours, rest = divmod(total, int(SECONDS_PER_HOUR))
    minutes, seconds = divmod(rest, int(SECONDS_PER_MINUTE))
    return (hours, minutes, seconds)


def dms_string(value: float, signed: bool = False) -> str:
    """Format degrees as ``DD°MM′SS.s″``, with an explicit sign when ``signed``.

    Parameters:
        value: Angle in degrees. Unsigned output uses the magnitude.
        signed: Prefix ``+`` or ``-`` from the sign of ``value``.

    Returns:
        Formatted string (e.g. ``"+12°30′45.1″"``).
    """
    ideg, imin, secs = degminsec(value)
    out = f'{ideg:02d}°{imin:02d}′{secs:04.1f}″'
    if signed:
        sign = '-' if value < 0 else '+'
        out = sign + out
    return out


def hms_string(value: float) -> str:
    """Format degrees as an hour angle ``HHhMMmSSs`` (seconds truncated)."""
    hours, minutes, seconds = clock(value)
    return f'{hours:02d}h{minutes:02d}m{seconds:02d}s'
