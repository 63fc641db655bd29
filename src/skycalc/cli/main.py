"""CLI entry point: skycalc OBJECT PROPERTY[,PROPERTY...] with optional ephemeris table."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from skycalc.catalog import read_catalog
from skycalc.config import OUTPUT_FORMATS, get_default_format, get_default_latlong
from skycalc.errors import ResolutionError, SkyCalcError
from skycalc.frame import RefFrame
from skycalc.parse import (
    parse_date,
    parse_ephemeris_range,
    parse_latlong,
    parse_object,
    parse_properties,
)
from skycalc.query import run, run_ephemeris
from skycalc.record import write_values

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or SKYCALC_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('SKYCALC_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='skycalc',
        description='Positions, phases and rise/set times of the Sun, Moon and planets.',
    )
    parser.add_argument('object', help='sun, moon, mercury .. pluto')
    parser.add_argument(
        'properties',
        nargs='+',
        help='Properties, space- or comma-separated (e.g. equ,horiz,phase,rise)',
    )
    parser.add_argument(
        '-l',
        '--latlong',
        type=str,
        default=None,
        help='Observer LAT,LONG (e.g. 51.48n,0.0e or 40.7,-74) or none; env: SKYCALC_LATLONG',
    )
    parser.add_argument(
        '-d',
        '--date',
        type=str,
        default='now',
        help='Date: now, +3d, -1y, @UNIX, 2451545j, 2000-01-06t12:00, RFC 3339',
    )
    parser.add_argument(
        '-T',
        '--format',
        type=str,
        default=None,
        choices=OUTPUT_FORMATS,
        help='Output format; env: SKYCALC_FORMAT',
    )
    parser.add_argument(
        '-E',
        '--ephem',
        type=str,
        default=None,
        metavar='START,STEP,END',
        help='Ephemeris table from START to END (exclusive), e.g. 2024-01-01,1d,2024-02-01',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    return parser


def _query_cmd(args: argparse.Namespace, out: TextIO) -> int:
    """Parse every literal, then run the single query or the ephemeris table.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    fmt = args.format or get_default_format()
    try:
        obj = parse_object(args.object, read_catalog())
        props = parse_properties(args.properties)
        latlong = parse_latlong(args.latlong if args.latlong is not None else get_default_latlong())
        date = parse_date(args.date)
        ephem = parse_ephemeris_range(args.ephem) if args.ephem is not None else None
    except SkyCalcError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    frame = RefFrame(date=date, latlong=latlong)
    logger.debug('Query %s %s in frame %s', obj.name, [p.value for p in props], frame)
    try:
        if ephem is None:
            write_values(out, props, run(obj, props, frame), fmt)
            return 0
        start, step, end = ephem
        for i, (row_date, values) in enumerate(run_ephemeris(obj, props, frame, start, step, end)):
            if fmt == 'table' and i > 0:
                out.write('\n')
            write_values(out, props, values, fmt, date=row_date)
        return 0
    except ResolutionError as e:
        if e.prop is not None:
            print(f'Error on property {e.prop.label}: {e}', file=sys.stderr)
        else:
            print(f'Error: {e}', file=sys.stderr)
        return 1
    except SkyCalcError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the skycalc CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return _query_cmd(args, sys.stdout)


if __name__ == '__main__':
    sys.exit(main())
