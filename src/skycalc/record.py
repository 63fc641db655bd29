"""Output record formatting: space-separated, CSV and key/value table."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from skycalc.properties import Property
from skycalc.time_utils import Instant
from skycalc.values import Value, render, render_date

DATE_LABEL = 'Date'


class Record:
    """Line buffer: append fields with a separator, then write the line."""

    def __init__(self, separator: str = ' ') -> None:
        """Start an empty record whose fields are joined by ``separator``."""
        self._parts: list[str] = []
        self._separator = separator

    def init(self) -> None:
        """Clear the record."""
        self._parts = []

    def append(self, string: str, width: int = 0) -> None:
        """Append a field, left-justified to ``width`` characters."""
        self._parts.append(string.ljust(width))

    def get_line(self) -> str:
        """Return current record as a string without writing or re-initializing."""
        return self._separator.join(self._parts).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the current record line and re-initialize."""
        if self._parts:
            stream.write(self.get_line() + '\n')
        self.init()


def write_values(
    stream: TextIO,
    props: Sequence[Property],
    values: Sequence[Value],
    fmt: str = 'space',
    date: Instant | None = None,
) -> None:
    """Write one query result in the given format.

    Parameters:
        stream: Output stream.
        props: Requested properties, in order (labels for the table format).
        values: Resolved values, same order as ``props``.
        fmt: ``'space'``, ``'csv'`` or ``'table'``.
        date: Row date for ephemeris output; leads the row when given.

    Raises:
        ValueError: If ``fmt`` is not a known format.
    """
    if fmt == 'table':
        rows: list[tuple[str, str]] = []
        if date is not None:
            rows.append((DATE_LABEL, render_date(date)))
        rows.extend((prop.label, render(value)) for prop, value in zip(props, values))
        width = max((len(label) for label, _ in rows), default=0) + 1
        record = Record(' ')
        for label, text in rows:
            record.append(label + ':', width)
            record.append(text)
            record.write(stream)
        return
    if fmt == 'space':
        record = Record(' ')
    elif fmt == 'csv':
        record = Record(',')
    else:
        raise ValueError(f'Unknown output format {fmt!r}; expected space, csv or table')
    if date is not None:
        record.append(render_date(date))
    for value in values:
        record.append(render(value))
    record.write(stream)
