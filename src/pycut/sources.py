from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TextIO

from .errors import SourceOpenError, SourceReadError


STDIN = "-"


@contextmanager
def open_source(
    name: str,
    *,
    encoding: str = "utf-8",
    stdin: TextIO | None = None,
) -> Iterator[TextIO]:
    """Open an input source for text reading.

    ``"-"`` selects standard input, which is never closed. Only ``\\n`` ends a
    line and nothing is translated, so ``\\r\\n`` and lone ``\\r`` reach the
    extractors as written.
    """
    if name == STDIN:
        if stdin is not None:
            yield stdin
            return
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding=encoding, newline="\n")
        try:
            yield wrapper
        finally:
            # Leave sys.stdin.buffer open for later "-" sources.
            wrapper.detach()
        return

    try:
        f = open(name, encoding=encoding, newline="\n")
    except OSError as e:
        raise SourceOpenError(name, e) from e
    with f:
        yield f


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(stream: TextIO, name: str) -> Iterator[str]:
    """Yield lines without their terminator; read failures become SourceReadError."""
    try:
        for line in stream:
            yield _strip_eol(line)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(name, e) from e


def read_records(stream: TextIO, name: str, delimiter: str) -> Iterator[list[str]]:
    """Yield delimited records; there is no header row and quoted fields may hold the delimiter.

    Blank lines are not records and are skipped.
    """
    reader = csv.reader(stream, delimiter=delimiter)
    try:
        yield from (record for record in reader if record)
    except (csv.Error, OSError, UnicodeDecodeError) as e:
        raise SourceReadError(name, e) from e


class RecordWriter:
    """Writes records with the same delimiter and quoting rules the reader understands."""

    __slots__ = ("_writer",)

    def __init__(self, out: TextIO, delimiter: str) -> None:
        self._writer = csv.writer(
            out,
            delimiter=delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )

    def write(self, fields: Sequence[str]) -> None:
        self._writer.writerow(fields)
