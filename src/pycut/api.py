from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from loguru import logger

from .errors import SourceOpenError
from .extract import extract_bytes, extract_chars, extract_fields
from .modes import Bytes, Chars, ExtractionMode, Fields
from .positions import format_positions
from .sources import STDIN, RecordWriter, open_source, read_lines, read_records


@dataclass(slots=True)
class CutResult:
    processed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)  # could not be opened

    @property
    def ok(self) -> bool:
        return not self.failed


def cut_source(
    stream: TextIO,
    name: str,
    mode: ExtractionMode,
    *,
    out: TextIO,
    delimiter: str = "\t",
    encoding: str = "utf-8",
) -> None:
    """Run one opened source through ``mode``, writing one output line per input line/record."""
    if isinstance(mode, Chars):
        for line in read_lines(stream, name):
            out.write(extract_chars(line, mode.positions) + "\n")
    elif isinstance(mode, Bytes):
        for line in read_lines(stream, name):
            out.write(extract_bytes(line, mode.positions, encoding=encoding) + "\n")
    elif isinstance(mode, Fields):
        writer = RecordWriter(out, delimiter)
        for record in read_records(stream, name, delimiter):
            writer.write(extract_fields(record, mode.positions))
    else:
        raise RuntimeError(f"unsupported extraction mode: {type(mode)!r}")


def cut_sources(
    sources: Iterable[str],
    mode: ExtractionMode,
    *,
    delimiter: str = "\t",
    encoding: str = "utf-8",
    out: TextIO | None = None,
    err: TextIO | None = None,
    stdin: TextIO | None = None,
) -> CutResult:
    """Cut every source in order.

    A source that cannot be opened is reported to ``err`` as ``"<name>: <error>"``
    and skipped. A read error part way through a source propagates as
    SourceReadError and ends the run.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    names = list(sources) or [STDIN]
    result = CutResult()

    logger.debug(
        "cutting {} source(s) by {} {}",
        len(names),
        mode.name,
        format_positions(mode.positions),
    )
    for name in names:
        try:
            with open_source(name, encoding=encoding, stdin=stdin) as stream:
                logger.debug("reading {}", name)
                cut_source(
                    stream,
                    name,
                    mode,
                    out=out,
                    delimiter=delimiter,
                    encoding=encoding,
                )
        except SourceOpenError as e:
            logger.info("skipping {}: {}", name, e.cause)
            err.write(f"{e}\n")
            result.failed.append(name)
            continue
        result.processed.append(name)
    return result
