from __future__ import annotations

import codecs
import sys
from collections.abc import Sequence

from .positions import PositionList


_ENDIAN = "le" if sys.byteorder == "little" else "be"
# Codecs that write a byte order mark; their BOM-free forms count only the line's bytes.
_BOM_FREE = {
    "utf-8-sig": "utf-8",
    "utf-16": f"utf-16-{_ENDIAN}",
    "utf-32": f"utf-32-{_ENDIAN}",
}


def bom_free_encoding(encoding: str) -> str:
    name = codecs.lookup(encoding).name
    return _BOM_FREE.get(name, name)


def extract_chars(line: str, positions: PositionList) -> str:
    """Select characters (code points) from ``line``.

    Ranges past the end of the line contribute nothing.
    """
    return "".join(line[r.as_slice()] for r in positions)


def extract_bytes(line: str, positions: PositionList, *, encoding: str = "utf-8") -> str:
    """Select bytes from the encoded form of ``line``.

    A range may split a multi-byte character; the result is decoded with the
    "replace" handler, so broken sequences come out as U+FFFD instead of raising.
    """
    encoding = bom_free_encoding(encoding)
    raw = line.encode(encoding)
    selected = b"".join(raw[r.as_slice()] for r in positions)
    return selected.decode(encoding, errors="replace")


def extract_fields(record: Sequence[str], positions: PositionList) -> list[str]:
    fields: list[str] = []
    for r in positions:
        fields.extend(record[r.as_slice()])
    return fields
