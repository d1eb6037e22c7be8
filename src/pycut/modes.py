from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .positions import PositionList


@dataclass(frozen=True, slots=True)
class Fields:
    positions: PositionList
    name: ClassVar[str] = "fields"


@dataclass(frozen=True, slots=True)
class Bytes:
    positions: PositionList
    name: ClassVar[str] = "bytes"


@dataclass(frozen=True, slots=True)
class Chars:
    positions: PositionList
    name: ClassVar[str] = "chars"


ExtractionMode = Fields | Bytes | Chars


def mode_from_options(
    *,
    fields: PositionList | None = None,
    bytes_: PositionList | None = None,
    chars: PositionList | None = None,
) -> ExtractionMode:
    """Build the single extraction mode from three optional position lists."""
    candidates: list[ExtractionMode] = []
    if fields is not None:
        candidates.append(Fields(fields))
    if bytes_ is not None:
        candidates.append(Bytes(bytes_))
    if chars is not None:
        candidates.append(Chars(chars))
    if len(candidates) != 1:
        raise ValueError("exactly one of fields, bytes or chars must be given")
    return candidates[0]
