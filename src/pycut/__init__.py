from __future__ import annotations

from loguru import logger

from .api import CutResult, cut_source, cut_sources
from .errors import (
    InvalidToken,
    PositionSpecError,
    RangeOrderError,
    SourceError,
    SourceOpenError,
    SourceReadError,
)
from .extract import extract_bytes, extract_chars, extract_fields
from .modes import Bytes, Chars, ExtractionMode, Fields, mode_from_options
from .parser import parse_positions
from .positions import PositionList, PositionRange, format_positions

__version__ = "0.1.0"

# Silent as a library; the command line turns logging on.
logger.disable("pycut")

__all__ = [
    "Bytes",
    "Chars",
    "CutResult",
    "ExtractionMode",
    "Fields",
    "InvalidToken",
    "PositionList",
    "PositionRange",
    "PositionSpecError",
    "RangeOrderError",
    "SourceError",
    "SourceOpenError",
    "SourceReadError",
    "cut_source",
    "cut_sources",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
    "format_positions",
    "mode_from_options",
    "parse_positions",
]
