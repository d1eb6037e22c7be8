from __future__ import annotations

from loguru import logger

from .errors import InvalidToken, RangeOrderError
from .positions import PositionList, PositionRange


_DIGITS = frozenset("0123456789")


def _is_digits(text: str) -> bool:
    # str.isdigit() and int() also accept non-ASCII digits, whitespace and "_".
    return bool(text) and all(ch in _DIGITS for ch in text)


def parse_index(token: str) -> int:
    """Convert a 1-based position token to a 0-based index.

    Raises InvalidToken echoing the token verbatim.
    """
    if token.startswith("+") or not _is_digits(token):
        raise InvalidToken(token)
    value = int(token)
    if value == 0:
        raise InvalidToken(token)
    return value - 1


def _parse_range(token: str) -> PositionRange:
    first, sep, second = token.partition("-")
    if not sep or not _is_digits(first) or not _is_digits(second):
        raise InvalidToken(token)

    lo = parse_index(first)
    hi = parse_index(second)
    if lo >= hi:
        raise RangeOrderError(lo + 1, hi + 1)
    return PositionRange(lo, hi + 1)


def parse_token(token: str) -> PositionRange:
    """Parse one comma-separated element: ``N`` or ``N1-N2``."""
    if "-" in token:
        return _parse_range(token)
    index = parse_index(token)
    return PositionRange(index, index + 1)


def parse_positions(spec: str) -> PositionList:
    """Parse a position list such as ``"1,7,3-5"``.

    Ranges come back in the order given; overlaps and duplicates are kept,
    so ``"1,1"`` selects the first position twice.

    >>> parse_positions("1,7,3-5")
    (PositionRange(0..1), PositionRange(6..7), PositionRange(2..5))
    """
    positions = tuple(parse_token(token) for token in spec.split(","))
    logger.debug("parsed position list {!r} into {} range(s)", spec, len(positions))
    return positions
