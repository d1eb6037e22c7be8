from __future__ import annotations

from dataclasses import dataclass


class PositionSpecError(ValueError):
    """A position list (``-f``/``-b``/``-c`` value) could not be parsed."""


@dataclass(slots=True)
class InvalidToken(PositionSpecError):
    token: str

    def __str__(self) -> str:
        return f'illegal list value: "{self.token}"'


@dataclass(slots=True)
class RangeOrderError(PositionSpecError):
    # 1-based, as typed by the user
    first: int
    second: int

    def __str__(self) -> str:
        return (
            f"First number in range ({self.first}) must be lower than "
            f"second number ({self.second})"
        )


class SourceError(Exception):
    """An input source failed; carries the source name and the underlying error."""


@dataclass(slots=True)
class SourceOpenError(SourceError):
    name: str
    cause: Exception

    def __str__(self) -> str:
        return f"{self.name}: {self.cause}"


@dataclass(slots=True)
class SourceReadError(SourceError):
    name: str
    cause: Exception

    def __str__(self) -> str:
        return f"{self.name}: {self.cause}"
