from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PositionRange:
    """A selected block of positions, half-open [start, end).

    Indices are 0-based; to_spec() renders the 1-based form users type.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"range start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"range end must be > start, got [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def to_spec(self) -> str:
        if len(self) == 1:
            return str(self.end)
        return f"{self.start + 1}-{self.end}"

    def __repr__(self) -> str:
        return f"PositionRange({self.start}..{self.end})"


PositionList = tuple[PositionRange, ...]


def format_positions(positions: PositionList) -> str:
    return ",".join(r.to_spec() for r in positions)
