"""
Per-kind tile frequency table used by every shanten evaluator.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from shanten.logic.exceptions import ShantenInvariantError
from shanten.logic.tiles import MAX_COPIES, TILE_KIND_COUNT, TileKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class TileCounts:
    """
    Mutable 34-slot table mapping each tile kind to the number of copies held.

    No ceiling is enforced: a kind may hold more than four copies when the
    input hand is malformed. The shanten search takes blocks out of the table
    in place and restores them after each branch, so every evaluator works on
    its own instance.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Iterable[int] | None = None) -> None:
        values = [0] * TILE_KIND_COUNT if counts is None else list(counts)
        if len(values) != TILE_KIND_COUNT:
            raise ValueError(f"tile counts must have {TILE_KIND_COUNT} slots, got {len(values)}")
        if any(v < 0 for v in values):
            raise ValueError("tile counts must be non-negative")
        self._counts = values

    @classmethod
    def from_kinds(cls, kinds: Iterable[TileKind]) -> TileCounts:
        """Build a table with one count per occurrence of each kind."""
        counts = cls()
        for kind in kinds:
            counts._counts[kind] += 1
        return counts

    def __getitem__(self, kind: int) -> int:
        return self._counts[kind]

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return TILE_KIND_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileCounts):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        held = ", ".join(f"{TileKind(i).notation}={c}" for i, c in enumerate(self._counts) if c)
        return f"TileCounts({held})"

    def take(self, kind: int, amount: int = 1) -> None:
        """Remove ``amount`` copies of ``kind`` in place."""
        if self._counts[kind] < amount:
            raise ShantenInvariantError(
                f"cannot take {amount} of {TileKind(kind).notation}, only {self._counts[kind]} held",
            )
        self._counts[kind] -= amount

    def restore(self, kind: int, amount: int = 1) -> None:
        """Give back ``amount`` copies of ``kind`` previously taken."""
        self._counts[kind] += amount

    def copy(self) -> TileCounts:
        return TileCounts(self._counts)

    def total(self) -> int:
        return sum(self._counts)

    def to_tuple(self) -> tuple[int, ...]:
        return tuple(self._counts)

    def kinds_over_limit(self) -> tuple[TileKind, ...]:
        """Kinds held more often than the physical four copies."""
        return tuple(TileKind(i) for i, c in enumerate(self._counts) if c > MAX_COPIES)

    @contextmanager
    def taken(self, *kinds: int) -> Iterator[TileCounts]:
        """
        Take one copy of each given kind for the duration of the block.

        Repeat a kind to take several copies. Everything taken is given back
        on exit, including when a take fails part way through.
        """
        removed: list[int] = []
        try:
            for kind in kinds:
                self.take(kind)
                removed.append(kind)
            yield self
        finally:
            for kind in removed:
                self.restore(kind)
