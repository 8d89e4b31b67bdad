"""
Tile kind representation for the shanten engine.

Kinds use the 34-format: one index per distinct tile identity,
man 1-9 (0-8), pin 1-9 (9-17), sou 1-9 (18-26), honors (27-33).
"""

from __future__ import annotations

from enum import IntEnum

from shanten.logic.enums import TileSuit

# tile ranges in 34-format (each unique tile type)
MAN_34_START = 0
MAN_34_END = 8
PIN_34_START = 9
PIN_34_END = 17
SOU_34_START = 18
SOU_34_END = 26
HONOR_34_START = 27
HONOR_34_END = 33

TILE_KIND_COUNT = 34
SUIT_SIZE = 9
HONOR_COUNT = 7
MAX_COPIES = 4

# tile ids in 136-format (4 copies of each kind), as produced by mahjong.tile.TilesConverter
TILE_ID_MIN = 0
TILE_ID_MAX = 135

_NUMERIC_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)


class TileKind(IntEnum):
    """One of the 34 distinct tile identities, ordered suit-major then rank."""

    M1 = 0
    M2 = 1
    M3 = 2
    M4 = 3
    M5 = 4
    M6 = 5
    M7 = 6
    M8 = 7
    M9 = 8
    P1 = 9
    P2 = 10
    P3 = 11
    P4 = 12
    P5 = 13
    P6 = 14
    P7 = 15
    P8 = 16
    P9 = 17
    S1 = 18
    S2 = 19
    S3 = 20
    S4 = 21
    S5 = 22
    S6 = 23
    S7 = 24
    S8 = 25
    S9 = 26
    EAST = 27
    SOUTH = 28
    WEST = 29
    NORTH = 30
    HAKU = 31  # white dragon
    HATSU = 32  # green dragon
    CHUN = 33  # red dragon

    @property
    def suit(self) -> TileSuit:
        if self.value >= HONOR_34_START:
            return TileSuit.HONOR
        return _NUMERIC_SUITS[self.value // SUIT_SIZE]

    @property
    def rank(self) -> int:
        """Rank inside the suit: 1-9 for numeric suits, 1-7 for honors."""
        if self.value >= HONOR_34_START:
            return self.value - HONOR_34_START + 1
        return self.value % SUIT_SIZE + 1

    @property
    def is_honor(self) -> bool:
        return self.value >= HONOR_34_START

    @property
    def is_terminal(self) -> bool:
        """Rank 1 or 9 of a numeric suit."""
        return not self.is_honor and self.rank in (1, SUIT_SIZE)

    @property
    def is_terminal_or_honor(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def notation(self) -> str:
        """Single tile in hand notation, e.g. ``5m`` or ``3z``."""
        return f"{self.rank}{self.suit.value}"

    def shifted(self, offset: int) -> TileKind | None:
        """
        Return the kind ``offset`` ranks away in the same numeric suit.

        Honors have no neighbours and ranks never wrap past 1 or 9,
        so both cases return None.
        """
        if self.is_honor:
            return None
        if not (1 <= self.rank + offset <= SUIT_SIZE):
            return None
        return TileKind(self.value + offset)

    @classmethod
    def from_suit_rank(cls, suit: TileSuit, rank: int) -> TileKind:
        if suit is TileSuit.HONOR:
            if not (1 <= rank <= HONOR_COUNT):
                raise ValueError(f"honor rank must be in [1, {HONOR_COUNT}], got {rank}")
            return cls(HONOR_34_START + rank - 1)
        if not (1 <= rank <= SUIT_SIZE):
            raise ValueError(f"rank must be in [1, {SUIT_SIZE}], got {rank}")
        return cls(_NUMERIC_SUITS.index(suit) * SUIT_SIZE + rank - 1)


# terminal (1 and 9 of each suit) and honor kinds, in 34-format order
TERMINAL_OR_HONOR_KINDS: tuple[TileKind, ...] = tuple(kind for kind in TileKind if kind.is_terminal_or_honor)


def tile_to_34(tile_id: int) -> TileKind:
    """
    Convert 136-format tile ID to its tile kind.

    In 136-format, each tile type has 4 copies (tile_id // 4 gives the type).
    """
    if not (TILE_ID_MIN <= tile_id <= TILE_ID_MAX):
        raise ValueError(f"tile_id must be in [{TILE_ID_MIN}, {TILE_ID_MAX}], got {tile_id}")
    return TileKind(tile_id // MAX_COPIES)


def sort_tiles(tiles: list[TileKind] | tuple[TileKind, ...]) -> tuple[TileKind, ...]:
    """Sort tiles in suit-major, rank-minor order."""
    return tuple(sorted(tiles))
