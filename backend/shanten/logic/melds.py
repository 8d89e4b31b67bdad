"""
Immutable meld representation.

Melds are supplied fully formed by whoever declared them; the engine only
counts their tiles and never checks that the group is a legal call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from shanten.logic.enums import MeldKind, MeldSource
from shanten.logic.tiles import TileKind

_SET_MELD_TILES = 3
_QUAD_MELD_TILES = 4


class Meld(BaseModel):
    """
    Declared tile group: triplet, sequence or quad.

    Tiles are stored sorted. Only the tile count is validated against
    the meld kind (3 tiles for triplet/sequence, 4 for quad).
    """

    model_config = ConfigDict(frozen=True)

    tiles: tuple[TileKind, ...]
    kind: MeldKind
    source: MeldSource = MeldSource.SELF_DRAW

    @field_validator("tiles")
    @classmethod
    def _sort_tiles(cls, v: tuple[TileKind, ...]) -> tuple[TileKind, ...]:
        return tuple(sorted(v))

    @model_validator(mode="after")
    def _validate_tile_count(self) -> Meld:
        expected = _QUAD_MELD_TILES if self.kind is MeldKind.QUAD else _SET_MELD_TILES
        if len(self.tiles) != expected:
            raise ValueError(f"{self.kind.value} meld must have {expected} tiles, got {len(self.tiles)}")
        return self

    @property
    def is_open(self) -> bool:
        """A meld is open unless every tile was self-drawn."""
        return self.source is not MeldSource.SELF_DRAW

    @classmethod
    def triplet(cls, kind: TileKind, source: MeldSource = MeldSource.SELF_DRAW) -> Meld:
        return cls(tiles=(kind,) * _SET_MELD_TILES, kind=MeldKind.TRIPLET, source=source)

    @classmethod
    def quad(cls, kind: TileKind, source: MeldSource = MeldSource.SELF_DRAW) -> Meld:
        return cls(tiles=(kind,) * _QUAD_MELD_TILES, kind=MeldKind.QUAD, source=source)

    @classmethod
    def sequence(cls, lowest: TileKind, source: MeldSource = MeldSource.LEFT_NEIGHBOR) -> Meld:
        """Build a run starting at ``lowest``; raises ValueError when the run leaves the suit."""
        middle = lowest.shifted(1)
        highest = lowest.shifted(2)
        if middle is None or highest is None:
            raise ValueError(f"no sequence starts at {lowest.notation}")
        return cls(tiles=(lowest, middle, highest), kind=MeldKind.SEQUENCE, source=source)
