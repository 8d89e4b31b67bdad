"""
Immutable snapshot of a player's hand.

A hand is thirteen concealed tiles, an optional just-drawn fourteenth tile
and the melds already declared. The per-kind count table is rebuilt from
these on every request and never cached.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from shanten.logic.counts import TileCounts
from shanten.logic.exceptions import InvalidHandSizeError
from shanten.logic.melds import Meld
from shanten.logic.tiles import TileKind, sort_tiles

logger = structlog.get_logger()

CONCEALED_TILE_COUNT = 13


class HandState(BaseModel):
    """
    Concealed tiles (kept sorted), drawn tile and declared melds.

    Construction with anything other than thirteen concealed tiles raises
    InvalidHandSizeError.
    """

    model_config = ConfigDict(frozen=True)

    concealed: tuple[TileKind, ...]
    drawn: TileKind | None = None
    melds: tuple[Meld, ...] = ()

    @field_validator("concealed")
    @classmethod
    def _validate_concealed(cls, v: tuple[TileKind, ...]) -> tuple[TileKind, ...]:
        if len(v) != CONCEALED_TILE_COUNT:
            raise InvalidHandSizeError(expected=CONCEALED_TILE_COUNT, actual=len(v))
        return sort_tiles(v)

    @property
    def tiles(self) -> tuple[TileKind, ...]:
        """Concealed tiles in order, followed by the drawn tile when there is one."""
        if self.drawn is None:
            return self.concealed
        return (*self.concealed, self.drawn)

    def summarize(self) -> TileCounts:
        """
        Count every tile in the concealed part, the melds and the drawn slot.

        Returns a fresh table on each call. Kinds above four copies are kept
        as-is and only reported in the log.
        """
        meld_tiles = [tile for meld in self.melds for tile in meld.tiles]
        counts = TileCounts.from_kinds([*self.tiles, *meld_tiles])

        over_limit = counts.kinds_over_limit()
        if over_limit:
            logger.warning(
                "tile kind held more than four times",
                kinds=[kind.notation for kind in over_limit],
            )
        return counts
