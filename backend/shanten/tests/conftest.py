from __future__ import annotations

from typing import TYPE_CHECKING

from shanten.logic.counts import TileCounts
from shanten.logic.notation import parse_hand, parse_tiles

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shanten.logic.hand import HandState
    from shanten.logic.melds import Meld


# ============================================================================
# Test State Builder Helpers
# ============================================================================


def create_hand(notation: str, *, melds: Sequence[Meld] = ()) -> HandState:
    """Build a HandState from notation such as ``"123m456p789s1112z 2z"``."""
    return parse_hand(notation, melds)


def create_counts(notation: str) -> TileCounts:
    """Build a count table from notation groups, without the 13-tile hand requirement."""
    return TileCounts.from_kinds(parse_tiles(notation))
