"""Shanten toward the thirteen orphans shape."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shanten.logic.tiles import TERMINAL_OR_HONOR_KINDS

if TYPE_CHECKING:
    from shanten.logic.counts import TileCounts

# 13 distinct terminal/honor kinds plus one duplicate
THIRTEEN_ORPHANS_TILE_COUNT = 14


def calculate_thirteen_orphans_shanten(counts: TileCounts) -> int:
    """Shanten toward holding every terminal and honor kind with one of them doubled."""
    kinds = sum(1 for kind in TERMINAL_OR_HONOR_KINDS if counts[kind] >= 1)
    has_pair = any(counts[kind] >= 2 for kind in TERMINAL_OR_HONOR_KINDS)  # noqa: PLR2004
    return THIRTEEN_ORPHANS_TILE_COUNT - kinds - (1 if has_pair else 0) - 1
