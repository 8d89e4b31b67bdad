"""Shanten toward the seven pairs shape."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shanten.logic.counts import TileCounts

SEVEN_PAIRS_PAIR_COUNT = 7


def calculate_seven_pairs_shanten(counts: TileCounts) -> int:
    """
    Shanten toward seven distinct pairs.

    A kind held three or four times still gives a single pair. When fewer
    than seven kinds are held, the missing kinds must be drawn as well.
    """
    kinds = 0
    pairs = 0
    for count in counts:
        if count >= 1:
            kinds += 1
        if count >= 2:  # noqa: PLR2004
            pairs += 1

    missing_kinds = max(0, SEVEN_PAIRS_PAIR_COUNT - kinds)
    return SEVEN_PAIRS_PAIR_COUNT - pairs + missing_kinds - 1
