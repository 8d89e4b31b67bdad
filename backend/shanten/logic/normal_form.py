"""
Shanten toward the normal winning shape: four 3-blocks and one head pair.

Every leaf of the search is scored with

    shanten = 8 - 2 * block3 - block2

where block3 counts complete triplets and runs, and block2 counts the head
and partial blocks (pairs, adjacent ``n,n+1`` and gapped ``n,n+2`` shapes).

The search works in three stages:

1. Blocks that cannot combine with anything else are taken out of the table
   up front: isolated triplets, isolated runs and isolated single tiles.
2. Each kind held at least twice is tried as the head, and so is "no head".
3. For each head choice, every selection of triplets and runs is enumerated
   by backtracking; for each selection the best number of partial blocks is
   found from what remains.

The table is shared across all branches. A block is taken right before the
recursive call and given back right after it, so siblings always see the
same table. The best score is returned by each call and min-reduced by the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from shanten.logic.exceptions import ShantenInvariantError
from shanten.logic.settings import DEFAULT_RULES, ShantenRules
from shanten.logic.tiles import TILE_KIND_COUNT, TileKind

if TYPE_CHECKING:
    from shanten.logic.counts import TileCounts

logger = structlog.get_logger()

BASE_SHANTEN = 8
MAX_SET_BLOCKS = 4

_PAIR = 2
_TRIPLET = 3
# ranks within this distance of a tile can still form a block with it
_NEIGHBOR_OFFSETS = (-2, -1, 1, 2)
# isolated runs are taken doubled first (two identical runs), then single
_RUN_MULTIPLICITIES = (2, 1)


@dataclass(frozen=True)
class IndependentBlocks:
    """Blocks taken out of the table before the search starts."""

    triplets: tuple[TileKind, ...] = ()
    runs: int = 0
    singles: int = 0

    @property
    def block3(self) -> int:
        return len(self.triplets) + self.runs


def _kind_at(index: int) -> TileKind:
    try:
        return TileKind(index)
    except ValueError as err:
        raise ShantenInvariantError(f"tile index {index} is outside the 34-kind domain") from err


def _is_isolated(counts: TileCounts, kind: TileKind) -> bool:
    """True when no same-suit tile within two ranks is held. Honors are always isolated."""
    for offset in _NEIGHBOR_OFFSETS:
        neighbor = kind.shifted(offset)
        if neighbor is not None and counts[neighbor] > 0:
            return False
    return True


def _extract_triplets(counts: TileCounts) -> tuple[TileKind, ...]:
    found: list[TileKind] = []
    for index in range(len(counts)):
        kind = _kind_at(index)
        if counts[kind] >= _TRIPLET and _is_isolated(counts, kind):
            counts.take(kind, _TRIPLET)
            found.append(kind)
    return tuple(found)


def _is_isolated_run(counts: TileCounts, lowest: TileKind, multiplicity: int) -> bool:
    middle = lowest.shifted(1)
    highest = lowest.shifted(2)
    if middle is None or highest is None:
        return False
    if not (counts[lowest] == counts[middle] == counts[highest] == multiplicity):
        return False
    # nothing two ranks below the run or two ranks above it
    for outside in (lowest.shifted(-2), lowest.shifted(-1), lowest.shifted(3), lowest.shifted(4)):
        if outside is not None and counts[outside] > 0:
            return False
    return True


def _extract_runs(counts: TileCounts) -> int:
    found = 0
    for multiplicity in _RUN_MULTIPLICITIES:
        for index in range(len(counts)):
            kind = _kind_at(index)
            if kind.is_honor:
                continue
            if _is_isolated_run(counts, kind, multiplicity):
                for member in range(index, index + 3):
                    counts.take(member, multiplicity)
                found += multiplicity
    return found


def _extract_singles(counts: TileCounts) -> int:
    found = 0
    for index in range(len(counts)):
        kind = _kind_at(index)
        if counts[kind] == 1 and _is_isolated(counts, kind):
            counts.take(kind)
            found += 1
    return found


def extract_independent_blocks(counts: TileCounts) -> IndependentBlocks:
    """
    Take isolated triplets, runs and singles out of ``counts`` in place.

    None of these can be part of any other block, so removing them shrinks
    the search without changing its answer.
    """
    triplets = _extract_triplets(counts)
    runs = _extract_runs(counts)
    singles = _extract_singles(counts)
    return IndependentBlocks(triplets=triplets, runs=runs, singles=singles)


def score_decomposition(block3: int, block2: int, *, has_head: bool, rules: ShantenRules = DEFAULT_RULES) -> int:
    """
    Shanten of one decomposition.

    ``block2`` counts partial blocks other than the head. With ``cap_blocks``
    at most four complete blocks count, and partial blocks only fill the
    slots that complete blocks leave open.
    """
    head = 1 if has_head else 0
    if rules.cap_blocks:
        block3 = min(block3, MAX_SET_BLOCKS)
        block2 = min(block2, MAX_SET_BLOCKS - block3)
    return BASE_SHANTEN - 2 * block3 - block2 - head


class NormalFormSearch:
    """
    Backtracking search over one shared count table.

    The table passed in is used as the working table: it is mutated during
    the search and is back to its starting contents when ``search`` returns.
    """

    def __init__(
        self,
        counts: TileCounts,
        *,
        independent: IndependentBlocks | None = None,
        rules: ShantenRules = DEFAULT_RULES,
    ) -> None:
        self._counts = counts
        self._independent = independent or IndependentBlocks()
        self._rules = rules
        self._partials_cache: dict[tuple[tuple[int, ...], int, int], int] = {}
        self.leaves = 0

    def search(self) -> int:
        """Return the minimum shanten over all head choices and block selections."""
        counts = self._counts
        block3 = self._independent.block3

        best = self._search_sets(0, block3, has_head=False, best=BASE_SHANTEN)
        for index in range(TILE_KIND_COUNT):
            if counts[index] >= _PAIR:
                with counts.taken(index, index):
                    best = self._search_sets(0, block3, has_head=True, best=best)

        # an isolated triplet can serve as the head instead, leaving a stray tile
        if self._independent.triplets:
            best = self._search_sets(0, block3 - 1, has_head=True, best=best)
        return best

    def _search_sets(self, start: int, block3: int, *, has_head: bool, best: int) -> int:
        counts = self._counts
        for index in range(start, TILE_KIND_COUNT):
            if counts[index] >= _TRIPLET:
                with counts.taken(index, index, index):
                    best = self._search_sets(index, block3 + 1, has_head=has_head, best=best)

            kind = _kind_at(index)
            if self._starts_run(kind):
                with counts.taken(index, index + 1, index + 2):
                    best = self._search_sets(index, block3 + 1, has_head=has_head, best=best)

        self.leaves += 1
        block2 = self._max_partials(0, self._partial_limit(block3))
        return min(best, score_decomposition(block3, block2, has_head=has_head, rules=self._rules))

    def _partial_limit(self, block3: int) -> int:
        if self._rules.cap_blocks:
            return max(0, MAX_SET_BLOCKS - block3)
        return self._counts.total() // _PAIR

    def _max_partials(self, start: int, limit: int) -> int:
        """Largest number of partial blocks (at most ``limit``) takeable from ``start`` onward."""
        if limit == 0:
            return 0
        key = (self._counts.to_tuple(), start, limit)
        cached = self._partials_cache.get(key)
        if cached is not None:
            return cached

        counts = self._counts
        most = 0
        for index in range(start, TILE_KIND_COUNT):
            if most == limit:
                break
            if counts[index] == 0:
                continue
            if counts[index] >= _PAIR:
                with counts.taken(index, index):
                    most = max(most, 1 + self._max_partials(index, limit - 1))

            kind = _kind_at(index)
            for offset in (1, 2):
                partner = kind.shifted(offset)
                if partner is not None and counts[partner] > 0:
                    with counts.taken(index, partner):
                        most = max(most, 1 + self._max_partials(index, limit - 1))

        self._partials_cache[key] = most
        return most

    def _starts_run(self, kind: TileKind) -> bool:
        middle = kind.shifted(1)
        highest = kind.shifted(2)
        if middle is None or highest is None:
            return False
        counts = self._counts
        return counts[kind] > 0 and counts[middle] > 0 and counts[highest] > 0


def calculate_normal_form_shanten(counts: TileCounts, rules: ShantenRules = DEFAULT_RULES) -> int:
    """
    Shanten toward four 3-blocks and a head.

    Works on a copy, so ``counts`` is left untouched. Returns -1 exactly
    when the tiles split into four complete blocks plus a pair.
    """
    table = counts.copy()
    independent = extract_independent_blocks(table)
    search = NormalFormSearch(table, independent=independent, rules=rules)
    shanten = search.search()
    logger.debug(
        "normal form search finished",
        shanten=shanten,
        leaves=search.leaves,
        independent_block3=independent.block3,
        independent_singles=independent.singles,
    )
    return shanten
