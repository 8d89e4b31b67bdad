"""Shanten calculation across the three winning shapes (normal, seven pairs, thirteen orphans)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from shanten.logic.enums import WinningHandForm
from shanten.logic.normal_form import calculate_normal_form_shanten
from shanten.logic.settings import DEFAULT_RULES, ShantenRules
from shanten.logic.seven_pairs import calculate_seven_pairs_shanten
from shanten.logic.thirteen_orphans import calculate_thirteen_orphans_shanten

if TYPE_CHECKING:
    from shanten.logic.counts import TileCounts
    from shanten.logic.hand import HandState

logger = structlog.get_logger()

AGARI_STATE: int = -1
TENPAI_STATE: int = 0

# evaluation order; on equal values the earlier form is reported
_FORMS = (WinningHandForm.SEVEN_PAIRS, WinningHandForm.THIRTEEN_ORPHANS, WinningHandForm.NORMAL)


@dataclass(frozen=True, order=True)
class Shanten:
    """Shanten number and the winning shape it was measured against. Compared by value only."""

    value: int
    form: WinningHandForm = field(compare=False)

    @property
    def is_agari(self) -> bool:
        return self.value == AGARI_STATE

    @property
    def is_tenpai(self) -> bool:
        return self.value == TENPAI_STATE


def _evaluate(counts: TileCounts, form: WinningHandForm, rules: ShantenRules) -> Shanten:
    if form is WinningHandForm.SEVEN_PAIRS:
        return Shanten(calculate_seven_pairs_shanten(counts), form)
    if form is WinningHandForm.THIRTEEN_ORPHANS:
        return Shanten(calculate_thirteen_orphans_shanten(counts), form)
    return Shanten(calculate_normal_form_shanten(counts, rules), form)


def calculate_shanten_by_form(
    hand: HandState,
    form: WinningHandForm,
    rules: ShantenRules = DEFAULT_RULES,
) -> Shanten:
    """Calculate shanten toward a single winning shape."""
    return _evaluate(hand.summarize(), form, rules)


def calculate_shanten(hand: HandState, rules: ShantenRules = DEFAULT_RULES) -> Shanten:
    """Calculate the minimum shanten across all winning shapes.

    The count table is built once and every form evaluates it independently.
    """
    counts = hand.summarize()
    results = [_evaluate(counts, form, rules) for form in _FORMS]
    best = min(results)
    logger.debug(
        "shanten calculated",
        shanten=best.value,
        form=best.form,
        by_form={result.form.value: result.value for result in results},
    )
    return best
