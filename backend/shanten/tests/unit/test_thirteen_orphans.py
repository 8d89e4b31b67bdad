"""Unit tests for the thirteen orphans evaluator."""

from shanten.logic.enums import WinningHandForm
from shanten.logic.shanten import AGARI_STATE, calculate_shanten_by_form
from shanten.logic.thirteen_orphans import calculate_thirteen_orphans_shanten
from shanten.tests.conftest import create_counts, create_hand


class TestThirteenOrphansShanten:
    def test_complete(self):
        hand = create_hand("19m19p19s1234567z 1m")
        assert calculate_shanten_by_form(hand, WinningHandForm.THIRTEEN_ORPHANS).value == AGARI_STATE

    def test_tenpai(self):
        hand = create_hand("19m19p11s1234567z 5m")
        assert calculate_shanten_by_form(hand, WinningHandForm.THIRTEEN_ORPHANS).value == 0

    def test_thirteen_sided_wait_is_tenpai(self):
        hand = create_hand("19m19p19s1234567z 5m")
        assert calculate_shanten_by_form(hand, WinningHandForm.THIRTEEN_ORPHANS).value == 0

    def test_simples_are_ignored(self):
        assert calculate_thirteen_orphans_shanten(create_counts("2345678m2345678p")) == 13

    def test_duplicates_count_once(self):
        """A triplet of a terminal counts as one kind plus the pair, nothing more."""
        assert calculate_thirteen_orphans_shanten(create_counts("111m")) == 11
        assert calculate_thirteen_orphans_shanten(create_counts("11m")) == 11
