"""Unit tests for the normal-form decomposition search."""

import logging

import pytest

from shanten.logic.counts import TileCounts
from shanten.logic.enums import WinningHandForm
from shanten.logic.melds import Meld
from shanten.logic.normal_form import (
    BASE_SHANTEN,
    IndependentBlocks,
    NormalFormSearch,
    calculate_normal_form_shanten,
    extract_independent_blocks,
    score_decomposition,
)
from shanten.logic.settings import DEFAULT_RULES, ShantenRules
from shanten.logic.shanten import AGARI_STATE, calculate_shanten_by_form
from shanten.logic.tiles import TileKind
from shanten.tests.conftest import create_counts, create_hand

_RAW = ShantenRules(cap_blocks=False)


def _normal(notation: str, rules: ShantenRules = DEFAULT_RULES) -> int:
    return calculate_shanten_by_form(create_hand(notation), WinningHandForm.NORMAL, rules).value


class TestCompleteHands:
    """Four 3-blocks plus a head is always -1."""

    @pytest.mark.parametrize(
        "notation",
        [
            "123m456p789s1112z 2z",
            "123456789m1p234s 1p",
            "111222333m456p7s 7s",
            "223344m567p678s9s 9s",
            "1112345678999m 5m",
            "11m123p444s55566z 6z",
        ],
    )
    def test_complete_hand_is_agari(self, notation):
        assert _normal(notation) == AGARI_STATE


class TestIncompleteHands:
    def test_single_wait_tenpai(self):
        assert _normal("123m456p789s1112z 3z") == 0

    def test_tenpai_with_honor_junk(self):
        assert _normal("123456789m1p234s 5z") == 0

    def test_nine_gates_with_stray_honor(self):
        assert _normal("1112345678999m 1z") == 0

    def test_two_gapped_shapes_without_head(self):
        assert _normal("123456789m13p24s 5z") == 1

    def test_seven_pairs_shape_scored_as_normal_form(self):
        assert _normal("1122m3344p5566s1z 1z") == 3

    def test_scattered_tiles(self):
        """Only isolated singles: no blocks at all."""
        assert _normal("147m147p147s1234z 5z") == BASE_SHANTEN

    def test_partial_shapes(self):
        """Adjacent and gapped shapes are one partial block; far-apart tiles are nothing."""
        assert calculate_normal_form_shanten(create_counts("12m")) == 7
        assert calculate_normal_form_shanten(create_counts("13m")) == 7
        assert calculate_normal_form_shanten(create_counts("14m")) == BASE_SHANTEN


class TestBlockCap:
    """Partial blocks beyond the missing complete blocks are not counted by default."""

    def test_too_many_pairs_capped(self):
        assert _normal("111m999p1133s557z 7z") == 1

    def test_raw_formula_counts_every_pair(self):
        assert _normal("111m999p1133s557z 7z", _RAW) == 0

    def test_raw_and_capped_agree_on_complete_hand(self):
        assert _normal("123m456p789s1112z 2z", _RAW) == AGARI_STATE


class TestScoreDecomposition:
    def test_complete(self):
        assert score_decomposition(4, 0, has_head=True) == -1

    def test_capped_partials(self):
        assert score_decomposition(3, 2, has_head=False) == 1
        assert score_decomposition(3, 2, has_head=False, rules=_RAW) == 0

    def test_five_complete_blocks_without_head(self):
        assert score_decomposition(5, 0, has_head=False) == 0

    def test_nothing(self):
        assert score_decomposition(0, 0, has_head=False) == BASE_SHANTEN


class TestIndependentBlocks:
    def test_isolated_triplets(self):
        counts = create_counts("555s111z")
        blocks = extract_independent_blocks(counts)
        assert blocks.triplets == (TileKind.S5, TileKind.EAST)
        assert blocks.block3 == 2
        assert counts.total() == 0

    def test_triplet_with_neighbour_stays(self):
        counts = create_counts("5556p")
        blocks = extract_independent_blocks(counts)
        assert blocks.triplets == ()
        assert counts.total() == 4

    def test_isolated_run(self):
        counts = create_counts("567p")
        blocks = extract_independent_blocks(counts)
        assert blocks.runs == 1
        assert counts.total() == 0

    def test_doubled_isolated_run(self):
        counts = create_counts("556677p")
        assert extract_independent_blocks(counts).runs == 2
        assert counts.total() == 0

    def test_run_with_uneven_copies_stays(self):
        counts = create_counts("5677p")
        blocks = extract_independent_blocks(counts)
        assert blocks == IndependentBlocks()
        assert counts.total() == 4

    def test_run_next_to_other_tiles_stays(self):
        counts = create_counts("1234m")
        assert extract_independent_blocks(counts).runs == 0

    def test_isolated_singles(self):
        counts = create_counts("1m9s7z")
        blocks = extract_independent_blocks(counts)
        assert blocks.singles == 3
        assert counts.total() == 0

    def test_honor_quad_is_triplet_plus_single(self):
        counts = create_counts("1111z")
        blocks = extract_independent_blocks(counts)
        assert blocks.triplets == (TileKind.EAST,)
        assert blocks.singles == 1


class TestSearchState:
    def test_input_table_untouched(self):
        counts = create_counts("1112345678999m5m")
        before = counts.copy()
        calculate_normal_form_shanten(counts)
        assert counts == before

    def test_search_restores_working_table(self):
        table = create_counts("1122334455667m")
        before = table.copy()
        NormalFormSearch(table).search()
        assert table == before

    def test_repeated_calls_agree(self):
        hand = create_hand("2233445566778m 8m")
        first = calculate_shanten_by_form(hand, WinningHandForm.NORMAL)
        second = calculate_shanten_by_form(hand, WinningHandForm.NORMAL)
        assert first == second

    def test_empty_table(self):
        assert calculate_normal_form_shanten(TileCounts()) == BASE_SHANTEN

    def test_isolated_triplet_can_be_the_head(self):
        """With a called triplet the fifth set is better used as the head."""
        hand = create_hand("123456789m555s2p 9p", melds=(Meld.triplet(TileKind.EAST),))
        assert calculate_shanten_by_form(hand, WinningHandForm.NORMAL).value == AGARI_STATE

    def test_logs_search_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="shanten.logic.normal_form"):
            calculate_normal_form_shanten(create_counts("123m456p789s11122z"))
        records = [
            r for r in caplog.records if isinstance(r.msg, dict) and r.msg["event"] == "normal form search finished"
        ]
        assert len(records) == 1
        assert records[0].msg["shanten"] == AGARI_STATE
        assert records[0].msg["independent_block3"] == 4
        assert records[0].msg["leaves"] >= 1
