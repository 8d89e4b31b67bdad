"""Print the shanten of hands given in notation.

Usage:
    mahjong-shanten "123m456p789s1112z 2z"
    mahjong-shanten "1122m3344p5566s1z 1z" "19m19p19s1234567z 1m" --form seven_pairs
    SHANTEN_CAP_BLOCKS=false mahjong-shanten "111m999p1133s557z 7z"

Each hand prints one tab-separated line: notation, shanten, winning form.
"""

from __future__ import annotations

import argparse

import structlog

from shanten.cli.settings import CliSettings
from shanten.logic.enums import WinningHandForm
from shanten.logic.exceptions import HandError
from shanten.logic.notation import parse_hand, to_notation
from shanten.logic.settings import ShantenRules
from shanten.logic.shanten import calculate_shanten, calculate_shanten_by_form
from shared.logging import setup_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mahjong-shanten",
        description="Calculate the shanten number of mahjong hands.",
    )
    parser.add_argument("hands", nargs="+", metavar="HAND", help='hand notation, e.g. "123m456p789s1112z 2z"')
    parser.add_argument(
        "--form",
        choices=[form.value for form in WinningHandForm],
        help="evaluate a single winning form instead of the minimum over all forms",
    )
    parser.add_argument(
        "--raw-formula",
        action="store_true",
        help="score normal-form decompositions without capping the block count",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = CliSettings()
    setup_logging(log_dir=settings.log_dir)

    rules = ShantenRules(cap_blocks=settings.cap_blocks and not args.raw_formula)
    form = WinningHandForm(args.form) if args.form else None

    for notation in args.hands:
        try:
            hand = parse_hand(notation)
        except HandError as err:
            logger.warning("rejected hand", notation=notation, reason=str(err))
            parser.error(str(err))
        result = calculate_shanten(hand, rules) if form is None else calculate_shanten_by_form(hand, form, rules)
        print(f"{to_notation(hand)}\t{result.value}\t{result.form.value}")  # noqa: T201
    return 0
