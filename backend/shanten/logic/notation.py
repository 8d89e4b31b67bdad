"""
Hand notation parsing and rendering.

Notation groups digits by suit letter: ``m``, ``p``, ``s`` for the numeric
suits and ``z`` for honors 1-7 (east, south, west, north, white, green, red).
A drawn tile may follow after a space, e.g. ``"123m456p789s1112z 2z"``.
"""

from __future__ import annotations

import re
from collections import Counter
from itertools import groupby
from typing import TYPE_CHECKING

from mahjong.tile import TilesConverter

from shanten.logic.enums import TileSuit
from shanten.logic.exceptions import InvalidNotationError
from shanten.logic.hand import HandState
from shanten.logic.tiles import MAX_COPIES, TileKind, tile_to_34

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shanten.logic.melds import Meld

_GROUP_RE = re.compile(r"([1-9]+)([mps])|([1-7]+)z")
_NOTATION_RE = re.compile(r"(?:[1-9]+[mps]|[1-7]+z)+")

# Unicode mahjong tiles block: winds, dragons (red, green, white), then man, sou, pin
_UNICODE_SUIT_START = {
    TileSuit.MAN: 0x1F007,
    TileSuit.SOU: 0x1F010,
    TileSuit.PIN: 0x1F019,
}
_UNICODE_HONORS = {
    TileKind.EAST: 0x1F000,
    TileKind.SOUTH: 0x1F001,
    TileKind.WEST: 0x1F002,
    TileKind.NORTH: 0x1F003,
    TileKind.CHUN: 0x1F004,
    TileKind.HATSU: 0x1F005,
    TileKind.HAKU: 0x1F006,
}


def _count_copies(notation: str, parts: Sequence[str]) -> None:
    copies: Counter[str] = Counter()
    for part in parts:
        for digits, suit, honor_digits in _GROUP_RE.findall(part):
            letter = suit or "z"
            copies.update(f"{digit}{letter}" for digit in (digits or honor_digits))
    over = sorted(tile for tile, count in copies.items() if count > MAX_COPIES)
    if over:
        raise InvalidNotationError(notation=notation, reason=f"more than {MAX_COPIES} copies of {', '.join(over)}")


def parse_tiles(text: str) -> tuple[TileKind, ...]:
    """Parse one notation group string (no drawn tile) into tile kinds."""
    if not _NOTATION_RE.fullmatch(text):
        raise InvalidNotationError(
            notation=text,
            reason="expected digit groups each followed by m, p, s or z (honors 1-7)",
        )
    _count_copies(text, (text,))
    return tuple(tile_to_34(tile_id) for tile_id in TilesConverter.one_line_string_to_136_array(text))


def parse_hand(notation: str, melds: Sequence[Meld] = ()) -> HandState:
    """
    Build a HandState from notation such as ``"1122m3344p5566s1z 1z"``.

    Raises InvalidNotationError for malformed text and InvalidHandSizeError
    when the concealed part does not hold thirteen tiles.
    """
    parts = notation.split()
    if not parts or len(parts) > 2:  # noqa: PLR2004
        raise InvalidNotationError(notation=notation, reason="expected concealed tiles and an optional drawn tile")
    _count_copies(notation, parts)

    concealed = parse_tiles(parts[0])
    drawn = None
    if len(parts) == 2:  # noqa: PLR2004
        drawn_tiles = parse_tiles(parts[1])
        if len(drawn_tiles) != 1:
            raise InvalidNotationError(notation=notation, reason=f"expected one drawn tile, got {len(drawn_tiles)}")
        drawn = drawn_tiles[0]
    return HandState(concealed=concealed, drawn=drawn, melds=tuple(melds))


def tiles_to_notation(tiles: Sequence[TileKind]) -> str:
    """Render tiles as grouped notation; tiles are sorted first."""
    groups = groupby(sorted(tiles), key=lambda kind: kind.suit)
    return "".join("".join(str(kind.rank) for kind in kinds) + suit.value for suit, kinds in groups)


def to_notation(hand: HandState) -> str:
    """Render a hand the way parse_hand reads it: concealed tiles, then a space and the drawn tile."""
    result = tiles_to_notation(hand.concealed)
    if hand.drawn is not None:
        result += f" {hand.drawn.notation}"
    return result


def tile_to_unicode(kind: TileKind) -> str:
    if kind.is_honor:
        return chr(_UNICODE_HONORS[kind])
    return chr(_UNICODE_SUIT_START[kind.suit] + kind.rank - 1)


def to_unicode(hand: HandState) -> str:
    """Render a hand with Unicode mahjong tile characters, drawn tile separated by a space."""
    result = "".join(tile_to_unicode(kind) for kind in hand.concealed)
    if hand.drawn is not None:
        result += f" {tile_to_unicode(hand.drawn)}"
    return result
