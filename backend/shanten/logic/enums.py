"""
String enum definitions for hand and shanten concepts.
"""

from enum import Enum


class TileSuit(str, Enum):
    """Suit of a tile kind. The first three are numeric suits."""

    MAN = "m"
    PIN = "p"
    SOU = "s"
    HONOR = "z"


class WinningHandForm(str, Enum):
    """Winning shapes the shanten engine evaluates."""

    SEVEN_PAIRS = "seven_pairs"
    THIRTEEN_ORPHANS = "thirteen_orphans"
    NORMAL = "normal"


class MeldKind(str, Enum):
    """Shape of a declared meld."""

    TRIPLET = "triplet"
    SEQUENCE = "sequence"
    QUAD = "quad"


class MeldSource(str, Enum):
    """Seat the meld's called tile came from, relative to the hand owner."""

    SELF_DRAW = "self_draw"
    LEFT_NEIGHBOR = "left_neighbor"
    ACROSS_OPPONENT = "across_opponent"
    RIGHT_NEIGHBOR = "right_neighbor"
