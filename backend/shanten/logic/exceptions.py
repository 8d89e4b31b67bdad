"""Typed exceptions for hand construction and engine invariants.

Input problems (wrong concealed tile count, unparsable notation) use
subclasses of HandError so callers can catch them at their boundary.
Engine logic defects raise ShantenInvariantError, which is an
AssertionError and is never caught inside the engine.
"""


class HandError(Exception):
    """Base exception for hands that cannot be built from the given input."""


class InvalidHandSizeError(HandError):
    """A hand was built with a concealed tile count other than the required one.

    Attributes:
        expected: Required number of concealed tiles.
        actual: Number of concealed tiles that was given.

    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"hand must have {expected} concealed tiles, got {actual}")


class InvalidNotationError(HandError):
    """Hand notation string could not be parsed.

    Attributes:
        notation: The offending notation string.
        reason: Human-readable explanation of what is wrong with it.

    """

    def __init__(self, *, notation: str, reason: str) -> None:
        self.notation = notation
        self.reason = reason
        super().__init__(f"invalid hand notation {notation!r}: {reason}")


class ShantenInvariantError(AssertionError):
    """Internal invariant of the shanten search was violated (programming error)."""
