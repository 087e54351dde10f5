"""Exceptions raised while parsing and interpolating SVG paths."""

from __future__ import annotations


class PathError(ValueError):
    """Malformed path input."""


class UnknownCommandError(PathError):
    """Command letter outside the SVG path alphabet."""

    def __init__(self, letter: str, token: str) -> None:
        super().__init__(f"Unrecognized command type {letter!r} in {token!r}")
        self.letter = letter
        self.token = token


class ArgumentCountError(PathError):
    """Command carries a different number of arguments than its schema."""

    def __init__(self, letter: str, expected: int, got: int, token: str) -> None:
        super().__init__(
            f"Wrong argument count for command {letter!r}: expected {expected}, got {got} in {token!r}"
        )
        self.letter = letter
        self.expected = expected
        self.got = got
        self.token = token


class MalformedArgumentError(PathError):
    """Argument that is not a number, or an arc flag other than 0/1."""


class InterpolationError(RuntimeError):
    """Internal invariant broken while building an interpolator."""
