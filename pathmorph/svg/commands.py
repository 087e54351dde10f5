"""Command codec — SVG path ``d`` tokens ↔ structured, immutable commands.

Each command type is a frozen dataclass with named fields. ``COMMAND_PARAMS``
is the schema table: it fixes which fields a type carries and the order in
which they appear in path data, and drives both parsing and serialization.

    >>> parse_command("C1,2,3,4,5,6")
    CurveTo(type='C', x1=1.0, y1=2.0, x2=3.0, y2=4.0, x=5.0, y=6.0)
    >>> serialize_command(parse_command("L10 20"))
    'L10,20'

Lowercase (relative) letters share the uppercase schema and keep their case,
but are never converted to absolute coordinates.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from pathmorph.errors import (
    ArgumentCountError,
    MalformedArgumentError,
    UnknownCommandError,
)
from pathmorph.utils.math_helpers import NUMBER_RE, format_number

logger = logging.getLogger(__name__)

Point = tuple[float, float]

COMMAND_PARAMS: dict[str, tuple[str, ...]] = {
    "M": ("x", "y"),
    "L": ("x", "y"),
    "H": ("x",),
    "V": ("y",),
    "C": ("x1", "y1", "x2", "y2", "x", "y"),
    "S": ("x2", "y2", "x", "y"),
    "Q": ("x1", "y1", "x", "y"),
    "T": ("x", "y"),
    "A": ("rx", "ry", "x_axis_rotation", "large_arc_flag", "sweep_flag", "x", "y"),
}

ARC_FLAGS = frozenset({"large_arc_flag", "sweep_flag"})

_SEPARATOR_RE = re.compile(r"[\s,]*")
_CLOSE_RE = re.compile(r"[Zz]")
_COMMAND_SPLIT_RE = re.compile(r"(?=[MLHVCSQTA])", re.IGNORECASE)


@dataclass(frozen=True)
class Command:
    """Base for all path commands. ``type`` is the letter as written (case kept)."""

    type: str

    def __post_init__(self) -> None:
        expected = COMMAND_TYPES.get(self.type.upper())
        if expected is not self.__class__:
            raise UnknownCommandError(self.type, f"{self.__class__.__name__}(type={self.type!r})")

    @property
    def params(self) -> tuple[str, ...]:
        return COMMAND_PARAMS[self.type.upper()]

    def has_param(self, name: str) -> bool:
        return name in self.params

    def values(self) -> dict[str, float]:
        """Parameter values in schema order."""
        return {name: getattr(self, name) for name in self.params}


@dataclass(frozen=True)
class MoveTo(Command):
    x: float
    y: float


@dataclass(frozen=True)
class LineTo(Command):
    x: float
    y: float


@dataclass(frozen=True)
class HorizontalLineTo(Command):
    x: float


@dataclass(frozen=True)
class VerticalLineTo(Command):
    y: float


@dataclass(frozen=True)
class CurveTo(Command):
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothCurveTo(Command):
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class QuadraticCurveTo(Command):
    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothQuadraticCurveTo(Command):
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo(Command):
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc_flag: int
    sweep_flag: int
    x: float
    y: float


COMMAND_TYPES: dict[str, type[Command]] = {
    "M": MoveTo,
    "L": LineTo,
    "H": HorizontalLineTo,
    "V": VerticalLineTo,
    "C": CurveTo,
    "S": SmoothCurveTo,
    "Q": QuadraticCurveTo,
    "T": SmoothQuadraticCurveTo,
    "A": ArcTo,
}


def make_command(letter: str, **values: float) -> Command:
    """Build the variant for ``letter`` from keyword parameter values."""
    cls = COMMAND_TYPES.get(letter.upper())
    if cls is None:
        raise UnknownCommandError(letter, letter)
    return cls(type=letter, **values)


def with_type(command: Command, letter: str) -> Command:
    """Re-tag ``command`` as ``letter``. Both types must share the same fields."""
    params = COMMAND_PARAMS.get(letter.upper())
    if params is None:
        raise UnknownCommandError(letter, letter)
    missing = [name for name in params if not command.has_param(name)]
    if missing:
        raise ValueError(f"Cannot convert {command.type!r} to {letter!r}: missing {missing}")
    return make_command(letter, **{name: getattr(command, name) for name in params})


def _parse_argument(name: str, text: str, token: str) -> float:
    value = float(text)
    if name in ARC_FLAGS:
        if value not in (0.0, 1.0):
            raise MalformedArgumentError(f"Arc flag {name}={text!r} must be 0 or 1 in {token!r}")
        return int(value)
    return value


def _split_arguments(body: str, token: str) -> list[str]:
    """Numbers in ``body``. Separators are optional where a sign or dot
    starts the next number, as in ``10-20`` or ``.5.5``.
    """
    args: list[str] = []
    pos = 0
    for match in NUMBER_RE.finditer(body):
        if not _SEPARATOR_RE.fullmatch(body, pos, match.start()):
            break
        args.append(match.group(0))
        pos = match.end()
    if not _SEPARATOR_RE.fullmatch(body, pos):
        raise MalformedArgumentError(f"Unexpected {body[pos:].strip()!r} in {token!r}")
    return args


def parse_command(token: str) -> Command:
    """Parse one token such as ``"L10,20"`` or ``"C 1 2 3 4 5 6"``."""
    text = token.strip()
    if not text:
        raise MalformedArgumentError("Empty command token")

    letter = text[0]
    params = COMMAND_PARAMS.get(letter.upper())
    if params is None:
        raise UnknownCommandError(letter, token)

    args = _split_arguments(text[1:], token)
    if len(args) != len(params):
        raise ArgumentCountError(letter, len(params), len(args), token)

    values = {name: _parse_argument(name, arg, token) for name, arg in zip(params, args)}
    return COMMAND_TYPES[letter.upper()](type=letter, **values)


def serialize_command(command: Command) -> str:
    """Letter followed by comma-joined parameters in schema order."""
    return command.type + ",".join(format_number(v) for v in command.values().values())


def tokenize_path(d: str | None) -> list[str]:
    """Split a ``d`` attribute into command tokens, dropping every Z/z."""
    if d is None:
        return []
    stripped = _CLOSE_RE.sub("", d)
    return [tok.strip() for tok in _COMMAND_SPLIT_RE.split(stripped) if tok.strip()]


def parse_path(d: str | None) -> list[Command]:
    """Parse a whole ``d`` attribute. ``None`` and blank strings give ``[]``."""
    commands = [parse_command(tok) for tok in tokenize_path(d)]
    logger.debug("Parsed %d commands from %r", len(commands), d)
    return commands


def serialize_path(commands: Iterable[Command]) -> str:
    return "".join(serialize_command(c) for c in commands)


def ends_closed(d: str | None) -> bool:
    """True if the path ends with a close marker."""
    return d is not None and d.rstrip()[-1:] in ("Z", "z")


def path_anchors(commands: Iterable[Command]) -> list[Point]:
    """Absolute end point of each command.

    H carries no ``y`` and V no ``x``; those coordinates come from the previous
    anchor (origin before the first command).
    """
    anchors: list[Point] = []
    x = y = 0.0
    for command in commands:
        x = getattr(command, "x", x)
        y = getattr(command, "y", y)
        anchors.append((x, y))
    return anchors
