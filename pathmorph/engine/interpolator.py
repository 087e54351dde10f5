"""Interpolator builder — turn two path strings into a ``t -> d`` function.

Both paths are parsed, the shorter one is extended to the length of the
other, A's commands are converted to B's types, and the two normalized
strings are handed to the string interpolator. ``Z`` survives only if both
inputs end with it. At exactly ``t == 1`` the original B string is returned,
so the final frame carries none of the inserted points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from pathmorph.engine.extender import extend_commands
from pathmorph.engine.reconciler import reconcile_commands
from pathmorph.errors import InterpolationError
from pathmorph.svg.commands import ends_closed, parse_path, path_anchors, serialize_path
from pathmorph.svg.string_interp import interpolate_string

logger = logging.getLogger(__name__)

CLOSE_MARKER = "Z"


@dataclass(frozen=True)
class PathInterpolator:
    """Callable returned by :func:`interpolate_path`.

    ``start`` and ``end`` are the normalized (extended, type-matched) forms of
    A and B, or ``None`` when neither input has any commands. ``target`` is B
    exactly as given.
    """

    start: str | None
    end: str | None
    target: str | None
    delegate: Callable[[float], str] | None = field(default=None, repr=False, compare=False)

    def __call__(self, t: float) -> str | None:
        if t == 1:
            return self.target
        if self.delegate is None:
            return None
        return self.delegate(t)

    def frames(self, count: int) -> list[str | None]:
        """``count`` evenly spaced samples from t=0 to t=1 inclusive."""
        if count < 2:
            raise ValueError(f"Need at least 2 frames, got {count}")
        return [self(i / (count - 1)) for i in range(count)]


def interpolate_path(a: str | None, b: str | None) -> PathInterpolator:
    """Build an interpolator from path ``a`` (t=0) to path ``b`` (t=1).

    Raises :class:`~pathmorph.errors.PathError` for malformed input.
    """
    # An absent path has no say on closing.
    closed = (a is None or ends_closed(a)) and (b is None or ends_closed(b))

    a_commands = parse_path(a)
    b_commands = parse_path(b)

    if not a_commands and not b_commands:
        return PathInterpolator(start=None, end=None, target=b)

    # Grow out of B's first point, or shrink into A's.
    if not a_commands:
        a_commands = [b_commands[0]]
    elif not b_commands:
        b_commands = [a_commands[0]]

    if len(a_commands) < len(b_commands):
        a_commands = extend_commands(a_commands, b_commands)
    elif len(b_commands) < len(a_commands):
        b_commands = extend_commands(b_commands, a_commands)

    if len(a_commands) != len(b_commands):
        raise InterpolationError(
            f"Extension left {len(a_commands)} vs {len(b_commands)} commands"
        )

    a_commands = reconcile_commands(a_commands, b_commands, path_anchors(a_commands))

    a_processed = serialize_path(a_commands)
    b_processed = serialize_path(b_commands)
    if closed:
        a_processed += CLOSE_MARKER
        b_processed += CLOSE_MARKER

    logger.debug("Interpolating %r -> %r", a_processed, b_processed)
    return PathInterpolator(
        start=a_processed,
        end=b_processed,
        target=b,
        delegate=interpolate_string(a_processed, b_processed),
    )
