"""Type reconciler — give command A the type of command B without moving it.

    L0,5 → C0,5,0,5,0,5

For every parameter of B's type:
    own value of A, if A has it
    x_axis_rotation, large_arc_flag, sweep_flag ← B
    x1, x2 ← x;  y1, y2 ← y   (controls collapse onto the anchor)
    x / y missing on H / V ← resolved anchor
    anything else (rx, ry) ← 0
"""

from __future__ import annotations

from typing import Sequence

from pathmorph.errors import InterpolationError
from pathmorph.svg.commands import Command, Point, make_command

# Arc rendering hints have no counterpart in A; taking B's keeps both arcs alike.
INHERITED_PARAMS = frozenset({"x_axis_rotation", "large_arc_flag", "sweep_flag"})

EQUIVALENT_PARAMS = {
    "x1": "x",
    "y1": "y",
    "x2": "x",
    "y2": "y",
}

_ANCHOR_AXIS = {"x": 0, "y": 1}


def _coordinate(a: Command, name: str, anchor: Point | None) -> float | None:
    if a.has_param(name):
        return getattr(a, name)
    if anchor is not None:
        return anchor[_ANCHOR_AXIS[name]]
    return None


def reconcile_command(a: Command, b: Command, anchor: Point | None = None) -> Command:
    """Convert ``a`` to ``b``'s type. M targets and equal types leave ``a`` alone."""
    if a.type == b.type or b.type.upper() == "M":
        return a

    values: dict[str, float] = {}
    for name in b.params:
        if a.has_param(name):
            value = getattr(a, name)
        elif name in INHERITED_PARAMS:
            value = getattr(b, name)
        elif name in EQUIVALENT_PARAMS:
            value = _coordinate(a, EQUIVALENT_PARAMS[name], anchor)
        elif name in _ANCHOR_AXIS:
            value = _coordinate(a, name, anchor)
        else:
            value = None
        values[name] = 0.0 if value is None else value

    return make_command(b.type, **values)


def reconcile_commands(
    a_commands: Sequence[Command],
    b_commands: Sequence[Command],
    anchors: Sequence[Point] | None = None,
) -> list[Command]:
    """Pairwise :func:`reconcile_command`; ``anchors`` belong to ``a_commands``."""
    if len(a_commands) != len(b_commands):
        raise InterpolationError(
            f"Cannot reconcile sequences of different length: {len(a_commands)} vs {len(b_commands)}"
        )
    if anchors is not None and len(anchors) != len(a_commands):
        raise InterpolationError(f"Expected {len(a_commands)} anchors, got {len(anchors)}")

    return [
        reconcile_command(a, b, anchors[i] if anchors is not None else None)
        for i, (a, b) in enumerate(zip(a_commands, b_commands))
    ]
