"""Curve splitter — de Casteljau subdivision of line/quadratic/cubic segments.

A segment is given as its control polygon ``[start, *controls, end]``
(2, 3 or 4 points). ``split_curve`` cuts it into ``n`` pieces of the same
order whose junctions sit at ``t = i/n`` on the original curve.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pathmorph.svg.commands import COMMAND_PARAMS, Command, make_command

# Point count → command letter. The start point is the previous anchor.
_SEGMENT_COMMANDS: dict[int, str] = {
    2: "L",
    3: "Q",
    4: "C",
}


def _readonly(arr: NDArray[np.float64]) -> NDArray[np.float64]:
    arr.setflags(write=False)
    return arr


def _as_control_points(points: ArrayLike) -> NDArray[np.float64]:
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array of points, got shape {pts.shape}")
    return pts


def de_casteljau(points: ArrayLike, r: float) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Split a Bézier control polygon at parameter ``r``.

    Repeatedly lerps adjacent points until one remains. The first point of
    every level forms the left curve, the last point of every level (read
    back to front) forms the right curve. A single point is returned as both
    halves.
    """
    level = _as_control_points(points)
    if len(level) == 0:
        raise ValueError("Cannot subdivide an empty control polygon")

    left = [level[0]]
    right = [level[-1]]
    while len(level) > 1:
        level = (1 - r) * level[:-1] + r * level[1:]
        left.append(level[0])
        right.append(level[-1])

    return _readonly(np.array(left)), _readonly(np.array(right[::-1]))


def split_curve(points: ArrayLike, segment_count: int) -> list[NDArray[np.float64]]:
    """Cut a segment into ``segment_count`` pieces evenly spaced in ``t``.

    Each cut is made on what is left of the curve, so the fraction is
    rescaled: with ``inc = 1/n`` the i-th cut happens at
    ``inc / (1 - inc * i)`` of the remainder, which is ``t = (i+1)/n`` on the
    original curve.
    """
    pts = _as_control_points(points)
    if not 2 <= len(pts) <= 4:
        raise ValueError(f"Segments have 2, 3 or 4 control points, got {len(pts)}")
    if segment_count < 1:
        raise ValueError(f"segment_count must be >= 1, got {segment_count}")

    segments: list[NDArray[np.float64]] = []
    remaining = _readonly(pts.copy())
    increment = 1 / segment_count
    for i in range(segment_count - 1):
        left, remaining = de_casteljau(remaining, increment / (1 - increment * i))
        segments.append(left)

    segments.append(remaining)
    return segments


def segments_to_commands(segments: Sequence[ArrayLike]) -> list[Command]:
    """Turn control polygons back into absolute L/Q/C commands."""
    commands: list[Command] = []
    for segment in segments:
        pts = _as_control_points(segment)
        letter = _SEGMENT_COMMANDS.get(len(pts))
        if letter is None:
            raise ValueError(f"No command for a segment of {len(pts)} points")

        # pts[0] is the previous anchor; the rest map onto the schema in order.
        coords = [float(v) for v in pts[1:].ravel()]
        commands.append(make_command(letter, **dict(zip(COMMAND_PARAMS[letter], coords))))
    return commands
