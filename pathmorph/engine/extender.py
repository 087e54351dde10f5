"""Sequence extender — pad a command list to the length of a reference list.

Insertions are spread over the segments of the shorter path in proportion to
segment index: with ``s`` segments to fill and ``n - 1`` slots in the
reference, slot ``i`` lands in segment ``floor(i * s / (n - 1))``. Every
segment gets at least one slot (its own end command), the final vertex gets
none. This is index-proportional matching, not a nearest-point search.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pathmorph.engine.splitter import segments_to_commands, split_curve
from pathmorph.svg.commands import Command, Point, path_anchors, with_type

logger = logging.getLogger(__name__)

# Segment end types the Bézier splitter can subdivide exactly.
SPLITTABLE_TYPES = frozenset({"L", "Q", "C"})


def _as_repeatable(command: Command) -> Command:
    """A path holds one M; repeated copies of it become L."""
    if command.type == "M":
        return with_type(command, "L")
    if command.type == "m":
        return with_type(command, "l")
    return command


def segment_slot_counts(num_segments: int, num_slots: int) -> list[int]:
    """How many commands each segment emits once extended to ``num_slots``."""
    counts = [0] * num_segments
    for i in range(num_slots):
        # floor(i * num_segments / num_slots), kept in integers
        counts[i * num_segments // num_slots] += 1
    return counts


def _control_points(start: Point, end: Command) -> list[Point]:
    points = [start]
    if end.has_param("x1"):
        points.append((end.x1, end.y1))  # type: ignore[attr-defined]
    if end.has_param("x2"):
        points.append((end.x2, end.y2))  # type: ignore[attr-defined]
    points.append((end.x, end.y))  # type: ignore[attr-defined]
    return points


def split_segment(start: Command, start_anchor: Point, end: Command, slot_count: int) -> list[Command]:
    """Commands replacing ``end`` so the segment occupies ``slot_count`` slots.

    L/Q/C ends are cut into true sub-curves. Anything else (H, V, S, T, A,
    relative commands) gets zero-length copies of ``start`` before ``end``.
    """
    if slot_count == 1:
        return [end]
    if end.type in SPLITTABLE_TYPES:
        return segments_to_commands(split_curve(_control_points(start_anchor, end), slot_count))
    return [_as_repeatable(start)] * (slot_count - 1) + [end]


def extend_commands(
    to_extend: Sequence[Command],
    reference: Sequence[Command],
    anchors: Sequence[Point] | None = None,
) -> list[Command]:
    """Insert commands into ``to_extend`` until it is as long as ``reference``.

    ``anchors`` are the resolved end points of ``to_extend`` (computed with
    :func:`path_anchors` when omitted).
    """
    if not to_extend:
        raise ValueError("Cannot extend an empty command sequence")
    if len(reference) <= len(to_extend):
        raise ValueError(
            f"Reference ({len(reference)} commands) must be longer than the sequence ({len(to_extend)})"
        )

    if len(to_extend) == 1:
        # Nothing to subdivide: grow out of the single point.
        only = to_extend[0]
        return [only] + [_as_repeatable(only)] * (len(reference) - 1)

    if anchors is None:
        anchors = path_anchors(to_extend)

    counts = segment_slot_counts(len(to_extend) - 1, len(reference) - 1)
    extended = [to_extend[0]]
    for i, slot_count in enumerate(counts):
        extended.extend(split_segment(to_extend[i], anchors[i], to_extend[i + 1], slot_count))

    logger.debug(
        "Extended %d commands to %d (slots per segment: %s)",
        len(to_extend),
        len(extended),
        counts,
    )
    return extended
