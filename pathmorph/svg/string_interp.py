"""Scalar string interpolator — lerp the numbers embedded in two strings.

The result keeps the literal text of ``b`` between numbers. Number pairs
whose text is identical in ``a`` and ``b`` stay literal; the others are
interpolated as ``a * (1 - t) + b * t`` and re-formatted. Numbers in ``a``
beyond the last number of ``b`` are ignored, trailing text of ``b`` is kept.

    >>> interpolate_string("M0,0L10,10", "M0,0L20,30")(0.5)
    'M0,0L15,20'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pathmorph.utils.math_helpers import NUMBER_RE, format_number, lerp


@dataclass(frozen=True)
class _NumberSlot:
    index: int
    start: float
    end: float


def interpolate_string(a: str, b: str) -> Callable[[float], str]:
    pieces: list[str | None] = []
    slots: list[_NumberSlot] = []

    def append_literal(text: str) -> None:
        if pieces and pieces[-1] is not None:
            pieces[-1] += text
        else:
            pieces.append(text)

    b_index = 0
    for a_match, b_match in zip(NUMBER_RE.finditer(a), NUMBER_RE.finditer(b)):
        if b_match.start() > b_index:
            append_literal(b[b_index : b_match.start()])
        a_text, b_text = a_match.group(0), b_match.group(0)
        if a_text == b_text:
            append_literal(b_text)
        else:
            slots.append(_NumberSlot(len(pieces), float(a_text), float(b_text)))
            pieces.append(None)
        b_index = b_match.end()

    if b_index < len(b):
        append_literal(b[b_index:])

    literal = tuple(pieces)
    frozen_slots = tuple(slots)

    if not frozen_slots:
        constant = "".join(p for p in literal if p is not None)
        return lambda t: constant

    def interpolator(t: float) -> str:
        out = list(literal)
        for slot in frozen_slots:
            out[slot.index] = format_number(lerp(slot.start, slot.end, t))
        return "".join(out)  # type: ignore[arg-type]

    return interpolator
