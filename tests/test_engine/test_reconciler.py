"""Tests for command type reconciliation."""

from __future__ import annotations

import pytest

from pathmorph.engine.reconciler import reconcile_command, reconcile_commands
from pathmorph.errors import InterpolationError
from pathmorph.svg.commands import (
    ArcTo,
    CurveTo,
    LineTo,
    QuadraticCurveTo,
    parse_command,
    parse_path,
    serialize_command,
)


def _reconcile(a: str, b: str, anchor=None) -> str:
    return serialize_command(reconcile_command(parse_command(a), parse_command(b), anchor))


def test_line_to_cubic_collapses_controls():
    assert reconcile_command(parse_command("L0,5"), parse_command("C1,2,3,4,5,6")) == CurveTo(
        type="C", x1=0.0, y1=5.0, x2=0.0, y2=5.0, x=0.0, y=5.0
    )


def test_line_to_quadratic():
    assert reconcile_command(parse_command("L3,4"), parse_command("Q1,1,2,2")) == QuadraticCurveTo(
        type="Q", x1=3.0, y1=4.0, x=3.0, y=4.0
    )


def test_same_type_is_untouched():
    a = parse_command("L1,1")
    assert reconcile_command(a, parse_command("L9,9")) is a


def test_move_target_is_ignored():
    a = parse_command("L1,1")
    assert reconcile_command(a, parse_command("M0,0")) is a


def test_line_to_arc_inherits_rendering_hints():
    result = reconcile_command(parse_command("L10,20"), parse_command("A5,5,30,1,0,1,1"))
    assert result == ArcTo(
        type="A", rx=0.0, ry=0.0, x_axis_rotation=30.0, large_arc_flag=1, sweep_flag=0, x=10.0, y=20.0
    )


def test_cubic_to_line_keeps_anchor():
    assert reconcile_command(parse_command("C1,2,3,4,5,6"), parse_command("L0,0")) == LineTo(
        type="L", x=5.0, y=6.0
    )


def test_quadratic_to_cubic_keeps_first_control():
    assert _reconcile("Q1,2,3,4", "C0,0,0,0,0,0") == "C1,2,3,4,3,4"


def test_horizontal_uses_anchor():
    assert _reconcile("H10", "L0,0", anchor=(10.0, 4.0)) == "L10,4"


def test_horizontal_without_anchor_defaults_to_zero():
    assert _reconcile("H10", "L0,0") == "L10,0"


def test_vertical_to_cubic_uses_anchor():
    assert _reconcile("V7", "C0,0,0,0,0,0", anchor=(3.0, 7.0)) == "C3,7,3,7,3,7"


def test_case_difference_converts():
    result = reconcile_command(parse_command("L1,2"), parse_command("l0,0"))
    assert result.type == "l"
    assert (result.x, result.y) == (1.0, 2.0)


def test_reconcile_commands_pairwise():
    a = parse_path("M0,0L10,0H20")
    b = parse_path("M1,1C1,1,1,1,1,1L2,2")
    anchors = [(0.0, 0.0), (10.0, 0.0), (20.0, 0.0)]
    result = reconcile_commands(a, b, anchors)
    assert [serialize_command(c) for c in result] == ["M0,0", "C10,0,10,0,10,0", "L20,0"]


def test_reconcile_commands_length_mismatch():
    with pytest.raises(InterpolationError):
        reconcile_commands(parse_path("M0,0"), parse_path("M0,0L1,1"))
