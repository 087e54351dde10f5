"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample paths

LINE = "M0,0L10,10"
LINE_DOUBLED = "M0,0L20,20"

STRAIGHT = "M0,0L10,0"
STRAIGHT_CUBIC = "M0,0C10,0,20,0,30,0"

ARCH_CUBIC = "M0,0C0,10,10,10,10,0"

TRIANGLE = "M0,0L10,0L5,8Z"
PENTAGON = "M0,0L10,0L13,8L5,12L-3,8Z"
# TRIANGLE extended to PENTAGON's five commands
TRIANGLE_AS_PENTAGON = "M0,0L5,0L10,0L7.5,4L5,8Z"

MIXED = "M0,0C1,2,3,4,5,6L10,10H12V3Q1,2,3,4T7,8S1,2,3,4A5,5,30,1,0,20,20"


@pytest.fixture
def line() -> str:
    return LINE


@pytest.fixture
def triangle() -> str:
    return TRIANGLE


@pytest.fixture
def pentagon() -> str:
    return PENTAGON


@pytest.fixture
def mixed() -> str:
    return MIXED
