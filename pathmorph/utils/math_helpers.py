"""Math helpers — number matching, formatting, lerp. No engine imports."""

from __future__ import annotations

import math
import re

import numpy as np

# Numbers as they appear in path data: signed, optional fraction, optional exponent.
NUMBER_PATTERN = r"[-+]?(?:\d+\.?\d*|\.?\d+)(?:[eE][-+]?\d+)?"
NUMBER_RE = re.compile(NUMBER_PATTERN)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation, ``a`` at t=0 and ``b`` at t=1. Extrapolates outside [0, 1]."""
    return a * (1 - t) + b * t


def format_number(value: float) -> str:
    """Format a number the way a browser stringifies it.

    Integral values print without a trailing ``.0``, magnitudes below 1e-6 or
    at/above 1e21 use exponent form (``1e-7``, ``1e+21``), everything else is
    the shortest positional form that round-trips.
    """
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    value = float(value)
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)
