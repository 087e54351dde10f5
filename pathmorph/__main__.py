"""Command-line entry point: print interpolated frames between two paths.

    python -m pathmorph "M0,0L10,0" "M0,0C10,0,20,0,30,0" --frames 5

Pass ``-`` or an empty string for an absent path.
"""

from __future__ import annotations

import argparse
import sys

from pathmorph.engine.interpolator import interpolate_path
from pathmorph.errors import PathError


def _optional_path(value: str) -> str | None:
    return None if value in ("-", "") else value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pathmorph", description="Interpolate between two SVG paths")
    parser.add_argument("a", type=_optional_path, help="Start path d attribute ('-' for none)")
    parser.add_argument("b", type=_optional_path, help="End path d attribute ('-' for none)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-n", "--frames", type=int, default=5, help="Number of evenly spaced frames (default 5)")
    group.add_argument("-t", dest="ts", type=float, action="append", help="Sample at this t (repeatable)")
    args = parser.parse_args(argv)

    try:
        interpolator = interpolate_path(args.a, args.b)
    except PathError as e:
        print(f"pathmorph: {e}", file=sys.stderr)
        return 2

    if args.ts:
        ts = args.ts
    else:
        if args.frames < 2:
            parser.error("--frames must be at least 2")
        ts = [i / (args.frames - 1) for i in range(args.frames)]

    for t in ts:
        d = interpolator(t)
        print(f"{t:g}\t{'' if d is None else d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
