#!/usr/bin/env python
"""Scale calculator — print a scale, its step pattern, chord tones and triads.

Usage
-----
    # E flat Dorian
    python scripts/scale_calc.py E --accidental b --scale-type Dorian

    # A harmonic minor with plain-ASCII accidentals
    python scripts/scale_calc.py A --scale-type "Harmonic Minor" --ascii

    # List the supported scale types
    python scripts/scale_calc.py --list

Output rows, in order: Steps, Notes, Thirds, Fifths, Chords.

Exit codes
----------
    0  — success
    2  — invalid input (unknown letter, accidental or scale type, or a
         scale that cannot be spelled)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import ASCII_CONFIG, CalculatorConfig  # noqa: E402
from core.scale_calc import ScaleCalcError, calculate_scale, scale_type_names  # noqa: E402
from core.scale_calc.types import ScaleReport  # noqa: E402

_ROW_TITLES: dict[str, str] = {
    "steps": "Steps",
    "notes": "Notes",
    "thirds": "Thirds",
    "fifths": "Fifths",
    "chords": "Chords",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Spell a scale and its diatonic triads")
    p.add_argument(
        "root",
        nargs="?",
        help="Root letter A–G",
    )
    p.add_argument(
        "--accidental",
        "-a",
        default="",
        help="Root accidental: bb, b, n, #, x (or ♭♭ ♭ ♮ ♯, or 'flat', 'sharp', ...)",
    )
    p.add_argument(
        "--scale-type",
        "-s",
        default="Major",
        help=f"Scale type: {', '.join(scale_type_names())}",
    )
    p.add_argument(
        "--ascii",
        action="store_true",
        help="Print accidentals as bb b # x instead of unicode symbols",
    )
    p.add_argument(
        "--list",
        action="store_true",
        help="List the supported scale types and exit",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return p.parse_args(argv)


def render_report(report: ScaleReport) -> str:
    """Render the five rows as aligned text."""
    lines = [report.label, ""]
    for key, values in report.rows().items():
        cells = " ".join(f"{v:<8}" for v in values).rstrip()
        lines.append(f"{_ROW_TITLES[key]:<8}{cells}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.list:
        for name in scale_type_names():
            print(name)
        return 0

    if not args.root:
        print("ERROR: a root letter is required (or use --list)", file=sys.stderr)
        return 2

    config = ASCII_CONFIG if args.ascii else CalculatorConfig.from_env()
    try:
        report = calculate_scale(args.root, args.accidental, args.scale_type, config=config)
    except ScaleCalcError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print(render_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
