#!/usr/bin/env python3
"""
Example: Compare interval sizes and pitch frequencies across tunings.

Usage:
    python examples/compare_tunings.py

Shows that:
1. Intervals keep their spelling (A4 and d5 are different intervals)
2. Each tuning is fixed by two reference intervals
3. Enharmonic pitches only coincide in 12-tone equal temperament
"""

from pathlib import Path

from chuk_mcp_tuning.core import Hertz, Interval, Pitch, intone
from chuk_mcp_tuning.tunings import TuningLoader

INTERVALS = ["m2", "M2", "m3", "M3", "P4", "A4", "d5", "P5", "M6", "m7", "P8"]
TUNINGS = [
    "twelve-tone-equal",
    "pythagorean",
    "quarter-comma-meantone",
    "third-comma-meantone",
    "nineteen-tone-equal",
    "thirty-one-tone-equal",
]


def main() -> None:
    """Print interval sizes in cents and a few pitch frequencies."""
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_tuning/tunings/library"
    loader = TuningLoader(library_path=library_path)

    print("CHUK Tuning Comparison")
    print("=" * 40)
    print()

    print("Interval sizes (cents):")
    print("       " + "".join(f"{name[:12]:>14}" for name in TUNINGS))
    for name in INTERVALS:
        interval = Interval.parse(name)
        row = ""
        for tuning_name in TUNINGS:
            tuning = loader.get_tuning(tuning_name)
            row += f"{tuning.cents(interval).value:>14.2f}"
        print(f"  {name:<5}" + row)
    print()

    print("C#4 vs Db4 with A4 = 440 Hz:")
    for tuning_name in TUNINGS:
        intonation = intone((Pitch.parse("A4"), Hertz(440.0)), loader.get_tuning(tuning_name))
        sharp = intonation(Pitch.parse("C#4"))
        flat = intonation(Pitch.parse("Db4"))
        print(f"  {tuning_name:<24} C#4 = {sharp.value:8.3f} Hz   Db4 = {flat.value:8.3f} Hz")


if __name__ == "__main__":
    main()
