"""
Constants and enums for the tuning system.

No magic strings - use enums and named constants for fixed values.
"""

from enum import Enum

# Chromatic offset of each natural diatonic step above C (C D E F G A B).
# The perfect/major reference for quality derivation.
DIATONIC_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

SEMITONES_PER_OCTAVE = 12
STEPS_PER_OCTAVE = 7

# Diatonic residues whose unison class is perfect (unison, fourth, fifth)
PERFECT_RESIDUES: frozenset[int] = frozenset({0, 3, 4})

# Standard concert pitch
STANDARD_ANCHOR_NAME = "A4"
STANDARD_ANCHOR_HZ = 440.0

# MIDI number of C4, the pitch origin
MIDDLE_C_MIDI = 60


class TuningFamily(str, Enum):
    """Broad family of a tuning definition."""

    EQUAL = "equal"
    MEANTONE = "meantone"
    PYTHAGOREAN = "pythagorean"
    OTHER = "other"


class ErrorMessages:
    """Standardized error messages."""

    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected notation like 'm3', 'P5', '-A4'."
    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected notation like 'A4', 'Bb3', 'C#5'."
    DEGENERATE_BASIS = "Cannot use intervals {first} and {second} as basis pair."
    INVALID_QUALITY = "{quality} is not a valid quality for interval number {number}."
    NON_POSITIVE_FREQUENCY = "Frequency must be positive, got {value}."
