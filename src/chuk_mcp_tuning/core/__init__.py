"""
Core tuning primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- Interval: Exact pair of generator counts (A1, d2)
- Quality: Major, minor, perfect, augmented, diminished
- Accidental: Signed count of semitone alterations
- Pitch: Point in the affine space over intervals
- Hertz, Octaves, Fifths, Cents: Frequency measures
- Tuning: Interval -> frequency ratio, from two references
- Intonation: Pitch -> Hertz, a tuning plus an anchor
"""

from chuk_mcp_tuning.core.absolute import (
    Cents,
    Fifths,
    Hertz,
    Octaves,
    cents,
    fifths,
    frequency,
    octaves,
)
from chuk_mcp_tuning.core.intonation import (
    FIFTY_THREE_TONE_EQUAL,
    FIVE_TONE_EQUAL,
    NINETEEN_TONE_EQUAL,
    PYTHAGOREAN,
    QUARTER_COMMA_MEANTONE,
    SCHISMATIC_MEANTONE,
    SEVEN_TONE_EQUAL,
    STANDARD_INTONATION,
    THIRTY_ONE_TONE_EQUAL,
    TUNINGS,
    TWELVE_TONE_EQUAL,
    DegenerateBasisError,
    Intonation,
    Tuning,
    convert_basis,
    generator_ratios,
    intone,
    make_basis,
    pure_octave_with,
    syn_tune,
    tet_tune,
)
from chuk_mcp_tuning.core.pitch import (
    Accidental,
    Interval,
    Name,
    Number,
    Pitch,
    Quality,
    QualityKind,
    QualityType,
    Semitones,
    Steps,
    augment,
    diminish,
    flatten,
    interval,
    sharpen,
    spell,
)

__all__ = [
    # Pitch
    "Accidental",
    "Interval",
    "Name",
    "Number",
    "Pitch",
    "Quality",
    "QualityKind",
    "QualityType",
    "Semitones",
    "Steps",
    "augment",
    "diminish",
    "flatten",
    "interval",
    "sharpen",
    "spell",
    # Absolute
    "Cents",
    "Fifths",
    "Hertz",
    "Octaves",
    "cents",
    "fifths",
    "frequency",
    "octaves",
    # Intonation
    "DegenerateBasisError",
    "Intonation",
    "Tuning",
    "convert_basis",
    "generator_ratios",
    "intone",
    "make_basis",
    "pure_octave_with",
    "syn_tune",
    "tet_tune",
    "PYTHAGOREAN",
    "QUARTER_COMMA_MEANTONE",
    "SCHISMATIC_MEANTONE",
    "FIVE_TONE_EQUAL",
    "SEVEN_TONE_EQUAL",
    "TWELVE_TONE_EQUAL",
    "NINETEEN_TONE_EQUAL",
    "THIRTY_ONE_TONE_EQUAL",
    "FIFTY_THREE_TONE_EQUAL",
    "TUNINGS",
    "STANDARD_INTONATION",
]
