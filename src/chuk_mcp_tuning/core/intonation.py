"""
Tuning and intonation.

A Tuning maps intervals to frequency ratios. It is fixed by two reference
intervals with known ratios: any interval can be written as a rational
combination of two independent references,

    i = x * i1 + y * i2

so its ratio is r1 ** x * r2 ** y. In particular this gives the ratios of
the generators A1 and d2, and from them the ratio of any Interval(a, d) as
ratio(A1) ** a * ratio(d2) ** d.

An Intonation anchors a tuning at one pitch/frequency pair and maps every
pitch to an absolute frequency.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from chuk_mcp_tuning.constants import STANDARD_ANCHOR_HZ, STANDARD_ANCHOR_NAME, ErrorMessages
from chuk_mcp_tuning.core.absolute import Cents, Hertz, cents
from chuk_mcp_tuning.core.pitch import Interval, Pitch

# An interval paired with the frequency ratio it should have
Reference = tuple[Interval, Union[float, Fraction]]


class DegenerateBasisError(ValueError):
    """
    Raised when two reference intervals cannot serve as a basis.

    This happens when they are collinear (one is a rational multiple of the
    other, such as P5 and 2 * P5), so no unique ratio can be assigned to
    the generators.
    """

    def __init__(self, interval1: Interval, interval2: Interval) -> None:
        self.interval1 = interval1
        self.interval2 = interval2
        super().__init__(ErrorMessages.DEGENERATE_BASIS.format(first=interval1, second=interval2))


def convert_basis(target: Interval, first: Interval, second: Interval) -> tuple[Fraction, Fraction]:
    """
    Express target in the basis (first, second).

    Returns exact rational coordinates (x, y) with target == x * first + y * second.

    Raises:
        DegenerateBasisError: if first and second are collinear
    """
    a1, d1 = first.chromatic_steps, first.diatonic_steps
    a2, d2 = second.chromatic_steps, second.diatonic_steps
    determinant = a1 * d2 - a2 * d1
    if determinant == 0:
        raise DegenerateBasisError(first, second)

    a, d = target.chromatic_steps, target.diatonic_steps
    x = Fraction(a * d2 - a2 * d, determinant)
    y = Fraction(a1 * d - a * d1, determinant)
    return x, y


def make_basis(target: Interval, first: Reference, second: Reference) -> float:
    """Ratio of target given two reference (interval, ratio) pairs."""
    (i1, r1), (i2, r2) = first, second
    x, y = convert_basis(target, i1, i2)
    return float(r1) ** float(x) * float(r2) ** float(y)


def generator_ratios(first: Reference, second: Reference) -> tuple[float, float]:
    """Ratios of the generators (A1, d2) implied by two references."""
    return make_basis(Interval.A1, first, second), make_basis(Interval.d2, first, second)


def syn_tune(first: Reference, second: Reference, target: Interval) -> float:
    """
    Ratio of target in the tuning defined by two references.

    Equal to ratio(A1) ** a * ratio(d2) ** d for target = Interval(a, d).
    Evaluated in the reference basis, so each reference maps back to
    exactly its own ratio.
    """
    return make_basis(target, first, second)


class Tuning:
    """
    A function from intervals to frequency ratios.

    Defined by two linearly independent reference intervals and their
    ratios. Basis validity is checked on construction.

    Immutable.
    """

    __slots__ = ("_first", "_second", "_name")

    def __init__(self, first: Reference, second: Reference, name: str = "") -> None:
        convert_basis(Interval.P1, first[0], second[0])
        object.__setattr__(self, "_first", (first[0], float(first[1])))
        object.__setattr__(self, "_second", (second[0], float(second[1])))
        object.__setattr__(self, "_name", name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def references(self) -> tuple[Reference, Reference]:
        return self._first, self._second

    @property
    def generator_ratios(self) -> tuple[float, float]:
        """Ratios of A1 and d2 in this tuning."""
        return generator_ratios(self._first, self._second)

    def ratio(self, interval: Interval) -> float:
        """Frequency ratio of an interval."""
        return syn_tune(self._first, self._second, interval)

    def cents(self, interval: Interval) -> Cents:
        """Size of an interval in cents."""
        return cents(Hertz(self.ratio(interval)))

    def __call__(self, interval: Interval) -> float:
        return self.ratio(interval)

    def __repr__(self) -> str:
        (i1, r1), (i2, r2) = self._first, self._second
        label = f"{self._name!r}, " if self._name else ""
        return f"Tuning({label}{i1}={r1}, {i2}={r2})"


def pure_octave_with(reference: Reference, name: str = "") -> Tuning:
    """A tuning with pure octaves (P8 = 2) and one more reference."""
    return Tuning((Interval.P8, 2.0), reference, name)


def tet_tune(interval: Interval, name: str = "") -> Tuning:
    """
    An equal temperament: pure octaves, and the given interval tempered out (ratio 1).

    Which interval vanishes decides how many equal parts the octave splits into.
    """
    return pure_octave_with((interval, 1.0), name)


class Intonation:
    """
    A function from pitches to absolute frequencies.

    Built from a tuning and one anchor: the anchor pitch sounds at the
    anchor frequency and every other pitch is tuned relative to it.

    Immutable.
    """

    __slots__ = ("_anchor", "_frequency", "_tuning")

    def __init__(self, anchor: Pitch, frequency: Hertz | float, tuning: Tuning) -> None:
        if not isinstance(frequency, Hertz):
            frequency = Hertz(frequency)
        object.__setattr__(self, "_anchor", anchor)
        object.__setattr__(self, "_frequency", frequency)
        object.__setattr__(self, "_tuning", tuning)

    @property
    def anchor(self) -> tuple[Pitch, Hertz]:
        return self._anchor, self._frequency

    @property
    def tuning(self) -> Tuning:
        return self._tuning

    def frequency(self, pitch: Pitch) -> Hertz:
        """Absolute frequency of a pitch."""
        return self._frequency * self._tuning(pitch - self._anchor)

    def __call__(self, pitch: Pitch) -> Hertz:
        return self.frequency(pitch)

    def __repr__(self) -> str:
        return f"Intonation({self._anchor}={self._frequency}, {self._tuning!r})"


def intone(anchor: tuple[Pitch, Hertz | float], tuning: Tuning) -> Intonation:
    """Turn a tuning into an intonation by fixing one pitch to one frequency."""
    pitch, frequency = anchor
    return Intonation(pitch, frequency, tuning)


# Syntonic tunings with pure octaves
PYTHAGOREAN = pure_octave_with((Interval.P5, 1.5), "pythagorean")
QUARTER_COMMA_MEANTONE = pure_octave_with((Interval.M3, 1.25), "quarter-comma-meantone")
SCHISMATIC_MEANTONE = pure_octave_with((8 * Interval.P4, 10.0), "schismatic-meantone")

# Equal temperaments: P8 = 2 and some other interval = 1
FIVE_TONE_EQUAL = tet_tune(Interval.m2, "five-tone-equal")
SEVEN_TONE_EQUAL = tet_tune(Interval.A1, "seven-tone-equal")
TWELVE_TONE_EQUAL = tet_tune(Interval.d2, "twelve-tone-equal")
NINETEEN_TONE_EQUAL = tet_tune(Interval.d2 - Interval.A1, "nineteen-tone-equal")
THIRTY_ONE_TONE_EQUAL = tet_tune(Interval.m3 - 4 * Interval.A1, "thirty-one-tone-equal")
FIFTY_THREE_TONE_EQUAL = tet_tune(
    31 * Interval.P8 - 53 * Interval.P5, "fifty-three-tone-equal"
)

TUNINGS: dict[str, Tuning] = {
    tuning.name: tuning
    for tuning in (
        PYTHAGOREAN,
        QUARTER_COMMA_MEANTONE,
        SCHISMATIC_MEANTONE,
        FIVE_TONE_EQUAL,
        SEVEN_TONE_EQUAL,
        TWELVE_TONE_EQUAL,
        NINETEEN_TONE_EQUAL,
        THIRTY_ONE_TONE_EQUAL,
        FIFTY_THREE_TONE_EQUAL,
    )
}

# Modern standard intonation: 12-TET with A4 = 440 Hz
STANDARD_INTONATION = intone(
    (Pitch.parse(STANDARD_ANCHOR_NAME), Hertz(STANDARD_ANCHOR_HZ)), TWELVE_TONE_EQUAL
)
