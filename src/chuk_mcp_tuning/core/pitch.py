"""
Pitch primitives - Quality, Interval, Accidental, Name and Pitch.

An Interval is an element of the free abelian group on two generators:

    A1 (augmented unison) - one chromatic semitone, no diatonic step
    d2 (diminished second) - one diatonic step, no chromatic semitone

and is stored exactly as the integer pair (chromatic, diatonic). Number,
quality, semitones and octaves are projections of that pair, never stored.

Pitches are points in the affine space over intervals, measured from C4:

    Pitch.C4 + Interval.m3 == Pitch.parse("Eb4")
    Pitch.parse("F4") - Pitch.C4 == Interval.P4
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_tuning.constants import (
    DIATONIC_SEMITONES,
    MIDDLE_C_MIDI,
    PERFECT_RESIDUES,
    SEMITONES_PER_OCTAVE,
    STEPS_PER_OCTAVE,
    ErrorMessages,
)

_INTERVAL_PATTERN = re.compile(r"^(-?)(P|M|m|A+|d+)(\d+)$")
_PITCH_PATTERN = re.compile(r"^([A-Ga-g])(#*|b*)(-?\d+)?$")

# Diatonic step for each semitone of the octave, per spelling basis
_SHARP_STEPS: tuple[int, ...] = (0, 0, 1, 1, 2, 3, 3, 4, 4, 5, 5, 6)
_FLAT_STEPS: tuple[int, ...] = (0, 1, 1, 2, 2, 3, 4, 4, 5, 5, 6, 6)


class QualityType(str, Enum):
    """Whether an interval number takes perfect or major/minor qualities."""

    PERFECT = "perfect"
    MAJOR_MINOR = "major_minor"


class QualityKind(str, Enum):
    """The five kinds of interval quality."""

    MAJOR = "major"
    MINOR = "minor"
    PERFECT = "perfect"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"


@dataclass(frozen=True)
class Quality:
    """
    Interval quality: major, minor, perfect, augmented or diminished.

    Augmented and diminished carry a count, so doubly augmented is
    Quality.augmented(2). The quality of a compound interval is that of
    its simple counterpart.
    """

    kind: QualityKind
    count: int = 0

    MAJOR: ClassVar[Quality]
    MINOR: ClassVar[Quality]
    PERFECT: ClassVar[Quality]

    def __post_init__(self) -> None:
        if self.kind in (QualityKind.AUGMENTED, QualityKind.DIMINISHED):
            if self.count < 1:
                raise ValueError(f"{self.kind.value} quality needs a count >= 1, got {self.count}")
        elif self.count != 0:
            raise ValueError(f"{self.kind.value} quality takes no count, got {self.count}")

    @classmethod
    def augmented(cls, count: int = 1) -> Quality:
        return cls(QualityKind.AUGMENTED, count)

    @classmethod
    def diminished(cls, count: int = 1) -> Quality:
        return cls(QualityKind.DIMINISHED, count)

    def expected_type(self) -> QualityType | None:
        """
        The number class this quality requires.

        Returns None for augmented and diminished, which apply to any number.
        """
        if self.kind == QualityKind.PERFECT:
            return QualityType.PERFECT
        if self.kind in (QualityKind.MAJOR, QualityKind.MINOR):
            return QualityType.MAJOR_MINOR
        return None

    def __str__(self) -> str:
        if self.kind == QualityKind.MAJOR:
            return "M"
        if self.kind == QualityKind.MINOR:
            return "m"
        if self.kind == QualityKind.PERFECT:
            return "P"
        if self.kind == QualityKind.AUGMENTED:
            return "A" * self.count
        return "d" * self.count

    def __repr__(self) -> str:
        if self.count:
            return f"Quality.{self.kind.value}({self.count})"
        return f"Quality.{self.kind.name}"

    @classmethod
    def parse(cls, text: str) -> Quality:
        """Parse a quality symbol: 'M', 'm', 'P', 'A', 'AA', 'd', 'ddd'..."""
        if text == "M":
            return cls.MAJOR
        if text == "m":
            return cls.MINOR
        if text == "P":
            return cls.PERFECT
        if text and set(text) == {"A"}:
            return cls.augmented(len(text))
        if text and set(text) == {"d"}:
            return cls.diminished(len(text))
        raise ValueError(f"Unknown interval quality: {text}")


Quality.MAJOR = Quality(QualityKind.MAJOR)
Quality.MINOR = Quality(QualityKind.MINOR)
Quality.PERFECT = Quality(QualityKind.PERFECT)


class _Count(int):
    """Whole-number measure of an interval, kept apart from plain ints by type."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


class Semitones(_Count):
    """Size in 12-tone equal semitones."""


class Steps(_Count):
    """Semitones left over within one octave (0-11)."""


class Number(_Count):
    """Conventional interval number: unison 1, second 2, descending fifth -5."""


def _reference(diatonic: int) -> tuple[int, int]:
    """
    Chromatic position of the natural (perfect or major) interval spanning
    a non-negative number of diatonic steps, and its residue in the octave.
    """
    octaves, residue = divmod(diatonic, STEPS_PER_OCTAVE)
    return DIATONIC_SEMITONES[residue] + SEMITONES_PER_OCTAVE * octaves, residue


@total_ordering
class Interval:
    """
    A musical interval as a pair of generator counts.

    Interval(chromatic, diatonic) means chromatic * A1 + diatonic * d2, so
    a minor third is Interval(3, 2) and a perfect octave Interval(12, 7).
    Every integer pair is a valid interval; direction is included, so
    -Interval.m3 is a descending minor third.

    Intervals add, subtract, negate and scale by integers. They are ordered
    by diatonic steps first, then chromatic steps, so a major third sorts
    below a diminished fourth.

    Immutable and hashable.
    """

    __slots__ = ("_chromatic", "_diatonic")
    _chromatic: int
    _diatonic: int

    # Generators
    A1: ClassVar[Interval]
    d2: ClassVar[Interval]

    # Named intervals
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, chromatic: int = 0, diatonic: int = 0) -> None:
        """
        Create an interval from its A1 and d2 counts.

        Raises TypeError unless both counts are integers.
        """
        for count in (chromatic, diatonic):
            if not isinstance(count, int) or isinstance(count, bool):
                raise TypeError(f"Interval counts must be integers, got {count!r}")
        object.__setattr__(self, "_chromatic", int(chromatic))
        object.__setattr__(self, "_diatonic", int(diatonic))

    @classmethod
    def from_quality(cls, quality: Quality, number: int) -> Interval:
        """
        Build an interval from quality and number.

        A negative number gives the descending interval. Raises ValueError
        for number 0 and for qualities that do not fit the number, such as
        a minor fifth or a perfect third. A unison has no direction, so -1
        only accepts Perfect (-P1 is P1).
        """
        if number == 0:
            raise ValueError("Interval number cannot be 0")
        if number == -1 and quality != Quality.PERFECT:
            raise ValueError(
                ErrorMessages.INVALID_QUALITY.format(quality=quality, number=number)
            )
        if number < 0:
            return -cls.from_quality(quality, -number)

        diatonic = number - 1
        reference, residue = _reference(diatonic)
        perfect = residue in PERFECT_RESIDUES

        expected = quality.expected_type()
        if expected is not None and (expected == QualityType.PERFECT) != perfect:
            raise ValueError(
                ErrorMessages.INVALID_QUALITY.format(quality=quality.kind.value, number=number)
            )

        if quality.kind in (QualityKind.PERFECT, QualityKind.MAJOR):
            chromatic = reference
        elif quality.kind == QualityKind.MINOR:
            chromatic = reference - 1
        elif quality.kind == QualityKind.AUGMENTED:
            chromatic = reference + quality.count
        elif perfect:
            chromatic = reference - quality.count
        else:
            chromatic = reference - 1 - quality.count
        return cls(chromatic, diatonic)

    @property
    def chromatic_steps(self) -> int:
        """Number of A1 generators."""
        return self._chromatic

    @property
    def diatonic_steps(self) -> int:
        """Number of d2 generators."""
        return self._diatonic

    @property
    def semitones(self) -> Semitones:
        """
        Size in 12-tone equal semitones.

        Forgets spelling: a major third and a diminished fourth are both 4.
        """
        return Semitones(self._chromatic)

    @property
    def octaves(self) -> int:
        """Whole octaves in the semitone size (floor division)."""
        return self.semitones // SEMITONES_PER_OCTAVE

    @property
    def steps(self) -> Steps:
        """Semitones left after removing whole octaves (0-11)."""
        return Steps(self.semitones % SEMITONES_PER_OCTAVE)

    @property
    def number(self) -> Number:
        """
        Interval number (unison = 1, second = 2, ...).

        One more than the diatonic steps spanned; descending intervals have
        negative numbers. Never 0.
        """
        if self._diatonic >= 0:
            return Number(self._diatonic + 1)
        return Number(self._diatonic - 1)

    @property
    def quality_type(self) -> QualityType:
        """Whether this interval's number is a perfect or major/minor class."""
        residue = abs(self._diatonic) % STEPS_PER_OCTAVE
        return QualityType.PERFECT if residue in PERFECT_RESIDUES else QualityType.MAJOR_MINOR

    @property
    def quality(self) -> Quality:
        """Quality derived from the deviation against the natural interval."""
        if self._diatonic < 0:
            return (-self).quality

        reference, residue = _reference(self._diatonic)
        deviation = self._chromatic - reference

        if residue in PERFECT_RESIDUES:
            if deviation == 0:
                return Quality.PERFECT
            if deviation > 0:
                return Quality.augmented(deviation)
            return Quality.diminished(-deviation)

        if deviation == 0:
            return Quality.MAJOR
        if deviation == -1:
            return Quality.MINOR
        if deviation > 0:
            return Quality.augmented(deviation)
        return Quality.diminished(-deviation - 1)

    @property
    def is_negative(self) -> bool:
        """True if the interval sorts below a perfect unison."""
        return self < Interval.P1

    @property
    def is_simple(self) -> bool:
        """True if the interval spans less than an octave of diatonic steps."""
        return abs(self._diatonic) < STEPS_PER_OCTAVE

    @property
    def is_compound(self) -> bool:
        return not self.is_simple

    def simple(self) -> Interval:
        """
        Reduce a compound interval to its simple form, keeping direction.

        M10 -> M3, -P12 -> -P5
        """
        if self._diatonic < 0:
            return -(-self).simple()
        return self - Interval.P8 * (self._diatonic // STEPS_PER_OCTAVE)

    def invert(self) -> Interval:
        """
        Invert the simple form of the interval within an octave.

        M3 -> m6
        P5 -> P4
        """
        return Interval.P8 - self.simple()

    def augment(self) -> Interval:
        """Raise by one A1, keeping the number: m3 -> M3 -> A3."""
        return self + Interval.A1

    def diminish(self) -> Interval:
        """Lower by one A1, keeping the number: P5 -> d5 -> dd5."""
        return self - Interval.A1

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals (stack them)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._chromatic + other._chromatic, self._diatonic + other._diatonic)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._chromatic - other._chromatic, self._diatonic - other._diatonic)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._chromatic, -self._diatonic)

    def __mul__(self, n: int) -> Interval:
        """Stack n copies of the interval (e.g. 8 * P4)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._chromatic * n, self._diatonic * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._chromatic == other._chromatic and self._diatonic == other._diatonic

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self._diatonic, self._chromatic) < (other._diatonic, other._chromatic)

    def __hash__(self) -> int:
        return hash((self._chromatic, self._diatonic))

    def __repr__(self) -> str:
        return f"Interval({self._chromatic}, {self._diatonic})"

    def __str__(self) -> str:
        """Conventional notation: 'm3', 'P5', 'AA4', '-M2'."""
        sign = "-" if self._diatonic < 0 else ""
        return f"{sign}{self.quality}{abs(self.number)}"

    @classmethod
    def parse(cls, text: str) -> Interval:
        """Parse an interval from notation like 'm3', 'P8', 'dd7', '-A4'."""
        match = _INTERVAL_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(ErrorMessages.INVALID_INTERVAL.format(interval=text))
        sign, quality, number = match.groups()
        return cls.from_quality(Quality.parse(quality), -int(number) if sign else int(number))


# Initialize class constants after class is defined
Interval.A1 = Interval(1, 0)
Interval.d2 = Interval(0, 1)

Interval.UNISON = Interval(0, 0)
Interval.MINOR_SECOND = Interval(1, 1)
Interval.MAJOR_SECOND = Interval(2, 1)
Interval.MINOR_THIRD = Interval(3, 2)
Interval.MAJOR_THIRD = Interval(4, 2)
Interval.PERFECT_FOURTH = Interval(5, 3)
Interval.AUGMENTED_FOURTH = Interval(6, 3)
Interval.DIMINISHED_FIFTH = Interval(6, 4)
Interval.PERFECT_FIFTH = Interval(7, 4)
Interval.MINOR_SIXTH = Interval(8, 5)
Interval.MAJOR_SIXTH = Interval(9, 5)
Interval.MINOR_SEVENTH = Interval(10, 6)
Interval.MAJOR_SEVENTH = Interval(11, 6)
Interval.OCTAVE = Interval(12, 7)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE


def interval(quality: Quality, number: int) -> Interval:
    """Construct an interval from quality and number: interval(Quality.MINOR, 3)."""
    return Interval.from_quality(quality, number)


def spell(semitones: int, prefer_flats: bool = False) -> Interval:
    """
    Spell a semitone count as an interval.

    The caller picks the basis: sharps spell a tritone as A4, flats as d5.

    >>> spell(6)
    Interval(6, 3)
    >>> spell(6, prefer_flats=True)
    Interval(6, 4)
    """
    octaves, residue = divmod(semitones, SEMITONES_PER_OCTAVE)
    steps = _FLAT_STEPS if prefer_flats else _SHARP_STEPS
    return Interval(semitones, STEPS_PER_OCTAVE * octaves + steps[residue])


@total_ordering
class Accidental:
    """
    Number of semitone alterations: flat = -1, natural = 0, sharp = 1.

    Any number of sharps or flats is allowed. Accidentals add like the
    integers they wrap.
    """

    __slots__ = ("_value",)
    _value: int

    NATURAL: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]
    DOUBLE_FLAT: ClassVar[Accidental]

    def __init__(self, value: int = 0) -> None:
        object.__setattr__(self, "_value", int(value))

    @property
    def value(self) -> int:
        return self._value

    def sharpen(self) -> Accidental:
        return Accidental(self._value + 1)

    def flatten(self) -> Accidental:
        return Accidental(self._value - 1)

    def __add__(self, other: Accidental) -> Accidental:
        if not isinstance(other, Accidental):
            return NotImplemented
        return Accidental(self._value + other._value)

    def __sub__(self, other: Accidental) -> Accidental:
        if not isinstance(other, Accidental):
            return NotImplemented
        return Accidental(self._value - other._value)

    def __neg__(self) -> Accidental:
        return Accidental(-self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Accidental):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Accidental) -> bool:
        if not isinstance(other, Accidental):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(("Accidental", self._value))

    def __repr__(self) -> str:
        return f"Accidental({self._value})"

    def __str__(self) -> str:
        names = {0: "natural", 1: "sharp", -1: "flat", 2: "doubleSharp", -2: "doubleFlat"}
        if self._value in names:
            return names[self._value]
        if self._value > 0:
            return f"sharp * {self._value}"
        return f"flat * {-self._value}"

    def symbol(self) -> str:
        """Notation symbol: '', '#', 'bb'..."""
        return "#" * self._value if self._value >= 0 else "b" * -self._value


Accidental.NATURAL = Accidental(0)
Accidental.SHARP = Accidental(1)
Accidental.FLAT = Accidental(-1)
Accidental.DOUBLE_SHARP = Accidental(2)
Accidental.DOUBLE_FLAT = Accidental(-2)


class Name(IntEnum):
    """The seven natural note names, valued by diatonic step above C."""

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6


@total_ordering
class Pitch:
    """
    A spelled pitch, stored as the interval from C4.

    Pitches and intervals form an affine space:

        pitch + interval -> pitch
        pitch - interval -> pitch
        pitch - pitch    -> interval

    C#4 and Db4 are different pitches. Ordering follows the interval from
    C4 (diatonic position first).

    Immutable and hashable.
    """

    __slots__ = ("_interval",)
    _interval: Interval

    C4: ClassVar[Pitch]

    def __init__(self, interval: Interval | None = None) -> None:
        object.__setattr__(self, "_interval", interval if interval is not None else Interval.P1)

    @classmethod
    def from_name(cls, name: Name, accidental: Accidental | int = 0, octave: int = 4) -> Pitch:
        """Build a pitch from name, accidental and octave: from_name(Name.B, -1, 3) is Bb3."""
        diatonic = int(name) + STEPS_PER_OCTAVE * (octave - 4)
        chromatic = (
            DIATONIC_SEMITONES[int(name)] + SEMITONES_PER_OCTAVE * (octave - 4) + int(accidental)
        )
        return cls(Interval(chromatic, diatonic))

    @classmethod
    def from_midi(cls, midi_note: int, prefer_flats: bool = False) -> Pitch:
        """Spell a MIDI note number as a pitch. C4 = 60."""
        return cls(spell(midi_note - MIDDLE_C_MIDI, prefer_flats))

    @property
    def interval(self) -> Interval:
        """Interval from C4 to this pitch."""
        return self._interval

    @property
    def name(self) -> Name:
        return Name(self._interval.diatonic_steps % STEPS_PER_OCTAVE)

    @property
    def octave(self) -> int:
        return self._interval.diatonic_steps // STEPS_PER_OCTAVE + 4

    @property
    def accidental(self) -> Accidental:
        natural = Pitch.from_name(self.name, 0, self.octave)
        return Accidental(self._interval.chromatic_steps - natural._interval.chromatic_steps)

    def sharpen(self) -> Pitch:
        return self + Interval.A1

    def flatten(self) -> Pitch:
        return self - Interval.A1

    def to_midi(self) -> int:
        """MIDI note number (C4 = 60). Enharmonic spellings share a number."""
        return MIDDLE_C_MIDI + self._interval.semitones

    def __add__(self, other: Interval) -> Pitch:
        """Transpose by an interval."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Pitch(self._interval + other)

    def __radd__(self, other: Interval) -> Pitch:
        return self.__add__(other)

    def __sub__(self, other):
        """Pitch - Interval transposes down; Pitch - Pitch is the interval between them."""
        if isinstance(other, Pitch):
            return self._interval - other._interval
        if isinstance(other, Interval):
            return Pitch(self._interval - other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._interval == other._interval

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._interval < other._interval

    def __hash__(self) -> int:
        return hash(("Pitch", self._interval))

    def __repr__(self) -> str:
        return f"Pitch.parse({str(self)!r})"

    def __str__(self) -> str:
        return f"{self.name.name}{self.accidental.symbol()}{self.octave}"

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch from a string like 'A4', 'Bb3', 'C##5' or 'F#'.

        The octave defaults to 4.
        """
        match = _PITCH_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=text))
        letter, accidentals, octave = match.groups()
        alteration = len(accidentals) if accidentals.startswith("#") else -len(accidentals)
        return cls.from_name(Name[letter.upper()], alteration, int(octave) if octave else 4)


Pitch.C4 = Pitch(Interval.P1)


def sharpen(value: Accidental | Pitch):
    """Raise an accidental or pitch by one semitone."""
    return value.sharpen()


def flatten(value: Accidental | Pitch):
    """Lower an accidental or pitch by one semitone."""
    return value.flatten()


def augment(value: Interval) -> Interval:
    """Add one A1 to an interval."""
    return value.augment()


def diminish(value: Interval) -> Interval:
    """Subtract one A1 from an interval."""
    return value.diminish()
