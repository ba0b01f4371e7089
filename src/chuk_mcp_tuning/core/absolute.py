"""
Absolute pitch primitives - Hertz and its logarithmic relatives.

Hertz is an absolute frequency (or a frequency ratio). Stacking ratios
multiplies them. Octaves, Fifths and Cents measure the same thing on a
logarithmic scale, where stacking is addition:

    f * (2/1) == frequency(octaves(f) + Octaves(1))
    f * (3/2) == frequency(fifths(f) + Fifths(1))
    f * (2/1) == frequency(cents(f) + Cents(1200))

The unit types never coerce into one another. Convert explicitly with
frequency(), octaves(), fifths() and cents().
"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import ClassVar, Union


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@total_ordering
class Hertz:
    """
    Absolute frequency in Hertz.

    Hertz values compose by multiplication: a frequency times a ratio is a
    frequency, and two frequencies divide into a plain ratio.

    Immutable and hashable.
    """

    __slots__ = ("_value",)
    _value: float

    def __init__(self, value: float) -> None:
        object.__setattr__(self, "_value", float(value))

    @property
    def value(self) -> float:
        """The frequency as a float."""
        return self._value

    @classmethod
    def identity(cls) -> Hertz:
        """The neutral element of composition (ratio 1)."""
        return cls(1.0)

    def __mul__(self, other: Hertz | float) -> Hertz:
        """Compose with another frequency ratio."""
        if isinstance(other, Hertz):
            return Hertz(self._value * other._value)
        if _is_scalar(other):
            return Hertz(self._value * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Hertz:
        if _is_scalar(other):
            return Hertz(other * self._value)
        return NotImplemented

    def __truediv__(self, other: Hertz | float) -> Hertz | float:
        """
        Hertz / Hertz is the ratio between two frequencies (a float).
        Hertz / float scales the frequency down.
        """
        if isinstance(other, Hertz):
            return self._value / other._value
        if _is_scalar(other):
            return Hertz(self._value / other)
        return NotImplemented

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hertz):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Hertz) -> bool:
        if not isinstance(other, Hertz):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(("Hertz", self._value))

    def __repr__(self) -> str:
        return f"Hertz({self._value!r})"

    def __str__(self) -> str:
        return f"{self._value} Hz"


@total_ordering
class _LogarithmicUnit:
    """
    Shared behaviour for logarithmic frequency units.

    A value x stands for the ratio BASE ** (x / SCALE). Values of the same
    unit compose by addition; different units never mix.
    """

    __slots__ = ("_value",)
    _value: float

    BASE: ClassVar[float]
    SCALE: ClassVar[float] = 1.0

    def __init__(self, value: float = 0.0) -> None:
        object.__setattr__(self, "_value", float(value))

    @property
    def value(self) -> float:
        return self._value

    @classmethod
    def identity(cls):
        """The neutral element of composition (ratio 1)."""
        return cls(0.0)

    @classmethod
    def from_hertz(cls, hertz: Hertz):
        """Measure a frequency in this unit."""
        return cls(math.log(hertz.value, cls.BASE) * cls.SCALE)

    def to_hertz(self) -> Hertz:
        """The frequency ratio this value stands for."""
        return Hertz(self.BASE ** (self._value / self.SCALE))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __neg__(self):
        return type(self)(-self._value)

    def __mul__(self, n: float):
        """Stack n copies (scalar multiplication)."""
        if not _is_scalar(n):
            return NotImplemented
        return type(self)(self._value * n)

    def __rmul__(self, n: float):
        return self.__mul__(n)

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Octaves(_LogarithmicUnit):
    """Number of pure octaves (base ratio 2/1)."""

    __slots__ = ()
    BASE = 2.0


class Fifths(_LogarithmicUnit):
    """Number of pure fifths (base ratio 3/2)."""

    __slots__ = ()
    BASE = 1.5


class Cents(_LogarithmicUnit):
    """Number of cents (1200 per pure octave)."""

    __slots__ = ()
    BASE = 2.0
    SCALE = 1200.0


HasFrequency = Union[Hertz, Octaves, Fifths, Cents]


def frequency(value: HasFrequency) -> Hertz:
    """Convert any frequency measure to Hertz."""
    if isinstance(value, Hertz):
        return value
    if isinstance(value, _LogarithmicUnit):
        return value.to_hertz()
    raise TypeError(f"Cannot take the frequency of {value!r}")


def octaves(value: HasFrequency) -> Octaves:
    """Convert a frequency to octaves."""
    return Octaves.from_hertz(frequency(value))


def fifths(value: HasFrequency) -> Fifths:
    """Convert a frequency to fifths."""
    return Fifths.from_hertz(frequency(value))


def cents(value: HasFrequency) -> Cents:
    """Convert a frequency to cents."""
    return Cents.from_hertz(frequency(value))
