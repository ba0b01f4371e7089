"""
Tests for core pitch primitives.

Tests cover:
- Quality construction and notation
- Interval algebra, ordering and quality/number projections
- Spelling semitone counts
- Accidental
- Pitch as an affine space over intervals
"""

import itertools

import pytest

from chuk_mcp_tuning.core import (
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

SAMPLE_INTERVALS = [
    Interval.P1,
    Interval.A1,
    Interval.d2,
    Interval.m3,
    -Interval.M3,
    Interval.P5,
    Interval(-3, 5),
    Interval(19, 11),
    -Interval.P8,
]


class TestQuality:
    """Tests for Quality values."""

    def test_simple_qualities(self) -> None:
        """Major, minor and perfect take no count."""
        assert Quality.MAJOR.kind == QualityKind.MAJOR
        assert Quality.MINOR.count == 0
        with pytest.raises(ValueError):
            Quality(QualityKind.PERFECT, 1)

    def test_augmented_needs_positive_count(self) -> None:
        """Augmented and diminished need at least one alteration."""
        assert Quality.augmented(2).count == 2
        with pytest.raises(ValueError):
            Quality.augmented(0)
        with pytest.raises(ValueError):
            Quality.diminished(-1)

    def test_expected_type(self) -> None:
        """Qualities know which number class they belong to."""
        assert Quality.PERFECT.expected_type() == QualityType.PERFECT
        assert Quality.MINOR.expected_type() == QualityType.MAJOR_MINOR
        assert Quality.augmented().expected_type() is None

    def test_notation(self) -> None:
        """Qualities render and parse as interval symbols."""
        assert str(Quality.MAJOR) == "M"
        assert str(Quality.MINOR) == "m"
        assert str(Quality.diminished(3)) == "ddd"
        assert Quality.parse("AA") == Quality.augmented(2)
        with pytest.raises(ValueError):
            Quality.parse("X")


class TestIntervalAlgebra:
    """Tests for interval group operations."""

    def test_named_intervals(self) -> None:
        """Named intervals have the right generator counts."""
        assert Interval.P1 == Interval(0, 0)
        assert Interval.m3 == Interval(3, 2)
        assert Interval.P5 == Interval(7, 4)
        assert Interval.P8 == Interval(12, 7)
        assert Interval.A1 == Interval(1, 0)
        assert Interval.d2 == Interval(0, 1)

    def test_counts_must_be_integers(self) -> None:
        """Non-integer generator counts are rejected, not truncated."""
        with pytest.raises(TypeError):
            Interval(1.5, 0)
        with pytest.raises(TypeError):
            Interval(0, 2.0)
        assert Interval(Interval.M3.semitones, 2) == Interval.M3

    def test_spelling_preserved_under_addition(self) -> None:
        """Stacking intervals keeps spelling."""
        assert Interval.m3 + Interval.M3 == Interval.P5
        assert Interval.d5 + Interval.M6 == Interval.parse("m10")
        assert Interval.M3 + Interval.M3 == Interval.parse("A5")

    def test_commutative(self) -> None:
        """Addition is commutative."""
        for a, b in itertools.product(SAMPLE_INTERVALS, repeat=2):
            assert a + b == b + a

    def test_associative(self) -> None:
        """Addition is associative."""
        for a, b, c in itertools.product(SAMPLE_INTERVALS, repeat=3):
            assert (a + b) + c == a + (b + c)

    def test_inverse(self) -> None:
        """Every interval plus its negation is a perfect unison."""
        for i in SAMPLE_INTERVALS:
            assert i + (-i) == Interval.P1
            assert i - i == Interval.P1

    def test_scalar_multiplication(self) -> None:
        """Integer multiples stack copies."""
        assert 2 * Interval.P5 == Interval.parse("M9")
        assert Interval.P4 * 8 == Interval(40, 24)
        assert 0 * Interval.m3 == Interval.P1
        assert -1 * Interval.m3 == -Interval.m3

    def test_no_interval_product(self) -> None:
        """Intervals cannot be multiplied by intervals."""
        with pytest.raises(TypeError):
            Interval.m3 * Interval.M3  # type: ignore[operator]

    def test_hashable(self) -> None:
        """Equal intervals hash equally."""
        assert len({Interval(3, 2), Interval.m3, Interval.parse("m3")}) == 1


class TestIntervalOrdering:
    """Tests for the diatonic-first ordering."""

    def test_thirds_and_fourths(self) -> None:
        """Diatonic steps dominate, chromatic steps break ties."""
        assert Interval.m3 < Interval.M3
        assert Interval.M3 < Interval.parse("d4")
        assert Interval.parse("A3") < Interval.parse("d4")

    def test_not_semitone_order(self) -> None:
        """An augmented seventh sorts below a diminished octave."""
        assert Interval.parse("A7") < Interval.parse("d8")
        assert Interval.parse("A7").semitones > Interval.parse("d8").semitones

    def test_matches_lexicographic_key(self) -> None:
        """Ordering agrees with (diatonic, chromatic) tuples."""
        for a, b in itertools.product(SAMPLE_INTERVALS, repeat=2):
            key_a = (a.diatonic_steps, a.chromatic_steps)
            key_b = (b.diatonic_steps, b.chromatic_steps)
            assert (a < b) == (key_a < key_b)

    def test_sorting(self) -> None:
        """Sorting uses the interval order."""
        names = ["P5", "m2", "A4", "P1", "d5", "M2"]
        ordered = sorted(Interval.parse(n) for n in names)
        assert [str(i) for i in ordered] == ["P1", "m2", "M2", "A4", "d5", "P5"]


class TestIntervalProjections:
    """Tests for number, quality and size projections."""

    def test_number(self) -> None:
        """Number is one more than diatonic steps; descending is negative."""
        assert Interval.P1.number == 1
        assert Interval.m3.number == 3
        assert Interval.P8.number == 8
        assert (-Interval.m3).number == -3

    def test_quality(self) -> None:
        """Qualities are derived from the natural reference."""
        assert Interval.M3.quality == Quality.MAJOR
        assert Interval.m3.quality == Quality.MINOR
        assert Interval.P5.quality == Quality.PERFECT
        assert Interval.A4.quality == Quality.augmented(1)
        assert Interval.d5.quality == Quality.diminished(1)
        assert Interval(2, 2).quality == Quality.diminished(1)  # d3
        assert Interval(0, 1).quality == Quality.diminished(1)  # d2
        assert Interval(1, 0).quality == Quality.augmented(1)  # A1

    def test_descending_quality(self) -> None:
        """Descending intervals keep the quality of their ascending form."""
        assert (-Interval.m3).quality == Quality.MINOR
        assert (-Interval.A4).quality == Quality.augmented(1)

    def test_compound_quality(self) -> None:
        """Compound intervals take the quality of their simple form."""
        assert (Interval.P8 + Interval.m3).quality == Quality.MINOR
        assert (Interval.P8 + Interval.m3).number == 10

    def test_quality_type(self) -> None:
        assert Interval.P4.quality_type == QualityType.PERFECT
        assert Interval.M6.quality_type == QualityType.MAJOR_MINOR
        assert (-Interval.P5).quality_type == QualityType.PERFECT

    def test_semitones_forget_spelling(self) -> None:
        """A major third and a diminished fourth are both four semitones."""
        assert Interval.M3.semitones == 4
        assert Interval.parse("d4").semitones == 4
        assert Interval.M3 != Interval.parse("d4")

    def test_octaves_and_steps(self) -> None:
        """Octaves and steps divide the semitone size by 12."""
        m10 = Interval.parse("M10")
        assert m10.octaves == 1
        assert m10.steps == 4
        descending = -Interval.m2
        assert descending.octaves == -1
        assert descending.steps == 11

    def test_measures_have_their_own_types(self) -> None:
        """Semitones, steps and number are distinct whole-number types."""
        m10 = Interval.parse("M10")
        assert isinstance(m10.semitones, Semitones)
        assert isinstance(m10.steps, Steps)
        assert isinstance(m10.number, Number)
        assert repr(m10.semitones) == "Semitones(16)"
        assert repr(m10.number) == "Number(10)"
        assert str(m10.steps) == "4"
        assert str(-Interval.P5) == "-P5"

    def test_simple_and_invert(self) -> None:
        """Compound intervals reduce; simple intervals invert."""
        assert Interval.parse("M10").simple() == Interval.M3
        assert Interval.parse("-P12").simple() == -Interval.P5
        assert Interval.parse("M10").is_compound
        assert Interval.M3.is_simple
        assert Interval.M3.invert() == Interval.m6
        assert Interval.P5.invert() == Interval.P4

    def test_is_negative(self) -> None:
        assert (-Interval.m3).is_negative
        assert not Interval.m3.is_negative
        assert not Interval.P1.is_negative


class TestIntervalConstruction:
    """Tests for quality/number construction."""

    PERFECT_NUMBERS = [1, 4, 5, 8, 11, 12, 15]
    MAJOR_MINOR_NUMBERS = [2, 3, 6, 7, 9, 10, 13, 14]

    def test_examples(self) -> None:
        assert interval(Quality.MINOR, 3) == Interval.m3
        assert interval(Quality.PERFECT, 15) == 2 * Interval.P8
        assert interval(Quality.diminished(2), 7) == Interval(8, 6)
        assert interval(Quality.MAJOR, -2) == -Interval.M2

    def test_round_trip_perfect_classes(self) -> None:
        """Perfect, augmented and diminished round-trip on perfect numbers."""
        qualities = [Quality.PERFECT] + [
            q(n) for q in (Quality.augmented, Quality.diminished) for n in (1, 2, 3)
        ]
        for number in self.PERFECT_NUMBERS:
            for quality in qualities:
                i = interval(quality, number)
                assert i.quality == quality
                assert i.number == number

    def test_round_trip_major_minor_classes(self) -> None:
        """Major, minor, augmented and diminished round-trip on other numbers."""
        qualities = [Quality.MAJOR, Quality.MINOR] + [
            q(n) for q in (Quality.augmented, Quality.diminished) for n in (1, 2, 3)
        ]
        for number in self.MAJOR_MINOR_NUMBERS:
            for quality in qualities:
                i = interval(quality, number)
                assert i.quality == quality
                assert i.number == number

    def test_round_trip_descending(self) -> None:
        """Negative numbers build descending intervals that round-trip."""
        altered = [q(n) for q in (Quality.augmented, Quality.diminished) for n in (1, 2)]
        for number in range(2, 16):
            natural = Quality.PERFECT if number in self.PERFECT_NUMBERS else Quality.MINOR
            for quality in [natural] + altered:
                i = interval(quality, -number)
                assert i.number == -number
                assert i.quality == quality

    def test_descending_unison_is_perfect_only(self) -> None:
        """A unison has no direction: -P1 is P1, altered -1 fails."""
        assert interval(Quality.PERFECT, -1) == Interval.P1
        assert Interval.parse("-P1") == Interval.P1
        for quality in (Quality.augmented(1), Quality.diminished(1), Quality.augmented(2)):
            with pytest.raises(ValueError):
                interval(quality, -1)
        with pytest.raises(ValueError):
            Interval.parse("-A1")

    def test_minor_on_perfect_class_fails(self) -> None:
        """Minor fifths and perfect thirds do not exist."""
        with pytest.raises(ValueError):
            interval(Quality.MINOR, 5)
        with pytest.raises(ValueError):
            interval(Quality.MAJOR, 8)
        with pytest.raises(ValueError):
            interval(Quality.PERFECT, 3)

    def test_number_zero_fails(self) -> None:
        with pytest.raises(ValueError):
            interval(Quality.PERFECT, 0)

    def test_augment_and_diminish(self) -> None:
        """Augmenting changes quality but not number."""
        assert augment(Interval.m3) == Interval.M3
        assert diminish(Interval.P5) == Interval.d5
        assert Interval.M6.augment().quality == Quality.augmented(1)
        assert Interval.M6.augment().number == 6


class TestIntervalNotation:
    """Tests for parsing and rendering interval names."""

    def test_str(self) -> None:
        assert str(Interval.m3) == "m3"
        assert str(Interval(6, 3)) == "A4"
        assert str(-Interval.P5) == "-P5"
        assert str(Interval(-1, 2)) == "dddd3"
        assert str(Interval(1, 5)) == "ddddddd6"

    def test_parse(self) -> None:
        assert Interval.parse("P8") == Interval.P8
        assert Interval.parse(" -M2 ") == -Interval.M2
        assert Interval.parse("dd2") == Interval.d2 - Interval.A1

    def test_parse_rejects_garbage(self) -> None:
        for text in ["", "X3", "m", "P3", "m0", "M-3"]:
            with pytest.raises(ValueError):
                Interval.parse(text)

    def test_str_parse_round_trip(self) -> None:
        for i in SAMPLE_INTERVALS:
            if i.diatonic_steps != 0 or i.chromatic_steps >= 0:
                assert Interval.parse(str(i)) == i


class TestSpell:
    """Tests for spelling semitone counts."""

    def test_tritone(self) -> None:
        """The caller chooses the spelling basis."""
        assert spell(6) == Interval.A4
        assert spell(6, prefer_flats=True) == Interval.d5

    def test_naturals_agree(self) -> None:
        for semitones, expected in [(0, "P1"), (4, "M3"), (7, "P5"), (12, "P8"), (19, "P12")]:
            assert spell(semitones) == Interval.parse(expected)
            assert spell(semitones, prefer_flats=True) == Interval.parse(expected)

    def test_black_keys(self) -> None:
        assert spell(3) == Interval.parse("A2")
        assert spell(3, prefer_flats=True) == Interval.m3

    def test_negative(self) -> None:
        assert spell(-1) == -Interval.m2
        assert spell(-12) == -Interval.P8

    def test_semitones_preserved(self) -> None:
        for semitones in range(-24, 25):
            assert spell(semitones).semitones == semitones
            assert spell(semitones, prefer_flats=True).semitones == semitones


class TestAccidental:
    """Tests for Accidental."""

    def test_display(self) -> None:
        assert str(Accidental(0)) == "natural"
        assert str(Accidental(1)) == "sharp"
        assert str(Accidental(-1)) == "flat"
        assert str(Accidental(2)) == "doubleSharp"
        assert str(Accidental(-2)) == "doubleFlat"
        assert str(Accidental(3)) == "sharp * 3"
        assert str(Accidental(-4)) == "flat * 4"

    def test_group(self) -> None:
        assert Accidental.SHARP + Accidental.FLAT == Accidental.NATURAL
        assert -Accidental.DOUBLE_SHARP == Accidental.DOUBLE_FLAT
        assert Accidental(3) - Accidental(1) == Accidental(2)

    def test_sharpen_flatten(self) -> None:
        assert sharpen(Accidental.NATURAL) == Accidental.SHARP
        assert flatten(Accidental.FLAT) == Accidental.DOUBLE_FLAT

    def test_ordering(self) -> None:
        assert Accidental.FLAT < Accidental.NATURAL < Accidental.SHARP


class TestPitch:
    """Tests for Pitch and the pitch/interval affine space."""

    def test_from_name(self) -> None:
        assert Pitch.from_name(Name.C) == Pitch.C4
        assert Pitch.from_name(Name.A).interval == Interval(9, 5)
        assert Pitch.from_name(Name.B, Accidental.FLAT, 3).interval == Interval(-2, -1)

    def test_projections(self) -> None:
        pitch = Pitch.parse("Bb3")
        assert pitch.name == Name.B
        assert pitch.octave == 3
        assert pitch.accidental == Accidental.FLAT

    def test_parse_and_str(self) -> None:
        for text in ["C4", "C#4", "Db4", "Bb3", "F##5", "Ebb2", "C-1"]:
            assert str(Pitch.parse(text)) == text
        assert Pitch.parse("F#") == Pitch.parse("F#4")
        with pytest.raises(ValueError):
            Pitch.parse("H4")

    def test_enharmonics_differ(self) -> None:
        """C#4 and Db4 are distinct pitches with the same MIDI number."""
        assert Pitch.parse("C#4") != Pitch.parse("Db4")
        assert Pitch.parse("C#4").to_midi() == Pitch.parse("Db4").to_midi() == 61

    def test_midi(self) -> None:
        assert Pitch.C4.to_midi() == 60
        assert Pitch.parse("A4").to_midi() == 69
        assert Pitch.parse("C-1").to_midi() == 0
        assert Pitch.from_midi(61) == Pitch.parse("C#4")
        assert Pitch.from_midi(61, prefer_flats=True) == Pitch.parse("Db4")

    def test_transpose(self) -> None:
        assert Pitch.C4 + Interval.m3 == Pitch.parse("Eb4")
        assert Interval.m3 + Pitch.C4 == Pitch.parse("Eb4")
        assert Pitch.parse("F4") - Pitch.C4 == Interval.P4
        assert Pitch.parse("C5") - Interval.P5 == Pitch.parse("F4")

    def test_sharpen_flatten(self) -> None:
        assert sharpen(Pitch.C4) == Pitch.parse("C#4")
        assert flatten(Pitch.parse("D4")) == Pitch.parse("Db4")

    def test_affine_laws(self) -> None:
        """(p + i) - p == i and p + (q - p) == q."""
        pitches = [Pitch.C4, Pitch.parse("Bb3"), Pitch.parse("F##5"), Pitch.parse("Ebb2")]
        for p in pitches:
            for i in SAMPLE_INTERVALS:
                assert (p + i) - p == i
            for q in pitches:
                assert p + (q - p) == q

    def test_affine_action(self) -> None:
        """p + (i1 + i2) == (p + i1) + i2."""
        p = Pitch.parse("G3")
        for i1, i2 in itertools.product(SAMPLE_INTERVALS, repeat=2):
            assert p + (i1 + i2) == (p + i1) + i2

    def test_ordering(self) -> None:
        assert Pitch.parse("B#3") < Pitch.parse("Cb4")
        assert Pitch.C4 < Pitch.parse("C#4") < Pitch.parse("Db4")
