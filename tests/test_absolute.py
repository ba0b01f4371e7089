"""
Tests for absolute frequency units.

Tests cover:
- Hertz composition and display
- Octaves, Fifths, Cents composition
- Conversions between units
"""

import pytest

from chuk_mcp_tuning.core import (
    Cents,
    Fifths,
    Hertz,
    Octaves,
    cents,
    fifths,
    frequency,
    octaves,
)


class TestHertz:
    """Tests for Hertz."""

    def test_display(self) -> None:
        assert str(Hertz(440.0)) == "440.0 Hz"
        assert str(Hertz(261.5)) == "261.5 Hz"

    def test_compose_by_multiplication(self) -> None:
        """Stacking ratios multiplies."""
        assert Hertz(440.0) * Hertz(1.5) == Hertz(660.0)
        assert Hertz(440.0) * 2 == Hertz(880.0)
        assert 0.5 * Hertz(440.0) == Hertz(220.0)
        assert Hertz.identity() * Hertz(3.0) == Hertz(3.0)

    def test_ratio(self) -> None:
        """Dividing two frequencies gives a plain ratio."""
        assert Hertz(660.0) / Hertz(440.0) == pytest.approx(1.5)
        assert Hertz(880.0) / 2 == Hertz(440.0)

    def test_ordering(self) -> None:
        assert Hertz(220.0) < Hertz(440.0)
        assert max(Hertz(1.0), Hertz(3.0)) == Hertz(3.0)


class TestLogarithmicUnits:
    """Tests for Octaves, Fifths and Cents."""

    def test_compose_by_addition(self) -> None:
        assert Octaves(1) + Octaves(2) == Octaves(3)
        assert Cents(700) + Cents(500) == Cents(1200)
        assert Fifths(2) - Fifths(1) == Fifths(1)
        assert -Cents(100) == Cents(-100)
        assert 3 * Octaves(1) == Octaves(3)
        assert Cents.identity() == Cents(0)

    def test_units_do_not_mix(self) -> None:
        """No implicit coercion between units."""
        with pytest.raises(TypeError):
            Octaves(1) + Cents(1200)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Hertz(440.0) * Octaves(1)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Cents(1) + 1  # type: ignore[operator]
        assert Octaves(1) != Cents(1)

    def test_ordering(self) -> None:
        assert Cents(100) < Cents(200)
        with pytest.raises(TypeError):
            Cents(100) < Octaves(1)  # type: ignore[operator]


class TestConversions:
    """Tests for frequency() and the logarithmic conversions."""

    def test_frequency(self) -> None:
        assert frequency(Hertz(3.0)) == Hertz(3.0)
        assert frequency(Octaves(1)) == Hertz(2.0)
        assert frequency(Fifths(1)) == Hertz(1.5)
        assert frequency(Cents(1200)).value == pytest.approx(2.0)

    def test_frequency_rejects_plain_numbers(self) -> None:
        with pytest.raises(TypeError):
            frequency(440.0)  # type: ignore[arg-type]

    def test_known_values(self) -> None:
        assert octaves(Hertz(8.0)).value == pytest.approx(3.0)
        assert fifths(Hertz(2.25)).value == pytest.approx(2.0)
        assert cents(Hertz(2.0)).value == pytest.approx(1200.0)
        assert cents(Octaves(1)).value == pytest.approx(1200.0)

    @pytest.mark.parametrize("hz", [0.001, 1.0, 27.5, 440.0, 12345.6])
    def test_round_trip(self, hz: float) -> None:
        """frequency(unit(h)) == h for every unit."""
        h = Hertz(hz)
        assert frequency(octaves(h)).value == pytest.approx(hz, rel=1e-12)
        assert frequency(fifths(h)).value == pytest.approx(hz, rel=1e-12)
        assert frequency(cents(h)).value == pytest.approx(hz, rel=1e-12)

    def test_logarithmic_round_trip(self) -> None:
        assert octaves(frequency(Octaves(2.5))).value == pytest.approx(2.5)
        assert cents(frequency(Cents(-350.0))).value == pytest.approx(-350.0)

    def test_homomorphism(self) -> None:
        """Multiplying frequencies adds their logarithms."""
        f = Hertz(440.0)
        assert frequency(octaves(f) + Octaves(1)).value == pytest.approx(880.0)
        assert frequency(fifths(f) + Fifths(1)).value == pytest.approx(660.0)
        assert frequency(cents(f) + Cents(1200)).value == pytest.approx(880.0)
        assert cents(f * Hertz(1.5)).value == pytest.approx(
            (cents(f) + cents(Hertz(1.5))).value
        )
