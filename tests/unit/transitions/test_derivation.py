"""Tests for ease-in / ease-out / ease-in-out derivation."""

from __future__ import annotations

import math

import pytest

from tweenr.core.transitions.derivation import Transition, VariantSet, derive_variants
from tweenr.core.transitions.errors import TransitionNotFoundError
from tweenr.core.transitions.functions import quad
from tweenr.core.transitions.models import EaseMode
from tweenr.core.transitions.registry import TransitionRegistry

FAMILIES = [
    "Pow",
    "Quad",
    "Cubic",
    "Quart",
    "Quint",
    "Expo",
    "Circ",
    "Sine",
    "Back",
    "Bounce",
    "Elastic",
]


class TestDeriveVariants:
    """Tests for derive_variants."""

    def test_returns_three_variants(self) -> None:
        """A VariantSet holds one Transition per mode."""
        variants = derive_variants("Quad", quad)
        assert isinstance(variants, VariantSet)
        assert [t.mode for t in variants] == list(EaseMode)

    def test_ease_in_is_raw(self) -> None:
        """ease_in forwards straight to the raw curve."""
        variants = derive_variants("Quad", quad)
        assert variants.ease_in(0.3) == quad(0.3)

    def test_ease_out_of_quad(self) -> None:
        """ease_out(0.5) of p^2 is 0.75."""
        assert derive_variants("Quad", quad).ease_out(0.5) == 0.75

    def test_ease_in_out_of_quad(self) -> None:
        """ease_in_out of p^2 at quarter points."""
        variants = derive_variants("Quad", quad)
        assert variants.ease_in_out(0.25) == pytest.approx(0.125)
        assert variants.ease_in_out(0.75) == pytest.approx(0.875)

    def test_params_forwarded(self) -> None:
        """Extra parameters reach the raw curve in every mode."""
        calls: list[tuple] = []

        def raw(p: float, *params: float) -> float:
            calls.append(params)
            return p

        variants = derive_variants("Probe", raw)
        variants.ease_in(0.2, 1, 2)
        variants.ease_out(0.2, 3)
        variants.ease_in_out(0.8, 4, 5)
        assert calls == [(1, 2), (3,), (4, 5)]

    def test_for_mode_accepts_spellings(self) -> None:
        """for_mode accepts enum values and camelCase."""
        variants = derive_variants("Quad", quad)
        assert variants.for_mode("easeOut") is variants.ease_out
        assert variants.for_mode(EaseMode.EASE_IN_OUT) is variants.ease_in_out

    def test_for_mode_unknown_raises(self) -> None:
        """Unknown mode raises TransitionNotFoundError."""
        with pytest.raises(TransitionNotFoundError, match="Unknown ease mode"):
            derive_variants("Quad", quad).for_mode("sideways")

    def test_transition_is_frozen(self) -> None:
        """Transitions are immutable."""
        from dataclasses import FrozenInstanceError

        variants = derive_variants("Quad", quad)
        with pytest.raises(FrozenInstanceError):
            variants.ease_in.name = "Cubic"  # type: ignore[misc]

    def test_bare_transition_calls_raw(self) -> None:
        """A Transition without mode calls its curve directly."""
        t = Transition(name="Quad", raw=quad)
        assert t(0.5) == 0.25
        assert repr(t) == "Transition('Quad')"


@pytest.mark.parametrize("name", FAMILIES)
class TestDerivationLaws:
    """Derivation laws checked across every built-in family."""

    def test_complement_law(
        self, registry: TransitionRegistry, progress_grid: list[float], name: str
    ) -> None:
        """ease_out(p) == 1 - ease_in(1 - p)."""
        variants = registry.get(name)
        for p in progress_grid:
            assert variants.ease_out(p) == pytest.approx(1 - variants.ease_in(1 - p))

    def test_in_out_left_branch(
        self, registry: TransitionRegistry, progress_grid: list[float], name: str
    ) -> None:
        """ease_in_out(p) == ease_in(2p) / 2 for p <= 0.5."""
        variants = registry.get(name)
        for p in progress_grid:
            if p <= 0.5:
                assert variants.ease_in_out(p) == pytest.approx(variants.ease_in(2 * p) / 2)

    def test_in_out_right_branch(
        self, registry: TransitionRegistry, progress_grid: list[float], name: str
    ) -> None:
        """ease_in_out(p) == 1 - ease_in(2(1 - p)) / 2 for p > 0.5."""
        variants = registry.get(name)
        for p in progress_grid:
            if p > 0.5:
                expected = 1 - variants.ease_in(2 * (1 - p)) / 2
                assert variants.ease_in_out(p) == pytest.approx(expected)

    def test_split_continuity(self, registry: TransitionRegistry, name: str) -> None:
        """Both ease_in_out branches agree at p = 0.5."""
        variants = registry.get(name)
        left = variants.ease_in(1.0) / 2
        right = (2 - variants.ease_in(2 * (1 - 0.5))) / 2
        assert variants.ease_in_out(0.5) == left
        assert left == pytest.approx(right)

    def test_reaches_one(self, registry: TransitionRegistry, name: str) -> None:
        """ease_in(1) == 1 for every family."""
        assert registry.get(name).ease_in(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "name", ["Pow", "Quad", "Cubic", "Quart", "Quint", "Circ", "Sine", "Back", "Bounce"]
)
def test_starts_at_zero(registry: TransitionRegistry, name: str) -> None:
    """ease_in(0) == 0 for families that pass through the origin."""
    assert registry.get(name).ease_in(0.0) == pytest.approx(0.0, abs=1e-12)


def test_expo_and_elastic_start_near_zero(registry: TransitionRegistry) -> None:
    """Expo and Elastic start at small closed-form values, not exactly 0."""
    assert registry.get("Expo").ease_in(0.0) == 2**-8
    expected = 2**-10 * math.cos(2 * math.pi * -1 * 300 / 90)
    assert registry.get("Elastic").ease_in(0.0) == pytest.approx(expected)


class TestOutOfRangeProgress:
    """Progress outside [0, 1] extrapolates through every derived mode."""

    @pytest.mark.parametrize(
        ("name", "mode", "progress", "expected"),
        [
            ("Quad", "ease_in", 1.5, 2.25),
            ("Quad", "ease_in", -0.5, 0.25),
            ("Quad", "ease_out", 1.2, 1 - 0.2**2),
            ("Quad", "ease_out", -0.2, 1 - 1.2**2),
            ("Cubic", "ease_in_out", -0.25, (-0.5) ** 3 / 2),
            ("Back", "ease_in_out", 1.1, (2 - (-0.2) ** 2 * (2.618 * -0.2 - 1.618)) / 2),
            ("Expo", "ease_out", 1.5, 1 - 2 ** (8 * (-0.5 - 1))),
            ("Sine", "ease_in", 2.0, 1 - math.sin(-math.pi / 2)),
        ],
    )
    def test_extrapolates(
        self,
        registry: TransitionRegistry,
        name: str,
        mode: str,
        progress: float,
        expected: float,
    ) -> None:
        """Derived variants return the unclamped closed-form value."""
        value = registry.lookup(name, mode)(progress)
        assert isinstance(value, float)
        assert value == pytest.approx(expected)

    def test_pow_fractional_exponent_beyond_one_raises(
        self, registry: TransitionRegistry
    ) -> None:
        """ease_out past 1 feeds Pow a negative base; a fractional exponent faults."""
        ease = registry.lookup("Pow", "ease_out").bind(2.5)
        with pytest.raises(ValueError):
            ease(1.1)

    def test_pow_integral_exponent_beyond_one(self, registry: TransitionRegistry) -> None:
        """An integral exponent keeps extrapolation real."""
        ease = registry.lookup("Pow", "ease_out").bind(2)
        assert ease(1.1) == pytest.approx(1 - 0.1**2)

    def test_circ_beyond_one_raises(self, registry: TransitionRegistry) -> None:
        """Circ ease_in past 1 leaves the arc-cosine domain and raises."""
        with pytest.raises(ValueError):
            registry.lookup("Circ", "ease_in")(1.2)
