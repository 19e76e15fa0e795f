"""Derivation of directional variants from a raw curve.

A raw curve ``raw(progress, *params)`` yields three variants:

- ease_in:     ``raw(p)``
- ease_out:    ``1 - raw(1 - p)``
- ease_in_out: ``raw(2p) / 2`` for ``p <= 0.5``, else ``(2 - raw(2(1 - p))) / 2``

Parameters passed to a variant are forwarded to the raw curve unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from tweenr.core.transitions.binding import Bindable
from tweenr.core.transitions.models import CurveFunction, EaseMode


def ease_in(raw: CurveFunction, progress: float, *params: Any) -> float:
    return raw(progress, *params)


def ease_out(raw: CurveFunction, progress: float, *params: Any) -> float:
    return 1 - raw(1 - progress, *params)


def ease_in_out(raw: CurveFunction, progress: float, *params: Any) -> float:
    if progress <= 0.5:
        return raw(2 * progress, *params) / 2
    return (2 - raw(2 * (1 - progress), *params)) / 2


_DERIVATIONS = {
    EaseMode.EASE_IN: ease_in,
    EaseMode.EASE_OUT: ease_out,
    EaseMode.EASE_IN_OUT: ease_in_out,
}


@dataclass(frozen=True)
class Transition(Bindable):
    """A named, callable transition.

    With ``mode`` set, calls are routed through the matching derivation of
    ``raw``. Bare transitions (``mode=None``) call ``raw`` directly.

    Attributes:
        name: Name the transition is registered under.
        raw: The raw curve function.
        mode: Derived variant, or None for a bare curve.
    """

    name: str
    raw: CurveFunction
    mode: EaseMode | None = None

    def __call__(self, progress: float, *params: Any) -> float:
        if self.mode is None:
            return self.raw(progress, *params)
        return _DERIVATIONS[self.mode](self.raw, progress, *params)

    def __repr__(self) -> str:
        if self.mode is None:
            return f"Transition({self.name!r})"
        return f"Transition({self.name!r}, {self.mode.value!r})"


@dataclass(frozen=True)
class VariantSet:
    """The three derived variants of one transition family."""

    ease_in: Transition
    ease_out: Transition
    ease_in_out: Transition

    def for_mode(self, mode: EaseMode | str) -> Transition:
        """Return the variant for ``mode``.

        Raises:
            TransitionNotFoundError: If ``mode`` is not a known ease mode.
        """
        return getattr(self, EaseMode.parse(mode).value)

    def __iter__(self) -> Iterator[Transition]:
        yield self.ease_in
        yield self.ease_out
        yield self.ease_in_out


def derive_variants(name: str, raw: CurveFunction) -> VariantSet:
    """Build the ease-in, ease-out and ease-in-out variants of ``raw``.

    Args:
        name: Family name attached to each variant.
        raw: Raw curve ``raw(progress, *params) -> float``.

    Returns:
        VariantSet whose members forward their parameters to ``raw``.

    Example:
        >>> from tweenr.core.transitions.functions import quad
        >>> variants = derive_variants("Quad", quad)
        >>> variants.ease_out(0.5)
        0.75
    """
    return VariantSet(
        ease_in=Transition(name=name, raw=raw, mode=EaseMode.EASE_IN),
        ease_out=Transition(name=name, raw=raw, mode=EaseMode.EASE_OUT),
        ease_in_out=Transition(name=name, raw=raw, mode=EaseMode.EASE_IN_OUT),
    )
