"""Parameter binding for transition curves.

Binding fixes a curve's trailing parameters ahead of time and returns a new
callable that only needs ``progress``. The bound parameters live in an
immutable tuple next to a reference to the base curve, so binding never
touches the curve it was created from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tweenr.core.transitions.models import CurveFunction


class Bindable:
    """Mixin giving a curve a ``bind(*params)`` factory."""

    def bind(self, *params: Any) -> BoundCurve:
        """Return a new curve with ``params`` fixed after ``progress``."""
        return BoundCurve(curve=self, params=params)  # type: ignore[arg-type]


@dataclass(frozen=True)
class BoundCurve(Bindable):
    """A curve with some trailing parameters fixed.

    Attributes:
        curve: The base curve the parameters are forwarded to.
        params: Fixed parameters, passed right after ``progress``.
    """

    curve: CurveFunction
    params: tuple[Any, ...] = ()

    def __call__(self, progress: float, *params: Any) -> float:
        return self.curve(progress, *self.params, *params)

    def bind(self, *params: Any) -> BoundCurve:
        # Flatten instead of nesting so deep chains stay one call deep.
        return BoundCurve(curve=self.curve, params=self.params + params)


def bind(curve: CurveFunction, *params: Any) -> BoundCurve:
    """Fix trailing parameters of any curve callable.

    Args:
        curve: A registered transition, a bound curve, or a plain function
            ``f(progress, *params)``.
        *params: Parameters to fix after ``progress``.

    Returns:
        A new BoundCurve. ``curve`` is left unchanged.

    Example:
        >>> from tweenr.core.transitions.functions import back
        >>> gentle = bind(back, 0.5)
        >>> gentle(1.0) == back(1.0, 0.5)
        True
    """
    if isinstance(curve, BoundCurve):
        return curve.bind(*params)
    return BoundCurve(curve=curve, params=tuple(params))
