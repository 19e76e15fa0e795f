"""Transition schema models.

This module defines the value types shared across the transition registry:
- CurveFunction: Type of a raw curve ``f(progress, *params) -> float``
- EaseMode: The three directional variants derived from a raw curve
- TransitionKind: Whether an entry is a derived family or a bare curve
- TransitionInfo: Lightweight metadata for listing registered transitions
- CurvePoint: A sampled (t, v) point of a transition
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tweenr.core.transitions.errors import TransitionNotFoundError

CurveFunction = Callable[..., float]


class EaseMode(str, Enum):
    """Directional variant of a transition family."""

    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"

    @classmethod
    def parse(cls, value: EaseMode | str) -> EaseMode:
        """Parse a mode from its enum value or a common spelling.

        Accepts ``ease_in``, ``easeIn``, ``in`` and the matching spellings
        of the other two modes.

        Raises:
            TransitionNotFoundError: If the value names no known mode.

        Example:
            >>> EaseMode.parse("easeInOut")
            <EaseMode.EASE_IN_OUT: 'ease_in_out'>
        """
        if isinstance(value, EaseMode):
            return value
        key = _MODE_SPELLINGS.get(value.replace("-", "_").lower())
        if key is None:
            raise TransitionNotFoundError(f"Unknown ease mode: {value}")
        return key


_MODE_SPELLINGS: dict[str, EaseMode] = {
    "ease_in": EaseMode.EASE_IN,
    "easein": EaseMode.EASE_IN,
    "in": EaseMode.EASE_IN,
    "ease_out": EaseMode.EASE_OUT,
    "easeout": EaseMode.EASE_OUT,
    "out": EaseMode.EASE_OUT,
    "ease_in_out": EaseMode.EASE_IN_OUT,
    "easeinout": EaseMode.EASE_IN_OUT,
    "in_out": EaseMode.EASE_IN_OUT,
    "inout": EaseMode.EASE_IN_OUT,
}


class TransitionKind(str, Enum):
    """How a transition was registered."""

    FAMILY = "family"  # Derived ease_in / ease_out / ease_in_out
    BARE = "bare"  # Single curve, no derivation


class TransitionInfo(BaseModel):
    """Lightweight metadata describing a registered transition.

    Attributes:
        name: Display name the transition was registered under.
        kind: Family (three derived modes) or bare (single curve).
        parameters: Names of the trailing parameters the curve accepts.
        description: Optional human-readable description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    kind: TransitionKind
    parameters: tuple[str, ...] = ()
    description: str | None = None


class CurvePoint(BaseModel):
    """A single sampled point of a transition.

    ``t`` is normalized to [0, 1]. ``v`` is not constrained, since
    overshooting transitions (Back, Elastic) leave [0, 1] on purpose.

    Example:
        >>> CurvePoint(t=0.5, v=1.1).v
        1.1
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Transition output")
