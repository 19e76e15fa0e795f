"""Power and exponential transition curves.

Quad, Cubic, Quart and Quint are all ``Pow`` with a fixed exponent.
"""

from __future__ import annotations

import math

from tweenr.core.transitions.defaults import DEFAULT_TRANSITION_PARAMS


def pow_curve(progress: float, exponent: float | None = None) -> float:
    """Raise progress to ``exponent`` (default 6).

    Args:
        progress: Progress fraction, nominally in [0, 1].
        exponent: Power to raise progress to. ``None`` uses the default.
            A negative progress with a non-integral exponent raises
            ValueError (math domain error) instead of going complex.

    Returns:
        ``progress ** exponent``.

    Example:
        >>> pow_curve(0.5)
        0.015625
    """
    if exponent is None:
        exponent = DEFAULT_TRANSITION_PARAMS.pow_exponent
    return math.pow(progress, exponent)


def quad(progress: float) -> float:
    """Quadratic curve."""
    return pow_curve(progress, 2)


def cubic(progress: float) -> float:
    """Cubic curve."""
    return pow_curve(progress, 3)


def quart(progress: float) -> float:
    """Quartic curve."""
    return pow_curve(progress, 4)


def quint(progress: float) -> float:
    """Quintic curve."""
    return pow_curve(progress, 5)


def expo(progress: float) -> float:
    """Exponential curve ``2^(8(p-1))``.

    Does not pass exactly through 0: ``expo(0) == 2**-8``.
    """
    return 2 ** (8 * (progress - 1))
