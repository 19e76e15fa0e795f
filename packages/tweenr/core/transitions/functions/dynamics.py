"""Dynamic transition curves: overshoot, bounce and elastic.

Back and Elastic overshoot [0, 1] on purpose. None of these functions clamp
progress or validate their parameters; out-of-domain values propagate as
whatever the arithmetic produces.
"""

from __future__ import annotations

import math

from tweenr.core.transitions.defaults import DEFAULT_TRANSITION_PARAMS

_BOUNCE_SCALE = 7.5625
_BOUNCE_SPAN = 2.75


def back(progress: float, overshoot: float | None = None) -> float:
    """Pull back before moving forward, ``p^2 * ((x+1)p - x)``.

    Args:
        progress: Progress fraction, nominally in [0, 1].
        overshoot: How far the curve pulls back (default 1.6180, close to PHI).
    """
    if overshoot is None:
        overshoot = DEFAULT_TRANSITION_PARAMS.back_overshoot
    return progress**2 * ((overshoot + 1) * progress - overshoot)


def bounce(progress: float) -> float:
    """Four decaying quadratic bounces, mirrored so the bounces lead in.

    Evaluated on ``q = 1 - p``; the result is ``1 - y``.
    """
    q = 1 - progress
    if q < 1 / _BOUNCE_SPAN:
        y = _BOUNCE_SCALE * q**2
    elif q < 2 / _BOUNCE_SPAN:
        q -= 1.5 / _BOUNCE_SPAN
        y = _BOUNCE_SCALE * q**2 + 0.75
    elif q < 2.5 / _BOUNCE_SPAN:
        q -= 2.25 / _BOUNCE_SPAN
        y = _BOUNCE_SCALE * q**2 + 0.9375
    else:
        q -= 2.625 / _BOUNCE_SPAN
        y = _BOUNCE_SCALE * q**2 + 0.984375
    return 1 - y


def elastic(
    progress: float,
    amplitude: float | None = None,
    period: float | None = None,
) -> float:
    """Exponentially growing oscillation, ``2^(10(p-1)) * cos(2pi(p-1) * y/x)``.

    ``x = y * 0.3 / amplitude``, so raising the amplitude multiplies the
    number of oscillations.

    Args:
        progress: Progress fraction, nominally in [0, 1].
        amplitude: Elasticity multiplier (default 1). ``bind(2)`` makes the
            effect twice as strong. Zero raises ZeroDivisionError.
        period: Period-like constant ``y`` (default 300).
    """
    if amplitude is None:
        amplitude = DEFAULT_TRANSITION_PARAMS.elastic_amplitude
    if period is None:
        period = DEFAULT_TRANSITION_PARAMS.elastic_period
    x = period * 0.3 / amplitude
    shifted = progress - 1
    return 2 ** (10 * shifted) * math.cos(2 * math.pi * shifted * period / x)
