"""Transition sampling and interpolation helpers.

Evaluates transitions on uniform grids (for previews and inspection) and
turns a transition weight into an interpolated value.
"""

from __future__ import annotations

from tweenr.core.transitions.models import CurveFunction, CurvePoint


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1).

    Returns N samples: [0.0, 1/N, 2/N, ..., (N-1)/N]

    Args:
        n: Number of samples to generate. Must be >= 2.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(4)
        [0.0, 0.25, 0.5, 0.75]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / n for i in range(n)]


def sample_closed_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1], both endpoints included.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_closed_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def sample_transition(
    curve: CurveFunction,
    n_samples: int,
    *,
    closed: bool = True,
) -> list[CurvePoint]:
    """Evaluate a transition on a uniform progress grid.

    Args:
        curve: Any transition callable taking only ``progress`` (bind
            parameters first if the curve needs them).
        n_samples: Number of samples (must be >= 2).
        closed: Include progress 1.0 as the last sample (default True).
            With False, samples cover [0, 1) like ``sample_uniform_grid``.

    Returns:
        List of CurvePoints, one per progress sample.

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    t_grid = sample_closed_grid(n_samples) if closed else sample_uniform_grid(n_samples)
    return [CurvePoint(t=t, v=curve(t)) for t in t_grid]


def interpolate(
    start: float,
    end: float,
    progress: float,
    curve: CurveFunction | None = None,
) -> float:
    """Interpolate between two values using a transition weight.

    Args:
        start: Value at progress 0.
        end: Value at progress 1.
        progress: Progress fraction. Not clamped.
        curve: Transition mapping progress to a weight. Linear if None.

    Returns:
        ``start + (end - start) * curve(progress)``.

    Example:
        >>> interpolate(10.0, 20.0, 0.5)
        15.0
    """
    weight = progress if curve is None else curve(progress)
    return start + (end - start) * weight
