"""Bare transition curves."""


def linear(progress: float) -> float:
    """Identity interpolation.

    Example:
        >>> linear(0.25)
        0.25
    """
    return progress
