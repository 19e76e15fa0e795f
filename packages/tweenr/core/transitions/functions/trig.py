"""Circular and sinusoidal transition curves."""

import math


def circ(progress: float) -> float:
    """Circular curve ``1 - sin(acos(p))``.

    Progress must lie in [-1, 1]; ``math.acos`` raises ValueError otherwise.
    """
    return 1 - math.sin(math.acos(progress))


def sine(progress: float) -> float:
    """Sinusoidal curve ``1 - sin((1-p) * pi/2)``."""
    return 1 - math.sin((1 - progress) * math.pi / 2)
