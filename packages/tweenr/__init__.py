"""tweenr: normalized transition curves for value interpolation."""

__version__ = "0.1.0"
