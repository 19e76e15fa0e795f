"""Default tunables for parameterized transition families.

These are the values a curve falls back to when a parameter is not
supplied (or is supplied as ``None``). They are defined separately from the
curve functions to avoid circular imports.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TransitionDefaults(BaseModel):
    """Default parameters for the parameterized transition families.

    This model is immutable (frozen=True).

    Attributes:
        pow_exponent: Exponent used by ``Pow`` when none is bound.
        back_overshoot: Overshoot factor used by ``Back`` (close to PHI).
        elastic_amplitude: Multiplier of the ``Elastic`` oscillation strength.
        elastic_period: Period-like constant of the ``Elastic`` oscillation.

    Example:
        >>> TransitionDefaults().pow_exponent
        6.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pow_exponent: float = Field(default=6.0, description="Pow exponent")
    back_overshoot: float = Field(default=1.6180, description="Back overshoot factor")
    elastic_amplitude: float = Field(default=1.0, description="Elastic strength multiplier")
    elastic_period: float = Field(default=300.0, description="Elastic period constant")

    def to_dict(self) -> dict[str, float]:
        """Convert to a plain dictionary."""
        return self.model_dump()


# Global defaults used by the built-in curve functions
DEFAULT_TRANSITION_PARAMS = TransitionDefaults()
