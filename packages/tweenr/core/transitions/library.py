"""Built-in transition library and the process-wide default registry."""

from __future__ import annotations

import logging
import threading
from enum import Enum

from tweenr.core.transitions.derivation import Transition
from tweenr.core.transitions.functions import (
    back,
    bounce,
    circ,
    cubic,
    elastic,
    expo,
    linear,
    pow_curve,
    quad,
    quart,
    quint,
    sine,
)
from tweenr.core.transitions.models import EaseMode
from tweenr.core.transitions.registry import TransitionRegistry

logger = logging.getLogger(__name__)


class TransitionLibrary(str, Enum):
    """Names of the built-in transitions."""

    # Bare
    LINEAR = "linear"

    # Power family
    POW = "Pow"
    QUAD = "Quad"
    CUBIC = "Cubic"
    QUART = "Quart"
    QUINT = "Quint"

    EXPO = "Expo"
    CIRC = "Circ"
    SINE = "Sine"

    # Overshoot / dynamics
    BACK = "Back"
    BOUNCE = "Bounce"
    ELASTIC = "Elastic"


def build_default_registry() -> TransitionRegistry:
    """Construct a registry containing all built-in transitions."""
    registry = TransitionRegistry()

    registry.register_bare(
        TransitionLibrary.LINEAR.value, linear, description="Identity interpolation"
    )

    registry.register_family(
        TransitionLibrary.POW.value,
        pow_curve,
        parameters=("exponent",),
        description="p^x, x defaults to 6",
    )
    registry.register_family(TransitionLibrary.EXPO.value, expo, description="2^(8(p-1))")
    registry.register_family(TransitionLibrary.CIRC.value, circ, description="1 - sin(acos(p))")
    registry.register_family(
        TransitionLibrary.SINE.value, sine, description="1 - sin((1-p) pi/2)"
    )
    registry.register_family(
        TransitionLibrary.BACK.value,
        back,
        parameters=("overshoot",),
        description="Pulls back before moving, overshoot defaults to 1.6180",
    )
    registry.register_family(
        TransitionLibrary.BOUNCE.value, bounce, description="Four decaying bounces"
    )
    registry.register_family(
        TransitionLibrary.ELASTIC.value,
        elastic,
        parameters=("amplitude", "period"),
        description="Growing oscillation, amplitude 1 and period 300 by default",
    )

    # Power aliases go last: each is Pow with a fixed exponent.
    for member, curve in (
        (TransitionLibrary.QUAD, quad),
        (TransitionLibrary.CUBIC, cubic),
        (TransitionLibrary.QUART, quart),
        (TransitionLibrary.QUINT, quint),
    ):
        registry.register_family(member.value, curve, description=f"{member.value} power curve")

    return registry


_default_registry: TransitionRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> TransitionRegistry:
    """Return the process-wide registry of built-in transitions.

    Built on first use, exactly once, then frozen.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                registry = build_default_registry()
                registry.freeze()
                logger.debug(f"Built default transition registry: {registry.list_names()}")
                _default_registry = registry
    return _default_registry


def lookup(name: str | TransitionLibrary, mode: EaseMode | str | None = None) -> Transition:
    """Look up a built-in transition in the default registry.

    Example:
        >>> lookup("Bounce", "ease_in")(1.0)
        1.0
    """
    if isinstance(name, TransitionLibrary):
        name = name.value
    return get_default_registry().lookup(name, mode)


def lookup_alias(alias: str) -> Transition:
    """Look up a built-in transition by flat alias (``quadIn``, ``sine_out``)."""
    return get_default_registry().lookup_alias(alias)
