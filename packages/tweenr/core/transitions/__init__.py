"""Transition curves: registry, derivation, binding and the built-in library."""

from tweenr.core.transitions.binding import BoundCurve, bind
from tweenr.core.transitions.defaults import DEFAULT_TRANSITION_PARAMS, TransitionDefaults
from tweenr.core.transitions.derivation import Transition, VariantSet, derive_variants
from tweenr.core.transitions.errors import (
    RegistryFrozenError,
    TransitionError,
    TransitionNotFoundError,
)
from tweenr.core.transitions.library import (
    TransitionLibrary,
    build_default_registry,
    get_default_registry,
    lookup,
    lookup_alias,
)
from tweenr.core.transitions.models import CurvePoint, EaseMode, TransitionInfo, TransitionKind
from tweenr.core.transitions.registry import TransitionRegistry
from tweenr.core.transitions.sampling import interpolate, sample_transition

__all__ = [
    "DEFAULT_TRANSITION_PARAMS",
    "BoundCurve",
    "CurvePoint",
    "EaseMode",
    "RegistryFrozenError",
    "Transition",
    "TransitionDefaults",
    "TransitionError",
    "TransitionInfo",
    "TransitionKind",
    "TransitionLibrary",
    "TransitionNotFoundError",
    "TransitionRegistry",
    "VariantSet",
    "bind",
    "build_default_registry",
    "derive_variants",
    "get_default_registry",
    "interpolate",
    "lookup",
    "lookup_alias",
    "sample_transition",
]
