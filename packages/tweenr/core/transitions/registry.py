"""Transition registry.

Maps transition names to their derived variants (families) or to a single
curve (bare transitions). Families are registered through
``register_family`` and get ease_in / ease_out / ease_in_out derived from one
raw curve; bare curves such as ``linear`` go through ``register_bare``.

Registration is serialized by a lock, and listings copy under the same lock.
Lookups take no lock: entries are immutable once installed, and a registry
is expected to be filled once and then only read.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable

from tweenr.core.transitions.derivation import Transition, VariantSet, derive_variants
from tweenr.core.transitions.errors import RegistryFrozenError, TransitionNotFoundError
from tweenr.core.transitions.models import (
    CurveFunction,
    EaseMode,
    TransitionInfo,
    TransitionKind,
)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Longest first so "quad_in_out" is not read as family "quad_in", mode "out".
_ALIAS_SUFFIXES: tuple[tuple[str, EaseMode], ...] = (
    ("_in_out", EaseMode.EASE_IN_OUT),
    ("_out", EaseMode.EASE_OUT),
    ("_in", EaseMode.EASE_IN),
)


def normalize_key(s: str) -> str:
    """Normalize a transition name to a stable lookup key.

    Args:
        s: Transition name or alias.

    Returns:
        Normalized key (lowercase, alphanumeric/underscore only).

    Example:
        >>> normalize_key("Quad")
        'quad'
    """
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


class TransitionRegistry:
    """Registry of transition families and bare curves.

    Registering a name twice replaces the earlier entry (last write wins).

    Example:
        >>> registry = TransitionRegistry()
        >>> registry.register_family("Quad", quad)
        >>> registry.lookup("Quad", "ease_out")(0.5)
        0.75
    """

    def __init__(self) -> None:
        self._entries: dict[str, VariantSet | Transition] = {}
        self._info_by_key: dict[str, TransitionInfo] = {}
        self._lock = threading.Lock()
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_family(
        self,
        name: str,
        raw: CurveFunction,
        *,
        parameters: Iterable[str] = (),
        description: str | None = None,
    ) -> VariantSet:
        """Derive and register the three variants of a raw curve.

        Args:
            name: Family name (e.g. "Quad"). Lookup is case-insensitive.
            raw: Raw curve ``raw(progress, *params) -> float``.
            parameters: Names of the trailing parameters ``raw`` accepts.
            description: Optional human-readable description.

        Returns:
            The registered VariantSet.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        variants = derive_variants(name, raw)
        info = TransitionInfo(
            name=name,
            kind=TransitionKind.FAMILY,
            parameters=tuple(parameters),
            description=description,
        )
        self._install(name, variants, info)
        return variants

    def register_bare(
        self,
        name: str,
        curve: CurveFunction,
        *,
        parameters: Iterable[str] = (),
        description: str | None = None,
    ) -> Transition:
        """Register a single curve without deriving ease variants.

        Args:
            name: Transition name (e.g. "linear").
            curve: Curve ``curve(progress, *params) -> float``.
            parameters: Names of the trailing parameters ``curve`` accepts.
            description: Optional human-readable description.

        Returns:
            The registered (bindable) Transition.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        transition = Transition(name=name, raw=curve)
        info = TransitionInfo(
            name=name,
            kind=TransitionKind.BARE,
            parameters=tuple(parameters),
            description=description,
        )
        self._install(name, transition, info)
        return transition

    def _install(self, name: str, entry: VariantSet | Transition, info: TransitionInfo) -> None:
        key = normalize_key(name)
        if not key:
            raise ValueError(f"Invalid transition name: {name!r}")
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f"Registry is frozen, cannot register: {name}")
            if key in self._entries:
                logger.debug(f"Overwriting transition: {name}")
            self._entries[key] = entry
            self._info_by_key[key] = info
        logger.debug(f"Registered {info.kind.value} transition: {name}")

    def freeze(self) -> None:
        """Make the registry read-only. Later registration raises."""
        with self._lock:
            self._frozen = True
        logger.debug(f"Transition registry frozen with {len(self._entries)} entries")

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> VariantSet | Transition:
        """Return the VariantSet of a family or the Transition of a bare curve.

        Raises:
            TransitionNotFoundError: If ``name`` is not registered.
        """
        entry = self._entries.get(normalize_key(name))
        if entry is None:
            raise TransitionNotFoundError(f"Unknown transition: {name}")
        return entry

    def lookup(self, name: str, mode: EaseMode | str | None = None) -> Transition:
        """Look up a callable transition.

        Args:
            name: Transition name (case-insensitive).
            mode: Ease mode for families. Must be omitted for bare curves.

        Returns:
            Transition callable as ``t(progress, *params)``.

        Raises:
            TransitionNotFoundError: If the name is unknown, the mode is
                unknown, a family is looked up without a mode, or a bare
                curve is looked up with one.

        Example:
            >>> registry.lookup("Sine", "ease_in")(1.0)
            1.0
        """
        entry = self.get(name)
        if isinstance(entry, Transition):
            if mode is not None:
                raise TransitionNotFoundError(f"Transition '{name}' has no ease modes (got {mode})")
            return entry
        if mode is None:
            modes = ", ".join(m.value for m in EaseMode)
            raise TransitionNotFoundError(f"Transition '{name}' requires a mode: {modes}")
        return entry.for_mode(mode)

    def lookup_alias(self, alias: str) -> Transition:
        """Look up a transition by its flat alias.

        Every family variant is also reachable under a single name made of
        the family and the mode, in snake or camel case: ``quad_in``,
        ``quadOut``, ``bounce_in_out``. Bare curves resolve by their name.

        Raises:
            TransitionNotFoundError: If the alias matches no transition.

        Example:
            >>> registry.lookup_alias("quadInOut") is registry.lookup("Quad", "ease_in_out")
            True
        """
        key = normalize_key(_CAMEL_BOUNDARY.sub("_", alias))
        entry = self._entries.get(key)
        if isinstance(entry, Transition):
            return entry

        for suffix, mode in _ALIAS_SUFFIXES:
            if key.endswith(suffix):
                family = self._entries.get(key[: -len(suffix)])
                if isinstance(family, VariantSet):
                    return family.for_mode(mode)

        raise TransitionNotFoundError(f"Unknown transition alias: {alias}")

    def get_info(self, name: str) -> TransitionInfo | None:
        """Get transition metadata, or None if not registered."""
        return self._info_by_key.get(normalize_key(name))

    def has(self, name: str) -> bool:
        """Check if a transition is registered."""
        return normalize_key(name) in self._entries

    def _info_snapshot(self) -> list[TransitionInfo]:
        # Copy under the write lock so listing never races a registration.
        with self._lock:
            return list(self._info_by_key.values())

    def list_names(self) -> list[str]:
        """List registered transition names, sorted."""
        return sorted(info.name for info in self._info_snapshot())

    def list_all(self) -> list[TransitionInfo]:
        """List metadata of all registered transitions, sorted by name."""
        return sorted(self._info_snapshot(), key=lambda x: x.name)

    def __len__(self) -> int:
        """Return number of registered transitions."""
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        """Check if transition exists (supports 'in' operator)."""
        return self.has(name)
