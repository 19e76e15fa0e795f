"""Exceptions raised by the transition registry."""

from __future__ import annotations


class TransitionError(Exception):
    """Base class for transition registry errors."""


class TransitionNotFoundError(TransitionError, KeyError):
    """Raised when a transition name or mode is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class RegistryFrozenError(TransitionError, RuntimeError):
    """Raised when registering into a registry that has been frozen."""
