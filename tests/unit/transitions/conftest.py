"""Shared pytest fixtures for transition tests."""

from __future__ import annotations

import pytest

from tweenr.core.transitions.library import build_default_registry
from tweenr.core.transitions.registry import TransitionRegistry


@pytest.fixture
def registry() -> TransitionRegistry:
    """Fresh, unfrozen registry with all built-in transitions."""
    return build_default_registry()


@pytest.fixture
def empty_registry() -> TransitionRegistry:
    """Registry with nothing registered."""
    return TransitionRegistry()


@pytest.fixture
def progress_grid() -> list[float]:
    """Progress samples 0.0, 0.1, ..., 1.0."""
    return [i / 10 for i in range(11)]
