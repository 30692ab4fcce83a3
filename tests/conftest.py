"""Shared pytest fixtures for wirebox tests."""

import pytest

from wirebox.registry import Registry


@pytest.fixture()
def registry() -> Registry:
    """Default registry: every dependency must be registered."""
    return Registry()


@pytest.fixture()
def autoregister_registry() -> Registry:
    """Registry that builds unregistered concrete dependencies on demand."""
    return Registry(autoregister=True)
