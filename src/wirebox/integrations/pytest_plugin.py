from __future__ import annotations

import pytest

from wirebox.app import App
from wirebox.registry import Registry
from wirebox.settings import WireboxSettings


@pytest.fixture()
def wirebox_registry() -> Registry:
    """Create a per-test registry.

    The fixture is function-scoped, so registrations and cached instances are
    isolated between tests unless users override fixture scope explicitly.

    Returns:
        A new ``Registry`` instance.

    """
    return Registry()


@pytest.fixture()
def wirebox_app(wirebox_registry: Registry) -> App:
    """Create an ``App`` bound to ``wirebox_registry`` with default settings."""
    return App(registry=wirebox_registry, settings=WireboxSettings(_env_file=None))
