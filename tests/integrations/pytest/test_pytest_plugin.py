from __future__ import annotations

from tests.services import Clock
from wirebox import App, Registry

pytest_plugins = ["wirebox.integrations.pytest_plugin"]


def test_registry_fixture_provides_empty_registry(wirebox_registry: Registry) -> None:
    assert isinstance(wirebox_registry, Registry)
    assert not wirebox_registry.has(Clock)


def test_registry_fixture_is_isolated_between_tests(wirebox_registry: Registry) -> None:
    wirebox_registry.simple_register(Clock)

    assert isinstance(wirebox_registry.get(Clock), Clock)


def test_app_fixture_uses_registry_fixture(wirebox_app: App, wirebox_registry: Registry) -> None:
    assert wirebox_app.run(lambda registry: registry) is wirebox_registry
