"""Tests for the exception hierarchy and circular dependency detection."""

from __future__ import annotations

import pytest

from wirebox.exceptions import (
    CyclicDependencyError,
    InvalidDefinitionError,
    NotFoundError,
    NotInstantiableError,
    UnresolvableDependencyError,
    WireboxError,
)
from wirebox.registry import Registry


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


class Ouroboros:
    def __init__(self, tail: Ouroboros) -> None:
        self.tail = tail


def _name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            NotFoundError("svc"),
            InvalidDefinitionError("svc", 42),
            NotInstantiableError("svc"),
            UnresolvableDependencyError("svc", "param"),
            CyclicDependencyError("svc", ["svc", "svc"]),
        ],
    )
    def test_all_errors_are_wirebox_errors(self, exc: WireboxError) -> None:
        assert isinstance(exc, WireboxError)
        assert isinstance(exc, Exception)

    def test_messages_name_the_failing_service(self) -> None:
        assert str(NotFoundError("mailer")) == "Service not found: mailer"
        assert str(NotInstantiableError("app.Base")) == "Class app.Base is not instantiable"
        assert "required by app.Mailer" in str(UnresolvableDependencyError("app.Mailer", "host"))
        assert "a -> b -> a" in str(CyclicDependencyError("a", ["a", "b", "a"]))


class TestCyclicDependencies:
    """Cycles fail fast instead of recursing until the interpreter gives up."""

    def test_two_node_cycle_is_detected(self, registry: Registry) -> None:
        registry.simple_register(Chicken)
        registry.simple_register(Egg)

        with pytest.raises(CyclicDependencyError) as exc_info:
            registry.get(Chicken)

        assert exc_info.value.name == _name(Chicken)
        assert exc_info.value.path == [_name(Chicken), _name(Egg), _name(Chicken)]

    def test_self_dependency_is_detected(self, registry: Registry) -> None:
        registry.simple_register(Ouroboros)

        with pytest.raises(CyclicDependencyError) as exc_info:
            registry.resolve(Ouroboros)

        assert exc_info.value.path == [_name(Ouroboros), _name(Ouroboros)]

    def test_cycle_through_factory_is_detected(self, registry: Registry) -> None:
        registry.register("a", lambda reg: reg.get("b"))
        registry.register("b", lambda reg: reg.get("a"))

        with pytest.raises(CyclicDependencyError) as exc_info:
            registry.get("a")

        assert exc_info.value.path == ["a", "b", "a"]

    def test_registry_is_usable_after_cycle_error(self, registry: Registry) -> None:
        registry.simple_register(Chicken)
        registry.simple_register(Egg)

        with pytest.raises(CyclicDependencyError):
            registry.get(Chicken)

        registry.register(Egg, lambda: "egg")

        assert registry.get(Chicken).egg == "egg"

    def test_cycle_in_autoregister_mode_is_detected(self, autoregister_registry: Registry) -> None:
        with pytest.raises(CyclicDependencyError):
            autoregister_registry.resolve(Chicken)
