import pytest

from wirebox.definitions import FactoryDefinition, TypeDefinition, as_definition
from wirebox.registry import Registry


class Widget:
    pass


def test_class_becomes_type_definition() -> None:
    assert as_definition(Widget) == TypeDefinition(target=Widget)


def test_string_becomes_type_definition() -> None:
    assert as_definition("app.Widget") == TypeDefinition(target="app.Widget")


def test_non_callable_becomes_type_definition() -> None:
    assert as_definition(42) == TypeDefinition(target=42)


def test_explicit_dependencies_are_stored_as_tuple() -> None:
    definition = as_definition(Widget, dependencies=["a", Widget])

    assert definition == TypeDefinition(target=Widget, dependencies=("a", Widget))


def test_callable_becomes_factory_definition() -> None:
    def factory(registry: Registry) -> Widget:
        return Widget()

    definition = as_definition(factory)

    assert isinstance(definition, FactoryDefinition)
    assert definition.factory is factory
    assert definition.accepts_registry


def test_zero_argument_factory_does_not_accept_registry() -> None:
    definition = as_definition(lambda: Widget())

    assert isinstance(definition, FactoryDefinition)
    assert not definition.accepts_registry


def test_variadic_factory_accepts_registry() -> None:
    assert FactoryDefinition.of(lambda *args: args).accepts_registry


def test_existing_definition_is_kept() -> None:
    definition = TypeDefinition(target=Widget)

    assert as_definition(definition) is definition


def test_dependencies_with_callable_factory_raise() -> None:
    with pytest.raises(TypeError):
        as_definition(lambda: Widget(), dependencies=["a"])


def test_dependencies_with_existing_definition_raise() -> None:
    with pytest.raises(TypeError):
        as_definition(TypeDefinition(target=Widget), dependencies=["a"])
