from __future__ import annotations

from typing import Any


class WireboxError(Exception):
    """Represent a base class for all wirebox failures.

    Catch this type when you want to handle any resolution failure without
    matching each concrete exception class individually.
    """


class NotFoundError(WireboxError):
    """Signal that a requested service has neither a definition nor a cached instance.

    Raised by ``Registry.get`` for unknown service names and by
    ``Registry.resolve`` when the requested type does not exist.

    Typical fixes include registering the service (``register`` or
    ``simple_register``) before resolving it, or enabling autoregistration.
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Service not found: {name}")


class ClassNotFoundError(NotFoundError):
    """Signal that ``Registry.resolve`` was given a name that designates no class."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Class not found: {name}")


class InvalidDefinitionError(WireboxError):
    """Signal a registered definition that is neither a factory nor a known type."""

    def __init__(self, name: str, definition: Any) -> None:
        self.name = name
        self.definition = definition
        super().__init__(f"Invalid definition for: {name} ({definition!r})")


class NotInstantiableError(WireboxError):
    """Signal that a type exists but cannot be constructed (abstract classes, protocols)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Class {name} is not instantiable")


class UnresolvableDependencyError(WireboxError):
    """Signal that a constructor parameter does not declare a constructible type.

    Common triggers are untyped parameters, primitive annotations such as
    ``str`` or ``int``, and non-class annotations like ``Optional[T]``.

    Typical fixes include annotating the parameter with a concrete class or
    registering a factory for the owning service.
    """

    def __init__(self, owner: str, parameter: str) -> None:
        self.owner = owner
        self.parameter = parameter
        super().__init__(f"Cannot resolve the dependency: {parameter} (required by {owner})")


class CyclicDependencyError(WireboxError):
    """Signal a service that depends on itself, directly or transitively.

    ``path`` lists the service names from the first occurrence of ``name`` in
    the in-flight resolution stack up to and including the repeated request.
    """

    def __init__(self, name: str, path: list[str]) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Circular dependency detected: {' -> '.join(path)}")
