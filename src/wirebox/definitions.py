from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from wirebox._internal.type_names import is_runtime_class

ServiceKey: TypeAlias = "str | type[Any]"


def _accepts_positional_argument(factory: Callable[..., Any]) -> bool:
    try:
        sig = inspect.signature(factory)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(object())
    except TypeError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class FactoryDefinition:
    """Build a service by calling ``factory``.

    The registry passes itself as the only argument when ``accepts_registry``
    is true, otherwise the factory is called with no arguments.
    """

    factory: Callable[..., Any]
    accepts_registry: bool

    @classmethod
    def of(cls, factory: Callable[..., Any]) -> FactoryDefinition:
        return cls(factory=factory, accepts_registry=_accepts_positional_argument(factory))


@dataclass(frozen=True, slots=True)
class TypeDefinition:
    """Build a service by autowiring a constructible type.

    Attributes:
        target: A class, or the dotted ``module.QualName`` of one. Any other
            value is kept as-is and rejected when the service is resolved.
        dependencies: Optional service names or classes passed positionally to
            the constructor. When omitted, dependencies come from the type's
            ``__dependencies__`` attribute or its ``__init__`` annotations.

    """

    target: Any
    dependencies: tuple[ServiceKey, ...] | None = None


Definition: TypeAlias = "FactoryDefinition | TypeDefinition"


def as_definition(value: Any, *, dependencies: Sequence[ServiceKey] | None = None) -> Definition:
    """Classify a raw registration value into a definition variant.

    Classes and strings become :class:`TypeDefinition`, other callables become
    :class:`FactoryDefinition`. Values that are neither are wrapped in a
    ``TypeDefinition`` so the failure surfaces at resolution time.

    Args:
        value: Raw definition or an existing definition instance.
        dependencies: Explicit dependency list for type definitions.

    Raises:
        TypeError: If ``dependencies`` is given with a factory or with an
            already-built definition.

    Examples:
        .. code-block:: python

            as_definition(Mailer)                  # TypeDefinition(Mailer)
            as_definition("app.mail.Mailer")       # TypeDefinition("app.mail.Mailer")
            as_definition(lambda registry: ...)    # FactoryDefinition(...)

    """
    if isinstance(value, FactoryDefinition | TypeDefinition):
        definition = value
    elif is_runtime_class(value) or isinstance(value, str) or not callable(value):
        return TypeDefinition(
            target=value,
            dependencies=tuple(dependencies) if dependencies is not None else None,
        )
    else:
        definition = FactoryDefinition.of(value)

    if dependencies is not None:
        msg = f"Explicit dependencies apply to raw type definitions only, got {value!r}."
        raise TypeError(msg)
    return definition


__all__ = [
    "Definition",
    "FactoryDefinition",
    "ServiceKey",
    "TypeDefinition",
    "as_definition",
]
