from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from wirebox._internal.autoregistration import (
    ConcreteTypeAutoregistrationPolicy,
    is_protocol_class,
)
from wirebox._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from wirebox._internal.type_names import is_runtime_class, locate_type, service_name_of
from wirebox.definitions import (
    Definition,
    FactoryDefinition,
    ServiceKey,
    TypeDefinition,
    as_definition,
)
from wirebox.exceptions import (
    ClassNotFoundError,
    CyclicDependencyError,
    InvalidDefinitionError,
    NotFoundError,
    NotInstantiableError,
    UnresolvableDependencyError,
)

logger = logging.getLogger(__name__)

_SKIPPED_PARAMETER_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


class Registry:
    """Hold service definitions and the instances built from them.

    Every service is built at most once: the first successful ``get`` or
    ``resolve`` stores the instance and later calls return that same object.
    Definitions are either factories, called with the registry, or types,
    which are autowired by resolving each constructor dependency through the
    same cache-or-build path, keyed by the dependency's service name
    (``module.QualName``).

    The registry is not thread-safe. Register services during startup and
    resolve them from a single thread, or guard access with an external lock.
    """

    def __init__(self, *, autoregister: bool = False) -> None:
        """Create an empty registry.

        Args:
            autoregister: Build unregistered constructor dependencies on demand
                when their annotation is an eligible concrete class. When
                false, every dependency must be registered explicitly.

        """
        self._definitions: dict[str, Definition] = {}
        self._instances: dict[str, Any] = {}
        self._resolution_stack: list[str] = []
        self._autoregister = autoregister
        self._autoregistration_policy = ConcreteTypeAutoregistrationPolicy()

    def register(
        self,
        name: ServiceKey,
        definition: Any,
        *,
        dependencies: Sequence[ServiceKey] | None = None,
    ) -> None:
        """Store ``definition`` under ``name``, replacing any previous definition.

        Nothing is validated here; invalid definitions fail when resolved.
        An instance already cached under ``name`` is kept.

        Args:
            name: Service name, or a class standing for its service name.
            definition: Factory callable, class, dotted class name, or a
                :class:`~wirebox.definitions.FactoryDefinition` /
                :class:`~wirebox.definitions.TypeDefinition`.
            dependencies: Explicit constructor dependencies for type
                definitions, passed positionally in order.

        Examples:
            .. code-block:: python

                registry.register("mailer", lambda registry: Mailer(registry.get(Smtp)))
                registry.register(Repository, SqlRepository)

        """
        service_name = service_name_of(name)
        self._definitions[service_name] = as_definition(definition, dependencies=dependencies)
        logger.debug("Registered definition for %s", service_name)

    def simple_register(self, type_: ServiceKey) -> None:
        """Register a class (or dotted class name) under its own service name."""
        self.register(type_, type_)

    def register_instance(self, name: ServiceKey, instance: Any) -> None:
        """Store a pre-built ``instance`` as the cached service for ``name``."""
        service_name = service_name_of(name)
        self._instances[service_name] = instance
        logger.debug("Registered instance for %s", service_name)

    def has(self, name: ServiceKey) -> bool:
        service_name = service_name_of(name)
        return service_name in self._instances or service_name in self._definitions

    def get(self, name: ServiceKey) -> Any:
        """Return the service for ``name``, building it on first access.

        Args:
            name: Service name, or a class standing for its service name.

        Returns:
            The cached instance, or the instance produced by the registered
            factory or by autowiring the registered type.

        Raises:
            NotFoundError: If nothing is registered or cached for ``name``.
            InvalidDefinitionError: If the definition names no existing class.
            NotInstantiableError: If the registered class is abstract.
            UnresolvableDependencyError: If a constructor parameter has no
                constructible type annotation.
            CyclicDependencyError: If ``name`` is already being built.

        """
        return self._get(service_name_of(name), hint=name if is_runtime_class(name) else None)

    def resolve(self, type_: ServiceKey) -> Any:
        """Autowire ``type_`` without consulting registered definitions.

        The instance is cached under the type's service name, so subsequent
        ``get`` and ``resolve`` calls for that name return it.

        Args:
            type_: A class, or the dotted ``module.QualName`` of one.

        Raises:
            ClassNotFoundError: If ``type_`` does not designate an existing class.

        """
        service_name = service_name_of(type_)
        if service_name in self._instances:
            return self._instances[service_name]

        cls = locate_type(type_)
        if cls is None:
            raise ClassNotFoundError(service_name)

        with self._resolving(service_name):
            service = self._autowire(service_name, cls, None)
        self._instances[service_name] = service
        return service

    def _get(self, service_name: str, *, hint: type[Any] | None) -> Any:
        if service_name in self._instances:
            logger.debug("Cache hit for %s", service_name)
            return self._instances[service_name]

        definition = self._definitions.get(service_name)
        if definition is None:
            if hint is None or not self._can_autoregister(hint):
                raise NotFoundError(service_name)
            logger.debug("Autoregistering %s", service_name)
            definition = TypeDefinition(target=hint)

        with self._resolving(service_name):
            service = self._build(service_name, definition)
        self._instances[service_name] = service
        return service

    def _can_autoregister(self, hint: type[Any]) -> bool:
        return self._autoregister and self._autoregistration_policy.is_eligible_concrete(hint)

    def _build(self, service_name: str, definition: Definition) -> Any:
        if isinstance(definition, FactoryDefinition):
            logger.debug("Building %s from factory", service_name)
            if definition.accepts_registry:
                return definition.factory(self)
            return definition.factory()

        cls = locate_type(definition.target)
        if cls is None:
            raise InvalidDefinitionError(service_name, definition.target)
        return self._autowire(service_name, cls, definition.dependencies)

    @contextmanager
    def _resolving(self, service_name: str) -> Iterator[None]:
        stack = self._resolution_stack
        if service_name in stack:
            path = [*stack[stack.index(service_name) :], service_name]
            raise CyclicDependencyError(service_name, path)
        stack.append(service_name)
        try:
            yield
        finally:
            stack.pop()

    def _autowire(
        self,
        service_name: str,
        cls: type[Any],
        dependencies: Sequence[ServiceKey] | None,
    ) -> Any:
        if inspect.isabstract(cls) or is_protocol_class(cls):
            raise NotInstantiableError(service_name)

        if is_pydantic_settings_subclass(cls):
            logger.debug("Building settings %s from environment", service_name)
            return cls()

        if dependencies is None:
            dependencies = _declared_dependencies(cls)
        if dependencies is not None:
            args = [self.get(dependency) for dependency in dependencies]
            logger.debug("Autowiring %s with %d declared dependencies", service_name, len(args))
            return cls(*args)

        args, kwargs = self._resolve_constructor_arguments(service_name, cls)
        logger.debug("Autowiring %s with %d dependencies", service_name, len(args) + len(kwargs))
        return cls(*args, **kwargs)

    def _resolve_constructor_arguments(
        self,
        service_name: str,
        cls: type[Any],
    ) -> tuple[list[Any], dict[str, Any]]:
        constructor = _find_constructor(cls)
        if constructor is None:
            return [], {}
        try:
            parameters = _constructor_parameters(constructor)
        except (TypeError, ValueError):
            return [], {}

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in parameters:
            if parameter.kind in _SKIPPED_PARAMETER_KINDS:
                continue
            dependency = _evaluate_annotation(constructor, parameter.annotation)
            if not is_runtime_class(dependency) or dependency.__module__ == "builtins":
                raise UnresolvableDependencyError(service_name, parameter.name)

            value = self._get(service_name_of(dependency), hint=dependency)
            if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
                kwargs[parameter.name] = value
            else:
                args.append(value)
        return args, kwargs


def _declared_dependencies(cls: type[Any]) -> Sequence[ServiceKey] | None:
    # A subclass that redefines its constructor does not inherit the declaration.
    for klass in cls.__mro__:
        if "__dependencies__" in klass.__dict__:
            return klass.__dict__["__dependencies__"]
        if "__init__" in klass.__dict__ or "__new__" in klass.__dict__:
            return None
    return None


def _find_constructor(cls: type[Any]) -> Any | None:
    if cls.__init__ is not object.__init__:
        return cls.__init__
    if cls.__new__ is not object.__new__:
        return cls.__new__
    return None


def _constructor_parameters(constructor: Any) -> list[inspect.Parameter]:
    # Drops the leading ``self``/``cls`` parameter.
    return list(inspect.signature(constructor).parameters.values())[1:]


def _evaluate_annotation(constructor: Any, annotation: Any) -> Any:
    """Return the runtime value of a single parameter annotation, or ``None``.

    String annotations (``from __future__ import annotations`` or explicit
    forward references) are evaluated one at a time against the
    constructor's module globals, so a broken annotation only affects its own
    parameter. No implicit ``Optional`` is added for ``None`` defaults.
    """
    if annotation is inspect.Parameter.empty:
        return None
    if not isinstance(annotation, str):
        return annotation
    globalns = getattr(inspect.unwrap(constructor), "__globals__", {})
    try:
        return eval(annotation, globalns)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError):
        return None


__all__ = ["Registry"]
