from wirebox.app import App
from wirebox.definitions import FactoryDefinition, TypeDefinition, as_definition
from wirebox.exceptions import (
    ClassNotFoundError,
    CyclicDependencyError,
    InvalidDefinitionError,
    NotFoundError,
    NotInstantiableError,
    UnresolvableDependencyError,
    WireboxError,
)
from wirebox.providers import DefaultProvider, Provider
from wirebox.registry import Registry
from wirebox.settings import WireboxSettings

__all__ = [
    "App",
    "ClassNotFoundError",
    "CyclicDependencyError",
    "DefaultProvider",
    "FactoryDefinition",
    "InvalidDefinitionError",
    "NotFoundError",
    "NotInstantiableError",
    "Provider",
    "Registry",
    "TypeDefinition",
    "UnresolvableDependencyError",
    "WireboxError",
    "WireboxSettings",
    "as_definition",
]
