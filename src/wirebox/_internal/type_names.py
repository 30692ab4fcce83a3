from __future__ import annotations

import importlib
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def service_name_of(key: Any) -> str:
    """Return the service name for a class or pass a string name through.

    Classes map to their fully-qualified ``module.QualName``, which is the key
    used both for registrations and for constructor parameter lookups.
    """
    if isinstance(key, str):
        return key
    if is_runtime_class(key):
        return f"{key.__module__}.{key.__qualname__}"
    msg = f"Service key must be a string or a class, got {key!r}."
    raise TypeError(msg)


def locate_type(target: Any) -> type[Any] | None:
    """Find the class designated by ``target``.

    ``target`` may already be a class, or a dotted ``module.QualName`` string.
    The longest importable module prefix is imported and the remaining parts
    are looked up as attributes. Returns ``None`` when nothing matches or the
    match is not a class.
    """
    if is_runtime_class(target):
        return target
    if not isinstance(target, str) or not target:
        return None

    parts = target.split(".")
    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        for attribute in parts[split_at:]:
            obj = getattr(obj, attribute, None)
            if obj is None:
                break
        return obj if is_runtime_class(obj) else None
    return None


__all__ = ["is_runtime_class", "locate_type", "service_name_of"]
