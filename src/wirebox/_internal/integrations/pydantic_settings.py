from __future__ import annotations

from pydantic_settings import BaseSettings

from wirebox._internal.type_names import is_runtime_class


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a class is a ``pydantic_settings.BaseSettings`` model.

    Settings models declare their fields as constructor keywords with
    defaults, which autowiring cannot satisfy. The registry builds them with
    no arguments instead, so they read their values from the environment.

    Args:
        candidate: Object to test.

    Returns:
        ``True`` when ``candidate`` is a runtime class and subclasses
        ``BaseSettings``; otherwise ``False``.

    """
    if not is_runtime_class(candidate):
        return False
    try:
        return issubclass(candidate, BaseSettings)
    except TypeError:
        return False


__all__ = ["is_pydantic_settings_subclass"]
