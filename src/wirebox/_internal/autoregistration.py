from __future__ import annotations

import datetime
import decimal
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard

from wirebox._internal.type_names import is_runtime_class


def is_protocol_class(candidate: type[Any]) -> bool:
    """Return true for ``typing.Protocol`` subclasses declared as protocols."""
    return bool(getattr(candidate, "_is_protocol", False))


@dataclass(frozen=True, slots=True)
class ConcreteTypeAutoregistrationPolicy:
    """Decide which unregistered constructor dependencies a registry may build itself.

    Only consulted when a ``Registry`` is created with ``autoregister=True``.
    Value-like standard library types are excluded: a parameter typed as
    ``uuid.UUID`` or ``datetime.date`` carries data, not a service.
    """

    ignored_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
    )

    def is_eligible_concrete(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when ``candidate`` may be autowired and cached under its own name.

        Builtins, abstract classes, protocols, metaclasses and the ignored
        value types must be registered explicitly instead.
        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ == "builtins":
            return False
        if inspect.isabstract(candidate) or is_protocol_class(candidate):
            return False
        if issubclass(candidate, type):
            return False
        return not issubclass(candidate, self.ignored_base_types)
