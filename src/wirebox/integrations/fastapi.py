from __future__ import annotations

from collections.abc import Callable
from typing import Any

from wirebox._internal.type_names import service_name_of
from wirebox.definitions import ServiceKey
from wirebox.registry import Registry

try:
    from fastapi import FastAPI, Request
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = "FastAPI integration requires fastapi. Install with 'wirebox[fastapi]'."
    raise ModuleNotFoundError(message) from exc

_REGISTRY_STATE_ATTR = "wirebox_registry"


def setup_wirebox(app: FastAPI, registry: Registry) -> None:
    """Bind ``registry`` to ``app`` so :func:`Provide` dependencies can reach it."""
    setattr(app.state, _REGISTRY_STATE_ATTR, registry)


def get_registry(request: Request) -> Registry:
    """Return the registry bound to the request's application."""
    registry = getattr(request.app.state, _REGISTRY_STATE_ATTR, None)
    if registry is None:
        msg = "Registry is not bound to this application. Call setup_wirebox(app, registry) first."
        raise RuntimeError(msg)
    return registry


def Provide(name: ServiceKey) -> Callable[[Request], Any]:  # noqa: N802
    """Build a FastAPI dependency returning ``registry.get(name)``.

    Examples:
        .. code-block:: python

            @app.get("/status")
            def status(client: httpx.Client = Depends(Provide(httpx.Client))) -> dict:
                return {"base_url": str(client.base_url)}

    """
    service_name = service_name_of(name)

    def dependency(request: Request) -> Any:
        return get_registry(request).get(service_name)

    dependency.__name__ = f"provide_{service_name.replace('.', '_')}"
    return dependency


__all__ = ["Provide", "get_registry", "setup_wirebox"]
