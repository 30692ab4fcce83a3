from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from wirebox.registry import Registry
from wirebox.settings import WireboxSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class Provider(Protocol):
    """Contribute service definitions to a registry during bootstrap.

    A provider only registers. It should not resolve services in ``setup``,
    since other providers may not have run yet.
    """

    def setup(self, registry: Registry) -> None: ...


class DefaultProvider:
    """Register an ``httpx.Client`` when an application configures no providers."""

    def __init__(self, settings: WireboxSettings | None = None) -> None:
        self._settings = settings

    def setup(self, registry: Registry) -> None:
        settings = self._settings

        def build_client() -> httpx.Client:
            resolved = settings if settings is not None else WireboxSettings()
            return httpx.Client(base_url=resolved.http_base_url, timeout=resolved.http_timeout)

        registry.register(httpx.Client, build_client)
        logger.debug("Default provider registered httpx.Client")


__all__ = ["DefaultProvider", "Provider"]
