from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from wirebox.providers import DefaultProvider, Provider
from wirebox.registry import Registry
from wirebox.settings import WireboxSettings

T = TypeVar("T")

logger = logging.getLogger(__name__)


class App:
    """Composition root: owns a registry, boots providers, then runs caller code.

    Providers are booted once, on the first ``run``. When no provider was
    added, :class:`~wirebox.providers.DefaultProvider` is booted instead.

    Examples:
        .. code-block:: python

            app = App().with_provider(MailProvider).with_provider(DbProvider)
            app.run(lambda registry: registry.get(Mailer).send_welcome())

    """

    def __init__(
        self,
        registry: Registry | None = None,
        settings: WireboxSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else WireboxSettings()
        if self._settings.log_level:
            logging.getLogger("wirebox").setLevel(self._settings.log_level.upper())
        self.registry = (
            registry if registry is not None else Registry(autoregister=self._settings.autoregister)
        )
        self._providers: list[type[Provider] | Provider] = []
        self._booted = False

    def with_provider(self, provider: type[Provider] | Provider) -> App:
        """Add a provider class (instantiated at boot) or a provider instance."""
        self._providers.append(provider)
        return self

    def run(self, callback: Callable[[Registry], T]) -> T:
        """Boot providers if needed and return ``callback(registry)``."""
        self._boot_providers()
        return callback(self.registry)

    def _boot_providers(self) -> None:
        if self._booted:
            return
        self._booted = True

        if not self._providers:
            logger.info("No providers configured; booting default provider")
            DefaultProvider(self._settings).setup(self.registry)
            return

        for provider in self._providers:
            instance = provider() if isinstance(provider, type) else provider
            logger.info("Booting provider %s", type(instance).__qualname__)
            instance.setup(self.registry)


__all__ = ["App"]
