from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class WireboxSettings(BaseSettings):
    """Environment configuration for the bootstrap layer.

    Every field reads from a ``WIREBOX_``-prefixed environment variable, for
    example ``WIREBOX_AUTOREGISTER=1`` or ``WIREBOX_HTTP_TIMEOUT=10``.
    """

    autoregister: bool = False
    http_base_url: str = ""
    http_timeout: float = 5.0
    log_level: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="WIREBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
