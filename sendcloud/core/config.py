"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``.  These settings provide the API host, default
credentials, the transport timeout and the webhook secret, so that a
deployment can point the client at a different host or change the
timeout without touching code.  Values passed explicitly to
:class:`sendcloud.api.SendcloudAPI` always win over the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOST = "https://panel.sendcloud.sc"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``SENDCLOUD_``.  For example, to override the
    request timeout set ``SENDCLOUD_HTTP_TIMEOUT=15``.
    """

    api_host: str = Field(DEFAULT_API_HOST, description="Base URL of the Sendcloud panel API.")
    username: str = Field("", description="Public API key used as the Basic auth username.")
    password: str = Field("", description="Secret API key used as the Basic auth password.")

    # Transport settings
    http_timeout: float = Field(10.0, gt=0, description="Timeout in seconds for outbound HTTP requests.")

    webhook_secret: str = Field("", description="Secret used to verify Sendcloud-Signature headers.")
    log_level: str = Field("INFO", description="Level applied by configure_logging().")

    model_config = SettingsConfigDict(env_prefix="SENDCLOUD_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Tests that change the environment must call
    ``get_settings.cache_clear()`` afterwards.
    """
    return Settings()
