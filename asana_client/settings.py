"""
Configuration for the Asana API client.

Values are read from ``ASANA_*`` environment variables, e.g.::

    ASANA_API_URL=https://app.asana.com/api/1.0
    ASANA_API_KEY=0/123abc
    ASANA_TIMEOUT=30
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from .client import AsanaClient

logger = logging.getLogger(__name__)


class AsanaSettings(BaseSettings):
    """Settings used to build an :class:`AsanaClient`."""

    model_config = SettingsConfigDict(env_prefix="ASANA_")

    api_url: str = "https://app.asana.com/api/1.0"
    api_key: str = ""
    # Seconds; None leaves the transport default in place
    timeout: float | None = None


def create_client(settings: AsanaSettings | None = None) -> AsanaClient:
    """Build a client from settings, loading them from the environment if omitted."""
    settings = settings or AsanaSettings()
    if not settings.api_key:
        logger.warning("No Asana API key configured; sending an empty credential")
    logger.info(f"Creating Asana client for {settings.api_url}")
    return AsanaClient(settings.api_url, settings.api_key, timeout=settings.timeout)
