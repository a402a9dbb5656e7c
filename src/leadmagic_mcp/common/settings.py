"""Application settings from environment variables."""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from leadmagic_mcp.integrations.leadmagic import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig


class Settings(BaseSettings):
    """All configuration loaded from environment variables."""

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # --- LeadMagic API ---
    leadmagic_api_key: str = ""
    leadmagic_base_url: str = DEFAULT_BASE_URL
    leadmagic_timeout: float = DEFAULT_TIMEOUT  # seconds

    # --- Diagnostics ---
    debug: bool = Field(default=False, validation_alias=AliasChoices("LEADMAGIC_DEBUG", "DEBUG"))
    log_level: str = "INFO"

    def client_config(self) -> ClientConfig:
        """Build the immutable client configuration.

        Raises ``ValueError`` if the API key is missing.
        """
        return ClientConfig(
            api_key=self.leadmagic_api_key,
            base_url=self.leadmagic_base_url,
            timeout=self.leadmagic_timeout,
            debug=self.debug,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
