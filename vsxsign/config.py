"""Configuration management with Pydantic and XDG base directory support."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vsxsign.utils.paths import get_cache_dir

DEFAULT_PUBLIC_KEY_URL = "https://open-vsx.org/keys/public-key.pem"
DEFAULT_REGISTRY_URL = "https://open-vsx.org"


class Settings(BaseSettings):
    """vsxsign configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="VSXSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    public_key_url: str = Field(
        default=DEFAULT_PUBLIC_KEY_URL,
        description="Location of the registry public key used when none is supplied",
    )

    registry_url: str = Field(
        default=DEFAULT_REGISTRY_URL,
        description="Registry base URL used to resolve public keys by ID",
    )

    cache_dir: Path | None = Field(
        default=None,
        description="Override key cache directory (defaults to XDG_CACHE_HOME/vsxsign/keys)",
    )

    http_timeout: float = Field(
        default=30.0,
        ge=1.0,
        description="Timeout for public key downloads (seconds)",
    )

    def get_cache_dir(self) -> Path:
        """Get the public key cache directory, creating if necessary."""
        if self.cache_dir:
            cache_dir = self.cache_dir
        else:
            cache_dir = get_cache_dir() / "keys"

        cache_dir.mkdir(parents=True, exist_ok=True)
        return cache_dir


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
