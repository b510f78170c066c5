"""
Centralized settings for the pricing profiles service.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


def get_package_root() -> Path:
    """Get the pricing_profiles package directory."""
    return Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Seed data
    seed_catalog: Path
    seed_on_start: bool = True

    # Pricing
    default_basis: str = "global"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> 'Settings':
        """Load settings from environment variables."""
        env = os.environ if environ is None else environ
        seed_default = get_package_root() / 'data' / 'seed_products.csv'

        origins = env.get('PRICING_CORS_ORIGINS', '*')

        return cls(
            seed_catalog=Path(env.get('PRICING_SEED_CATALOG', seed_default)),
            seed_on_start=env.get('PRICING_SEED_ON_START', 'true').strip().lower() in ('1', 'true', 'yes', 'on'),
            default_basis=env.get('PRICING_DEFAULT_BASIS', 'global'),
            log_level=env.get('PRICING_LOG_LEVEL', 'INFO').upper(),
            log_format=env.get('PRICING_LOG_FORMAT', 'console').lower(),
            api_host=env.get('PRICING_API_HOST', '0.0.0.0'),
            api_port=int(env.get('PRICING_API_PORT', 8000)),
            cors_origins=[o.strip() for o in origins.split(',') if o.strip()],
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
