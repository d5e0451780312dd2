"""Configuration management for account-store."""

import os
from dataclasses import dataclass

from account_store.exceptions import ConfigurationError
from account_store.logging import LOG_FORMATS


@dataclass
class StoreConfig:
    """Runtime settings for logging and sample data generation."""

    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None
    locale: str = "en_US"

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables.

        Reads ``LOG_LEVEL``, ``LOG_FORMAT``, ``SEED`` and ``FAKER_LOCALE``.

        Raises
        ------
        ConfigurationError
            If ``SEED`` is not an integer or ``LOG_FORMAT`` is unknown.
        """
        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            seed=seed,
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )
