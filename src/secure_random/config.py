"""Configuration system for secure-random.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SECURE_RANDOM_*) -> .env file -> field defaults.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Probed in this order when SecureRandom is created without a generator.
DEFAULT_GENERATORS: tuple[str, ...] = (
    "internal",
    "random_reader",
    "getrandom",
    "openssl",
    "system",
)


class SecureRandomConfig(BaseSettings):
    """Configuration for secure-random.

    Resolution order: init kwargs -> env vars (SECURE_RANDOM_*) -> .env file -> defaults.

    List fields are read from the environment as JSON, e.g.
    ``SECURE_RANDOM_DEFAULT_GENERATORS='["random_reader", "system"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECURE_RANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_generators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GENERATORS),
        description="Registry names of the generators tried in priority order",
    )
    random_device_blocking: bool = Field(
        default=False,
        description="Read the blocking /dev/random (and pass GRND_RANDOM) instead of /dev/urandom",
    )
    random_device_path: str = Field(
        default="",
        description="Explicit random device path for random_reader (empty = derive from blocking flag)",
    )

    def device_path(self) -> str:
        """Return the random device path implied by this configuration."""
        if self.random_device_path:
            return self.random_device_path
        return "/dev/random" if self.random_device_blocking else "/dev/urandom"
