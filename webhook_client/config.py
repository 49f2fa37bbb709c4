"""Client configuration."""

import os
from functools import lru_cache


def read_secret(name: str, default: str = "") -> str:
    """Read secret from Docker secrets or environment variable."""
    secret_path = f"/run/secrets/{name}"
    if os.path.exists(secret_path):
        with open(secret_path) as f:
            return f.read().strip()
    return os.getenv(name.upper(), default)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


class Settings:
    """Client settings."""

    # Signature verification
    WEBHOOK_SECRET: str = read_secret("webhook_secret", "")
    WEBHOOK_TOLERANCE_SECONDS: int = int(os.getenv("WEBHOOK_TOLERANCE_SECONDS", "300"))

    # Reject payloads missing required fields instead of zero-filling them
    STRICT_REQUIRED_FIELDS: bool = _env_flag("STRICT_REQUIRED_FIELDS")


@lru_cache
def get_settings() -> Settings:
    return Settings()
