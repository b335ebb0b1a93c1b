"""Runtime configuration, env-driven.

Settings are read from ``BINVENTORY_*`` environment variables or a
``.env`` file in the working directory.

Examples
--------
Override via environment::

    export BINVENTORY_MANIFEST_PATH=buildpacks/inventory.toml
    export BINVENTORY_DEFAULT_DIGEST=sha256
    export BINVENTORY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from binventory.core.digest import DigestAlgorithm, digest_for


class InventorySettings(BaseSettings):
    """Defaults for the command line, overridable per invocation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BINVENTORY_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Manifest used when a command is given no path
    manifest_path: Path = Path("inventory.toml")

    # When set, `add` binds every new checksum to this algorithm
    default_digest: str | None = None

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def digest(self) -> DigestAlgorithm | None:
        """The configured default digest, or None."""
        if not self.default_digest:
            return None
        return digest_for(self.default_digest)


# Module-level singleton: import as `from binventory.config import settings`
settings = InventorySettings()
