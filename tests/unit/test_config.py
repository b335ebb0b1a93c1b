"""Tests for InventorySettings: env-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from binventory.config import InventorySettings
from binventory.core.digest import SHA512
from binventory.errors import UnknownDigestError


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("BINVENTORY_LOG_LEVEL", "BINVENTORY_MANIFEST_PATH", "BINVENTORY_DEFAULT_DIGEST"):
        monkeypatch.delenv(name, raising=False)


class TestInventorySettings:
    def test_defaults(self):
        settings = InventorySettings()
        assert settings.log_level == "WARNING"
        assert settings.manifest_path == Path("inventory.toml")
        assert settings.default_digest is None
        assert settings.digest is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BINVENTORY_MANIFEST_PATH", "dist/inventory.toml")
        monkeypatch.setenv("BINVENTORY_DEFAULT_DIGEST", "SHA512")
        monkeypatch.setenv("BINVENTORY_LOG_LEVEL", "debug")
        settings = InventorySettings()
        assert settings.manifest_path == Path("dist/inventory.toml")
        assert settings.digest == SHA512
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path: Path):
        (tmp_path / ".env").write_text("BINVENTORY_DEFAULT_DIGEST=sha512\n", encoding="utf-8")
        assert InventorySettings().digest == SHA512

    def test_unknown_default_digest(self):
        settings = InventorySettings(default_digest="md5")
        with pytest.raises(UnknownDigestError):
            settings.digest
