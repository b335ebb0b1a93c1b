"""Shared test fixtures for binventory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from binventory.core.checksum import Checksum
from binventory.core.inventory import Inventory
from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os


@pytest.fixture
def make_artifact() -> Callable[..., Artifact]:
    """Factory fixture: build an Artifact with sensible defaults."""

    def _factory(
        version: str = "1.0.0",
        os: Os = Os.LINUX,
        arch: Arch = Arch.AMD64,
        **overrides: Any,
    ) -> Artifact:
        defaults: dict[str, Any] = {
            "version": version,
            "os": os,
            "arch": arch,
            "url": f"https://example.com/tool-{version}-{os}-{arch}.tar.gz",
            "checksum": Checksum.from_hex("cafebabe"),
        }
        defaults.update(overrides)
        return Artifact(**defaults)

    return _factory


@pytest.fixture
def sample_inventory(make_artifact: Callable[..., Artifact]) -> Inventory:
    """An inventory spanning several versions and platforms."""
    return Inventory([
        make_artifact("1.0.0", Os.LINUX, Arch.AMD64),
        make_artifact("1.0.0", Os.LINUX, Arch.ARM64),
        make_artifact("1.0.0", Os.DARWIN, Arch.ARM64),
        make_artifact("1.4.2", Os.LINUX, Arch.AMD64),
        make_artifact("2.0.0", Os.LINUX, Arch.AMD64),
        make_artifact("2.0.0", Os.DARWIN, Arch.ARM64),
    ])


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Path for a manifest file inside a temp directory (not created)."""
    return tmp_path / "inventory.toml"
