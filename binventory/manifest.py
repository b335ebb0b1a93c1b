"""TOML manifest persistence for inventories.

Layout::

    [[artifacts]]
    version = "1.2.3"
    os = "linux"
    arch = "amd64"
    url = "https://example.com/tool-1.2.3-linux-amd64.tar.gz"
    checksum = "sha256:..."

    [artifacts.metadata]          # optional
    channel = "stable"

Entries keep their order, and ``parse_manifest(serialize_manifest(inv))``
reproduces ``inv``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from binventory.core.inventory import Inventory
from binventory.errors import ManifestFormatError, ManifestReadError, ManifestWriteError
from binventory.models.artifacts import Artifact

logger = logging.getLogger(__name__)

ARTIFACTS_KEY = "artifacts"


def parse_manifest(text: str) -> Inventory:
    """Parse manifest TOML into an :class:`Inventory`.

    Raises
    ------
    ManifestFormatError
        If the text is not TOML or an entry is not a valid artifact.
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestFormatError(f"Manifest is not valid TOML: {exc}") from exc

    entries = document.get(ARTIFACTS_KEY, [])
    if not isinstance(entries, list):
        raise ManifestFormatError(f"'{ARTIFACTS_KEY}' must be an array of tables")

    artifacts: list[Artifact] = []
    for index, entry in enumerate(entries, start=1):
        try:
            artifacts.append(Artifact.model_validate(entry))
        except ValidationError as exc:
            raise ManifestFormatError(f"Invalid artifact #{index}: {exc}") from exc

    logger.debug("Parsed manifest with %d artifacts", len(artifacts))
    return Inventory(artifacts)


def _artifact_table(artifact: Artifact) -> dict[str, Any]:
    table = artifact.model_dump(mode="json", exclude={"metadata"})
    # metadata keeps its TOML-native types (dates, times) unconverted
    if artifact.metadata:
        table["metadata"] = dict(artifact.metadata)
    return table


def serialize_manifest(inventory: Inventory) -> str:
    """Render an inventory as manifest TOML.

    Raises
    ------
    ManifestFormatError
        If artifact metadata holds values TOML cannot represent.
    """
    try:
        return tomli_w.dumps({ARTIFACTS_KEY: [_artifact_table(a) for a in inventory]})
    except TypeError as exc:
        raise ManifestFormatError(f"Metadata cannot be written as TOML: {exc}") from exc


def read_manifest(path: Path) -> Inventory:
    """Read and parse the manifest at ``path``.

    Raises
    ------
    ManifestReadError
        If the file is missing or unreadable.
    ManifestFormatError
        If its content is not a valid manifest.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestFormatError(f"Manifest {path} is not UTF-8: {exc}") from exc
    except OSError as exc:
        raise ManifestReadError(f"Cannot read manifest {path}: {exc}") from exc
    return parse_manifest(text)


def write_manifest(path: Path, inventory: Inventory) -> None:
    """Serialize ``inventory`` to ``path``, replacing it atomically.

    Raises
    ------
    ManifestWriteError
        If the file cannot be written.
    ManifestFormatError
        If the inventory cannot be rendered as TOML.
    """
    path = Path(path)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(serialize_manifest(inventory), encoding="utf-8")
        tmp.replace(path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise ManifestWriteError(f"Cannot write manifest {path}: {exc}") from exc
    logger.info("Wrote %d artifacts to %s", len(inventory), path)
