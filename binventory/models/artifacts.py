"""Artifact record model (immutable)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from binventory.core.checksum import BoundChecksum, Checksum
from binventory.core.digest import DigestAlgorithm
from binventory.models.platform import Arch, Os


class Artifact(BaseModel):
    """One downloadable build of a binary for a single OS and architecture.

    The checksum is stored algorithm-erased, exactly as it appears in the
    manifest. Use :meth:`bound_checksum` to validate it against a digest.

    ``metadata`` is free-form and only consulted when a caller resolves
    with a metadata predicate.

    Examples
    --------
    >>> artifact = Artifact(
    ...     version="1.2.3",
    ...     os="linux",
    ...     arch="x86_64",
    ...     url="https://example.com/tool-1.2.3.tar.gz",
    ...     checksum="sha256:deadbeef",
    ... )
    >>> str(artifact)
    '1.2.3 (linux-amd64)'
    """

    model_config = ConfigDict(frozen=True)

    version: str
    os: Os
    arch: Arch
    url: str = Field(min_length=1)
    checksum: Checksum
    metadata: dict[str, Any] = {}

    @field_validator("os", mode="before")
    @classmethod
    def _parse_os(cls, value: Any) -> Any:
        return Os.parse(value) if isinstance(value, str) else value

    @field_validator("arch", mode="before")
    @classmethod
    def _parse_arch(cls, value: Any) -> Any:
        return Arch.parse(value) if isinstance(value, str) else value

    @field_validator("checksum", mode="before")
    @classmethod
    def _parse_checksum(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Checksum.parse(value)
        if isinstance(value, Mapping) and isinstance(value.get("value"), str):
            return Checksum.from_hex(value["value"], value.get("algorithm"))
        if isinstance(value, BoundChecksum):
            return value.erase()
        return value

    @field_serializer("checksum")
    def _serialize_checksum(self, checksum: Checksum) -> str:
        return checksum.to_text()

    def bound_checksum(self, digest: DigestAlgorithm) -> BoundChecksum:
        """Bind this artifact's checksum to ``digest``."""
        return self.checksum.bind(digest)

    def __str__(self) -> str:
        return f"{self.version} ({self.os}-{self.arch})"
