"""Digest algorithm descriptions used for checksum validation.

A :class:`DigestAlgorithm` carries only static metadata: the canonical
lowercase name and the fixed output length in bytes. Nothing here hashes
data; the sizes are read from :mod:`hashlib` once at import time.
"""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field

from binventory.errors import UnknownDigestError


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


class DigestAlgorithm(BaseModel):
    """Name and output length of one hash algorithm.

    Instances are frozen and shared process-wide; compare them by value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    output_length: int = Field(gt=0)

    def name_compatible(self, name: str) -> bool:
        """Return True if ``name`` identifies this algorithm.

        Case and ``-``/``_`` separators are ignored, so ``"SHA-256"``
        matches ``sha256``.
        """
        return _normalize_name(name) == _normalize_name(self.name)

    def __str__(self) -> str:
        return self.name


def _sha2(name: str) -> DigestAlgorithm:
    return DigestAlgorithm(name=name, output_length=hashlib.new(name).digest_size)


SHA224 = _sha2("sha224")
SHA256 = _sha2("sha256")
SHA384 = _sha2("sha384")
SHA512 = _sha2("sha512")

_REGISTRY: tuple[DigestAlgorithm, ...] = (SHA224, SHA256, SHA384, SHA512)


def registered_digests() -> list[DigestAlgorithm]:
    """Return every supported digest algorithm."""
    return list(_REGISTRY)


def digest_for(name: str) -> DigestAlgorithm:
    """Look up a supported digest algorithm by name.

    Raises
    ------
    UnknownDigestError
        If no registered algorithm is compatible with ``name``.
    """
    for digest in _REGISTRY:
        if digest.name_compatible(name):
            return digest
    raise UnknownDigestError(name)
