"""Checksum values: hex codec and binding to a digest algorithm.

A checksum comes in two forms:

* :class:`Checksum` is algorithm-erased. It holds the decoded bytes and,
  optionally, the name of the algorithm it claims to come from. Its
  length is not checked against anything.
* :class:`BoundChecksum` is tied to a :class:`DigestAlgorithm` and its
  length always equals that algorithm's output length.

``Checksum.bind(digest)`` converts the first into the second, checking the
name before the length.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from binventory.core.digest import DigestAlgorithm
from binventory.errors import (
    AlgorithmMismatchError,
    InvalidHexError,
    LengthMismatchError,
)

_HEX_RE = re.compile(r"[0-9a-fA-F]*")

# Separates the algorithm name from the hex digits in manifest text.
ALGORITHM_SEPARATOR = ":"


def decode_hex(text: str) -> bytes:
    """Decode a hex string, accepting either case.

    Raises
    ------
    InvalidHexError
        If ``text`` has odd length or contains a non-hex character.
    """
    if len(text) % 2 != 0:
        raise InvalidHexError(f"Hex string has odd length ({len(text)}): {text!r}")
    if not _HEX_RE.fullmatch(text):
        raise InvalidHexError(f"Hex string contains non-hex characters: {text!r}")
    return bytes.fromhex(text)


class Checksum(BaseModel):
    """An algorithm-erased checksum.

    ``algorithm`` is whatever name accompanied the hex text, if any. It is
    only checked when the checksum is bound.
    """

    model_config = ConfigDict(frozen=True)

    value: bytes
    algorithm: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _decode_hex_text(cls, value: Any) -> Any:
        return decode_hex(value) if isinstance(value, str) else value

    @field_validator("algorithm")
    @classmethod
    def _normalize_algorithm(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower() or None

    @classmethod
    def from_hex(cls, text: str, algorithm: str | None = None) -> Checksum:
        """Build a checksum from hex digits and an optional algorithm name."""
        return cls(value=decode_hex(text), algorithm=algorithm or None)

    @classmethod
    def parse(cls, text: str) -> Checksum:
        """Parse the manifest text form, ``"<algorithm>:<hex>"`` or ``"<hex>"``."""
        name, sep, digits = text.strip().rpartition(ALGORITHM_SEPARATOR)
        if not sep:
            return cls.from_hex(digits)
        return cls.from_hex(digits, algorithm=name)

    @property
    def hex(self) -> str:
        return self.value.hex()

    def to_text(self) -> str:
        """Render the manifest text form."""
        if self.algorithm is None:
            return self.hex
        return f"{self.algorithm}{ALGORITHM_SEPARATOR}{self.hex}"

    def bind(self, digest: DigestAlgorithm) -> BoundChecksum:
        """Validate this checksum against ``digest``.

        Raises
        ------
        AlgorithmMismatchError
            If this checksum names an algorithm ``digest`` does not accept.
        LengthMismatchError
            If the byte length differs from ``digest.output_length``.
        """
        if self.algorithm is not None and not digest.name_compatible(self.algorithm):
            raise AlgorithmMismatchError(self.algorithm, digest.name)
        _check_length(self.value, digest)
        return BoundChecksum(value=self.value, algorithm=digest)

    def __str__(self) -> str:
        return self.hex


class BoundChecksum(BaseModel):
    """A checksum validated against a specific digest algorithm.

    Build one with :meth:`Checksum.bind` or :meth:`from_hex` to get a
    :class:`LengthMismatchError` on a bad length. Direct construction is
    also length-checked, but pydantic reports the failure as a
    ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    value: bytes
    algorithm: DigestAlgorithm

    @model_validator(mode="after")
    def _length_matches_algorithm(self) -> BoundChecksum:
        _check_length(self.value, self.algorithm)
        return self

    @classmethod
    def from_hex(cls, text: str, digest: DigestAlgorithm) -> BoundChecksum:
        """Decode ``text`` and bind it to ``digest`` in one step."""
        return Checksum.from_hex(text).bind(digest)

    @property
    def hex(self) -> str:
        return self.value.hex()

    def erase(self) -> Checksum:
        """Drop the binding, keeping the algorithm name."""
        return Checksum(value=self.value, algorithm=self.algorithm.name)

    def __str__(self) -> str:
        return self.hex


def _check_length(value: bytes, digest: DigestAlgorithm) -> None:
    if len(value) != digest.output_length:
        raise LengthMismatchError(digest.name, digest.output_length, len(value))
