"""Exception hierarchy for binventory.

Every error raised by the core derives from :class:`InventoryError` and
from the builtin that best describes it, so callers may catch either.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for all binventory errors."""


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class UnsupportedOsError(InventoryError, ValueError):
    """Raised when an operating system string has no known alias."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"OS is not supported: {value}")


class UnsupportedArchError(InventoryError, ValueError):
    """Raised when an architecture string has no known alias."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Arch is not supported: {value}")


class InvalidRequirementError(InventoryError, ValueError):
    """Raised when a version requirement expression cannot be parsed."""


class UnknownDigestError(InventoryError, ValueError):
    """Raised when no registered digest algorithm matches a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown digest algorithm: {name}")


# ---------------------------------------------------------------------------
# Checksum errors
# ---------------------------------------------------------------------------


class ChecksumError(InventoryError, ValueError):
    """Base class for checksum decoding and validation failures."""


class InvalidHexError(ChecksumError):
    """Raised when checksum text has odd length or a non-hex character."""


class AlgorithmMismatchError(ChecksumError):
    """Raised when a checksum's algorithm name is incompatible with a digest."""

    def __init__(self, found: str, expected: str) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"Checksum algorithm {found!r} is not compatible with {expected!r}"
        )


class LengthMismatchError(ChecksumError):
    """Raised when a checksum's byte length differs from the digest size."""

    def __init__(self, algorithm: str, expected: int, actual: int) -> None:
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{algorithm} checksums are {expected} bytes long, got {actual}"
        )


# ---------------------------------------------------------------------------
# Manifest errors
# ---------------------------------------------------------------------------


class ManifestError(InventoryError):
    """Base class for manifest persistence failures."""


class ManifestReadError(ManifestError, OSError):
    """Raised when a manifest file is missing or unreadable."""


class ManifestWriteError(ManifestError, OSError):
    """Raised when a manifest file cannot be written."""


class ManifestFormatError(ManifestError, ValueError):
    """Raised when manifest content is not a valid inventory document."""
