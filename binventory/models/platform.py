"""Operating system and CPU architecture enums with alias parsing."""

from __future__ import annotations

from enum import Enum

from binventory.errors import UnsupportedArchError, UnsupportedOsError


class Os(str, Enum):
    """Operating systems an artifact can target."""

    DARWIN = "darwin"
    LINUX = "linux"

    @classmethod
    def parse(cls, value: str) -> Os:
        """Parse an OS name or alias (``osx`` is Darwin).

        Raises
        ------
        UnsupportedOsError
            If ``value`` is not a known name or alias.
        """
        if isinstance(value, cls):
            return value
        try:
            return _OS_ALIASES[value]
        except KeyError:
            raise UnsupportedOsError(value) from None

    def __str__(self) -> str:
        return self.value


class Arch(str, Enum):
    """CPU architectures an artifact can target."""

    AMD64 = "amd64"
    ARM64 = "arm64"

    @classmethod
    def parse(cls, value: str) -> Arch:
        """Parse an architecture name or alias (``x86_64``, ``aarch64``).

        Raises
        ------
        UnsupportedArchError
            If ``value`` is not a known name or alias.
        """
        if isinstance(value, cls):
            return value
        try:
            return _ARCH_ALIASES[value]
        except KeyError:
            raise UnsupportedArchError(value) from None

    def __str__(self) -> str:
        return self.value


_OS_ALIASES: dict[str, Os] = {
    "linux": Os.LINUX,
    "darwin": Os.DARWIN,
    "osx": Os.DARWIN,
}

_ARCH_ALIASES: dict[str, Arch] = {
    "amd64": Arch.AMD64,
    "x86_64": Arch.AMD64,
    "arm64": Arch.ARM64,
    "aarch64": Arch.ARM64,
}
