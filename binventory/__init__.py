"""binventory: a catalog of prebuilt binaries and best-match resolution.

An inventory lists downloadable artifacts, each for one OS, architecture
and version, with a URL and a checksum. Given a platform and a version
requirement, the resolver picks the newest matching artifact.

  - Checksums bind to SHA-2 digest descriptions (name + output length)
  - Exact-string and semantic-version range requirements
  - TOML manifests, order-preserving
  - ``binventory`` command line (Typer + Rich)
"""

__version__ = "0.3.0"

from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os
from binventory.core.checksum import BoundChecksum, Checksum
from binventory.core.digest import SHA256, SHA512, DigestAlgorithm, digest_for
from binventory.core.inventory import Inventory
from binventory.core.requirements import (
    AnyVersion,
    ExactVersion,
    VersionRange,
    VersionRequirement,
)
from binventory.core.resolver import resolve

__all__ = [
    "Artifact",
    "Arch",
    "Os",
    "Checksum",
    "BoundChecksum",
    "DigestAlgorithm",
    "SHA256",
    "SHA512",
    "digest_for",
    "Inventory",
    "VersionRequirement",
    "ExactVersion",
    "VersionRange",
    "AnyVersion",
    "resolve",
    "__version__",
]
