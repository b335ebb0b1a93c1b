"""Ordered, append-only collection of artifacts.

The inventory performs no locking. If one instance is shared between
threads, callers must serialize :meth:`Inventory.push` against every other
access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from binventory.core.requirements import VersionRequirement
from binventory.core.resolver import MetadataPredicate, resolve
from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os


class Inventory:
    """The catalog of artifacts persisted in one manifest.

    Duplicate (version, os, arch) entries are allowed; resolution prefers
    the later one.
    """

    def __init__(self, artifacts: Iterable[Artifact] = ()) -> None:
        self._artifacts: list[Artifact] = list(artifacts)

    @property
    def artifacts(self) -> list[Artifact]:
        """A copy of the artifacts in insertion order."""
        return list(self._artifacts)

    def push(self, artifact: Artifact) -> None:
        """Append an artifact."""
        self._artifacts.append(artifact)

    def resolve(
        self,
        os: Os,
        arch: Arch,
        requirement: VersionRequirement,
        *,
        metadata: MetadataPredicate | None = None,
    ) -> Artifact | None:
        """Return the best artifact for the request, or None."""
        return resolve(self._artifacts, os, arch, requirement, metadata=metadata)

    def for_platform(self, os: Os, arch: Arch) -> list[Artifact]:
        """Artifacts targeting ``os``/``arch``, in insertion order."""
        return [a for a in self._artifacts if a.os == os and a.arch == arch]

    def copy(self) -> Inventory:
        """Deep copy; the clone shares no metadata with this inventory."""
        return Inventory(a.model_copy(deep=True) for a in self._artifacts)

    # ------------------------------------------------------------------
    # Manifest text
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Inventory:
        """Parse manifest TOML text. See :func:`binventory.manifest.parse_manifest`."""
        from binventory.manifest import parse_manifest

        return parse_manifest(text)

    def dumps(self) -> str:
        """Render as manifest TOML text."""
        from binventory.manifest import serialize_manifest

        return serialize_manifest(self)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._artifacts == other._artifacts

    def __repr__(self) -> str:
        return f"Inventory({len(self._artifacts)} artifacts)"
