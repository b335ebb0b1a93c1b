"""Best-match artifact resolution.

Filters artifacts by OS, architecture and version requirement, then picks
the highest version. When several matches share the highest version the
last one in input order wins, so a later manifest entry overrides an
earlier one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from binventory.core.requirements import VersionRequirement
from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os

logger = logging.getLogger(__name__)

MetadataPredicate = Callable[[Mapping[str, Any]], bool]


def matches(
    artifact: Artifact,
    os: Os,
    arch: Arch,
    requirement: VersionRequirement,
    metadata: MetadataPredicate | None = None,
) -> bool:
    """Return True if ``artifact`` is a candidate for the given request."""
    return (
        artifact.os == os
        and artifact.arch == arch
        and requirement.satisfies(artifact.version)
        and (metadata is None or metadata(artifact.metadata))
    )


def resolve(
    artifacts: Iterable[Artifact],
    os: Os,
    arch: Arch,
    requirement: VersionRequirement,
    *,
    metadata: MetadataPredicate | None = None,
) -> Artifact | None:
    """Select the best artifact for ``os``/``arch`` satisfying ``requirement``.

    Parameters
    ----------
    artifacts:
        Candidates, in manifest order. Not modified.
    os, arch:
        Platform the artifact must target exactly.
    requirement:
        Version predicate; also supplies the ordering used to find the
        maximum version.
    metadata:
        Optional extra predicate over the artifact's metadata mapping.

    Returns
    -------
    Artifact | None
        The match with the greatest version (last one on ties), or
        ``None`` when nothing matches.
    """
    best: Artifact | None = None
    best_key: Any = None
    considered = 0
    for artifact in artifacts:
        considered += 1
        if not matches(artifact, os, arch, requirement, metadata):
            continue
        key = requirement.sort_key(artifact.version)
        # >= so that the last of equal versions wins
        if best is None or key >= best_key:
            best, best_key = artifact, key

    logger.debug(
        "Resolved %s-%s %r over %d artifacts: %s",
        os,
        arch,
        requirement,
        considered,
        best if best is not None else "no match",
    )
    return best
