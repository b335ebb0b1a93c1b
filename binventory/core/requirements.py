"""Version requirements: predicates over artifact version strings.

Every requirement answers two questions about a candidate version: does it
satisfy the requirement, and where does it sit in the total order used to
pick the best match. The resolver only asks for ``sort_key`` on versions
that already satisfied the requirement.

Range matching is delegated to :mod:`packaging`. Besides PEP 440
specifiers (``>=1.2.0, <2.0.0``, ``==1.2.*``, ``~=1.2``) the range parser
accepts the caret/tilde shorthands common in semantic-version tooling:

==============  ==========================
``^1.2.3``      ``>=1.2.3, <2.0.0``
``^0.2.3``      ``>=0.2.3, <0.3.0``
``~1.2.3``      ``>=1.2.3, <1.3.0``
``=1.2.3``      ``==1.2.3``
``1.2.3``       same as ``^1.2.3``
``*``           any release
==============  ==========================
"""

from __future__ import annotations

import re
from typing import Any, Protocol, runtime_checkable

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from binventory.errors import InvalidRequirementError

_PEP440_OPERATORS = ("===", "==", "!=", ">=", "<=", "~=", ">", "<")
_PARTIAL_VERSION_RE = re.compile(
    r"(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?(?P<rest>.*)"
)


@runtime_checkable
class VersionRequirement(Protocol):
    """Protocol every version requirement implements."""

    def satisfies(self, version: str) -> bool:
        """Return True if ``version`` meets this requirement."""
        ...

    def sort_key(self, version: str) -> Any:
        """Return a key ordering satisfying versions from oldest to newest."""
        ...


class ExactVersion:
    """Matches one version string exactly.

    Used when versions are opaque labels rather than semantic versions.
    """

    def __init__(self, target: str) -> None:
        self.target = target

    def satisfies(self, version: str) -> bool:
        return version == self.target

    def sort_key(self, version: str) -> str:
        return version

    def __repr__(self) -> str:
        return f"ExactVersion({self.target!r})"


class VersionRange:
    """Matches semantic versions against a range expression.

    Candidate versions that do not parse never satisfy the range.

    Raises
    ------
    InvalidRequirementError
        If ``expression`` is not a valid range.
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.specifiers = _to_specifier_set(expression)

    def satisfies(self, version: str) -> bool:
        try:
            parsed = Version(version)
        except InvalidVersion:
            return False
        return self.specifiers.contains(parsed)

    def sort_key(self, version: str) -> Version:
        return Version(version)

    def __repr__(self) -> str:
        return f"VersionRange({self.expression!r})"


class AnyVersion:
    """Matches every version.

    Parseable versions sort semantically and above any unparseable ones,
    which fall back to plain string order among themselves.
    """

    def satisfies(self, version: str) -> bool:
        return True

    def sort_key(self, version: str) -> tuple[int, Any]:
        try:
            return (1, Version(version))
        except InvalidVersion:
            return (0, version)

    def __repr__(self) -> str:
        return "AnyVersion()"


def parse_requirement(text: str | None, *, exact: bool = False) -> VersionRequirement:
    """Build the requirement a user typed.

    ``None`` or an empty string means any version; ``exact`` compares
    version strings verbatim instead of evaluating a range.
    """
    if text is None or not text.strip():
        return AnyVersion()
    if exact:
        return ExactVersion(text.strip())
    return VersionRange(text)


# ---------------------------------------------------------------------------
# Range translation
# ---------------------------------------------------------------------------


def _to_specifier_set(expression: str) -> SpecifierSet:
    clauses = [c.strip() for c in expression.split(",")]
    if any(not c for c in clauses) and expression.strip():
        raise InvalidRequirementError(f"Empty comparator in range: {expression!r}")
    translated: list[str] = []
    for clause in clauses:
        translated.extend(_translate_comparator(clause, expression))
    try:
        return SpecifierSet(",".join(translated))
    except InvalidSpecifier as exc:
        raise InvalidRequirementError(
            f"Invalid version range {expression!r}: {exc}"
        ) from exc


def _translate_comparator(clause: str, expression: str) -> list[str]:
    if clause in ("", "*"):
        return []
    if clause.startswith(_PEP440_OPERATORS):
        return [clause]
    if clause.startswith("^"):
        return _caret(clause[1:].strip(), expression)
    if clause.startswith("~"):
        return _tilde(clause[1:].strip(), expression)
    if clause.startswith("="):
        return [f"=={clause[1:].strip()}"]
    if "*" in clause:
        return [f"=={clause}"]
    return _caret(clause, expression)


def _split_partial(text: str, expression: str) -> tuple[int, int | None, int | None]:
    match = _PARTIAL_VERSION_RE.fullmatch(text)
    if match is None:
        raise InvalidRequirementError(f"Invalid version range {expression!r}")
    minor = match["minor"]
    patch = match["patch"]
    return (
        int(match["major"]),
        int(minor) if minor is not None else None,
        int(patch) if patch is not None else None,
    )


def _lower_bound(text: str, minor: int | None, patch: int | None) -> str:
    if minor is None:
        return f">={text}.0.0"
    if patch is None:
        return f">={text}.0"
    return f">={text}"


def _caret(text: str, expression: str) -> list[str]:
    major, minor, patch = _split_partial(text, expression)
    if major > 0 or minor is None:
        upper = f"<{major + 1}.0.0"
    elif minor > 0 or patch is None:
        upper = f"<0.{minor + 1}.0"
    else:
        upper = f"<0.0.{patch + 1}"
    return [_lower_bound(text, minor, patch), upper]


def _tilde(text: str, expression: str) -> list[str]:
    major, minor, patch = _split_partial(text, expression)
    if minor is None:
        upper = f"<{major + 1}.0.0"
    else:
        upper = f"<{major}.{minor + 1}.0"
    return [_lower_bound(text, minor, patch), upper]
