"""Exit statuses and error reporting shared by all commands.

Every error kind maps to its own exit status so scripts can tell them
apart. Commands wrap their work in :func:`cli_errors`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from binventory.errors import (
    AlgorithmMismatchError,
    InvalidHexError,
    InvalidRequirementError,
    InventoryError,
    LengthMismatchError,
    ManifestFormatError,
    ManifestReadError,
    ManifestWriteError,
    UnknownDigestError,
    UnsupportedArchError,
    UnsupportedOsError,
)

logger = logging.getLogger(__name__)

console = Console()

EXIT_NO_MATCH = 1
EXIT_INVALID_ARTIFACT = 2

EXIT_CODES: dict[type[InventoryError], int] = {
    ManifestReadError: 3,
    ManifestWriteError: 4,
    ManifestFormatError: 5,
    UnsupportedOsError: 6,
    UnsupportedArchError: 7,
    InvalidHexError: 8,
    AlgorithmMismatchError: 9,
    LengthMismatchError: 10,
    UnknownDigestError: 11,
    InvalidRequirementError: 12,
}

_LABELS: dict[type[InventoryError], str] = {
    ManifestReadError: "Cannot read manifest",
    ManifestWriteError: "Cannot write manifest",
    ManifestFormatError: "Malformed manifest",
    UnsupportedOsError: "Unsupported OS",
    UnsupportedArchError: "Unsupported architecture",
    InvalidHexError: "Invalid checksum",
    AlgorithmMismatchError: "Checksum algorithm mismatch",
    LengthMismatchError: "Checksum length mismatch",
    UnknownDigestError: "Unknown digest",
    InvalidRequirementError: "Invalid version requirement",
}


def exit_code_for(exc: InventoryError) -> int:
    """Return the exit status for ``exc`` (1 for unregistered kinds)."""
    for error_type, code in EXIT_CODES.items():
        if isinstance(exc, error_type):
            return code
    return 1


def _label_for(exc: InventoryError) -> str:
    for error_type, label in _LABELS.items():
        if isinstance(exc, error_type):
            return label
    return "Error"


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn binventory errors into a message and a distinct exit status."""
    try:
        yield
    except InventoryError as exc:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[bold red]{_label_for(exc)}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exit_code_for(exc)) from exc
    except ValidationError as exc:
        console.print(f"[bold red]Invalid artifact:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID_ARTIFACT) from exc
