"""``binventory add PATH``: append an artifact to a manifest.

Reads the manifest, appends one artifact built from the options, and
rewrites the file. With a digest (``--digest`` or
``BINVENTORY_DEFAULT_DIGEST``) the checksum is validated first and stored
with the algorithm name.
"""

from __future__ import annotations

from pathlib import Path

import typer

from binventory import config
from binventory.cli.errors import cli_errors, console
from binventory.core.checksum import Checksum
from binventory.core.digest import digest_for
from binventory.core.inventory import Inventory
from binventory.manifest import read_manifest, write_manifest
from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os


def add_cmd(
    path: Path | None = typer.Argument(
        None,
        help="Manifest file. Defaults to BINVENTORY_MANIFEST_PATH or inventory.toml.",
    ),
    version: str = typer.Option(..., "--version", "-v", help="Artifact version."),
    os_name: str = typer.Option(
        ..., "--os", "-o", help="Target OS: linux, darwin (or osx)."
    ),
    arch_name: str = typer.Option(
        ...,
        "--arch",
        "-a",
        help="Target architecture: amd64 (or x86_64), arm64 (or aarch64).",
    ),
    url: str = typer.Option(..., "--url", "-u", help="Download URL."),
    checksum: str = typer.Option(
        ...,
        "--checksum",
        "-c",
        help="Hex checksum, optionally prefixed with the algorithm (sha256:...).",
    ),
    digest: str | None = typer.Option(
        None,
        "--digest",
        "-d",
        help="Validate the checksum against this algorithm (sha256, sha512, ...).",
    ),
    create: bool = typer.Option(
        False,
        "--create",
        help="Start a new manifest if PATH does not exist.",
    ),
) -> None:
    """Add an artifact to an existing inventory file."""
    settings = config.settings
    manifest = path or settings.manifest_path

    with cli_errors():
        parsed = Checksum.parse(checksum)
        algorithm = digest_for(digest) if digest else settings.digest
        if algorithm is not None:
            parsed = parsed.bind(algorithm).erase()

        artifact = Artifact(
            version=version,
            os=Os.parse(os_name),
            arch=Arch.parse(arch_name),
            url=url,
            checksum=parsed,
        )

        if create and not manifest.exists():
            inventory = Inventory()
        else:
            inventory = read_manifest(manifest)

        inventory.push(artifact)
        write_manifest(manifest, inventory)

    console.print(f"[bold green]Added[/bold green] {artifact} to {manifest}")
