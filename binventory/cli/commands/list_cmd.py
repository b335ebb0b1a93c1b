"""``binventory list PATH``: show a manifest's artifacts in order."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from binventory import config
from binventory.cli.errors import cli_errors, console
from binventory.manifest import read_manifest
from binventory.models.platform import Arch, Os


def list_cmd(
    path: Path | None = typer.Argument(
        None,
        help="Manifest file. Defaults to BINVENTORY_MANIFEST_PATH or inventory.toml.",
    ),
    os_name: str | None = typer.Option(None, "--os", "-o", help="Only this OS."),
    arch_name: str | None = typer.Option(
        None, "--arch", "-a", help="Only this architecture."
    ),
) -> None:
    """List the artifacts in a manifest."""
    manifest = path or config.settings.manifest_path

    with cli_errors():
        target_os = Os.parse(os_name) if os_name else None
        target_arch = Arch.parse(arch_name) if arch_name else None
        inventory = read_manifest(manifest)

    artifacts = [
        a
        for a in inventory
        if (target_os is None or a.os == target_os)
        and (target_arch is None or a.arch == target_arch)
    ]

    if not artifacts:
        console.print("[dim]No artifacts.[/dim]")
        return

    table = Table(title=f"Inventory: {manifest}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Version", style="green")
    table.add_column("OS")
    table.add_column("Arch")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Checksum", overflow="fold")

    for index, a in enumerate(artifacts, start=1):
        table.add_row(
            str(index), a.version, str(a.os), str(a.arch), a.url, a.checksum.to_text()
        )

    console.print(table)
