"""``binventory resolve PATH``: print the best artifact for a platform.

Exits with status 1 when no artifact matches.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from binventory import config
from binventory.cli.errors import EXIT_NO_MATCH, cli_errors, console
from binventory.core.requirements import parse_requirement
from binventory.manifest import read_manifest
from binventory.models.platform import Arch, Os


def resolve_cmd(
    path: Path | None = typer.Argument(
        None,
        help="Manifest file. Defaults to BINVENTORY_MANIFEST_PATH or inventory.toml.",
    ),
    os_name: str = typer.Option(..., "--os", "-o", help="Target OS."),
    arch_name: str = typer.Option(..., "--arch", "-a", help="Target architecture."),
    requirement: str | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Version requirement, e.g. '>=1.2, <2' or '^1.4'. Defaults to any.",
    ),
    exact: bool = typer.Option(
        False,
        "--exact",
        help="Treat --version as an exact version string, not a range.",
    ),
    url_only: bool = typer.Option(
        False,
        "--url-only",
        help="Print only the artifact URL (for scripting).",
    ),
) -> None:
    """Resolve the newest artifact matching OS, architecture and version."""
    manifest = path or config.settings.manifest_path

    with cli_errors():
        target_os = Os.parse(os_name)
        target_arch = Arch.parse(arch_name)
        version_requirement = parse_requirement(requirement, exact=exact)
        inventory = read_manifest(manifest)

    artifact = inventory.resolve(target_os, target_arch, version_requirement)

    if artifact is None:
        console.print(
            f"[bold yellow]No artifact for {target_os}-{target_arch} "
            f"matching {requirement or 'any version'}.[/bold yellow]"
        )
        raise typer.Exit(code=EXIT_NO_MATCH)

    if url_only:
        typer.echo(artifact.url)
        return

    console.print(
        Panel(
            "\n".join([
                f"[bold]Version:[/bold]  {artifact.version}",
                f"[bold]Platform:[/bold] {artifact.os}-{artifact.arch}",
                f"[bold]URL:[/bold]      {artifact.url}",
                f"[bold]Checksum:[/bold] {artifact.checksum.to_text()}",
            ]),
            title="[bold]Resolved artifact[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
