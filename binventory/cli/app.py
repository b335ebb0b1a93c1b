"""Main Typer application: imports and registers all CLI commands.

Entry point: ``binventory`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from binventory import config
from binventory.cli.commands.add import add_cmd
from binventory.cli.commands.list_cmd import list_cmd
from binventory.cli.commands.resolve_cmd import resolve_cmd
from binventory.logging_setup import configure_logging

app = typer.Typer(
    name="binventory",
    help="binventory: catalog prebuilt binaries and resolve the right one.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_options(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: BINVENTORY_LOG_LEVEL or WARNING).",
    ),
) -> None:
    """Catalog prebuilt binaries and resolve the right one for a platform."""
    try:
        configure_logging(log_level or config.settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


# Register subcommands
app.command(name="add", help="Add an artifact to an inventory file.")(add_cmd)
app.command(name="resolve", help="Resolve the best artifact for a platform.")(resolve_cmd)
app.command(name="list", help="List the artifacts in an inventory file.")(list_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
