"""binventory CLI: Typer-based command-line interface.

Provides the ``binventory`` command with subcommands for adding artifacts
to a manifest, resolving the best artifact for a platform, and listing a
manifest's contents.

All output uses Rich for formatted terminal display.
"""
