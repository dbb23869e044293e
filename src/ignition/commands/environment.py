#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Export and import commands for the ignition CLI."""

from __future__ import annotations

from pathlib import Path
import shlex

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from ignition.console import get_command_logger
from ignition.exceptions import IgnitionError
from ignition.resolver import Export, Import, resolve

# Get structured logger for environment commands
log = get_command_logger("environment")


@click.command("export")
@click.argument("asset")
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
)
def export_command(asset: str, directory: Path) -> None:
    """Publish an extracted asset's contents as build metadata.

    Prints one metadata directive per content found under DIRECTORY.
    """
    log.debug("Exporting asset environment", asset=asset, directory=str(directory))

    try:
        resolved = resolve(asset, Export(directory.absolute()))
    except IgnitionError as e:
        log.error("Export failed", asset=asset, error=str(e))
        perr(f"❌ Export failed: {e}")
        raise click.Abort() from e

    for content in resolved.skipped:
        perr(f"⚠️  Missing content skipped: {content}")


@click.command("import")
@click.argument("asset")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["shell", "json"], case_sensitive=False),
    default="shell",
    help="Output format for the imported variables (default: shell)",
)
def import_command(asset: str, output_format: str) -> None:
    """Pick up an asset's environment published by its producer build."""
    log.debug("Importing asset environment", asset=asset)

    try:
        resolved = resolve(asset, Import())
    except IgnitionError as e:
        log.error("Import failed", asset=asset, error=str(e))
        perr(f"❌ Import failed: {e}")
        raise click.Abort() from e

    if output_format == "json":
        pout(json_dumps(dict(resolved), indent=2))
        return

    for name, value in resolved.items():
        pout(f"export {name}={shlex.quote(value)}")


# 🌶️📦🔚
