#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asset listing and metadata relay commands for the ignition CLI."""

from __future__ import annotations

from typing import TextIO

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from ignition.console import get_command_logger
from ignition.exceptions import IgnitionError
from ignition.metadata import collect_metadata, inbound_environment
from ignition.schema import load_schema

# Get structured logger for asset commands
log = get_command_logger("assets")


@click.command("assets")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output as JSON format",
)
def assets_command(output_json: bool) -> None:
    """List configured assets with their contents and variables."""
    try:
        schemas = load_schema()
    except IgnitionError as e:
        log.error("Failed to load asset configuration", error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    if output_json:
        data = {
            name: {"contents": list(schema.contents), "environment": dict(schema.environment)}
            for name, schema in schemas.items()
        }
        pout(json_dumps(data, indent=2))
        return

    if not schemas:
        pout("No assets configured.")
        return

    pout("📦 Configured Assets")
    pout("=" * 60)
    for name in sorted(schemas):
        schema = schemas[name]
        pout(f"\n{name}:")
        for content in schema.contents:
            variable = schema.environment.get(content, "<unmapped>")
            pout(f"  • {content} → {variable}")


@click.command("relay")
@click.argument(
    "directives",
    type=click.File("r"),
    default="-",
)
def relay_command(directives: TextIO) -> None:
    """Show the inbound variables dependents receive from build output.

    Reads producer output (a file, or stdin by default) and prints the
    IGNITION_SYS_* assignments for every metadata directive found.
    """
    metadata = collect_metadata(directives)
    log.debug("Relaying metadata", count=len(metadata))

    for name, value in inbound_environment(metadata).items():
        pout(f"{name}={value}")


# 🌶️📦🔚
