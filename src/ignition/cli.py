#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ignition command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from ignition.commands.assets import assets_command, relay_command
from ignition.commands.build import build_command
from ignition.commands.environment import export_command, import_command
from ignition.config import IgnitionRuntimeConfig

__version__ = get_version("ignition", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="ignition",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Native asset retrieval and environment handoff for build scripts.

    Configure logging via environment variables:
    - IGNITION_LOG_LEVEL: Set log level for Ignition (trace, debug, info, warning, error)
    - IGNITION_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file

    Logs are written to stderr; stdout carries build metadata directives.
    """
    ctx.ensure_object(dict)

    # Load Ignition configuration from environment
    ignition_config = IgnitionRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="ignition",
        logging=evolve(
            base_telemetry.logging,
            default_level=ignition_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(export_command, name="export")
cli.add_command(import_command, name="import")
cli.add_command(build_command, name="build")
cli.add_command(assets_command, name="assets")
cli.add_command(relay_command, name="relay")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
