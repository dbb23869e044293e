#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build command for the ignition CLI - retrieve and export requested assets."""

from __future__ import annotations

import click
from provide.foundation.console import perr

from ignition.console import get_command_logger
from ignition.exceptions import IgnitionError
from ignition.orchestrator import run_build

# Get structured logger for this command
log = get_command_logger("build")


@click.command("build")
def build_command() -> None:
    """Retrieve requested assets and export them for dependent builds.

    Configure via environment variables:
    - OUT_DIR: build script output directory (required)
    - TARGET: target triple (defaults to the host)
    - IGNITION_ASSETS: comma separated assets to retrieve
    - IGNITION_BUCKET_URL: base URL of asset archives
    - IGNITION_CACHE_PATH / IGNITION_DIRECTORY_PATH: cache and extraction paths
    - IGNITION_ASSET_SCRIPT: retrieval script path
    """
    try:
        resolved = run_build()
    except IgnitionError as e:
        log.error("Asset build failed", error=str(e))
        perr(f"❌ Asset build failed: {e}")
        raise click.Abort() from e

    log.info("Asset build complete", assets=sorted(resolved))


# 🌶️📦🔚
