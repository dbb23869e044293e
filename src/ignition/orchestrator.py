#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asset retrieval for the producer build phase.

Retrieves each requested asset with the asset script, then exports its
contents as build metadata for dependent build scripts.
"""

from __future__ import annotations

from collections.abc import Callable
import os
from pathlib import Path

from provide.foundation import logger
from provide.foundation.console import pout
from provide.foundation.process import run

from ignition.config.build import BuildConfig
from ignition.config.defaults import DEFAULT_SCRIPT_PERMS, RERUN_SENTINEL
from ignition.exceptions import RetrievalError
from ignition.metadata import format_instruction
from ignition.platform import TargetPlatform
from ignition.resolver import Export, ResolvedEnvironment, resolve


class AssetOrchestrator:
    """Retrieves requested assets and publishes their environment."""

    def __init__(self, config: BuildConfig, emit: Callable[[str], None] | None = None) -> None:
        """Initialize with build configuration.

        Args:
            config: Build settings, usually ``BuildConfig.from_env()``
            emit: Receives build tool instructions (default: stdout)
        """
        self.config = config
        self.emit = emit or pout

    @property
    def script_path(self) -> Path:
        return Path(self.config.asset_script)

    def run(self) -> dict[str, ResolvedEnvironment]:
        """Retrieve every requested asset and export its environment.

        Returns:
            Resolved environment per asset name, empty when nothing was fetched

        Raises:
            ConfigurationError: OUT_DIR or IGNITION_BUCKET_URL missing
            PlatformError: TARGET is not a valid triple
            RetrievalError: The asset script failed
        """
        # Force a rerun by pointing at a file that never exists
        self.emit(format_instruction("rerun-if-changed", RERUN_SENTINEL))

        build_dir = self.config.build_dir
        platform = TargetPlatform.from_target(self.config.target)

        if not platform.supports_prebuilt_assets():
            logger.info(f"⏭️ No prebuilt assets for {platform}, skipping retrieval")
            return {}

        assets = self.config.asset_names
        if not assets:
            logger.debug("No assets requested (IGNITION_ASSETS is empty)")
            return {}

        bucket_url = self.config.require_bucket_url()
        self.prepare_script()

        resolved: dict[str, ResolvedEnvironment] = {}
        for asset in assets:
            self.retrieve(asset, bucket_url, build_dir, platform.triple)
            resolved[asset] = resolve(asset, Export(self.config.extract_dir), emit=self.emit)
        return resolved

    def prepare_script(self) -> None:
        """Ensure the asset script exists and is executable."""
        path = self.script_path
        if not path.is_file():
            raise RetrievalError(f"Asset script not found: {path}")
        if not os.access(path, os.X_OK):
            try:
                path.chmod(DEFAULT_SCRIPT_PERMS)
            except OSError as e:
                logger.warning(f"⚠️ Could not make asset script executable: {path}", error=str(e))

    def retrieve(self, asset: str, bucket_url: str, build_dir: Path, target: str) -> None:
        """Retrieve a single asset with the asset script.

        The script receives positional arguments
        ``<bucket-url> <asset> <root> <cache> <directory> <target-triplet>``
        and extracts the archive under ``<root>/<directory>/<asset>``.
        """
        args = [
            str(self.script_path),
            bucket_url,
            asset,
            str(build_dir),
            self.config.cache_path,
            self.config.directory_path,
            target,
        ]
        logger.info(f"📥 Retrieving {asset}", target=target, root=str(build_dir))

        try:
            result = run(args, capture_output=True, check=True)
        except Exception as e:
            logger.error(f"❌ Asset script failed for {asset}", error=str(e))
            raise RetrievalError(f"Asset script failed for '{asset}': {e!s}") from e

        if result.stdout:
            logger.trace(f"Asset script stdout: {result.stdout.strip()}")


def run_build(emit: Callable[[str], None] | None = None) -> dict[str, ResolvedEnvironment]:
    """Entry point for a producer build script."""
    return AssetOrchestrator(BuildConfig.from_env(), emit=emit).run()


# 🌶️📦🔚
