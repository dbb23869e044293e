#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build-phase configuration read from the environment of a producer build script."""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from ignition.config.defaults import (
    BUILD_DIR_MARKER,
    DEFAULT_ASSET_SCRIPT_PATH,
    DEFAULT_CACHE_PATH,
    DEFAULT_DIRECTORY_PATH,
)
from ignition.exceptions import ConfigurationError


def parse_asset_names(value: str) -> tuple[str, ...]:
    """Split a comma separated asset list, dropping blanks and duplicates."""
    names: list[str] = []
    for part in value.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)


@define
class BuildConfig(RuntimeConfig):
    """Settings for asset retrieval during a producer build phase."""

    out_dir: str | None = field(
        default=None,
        env_var="OUT_DIR",
        metadata={"help": "Build script output directory (.../build/<id>/out)"},
    )

    target: str = field(
        default="",
        env_var="TARGET",
        metadata={"help": "Target triple; the host platform is used when empty"},
    )

    bucket_url: str | None = field(
        default=None,
        env_var="IGNITION_BUCKET_URL",
        metadata={"help": "Base URL of target-specific asset archives"},
    )

    cache_path: str = field(
        default=DEFAULT_CACHE_PATH,
        env_var="IGNITION_CACHE_PATH",
        metadata={"help": "Archive cache location relative to the build directory"},
    )

    directory_path: str = field(
        default=DEFAULT_DIRECTORY_PATH,
        env_var="IGNITION_DIRECTORY_PATH",
        metadata={"help": "Extraction location relative to the build directory"},
    )

    asset_script: str = field(
        default=DEFAULT_ASSET_SCRIPT_PATH,
        env_var="IGNITION_ASSET_SCRIPT",
        metadata={"help": "Executable that retrieves and extracts a single asset"},
    )

    requested_assets: str = field(
        default="",
        env_var="IGNITION_ASSETS",
        metadata={"help": "Comma separated asset names to retrieve (e.g. 'opencv,onnxruntime')"},
    )

    @property
    def asset_names(self) -> tuple[str, ...]:
        """Requested asset names in declaration order."""
        return parse_asset_names(self.requested_assets)

    @property
    def build_dir(self) -> Path:
        """Build root derived from OUT_DIR.

        OUT_DIR is expected as ``<target>/<triple>/<profile>/build/<id>/out``;
        everything before the first ``/build`` is the build root.
        """
        if not self.out_dir:
            raise ConfigurationError("OUT_DIR environment variable error: not present")
        return Path(self.out_dir.split(BUILD_DIR_MARKER, 1)[0])

    @property
    def extract_dir(self) -> Path:
        """Directory the retrieval script extracts assets into."""
        return self.build_dir / self.directory_path

    def require_bucket_url(self) -> str:
        """Return the bucket URL or fail if it was never configured."""
        if not self.bucket_url:
            raise ConfigurationError("IGNITION_BUCKET_URL environment variable error: not present")
        return self.bucket_url


# 🌶️📦🔚
