#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for Ignition configuration."""

from __future__ import annotations

# =================================
# Metadata channel
# =================================
# Changing either prefix breaks every dependent build script.
DIRECTIVE_PREFIX = "cargo::"
LEGACY_DIRECTIVE_PREFIX = "cargo:"
METADATA_INSTRUCTION = "metadata"
METADATA_KEY_PREFIX = "IGNITION_SYS_"

# =================================
# Embedded asset configuration
# =================================
ENVIRONMENT_CONFIG_PACKAGE = "ignition.config"
ENVIRONMENT_CONFIG_FILE = "environment.json"

# =================================
# Build defaults
# =================================
DEFAULT_ASSET_SCRIPT_PATH = "scripts/asset.sh"
DEFAULT_CACHE_PATH = "cache"
DEFAULT_DIRECTORY_PATH = "assets/dependencies"
BUILD_DIR_MARKER = "/build"
RERUN_SENTINEL = "NULL"

# =================================
# File permissions defaults
# =================================
DEFAULT_SCRIPT_PERMS = 0o755  # Executable by all, writable by owner

# =================================
# Platform support
# =================================
# (architecture, os) pairs without prebuilt asset archives
UNSUPPORTED_ASSET_PLATFORMS = frozenset({("aarch64", "linux")})

ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
}

OS_ALIASES = {
    "androideabi": "android",
    "macos": "darwin",
}

# 🌶️📦🔚
