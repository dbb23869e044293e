#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ignition: build-time native asset retrieval and environment handoff."""

from __future__ import annotations

from provide.foundation.utils import get_version

from ignition.exceptions import (
    BadKeyError,
    ConfigurationDeserializationError,
    EnvironmentVariableError,
    IgnitionError,
)
from ignition.resolver import Export, Import, ResolvedEnvironment, resolve
from ignition.schema import AssetEnvironmentSchema, load_schema

__version__ = get_version("ignition", caller_file=__file__)

__all__ = [
    "AssetEnvironmentSchema",
    "BadKeyError",
    "ConfigurationDeserializationError",
    "EnvironmentVariableError",
    "Export",
    "IgnitionError",
    "Import",
    "ResolvedEnvironment",
    "__version__",
    "load_schema",
    "resolve",
]

# 🌶️📦🔚
