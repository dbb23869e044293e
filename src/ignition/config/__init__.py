#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ignition configuration built on the Provide Foundation config stack.

The packaged ``environment.json`` next to this module holds the asset schema.
"""

from __future__ import annotations

from ignition.config.build import BuildConfig, parse_asset_names
from ignition.config.runtime import IgnitionRuntimeConfig

__all__ = [
    "BuildConfig",
    "IgnitionRuntimeConfig",
    "parse_asset_names",
]

# 🌶️📦🔚
