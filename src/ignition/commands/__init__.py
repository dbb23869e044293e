#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the ignition CLI."""

from __future__ import annotations

from ignition.commands.assets import assets_command, relay_command
from ignition.commands.build import build_command
from ignition.commands.environment import export_command, import_command

__all__ = [
    "assets_command",
    "build_command",
    "export_command",
    "import_command",
    "relay_command",
]

# 🌶️📦🔚
