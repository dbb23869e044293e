#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build metadata directives.

A producer build phase prints ``cargo::metadata=KEY=VALUE`` lines on stdout.
The build tool relays each pair to directly dependent phases as the inbound
variable ``IGNITION_SYS_KEY``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ignition.config.defaults import (
    DIRECTIVE_PREFIX,
    LEGACY_DIRECTIVE_PREFIX,
    METADATA_INSTRUCTION,
    METADATA_KEY_PREFIX,
)


def format_instruction(name: str, value: str) -> str:
    """Format a build tool instruction line."""
    return f"{DIRECTIVE_PREFIX}{name}={value}"


def format_metadata_directive(key: str, value: str) -> str:
    """Format a metadata directive passing ``key=value`` to dependents."""
    return format_instruction(METADATA_INSTRUCTION, f"{key}={value}")


def parse_metadata_directive(line: str) -> tuple[str, str] | None:
    """Parse a metadata directive line.

    Returns:
        ``(key, value)`` for metadata directives, None for any other line
    """
    line = line.strip()
    for prefix in (DIRECTIVE_PREFIX, LEGACY_DIRECTIVE_PREFIX):
        if line.startswith(prefix):
            body = line[len(prefix) :]
            break
    else:
        return None

    instruction, sep, payload = body.partition("=")
    if not sep or instruction != METADATA_INSTRUCTION:
        return None

    key, sep, value = payload.partition("=")
    if not sep or not key:
        return None
    return key, value


def collect_metadata(lines: Iterable[str]) -> dict[str, str]:
    """Collect every metadata pair from build output; later directives win."""
    metadata: dict[str, str] = {}
    for line in lines:
        parsed = parse_metadata_directive(line)
        if parsed is not None:
            key, value = parsed
            metadata[key] = value
    return metadata


def inbound_variable(key: str) -> str:
    """Name under which a dependent phase receives a metadata key."""
    return METADATA_KEY_PREFIX + key


def inbound_environment(metadata: Mapping[str, str]) -> dict[str, str]:
    """Map metadata pairs to the inbound variables a dependent phase sees."""
    return {inbound_variable(key): value for key, value in metadata.items()}


# 🌶️📦🔚
