#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for Ignition."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class IgnitionError(FoundationError):
    """Base exception for all ignition-related errors."""

    pass


class BadKeyError(IgnitionError):
    """Raised when an asset name or content identifier is missing from the configuration."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"invalid hash key: {key}")


class EnvironmentVariableError(IgnitionError):
    """Raised when an inbound environment variable is missing during import."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"environment variable error: {variable} not present")


class ConfigurationDeserializationError(IgnitionError):
    """Raised when the embedded asset configuration cannot be deserialized."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"failed to deserialize configuration string: {detail}")


class ConfigurationError(IgnitionError):
    """Raised when a required build setting is missing."""

    pass


class PlatformError(IgnitionError):
    """Raised for malformed target platform descriptions."""

    pass


class RetrievalError(IgnitionError):
    """Raised when the asset retrieval script fails to start or complete."""

    pass


# 🌶️📦🔚
