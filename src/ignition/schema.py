#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asset environment schema.

The schema ships inside the package as ``ignition/config/environment.json``
so it is available to dependent build scripts that never see the source tree.
It is formatted as:

```json
{
    "asset": {
        "contents": ["path/to/content1", "path/to/content2"],
        "environment": {
            "path/to/content1": "ENV_VAR1",
            "path/to/content2": "ENV_VAR2"
        }
    }
}
```
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
import json
from typing import Any

from attrs import define, field

from ignition.config.defaults import ENVIRONMENT_CONFIG_FILE, ENVIRONMENT_CONFIG_PACKAGE
from ignition.exceptions import BadKeyError, ConfigurationDeserializationError


@define(frozen=True)
class AssetEnvironmentSchema:
    """Environment configuration for a particular asset."""

    # Contents expected on extraction of the asset archive, in export order
    contents: tuple[str, ...] = field(default=(), converter=tuple)
    # Content identifier -> environment variable name
    environment: Mapping[str, str] = field(factory=dict)

    @classmethod
    def from_dict(cls, name: str, data: Any) -> AssetEnvironmentSchema:
        """Build a schema from one decoded JSON entry, validating its shape."""
        if not isinstance(data, dict):
            raise ConfigurationDeserializationError(f"asset '{name}' must be an object")

        contents = data.get("contents", [])
        if not isinstance(contents, list) or not all(isinstance(c, str) for c in contents):
            raise ConfigurationDeserializationError(f"asset '{name}': 'contents' must be a list of strings")

        environment = data.get("environment", {})
        if not isinstance(environment, dict) or not all(
            isinstance(v, str) for v in environment.values()
        ):
            raise ConfigurationDeserializationError(
                f"asset '{name}': 'environment' must map strings to strings"
            )

        return cls(contents=contents, environment=dict(environment))


def read_embedded_config() -> str:
    """Read the packaged environment configuration as text."""
    return resources.files(ENVIRONMENT_CONFIG_PACKAGE).joinpath(ENVIRONMENT_CONFIG_FILE).read_text("utf-8")


def load_schema(text: str | None = None) -> dict[str, AssetEnvironmentSchema]:
    """Parse the asset environment configuration.

    Args:
        text: Configuration document to parse instead of the packaged one

    Returns:
        Mapping of asset name to its schema

    Raises:
        ConfigurationDeserializationError: If the document is not valid JSON
            or does not have the expected shape
    """
    if text is None:
        text = read_embedded_config()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationDeserializationError(str(e)) from e

    if not isinstance(data, dict):
        raise ConfigurationDeserializationError("top level must be an object keyed by asset name")

    return {name: AssetEnvironmentSchema.from_dict(name, entry) for name, entry in data.items()}


def lookup_asset(schemas: Mapping[str, AssetEnvironmentSchema], name: str) -> AssetEnvironmentSchema:
    """Get the schema for an asset, failing with BadKeyError if it is not configured."""
    try:
        return schemas[name]
    except KeyError:
        raise BadKeyError(name) from None


def lookup_variable(schema: AssetEnvironmentSchema, content_id: str) -> str:
    """Get the variable name for a content identifier.

    Guards against drift between ``contents`` and ``environment``.
    """
    try:
        return schema.environment[content_id]
    except KeyError:
        raise BadKeyError(content_id) from None


# 🌶️📦🔚
