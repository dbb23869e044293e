#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asset environment resolution.

Shared between the producer build phase that retrieved an asset and the
dependent build phases that consume it.

- ``Export(base_directory)``: for each configured content found under the
  directory, emit a metadata directive ``<VARIABLE>=<absolute path>``.
  Missing contents are skipped; the producer cannot know which files a
  dependent actually needs.
- ``Import()``: for each configured content, read ``IGNITION_SYS_<VARIABLE>``
  and set ``<VARIABLE>`` in this process. A missing variable aborts the
  import, since the dependent explicitly asked for the asset.

Import mutates ``os.environ`` for the whole process. Call it before starting
any thread that reads the environment; it is not safe to run concurrently
with such readers. Variables set before a failure are left in place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import os
from pathlib import Path

from attrs import define, field
from provide.foundation import logger
from provide.foundation.console import pout

from ignition.exceptions import EnvironmentVariableError
from ignition.metadata import format_metadata_directive, inbound_variable
from ignition.schema import AssetEnvironmentSchema, load_schema, lookup_asset, lookup_variable


@define(frozen=True)
class Export:
    """Producer mode: publish contents found under ``base_directory``."""

    base_directory: Path = field(converter=Path)


@define(frozen=True)
class Import:
    """Dependent mode: pick up variables published by the producer.

    ``source`` is the handoff mapping to read inbound variables from;
    the process environment is used when it is None.
    """

    source: Mapping[str, str] | None = None


Mode = Export | Import


class ResolvedEnvironment(dict[str, str]):
    """Variable name -> value pairs produced by a single resolve call.

    ``skipped`` lists content identifiers an export did not find on disk.
    """

    def __init__(self, values: Iterable[tuple[str, str]] = (), skipped: Iterable[str] = ()) -> None:
        super().__init__(values)
        self.skipped: tuple[str, ...] = tuple(skipped)


def resolve(
    asset: str,
    mode: Mode,
    *,
    emit: Callable[[str], None] | None = None,
    config_text: str | None = None,
) -> ResolvedEnvironment:
    """Determine environment variables for a particular asset.

    Args:
        asset: Asset name in the environment configuration
        mode: ``Export(base_directory)`` or ``Import()``
        emit: Receives directive lines in export mode (default: stdout)
        config_text: Configuration document overriding the packaged one

    Returns:
        ResolvedEnvironment, e.g. ``{"ENV_VAR1": "/abs/path/to/content1"}``

    Raises:
        BadKeyError: Unknown asset, or a content without a variable mapping
        EnvironmentVariableError: Inbound variable missing in import mode
        ConfigurationDeserializationError: Configuration failed to parse
    """
    schema = lookup_asset(load_schema(config_text), asset)

    if isinstance(mode, Export):
        return _export(asset, schema, mode.base_directory, emit or pout)
    return _import(asset, schema, mode.source)


def _export(
    asset: str,
    schema: AssetEnvironmentSchema,
    base_directory: Path,
    emit: Callable[[str], None],
) -> ResolvedEnvironment:
    values: list[tuple[str, str]] = []
    skipped: list[str] = []

    for content in schema.contents:
        env_var = lookup_variable(schema, content)
        content_path = base_directory / content
        if not _content_present(content_path):
            logger.debug(f"⏭️ Skipping missing content for {asset}", content=content, path=str(content_path))
            skipped.append(content)
            continue

        content_path_str = str(content_path.absolute())
        emit(format_metadata_directive(env_var, content_path_str))
        values.append((env_var, content_path_str))
        logger.debug(f"📤 Exported {env_var}", asset=asset, path=content_path_str)

    logger.info(f"📦 Exported {asset} environment", exported=len(values), skipped=len(skipped))
    return ResolvedEnvironment(values, skipped)


def _content_present(path: Path) -> bool:
    """Existence check that reports unreadable paths as missing."""
    try:
        return path.exists()
    except OSError as e:
        logger.warning(f"⚠️ Cannot inspect {path}, treating as missing", error=str(e))
        return False


def _import(
    asset: str,
    schema: AssetEnvironmentSchema,
    source: Mapping[str, str] | None,
) -> ResolvedEnvironment:
    if source is None:
        source = os.environ

    values: list[tuple[str, str]] = []
    for content in schema.contents:
        env_var = lookup_variable(schema, content)
        inbound = inbound_variable(env_var)
        value = source.get(inbound)
        if value is None:
            logger.error(f"❌ Missing inbound variable for {asset}", variable=inbound, imported=len(values))
            raise EnvironmentVariableError(inbound)

        os.environ[env_var] = value
        values.append((env_var, value))
        logger.debug(f"📥 Imported {env_var}", asset=asset, value=value)

    return ResolvedEnvironment(values)


# 🌶️📦🔚
