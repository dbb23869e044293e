#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the asset environment schema."""

from __future__ import annotations

import json

import pytest

from ignition.exceptions import BadKeyError, ConfigurationDeserializationError
from ignition.schema import (
    AssetEnvironmentSchema,
    load_schema,
    lookup_asset,
    lookup_variable,
    read_embedded_config,
)


@pytest.mark.unit
class TestLoadSchema:
    """Test parsing of the environment configuration."""

    def test_parses_contents_and_environment(self, opencv_config: str) -> None:
        schemas = load_schema(opencv_config)

        assert list(schemas) == ["opencv"]
        assert schemas["opencv"].contents == ("lib/libopencv.so",)
        assert schemas["opencv"].environment == {"lib/libopencv.so": "OPENCV_LIB"}

    def test_contents_keep_declared_order(self, multi_config: str) -> None:
        schema = load_schema(multi_config)["sample"]
        assert schema.contents == ("include", "lib/libsample.so", "share/sample.cmake")

    def test_missing_fields_default_to_empty(self, multi_config: str) -> None:
        schema = load_schema(multi_config)["empty"]
        assert schema.contents == ()
        assert schema.environment == {}

    def test_packaged_config_parses(self) -> None:
        schemas = load_schema()
        assert {"opencv", "onnxruntime"} <= set(schemas)
        for schema in schemas.values():
            for content in schema.contents:
                assert content in schema.environment

    def test_packaged_config_matches_embedded_text(self) -> None:
        assert load_schema() == load_schema(read_embedded_config())

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ConfigurationDeserializationError, match="failed to deserialize"):
            load_schema("{not json")

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"opencv": []},
            {"opencv": {"contents": "lib/libopencv.so"}},
            {"opencv": {"contents": [1, 2]}},
            {"opencv": {"environment": ["OPENCV_LIB"]}},
            {"opencv": {"environment": {"lib": 3}}},
        ],
    )
    def test_wrong_shape_raises(self, document: object) -> None:
        with pytest.raises(ConfigurationDeserializationError):
            load_schema(json.dumps(document))


@pytest.mark.unit
class TestLookups:
    """Test asset and variable lookups."""

    def test_lookup_asset(self, opencv_config: str) -> None:
        schemas = load_schema(opencv_config)
        assert lookup_asset(schemas, "opencv") is schemas["opencv"]

    def test_lookup_unknown_asset(self, opencv_config: str) -> None:
        with pytest.raises(BadKeyError) as exc_info:
            lookup_asset(load_schema(opencv_config), "tensorrt")

        assert exc_info.value.key == "tensorrt"
        assert "invalid hash key: tensorrt" in str(exc_info.value)

    def test_lookup_variable(self) -> None:
        schema = AssetEnvironmentSchema(contents=["a"], environment={"a": "A_VAR"})
        assert lookup_variable(schema, "a") == "A_VAR"

    def test_lookup_unmapped_content(self, multi_config: str) -> None:
        schema = load_schema(multi_config)["drifted"]

        with pytest.raises(BadKeyError) as exc_info:
            lookup_variable(schema, "lib/unmapped.so")

        assert exc_info.value.key == "lib/unmapped.so"

    def test_schema_is_frozen(self) -> None:
        schema = AssetEnvironmentSchema(contents=["a"], environment={"a": "A_VAR"})
        with pytest.raises(AttributeError):
            schema.contents = ("b",)  # type: ignore[misc]


# 🌶️📦🔚
