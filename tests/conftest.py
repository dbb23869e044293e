#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for Ignition tests."""

from __future__ import annotations

from collections.abc import Iterator
import json
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

_OPENCV_CONFIG = json.dumps(
    {
        "opencv": {
            "contents": ["lib/libopencv.so"],
            "environment": {"lib/libopencv.so": "OPENCV_LIB"},
        }
    }
)

_MULTI_CONFIG = json.dumps(
    {
        "sample": {
            "contents": ["include", "lib/libsample.so", "share/sample.cmake"],
            "environment": {
                "include": "SAMPLE_INCLUDE",
                "lib/libsample.so": "SAMPLE_LIB",
                "share/sample.cmake": "SAMPLE_CMAKE",
                "unused/path": "SAMPLE_UNUSED",
            },
        },
        "drifted": {
            "contents": ["lib/present.so", "lib/unmapped.so"],
            "environment": {"lib/present.so": "DRIFTED_LIB"},
        },
        "empty": {},
    }
)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def opencv_config() -> str:
    """Single-content opencv configuration."""
    return _OPENCV_CONFIG


@pytest.fixture
def multi_config() -> str:
    """Configuration with ordered contents, a mapping gap and an empty asset."""
    return _MULTI_CONFIG


@pytest.fixture
def emitted() -> list[str]:
    """Collects directive lines instead of printing them."""
    return []


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Extracted 'sample' asset with every configured content present."""
    root = tmp_path / "sample"
    (root / "include").mkdir(parents=True)
    (root / "lib").mkdir()
    (root / "lib" / "libsample.so").write_bytes(b"\x7fELF")
    (root / "share").mkdir()
    (root / "share" / "sample.cmake").write_text("set(SAMPLE_FOUND TRUE)\n")
    return root


# 🌶️📦🔚
