#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Target platform description and asset availability."""

from __future__ import annotations

from attrs import define
from provide.foundation.platform import get_arch_name, get_os_name

from ignition.config.defaults import ARCH_ALIASES, OS_ALIASES, UNSUPPORTED_ASSET_PLATFORMS
from ignition.exceptions import PlatformError


@define(frozen=True)
class TargetPlatform:
    """A target triple split into its components."""

    architecture: str
    vendor: str
    os: str
    environment: str = ""

    @classmethod
    def parse(cls, triple: str) -> TargetPlatform:
        """Parse ``<arch>-<vendor>-<os>[-<environment>]``.

        Raises:
            PlatformError: If fewer than three components are present
        """
        parts = triple.strip().split("-")
        if len(parts) < 3 or not all(parts[:3]):
            raise PlatformError(f"Invalid target triplet: {triple}")
        environment = "-".join(parts[3:])
        return cls(architecture=parts[0], vendor=parts[1], os=parts[2], environment=environment)

    @classmethod
    def host(cls) -> TargetPlatform:
        """Describe the platform this process runs on."""
        os_name = get_os_name()
        arch = ARCH_ALIASES.get(get_arch_name(), get_arch_name())

        if os_name == "darwin":
            return cls(architecture=arch, vendor="apple", os="darwin")
        if os_name == "windows":
            return cls(architecture=arch, vendor="pc", os="windows", environment="msvc")
        return cls(architecture=arch, vendor="unknown", os=os_name, environment="gnu")

    @classmethod
    def from_target(cls, target: str) -> TargetPlatform:
        """Parse ``target``, falling back to the host when it is empty."""
        return cls.parse(target) if target else cls.host()

    @property
    def arch_family(self) -> str:
        return ARCH_ALIASES.get(self.architecture, self.architecture)

    @property
    def os_family(self) -> str:
        return OS_ALIASES.get(self.os, self.os)

    @property
    def triple(self) -> str:
        parts = [self.architecture, self.vendor, self.os]
        if self.environment:
            parts.append(self.environment)
        return "-".join(parts)

    def supports_prebuilt_assets(self) -> bool:
        """Whether asset archives are published for this platform."""
        return (self.arch_family, self.os_family) not in UNSUPPORTED_ASSET_PLATFORMS

    def __str__(self) -> str:
        return self.triple


# 🌶️📦🔚
