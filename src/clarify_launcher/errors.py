# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/errors.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


class LauncherError(RuntimeError):
    """Base class for failures that abort a launch."""


class ConfigError(LauncherError):
    """Raised when the topology file cannot be read or validated."""


class NodeNotFoundError(LauncherError):
    def __init__(self, hostname: str, configured: Iterable[str]):
        self.hostname = hostname
        self.configured: List[str] = list(configured)
        super().__init__(
            f"node not found: no entry in clarify-nodes matches hostname '{hostname}' "
            f"(configured: {', '.join(self.configured) or 'none'})"
        )


class AddressResolutionError(LauncherError):
    """Base class for DNS resolution problems."""


class LookupFailedError(AddressResolutionError):
    def __init__(self, hostname: str, reason: str):
        self.hostname = hostname
        self.reason = reason
        super().__init__(f"DNS lookup for '{hostname}' failed: {reason}")


class NoUsableAddressError(AddressResolutionError):
    def __init__(self, hostname: str, candidates: Iterable[str]):
        self.hostname = hostname
        self.candidates: List[str] = list(candidates)
        super().__init__(
            f"no usable IPv4 address for '{hostname}': lookup returned "
            f"{', '.join(self.candidates) or 'nothing'} (loopback and non-IPv4 results are ignored)"
        )


class InvalidAddressError(LauncherError):
    def __init__(self, value: str, where: str):
        self.value = value
        super().__init__(f"'{value}' is not a valid IPv4 address ({where})")


class BindingMismatchError(LauncherError):
    def __init__(self, interface: str, expected: str, found: Iterable[str]):
        self.interface = interface
        self.expected = expected
        self.found: List[str] = list(found)
        super().__init__(
            f"interface '{interface}' does not carry address {expected} "
            f"(found: {', '.join(self.found) or 'no IPv4 addresses'})"
        )


class InterfaceQueryError(LauncherError):
    def __init__(self, interface: str, reason: str):
        self.interface = interface
        self.reason = reason
        super().__init__(f"unable to list addresses of interface '{interface}': {reason}")


class InstallerNotFoundError(LauncherError):
    """Base class for failures locating the installer artifacts."""


class InvalidInstallDirError(InstallerNotFoundError):
    def __init__(self, install: Path):
        self.install = install
        super().__init__(f"invalid install dir: {install} does not exist")


class JarNotFoundError(InstallerNotFoundError):
    def __init__(self, search_root: Path, pattern: str):
        self.search_root = search_root
        self.pattern = pattern
        super().__init__(f"unable to locate service installer jar ({pattern}) under {search_root}")
