# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from typing import List, Protocol


class HostnameSource(Protocol):
    def hostname(self) -> str: ...


class NameResolver(Protocol):
    def lookup(self, hostname: str) -> List[str]:
        """Return address literals for hostname; raise OSError when DNS fails."""
        ...


class InterfaceInspector(Protocol):
    def interface_addresses(self, name: str) -> List[str]:
        """Return the CIDR strings assigned to name, or [] when it does not exist."""
        ...


class HostEnvironment(HostnameSource, NameResolver, InterfaceInspector, Protocol):
    pass
