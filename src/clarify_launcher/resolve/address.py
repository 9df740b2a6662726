# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/resolve/address.py
from __future__ import annotations

import logging
from typing import List

from ..config.models import NodeDescriptor
from ..errors import LookupFailedError, NoUsableAddressError
from ..host.ports import NameResolver
from .ipv4 import parse_ipv4

log = logging.getLogger("clarify_launcher")


class AddressResolver:
    """
    Turns a hostname into an IPv4 literal.

    An address written in the topology always wins: DNS is consulted only for
    nodes whose ``address`` is empty.
    """

    def __init__(self, resolver: NameResolver):
        self.resolver = resolver

    def resolve_address(self, hostname: str) -> str:
        try:
            candidates: List[str] = list(self.resolver.lookup(hostname))
        except (OSError, UnicodeError) as e:
            # idna encoding rejects empty or over-long labels before any query is sent
            raise LookupFailedError(hostname, str(e)) from e

        for raw in candidates:
            addr = parse_ipv4(raw)
            if addr is None or addr.is_loopback:
                continue
            log.debug(f"{hostname} -> {addr}")
            return str(addr)

        raise NoUsableAddressError(hostname, candidates)

    def address_for(self, node: NodeDescriptor) -> str:
        if node.address:
            return node.address
        return self.resolve_address(node.hostname)
