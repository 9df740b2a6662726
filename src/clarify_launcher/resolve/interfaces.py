# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/resolve/interfaces.py
from __future__ import annotations

import ipaddress
import logging
from typing import List

from ..errors import BindingMismatchError, InvalidAddressError
from ..host.ports import InterfaceInspector
from .ipv4 import parse_cidr, parse_ipv4

log = logging.getLogger("clarify_launcher")


class InterfaceValidator:
    """
    Proves that a named interface on this host actually carries an address.

    Addresses are compared as IPv4Address objects, so ``010.0.0.5`` in the
    topology matches ``10.0.0.5/24`` on the interface, and an IPv4-mapped
    ``::ffff:10.0.0.5`` matches both. A mismatch is a configuration error and
    is never retried.
    """

    def __init__(self, inspector: InterfaceInspector):
        self.inspector = inspector

    def validate(self, interface_name: str, expected_address: str) -> ipaddress.IPv4Address:
        expected = parse_ipv4(expected_address)
        if expected is None:
            raise InvalidAddressError(expected_address, f"expected address for interface '{interface_name}'")

        cidrs = self.inspector.interface_addresses(interface_name)
        log.debug(f"Interface {interface_name} addresses: {cidrs}")

        found: List[str] = []
        for cidr in cidrs:
            addr = parse_cidr(cidr)
            if addr is None:
                log.debug(f"Skipping non-IPv4 address {cidr} on {interface_name}")
                continue
            if addr == expected:
                log.info(f"Interface {interface_name} carries {expected}")
                return addr
            found.append(str(addr))

        raise BindingMismatchError(interface_name, str(expected), found)
