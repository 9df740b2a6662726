# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ..config.models import Topology
from .address import AddressResolver


class PeerPolicy(str, Enum):
    """How a peer without a configured address is handed to the installer."""

    CONFIGURED = "configured"   # configured address, else the bare hostname
    RESOLVED = "resolved"       # configured address, else a DNS-resolved IPv4


def build_peers(
    topology: Topology,
    local_hostname: str,
    policy: PeerPolicy = PeerPolicy.CONFIGURED,
    address_resolver: Optional[AddressResolver] = None,
) -> List[str]:
    """
    Every node except the local one, in topology order.

    Only the first node matching local_hostname is the local node; a later
    duplicate is still listed as a peer. Nothing is sorted or deduplicated.
    """
    if policy is PeerPolicy.RESOLVED and address_resolver is None:
        raise ValueError("PeerPolicy.RESOLVED needs an AddressResolver")

    peers: List[str] = []
    local_seen = False
    for node in topology.nodes:
        if not local_seen and node.hostname == local_hostname:
            local_seen = True
            continue
        if policy is PeerPolicy.RESOLVED:
            peers.append(address_resolver.address_for(node))
        else:
            peers.append(node.address or node.hostname)
    return peers
