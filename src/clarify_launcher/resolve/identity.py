# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

from ..config.models import NodeDescriptor, Topology
from ..errors import NodeNotFoundError
from ..host.ports import HostnameSource

log = logging.getLogger("clarify_launcher")


def find_node(topology: Topology, hostname: str) -> NodeDescriptor:
    """First node whose hostname equals hostname exactly (no case folding, no DNS)."""
    for node in topology.nodes:
        if node.hostname == hostname:
            return node
    raise NodeNotFoundError(hostname, topology.hostnames())


def resolve_local_node(topology: Topology, host: HostnameSource) -> NodeDescriptor:
    """
    Identify the topology entry describing this machine.
    The hostname is asked of the host every call, never cached.
    """
    hostname = host.hostname()
    node = find_node(topology, hostname)
    log.info(f"Local node: {{hostname={node.hostname}, net={node.net_interface}, tools={node.tools}}}")
    return node
