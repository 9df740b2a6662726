# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple

from ..config.models import NodeDescriptor, Topology
from ..host.ports import HostEnvironment
from ..invocation.builder import HostsEncoding, InvocationSpec, build_invocation
from ..invocation.jar import find_installer_jar
from ..resolve.address import AddressResolver
from ..resolve.identity import resolve_local_node
from ..resolve.interfaces import InterfaceValidator
from ..resolve.peers import PeerPolicy, build_peers

# Observer bits
from ..observers.dispatcher import EventBus
from ..observers.events import (
    AddressResolved,
    InstallerJarLocated,
    InterfaceVerified,
    InvocationBuilt,
    LocalNodeResolved,
    PeersComputed,
    RunFailed,
    new_ctx,
)

log = logging.getLogger("clarify_launcher")

JarLocator = Callable[[str], Path]


@dataclass(frozen=True)
class PlanOptions:
    peer_policy: PeerPolicy = PeerPolicy.CONFIGURED
    hosts_encoding: HostsEncoding = HostsEncoding.PER_PEER
    verify_interface: bool = True
    # resolve the local address via DNS when the topology leaves it empty
    require_address: bool = True


@dataclass(frozen=True)
class InvocationPlan:
    local_node: NodeDescriptor
    address: str
    peers: Tuple[str, ...]
    jar: Path
    invocation: InvocationSpec


def plan_invocation(
    topology: Topology,
    host: HostEnvironment,
    options: Optional[PlanOptions] = None,
    bus: Optional[EventBus] = None,
    run_ctx: Optional[dict] = None,
    jar_locator: JarLocator = find_installer_jar,
) -> InvocationPlan:
    """
    Resolve this machine's identity and build the installer invocation.

    Either a complete plan comes back or an exception is raised; a RunFailed
    event naming the failing stage is emitted first when a bus is given.
    """
    options = options or PlanOptions()
    ctx = run_ctx or new_ctx(config=None)
    bus = bus or EventBus()
    addresses = AddressResolver(host)
    stage = "identity"

    try:
        node = resolve_local_node(topology, host)
        bus.emit(LocalNodeResolved(
            hostname=node.hostname,
            net_interface=node.net_interface,
            tools=node.tools,
            **ctx,
        ))

        stage = "address"
        address = node.address
        if address:
            bus.emit(AddressResolved(hostname=node.hostname, address=address, source="configured", **ctx))
        elif options.require_address or options.verify_interface:
            address = addresses.resolve_address(node.hostname)
            bus.emit(AddressResolved(hostname=node.hostname, address=address, source="dns", **ctx))

        if options.verify_interface:
            stage = "interface"
            InterfaceValidator(host).validate(node.net_interface, address)
            bus.emit(InterfaceVerified(interface=node.net_interface, address=address, **ctx))
        else:
            log.warning(f"Skipping interface check for {node.net_interface}")

        stage = "peers"
        peers = build_peers(
            topology,
            node.hostname,
            policy=options.peer_policy,
            address_resolver=addresses,
        )
        bus.emit(PeersComputed(peers=list(peers), policy=options.peer_policy.value, **ctx))

        stage = "jar"
        jar = jar_locator(topology.clarify.install)
        bus.emit(InstallerJarLocated(path=str(jar), **ctx))

        stage = "invocation"
        invocation = build_invocation(
            node,
            topology.clarify,
            peers,
            jar,
            address=address,
            hosts_encoding=options.hosts_encoding,
        )
        bus.emit(InvocationBuilt(
            executable=invocation.executable,
            tokens=list(invocation.tokens),
            **ctx,
        ))

    except Exception as e:
        bus.emit(RunFailed(stage=stage, error=str(e), **ctx))
        raise

    return InvocationPlan(
        local_node=node,
        address=address,
        peers=tuple(peers),
        jar=Path(jar),
        invocation=invocation,
    )
