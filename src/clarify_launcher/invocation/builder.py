# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/invocation/builder.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..config.models import ClarifySettings, NodeDescriptor


class HostsEncoding(str, Enum):
    """How peers follow the ``-hosts`` flag."""

    PER_PEER = "per-peer"   # -hosts 10.0.0.6 10.0.0.7
    JOINED = "joined"       # -hosts "10.0.0.6 10.0.0.7"


def java_executable(install: str | Path) -> str:
    return str(Path(install) / "jre" / "bin" / "java")


@dataclass(frozen=True)
class InvocationSpec:
    """The installer command: executable plus its ordered argv tokens."""

    executable: str
    tokens: Tuple[str, ...]
    cwd: Optional[str] = None

    def argv(self) -> List[str]:
        return [self.executable, *self.tokens]

    def command_line(self) -> str:
        # display only; the launcher never goes through a shell
        return " ".join(self.argv())


@dataclass
class InvocationBuilder:
    """
    Accumulates the installer's inputs and renders them in one fixed order:

      -jar <jar> -user <user> -install <tools> -clarify <install> -share <share>
      -net <iface> [-address <addr>] [-nomad.port <port>] [-hosts <peers>]

    ``-address`` is left out when no address is known, ``-nomad.port`` when
    no port is configured and ``-hosts`` when there are no peers. Nothing is
    quoted; every value is a literal argv entry.
    """

    hosts_encoding: HostsEncoding = HostsEncoding.PER_PEER
    jar: Optional[str] = None
    user: Optional[str] = None
    tools: Optional[str] = None
    install: Optional[str] = None
    share: Optional[str] = None
    interface: Optional[str] = None
    address: str = ""
    nomad_port: Optional[int] = None
    peers: List[str] = field(default_factory=list)
    executable: Optional[str] = None

    @classmethod
    def from_topology(
        cls,
        local_node: NodeDescriptor,
        settings: ClarifySettings,
        peers: Sequence[str],
        jar_path: str | Path,
        *,
        address: Optional[str] = None,
        hosts_encoding: HostsEncoding = HostsEncoding.PER_PEER,
    ) -> "InvocationBuilder":
        return cls(
            hosts_encoding=hosts_encoding,
            jar=str(jar_path),
            user=settings.user,
            tools=local_node.tools,
            install=settings.install,
            share=settings.share,
            interface=local_node.net_interface,
            address=local_node.address if address is None else address,
            nomad_port=settings.nomad_port,
            peers=list(peers),
        )

    def _missing(self) -> List[str]:
        required = ("jar", "user", "tools", "install", "share", "interface")
        return [name for name in required if not getattr(self, name)]

    def tokens(self) -> Tuple[str, ...]:
        missing = self._missing()
        if missing:
            raise ValueError(f"cannot build installer invocation, missing: {', '.join(missing)}")

        argv: List[str] = [
            "-jar", self.jar,
            "-user", self.user,
            "-install", self.tools,
            "-clarify", self.install,
            "-share", self.share,
            "-net", self.interface,
        ]
        if self.address:
            argv += ["-address", self.address]
        if self.nomad_port:
            argv += ["-nomad.port", str(self.nomad_port)]
        if self.peers:
            if self.hosts_encoding is HostsEncoding.JOINED:
                argv += ["-hosts", " ".join(self.peers)]
            else:
                argv += ["-hosts", *self.peers]
        return tuple(argv)

    def build(self) -> InvocationSpec:
        tokens = self.tokens()
        return InvocationSpec(
            executable=self.executable or java_executable(self.install),
            tokens=tokens,
            cwd=self.install,
        )


def build_invocation(
    local_node: NodeDescriptor,
    settings: ClarifySettings,
    peers: Sequence[str],
    jar_path: str | Path,
    *,
    address: Optional[str] = None,
    hosts_encoding: HostsEncoding = HostsEncoding.PER_PEER,
) -> InvocationSpec:
    return InvocationBuilder.from_topology(
        local_node,
        settings,
        peers,
        jar_path,
        address=address,
        hosts_encoding=hosts_encoding,
    ).build()
