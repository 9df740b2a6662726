# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/host/system.py
from __future__ import annotations

import logging
import socket
from typing import List, Optional

from ..errors import InterfaceQueryError
from ..execution.runner import CommandRunner

log = logging.getLogger("clarify_launcher")


def parse_ip_addr_output(out: str) -> List[str]:
    """
    Pull the CIDR column out of `ip -o addr show` output, e.g.

      2: eth0    inet 10.0.0.5/24 brd 10.0.0.255 scope global eth0\\  valid_lft forever ...
      2: eth0    inet6 fe80::1/64 scope link \\       valid_lft forever ...
    """
    cidrs: List[str] = []
    for line in out.splitlines():
        parts = line.split()
        for i, tok in enumerate(parts[:-1]):
            if tok in ("inet", "inet6"):
                cidrs.append(parts[i + 1])
                break
    return cidrs


class SystemHost:
    """
    The running machine, as seen through the OS:
      - hostname        socket.gethostname(), read on every call
      - DNS             socket.getaddrinfo()
      - interfaces      `ip -o addr show dev <name>`
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        # interface queries are read-only, so they run even during a dry run
        self.runner = runner or CommandRunner(label="ip")

    def hostname(self) -> str:
        return socket.gethostname()

    def lookup(self, hostname: str) -> List[str]:
        infos = socket.getaddrinfo(hostname, None)
        addrs: List[str] = []
        for _family, _type, _proto, _canon, sockaddr in infos:
            addr = sockaddr[0]
            if addr not in addrs:
                addrs.append(addr)
        log.debug(f"{hostname} resolves to {addrs}")
        return addrs

    def interface_addresses(self, name: str) -> List[str]:
        try:
            cp = self.runner.run(["ip", "-o", "addr", "show", "dev", name])
        except OSError as e:
            raise InterfaceQueryError(name, f"cannot run ip: {e.strerror or e}") from e
        if cp.returncode != 0:
            log.debug(f"ip addr show dev {name} failed (rc={cp.returncode}): {(cp.stderr or '').strip()}")
            return []
        return parse_ip_addr_output(cp.stdout or "")
