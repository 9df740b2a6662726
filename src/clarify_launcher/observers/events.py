# src/clarify_launcher/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone
import uuid

@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events of one launcher run
    config: Optional[str]  # topology file the run was planned from

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(config: Optional[str], run_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "run_id": run_id or str(uuid.uuid4()),
        "config": config,
    }


# ----- Identity -----

@dataclass(frozen=True)
class LocalNodeResolved(BaseEvent):
    hostname: str
    net_interface: str
    tools: str

@dataclass(frozen=True)
class AddressResolved(BaseEvent):
    hostname: str
    address: str
    source: str       # "configured" | "dns"

@dataclass(frozen=True)
class InterfaceVerified(BaseEvent):
    interface: str
    address: str


# ----- Invocation -----

@dataclass(frozen=True)
class PeersComputed(BaseEvent):
    peers: List[str]
    policy: str

@dataclass(frozen=True)
class InstallerJarLocated(BaseEvent):
    path: str

@dataclass(frozen=True)
class InvocationBuilt(BaseEvent):
    executable: str
    tokens: List[str]


# ----- Launch & failure -----

@dataclass(frozen=True)
class InstallerExited(BaseEvent):
    returncode: int
    duration_ms: int
    dry_run: bool = False

@dataclass(frozen=True)
class RunFailed(BaseEvent):
    stage: str
    error: str
