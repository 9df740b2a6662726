# src/clarify_launcher/cli/app.py
from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Tuple

import typer

from clarify_launcher.config.loader import DEFAULT_CONFIG, load_topology
from clarify_launcher.config.models import Topology
from clarify_launcher.core.pipeline import InvocationPlan, PlanOptions, plan_invocation
from clarify_launcher.errors import LauncherError
from clarify_launcher.execution.runner import CommandRunner
from clarify_launcher.host.system import SystemHost
from clarify_launcher.invocation.builder import HostsEncoding
from clarify_launcher.invocation.launcher import InstallerLauncher
from clarify_launcher.logging.log import default_log_dir, init_logging
from clarify_launcher.observers.dispatcher import EventBus
from clarify_launcher.observers.events import InstallerExited, RunFailed, new_ctx
from clarify_launcher.observers.jsonfile import JsonFileObserver
from clarify_launcher.observers.logger import LoggerObserver
from clarify_launcher.resolve.identity import resolve_local_node
from clarify_launcher.resolve.peers import PeerPolicy


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(help="Clarify node installer launcher", no_args_is_help=True)


def _fail(err: Exception) -> typer.Exit:
    typer.secho(str(err), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load(cfg: Path) -> Topology:
    try:
        return load_topology(cfg)
    except LauncherError as e:
        raise _fail(e)


def _plan(
    *,
    cfg: Path,
    peers: PeerPolicy,
    hosts_encoding: HostsEncoding,
    skip_interface_check: bool,
    debug: bool,
    log_dir: Optional[Path],
) -> Tuple[InvocationPlan, EventBus, dict]:
    logger, run_id, log_path = init_logging(base_dir=log_dir, verbose=debug)
    typer.echo(f"  Run ID   : {run_id}")
    typer.echo(f"  Logs     : {log_path}")

    bus = EventBus(observers=[
        LoggerObserver(logger),
        JsonFileObserver(log_path.parent / f"{run_id}.jsonl"),
    ])
    ctx = new_ctx(config=str(cfg), run_id=run_id)

    topology = _load(cfg)
    options = PlanOptions(
        peer_policy=peers,
        hosts_encoding=hosts_encoding,
        verify_interface=not skip_interface_check,
    )
    try:
        plan = plan_invocation(topology, SystemHost(), options=options, bus=bus, run_ctx=ctx)
    except LauncherError as e:
        raise _fail(e)
    return plan, bus, ctx


# ------------------------------------------------------------------------------
# Shared options
# ------------------------------------------------------------------------------

CfgOption = typer.Option(
    Path(DEFAULT_CONFIG),
    "--cfg",
    envvar="CLARIFY_NODES_FILE",
    help="Nodes configuration to read",
)
PeersOption = typer.Option(
    PeerPolicy.CONFIGURED,
    "--peers",
    envvar="CLARIFY_PEER_POLICY",
    help="configured: address or bare hostname; resolved: address or DNS lookup",
)
HostsEncodingOption = typer.Option(
    HostsEncoding.PER_PEER,
    "--hosts-encoding",
    envvar="CLARIFY_HOSTS_ENCODING",
    help="per-peer: one argument per peer after -hosts; joined: one space-joined argument",
)
SkipCheckOption = typer.Option(
    False,
    "--skip-interface-check",
    help="Do not verify that the configured interface carries the node address",
)
DebugOption = typer.Option(False, "--debug")
LogDirOption = typer.Option(None, "--log-dir", envvar="CLARIFY_LOG_DIR", help=f"Defaults to {default_log_dir()}")


# ------------------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------------------

@app.command()
def launch(
    cfg: Path = CfgOption,
    peers: PeerPolicy = PeersOption,
    hosts_encoding: HostsEncoding = HostsEncodingOption,
    skip_interface_check: bool = SkipCheckOption,
    dry_run: bool = typer.Option(False, "--dry-run", help="Build the command but do not run it"),
    debug: bool = DebugOption,
    log_dir: Optional[Path] = LogDirOption,
):
    """Resolve this node, then run the service installer. Exits with the installer's exit code."""
    plan, bus, ctx = _plan(
        cfg=cfg,
        peers=peers,
        hosts_encoding=hosts_encoding,
        skip_interface_check=skip_interface_check,
        debug=debug,
        log_dir=log_dir,
    )

    launcher = InstallerLauncher(CommandRunner(label="installer", dry_run=dry_run))
    start = time.time()
    try:
        cp = launcher.launch(plan.invocation)
    except LauncherError as e:
        bus.emit(RunFailed(stage="launch", error=str(e), **ctx))
        raise _fail(e)

    bus.emit(InstallerExited(
        returncode=cp.returncode,
        duration_ms=int((time.time() - start) * 1000),
        dry_run=dry_run,
        **ctx,
    ))
    raise typer.Exit(code=cp.returncode)


@app.command()
def plan(
    cfg: Path = CfgOption,
    peers: PeerPolicy = PeersOption,
    hosts_encoding: HostsEncoding = HostsEncodingOption,
    skip_interface_check: bool = SkipCheckOption,
    debug: bool = DebugOption,
    log_dir: Optional[Path] = LogDirOption,
):
    """Print the installer command without running it, one argument per line."""
    result, _bus, _ctx = _plan(
        cfg=cfg,
        peers=peers,
        hosts_encoding=hosts_encoding,
        skip_interface_check=skip_interface_check,
        debug=debug,
        log_dir=log_dir,
    )
    typer.echo(result.invocation.executable)
    for token in result.invocation.tokens:
        typer.echo(f"  {token}")


@app.command()
def whoami(cfg: Path = CfgOption):
    """Show which topology entry describes this machine."""
    topology = _load(cfg)
    try:
        node = resolve_local_node(topology, SystemHost())
    except LauncherError as e:
        raise _fail(e)
    typer.echo(f"hostname : {node.hostname}")
    typer.echo(f"net      : {node.net_interface}")
    typer.echo(f"address  : {node.address or '(from DNS)'}")
    typer.echo(f"tools    : {node.tools}")


if __name__ == "__main__":
    app()
