import socket
import subprocess
import types

import pytest

from clarify_launcher.errors import InterfaceQueryError
from clarify_launcher.execution.runner import CommandRunner
from clarify_launcher.host.system import SystemHost, parse_ip_addr_output

IP_OUTPUT = (
    "2: eth0    inet 10.0.0.5/24 brd 10.0.0.255 scope global eth0\\       valid_lft forever preferred_lft forever\n"
    "2: eth0    inet 10.0.0.9/32 scope global eth0\\       valid_lft forever preferred_lft forever\n"
    "2: eth0    inet6 fe80::1/64 scope link \\       valid_lft forever preferred_lft forever\n"
)


def test_parse_ip_addr_output():
    assert parse_ip_addr_output(IP_OUTPUT) == ["10.0.0.5/24", "10.0.0.9/32", "fe80::1/64"]
    assert parse_ip_addr_output("") == []


def test_interface_addresses_runs_ip_without_shell(monkeypatch):
    calls = []

    def fake_run(argv, **kw):
        calls.append((argv, kw))
        return types.SimpleNamespace(returncode=0, stdout=IP_OUTPUT, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    cidrs = SystemHost().interface_addresses("eth0")

    assert cidrs[0] == "10.0.0.5/24"
    argv, kw = calls[0]
    assert argv == ["ip", "-o", "addr", "show", "dev", "eth0"]
    assert "shell" not in kw


def test_missing_interface_yields_no_addresses(monkeypatch):
    def fake_run(argv, **kw):
        return types.SimpleNamespace(returncode=1, stdout="", stderr='Device "eth9" does not exist.\n')

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert SystemHost().interface_addresses("eth9") == []


def test_interface_query_ignores_dry_run(monkeypatch):
    monkeypatch.setattr(
        subprocess, "run",
        lambda argv, **kw: types.SimpleNamespace(returncode=0, stdout=IP_OUTPUT, stderr=""),
    )
    host = SystemHost()
    assert host.runner.dry_run is False
    assert host.interface_addresses("eth0")


def test_lookup_dedups_getaddrinfo_results(monkeypatch):
    infos = [
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.6", 0)),
        (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("10.0.0.6", 0)),
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("fd00::6", 0, 0, 0)),
    ]
    monkeypatch.setattr(socket, "getaddrinfo", lambda host, port: infos)
    assert SystemHost().lookup("node-2") == ["10.0.0.6", "fd00::6"]


def test_hostname_is_read_every_call(monkeypatch):
    names = iter(["first", "second"])
    monkeypatch.setattr(socket, "gethostname", lambda: next(names))
    host = SystemHost()
    assert host.hostname() == "first"
    assert host.hostname() == "second"


def test_runner_dry_run_skips_subprocess(monkeypatch):
    def boom(*a, **k):
        raise AssertionError("subprocess.run must not be called")

    monkeypatch.setattr(subprocess, "run", boom)
    cp = CommandRunner(dry_run=True).run(["java", "-jar", "x.jar"])
    assert cp.returncode == 0
    assert cp.args == ["java", "-jar", "x.jar"]


def test_missing_ip_binary_is_interface_query_error(monkeypatch):
    def no_ip(argv, **kw):
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    monkeypatch.setattr(subprocess, "run", no_ip)
    with pytest.raises(InterfaceQueryError, match="eth0") as exc:
        SystemHost().interface_addresses("eth0")
    assert "No such file or directory" in str(exc.value)


def test_runner_never_raises_on_exit_code(monkeypatch):
    seen = {}

    def fake_run(argv, **kw):
        seen.update(kw)
        return types.SimpleNamespace(returncode=2, stdout="", stderr="bad\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    cp = CommandRunner().run(["ip", "-o", "addr", "show", "dev", "eth0"])
    assert cp.returncode == 2
    assert seen["check"] is False
