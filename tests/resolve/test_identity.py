import pytest

from clarify_launcher.config.models import ClarifySettings, NodeDescriptor, Topology
from clarify_launcher.errors import NodeNotFoundError
from clarify_launcher.resolve.identity import resolve_local_node


class FakeHostname:
    def __init__(self, *names):
        self.names = list(names)
        self.calls = 0

    def hostname(self):
        name = self.names[min(self.calls, len(self.names) - 1)]
        self.calls += 1
        return name


def _node(hostname, **kw):
    kw.setdefault("net_interface", "eth0")
    kw.setdefault("tools", "/opt/tools")
    return NodeDescriptor(hostname=hostname, **kw)


def _topo(*nodes):
    return Topology(nodes=list(nodes), clarify=ClarifySettings(install="/opt/x/", share="/srv", user="svc"))


def test_returns_matching_descriptor():
    topo = _topo(_node("node-1"), _node("node-2", net_interface="eth1"), _node("node-3"))
    node = resolve_local_node(topo, FakeHostname("node-2"))
    assert node is topo.nodes[1]
    assert node.net_interface == "eth1"


def test_no_match_raises_node_not_found():
    topo = _topo(_node("node-1"), _node("node-2"))
    with pytest.raises(NodeNotFoundError) as exc:
        resolve_local_node(topo, FakeHostname("elsewhere"))
    assert exc.value.hostname == "elsewhere"
    assert "node-1, node-2" in str(exc.value)


def test_match_is_exact_string_equality():
    topo = _topo(_node("Node-1"), _node("node-1.example.com"))
    with pytest.raises(NodeNotFoundError):
        resolve_local_node(topo, FakeHostname("node-1"))


def test_duplicate_hostnames_pick_first_occurrence():
    first = _node("node-1", tools="/first")
    topo = _topo(first, _node("node-2"), _node("node-1", tools="/second"))
    assert resolve_local_node(topo, FakeHostname("node-1")) is first


def test_hostname_is_not_cached():
    topo = _topo(_node("node-1"), _node("node-2"))
    host = FakeHostname("node-1", "node-2")
    assert resolve_local_node(topo, host).hostname == "node-1"
    assert resolve_local_node(topo, host).hostname == "node-2"
    assert host.calls == 2


def test_empty_topology_fails():
    with pytest.raises(NodeNotFoundError, match="configured: none"):
        resolve_local_node(_topo(), FakeHostname("node-1"))
