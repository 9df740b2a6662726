import pytest

from clarify_launcher.errors import BindingMismatchError, InvalidAddressError
from clarify_launcher.resolve.interfaces import InterfaceValidator
from clarify_launcher.resolve.ipv4 import parse_cidr, parse_ipv4


class FakeInterfaces:
    def __init__(self, table):
        self.table = table

    def interface_addresses(self, name):
        return list(self.table.get(name, []))


def test_matching_cidr_validates():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    assert str(v.validate("eth0", "10.0.0.5")) == "10.0.0.5"


def test_other_address_is_binding_mismatch():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    with pytest.raises(BindingMismatchError) as exc:
        v.validate("eth0", "10.0.0.6")
    assert exc.value.interface == "eth0"
    assert exc.value.expected == "10.0.0.6"
    assert exc.value.found == ["10.0.0.5"]
    assert "eth0" in str(exc.value) and "10.0.0.6" in str(exc.value)


def test_missing_interface_is_binding_mismatch():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    with pytest.raises(BindingMismatchError, match="no IPv4 addresses"):
        v.validate("eth9", "10.0.0.5")


def test_second_address_on_interface_matches():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["fe80::1/64", "192.168.1.4/16", "10.0.0.5/32"]}))
    assert str(v.validate("eth0", "10.0.0.5")) == "10.0.0.5"


def test_leading_zeros_in_expected_address_normalise():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    assert str(v.validate("eth0", "010.000.000.005")) == "10.0.0.5"


def test_ipv4_mapped_forms_compare_as_binary():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["::ffff:10.0.0.5/120"]}))
    assert str(v.validate("eth0", "10.0.0.5")) == "10.0.0.5"
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    assert str(v.validate("eth0", "::ffff:10.0.0.5")) == "10.0.0.5"


def test_garbage_expected_address_is_invalid():
    v = InterfaceValidator(FakeInterfaces({"eth0": ["10.0.0.5/24"]}))
    with pytest.raises(InvalidAddressError):
        v.validate("eth0", "not-an-ip")
    with pytest.raises(InvalidAddressError):
        v.validate("eth0", "")


def test_parse_helpers():
    assert str(parse_cidr("10.0.0.5/24")) == "10.0.0.5"
    assert str(parse_cidr("10.0.0.5")) == "10.0.0.5"
    assert parse_cidr("fe80::1/64") is None
    assert parse_ipv4("256.0.0.1") is None
    assert parse_ipv4("10.0.0") is None
    assert str(parse_ipv4(" 10.0.0.5 ")) == "10.0.0.5"
