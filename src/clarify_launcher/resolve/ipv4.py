# src/clarify_launcher/resolve/ipv4.py
from __future__ import annotations

import ipaddress
from typing import Optional


def _parse_dotted_decimal(text: str) -> Optional[ipaddress.IPv4Address]:
    # ipaddress rejects "010.0.0.5"; read each octet as plain decimal instead
    parts = text.split(".")
    if len(parts) != 4:
        return None
    if not all(p and p.isascii() and p.isdigit() for p in parts):
        return None
    octets = [int(p, 10) for p in parts]
    if any(o > 255 for o in octets):
        return None
    return ipaddress.IPv4Address(bytes(octets))


def parse_ipv4(text: str) -> Optional[ipaddress.IPv4Address]:
    """
    Normalise an address literal to an IPv4Address.

    Accepts plain dotted quads (leading zeros allowed) and IPv4-mapped IPv6
    literals such as ``::ffff:10.0.0.5``. Anything else returns None.
    """
    text = (text or "").strip()
    if not text:
        return None
    try:
        addr = ipaddress.ip_address(text)
    except ValueError:
        return _parse_dotted_decimal(text)
    if isinstance(addr, ipaddress.IPv6Address):
        return addr.ipv4_mapped
    return addr


def parse_cidr(text: str) -> Optional[ipaddress.IPv4Address]:
    """Bare IPv4 address of a CIDR string (``10.0.0.5/24`` -> 10.0.0.5)."""
    return parse_ipv4((text or "").split("/", 1)[0])
