"""Classify, loosely parse and resolve IP addresses."""

from __future__ import annotations

import argparse
import ipaddress
import re
import socket
import sys

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")
_DEC_DIGITS = frozenset("0123456789")
_MAX_PARTS = 4


def detect_ip_version(address: str) -> tuple[int, str]:
    """Return ``(4, text)`` or ``(6, text)`` for a strict numeric address.

    The text is the address in its canonical form. Anything that is
    neither a dotted-quad IPv4 address nor an IPv6 address raises
    ValueError.
    """
    if not isinstance(address, str):
        raise TypeError("address must be a string")
    try:
        return 4, str(ipaddress.IPv4Address(address))
    except ValueError:
        pass
    if "%" in address:
        raise ValueError(f"{address!r} is not a valid IP address")
    try:
        return 6, str(ipaddress.IPv6Address(address))
    except ValueError:
        raise ValueError(f"{address!r} is not a valid IP address") from None


def _parse_part(text: str) -> int:
    if text[:2].lower() == "0x":
        digits, base, allowed = text[2:], 16, _HEX_DIGITS
    elif len(text) > 1 and text.startswith("0"):
        digits, base, allowed = text[1:], 8, _OCT_DIGITS
    else:
        digits, base, allowed = text, 10, _DEC_DIGITS
    if not digits or not set(digits) <= allowed:
        raise ValueError(f"{text!r} is not a valid address part")
    return int(digits, base)


def inet_aton_loose(address: str) -> str:
    """Parse an IPv4 address the permissive way and return its dotted quad.

    One to four parts are accepted, each decimal, octal (leading ``0``) or
    hexadecimal (leading ``0x``); the last part fills the remaining bytes.
    Anything after the first whitespace character is ignored.
    """
    head = re.split(r"\s", address, maxsplit=1)[0]
    parts = head.split(".")
    if not head or len(parts) > _MAX_PARTS or any(not part for part in parts):
        raise ValueError(f"{address!r} is not a valid IPv4 address")
    *leading, last = (_parse_part(part) for part in parts)
    if any(value > 0xFF for value in leading):
        raise ValueError(f"{address!r} has a part larger than a byte")
    if last >= 1 << (8 * (_MAX_PARTS - len(leading))):
        raise ValueError(f"{address!r} has a final part that is too large")
    value = last
    for position, byte in enumerate(leading):
        value |= byte << (24 - 8 * position)
    return str(ipaddress.IPv4Address(value))


def resolve_address(host: str) -> tuple[int, str]:
    """Look up ``host`` and return the IP version and text of its first address."""
    if not host:
        raise ValueError("host must not be empty")
    infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    if not infos:
        raise ValueError(f"no addresses found for {host!r}")
    family, _, _, _, sockaddr = infos[0]
    if family == socket.AF_INET:
        return 4, sockaddr[0]
    if family == socket.AF_INET6:
        return 6, sockaddr[0]
    raise ValueError("can't recognize the address family")


def main(argv=None) -> int:
    """Classify, loosely parse or resolve an address."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-ip", description="IP address utilities."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("detect", "loose"):
        cmd = sub.add_parser(name)
        cmd.add_argument("address")
    cmd = sub.add_parser("resolve")
    cmd.add_argument("host")
    args = parser.parse_args(argv)

    if args.command == "resolve":
        try:
            _, text = resolve_address(args.host)
        except (OSError, ValueError) as exc:
            print(f"error in getaddrinfo: {exc}", file=sys.stderr)
            return 1
        print(f"IP: {text}")
        return 0

    try:
        version, text = detect_ip_version(args.address)
    except ValueError:
        if args.command == "detect":
            print(f"invalid address: {args.address}", file=sys.stderr)
            return 1
    else:
        print(f"version in IPv{version}: {text}")
        return 0

    print("invalid inet pton")
    try:
        text = inet_aton_loose(args.address)
    except ValueError:
        print("invalid inet aton")
        return 1
    print(f"valid aton: {text}")
    return 0