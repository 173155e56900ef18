"""Eight-bit cyclic redundancy checks, bit by bit and with a lookup table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

BITWISE_POLYNOMIAL = 0xD8
TABLE_POLYNOMIAL = 0xDB
_WIDTH = 8
_TOPBIT = 1 << (_WIDTH - 1)
_MASK = (1 << _WIDTH) - 1


def _divide(remainder: int, polynomial: int) -> int:
    for _ in range(_WIDTH):
        if remainder & _TOPBIT:
            remainder = ((remainder << 1) ^ polynomial) & _MASK
        else:
            remainder = (remainder << 1) & _MASK
    return remainder


def crc8_bitwise(byte: int, remainder: int = 0) -> int:
    """Fold one byte into ``remainder`` bit by bit with polynomial 0xD8."""
    return _divide((remainder ^ byte) & _MASK, BITWISE_POLYNOMIAL)


def build_table(polynomial: int = TABLE_POLYNOMIAL) -> list[int]:
    """Precompute the remainder for every byte value."""
    return [_divide(value, polynomial & _MASK) for value in range(256)]


def crc8_table(byte: int, table: Sequence[int], remainder: int = 0) -> int:
    """Fold one byte into ``remainder`` using a table from :func:`build_table`."""
    return table[(byte ^ remainder) & _MASK]


_DEFAULT_TABLE = build_table()


def crc8(data: bytes) -> int:
    """Table-driven checksum of ``data`` with polynomial 0xDB."""
    remainder = 0
    for byte in bytes(data):
        remainder = crc8_table(byte, _DEFAULT_TABLE, remainder)
    return remainder


def main(argv=None) -> int:
    """Checksum a line of text and verify the result."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-crc", description="Eight-bit CRC demonstration."
    )
    parser.add_argument("message", nargs="?")
    parser.add_argument("--bitwise", action="store_true", help="use the bitwise variant")
    args = parser.parse_args(argv)
    message = args.message
    if message is None:
        message = sys.stdin.readline().rstrip("\n")
    data = message.encode("utf-8")

    if args.bitwise:
        remainders = [crc8_bitwise(byte) for byte in data]
        if any(crc8_bitwise(value, value) for value in remainders):
            print("error")
            return 1
        print("success")
        return 0

    remainder = 0
    for byte in data:
        remainder = crc8_table(byte, _DEFAULT_TABLE, remainder)
        print(f"{remainder}\t", end="")
    if crc8_table(remainder, _DEFAULT_TABLE, remainder) == 0:
        print("success")
        return 0
    print("error")
    return 1