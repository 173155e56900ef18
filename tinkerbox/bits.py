"""Bit and byte exercises: masks, byte order, float layout and overflow checks."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterable

_UINT32_MASK = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT_BYTES = 4


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _check_int32(*values: int) -> None:
    for value in values:
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"{value} does not fit a signed 32-bit integer")


def _check_uint32(*values: int) -> None:
    for value in values:
        if not 0 <= value <= _UINT32_MASK:
            raise ValueError(f"{value} does not fit an unsigned 32-bit integer")


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def any_eq_one(x: int, width: int) -> bool:
    """Report whether the lowest bit of ``x`` is one.

    Only bit 0 is examined, and only when ``width`` is positive.
    """
    return width > 0 and bool(x & 1)


def any_eq_zero(x: int, width: int) -> bool:
    """Report whether the lowest bit of ``x`` is zero.

    Only bit 0 is examined, and only when ``width`` is positive.
    """
    return width > 0 and not x & 1


def any_odd_one(x: int) -> bool:
    """Report whether ``x`` shifted right by 1 or by 3 leaves exactly one."""
    return any((x & _UINT32_MASK) >> shift == 1 for shift in range(1, _INT_BYTES, 2))


def format_bits(value: int, size: int) -> str:
    """Render bits ``size`` down to 0 of ``value``, after a leading ``0``."""
    if size < 0:
        raise ValueError("size must not be negative")
    value &= _UINT32_MASK
    return "0" + "".join("1" if value >> bit & 1 else "0" for bit in range(size, -1, -1))


def format_bytes(data: Iterable[int]) -> str:
    """Render bytes as ``0x`` followed by two hex digits and a space for each."""
    return "0x" + "".join(f"{byte:02x} " for byte in bytes(data))


def float_bits(value: float) -> str:
    """Show the bits of ``value`` as a single-precision float.

    The sign bit comes first, then bits 30 to 0, with a separator placed
    before bit 24.
    """
    (raw,) = struct.unpack(">I", struct.pack(">f", value))
    parts = [f"{raw >> 31 & 1} | "]
    for bit in range(30, -1, -1):
        if bit == 24:
            parts.append(" | ")
        parts.append(f"{raw >> bit & 1} ")
    return "".join(parts)


def byte_order() -> str:
    """Return ``"big"`` or ``"little"`` for this machine's byte order."""
    layout = struct.pack("=H", 0x0102)
    return "big" if layout == b"\x01\x02" else "little"


def replace_byte(orig: int, pos: int, x: int) -> int:
    """Put ``x`` into byte ``pos`` (0 is least significant) of a 32-bit word.

    A position past the word's four bytes gives 0.
    """
    if pos < 0:
        raise ValueError("byte position must not be negative")
    if pos >= _INT_BYTES:
        return 0
    shift = 8 * pos
    return ((orig & ~(0xFF << shift)) | (x << shift)) & _UINT32_MASK


def tmul_ok(x: int, y: int) -> bool:
    """Check a 32-bit signed product by dividing the wrapped result back."""
    _check_int32(x, y)
    product = _wrap_signed(x * y, 32)
    if x == 0:
        return product == 0
    return _wrap_signed(_truncating_div(product, x), 32) == y


def tmul_ok64(x: int, y: int) -> bool:
    """Check that the product of two 32-bit signed integers fits 32 bits."""
    _check_int32(x, y)
    return _INT32_MIN <= x * y <= _INT32_MAX


def uadd_ok(x: int, y: int) -> bool:
    """Check that adding two unsigned 32-bit integers does not wrap."""
    _check_uint32(x, y)
    total = (x + y) & _UINT32_MASK
    return total >= x and total >= y


def tadd_ok(x: int, y: int) -> bool:
    """Check that adding two signed 32-bit integers does not overflow."""
    _check_int32(x, y)
    total = _wrap_signed(x + y, 32)
    negative = x < 0 and y < 0 and total >= 0
    positive = x >= 0 and y >= 0 and total < 0
    return not negative and not positive


def mult2(a: int, b: int) -> int:
    """Multiply two 64-bit signed integers with wrap-around."""
    return _wrap_signed(a * b, 64)


def _demo() -> None:
    print(f"{struct.calcsize('P')} {struct.calcsize('i')}")
    print((1 << 6) - (1 << 3) - 1)
    if any_odd_one(2):
        print("ANY ODD IS ONE")
    if any_eq_one(255, 32):
        print("ANY EQUALS 1")
    if any_eq_zero(255, 32):
        print("ANY EQUALS 0")
    print(1 << (2 << 3))
    x = _wrap_signed(0x89ABCDEF, 32)
    y = 0x76543210
    print(f"{((x & 0xFF) | (y & ~0xFF)) & _UINT32_MASK:x}")


def _show_numbers(stream) -> None:
    for token in stream.read().split():
        number = int(token)
        print(format_bits(number, 10))
        print(f"{number} {number & _UINT32_MASK}")
        if number <= 0:
            break


def main(argv=None) -> int:
    """Run one of the bit-twiddling demonstrations."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-bits", description="Bit and byte demonstrations."
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo")
    sub.add_parser("bits", help="read integers from stdin and show their bits")
    cmd = sub.add_parser("float")
    cmd.add_argument("value", type=float, nargs="?", default=-3.2)
    sub.add_parser("order")
    sub.add_parser("replace")
    sub.add_parser("overflow")
    sub.add_parser("mult")
    args = parser.parse_args(argv)
    command = args.command or "demo"

    if command == "bits":
        _show_numbers(sys.stdin)
    elif command == "float":
        print(float_bits(args.value))
    elif command == "order":
        raw = struct.unpack("=H", struct.pack("=H", 0x0102))[0]
        print(f"{byte_order()} endian: {raw:x}")
    elif command == "replace":
        print(f"{replace_byte(0x12345678, 0, 0xAB):08x}")
    elif command == "overflow":
        ok = uadd_ok(10, 10) and tadd_ok(_INT32_MAX, -1) and tmul_ok64(_INT32_MAX, _INT32_MAX)
        print("no overflow" if ok else "overflow")
    elif command == "mult":
        print(f"3 * 2 = {mult2(2, 3)}")
    else:
        _demo()
    return 0