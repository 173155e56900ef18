"""SHA-256 message digest."""

from __future__ import annotations

import argparse
import sys

_MASK32 = 0xFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _choose(a: int, b: int, c: int) -> int:
    return (a & b) ^ (~a & c)


def _majority(a: int, b: int, c: int) -> int:
    return (a & (b | c)) | (b & c)


def _sigma0(x: int) -> int:
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    schedule = [int.from_bytes(block[i:i + 4], "big") for i in range(0, _BLOCK_SIZE, 4)]
    for i in range(16, 64):
        schedule.append(
            (_sigma1(schedule[i - 2]) + schedule[i - 7]
             + _sigma0(schedule[i - 15]) + schedule[i - 16]) & _MASK32
        )
    a, b, c, d, e, f, g, h = state
    for word, constant in zip(schedule, _K):
        sum_e = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        temp1 = (h + sum_e + _choose(e, f, g) + constant + word) & _MASK32
        sum_a = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        temp2 = (sum_a + _majority(a, b, c)) & _MASK32
        h, g, f, e = g, f, e, (d + temp1) & _MASK32
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK32
    return tuple(
        (old + new) & _MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


class Sha2:
    """Incremental SHA-256 hasher."""

    digest_size = 32
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        chunk = bytes(data)
        self._length += len(chunk)
        self._buffer.extend(chunk)
        while len(self._buffer) >= _BLOCK_SIZE:
            self._state = _compress(self._state, bytes(self._buffer[:_BLOCK_SIZE]))
            del self._buffer[:_BLOCK_SIZE]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(bytes((56 - len(tail)) % _BLOCK_SIZE))
        tail.extend((self._length * 8 & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big"))
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, bytes(tail[start:start + _BLOCK_SIZE]))
        return b"".join(word.to_bytes(4, "big") for word in state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha2_hex(data: bytes) -> str:
    """Hash ``data`` in one go and return the hexadecimal digest."""
    return Sha2(data).hexdigest()


def main(argv=None) -> int:
    """Print the SHA-256 digest of a line of text."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-sha2", description="SHA-256 digest of a line of text."
    )
    parser.add_argument("message", nargs="?")
    args = parser.parse_args(argv)
    message = args.message
    if message is None:
        message = sys.stdin.readline().rstrip("\n")
    print(sha2_hex(message.encode("utf-8")))
    return 0