"""Toy ciphers: modular exponentiation, RSA, Diffie-Hellman, one-time pad and bit mixers."""

from __future__ import annotations

import argparse
import math
import random
import secrets
import sys
from dataclasses import dataclass, field

_PRIME_LOW = 10
_PRIME_HIGH = 100
_BLOCK_SIZE = 64
_MASK8 = 0xFF
_MASK32 = 0xFFFFFFFF


def modular_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by repeated squaring."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        base = base * base % modulus
    return result


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def random_prime(rng: random.Random | None = None) -> int:
    """Draw a random prime between 10 and 100."""
    rng = rng or random.Random()
    while True:
        candidate = rng.randint(_PRIME_LOW, _PRIME_HIGH)
        if is_prime(candidate):
            return candidate


@dataclass(frozen=True)
class RsaKeys:
    """A small RSA key pair: public ``(n, e)`` and private ``d``."""

    p: int
    q: int
    n: int
    e: int
    d: int

    @property
    def phi(self) -> int:
        """Euler's totient of ``n``."""
        return (self.p - 1) * (self.q - 1)


def generate_rsa_keys(rng: random.Random | None = None) -> RsaKeys:
    """Build a key pair from two distinct small random primes."""
    rng = rng or random.Random()
    p = random_prime(rng)
    q = random_prime(rng)
    while q == p:
        q = random_prime(rng)
    phi = (p - 1) * (q - 1)
    e = random_prime(rng)
    while math.gcd(e, phi) != 1:
        e += 1
    d = pow(e, -1, phi)
    return RsaKeys(p=p, q=q, n=p * q, e=e, d=d)


def rsa_encode(message: str, n: int, e: int) -> list[int]:
    """Encrypt each character of ``message`` separately."""
    codes = [ord(char) for char in message]
    if any(code >= n for code in codes):
        raise ValueError("modulus is too small for the message characters")
    return [modular_pow(code, e, n) for code in codes]


def rsa_decode(cipher: list[int], n: int, d: int) -> str:
    """Decrypt values produced by :func:`rsa_encode`."""
    return "".join(chr(modular_pow(value, d, n)) for value in cipher)


def generate_key(size: int, rng: random.Random | None = None) -> bytes:
    """Return ``size`` random key bytes."""
    if size < 0:
        raise ValueError("key size must not be negative")
    if rng is None:
        return secrets.token_bytes(size)
    return bytes(rng.randrange(256) for _ in range(size))


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with the leading bytes of ``key``."""
    if len(key) < len(data):
        raise ValueError("key is shorter than the data")
    return bytes(a ^ b for a, b in zip(data, key))


@dataclass
class DiffieHellmanParty:
    """One side of a Diffie-Hellman key exchange."""

    primitive: int
    modulus: int
    secret: int = field(repr=False)

    def __post_init__(self) -> None:
        if self.modulus <= 1:
            raise ValueError("modulus must be greater than one")
        if self.secret <= 0:
            raise ValueError("secret exponent must be positive")

    def public_key(self) -> int:
        """The value to send to the other side."""
        return modular_pow(self.primitive, self.secret, self.modulus)

    def session_key(self, other_public: int) -> int:
        """The shared key derived from the other side's public value."""
        return modular_pow(other_public, self.secret, self.modulus)


def pad_block(message: bytes) -> bytes:
    """Pad ``message`` into one 64-byte block.

    A ``0x80`` byte and zeros follow the message; the last eight bytes hold
    the block's bit length, which is always 512, big-endian.
    """
    message = bytes(message)
    if len(message) >= _BLOCK_SIZE:
        raise ValueError("message does not fit a single block")
    block = bytearray(message)
    block.append(0x80)
    block.extend(bytes(_BLOCK_SIZE - len(block)))
    block[-8:] = (len(block) * 8).to_bytes(8, "big")
    return bytes(block)


def _rotate_right(x: int, n: int, width: int) -> int:
    mask = (1 << width) - 1
    x &= mask
    n %= width
    return ((x >> n) | (x << (width - n))) & mask


def rotr8(x: int, n: int) -> int:
    """Rotate an 8-bit value right by ``n``."""
    return _rotate_right(x, n, 8)


def rotr32(x: int, n: int) -> int:
    """Rotate a 32-bit value right by ``n``."""
    return _rotate_right(x, n, 32)


def sigma(x: int) -> int:
    """Mix a 32-bit word: two rotations and a shift, XORed together."""
    x &= _MASK32
    return rotr32(x, 2) ^ rotr32(x, 18) ^ (x >> 3)


def choice(x: int) -> int:
    """Flip bit 1 of a 32-bit word."""
    return (x & _MASK32) ^ 2


def major(x: int) -> int:
    """Majority of ``x``, 2 and 4 taken bit by bit."""
    x &= _MASK32
    return (4 & (x | 2)) | (x & 2)


def _read_message(value: str | None) -> str:
    if value is not None:
        return value
    return sys.stdin.readline().rstrip("\n")


def _show_rsa(message: str) -> None:
    keys = generate_rsa_keys()
    cipher = rsa_encode(message, keys.n, keys.e)
    print("".join(str(value) for value in cipher))
    print(rsa_decode(cipher, keys.n, keys.d))


def _show_diffie_hellman(message: str) -> None:
    rng = random.Random()
    modulus = random_prime(rng)
    primitive = rng.randrange(2, modulus)
    alice = DiffieHellmanParty(primitive, modulus, rng.randrange(1, modulus))
    bob = DiffieHellmanParty(primitive, modulus, rng.randrange(1, modulus))
    alice_key = alice.session_key(bob.public_key())
    encrypted = [byte ^ (alice_key & _MASK8) for byte in message.encode("utf-8")]
    bob_key = bob.session_key(alice.public_key())
    decrypted = bytes(value ^ (bob_key & _MASK8) for value in encrypted)
    print(f"message: {decrypted.decode('utf-8', errors='replace')}\n | key : {bob_key}")


def main(argv=None) -> int:
    """Run one of the cipher demonstrations."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-ciphers", description="Toy cipher demonstrations."
    )
    sub = parser.add_subparsers(dest="command")
    cmd = sub.add_parser("modpow")
    cmd.add_argument("base", type=int, nargs="?", default=14)
    cmd.add_argument("exponent", type=int, nargs="?", default=49)
    cmd.add_argument("modulus", type=int, nargs="?", default=23)
    cmd = sub.add_parser("rsa")
    cmd.add_argument("message", nargs="?", default="hello world!")
    for name in ("otp", "dh", "pad", "rotr", "sigma"):
        cmd = sub.add_parser(name)
        cmd.add_argument("message", nargs="?")
    args = parser.parse_args(argv)
    command = args.command or "modpow"

    if command == "modpow":
        print(modular_pow(args.base, args.exponent, args.modulus))
    elif command == "rsa":
        _show_rsa(args.message)
    elif command == "dh":
        _show_diffie_hellman(_read_message(args.message))
    else:
        data = _read_message(args.message).encode("utf-8")
        if command == "otp":
            key = generate_key(len(data))
            print(xor_bytes(xor_bytes(data, key), key).decode("utf-8"))
        elif command == "pad":
            print("".join(str(byte) for byte in pad_block(data)))
        elif command == "rotr":
            for byte in data:
                print(f"noraml:{byte:08b}")
                print(f"  rotr:{rotr8(byte, 2):08b}")
        else:
            for byte in data:
                print(f"sigma   {sigma(byte):032b}")
                print(f"choice  {choice(byte):032b}")
                print(f"major   {major(byte):032b}")
                print(f"{chr(byte)}       {byte:032b}\n")
    return 0