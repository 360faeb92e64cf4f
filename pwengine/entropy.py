"""
Bit pool helpers:
mix raw bits with a cryptographic hash and draw unbiased integers from them.
"""

from __future__ import annotations

import hashlib
from typing import Callable, List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    padded = bits + [0] * pad_len

    return bytes(
        int("".join(str(b) for b in padded[i : i + 8]), 2)
        for i in range(0, len(padded), 8)
    )


def bytes_to_bits(data: bytes) -> List[int]:
    """Unpack bytes into bits, MSB first."""
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the packed bits with SHA-256 `rounds` times and return the
    digest as bits. With rounds <= 0 the input is returned unchanged.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)


class BitPool:
    """
    Buffer of random bits refilled on demand from `refill`.

    `randbelow` uses rejection sampling so every value in [0, n) is
    equally likely, whatever the size of n.
    """

    def __init__(self, refill: Callable[[], List[int]]) -> None:
        self._refill = refill
        self._bits: List[int] = []

    def __len__(self) -> int:
        return len(self._bits)

    def take(self, count: int) -> List[int]:
        while len(self._bits) < count:
            fresh = self._refill()
            if not fresh:
                raise RuntimeError("bit source returned no bits")
            self._bits.extend(fresh)
        taken, self._bits = self._bits[:count], self._bits[count:]
        return taken

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        width = (n - 1).bit_length()
        if width == 0:
            return 0
        while True:
            value = 0
            for bit in self.take(width):
                value = (value << 1) | bit
            if value < n:
                return value
