"""
Random sources the generator draws characters from.

A source is any object with `randbelow(n)` returning an int uniformly
distributed over [0, n).
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol

SOURCE_NAMES = ("pseudo", "system", "quantum")


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int: ...


class PseudoRandomSource:
    """Non-cryptographic Mersenne Twister source. Seedable for repeatable runs."""

    name = "pseudo"

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


class SystemRandomSource:
    """Operating-system CSPRNG via `secrets`."""

    name = "system"

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


def get_source(name: str = "pseudo", seed: int | None = None) -> RandomSource:
    """
    Resolve a source by name. `seed` only applies to the pseudo source.
    """
    if name == "pseudo":
        return PseudoRandomSource(seed)
    if name == "system":
        return SystemRandomSource()
    if name == "quantum":
        # qiskit is heavy to import; only pay for it when asked.
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource()
    raise ValueError(
        f"Unknown random source {name!r}; expected one of {', '.join(SOURCE_NAMES)}"
    )
