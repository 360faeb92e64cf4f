"""
Configuration for the password engine: character sets, length bounds
and the per-call generation policy.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import InvalidPolicy

# Character classes. Letters are always part of the alphabet.
LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};:'\",.<>?/`~"

MIN_LENGTH = 8
MAX_LENGTH = 24

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class PasswordPolicy:
    # Desired password length in characters, within [MIN_LENGTH, MAX_LENGTH].
    length: int = MIN_LENGTH

    # Add 0-9 to the alphabet and require at least one digit.
    include_numbers: bool = False

    # Add SPECIAL_CHARS to the alphabet and require at least one of them.
    include_special_chars: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass; a flag passed as length is a caller bug.
        if not isinstance(self.length, int) or isinstance(self.length, bool):
            raise InvalidPolicy(
                f"length must be an integer, got {type(self.length).__name__}"
            )
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidPolicy(
                f"length={self.length} is outside "
                f"[{MIN_LENGTH}, {MAX_LENGTH}]"
            )
        for name in ("include_numbers", "include_special_chars"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidPolicy(
                    f"{name} must be a bool, got {type(value).__name__}"
                )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides,
    ) -> "PasswordPolicy":
        """
        Build a policy from PWENGINE_LENGTH, PWENGINE_NUMBERS and
        PWENGINE_SPECIAL_CHARS, keeping the defaults for unset variables.

        Fields passed in `overrides` with a value other than None win, and
        their variables are never read.
        """
        env = os.environ if environ is None else environ

        length = overrides.get("length")
        if length is None:
            length = _env_length(env, "PWENGINE_LENGTH")

        include_numbers = overrides.get("include_numbers")
        if include_numbers is None:
            include_numbers = _env_flag(env, "PWENGINE_NUMBERS")

        include_special_chars = overrides.get("include_special_chars")
        if include_special_chars is None:
            include_special_chars = _env_flag(env, "PWENGINE_SPECIAL_CHARS")

        return cls(
            length=length,
            include_numbers=include_numbers,
            include_special_chars=include_special_chars,
        )


def _env_length(env: Mapping[str, str], name: str) -> int:
    raw = env.get(name)
    if raw is None:
        return MIN_LENGTH
    try:
        return int(raw)
    except ValueError:
        raise InvalidPolicy(f"{name}={raw!r} is not an integer") from None


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name)
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidPolicy(f"{name}={raw!r} is not a boolean")


@dataclass
class QuantumConfig:
    # Number of qubits to prepare in superposition per circuit run.
    # Each qubit gives one raw bit.
    # NOTE: local simulators top out around 29 qubits for a single shot.
    num_qubits: int = 20

    # How many rounds of SHA-256 mixing to apply to each batch of raw bits.
    entropy_rounds: int = 2


MAX_SIM_QUBITS = 29

# Default instances you can import elsewhere
DEFAULT_POLICY = PasswordPolicy()
DEFAULT_QUANTUM_CONFIG = QuantumConfig()
