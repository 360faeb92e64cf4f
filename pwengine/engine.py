"""
Password engine: draws candidates from the policy alphabet, rejects the
ones that fail validation and scores the accepted password.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .alphabet import build_alphabet, estimate_entropy_bits
from .config import DEFAULT_POLICY, PasswordPolicy
from .errors import GenerationExhausted, InvalidPolicy
from .sources import PseudoRandomSource, RandomSource
from .strength import evaluate_strength
from .validator import validate_policy

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    # Accepted password
    password: str

    # Length tier, 1..4
    strength: int

    # Candidates drawn, including the accepted one
    attempts: int

    # Alphabet / entropy metadata
    alphabet_size: int
    entropy_bits: float
    policy: PasswordPolicy


class PasswordEngine:
    """
    Reject-and-resample generator.

    Every rejected candidate is discarded whole and a fresh one is drawn.
    With `max_attempts=None` the loop has no ceiling; it terminates because
    the alphabet always contains each class the policy requires.
    """

    def __init__(
        self,
        source: RandomSource | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.source = PseudoRandomSource() if source is None else source
        self.max_attempts = max_attempts

    def _sample(self, alphabet: str, length: int) -> str:
        size = len(alphabet)
        return "".join(alphabet[self.source.randbelow(size)] for _ in range(length))

    def generate_with_meta(self, policy: PasswordPolicy) -> GenerationResult:
        if not isinstance(policy, PasswordPolicy):
            raise InvalidPolicy(
                f"expected PasswordPolicy, got {type(policy).__name__}"
            )

        alphabet = build_alphabet(policy)
        attempts = 0

        while True:
            attempts += 1
            candidate = self._sample(alphabet, policy.length)
            if validate_policy(candidate, policy):
                break

            logger.debug("candidate %d rejected for %s", attempts, policy)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise GenerationExhausted(
                    f"no candidate satisfied {policy} "
                    f"after {attempts} attempts"
                )

        strength = evaluate_strength(candidate)
        logger.debug(
            "accepted candidate after %d attempt(s), strength %d",
            attempts,
            strength,
        )

        return GenerationResult(
            password=candidate,
            strength=strength,
            attempts=attempts,
            alphabet_size=len(alphabet),
            entropy_bits=estimate_entropy_bits(policy.length, len(alphabet)),
            policy=policy,
        )

    def generate(self, policy: PasswordPolicy) -> str:
        return self.generate_with_meta(policy).password


def generate_password(
    policy: PasswordPolicy | None = None,
    source: RandomSource | None = None,
) -> GenerationResult:
    """
    High-level function: generate a password for `policy` (DEFAULT_POLICY
    when omitted) and return it with its strength.
    """
    engine = PasswordEngine(source)
    return engine.generate_with_meta(DEFAULT_POLICY if policy is None else policy)
