"""
Alphabet assembly: turn a policy into the set of characters candidates
are drawn from.
"""

from __future__ import annotations

import math

from .config import DIGITS, LETTERS, SPECIAL_CHARS, PasswordPolicy


def build_alphabet(policy: PasswordPolicy) -> str:
    """
    Concatenate the enabled character classes.

    Letters always come first, then digits, then special characters, so
    the alphabet is never empty and holds at least one character of every
    class the policy enables.
    """
    alphabet = LETTERS
    if policy.include_numbers:
        alphabet += DIGITS
    if policy.include_special_chars:
        alphabet += SPECIAL_CHARS
    return alphabet


def estimate_entropy_bits(length: int, alphabet_size: int) -> float:
    """Theoretical entropy of a uniformly drawn password."""
    if alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)
