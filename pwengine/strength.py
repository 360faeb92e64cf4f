"""
Length-based strength scoring.
"""

from __future__ import annotations

from typing import List

# (lower bound inclusive, upper bound exclusive, score)
STRENGTH_BANDS = (
    (8, 12, 1),
    (12, 16, 2),
    (16, 20, 3),
    (20, 25, 4),
)
MAX_STRENGTH = 4
NO_STRENGTH = 0


def evaluate_strength(password: str) -> int:
    """
    Map the password length to a tier in 1..4.

    Lengths outside [8, 24] have no tier and score 0.
    """
    length = len(password)
    for low, high, score in STRENGTH_BANDS:
        if low <= length < high:
            return score
    return NO_STRENGTH


def strength_segments(strength: int, segments: int = MAX_STRENGTH) -> List[bool]:
    # segment i (1-based) is lit iff strength >= i
    return [strength >= i for i in range(1, segments + 1)]


def strength_bar(strength: int) -> str:
    return "[" + "".join("#" if lit else "-" for lit in strength_segments(strength)) + "]"
