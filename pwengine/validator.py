"""
Policy validation: decide whether a candidate satisfies the character
classes its policy asks for.
"""

from __future__ import annotations

import re

from .config import SPECIAL_CHARS, PasswordPolicy

_DIGIT = "[0-9]"
_SPECIAL = "[" + re.escape(SPECIAL_CHARS) + "]"

_HAS_DIGIT = re.compile(_DIGIT)
_HAS_SPECIAL = re.compile(_SPECIAL)
# With both classes enabled a special character must sit directly before
# a digit; one of each at arbitrary positions is not enough.
_SPECIAL_THEN_DIGIT = re.compile(_SPECIAL + _DIGIT)


def validate_policy(password: str, policy: PasswordPolicy) -> bool:
    """
    Return True when `password` meets the presence rule of `policy`.

    Never raises and has no side effects.
    """
    if policy.include_numbers and policy.include_special_chars:
        return _SPECIAL_THEN_DIGIT.search(password) is not None
    if policy.include_numbers:
        return _HAS_DIGIT.search(password) is not None
    if policy.include_special_chars:
        return _HAS_SPECIAL.search(password) is not None
    return True
