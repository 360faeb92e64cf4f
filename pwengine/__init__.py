"""
Policy-driven random password generator with length-based strength scoring.
"""

from .config import DEFAULT_POLICY, PasswordPolicy, SPECIAL_CHARS
from .engine import GenerationResult, PasswordEngine, generate_password
from .errors import GenerationExhausted, InvalidPolicy, PasswordEngineError
from .strength import evaluate_strength
from .validator import validate_policy

__all__ = [
    "PasswordPolicy",
    "DEFAULT_POLICY",
    "SPECIAL_CHARS",
    "PasswordEngine",
    "GenerationResult",
    "generate_password",
    "evaluate_strength",
    "validate_policy",
    "PasswordEngineError",
    "InvalidPolicy",
    "GenerationExhausted",
]
