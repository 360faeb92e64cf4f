"""
Command-line interface: collects a policy, generates passwords and prints
them with their strength.
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .config import MAX_LENGTH, MIN_LENGTH, PasswordPolicy
from .engine import PasswordEngine
from .errors import InvalidPolicy, PasswordEngineError
from .log import configure_logging
from .sources import SOURCE_NAMES, get_source
from .strength import strength_bar


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwengine",
        description="Generate random passwords for a length and character-class policy.",
    )
    parser.add_argument(
        "-l", "--length",
        type=int,
        default=None,
        help=f"password length, {MIN_LENGTH}-{MAX_LENGTH} "
        f"(default: $PWENGINE_LENGTH or {MIN_LENGTH})",
    )
    parser.add_argument(
        "-n", "--numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="include digits and require at least one (default: $PWENGINE_NUMBERS)",
    )
    parser.add_argument(
        "-s", "--special-chars",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="include special characters and require at least one "
        "(default: $PWENGINE_SPECIAL_CHARS)",
    )
    parser.add_argument(
        "-c", "--count",
        type=positive_int,
        default=1,
        help="how many passwords to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--source",
        choices=SOURCE_NAMES,
        default="pseudo",
        help="random source (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the pseudo source")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="give up after this many rejected candidates (default: no limit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `pwengine`, `python -m pwengine` or `run_pwengine.py`.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        policy = PasswordPolicy.from_env(
            length=args.length,
            include_numbers=args.numbers,
            include_special_chars=args.special_chars,
        )
    except InvalidPolicy as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        engine = PasswordEngine(get_source(args.source, args.seed), args.max_attempts)
        for _ in range(args.count):
            result = engine.generate_with_meta(policy)
            print(f"{result.password}  {strength_bar(result.strength)}")
    except (PasswordEngineError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
