import logging
import re

import pytest

from pwengine import generate_password, validate_policy
from pwengine.alphabet import build_alphabet
from pwengine.config import DIGITS, LETTERS, SPECIAL_CHARS, PasswordPolicy
from pwengine.engine import GenerationResult, PasswordEngine
from pwengine.entropy import BitPool
from pwengine.errors import GenerationExhausted, InvalidPolicy
from pwengine.sources import PseudoRandomSource

from conftest import ScriptedSource

ALL_POLICIES = [
    PasswordPolicy(length, numbers, special)
    for length in range(8, 25)
    for numbers in (False, True)
    for special in (False, True)
]

SPECIAL_THEN_DIGIT = re.compile("[" + re.escape(SPECIAL_CHARS) + "][0-9]")


@pytest.mark.parametrize("policy", ALL_POLICIES, ids=str)
def test_generated_password_satisfies_policy(engine, policy):
    result = engine.generate_with_meta(policy)

    assert len(result.password) == policy.length
    assert set(result.password) <= set(build_alphabet(policy))
    assert validate_policy(result.password, policy)
    assert result.policy is policy
    assert result.attempts >= 1


def test_scenario_letters_only(engine):
    result = engine.generate_with_meta(PasswordPolicy(8, False, False))

    assert len(result.password) == 8
    assert set(result.password) <= set(LETTERS)
    assert result.strength == 1


def test_scenario_numbers(engine):
    result = engine.generate_with_meta(PasswordPolicy(16, True, False))

    assert len(result.password) == 16
    assert any(c in DIGITS for c in result.password)
    assert result.strength == 3


def test_scenario_numbers_and_specials(engine):
    result = engine.generate_with_meta(PasswordPolicy(24, True, True))

    assert len(result.password) == 24
    assert SPECIAL_THEN_DIGIT.search(result.password)
    assert result.strength == 4


def test_specials_only_contains_special(engine):
    for _ in range(20):
        password = engine.generate(PasswordPolicy(8, False, True))
        assert any(c in SPECIAL_CHARS for c in password)
        assert not any(c in DIGITS for c in password)


def test_rejected_candidates_are_resampled_from_scratch():
    # alphabet = letters + digits; index 0 is "a", index 52 is "0"
    first = [0] * 8
    second = [1] * 7 + [52]
    source = ScriptedSource(first + second)
    engine = PasswordEngine(source)

    result = engine.generate_with_meta(PasswordPolicy(8, True, False))

    assert result.password == "bbbbbbb0"
    assert result.attempts == 2
    assert source.calls == 16


def test_many_retries_are_tolerated():
    rejected = [0] * 8 * 500
    accepted = [52] * 8
    engine = PasswordEngine(ScriptedSource(rejected + accepted))

    result = engine.generate_with_meta(PasswordPolicy(8, True, False))

    assert result.password == "0" * 8
    assert result.attempts == 501


def test_retry_ceiling_raises_generation_exhausted():
    engine = PasswordEngine(ScriptedSource([0]), max_attempts=5)

    with pytest.raises(GenerationExhausted, match="after 5 attempts"):
        engine.generate(PasswordPolicy(10, True, False))


def test_retry_ceiling_does_not_affect_first_hit():
    engine = PasswordEngine(ScriptedSource([0]), max_attempts=1)
    assert engine.generate(PasswordPolicy(10)) == "a" * 10


@pytest.mark.parametrize("max_attempts", [0, -3])
def test_invalid_retry_ceiling(max_attempts):
    with pytest.raises(ValueError):
        PasswordEngine(max_attempts=max_attempts)


@pytest.mark.parametrize("policy", [None, {"length": 8}, 12])
def test_engine_rejects_non_policy(engine, policy):
    with pytest.raises(InvalidPolicy):
        engine.generate(policy)


def test_same_seed_gives_same_password():
    policy = PasswordPolicy(20, True, True)
    first = PasswordEngine(PseudoRandomSource(seed=7)).generate(policy)
    second = PasswordEngine(PseudoRandomSource(seed=7)).generate(policy)
    assert first == second


def test_result_metadata(engine):
    result = engine.generate_with_meta(PasswordPolicy(12, True, False))

    assert isinstance(result, GenerationResult)
    assert result.strength == 2
    assert result.alphabet_size == 62
    assert result.entropy_bits == pytest.approx(12 * 5.954196310386876)


def test_generate_password_defaults_to_default_policy():
    result = generate_password(source=PseudoRandomSource(seed=3))

    assert len(result.password) == 8
    assert result.password.isalpha()
    assert result.strength == 1


def test_generate_password_with_policy():
    result = generate_password(PasswordPolicy(12, True, True), PseudoRandomSource(seed=3))

    assert len(result.password) == 12
    assert result.strength == 2
    assert SPECIAL_THEN_DIGIT.search(result.password)


def test_rejections_are_logged_without_the_password(caplog):
    engine = PasswordEngine(ScriptedSource([0] * 8 + [52] * 8))

    with caplog.at_level(logging.DEBUG, logger="pwengine"):
        engine.generate(PasswordPolicy(8, True, False))

    messages = [record.getMessage() for record in caplog.records]
    assert any("rejected" in m for m in messages)
    assert any("accepted" in m for m in messages)
    assert not any("aaaaaaaa" in m or "00000000" in m for m in messages)


def test_engine_keeps_a_source_that_is_falsy():
    pool = BitPool(lambda: [0, 1] * 32)
    assert len(pool) == 0

    engine = PasswordEngine(pool)

    assert engine.source is pool
    assert len(engine.generate(PasswordPolicy(8))) == 8


def test_sampling_covers_the_whole_alphabet():
    policy = PasswordPolicy(24, True, True)
    engine = PasswordEngine(PseudoRandomSource(seed=42))
    alphabet = build_alphabet(policy)

    seen = set()
    for _ in range(200):
        seen.update(engine.generate(policy))

    # 4800 draws over 93 characters; each is expected ~50 times
    assert seen == set(alphabet)
