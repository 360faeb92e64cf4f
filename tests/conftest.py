import logging

import pytest

from pwengine.engine import PasswordEngine
from pwengine.sources import PseudoRandomSource


class ScriptedSource:
    """Replays a fixed list of indices, cycling when exhausted."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def randbelow(self, n):
        value = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        assert 0 <= value < n
        return value


@pytest.fixture
def seeded_source():
    return PseudoRandomSource(seed=1234)


@pytest.fixture
def engine(seeded_source):
    return PasswordEngine(seeded_source)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PWENGINE_LENGTH", "PWENGINE_NUMBERS", "PWENGINE_SPECIAL_CHARS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("pwengine")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
