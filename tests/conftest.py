import random

import pytest


class ScriptedDraws:
    """Replays a fixed pick rule in place of ``random.Random.randrange``."""

    def __init__(self, pick):
        self.pick = pick
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return self.pick(n)


@pytest.fixture
def first_draws():
    return ScriptedDraws(lambda n: 0)


@pytest.fixture
def last_draws():
    return ScriptedDraws(lambda n: n - 1)


@pytest.fixture
def seeded_rng():
    return random.Random(20240611)
