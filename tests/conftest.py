import numpy as np
import pytest


class ScriptedSource:
    """Random source replaying fixed draws; counts how many were taken."""

    def __init__(self, draws=()):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        if self.calls >= len(self.draws):
            raise AssertionError("sampler took more draws than scripted")
        val = self.draws[self.calls]
        self.calls += 1
        return val


class CountingSource:
    """Wraps a numpy Generator and counts scalar draws."""

    def __init__(self, seed=0):
        self.rng = np.random.default_rng(seed)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.rng.random()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def counting():
    return CountingSource()
