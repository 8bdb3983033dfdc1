import itertools

import pytest


class ScriptedRandom:
    """Random source that replays a fixed sequence of values, cycling."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def random(self) -> float:
        return next(self._values)


@pytest.fixture
def scripted():
    return ScriptedRandom
