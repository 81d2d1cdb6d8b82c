import os
import random
import sys
from collections import defaultdict

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Ensure project root is in sys.path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import dodger


class FixedRng:
    """Hands out queued values from ``randint`` and records the bounds it was asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def state():
    return dodger.new_game()


@pytest.fixture
def idle():
    return dodger.no_controls()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def key_state():
    """Build a fake ``pygame.key.get_pressed()`` result from a set of held keys."""

    def make(*held):
        keys = defaultdict(bool)
        for key in held:
            keys[key] = True
        return keys

    return make
