"""Pytest fixtures for sortvis tests."""

import os
import random

import pytest

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class Recorder:
    """Render callable that keeps every step it is handed."""

    def __init__(self, hook=None):
        self.steps = []
        self.hook = hook

    def __call__(self, step):
        self.steps.append(step)
        if self.hook:
            self.hook(self, step)

    @property
    def kinds(self):
        return [s.kind for s in self.steps]


class Sleeps(list):
    def __call__(self, seconds):
        self.append(seconds)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def sleeps():
    return Sleeps()


@pytest.fixture
def rng():
    return random.Random(42)

