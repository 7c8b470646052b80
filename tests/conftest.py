import os

# Headless pygame for the whole session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from pong import Canvas, PongGame


class RecordingCanvas(Canvas):
    """Canvas that remembers every draw call as (name, args)."""
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(('clear', (color,)))

    def fill_rect(self, rect, color):
        self.calls.append(('fill_rect', (tuple(rect), color)))

    def stroke_rect(self, rect, color):
        self.calls.append(('stroke_rect', (tuple(rect), color)))

    def dashed_vline(self, x, y0, y1, color, dash=10, gap=10):
        self.calls.append(('dashed_vline', (x, y0, y1, color, dash, gap)))

    def text(self, text, x, y, size, color):
        self.calls.append(('text', (text, x, y, size, color)))

    def circle(self, x, y, radius, color, alpha=1.0):
        self.calls.append(('circle', (x, y, radius, color, alpha)))

    def texts(self):
        return [args[0] for name, args in self.calls if name == 'text']

    def count(self, name):
        return sum(1 for n, _ in self.calls if n == name)


class ScriptedRandom:
    """random()-compatible stub that replays fixed values, cycling when exhausted."""
    def __init__(self, values):
        self.values = list(values)
        self.i = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(rng):
    return PongGame(rng=rng)


@pytest.fixture
def playing(game):
    game.start_game()
    return game


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
