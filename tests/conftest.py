import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from tictactoe_cpu.turn_timer import TimerToken


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class ManualTimer:
    """
    TurnTimer stand-in driven by advance() instead of the event loop
    """
    def __init__(self):
        self.now = 0
        self.history = []          # delays in scheduling order
        self._serial = 0
        self._token = None
        self._callback = None
        self._due = None

    @property
    def pending(self):
        return self._token is not None

    def is_active(self, token):
        return token is not None and token == self._token

    def schedule(self, delay_ms, callback):
        self.cancel()
        self._serial += 1
        self._token = TimerToken(self._serial, delay_ms)
        self._callback = callback
        self._due = self.now + delay_ms
        self.history.append(delay_ms)
        return self._token

    def cancel(self):
        self._token = None; self._callback = None; self._due = None

    def advance(self, ms):
        target = self.now + ms
        while self._token is not None and self._due <= target:
            self.now = self._due
            callback = self._callback
            self._token = None; self._callback = None; self._due = None
            callback()
        self.now = target


class ScriptedPolicy:
    """
    plays the given moves in order, then reports no move
    """
    def __init__(self, moves):
        self.moves = list(moves)
        self.boards = []

    def choose_move(self, board):
        self.boards.append(board)
        return self.moves.pop(0) if self.moves else None


class FixedRandom:
    """
    random source with a fixed draw; choice() returns a preset pick or the first item
    """
    def __init__(self, value, pick=None):
        self.value = value
        self.pick = pick
        self.choices = []

    def random(self):
        return self.value

    def choice(self, seq):
        self.choices.append(list(seq))
        return self.pick if self.pick is not None else seq[0]


@pytest.fixture
def manual_timer():
    return ManualTimer()
