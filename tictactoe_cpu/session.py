import logging

from PySide6.QtCore import QObject, Signal, Slot

from .config import GameConfig
from .game_state import PLAYER_O, PLAYER_X, GameState, MoveError, Status
from .opponent import OpponentPolicy
from .turn_timer import TurnTimer
from .view_model import build_view

logger = logging.getLogger(__name__)


class GameSession(QObject):
    """
    human (X) vs computer (O) game flow.

    owns the current state, forwards clicks into it and paces the
    opponent's reply through a single cancellable timer. every state
    change cancels whatever opponent step was pending, so a delayed move
    never lands on a board it was not meant for.
    """
    view_changed = Signal(object)      # BoardView

    def __init__(self, config=None, policy=None, timer=None, parent=None):
        super().__init__(parent)
        self.config = config or GameConfig()
        self.policy = policy or OpponentPolicy(self.config)
        self.timer = timer or TurnTimer(self)
        self._state = GameState.reset()

    @property
    def state(self):
        return self._state

    @property
    def opponent_pending(self):
        return self.timer.pending

    @property
    def view(self):
        return build_view(self._state, self.opponent_pending)

    # -------------------------------------------------------------------------
    # presentation contract
    # -------------------------------------------------------------------------

    @Slot(int)
    def on_cell_activated(self, index):
        # only the human's turn, only empty cells, only while playing
        state = self._state
        if state.is_over or state.next_player != PLAYER_X or self.opponent_pending:
            return
        if not 0 <= index < len(state.board) or state.board[index] is not None:
            return
        self._play(index)

    @Slot()
    def on_reset_requested(self):
        if not self._state.is_over:
            return
        self.reset()

    @Slot()
    def reset(self):
        """
        start over; drops any opponent move still in flight
        """
        logger.info("new game")
        self._set_state(GameState.reset())

    def start(self):
        # push the first frame to listeners
        self.view_changed.emit(self.view)

    # -------------------------------------------------------------------------
    # internals
    # -------------------------------------------------------------------------

    def _play(self, index):
        try:
            new_state = self._state.apply_move(index)
        except MoveError:
            return False  # recoverable, treated as a no-op
        self._set_state(new_state)
        return True

    def _set_state(self, new_state):
        self.timer.cancel()
        self._state = new_state
        if new_state.outcome.status is Status.WIN:
            logger.info("%s wins on line %s", new_state.winner, new_state.winning_line)
        elif new_state.outcome.status is Status.DRAW:
            logger.info("game ends in a draw")
        elif new_state.next_player == PLAYER_O:
            self.timer.schedule(self.config.reaction_delay_ms, self._begin_opponent_turn)
        self.view_changed.emit(self.view)

    def _begin_opponent_turn(self):
        if self._state.is_over or self._state.next_player != PLAYER_O:
            return
        self.timer.schedule(self.config.thinking_delay_ms, self._play_opponent_move)

    def _play_opponent_move(self):
        move = self.policy.choose_move(self._state.board)
        if move is None:
            self.view_changed.emit(self.view)  # full board, nothing to play
            return
        if not self._play(move):
            logger.warning("opponent chose unplayable cell %d", move)
