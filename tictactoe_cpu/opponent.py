import logging
import random

from .config import GameConfig
from .game_state import PLAYER_O, WINNING_LINES, available_moves

logger = logging.getLogger(__name__)


def find_winning_move(board, player):
    """
    first empty cell that completes a line for player, or None
    """
    for a, b, c in WINNING_LINES:
        if board[a] == player and board[b] == player and board[c] is None:
            return c
        if board[a] == player and board[c] == player and board[b] is None:
            return b
        if board[b] == player and board[c] == player and board[a] is None:
            return a
    return None


class OpponentPolicy:
    """
    deliberately weak computer player: mostly random, sometimes takes a win.
    never blocks the human and never looks further than its own next move.
    """
    def __init__(self, config=None, rng=None, player=PLAYER_O):
        self.config = config or GameConfig()
        self.player = player
        self._rng = rng or random.Random()

    def choose_move(self, board):
        """
        returns a cell index, or None when the board is full
        """
        available = available_moves(board)
        if not available:
            return None

        # one draw decides whether to look for a win at all
        if self._rng.random() >= self.config.random_move_probability:
            move = find_winning_move(board, self.player)
            if move is not None:
                logger.debug("opponent takes winning move %d", move)
                return move

        move = self._rng.choice(available)
        logger.debug("opponent picks random move %d of %s", move, available)
        return move
