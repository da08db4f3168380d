"""
tic-tac-toe rules and state

board is a tuple of 9 cells in row-major order (index = row*3 + col),
each cell None (empty), 'X' or 'O'. states are immutable: a move returns
a new GameState and leaves the old one untouched.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

PLAYER_X = 'X'                     # human, always moves first
PLAYER_O = 'O'                     # computer
BOARD_CELLS = 9

# rows, columns, diagonals; order decides which line is reported first
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

Board = Tuple[Optional[str], ...]


class MoveError(Exception):
    """
    base for rejected moves, keeps the offending index
    """
    def __init__(self, index, message):
        super().__init__(message)
        self.index = index


class CellOccupied(MoveError):
    def __init__(self, index, mark):
        super().__init__(index, f"cell {index} already holds {mark}")
        self.mark = mark


class GameOver(MoveError):
    def __init__(self, index):
        super().__init__(index, f"game is over, move on cell {index} rejected")


class CellOutOfRange(MoveError):
    def __init__(self, index):
        super().__init__(index, f"cell {index!r} is not on the board (0-{BOARD_CELLS - 1})")


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    settled/unsettled result; winner and line only set for a win
    """
    status: Status
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self):
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def empty_board() -> Board:
    return (None,) * BOARD_CELLS


def other_player(player):
    return PLAYER_O if player == PLAYER_X else PLAYER_X


def available_moves(board):
    """
    indices of empty cells, ascending
    """
    return [i for i, cell in enumerate(board) if cell is None]


def evaluate_outcome(board) -> Outcome:
    """
    scan the fixed lines for three equal marks, then check for a full board
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(Status.WIN, winner=board[a], line=line)
    if all(cell is not None for cell in board):
        return DRAW
    return IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    """
    one snapshot of a game: board, whose turn, and the derived outcome
    """
    board: Board = field(default_factory=empty_board)
    next_player: str = PLAYER_X
    outcome: Outcome = IN_PROGRESS

    @classmethod
    def reset(cls):
        """
        fresh game, X to move
        """
        return cls()

    @property
    def is_over(self):
        return self.outcome.is_over

    @property
    def winner(self):
        return self.outcome.winner

    @property
    def winning_line(self):
        return self.outcome.line

    def apply_move(self, index) -> "GameState":
        """
        place next_player's mark on index and return the resulting state
        raises GameOver, CellOutOfRange or CellOccupied; self is never changed
        """
        if self.is_over:
            raise GameOver(index)
        if not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            raise CellOutOfRange(index)
        if self.board[index] is not None:
            raise CellOccupied(index, self.board[index])

        board = list(self.board)
        board[index] = self.next_player
        board = tuple(board)
        return replace(
            self,
            board=board,
            next_player=other_player(self.next_player),
            outcome=evaluate_outcome(board),
        )


def initial_state():
    return GameState.reset()
