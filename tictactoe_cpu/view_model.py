from dataclasses import dataclass
from typing import Optional, Tuple

from .game_state import PLAYER_X, Status

PLAYER_LABELS = {'X': "X (You)", 'O': "O (Computer)"}


@dataclass(frozen=True)
class BoardView:
    """
    everything the window needs to draw one frame
    """
    cells: Tuple[str, ...]                 # 'X', 'O' or '' per cell
    status: str
    winning_line: Optional[Tuple[int, int, int]]
    can_reset: bool                        # offer "Play Again"
    accept_clicks: bool
    opponent_pending: bool


def status_text(state):
    outcome = state.outcome
    if outcome.status is Status.WIN:
        return f"Winner: {outcome.winner}"
    if outcome.status is Status.DRAW:
        return "It's a draw!"
    return f"Next player: {PLAYER_LABELS[state.next_player]}"


def build_view(state, opponent_pending=False):
    """
    pure mapping from game state (+ pending opponent move) to render model
    """
    return BoardView(
        cells=tuple(cell or '' for cell in state.board),
        status=status_text(state),
        winning_line=state.winning_line,
        can_reset=state.is_over,
        accept_clicks=(not state.is_over and state.next_player == PLAYER_X
                       and not opponent_pending),
        opponent_pending=opponent_pending,
    )
