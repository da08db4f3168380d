from dataclasses import dataclass

# -----------------------------------------------------------------------------
# OPPONENT TUNING
# -----------------------------------------------------------------------------

RANDOM_MOVE_PROBABILITY = 0.7   # chance the computer ignores a winning move
REACTION_DELAY_MS = 100         # pause after a move before O starts its turn
THINKING_DELAY_MS = 1000        # simulated deliberation before O plays


@dataclass(frozen=True)
class GameConfig:
    """
    knobs for the computer opponent's behaviour and pacing
    """
    random_move_probability: float = RANDOM_MOVE_PROBABILITY
    reaction_delay_ms: int = REACTION_DELAY_MS
    thinking_delay_ms: int = THINKING_DELAY_MS

    def __post_init__(self):
        if not 0.0 <= self.random_move_probability <= 1.0:
            raise ValueError(
                f"random_move_probability must be within [0, 1], got {self.random_move_probability}"
            )
        for name in ("reaction_delay_ms", "thinking_delay_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
