"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Verdict(Enum):
    """Per-character evaluation of a submitted guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def priority(self) -> int:
        """Strength used when folding verdicts into character memory."""
        return _VERDICT_PRIORITY[self]


_VERDICT_PRIORITY = {
    Verdict.CORRECT: 3,
    Verdict.PRESENT: 2,
    Verdict.ABSENT: 1,
}

# Priority of a character that has never been guessed
NO_VERDICT_PRIORITY = 0


class SessionStatus(Enum):
    """Overall outcome of a game session."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.IN_PROGRESS


class GuessError(Enum):
    """Recoverable reasons a submitted guess is rejected."""
    INCOMPLETE_GUESS = "incomplete_guess"
    INVALID_CANDIDATE = "invalid_candidate"
    GAME_OVER = "game_over"


Feedback = Tuple[Verdict, ...]


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one submit request, returned to the presentation layer."""
    status: SessionStatus
    feedback: Optional[Feedback] = None
    error: Optional[GuessError] = None
    answer: Optional[str] = None  # Only set once the session is terminal or revealed

    @property
    def accepted(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict:
        return {
            'status': self.status.value,
            'feedback': [verdict.value for verdict in self.feedback] if self.feedback is not None else None,
            'error': self.error.value if self.error else None,
            'answer': self.answer,
        }


@dataclass(frozen=True)
class KeyOutcome:
    """Result of dispatching one key label to a session."""
    action: str  # "input", "backspace", "submit" or "ignored"
    accepted: bool
    submit_result: Optional[SubmitResult] = None


@dataclass
class GameState:
    """Serializable snapshot of a game session."""
    game_id: Optional[str]
    status: str
    max_tries: int
    secret_length: int
    cursor_row: int
    cursor_col: int
    grid: List[List[str]]
    guesses: List[str]
    feedback: List[List[str]]  # Verdict values as strings for JSON serialization
    letter_memory: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over or revealed
    mode: str = "random"
    game_over: bool = field(init=False)
    won: bool = field(init=False)

    def __post_init__(self):
        self.game_over = self.status != SessionStatus.IN_PROGRESS.value
        self.won = self.status == SessionStatus.WON.value
