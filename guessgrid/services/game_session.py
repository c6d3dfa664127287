"""
Game Session

Stateful controller for one game: secret, attempt grid, cursor, character
feedback memory and status. Presentation code drives it one call per input
event and renders what it returns; subscribed listeners are told about every
state change.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..models.game import (
    Feedback, GameState, GuessError, SessionStatus, SubmitResult, Verdict, NO_VERDICT_PRIORITY
)
from .candidates import Alphabet, CandidateSet, normalize
from .evaluator import evaluate, is_solved
from .selection import RandomSelection, SelectionContext

logger = logging.getLogger('guessgrid.session')

Listener = Callable[[str, Dict], None]

EMPTY_SLOT = ""


class GameSession:
    """
    One game against a fixed candidate set.

    The session is started on construction; ``start`` may be called again at
    any time to discard everything and begin a new game.
    """

    def __init__(self,
                 candidates: Union[CandidateSet, Iterable[str]],
                 max_tries: int,
                 selection: Callable = None,
                 alphabet: Alphabet = None,
                 selection_context: SelectionContext = None):
        self.selection = selection or RandomSelection()
        self.alphabet = alphabet
        self._listeners: List[Listener] = []
        self.start(candidates, max_tries, selection_context)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self,
              candidates: Union[CandidateSet, Iterable[str]],
              max_tries: int,
              selection_context: SelectionContext = None) -> None:
        """Selects a new secret and resets every piece of game state."""
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {max_tries}")

        candidate_set = CandidateSet.coerce(candidates, self.alphabet)
        if self.alphabet is None:
            self.alphabet = candidate_set.alphabet

        secret = candidate_set[self.selection(candidate_set, selection_context)]
        if not self.alphabet.is_composed_of(secret):
            raise ValueError(f"Secret '{secret}' contains characters outside the session alphabet")

        self._candidates = candidate_set
        self._secret = secret
        self._max_tries = max_tries
        self._grid: List[List[str]] = [[EMPTY_SLOT] * len(secret) for _ in range(max_tries)]
        self._row = 0
        self._col = 0
        self._memory: Dict[str, Verdict] = {}
        self._history: List[Tuple[str, Feedback]] = []
        self._status = SessionStatus.IN_PROGRESS
        self._revealed = False

        logger.debug("Session started: length=%d max_tries=%d", len(secret), max_tries)
        self._emit('game_started', {'secret_length': len(secret), 'max_tries': max_tries})

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def input_character(self, ch: str) -> bool:
        """
        Writes one character at the cursor.

        Returns:
            bool: False when ignored (game over, row full or disallowed character)
        """
        if self._status.is_terminal or self._col >= self.secret_length:
            return False
        if not self.alphabet.allows(ch):
            return False

        self._grid[self._row][self._col] = normalize(ch)
        self._col += 1
        self._emit('grid_updated', {'row': self._row, 'col': self._col})
        return True

    def backspace(self) -> bool:
        """Clears the slot left of the cursor; False when there is nothing to clear."""
        if self._status.is_terminal or self._col == 0:
            return False

        self._col -= 1
        self._grid[self._row][self._col] = EMPTY_SLOT
        self._emit('grid_updated', {'row': self._row, 'col': self._col})
        return True

    def submit_guess(self) -> SubmitResult:
        """
        Evaluates the current row.

        Rejected guesses leave grid, cursor and status untouched and are
        reported through ``SubmitResult.error``.
        """
        if self._status.is_terminal:
            return self._reject(GuessError.GAME_OVER)
        if self._col != self.secret_length:
            return self._reject(GuessError.INCOMPLETE_GUESS)

        guess = normalize("".join(self._grid[self._row]))
        if guess not in self._candidates:
            return self._reject(GuessError.INVALID_CANDIDATE, guess=guess)

        feedback = evaluate(self._secret, guess)
        row = self._row
        self._remember(guess, feedback)
        self._history.append((guess, feedback))

        # Win is checked before exhaustion so the last try can still win
        if is_solved(feedback):
            self._status = SessionStatus.WON
        else:
            self._row += 1
            self._col = 0
            if self._row == self._max_tries:
                self._status = SessionStatus.LOST

        # State is complete before listeners run
        self._emit('guess_evaluated', {
            'row': row,
            'guess': guess,
            'feedback': [verdict.value for verdict in feedback],
        })
        if self._status is SessionStatus.WON:
            self._emit('game_won', {'tries': len(self._history), 'answer': self._secret})
        elif self._status is SessionStatus.LOST:
            self._emit('game_lost', {'tries': len(self._history), 'answer': self._secret})

        return SubmitResult(status=self._status, feedback=feedback, answer=self.secret)

    def reveal(self) -> str:
        """Explicit reveal request; the game itself carries on."""
        self._revealed = True
        self._emit('secret_revealed', {'status': self._status.value})
        return self._secret

    def _reject(self, error: GuessError, **details) -> SubmitResult:
        logger.debug("Guess rejected: %s", error.value)
        self._emit('guess_rejected', {'error': error.value, 'row': self._row, **details})
        return SubmitResult(status=self._status, error=error, answer=self.secret)

    def _remember(self, guess: str, feedback: Feedback) -> None:
        """Folds verdicts into character memory; a character never downgrades."""
        for ch, verdict in zip(guess, feedback):
            current = self._memory.get(ch)
            current_priority = current.priority if current else NO_VERDICT_PRIORITY
            if verdict.priority > current_priority:
                self._memory[ch] = verdict

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Registers ``listener(event, payload)`` for state-change events."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str, payload: Dict) -> None:
        for listener in list(self._listeners):
            listener(event, payload)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def cursor(self) -> Tuple[int, int]:
        return self._row, self._col

    @property
    def grid(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    @property
    def letter_memory(self) -> Dict[str, Verdict]:
        return dict(self._memory)

    @property
    def guesses(self) -> List[Tuple[str, Feedback]]:
        return list(self._history)

    @property
    def secret_length(self) -> int:
        return len(self._secret)

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @property
    def candidates(self) -> CandidateSet:
        return self._candidates

    @property
    def secret(self) -> Optional[str]:
        """The secret, once the game is over or after a reveal request."""
        if self._status.is_terminal or self._revealed:
            return self._secret
        return None

    def snapshot(self, game_id: Optional[str] = None, mode: str = RandomSelection.name) -> GameState:
        """Serializable view of the session for rendering."""
        return GameState(
            game_id=game_id,
            status=self._status.value,
            max_tries=self._max_tries,
            secret_length=self.secret_length,
            cursor_row=self._row,
            cursor_col=self._col,
            grid=[list(row) for row in self._grid],
            guesses=[guess for guess, _ in self._history],
            feedback=[[verdict.value for verdict in feedback] for _, feedback in self._history],
            letter_memory={ch: verdict.value for ch, verdict in self._memory.items()},
            answer=self.secret,
            mode=mode
        )
