"""
Game Service

Registry of game sessions for the HTTP and WebSocket layers.
"""

import uuid
from datetime import date
from functools import partial
from typing import Dict, Iterable, Optional

from ..config import Config, CANDIDATE_LIST, load_candidate_list
from ..models.game import GameState, KeyOutcome, SubmitResult
from .candidates import Alphabet, CandidateSet
from .game_session import GameSession
from .selection import SELECTION_STRATEGIES, get_selection_strategy

# Key labels sent by clients for the non-character keys
ENTER_KEYS = frozenset({'Enter'})
BACKSPACE_KEYS = frozenset({'Back', 'Backspace'})
SPACE_KEYS = frozenset({'Space'})

# Session events that are worth a line in the game log
LOGGED_EVENTS = frozenset({'game_won', 'game_lost', 'secret_revealed'})


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Secret selection through the configured strategy
    - Translating client input into exactly one session call
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self,
                 candidates: Iterable[str],
                 max_tries: int,
                 alphabet: Optional[Alphabet] = None,
                 default_mode: str = 'random',
                 selections: Optional[Dict[str, object]] = None):
        self.alphabet = alphabet or Alphabet()
        self.candidates = CandidateSet.coerce(candidates, self.alphabet)
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {max_tries}")
        self.max_tries = max_tries

        self.selections = {name: get_selection_strategy(name) for name in SELECTION_STRATEGIES}
        if selections:
            self.selections.update(selections)
        if default_mode not in self.selections:
            raise ValueError(f"Unknown selection mode '{default_mode}'")
        self.default_mode = default_mode

        self.games: Dict[str, GameSession] = {}  # Active sessions by game_id
        self.modes: Dict[str, str] = {}

    @property
    def available_modes(self):
        return list(self.selections)

    def create_new_game(self, mode: Optional[str] = None, selection_context: Optional[date] = None) -> str:
        """
        Creates a new game session.

        Args:
            mode: Selection mode ("random" or "daily"); defaults to the configured mode
            selection_context: Date for daily mode; today when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the mode is unknown
        """
        mode = mode or self.default_mode
        if mode not in self.selections:
            raise ValueError(
                f"Invalid game mode '{mode}'. Must be one of: {', '.join(self.selections)}"
            )

        game_id = str(uuid.uuid4())
        session = GameSession(
            self.candidates,
            self.max_tries,
            selection=self.selections[mode],
            alphabet=self.alphabet,
            selection_context=selection_context
        )
        session.subscribe(partial(self._log_session_event, game_id))

        self.games[game_id] = session
        self.modes[game_id] = mode
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The answer is only part of the state once the game is over or after an
        explicit reveal.
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.snapshot(game_id, self.modes[game_id])

    def input_character(self, game_id: str, ch: str) -> Optional[bool]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.input_character(ch)

    def backspace(self, game_id: str) -> Optional[bool]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.backspace()

    def submit_guess(self, game_id: str) -> Optional[SubmitResult]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.submit_guess()

    def reveal_answer(self, game_id: str) -> Optional[str]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.reveal()

    def press_key(self, game_id: str, key: str) -> Optional[KeyOutcome]:
        """
        Dispatches one key label to exactly one session call.

        Recognized labels: "Enter", "Back"/"Backspace", "Space", or a single
        character. Anything else is ignored.
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        if key in ENTER_KEYS:
            result = session.submit_guess()
            return KeyOutcome(action='submit', accepted=result.accepted, submit_result=result)
        if key in BACKSPACE_KEYS:
            return KeyOutcome(action='backspace', accepted=session.backspace())
        if key in SPACE_KEYS:
            key = ' '
        if isinstance(key, str) and len(key) == 1:
            return KeyOutcome(action='input', accepted=session.input_character(key))
        return KeyOutcome(action='ignored', accepted=False)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            del self.modes[game_id]
            return True
        return False

    def _log_session_event(self, game_id: str, event: str, payload: Dict) -> None:
        if event not in LOGGED_EVENTS:
            return
        from ..utils.game_logger import game_logger

        details = {key: value for key, value in payload.items() if key != 'answer'}
        game_logger.log_game_event(game_id, event, mode=self.modes.get(game_id), **details)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config,
                            candidates: Optional[Iterable[str]] = None,
                            selections: Optional[Dict[str, object]] = None) -> GameService:
    """
    Initialize the global game service instance from configuration.

    Args:
        config_class: Configuration class providing MAX_TRIES, SELECTION_MODE,
            ALLOWED_CHARACTERS and CANDIDATES_FILE
        candidates: Explicit candidate list; overrides CANDIDATES_FILE
        selections: Extra or replacement selection strategies by mode name
    """
    global _game_service

    if candidates is None:
        if config_class.CANDIDATES_FILE:
            candidates = load_candidate_list(config_class.CANDIDATES_FILE)
        else:
            candidates = CANDIDATE_LIST

    _game_service = GameService(
        candidates,
        config_class.MAX_TRIES,
        alphabet=Alphabet(config_class.ALLOWED_CHARACTERS),
        default_mode=config_class.SELECTION_MODE,
        selections=selections
    )
    return _game_service
