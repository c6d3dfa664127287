"""
Services Package

Contains the game rules and session logic. The session registry used by the
web layer lives in ``game_service`` and is imported from there directly.
"""

from .candidates import Alphabet, CandidateSet, normalize
from .evaluator import evaluate, is_solved
from .game_session import GameSession
from .selection import DailySelection, RandomSelection, get_selection_strategy

__all__ = [
    'Alphabet', 'CandidateSet', 'normalize',
    'evaluate', 'is_solved',
    'GameSession',
    'DailySelection', 'RandomSelection', 'get_selection_strategy'
]
