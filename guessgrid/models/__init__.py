"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import (
    Feedback, GameState, GuessError, KeyOutcome, SessionStatus, SubmitResult, Verdict,
    NO_VERDICT_PRIORITY
)

__all__ = [
    'Feedback', 'GameState', 'GuessError', 'KeyOutcome', 'SessionStatus', 'SubmitResult', 'Verdict',
    'NO_VERDICT_PRIORITY'
]
