"""
Guess Evaluator

Pure per-character feedback computation with duplicate-character handling.
"""

from typing import Dict, List, Optional

from ..models.game import Feedback, Verdict


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Evaluates a guess against the secret.

    Exact matches are resolved first; the remaining secret characters are then
    handed out as PRESENT from left to right, so a repeated guess character is
    never marked more often than it occurs in the secret.

    Args:
        secret: The hidden item
        guess: A guess of the same length as the secret

    Returns:
        Tuple of verdicts, one per position
    """
    verdicts: List[Optional[Verdict]] = [None] * len(secret)
    remaining: Dict[str, int] = {}

    # First pass: exact matches, tally the unmatched secret characters
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            verdicts[i] = Verdict.CORRECT
        else:
            remaining[s] = remaining.get(s, 0) + 1

    # Second pass: hand out what is left
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if remaining.get(g, 0) > 0:
            verdicts[i] = Verdict.PRESENT
            remaining[g] -= 1
        else:
            verdicts[i] = Verdict.ABSENT

    return tuple(verdicts)


def is_solved(feedback: Feedback) -> bool:
    """True when every verdict is CORRECT."""
    return all(verdict is Verdict.CORRECT for verdict in feedback)
