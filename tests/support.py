"""Shared helpers for the test cases."""

CANDIDATES = [
    "crane", "stone", "slate", "apple", "spare", "press",
    "kar98", "lc-10", "ak74", "score streaks",
]


def pick(word):
    """Selection strategy that always chooses ``word``."""
    def select(candidates, context=None):
        return list(candidates).index(word)
    return select


def type_word(session, word):
    for ch in word:
        session.input_character(ch)
