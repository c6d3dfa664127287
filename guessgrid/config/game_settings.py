"""
Game Configuration Constants Module

Game rules and the default candidate list. Everything that changes how a game
is played is centralized here; environment overrides live in app_config.py.
"""

import json
import os
from typing import Final, List, Optional

from ..services.candidates import DEFAULT_ALLOWED_CHARACTERS, Alphabet, normalize

# Core Game Configuration Constants
MAX_TRIES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_CANDIDATES_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'candidates.json'
)


def load_candidate_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load the candidate list from a JSON file.

    Args:
        json_file_path: JSON array of strings; defaults to the shipped candidates.json

    Returns:
        List[str]: Lowercase candidates in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, not an array, or empty
    """
    json_file_path = json_file_path or DEFAULT_CANDIDATES_FILE

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            candidates = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Candidate list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(candidates, list):
        raise ValueError("JSON file must contain an array of strings")

    if not candidates:
        raise ValueError("Candidate list cannot be empty")

    if not all(isinstance(candidate, str) for candidate in candidates):
        raise ValueError("Every candidate must be a string")

    return [normalize(candidate) for candidate in candidates]


# Curated candidate database loaded from JSON file
CANDIDATE_LIST: Final[List[str]] = load_candidate_list()


def validate_candidate_list_integrity(candidates: Optional[List[str]] = None,
                                      allowed_characters: str = DEFAULT_ALLOWED_CHARACTERS) -> bool:
    """
    Validates the integrity and consistency of a candidate list.

    Checks performed:
    1. Non-empty list, non-empty entries
    2. Only allowed characters
    3. Consistent lowercase formatting
    4. No duplicate entries

    Returns:
        bool: True if the list passes all checks

    Raises:
        ValueError: If any check fails, with a detailed message
    """
    candidates = CANDIDATE_LIST if candidates is None else candidates
    alphabet = Alphabet(allowed_characters)

    if not candidates:
        raise ValueError("Candidate list cannot be empty")

    for index, candidate in enumerate(candidates):
        if not candidate:
            raise ValueError(f"Candidate at index {index} is empty")

        if not alphabet.is_composed_of(candidate):
            raise ValueError(f"Candidate at index {index} '{candidate}' contains disallowed characters")

        if candidate != normalize(candidate):
            raise ValueError(f"Candidate at index {index} '{candidate}' is not in lowercase format")

    if len(candidates) != len(set(candidates)):
        duplicates = sorted({c for c in candidates if candidates.count(c) > 1})
        raise ValueError(f"Duplicate candidates found: {duplicates}")

    return True


def get_candidate_statistics(candidates: Optional[List[str]] = None) -> dict:
    """
    Summarizes a candidate list for game balancing.

    Returns:
        dict: total_candidates, length range, length distribution and the
        most common characters
    """
    candidates = CANDIDATE_LIST if candidates is None else candidates
    if not candidates:
        return {"error": "Candidate list is empty"}

    lengths = [len(candidate) for candidate in candidates]
    length_distribution = {}
    for length in lengths:
        length_distribution[length] = length_distribution.get(length, 0) + 1

    character_frequency = {}
    for candidate in candidates:
        for char in candidate:
            character_frequency[char] = character_frequency.get(char, 0) + 1

    return {
        "total_candidates": len(candidates),
        "min_length": min(lengths),
        "max_length": max(lengths),
        "length_distribution": dict(sorted(length_distribution.items())),
        "most_common_characters": sorted(character_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_candidate_list_integrity()
        print(" Candidate list validation passed")

        stats = get_candidate_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
