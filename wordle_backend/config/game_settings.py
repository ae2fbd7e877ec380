"""
Game Configuration Constants Module

This module defines the game rules: allowed board sizes, per-mode rules and
the curated word lists. All game parameters are centralized here so that
validation rules live next to the values they check.

"""

import json
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Final, List, Optional, Tuple

from ..errors import ValidationError

# Core Game Configuration Constants
MIN_MAX_TRIES: Final[int] = 5
MAX_MAX_TRIES: Final[int] = 7
WORD_SIZES: Final[Tuple[int, ...]] = (4, 5, 6)
DEFAULT_TIME_LIMIT_SECONDS: Final[int] = 45
"""
Seconds a speed game runs before the client reports a timeout.
"""


class GameMode(Enum):
    """Game modes understood by the server."""
    SPEED = "speed"
    CLASSIC = "classic"


@dataclass(frozen=True)
class ModeRules:
    """
    Validation rules attached to a single game mode.

    Attributes:
        mode: The mode these rules belong to
        min_tries: Smallest allowed max-tries value
        max_tries: Largest allowed max-tries value
        word_sizes: Allowed target word lengths
        time_limit: Seconds per game, or None when the mode is untimed
    """
    mode: GameMode
    min_tries: int
    max_tries: int
    word_sizes: Tuple[int, ...]
    time_limit: Optional[int] = None

    @property
    def allows_timeout(self) -> bool:
        return self.time_limit is not None

    def validate(self, max_tries: int, word_size: int) -> None:
        """
        Check a requested board configuration against this mode.

        Raises:
            ValidationError: If either parameter is out of range
        """
        if isinstance(max_tries, bool) or not isinstance(max_tries, int):
            raise ValidationError(f"maxTries must be an integer, got {max_tries!r}")
        if isinstance(word_size, bool) or not isinstance(word_size, int):
            raise ValidationError(f"wordSize must be an integer, got {word_size!r}")
        if max_tries < self.min_tries or max_tries > self.max_tries:
            raise ValidationError(
                f"maxTries must be between {self.min_tries} and {self.max_tries}, got {max_tries}"
            )
        if word_size not in self.word_sizes:
            raise ValidationError(
                f"wordSize must be between {min(self.word_sizes)} and {max(self.word_sizes)}, got {word_size}"
            )


MODE_RULES: Final[Dict[GameMode, ModeRules]] = {
    GameMode.SPEED: ModeRules(
        mode=GameMode.SPEED,
        min_tries=MIN_MAX_TRIES,
        max_tries=MAX_MAX_TRIES,
        word_sizes=WORD_SIZES,
        time_limit=DEFAULT_TIME_LIMIT_SECONDS,
    ),
    GameMode.CLASSIC: ModeRules(
        mode=GameMode.CLASSIC,
        min_tries=MIN_MAX_TRIES,
        max_tries=MAX_MAX_TRIES,
        word_sizes=WORD_SIZES,
    ),
}


def get_mode_rules(mode) -> ModeRules:
    """
    Resolve a mode name (or GameMode) to its rules.

    Raises:
        ValidationError: If the mode is unknown
    """
    try:
        return MODE_RULES[GameMode(mode)]
    except ValueError:
        valid = ', '.join(m.value for m in GameMode)
        raise ValidationError(f"Invalid game mode {mode!r}. Must be one of: {valid}")


# Load word lists from JSON files
def _load_word_list(word_size: int) -> List[str]:
    """
    Load the word list for a given length from words_<size>.json.

    Returns:
        List[str]: List of uppercase words of the requested length

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'data', f'words_{word_size}.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    # Convert all words to uppercase and validate
    uppercase_words = [word.strip().upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != word_size:
            raise ValueError(f"Word '{word}' is not {word_size} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Curated Word Database keyed by word length
WORD_LISTS: Final[Dict[int, List[str]]] = {size: _load_word_list(size) for size in WORD_SIZES}


def validate_word_list_integrity(word_lists: Optional[Dict[int, List[str]]] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: Every word matches the length of its list
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    word_lists = WORD_LISTS if word_lists is None else word_lists

    for size, words in word_lists.items():
        if not words:
            raise ValueError(f"Word list for size {size} cannot be empty")

        for index, word in enumerate(words):
            if len(word) != size:
                raise ValueError(f"Word at index {index} '{word}' is not {size} characters long")

            if not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

            if not word.isupper():
                raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {size}-letter list: {duplicates}")

    return True


def get_word_statistics(word_lists: Optional[Dict[int, List[str]]] = None) -> dict:
    """
    Analyzes word lists and returns statistical information for game balancing.

    Returns:
        dict: Per word size, the total word count, average vowels per word
        and the five most common letters

    """
    word_lists = WORD_LISTS if word_lists is None else word_lists
    vowels = set('AEIOU')
    stats = {}

    for size, words in word_lists.items():
        if not words:
            stats[size] = {"error": "Word list is empty"}
            continue

        total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

        letter_frequency: Dict[str, int] = {}
        for word in words:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        stats[size] = {
            "total_words": len(words),
            "avg_vowel_count": round(total_vowels / len(words), 2),
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }

    return stats


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        print(f" Game statistics: {get_word_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
