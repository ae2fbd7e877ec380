"""
Word Source

Random target selection and dictionary lookups over the curated word lists.
"""

import random
from typing import Dict, Iterable, Optional

from ..config.game_settings import WORD_LISTS
from ..errors import ValidationError


class WordSource:
    """
    Curated word lists keyed by word length.

    Words are normalized to uppercase on load and on lookup, so callers may
    pass any case and surrounding whitespace.
    """

    def __init__(self, word_lists: Optional[Dict[int, Iterable[str]]] = None, rng: Optional[random.Random] = None):
        word_lists = WORD_LISTS if word_lists is None else word_lists
        self._lists = {
            size: sorted({word.strip().upper() for word in words})
            for size, words in word_lists.items()
        }
        self._sets = {size: set(words) for size, words in self._lists.items()}
        self._rng = rng or random.Random()

    @property
    def word_sizes(self):
        return tuple(sorted(self._lists))

    def random_word(self, length: int) -> str:
        """
        Pick a random target word of the given length.

        Raises:
            ValidationError: If there is no word list for that length
        """
        words = self._lists.get(length)
        if not words:
            raise ValidationError(f"No word list available for word size {length}")
        return self._rng.choice(words)

    def contains(self, word: str) -> bool:
        """Membership test against the list matching the word's own length."""
        if not isinstance(word, str):
            return False
        normalized = word.strip().upper()
        return normalized in self._sets.get(len(normalized), ())

    def contains_for_length(self, word: str, length: int) -> bool:
        """Membership test restricted to the list of a given length."""
        if not isinstance(word, str):
            return False
        normalized = word.strip().upper()
        return len(normalized) == length and normalized in self._sets.get(length, ())
