"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List

from ..models.game import LetterOutcome, LetterResult


def evaluate_guess(guess_word: str, target_word: str) -> List[LetterResult]:
    """
    Evaluates a guess against the target word, one result per guessed letter.

    First pass marks exact position matches, second pass marks letters
    present elsewhere. Each letter of the target can be consumed only once,
    so duplicate letters in the guess are never over-counted and exact
    matches take priority over misplaced ones.

    Words of different lengths are compared position by position up to the
    shorter of the two.

    Args:
        guess_word: The guessed word (any case)
        target_word: The hidden word (any case)

    Returns:
        List of LetterResult with uppercase letters
    """
    guess = guess_word.upper()
    target = target_word.upper()

    # Letters still available for MATCH / MISPLACED
    remaining = Counter(target)
    outcomes: List[LetterOutcome] = [None] * len(guess)  # type: ignore

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if i < len(target) and target[i] == letter:
            outcomes[i] = LetterOutcome.MATCH
            remaining[letter] -= 1

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if outcomes[i] is not None:
            continue
        if remaining[letter] > 0:
            outcomes[i] = LetterOutcome.MISPLACED
            remaining[letter] -= 1
        else:
            outcomes[i] = LetterOutcome.ABSENT

    return [LetterResult(letter=letter, status=status) for letter, status in zip(guess, outcomes)]
