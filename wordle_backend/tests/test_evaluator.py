"""
Tests for the guess evaluator.

Tests:
- Exact matches and worked examples
- Duplicate letter accounting
- Case normalization
- Length mismatches
"""

from collections import Counter

import pytest

from ..models.game import LetterOutcome
from ..services.evaluator import evaluate_guess

M = LetterOutcome.MATCH
P = LetterOutcome.MISPLACED
A = LetterOutcome.ABSENT


def outcomes(guess, target):
    return [result.status for result in evaluate_guess(guess, target)]


class TestEvaluateGuess:
    """Worked examples."""

    @pytest.mark.parametrize("word", ["GAME", "CRANE", "ALLOY", "PLANET", "EERIE"])
    def test_same_word_is_all_match(self, word):
        assert outcomes(word, word) == [M] * len(word)

    def test_crate_against_crane(self):
        assert outcomes("CRATE", "CRANE") == [M, M, M, A, M]

    def test_lolly_against_alloy(self):
        """L appears twice in ALLOY: the exact L wins, only one other L is marked."""
        assert outcomes("LOLLY", "ALLOY") == [P, P, M, A, M]

    def test_misplaced_uses_letter_counts_not_positions(self):
        assert outcomes("SPEED", "ABIDE") == [A, A, P, A, P]

    def test_exact_match_preferred_over_earlier_misplaced(self):
        # The first E would be misplaced, but the only E in TRACE is taken by the exact match
        assert outcomes("EERIE", "TRACE") == [A, A, P, A, M]

    def test_results_carry_uppercase_letters(self):
        results = evaluate_guess("crate", "crane")
        assert [result.letter for result in results] == list("CRATE")

    def test_comparison_is_case_insensitive(self):
        assert outcomes("cRaNe", "CrAnE") == [M] * 5

    def test_nothing_in_common(self):
        assert outcomes("GHOST", "CRANE") == [A] * 5


class TestLengthMismatch:
    """Evaluation aligns by position up to the shorter word."""

    def test_longer_guess_gets_one_result_per_letter(self):
        assert outcomes("CRANES", "CRANE") == [M, M, M, M, M, A]

    def test_shorter_guess(self):
        assert outcomes("CRA", "CRANE") == [M, M, M]

    def test_letters_past_target_can_still_be_misplaced(self):
        assert outcomes("XXXXXA", "ABCDE") == [A, A, A, A, A, P]


class TestMultisetBound:
    """No letter gets more non-absent marks than it has occurrences in the target."""

    PAIRS = [
        ("LOLLY", "ALLOY"),
        ("SPEED", "ABIDE"),
        ("EERIE", "TRACE"),
        ("LLAMA", "HELLO"),
        ("AAAAA", "ABACA"),
        ("BOOKS", "OBOES"),
        ("MAMMA", "MAXIM"),
    ]

    @pytest.mark.parametrize("guess,target", PAIRS)
    def test_non_absent_count_bounded_by_target_count(self, guess, target):
        target_counts = Counter(target)
        marked = Counter(
            result.letter for result in evaluate_guess(guess, target)
            if result.status is not LetterOutcome.ABSENT
        )
        for letter, count in marked.items():
            assert count <= target_counts[letter]

    @pytest.mark.parametrize("guess,target", PAIRS)
    def test_match_exactly_where_letters_agree(self, guess, target):
        for i, result in enumerate(evaluate_guess(guess, target)):
            assert (result.status is LetterOutcome.MATCH) == (guess[i] == target[i])
