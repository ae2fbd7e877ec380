"""
Tests for configuration: game modes, word lists and the word source.
"""

import pytest

from ..config import (
    WORD_LISTS, WORD_SIZES, GameMode, MODE_RULES, TestingConfig, config,
    get_mode_rules, get_word_statistics, validate_word_list_integrity
)
from ..errors import ValidationError
from ..services.word_source import WordSource


class TestModeRules:
    """Tests for per-mode validation."""

    def test_modes_resolve_by_name(self):
        assert get_mode_rules("speed").mode is GameMode.SPEED
        assert get_mode_rules(GameMode.CLASSIC).mode is GameMode.CLASSIC

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            get_mode_rules("blitz")

    def test_only_speed_allows_timeout(self):
        assert MODE_RULES[GameMode.SPEED].allows_timeout
        assert not MODE_RULES[GameMode.CLASSIC].allows_timeout

    @pytest.mark.parametrize("mode", list(GameMode))
    @pytest.mark.parametrize("max_tries", [5, 6, 7])
    @pytest.mark.parametrize("word_size", [4, 5, 6])
    def test_valid_boards(self, mode, max_tries, word_size):
        MODE_RULES[mode].validate(max_tries, word_size)

    @pytest.mark.parametrize("max_tries,word_size", [(4, 5), (8, 5), (6, 3), (6, 7), (True, 5), (6, 5.0)])
    def test_invalid_boards(self, max_tries, word_size):
        with pytest.raises(ValidationError):
            MODE_RULES[GameMode.SPEED].validate(max_tries, word_size)


class TestWordLists:
    """Tests for the packaged word lists."""

    def test_lists_exist_for_every_size(self):
        assert set(WORD_LISTS) == set(WORD_SIZES)

    def test_integrity(self):
        assert validate_word_list_integrity() is True

    def test_integrity_rejects_duplicates(self):
        with pytest.raises(ValueError):
            validate_word_list_integrity({5: ["CRANE", "CRANE"]})

    def test_integrity_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            validate_word_list_integrity({5: ["CRANES"]})

    def test_integrity_rejects_lowercase(self):
        with pytest.raises(ValueError):
            validate_word_list_integrity({5: ["crane"]})

    def test_statistics(self):
        stats = get_word_statistics({5: ["CRANE", "SLATE"]})
        assert stats[5]["total_words"] == 2
        assert stats[5]["avg_vowel_count"] == 2.0


class TestWordSource:
    """Tests for dictionary lookups and target selection."""

    @pytest.fixture
    def source(self):
        return WordSource({4: ["game"], 5: ["Crane", "SLATE"]})

    def test_contains_normalizes(self, source):
        assert source.contains(" crane ")
        assert source.contains("GAME")
        assert not source.contains("ZZZZZ")
        assert not source.contains(None)

    def test_contains_for_length(self, source):
        assert source.contains_for_length("slate", 5)
        assert not source.contains_for_length("game", 5)

    def test_random_word(self, source):
        assert source.random_word(5) in {"CRANE", "SLATE"}

    def test_random_word_unknown_size(self, source):
        with pytest.raises(ValidationError):
            source.random_word(6)

    def test_default_lists(self):
        source = WordSource()
        assert source.word_sizes == WORD_SIZES
        assert source.contains("crane")


class TestAppConfig:

    def test_testing_config(self):
        assert config["testing"] is TestingConfig
        assert TestingConfig.STORE_BACKEND == "memory"
        assert TestingConfig.LOG_DIR == ""
