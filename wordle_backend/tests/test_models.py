"""
Tests for game data models and their serialization.
"""

from datetime import datetime, timezone

from ..models.game import GameSession, GameStatus, GuessRecord, LetterOutcome, LetterResult
from ..services.evaluator import evaluate_guess

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_session(status=GameStatus.PLAYING):
    guess = GuessRecord("CRATE", tuple(evaluate_guess("CRATE", "CRANE")), False)
    return GameSession(id=3, target_word="CRANE", max_tries=6, word_size=5, time_limit=45,
                       tries=[guess], game_status=status, created_at=NOW, updated_at=NOW)


class TestGameStatus:

    def test_only_playing_is_non_terminal(self):
        assert not GameStatus.PLAYING.is_terminal
        assert all(status.is_terminal for status in (GameStatus.WON, GameStatus.LOST, GameStatus.TIMED_OUT))


class TestGameSessionSerialization:
    """Tests for the API and storage representations."""

    def test_api_shape(self):
        data = make_session().to_dict()

        assert data["id"] == 3
        assert data["gameStatus"] == "playing"
        assert data["maxTries"] == 6
        assert data["wordSize"] == 5
        assert data["mode"] == "speed"
        assert data["timeLimit"] == 45
        assert data["createdAt"] == NOW.isoformat()
        assert data["tries"][0] == {
            "guessWord": "CRATE",
            "letterResultArray": [
                {"letter": "C", "status": "correct"},
                {"letter": "R", "status": "correct"},
                {"letter": "A", "status": "correct"},
                {"letter": "T", "status": "incorrect"},
                {"letter": "E", "status": "correct"},
            ],
            "isCorrect": False,
        }

    def test_target_hidden_while_playing(self):
        assert "targetWord" not in make_session().to_dict()

    def test_target_revealed_once_terminal(self):
        for status in (GameStatus.WON, GameStatus.LOST, GameStatus.TIMED_OUT):
            assert make_session(status).to_dict()["targetWord"] == "CRANE"

    def test_explicit_reveal(self):
        assert make_session().to_dict(reveal=True)["targetWord"] == "CRANE"

    def test_document_round_trip(self):
        session = make_session(GameStatus.LOST)
        assert GameSession.from_document(session.to_document()) == session

    def test_guess_record_round_trip(self):
        record = GuessRecord("ALLOY", (LetterResult("A", LetterOutcome.MISPLACED),), False)
        assert GuessRecord.from_dict(record.to_dict()) == record
