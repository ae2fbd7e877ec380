"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class LetterOutcome(Enum):
    """Letter evaluation status, using the wire strings of the web client."""
    MATCH = "correct"
    MISPLACED = "incorrect-position"
    ABSENT = "incorrect"


class GameStatus(Enum):
    """Lifecycle status of a game session."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    TIMED_OUT = "timeout"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


@dataclass(frozen=True)
class LetterResult:
    """Evaluation of a single guessed letter."""
    letter: str
    status: LetterOutcome

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'LetterResult':
        return cls(letter=data['letter'], status=LetterOutcome(data['status']))


@dataclass(frozen=True)
class GuessRecord:
    """A complete guess attempt with its evaluation."""
    guess_word: str
    letter_results: Tuple[LetterResult, ...]
    is_correct: bool

    @property
    def outcomes(self) -> List[LetterOutcome]:
        return [result.status for result in self.letter_results]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guessWord': self.guess_word,
            'letterResultArray': [result.to_dict() for result in self.letter_results],
            'isCorrect': self.is_correct,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GuessRecord':
        return cls(
            guess_word=data['guessWord'],
            letter_results=tuple(LetterResult.from_dict(item) for item in data['letterResultArray']),
            is_correct=bool(data['isCorrect']),
        )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameSession:
    """
    Server-side game state representation.

    The target word is fixed at creation and is only serialized for clients
    once the game reaches a terminal status. ``version`` counts persisted
    mutations and is used by the stores for compare-and-swap updates.
    """
    id: int
    target_word: str
    max_tries: int
    word_size: int
    mode: str = "speed"
    time_limit: Optional[int] = None
    tries: List[GuessRecord] = field(default_factory=list)
    game_status: GameStatus = GameStatus.PLAYING
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    version: int = 0

    @property
    def is_playable(self) -> bool:
        return self.game_status is GameStatus.PLAYING

    @property
    def tries_used(self) -> int:
        return len(self.tries)

    def to_dict(self, reveal: Optional[bool] = None) -> Dict[str, Any]:
        """
        JSON representation for API responses.

        Args:
            reveal: Include the target word. Defaults to revealing only once
                the game has ended.
        """
        if reveal is None:
            reveal = self.game_status.is_terminal

        data = {
            'id': self.id,
            'tries': [guess.to_dict() for guess in self.tries],
            'gameStatus': self.game_status.value,
            'mode': self.mode,
            'maxTries': self.max_tries,
            'wordSize': self.word_size,
            'timeLimit': self.time_limit,
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat(),
        }
        if reveal:
            data['targetWord'] = self.target_word
        return data

    def to_document(self) -> Dict[str, Any]:
        """Storage representation, target word and version included."""
        return {
            '_id': self.id,
            'target_word': self.target_word,
            'tries': [guess.to_dict() for guess in self.tries],
            'game_status': self.game_status.value,
            'mode': self.mode,
            'time_limit': self.time_limit,
            'max_tries': self.max_tries,
            'word_size': self.word_size,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'version': self.version,
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'GameSession':
        return cls(
            id=int(document['_id']),
            target_word=document['target_word'],
            tries=[GuessRecord.from_dict(item) for item in document.get('tries') or []],
            game_status=GameStatus(document['game_status']),
            mode=document.get('mode', 'speed'),
            time_limit=document.get('time_limit'),
            max_tries=int(document['max_tries']),
            word_size=int(document['word_size']),
            created_at=_as_utc(document['created_at']),
            updated_at=_as_utc(document['updated_at']),
            version=int(document.get('version', 0)),
        )


def _as_utc(value: datetime) -> datetime:
    # pymongo hands back naive datetimes unless the client is tz_aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
