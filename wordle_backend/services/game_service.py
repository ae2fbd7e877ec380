"""
Game Service

Contains the core game lifecycle for Wordle sessions: creation, guess
submission, forfeit and timeout.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional

from ..config.game_settings import get_mode_rules
from ..errors import InvalidWordError, NotPlayableError, ValidationError
from ..models.game import GameSession, GameStatus, GuessRecord, utc_now
from .evaluator import evaluate_guess
from .game_store import GAME_STATES, GameStore
from .word_source import WordSource

logger = logging.getLogger(__name__)


def determine_game_status(session: GameSession, is_correct: bool) -> GameStatus:
    """
    Status after the next guess is appended to ``session``.

    Won on an exact match, lost when this guess uses up the last try,
    otherwise unchanged.
    """
    if is_correct:
        return GameStatus.WON
    if session.tries_used + 1 >= session.max_tries:
        return GameStatus.LOST
    return session.game_status


class GameService:
    """
    Core game service operating on an explicit store.

    This class handles:
    - Game session creation with store-assigned identifiers
    - Word selection and secure answer storage
    - Guess validation and evaluation
    - Terminal transitions (forfeit, timeout)

    Sessions are never cached: every operation re-reads the store. Mutations
    of one game are serialized through a per-game lock, and the store rejects
    stale writes from other processes with ConflictError.
    """

    def __init__(self, store: GameStore, words: Optional[WordSource] = None, clock: Optional[Callable] = None):
        self.store = store
        self.words = words or WordSource()
        self.clock = clock or utc_now
        self._locks: Dict[int, list] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _game_lock(self, game_id: int):
        """
        Hold the lock for one game.

        Entries are reference counted and dropped once no caller holds or
        waits on them, so unknown ids never accumulate.
        """
        with self._locks_guard:
            entry = self._locks.get(game_id)
            if entry is None:
                entry = self._locks[game_id] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[game_id]

    def create_new_game(self, max_tries: int, word_size: int, mode: str = "speed") -> GameSession:
        """
        Creates and persists a new game session with a randomly selected word.

        Args:
            max_tries: Number of guesses allowed (5-7)
            word_size: Length of the target word (4-6)
            mode: Game mode name

        Returns:
            GameSession: The stored session, status playing

        Raises:
            ValidationError: If the configuration is not allowed for the mode
        """
        rules = get_mode_rules(mode)
        rules.validate(max_tries, word_size)

        # Select random word (server keeps this secret)
        target_word = self.words.random_word(word_size)
        now = self.clock()

        session = GameSession(
            id=self.store.next_identifier(GAME_STATES),
            target_word=target_word,
            max_tries=max_tries,
            word_size=word_size,
            mode=rules.mode.value,
            time_limit=rules.time_limit,
            created_at=now,
            updated_at=now,
        )
        self.store.insert(session)

        logger.info("Created game %s (mode=%s, word_size=%s, max_tries=%s)",
                    session.id, session.mode, word_size, max_tries)
        return session

    def get_game(self, game_id: int) -> GameSession:
        """Load a session, raising NotFoundError if it does not exist."""
        return self.store.find_by_identifier(game_id)

    def list_games(self) -> List[GameSession]:
        return self.store.find_all()

    def make_guess(self, game_id: int, guess_word: str) -> GameSession:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Game identifier
            guess_word: The guessed word (any case, surrounding whitespace ignored)

        Returns:
            GameSession: The refreshed session after the guess is stored

        Raises:
            ValidationError: If the guess is empty or not a string
            NotFoundError: If the game does not exist
            NotPlayableError: If the game has already ended
            InvalidWordError: If the word is not in the list for the game's word size
            ConflictError: If another writer updated the game first
        """
        if not isinstance(guess_word, str) or not guess_word.strip():
            raise ValidationError("guessWord is required")

        normalized_guess = guess_word.strip().upper()

        with self._game_lock(game_id):
            session = self.store.find_by_identifier(game_id)

            if not session.is_playable:
                raise NotPlayableError(
                    f"Game state {game_id} is already over (status: {session.game_status.value})"
                )

            if not self.words.contains_for_length(normalized_guess, session.word_size):
                logger.info("Rejected word %s for game %s", normalized_guess, game_id)
                raise InvalidWordError(guess_word.strip())

            guess = GuessRecord(
                guess_word=normalized_guess,
                letter_results=tuple(evaluate_guess(normalized_guess, session.target_word)),
                is_correct=normalized_guess == session.target_word.upper(),
            )
            new_status = determine_game_status(session, guess.is_correct)

            self.store.replace_guesses_and_status(
                game_id, [guess], new_status, self.clock(), expected_version=session.version
            )

            if new_status is not session.game_status:
                logger.info("Game %s finished: %s after %s tries",
                            game_id, new_status.value, session.tries_used + 1)

            return self.store.find_by_identifier(game_id)

    def forfeit_game(self, game_id: int) -> GameSession:
        """
        Marks a game as lost because the player left.

        Forfeiting an already lost game returns it unchanged.

        Raises:
            NotFoundError: If the game does not exist
            NotPlayableError: If the game was won or timed out
        """
        return self._end_game(game_id, GameStatus.LOST)

    def timeout_game(self, game_id: int) -> GameSession:
        """
        Marks a timed game as timed out.

        Raises:
            NotFoundError: If the game does not exist
            NotPlayableError: If the game's mode has no time limit, or it already ended otherwise
        """
        return self._end_game(game_id, GameStatus.TIMED_OUT)

    def _end_game(self, game_id: int, new_status: GameStatus) -> GameSession:
        with self._game_lock(game_id):
            session = self.store.find_by_identifier(game_id)

            if new_status is GameStatus.TIMED_OUT and not get_mode_rules(session.mode).allows_timeout:
                raise NotPlayableError(f"Game state {game_id} has no time limit ({session.mode} mode)")

            if session.game_status is new_status:
                return session

            if not session.is_playable:
                raise NotPlayableError(
                    f"Game state {game_id} is already over (status: {session.game_status.value})"
                )

            self.store.set_status(game_id, new_status, self.clock(), expected_version=session.version)
            logger.info("Game %s ended: %s", game_id, new_status.value)

            return self.store.find_by_identifier(game_id)
