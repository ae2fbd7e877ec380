"""
Game Errors

Error kinds raised by the game core and translated into JSON responses
by the controllers.
"""

from typing import Any, Dict, Optional


class GameError(Exception):
    """Base class for every error reported to API callers."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}

    def to_dict(self) -> Dict[str, Any]:
        return {'success': False, 'error': self.message, **self.payload}


class ValidationError(GameError):
    """Bad game configuration or malformed request."""
    status_code = 400


class InvalidWordError(GameError):
    """Guess is not in the dictionary for the session's word size."""
    status_code = 400

    def __init__(self, guess_word: str):
        super().__init__(
            f"Invalid word: {guess_word} is not a valid word",
            payload={'invalid_guess_word': guess_word},
        )
        self.guess_word = guess_word


class NotFoundError(GameError):
    """Unknown game state identifier."""
    status_code = 404

    def __init__(self, game_id: int):
        super().__init__(f"Game state {game_id} not found")
        self.game_id = game_id


class NotPlayableError(GameError):
    """Operation is not allowed in the game's current status."""
    status_code = 409


class ConflictError(GameError):
    """Another request modified the game state concurrently."""
    status_code = 409


class StoreError(GameError):
    """Persistence failure. The underlying exception is chained as __cause__."""
    status_code = 500
