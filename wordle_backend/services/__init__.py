"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess
from .game_service import GameService, determine_game_status
from .game_store import GameStore, InMemoryGameStore, MongoGameStore, create_store
from .word_source import WordSource

__all__ = [
    'evaluate_guess',
    'GameService', 'determine_game_status',
    'GameStore', 'InMemoryGameStore', 'MongoGameStore', 'create_store',
    'WordSource'
]
