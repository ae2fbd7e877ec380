"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSession, GameStatus, GuessRecord, LetterOutcome, LetterResult

__all__ = ['GameSession', 'GameStatus', 'GuessRecord', 'LetterOutcome', 'LetterResult']
