"""
Controllers Package

Flask blueprints exposing the game API.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
