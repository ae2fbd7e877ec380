"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity, get_json_body, parse_int_field
from .game_logger import game_logger

__all__ = ['get_user_identity', 'get_json_body', 'parse_int_field', 'game_logger']
