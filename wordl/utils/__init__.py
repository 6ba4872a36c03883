"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, serialized, websocket_game_required
from .helpers import get_int_field, get_user_identity
from .game_logger import game_logger

__all__ = ['require_game', 'serialized', 'websocket_game_required',
           'get_int_field', 'get_user_identity', 'game_logger']
