"""
Decorators

Contains decorators for HTTP and WebSocket session lookup, and for
serializing events applied to a single game.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def serialized(method):
    """Runs a method while holding the instance's ``_lock``."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def require_game(f):
    """
    Decorator for HTTP endpoints taking a ``game_id`` route parameter.

    Resolves the session and passes it as the ``game`` keyword argument, or
    answers 404 / 500 when it cannot.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game = game_service.get_game(kwargs.get('game_id'))
        if game is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['game'] = game
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload carries a ``game_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service or not args or not isinstance(args[0], dict) or 'game_id' not in args[0]:
            emit('error', {'error': 'game_id required'})
            return

        game = game_service.get_game(args[0]['game_id'])
        if game is None:
            emit('error', {'error': 'Game not found'})
            return

        kwargs['game'] = game
        return f(*args, **kwargs)

    return decorated_function
