"""
WebSocket Event Handlers

Lets a client drive its game with key presses and menu actions and receive
the new state after each event. Each game has its own room.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.catalog import NoWordAvailableError
from ..models.game import GuessOutcome
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_int_field


def _broadcast_state(game, **extra):
    emit('game_state', {'state': game.snapshot(), **extra}, to=game.game_id)


def _log_round_end(game, outcome):
    if outcome in (GuessOutcome.WON, GuessOutcome.LOST):
        game_logger.log_game_event(
            game.game_id, 'game_won' if outcome is GuessOutcome.WON else 'game_lost',
            request.remote_addr,
            rounds_used=game.history.attempts, target_word=game.options.word
        )


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game=None):
        """Join the room of a game and receive its state."""
        join_room(game.game_id)
        game_logger.log_user_action(request, 'join_game', game.game_id)
        emit('game_state', {'state': game.snapshot()})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game=None):
        leave_room(game.game_id)
        game_logger.log_user_action(request, 'leave_game', game.game_id)

    @socketio.on('key')
    @websocket_game_required
    def handle_key(data, game=None):
        """
        Key press from the on-screen or physical keyboard.

        ``key`` is a single character, ``BACKSPACE`` or ``ENTER``.
        """
        key = data.get('key')
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'key required'})
            return

        if key.upper() == 'BACKSPACE':
            game.backspace()
            _broadcast_state(game)
        elif key.upper() == 'ENTER':
            guess = game.current_input
            game_logger.log_user_action(request, 'submit_guess', game.game_id, guess=guess)
            outcome = game.submit_input()
            _log_round_end(game, outcome)
            _broadcast_state(game, outcome=outcome.value)
        else:
            game.type_character(key)
            _broadcast_state(game)

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game=None):
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required'})
            return

        game_logger.log_user_action(request, 'submit_guess', game.game_id, guess=guess)
        outcome = game.submit_guess(guess)
        _log_round_end(game, outcome)
        _broadcast_state(game, outcome=outcome.value)

    @socketio.on('menu_action')
    @websocket_game_required
    def handle_menu_action(data, game=None):
        action = data.get('action')
        game_logger.log_user_action(request, 'menu_action', game.game_id, menu_action=action)

        try:
            applied = game.apply_action(
                action,
                language=data.get('language'),
                word_length=get_int_field(data, 'word_length'),
                max_attempts=get_int_field(data, 'max_attempts'),
            )
        except (NoWordAvailableError, ValueError) as e:
            game_logger.log_error(request, e, 'menu_action', game.game_id)
            emit('error', {'error': str(e)})
            return

        if not applied:
            emit('error', {'error': f"Action '{action}' not available in state '{game.state.kind.value}'"})
            return

        _broadcast_state(game, action=action)
