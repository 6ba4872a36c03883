"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.catalog import NoWordAvailableError
from ..services.game_service import get_game_service
from ..models.game import GuessOutcome
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import get_int_field

game_bp = Blueprint('game', __name__)


def _log_round_end(game, outcome, guess):
    """Log special game events."""
    if outcome is GuessOutcome.WON:
        game_logger.log_game_event(
            game.game_id, 'game_won', request.remote_addr,
            rounds_used=game.history.attempts, target_word=game.options.word,
            winning_guess=guess
        )
    elif outcome is GuessOutcome.LOST:
        game_logger.log_game_event(
            game.game_id, 'game_lost', request.remote_addr,
            rounds_used=game.history.attempts, target_word=game.options.word,
            final_guess=guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        language = data.get('language')
        word_length = get_int_field(data, 'word_length')
        max_attempts = get_int_field(data, 'max_attempts')

        # Log user action
        game_logger.log_user_action(
            request, 'new_game',
            language=language, word_length=word_length, max_attempts=max_attempts
        )

        game_id = game_service.create_new_game(language, word_length, max_attempts)
        game = game_service.get_game(game_id)
        state = game.snapshot()

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': state
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_attempts=state['max_attempts']
        )

        return jsonify(response_data)

    except NoWordAvailableError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 422

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    response_data = {
        'success': True,
        'state': game.snapshot()
    }

    game_logger.log_server_response(request, 'get_state', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game):
    """Submit a guess for validation and evaluation."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get('guess'), str):
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']

    game_logger.log_user_action(
        request, 'submit_guess', game_id,
        guess=guess, guess_length=len(guess)
    )

    outcome = game.submit_guess(guess)
    response_data = {
        'success': outcome.accepted,
        'outcome': outcome.value,
        'state': game.snapshot()
    }

    if not outcome.accepted:
        response_data['error'] = outcome.value
        status = 409 if outcome is GuessOutcome.NOT_PLAYING else 400
        game_logger.log_server_response(
            request, 'submit_guess', False, response_data, game_id,
            validation_error=outcome.value, attempted_guess=guess
        )
        return jsonify(response_data), status

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=guess, attempts=game.history.attempts, outcome=outcome.value
    )
    _log_round_end(game, outcome, guess)

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/action', methods=['POST'])
@require_game
def menu_action(game_id, game):
    """Apply a menu action: open_settings, go_back, start_game, retry, new_game."""
    data = request.get_json(silent=True) or {}
    action = data.get('action')

    game_logger.log_user_action(request, 'menu_action', game_id, menu_action=action)

    try:
        applied = game.apply_action(
            action,
            language=data.get('language'),
            word_length=get_int_field(data, 'word_length'),
            max_attempts=get_int_field(data, 'max_attempts'),
        )
    except NoWordAvailableError as e:
        game_logger.log_error(request, e, 'menu_action', game_id)
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'menu_action', False, error_response, game_id)
        return jsonify(error_response), 422
    except ValueError as e:
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'menu_action', False, error_response, game_id)
        return jsonify(error_response), 400

    response_data = {
        'success': applied,
        'state': game.snapshot()
    }

    if not applied:
        response_data['error'] = f"Action '{action}' not available in state '{game.state.kind.value}'"
        game_logger.log_server_response(request, 'menu_action', False, response_data, game_id)
        return jsonify(response_data), 409

    game_logger.log_server_response(request, 'menu_action', True, response_data, game_id)
    if action in ('start_game', 'retry', 'new_game'):
        game_logger.log_game_event(
            game_id, 'round_started', request.remote_addr,
            reason=action, language=game.options.language,
            word_length=game.options.settings.word_length
        )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@require_game
def share(game_id, game):
    """Get the share code of the current round."""
    code = game.share_code()
    if code is None:
        return jsonify({
            'success': False,
            'error': 'No round in progress'
        }), 409

    return jsonify({
        'success': True,
        'share': code
    })


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)

    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    response_data['error'] = 'Game not found'
    return jsonify(response_data), 404


@game_bp.route('/languages', methods=['GET'])
def list_languages():
    """List the loaded languages with their available word lengths."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    catalog = game_service.catalog
    languages = []
    for language in catalog.languages:
        entry = language.to_dict()
        entry['word_lengths'] = catalog.word_lengths(language.name)
        languages.append(entry)

    return jsonify({
        'success': True,
        'ready': catalog.ready,
        'languages': languages
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': game_service.active_games if game_service else 0,
        'assets_ready': bool(game_service and game_service.catalog.ready),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
