"""
Game Controller

Handles all game-related HTTP endpoints. Each request is translated into one
game service call and the result is returned as JSON.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_selection_date

game_bp = Blueprint('game', __name__)


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action, message, game_id=None):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/config', methods=['GET'])
@require_game_service
def get_config(game_service):
    """Describe the game rules clients need before starting."""
    return jsonify({
        'success': True,
        'max_tries': game_service.max_tries,
        'candidate_count': len(game_service.candidates),
        'allowed_characters': ''.join(sorted(game_service.alphabet.characters)),
        'modes': game_service.available_modes
    })


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request('new_game', 'Request body must be a JSON object')
    mode = data.get('mode')

    try:
        selection_context = parse_selection_date(data.get('date'))
    except ValueError as e:
        return _bad_request('new_game', str(e))

    if mode is not None and mode not in game_service.available_modes:
        return _bad_request(
            'new_game',
            f"Invalid game mode. Must be one of: {', '.join(game_service.available_modes)}"
        )

    game_logger.log_user_action(request, 'new_game', extra_data={'mode': mode})

    try:
        game_id = game_service.create_new_game(mode, selection_context)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            secret_length=state.secret_length, max_tries=state.max_tries
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    state = game_service.get_game_state(game_id)
    if state is None:
        return _game_not_found('get_state', game_id)

    return jsonify({
        'success': True,
        'state': asdict(state)
    })


@game_bp.route('/game/<game_id>/input', methods=['POST'])
@require_game_service
def input_character(game_id, game_service):
    """Write one character at the cursor."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'char' not in data:
        return _bad_request('input', 'Character is required', game_id)

    accepted = game_service.input_character(game_id, data['char'])
    if accepted is None:
        return _game_not_found('input', game_id)

    return jsonify({
        'success': True,
        'accepted': accepted,
        'state': asdict(game_service.get_game_state(game_id))
    })


@game_bp.route('/game/<game_id>/backspace', methods=['POST'])
@require_game_service
def backspace(game_id, game_service):
    """Clear the slot left of the cursor."""
    accepted = game_service.backspace(game_id)
    if accepted is None:
        return _game_not_found('backspace', game_id)

    return jsonify({
        'success': True,
        'accepted': accepted,
        'state': asdict(game_service.get_game_state(game_id))
    })


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game_service
def press_key(game_id, game_service):
    """Dispatch one key label (Enter, Back, Space or a character)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('key'), str):
        return _bad_request('key', 'Key is required', game_id)

    outcome = game_service.press_key(game_id, data['key'])
    if outcome is None:
        return _game_not_found('key', game_id)

    response_data = {
        'success': outcome.accepted if outcome.submit_result is not None else True,
        'action': outcome.action,
        'accepted': outcome.accepted,
        'state': asdict(game_service.get_game_state(game_id))
    }
    if outcome.submit_result is not None:
        response_data.update(outcome.submit_result.to_dict())
        game_logger.log_server_response(request, 'submit_guess', outcome.accepted, response_data, game_id)

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game_service
def submit_guess(game_id, game_service):
    """Submit the current row for evaluation."""
    game_logger.log_user_action(request, 'submit_guess', game_id)

    try:
        result = game_service.submit_guess(game_id)
        if result is None:
            return _game_not_found('submit_guess', game_id)

        response_data = {
            'success': result.accepted,
            **result.to_dict(),
            'state': asdict(game_service.get_game_state(game_id))
        }

        game_logger.log_server_response(
            request, 'submit_guess', result.accepted, response_data, game_id,
            status=result.status.value
        )

        # Rejected guesses are recoverable; the game itself is fine
        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reveal', methods=['POST'])
@require_game_service
def reveal_answer(game_id, game_service):
    """Reveal the secret without ending the game."""
    game_logger.log_user_action(request, 'reveal_answer', game_id)

    answer = game_service.reveal_answer(game_id)
    if answer is None:
        return _game_not_found('reveal_answer', game_id)

    return jsonify({
        'success': True,
        'answer': answer
    })


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Drop a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    if not game_service.delete_game(game_id):
        return _game_not_found('delete_game', game_id)

    return jsonify({
        'success': True,
        'message': 'Game deleted'
    })
