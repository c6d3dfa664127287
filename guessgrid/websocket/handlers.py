"""
WebSocket Event Handlers

Real-time play over Socket.IO. Every game has its own room; each "key" event
is translated into exactly one session call and the outcome is broadcast to
the room for rendering.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_selection_date


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_game_state_update(game_service, game_id):
        state = game_service.get_game_state(game_id)
        socketio.emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        }, room=game_room(game_id))

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data, game_service=None):
        """Start a game and join its room."""
        mode = data.get('mode')
        try:
            selection_context = parse_selection_date(data.get('date'))
            game_id = game_service.create_new_game(mode, selection_context)
        except ValueError as e:
            emit('error', {'error': str(e)})
            return

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'new_game', game_id, extra_data={'mode': mode, 'transport': 'websocket'})

        emit('game_started', {
            'success': True,
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('join_game')
    @websocket_game_service_required
    def handle_join_game(data, game_service=None):
        """Join an existing game's room and receive its state."""
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game's room."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return
        leave_room(game_room(game_id))

    @socketio.on('key')
    @websocket_game_service_required
    def handle_key(data, game_service=None):
        """Apply one key press to a game."""
        game_id = data.get('game_id')
        key = data.get('key')
        if not game_id or not isinstance(key, str):
            emit('error', {'error': 'Game ID and key are required'})
            return

        outcome = game_service.press_key(game_id, key)
        if outcome is None:
            emit('error', {'error': 'Game not found'})
            return

        result = outcome.submit_result
        if result is not None:
            game_logger.log_user_action(request, 'submit_guess', game_id, transport='websocket')
            socketio.emit('guess_result', {
                'game_id': game_id,
                'success': result.accepted,
                **result.to_dict()
            }, room=game_room(game_id))

        if outcome.accepted:
            broadcast_game_state_update(game_service, game_id)

        if result is not None and result.accepted and result.status.is_terminal:
            socketio.emit('game_ended', {
                'game_id': game_id,
                'status': result.status.value,
                'answer': result.answer
            }, room=game_room(game_id))
