"""
Lobby Controller

Handles the HTTP endpoints around rooms: creating a room code, liveness and
an operator view of live rooms.
"""

from flask import Blueprint, current_app, jsonify, request

from ..services.room_registry import get_room_registry
from ..services.word_catalog import get_word_catalog
from ..utils.game_logger import game_logger
from ..utils.helpers import get_share_url

lobby_bp = Blueprint('lobby', __name__)


@lobby_bp.route('/create', methods=['GET', 'POST'])
def create_room():
    """Create a new room and return its code and a shareable join link."""
    try:
        registry = get_room_registry()
        if not registry:
            return jsonify({
                'success': False,
                'error': 'Lobby service unavailable'
            }), 500

        rounds = request.args.get('rounds', type=int)
        room = registry.create(rounds)

        response_data = {
            'lobbyId': room.room_id,
            'joinUrl': get_share_url(request, room.room_id),
            'maxRounds': room.max_rounds
        }
        game_logger.log_server_response(request, 'create_room', True, response_data, room.room_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request.remote_addr, e, 'create_room')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'create_room', False, error_response)
        return jsonify(error_response), 500


@lobby_bp.route('/health', methods=['GET'])
def health():
    """Liveness probe."""
    return jsonify({'ok': True})


@lobby_bp.route('/debug', methods=['GET'])
def debug_rooms():
    """
    Operator view of live rooms.

    Answers stay hidden unless the app runs in debug mode and the request
    passes ``reveal=1``.
    """
    registry = get_room_registry()
    if not registry:
        return jsonify({
            'success': False,
            'error': 'Lobby service unavailable'
        }), 500

    reveal = current_app.config.get('DEBUG', False) and request.args.get('reveal') == '1'
    catalog = get_word_catalog()

    return jsonify({
        'rooms': [room.summary(reveal=reveal) for room in registry.rooms()],
        'words': catalog.statistics() if catalog else None,
        'log': game_logger.get_log_stats()
    })
