"""
Game Routes - Flask Blueprint
=============================

Routes:
    /                                - Board page
    /api/game          (GET)         - Session status and current board
    /api/game          (POST)        - Start or restart (builds a new board)
    /api/tiles/<cat>/<clue> (POST)   - Advance one tile
"""

from flask import Blueprint, current_app, jsonify, render_template

from ..errors import (
    BuildInProgressError,
    DataServiceError,
    IndexOutOfRangeError,
    InsufficientPoolError,
    NoBoardError,
)
from ..game import ShowText
from ..session import GameSession

game_bp = Blueprint('game', __name__)

SESSION_KEY = 'jeopardy_session'


def get_session() -> GameSession:
    return current_app.extensions[SESSION_KEY]


@game_bp.route('/')
def index():
    """Serve the board page"""
    return render_template('index.html', tile_label=current_app.config['JEOPARDY'].tile_label)


@game_bp.route('/api/game', methods=['GET'])
def get_game():
    """Return session status and the current board."""
    return jsonify(get_session().snapshot())


@game_bp.route('/api/game', methods=['POST'])
def start_game():
    """
    Build a new board.

    The previous board stays in place if the build fails, and the start
    control label becomes "Retry".
    """
    session = get_session()
    try:
        session.start()
    except BuildInProgressError as e:
        return jsonify({**session.snapshot(), 'error': str(e)}), 409
    except DataServiceError as e:
        return jsonify({**session.snapshot(), 'error': f'Trivia service unavailable: {e}'}), 502
    except InsufficientPoolError as e:
        return jsonify({**session.snapshot(), 'error': str(e)}), 503

    return jsonify(session.snapshot())


@game_bp.route('/api/tiles/<int:category_index>/<int:clue_index>', methods=['POST'])
def advance_tile(category_index, clue_index):
    """Advance a tile and return the text to show on it."""
    session = get_session()
    try:
        result, state = session.advance_tile(category_index, clue_index)
    except NoBoardError as e:
        return jsonify({'error': str(e)}), 409
    except IndexOutOfRangeError as e:
        return jsonify({'error': str(e)}), 404

    response = {
        'category_index': category_index,
        'clue_index': clue_index,
        'state': state.value,
        'disabled': state.is_terminal,
    }
    if isinstance(result, ShowText):
        response.update({'action': 'show', 'text': result.text})
    else:
        response.update({'action': 'noop', 'text': None})
    return jsonify(response)
