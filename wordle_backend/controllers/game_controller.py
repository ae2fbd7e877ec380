"""
Game Controller

Handles all game-state HTTP endpoints.
"""

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..errors import GameError, ValidationError
from ..models.game import GameStatus
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body, parse_int_field

game_bp = Blueprint('game', __name__)

GAME_EVENTS = {
    GameStatus.WON: 'game_won',
    GameStatus.LOST: 'game_lost',
    GameStatus.TIMED_OUT: 'game_timeout',
}


def _game_service():
    return current_app.game_service


def _parse_game_id(raw_id) -> int:
    # bool is an int subclass; true must not address game 1
    if isinstance(raw_id, bool):
        raise ValidationError("Invalid game state ID")
    try:
        game_id = int(raw_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid game state ID")
    if game_id <= 0:
        raise ValidationError("Invalid game state ID")
    return game_id


def _error_response(action: str, error: Exception, game_id=None):
    """Log a failure and build the JSON error response for it."""
    if isinstance(error, GameError):
        error_response, status_code = error.to_dict(), error.status_code
        if status_code >= 500:
            game_logger.log_error(request, error, action, game_id)
    else:
        game_logger.log_error(request, error, action, game_id)
        error_response, status_code = {'success': False, 'error': 'Internal server error'}, 500

    game_logger.log_server_response(request, action, False, error_response, game_id, status_code=status_code)
    return jsonify(error_response), status_code


@game_bp.app_errorhandler(HTTPException)
def handle_http_error(error):
    """Unknown routes and wrong methods answer in the same JSON shape as game errors."""
    error_response = {'success': False, 'error': error.description or error.name}
    game_logger.log_server_response(request, 'http_error', False, error_response, status_code=error.code)
    return jsonify(error_response), error.code


@game_bp.app_errorhandler(GameError)
def handle_game_error(error):
    return _error_response('request', error)


@game_bp.app_errorhandler(Exception)
def handle_unexpected_error(error):
    return _error_response('request', error)


@game_bp.route('/', methods=['GET'])
def index():
    """Service banner."""
    return jsonify({
        'status': 'ok',
        'message': 'Wordle Backend API is running',
        'api_url': current_app.config.get('API_URL'),
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'ok',
        'message': 'Server is running',
        'store': type(_game_service().store).__name__,
    })


@game_bp.route('/gamestates', methods=['POST'])
def create_game_state():
    """Create a new game session. Missing parameters fall back to configured defaults."""
    try:
        data = get_json_body()
        max_tries = parse_int_field(data, 'maxTries', current_app.config['DEFAULT_MAX_TRIES'])
        word_size = parse_int_field(data, 'wordSize', current_app.config['DEFAULT_WORD_SIZE'])
        mode = data.get('mode') or current_app.config['DEFAULT_MODE']

        game_logger.log_user_action(request, 'create_game', max_tries=max_tries, word_size=word_size, mode=mode)

        session = _game_service().create_new_game(max_tries, word_size, mode)

        response_data = {'message': 'Game state created successfully', **session.to_dict()}
        game_logger.log_server_response(request, 'create_game', True, response_data, session.id)
        game_logger.log_game_event(session.id, 'game_created', request.remote_addr,
                                   mode=session.mode, word_size=word_size, max_tries=max_tries)

        return jsonify(response_data), 201

    except Exception as e:
        return _error_response('create_game', e)


@game_bp.route('/gamestates', methods=['GET'])
def get_all_game_states():
    """List every game session; target words stay hidden for games in progress."""
    try:
        game_logger.log_user_action(request, 'list_games')

        sessions = _game_service().list_games()
        response_data = [session.to_dict() for session in sessions]

        game_logger.log_server_response(request, 'list_games', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('list_games', e)


@game_bp.route('/gamestates/<game_id>', methods=['GET'])
def get_game_state(game_id):
    """Get a single game session."""
    parsed_id = None
    try:
        parsed_id = _parse_game_id(game_id)
        game_logger.log_user_action(request, 'get_game', parsed_id)

        session = _game_service().get_game(parsed_id)
        response_data = session.to_dict()

        game_logger.log_server_response(request, 'get_game', True, response_data, parsed_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_game', e, parsed_id)


@game_bp.route('/gamestates', methods=['PUT'])
def play_game_state():
    """Submit a guess for validation and evaluation."""
    game_id = None
    try:
        data = get_json_body(required=True)
        game_id = _parse_game_id(data.get('id'))
        guess_word = data.get('guessWord')
        if not isinstance(guess_word, str) or not guess_word.strip():
            raise ValidationError("guessWord is required")

        game_logger.log_user_action(request, 'submit_guess', game_id, guess_length=len(guess_word.strip()))

        session = _game_service().make_guess(game_id, guess_word)

        response_data = {'message': 'Game state updated successfully', **session.to_dict()}
        game_logger.log_server_response(request, 'submit_guess', True, response_data, game_id,
                                        round=session.tries_used, game_status=session.game_status.value)

        event = GAME_EVENTS.get(session.game_status)
        if event:
            game_logger.log_game_event(game_id, event, request.remote_addr,
                                       rounds_used=session.tries_used, target_word=session.target_word)

        return jsonify(response_data)

    except Exception as e:
        return _error_response('submit_guess', e, game_id)


@game_bp.route('/gamestates/<game_id>', methods=['PUT'])
def leave_game_state(game_id):
    """Forfeit a game: the player left, so the game is lost."""
    parsed_id = None
    try:
        parsed_id = _parse_game_id(game_id)
        game_logger.log_user_action(request, 'leave_game', parsed_id)

        session = _game_service().forfeit_game(parsed_id)

        response_data = {'message': 'Player left the game state successfully', **session.to_dict()}
        game_logger.log_server_response(request, 'leave_game', True, response_data, parsed_id)
        game_logger.log_game_event(parsed_id, 'game_forfeited', request.remote_addr,
                                   rounds_used=session.tries_used)

        return jsonify(response_data)

    except Exception as e:
        return _error_response('leave_game', e, parsed_id)


@game_bp.route('/gamestates/<game_id>/timeout', methods=['PUT'])
def timeout_game_state(game_id):
    """Mark a timed game as timed out."""
    parsed_id = None
    try:
        parsed_id = _parse_game_id(game_id)
        game_logger.log_user_action(request, 'timeout_game', parsed_id)

        session = _game_service().timeout_game(parsed_id)

        response_data = {'message': 'Game state status set to timeout successfully', **session.to_dict()}
        game_logger.log_server_response(request, 'timeout_game', True, response_data, parsed_id)
        game_logger.log_game_event(parsed_id, GAME_EVENTS[GameStatus.TIMED_OUT], request.remote_addr,
                                   rounds_used=session.tries_used)

        return jsonify(response_data)

    except Exception as e:
        return _error_response('timeout_game', e, parsed_id)
