"""
Game Controller

HTTP endpoints for the daily game.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..services.word_selector import utc_today
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _failure(action: str, error: Exception):
    game_logger.log_error(request, error, action)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 500


@game_bp.route('/today', methods=['GET'])
def get_today():
    """Today's board, streak and whether today is already finished."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_today')

        today = utc_today()
        session = game_service.current_session(today)

        response_data = {
            'success': True,
            'state': asdict(session.snapshot()),
            'streak': game_service.streak(today),
            'already_played': session.is_over
        }

        game_logger.log_server_response(request, 'get_today', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _failure('get_today', e)


@game_bp.route('/guess', methods=['POST'])
def make_guess():
    """Submit a guess for today's word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', guess_length=len(guess))

        today = utc_today()
        result = game_service.submit_guess(guess, today)

        if not result.accepted:
            error = 'Game is already over' if result.snapshot.outcome != 'playing' else 'Not a valid word'
            error_response = {
                'success': False,
                'error': error,
                'state': asdict(result.snapshot)
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response,
                                            attempted_guess=guess)
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(result.snapshot),
            'streak': game_service.streak(today),
            'persisted': result.persisted
        }
        if result.error:
            response_data['warning'] = result.error

        game_logger.log_server_response(request, 'submit_guess', True, response_data,
                                        outcome=result.snapshot.outcome)
        return jsonify(response_data)

    except Exception as e:
        return _failure('submit_guess', e)


@game_bp.route('/streak', methods=['GET'])
def get_streak():
    """Current streak and overall statistics."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_streak')

        today = utc_today()
        response_data = {
            'success': True,
            'streak': game_service.streak(today),
            'statistics': game_service.statistics(today)
        }

        game_logger.log_server_response(request, 'get_streak', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _failure('get_streak', e)


@game_bp.route('/history', methods=['GET'])
def get_history():
    """All recorded daily results."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_history')

        history = game_service.history()
        response_data = {
            'success': True,
            'history': history
        }

        game_logger.log_server_response(request, 'get_history', True, {'count': len(history)})
        return jsonify(response_data)

    except Exception as e:
        return _failure('get_history', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'game_service': game_service is not None,
            'word_count': len(game_service.words) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _failure('health_check', e)
