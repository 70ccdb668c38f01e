"""
Game Logger Module for the Daily Wordle Server

Structured logging for player actions, server responses, game events
and errors.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging for the daily game.

    Every entry is a single JSON object written to a dated log file;
    warnings and errors are also echoed to the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with a file and a console handler."""
        logger = logging.getLogger('daily_wordle.game')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, str]:
        """Extract client identity information from a request."""
        return {'user_ip': getattr(request, 'remote_addr', None) or 'unknown'}

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, str],
                          details: Dict[str, Any]) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log a player action.

        Args:
            request: Flask request object
            action: Type of action (e.g. 'get_today', 'submit_guess')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        }
        self.logger.info(self._create_log_entry(
            'USER_ACTION', action, self._get_user_identity(request), details
        ))

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log a server response. Unsuccessful responses are logged as errors.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to the client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)

        if success:
            self.logger.info(message)
        else:
            self.logger.error(message)

    def log_game_event(self, event: str, game_date: Optional[str] = None, **kwargs):
        """
        Log a game event such as 'game_won', 'game_lost' or 'history_write_failed'.

        Args:
            event: Type of game event
            game_date: ISO date of the daily session the event belongs to
            **kwargs: Additional game details
        """
        details = {'game_date': game_date, **kwargs}
        message = self._create_log_entry('GAME_EVENT', event, {'user_ip': 'system'}, details)
        if event.endswith('_failed'):
            self.logger.warning(message)
        else:
            self.logger.info(message)

    def log_error(self, request, error: Exception, action: str):
        """Log an exception raised while handling a request."""
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry(
            'ERROR', action, self._get_user_identity(request), details
        ))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim the game snapshot so the log never carries the secret word early."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'date': state.get('date'),
                'outcome': state.get('outcome'),
                'guesses_count': len(state.get('guesses', [])),
                'remaining_attempts': state.get('remaining_attempts'),
                'answer_revealed': state.get('answer') is not None
            }
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'SERVER_RESPONSE' in line:
                        stats['server_responses'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif 'ERROR' in line:
                        stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
