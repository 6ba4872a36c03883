"""
Game Logger Module for the wordl server

This module provides logging for user actions, server responses and game
events. Entries written to the log file are JSON so they can be parsed back.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging (round starts, wins, losses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordl_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def _log(self, level: int, event_type: str, action: str, request, game_id: Optional[str], **details):
        details = {'game_id': game_id, **details}
        self.logger.log(level, self._create_log_entry(event_type, action, get_user_identity(request), details))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log an incoming request ('new_game', 'submit_guess', 'menu_action', ...).

        Args:
            request: Flask request object
            action: What the client asked for
            game_id: Session the request targets, if any
            **kwargs: Extra fields for the entry
        """
        self._log(logging.INFO, 'USER_ACTION', action, request, game_id,
                  endpoint=getattr(request, 'endpoint', None),
                  method=getattr(request, 'method', None),
                  **kwargs)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Log what was sent back; failed responses are logged as errors."""
        if success:
            level, event_type = logging.INFO, 'SERVER_RESPONSE_SUCCESS'
        else:
            level, event_type = logging.ERROR, 'SERVER_RESPONSE_ERROR'
        self._log(level, event_type, action, request, game_id,
                  success=success,
                  response_data=self._sanitize_response_data(response_data),
                  **kwargs)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Log a round event such as 'game_won' or 'game_lost'."""
        user_info = {'user_ip': user_ip, 'session_id': None}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs}))

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        self._log(logging.ERROR, 'ERROR', action, request, game_id,
                  error_type=type(error).__name__,
                  error_message=str(error))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep the log readable and never write an unrevealed secret word."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        # Create a copy to avoid modifying original
        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            options = state.get('options') or {}
            sanitized['state'] = {
                'state': state.get('state'),
                'attempts': state.get('attempts'),
                'max_attempts': state.get('max_attempts'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': options.get('word') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Where today's log goes and how big it is, for the health check."""
        log_file = self.log_file
        try:
            size = log_file.stat().st_size
        except OSError:
            return {'log_file': str(log_file), 'file_size_mb': None}
        return {'log_file': str(log_file), 'file_size_mb': round(size / (1024 * 1024), 2)}


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
