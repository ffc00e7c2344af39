"""
Game Logger Module for the Team Wordle Server

This module provides structured logging for player actions, server responses,
room lifecycle events and invariant anomalies.
"""

import logging
import json
import os
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the lobby server.

    Features:
    - Player action tracking by connection handle
    - Server response logging for HTTP endpoints
    - Room lifecycle and game event logging
    - Anomaly logging for defensive fallbacks (operators only)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Setup main game logger
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('team_wordle')
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        # Console only shows warnings/errors
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
                          user_info: Dict[str, Any],
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

    def log_user_action(self,
                        connection: Optional[str],
                        action: str,
                        room_id: Optional[str] = None,
                        **kwargs):
        """
        Log an inbound player action.

        Args:
            connection: Socket.IO sid of the acting connection
            action: Action kind (e.g. 'submitLetter', 'claimSlot')
            room_id: Room code if applicable
            **kwargs: Additional details to log
        """
        details = {'room_id': room_id, **kwargs}
        log_message = self._create_log_entry('USER_ACTION', action, {'connection': connection}, details)
        self.logger.debug(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            room_id: Optional[str] = None,
                            **kwargs):
        """
        Log HTTP responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            room_id: Room code if applicable
            **kwargs: Additional details to log
        """
        user_info = {'user_ip': request.remote_addr or 'unknown'}

        details = {
            'room_id': room_id,
            'success': success,
            'endpoint': request.endpoint,
            'method': request.method,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       room_id: Optional[str],
                       event: str,
                       connection: Optional[str] = None,
                       **kwargs):
        """
        Log room lifecycle and game events (joins, reveals, game over...).

        Args:
            room_id: Room code
            event: Type of game event (e.g. 'room_created', 'game_over')
            connection: Connection that triggered the event, if any
            **kwargs: Additional game details
        """
        details = {'room_id': room_id, **kwargs}
        log_message = self._create_log_entry('GAME_EVENT', event, {'connection': connection}, details)
        self.logger.info(log_message)

    def log_anomaly(self, room_id: Optional[str], anomaly: str, **kwargs):
        """Log a defensive fallback that kept a room playable."""
        details = {'room_id': room_id, **kwargs}
        log_message = self._create_log_entry('ANOMALY', anomaly, {'connection': None}, details)
        self.logger.warning(log_message)

    def log_error(self,
                  connection: Optional[str],
                  error: Exception,
                  action: str,
                  room_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            connection: Socket.IO sid or remote address
            error: Exception that occurred
            action: Action that was being performed
            room_id: Room code if applicable
        """
        details = {
            'room_id': room_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, {'connection': connection}, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Remove answers from logged responses."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if isinstance(sanitized.get('rooms'), list):
            sanitized['rooms'] = len(sanitized['rooms'])
        sanitized.pop('answer', None)
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        try:
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            if not log_file.exists():
                return {'error': 'No log file found for today'}

            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'anomalies': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ANOMALY' in line:
                            stats['anomalies'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger(os.getenv('LOG_DIR', 'logs'), os.getenv('LOG_LEVEL', 'INFO'))
