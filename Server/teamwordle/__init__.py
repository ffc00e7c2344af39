"""
Team Wordle Server Application Package

Cooperative five-player Wordle: every player owns one letter of a shared
guess row, and the server evaluates the row once all five letters are locked.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance, with the
        word catalog, room registry and session gateway initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize services
    from .services.word_catalog import initialize_word_catalog
    from .services.room_registry import initialize_room_registry

    catalog = initialize_word_catalog(app.config['WORDS_ALLOWED_PATH'], app.config['WORDS_ANSWERS_PATH'])
    registry = initialize_room_registry(
        catalog,
        default_max_rounds=app.config['MAX_ROUNDS'],
        code_length=app.config['ROOM_CODE_LENGTH']
    )

    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])
    socketio = SocketIO(
        app,
        cors_allowed_origins=app.config['CORS_ORIGINS'],
        always_connect=True,
        logger=False,
        engineio_logger=False
    )

    # Register blueprints
    from .controllers.lobby_controller import lobby_bp
    app.register_blueprint(lobby_bp)

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    gateway = register_websocket_handlers(socketio, registry)

    # Store instances for use in other modules
    app.socketio = socketio
    app.gateway = gateway
    app.room_registry = registry

    return app, socketio
