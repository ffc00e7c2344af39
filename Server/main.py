"""
Team Wordle Server - Main Entry Point

This is the main entry point for the team Wordle lobby server.
It creates the Flask-SocketIO application and starts serving.
"""

from teamwordle import create_app
from teamwordle.config import config
from teamwordle.utils.game_logger import game_logger
import os


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_CONFIG', 'default')]
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        stats = app.room_registry.catalog.statistics()
        print(f"✓ Word lists loaded: allowed={stats['allowed_words']} answers={stats['answer_words']}")

        game_logger.logger.info("Team Wordle Server starting")

        print(f"\nStarting Team Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Team Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
