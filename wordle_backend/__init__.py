"""
Wordle Backend Application Package

A small stateless REST backend for a Wordle-style game: it starts games,
evaluates guesses, stores game history and ends games by forfeit or timeout.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, store=None, words=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: GameStore to use (built from configuration if not provided)
        words: WordSource to use (curated word lists if not provided)

    Returns:
        Flask application instance with the game service attached as ``app.game_service``
    """
    from .services.game_service import GameService
    from .services.game_store import create_store
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'],
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS', 'HEAD', 'PATCH'],
         allow_headers=['Origin', 'Content-Type', 'Accept', 'Authorization', 'X-Requested-With'],
         supports_credentials=False)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Game service with an explicit store handle
    if store is None:
        store = create_store(app.config)
    app.game_service = GameService(store, words)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    return app
