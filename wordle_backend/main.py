"""
Wordle Backend - Main Entry Point

Builds the store and the Flask application from configuration and starts
the HTTP server.
"""

import os

from . import create_app
from .config import config, validate_word_list_integrity
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('FLASK_ENV', 'default'), config['default'])

    try:
        validate_word_list_integrity()

        app = create_app(config_class)

        game_logger.logger.info("Wordle Backend starting on %s:%s (store: %s)",
                                config_class.HOST, config_class.PORT,
                                type(app.game_service.store).__name__)
        print(f"Starting Wordle Backend on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Backend shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
