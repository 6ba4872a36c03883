"""
wordl Game Server - Main Entry Point

Loads the language assets, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordl import create_app
from wordl.config import Config
from wordl.services.catalog import LanguageCatalog
from wordl.services.game_service import initialize_game_service
from wordl.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Loading language assets...")
        catalog = LanguageCatalog.from_directory(Config.ASSETS_DIR)
        print(f"✓ Loaded languages: {', '.join(language.name for language in catalog.languages)}")

        initialize_game_service(catalog, Config.DEFAULT_LANGUAGE)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("wordl server starting")

        print(f"\nStarting wordl server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("wordl server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
