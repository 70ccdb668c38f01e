"""
Daily Wordle Server - Main Entry Point

Initializes the game service and starts the Flask application.
"""

from daily_wordle import create_app
from daily_wordle.config import Config
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.utils.game_logger import game_logger


def main():
    """Initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized ({len(game_service.words)} words, "
              f"{Config.HISTORY_BACKEND} history)")

        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Daily Wordle Server starting")

        print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
