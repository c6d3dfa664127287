"""
GuessGrid Game Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

from guessgrid import create_app
from guessgrid.config import Config, get_candidate_statistics
from guessgrid.services.game_service import initialize_game_service
from guessgrid.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized: {len(game_service.candidates)} candidates, "
              f"{game_service.max_tries} tries, '{game_service.default_mode}' selection")

        stats = get_candidate_statistics(list(game_service.candidates))
        game_logger.logger.info(f"Candidate statistics: {stats}")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("GuessGrid Server Starting")

        print(f"\nStarting GuessGrid Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("GuessGrid Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
