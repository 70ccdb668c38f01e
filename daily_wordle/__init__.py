"""
Daily Wordle Package

A daily five-letter word game: one secret word per UTC day, per-letter
feedback on each guess and a consecutive-win streak kept across days.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with extensions and blueprints registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    CORS(app)

    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
