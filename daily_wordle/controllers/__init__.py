"""
Controllers Package

HTTP blueprints exposing the daily game.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
