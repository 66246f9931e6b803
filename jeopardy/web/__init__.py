"""
Jeopardy Web Server
===================

Browser front end for the board. The page draws the grid and sends tile
clicks to the JSON API; all game state lives in the GameSession stored on
the app.

Usage:
    jeopardy serve

Then open http://localhost:8080 in your browser.
"""

from typing import Optional

from flask import Flask

from ..config import GameConfig
from ..game import BoardBuilder
from ..service import TriviaApiClient
from ..session import GameSession
from .routes import SESSION_KEY, game_bp, get_session


def create_app(config: Optional[GameConfig] = None, session: Optional[GameSession] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        config: Game configuration (defaults to GameConfig())
        session: Pre-built session; when None one is created from config
            with a live TriviaApiClient
    """
    config = config or GameConfig()
    if session is None:
        client = TriviaApiClient(base_url=config.base_url, timeout_s=config.timeout_s)
        session = GameSession(BoardBuilder.from_config(client, config))

    app = Flask(__name__)
    app.config['JEOPARDY'] = config
    app.extensions[SESSION_KEY] = session
    app.register_blueprint(game_bp)
    return app


__all__ = ["create_app", "get_session"]
