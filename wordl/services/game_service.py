"""
Game Service

Keeps the independent single-player game sessions served by the app.
"""

import threading
import uuid
from typing import Dict, Optional

from ..config.game_settings import DEFAULT_LANGUAGE, validate_settings
from ..models.game import Settings
from .catalog import LanguageCatalog
from .game_flow import GameFlowController


class GameService:
    """
    Game session registry.

    This class handles:
    - Session creation with unique game IDs
    - Starting each session's first round once the catalog is ready
    - Session lookup and removal
    """

    def __init__(self, catalog: LanguageCatalog, default_language: str = DEFAULT_LANGUAGE):
        self.catalog = catalog
        self.default_language = default_language
        self.games: Dict[str, GameFlowController] = {}  # Store active games by game_id
        self._lock = threading.Lock()

    def create_new_game(self,
                        language: Optional[str] = None,
                        word_length: Optional[int] = None,
                        max_attempts: Optional[int] = None) -> str:
        """
        Creates a new game session and starts its first round.

        Args:
            language: Language name (defaults to the service default)
            word_length: Secret word length (defaults to game settings)
            max_attempts: Allowed guesses (defaults to game settings)

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the language is unknown or the settings are out of range
            NoWordAvailableError: If no secret word can be drawn
        """
        defaults = Settings()
        settings = Settings(
            word_length=defaults.word_length if word_length is None else word_length,
            max_attempts=defaults.max_attempts if max_attempts is None else max_attempts,
        )
        validate_settings(settings.word_length, settings.max_attempts)

        language = language or self.default_language
        if self.catalog.ready and not self.catalog.has_language(language):
            raise ValueError(f"Unknown language '{language}'")

        game_id = str(uuid.uuid4())
        game = GameFlowController(
            self.catalog,
            default_language=language,
            default_settings=settings,
            game_id=game_id,
        )
        # Stays in the loading state if the catalog is not ready yet
        game.assets_loaded()

        with self._lock:
            self.games[game_id] = game
        return game_id

    def get_game(self, game_id: Optional[str]) -> Optional[GameFlowController]:
        if game_id is None:
            return None
        with self._lock:
            return self.games.get(game_id)

    def poll_loading(self) -> int:
        """Starts the first round of every session still waiting for assets."""
        with self._lock:
            games = list(self.games.values())
        return sum(1 for game in games if game.assets_loaded())

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    @property
    def active_games(self) -> int:
        with self._lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(catalog: LanguageCatalog, default_language: str = DEFAULT_LANGUAGE) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(catalog, default_language)
    return _game_service
