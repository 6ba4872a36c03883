"""
Services Package

Contains the game logic and the services built on it.
"""

from .catalog import LanguageCatalog, NoWordAvailableError
from .evaluator import evaluate, score_guess
from .game_flow import GameFlowController
from .game_service import GameService, get_game_service, initialize_game_service
from .history import HistoryTracker

__all__ = [
    'LanguageCatalog', 'NoWordAvailableError',
    'evaluate', 'score_guess',
    'GameFlowController', 'HistoryTracker',
    'GameService', 'get_game_service', 'initialize_game_service'
]
