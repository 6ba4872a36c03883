"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, Guess, GuessOutcome, GuessVerdict, RoundOptions, Settings, StateKind
from .language import KeyboardLayout, Language

__all__ = [
    'GameState', 'Guess', 'GuessOutcome', 'GuessVerdict', 'RoundOptions', 'Settings', 'StateKind',
    'KeyboardLayout', 'Language'
]
