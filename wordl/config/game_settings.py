"""
Game Configuration Constants Module

Defines the round defaults and the bounds accepted by the settings menu.
Everything that describes a round's rules lives here so the state machine
and the HTTP layer agree on them.
"""

from typing import Final, Tuple

DEFAULT_WORD_LENGTH: Final[int] = 5
"""Word length used for the first round and as the fallback length."""

DEFAULT_MAX_ATTEMPTS: Final[int] = 5
"""Number of guesses allowed per round unless the menu says otherwise."""

DEFAULT_LANGUAGE: Final[str] = "english-us"

WORD_LENGTH_RANGE: Final[Tuple[int, int]] = (2, 16)
MAX_ATTEMPTS_RANGE: Final[Tuple[int, int]] = (2, 12)


def validate_settings(word_length: int, max_attempts: int) -> None:
    """
    Validates round settings chosen in the menu.

    Args:
        word_length: Number of characters in the secret word
        max_attempts: Number of guesses allowed

    Raises:
        ValueError: If either value is not an integer or is out of range
    """
    for name, value, (low, high) in (
        ("word_length", word_length, WORD_LENGTH_RANGE),
        ("max_attempts", max_attempts, MAX_ATTEMPTS_RANGE),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer")
        if not low <= value <= high:
            raise ValueError(f"{name} must be between {low} and {high}, got {value}")
