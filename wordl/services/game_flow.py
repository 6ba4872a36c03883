"""
Game Flow

The state machine behind one player's game: loading, playing, the settings
menu, and the win/loss screens.
"""

import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from ..config.game_settings import DEFAULT_LANGUAGE, DEFAULT_WORD_LENGTH, validate_settings
from ..models.game import GameState, GuessOutcome, RoundOptions, Settings
from ..utils.decorators import serialized
from ..utils.game_logger import game_logger
from . import share
from .catalog import NoWordAvailableError
from .evaluator import score_guess
from .history import HistoryTracker


class GameFlowController:
    """
    Owns the state stack, the guess history and the input buffer of a game.

    States live on a small stack. The settings menu and the win/loss screens
    are pushed over the round they belong to, so "go back" restores the exact
    round in progress; starting a round replaces the whole stack.

    ``catalog`` is anything with ``ready``, ``languages``, ``has_language``,
    ``random_word(language, length)`` and ``contains(language, word)``;
    normally a LanguageCatalog.

    Every event runs to completion under the controller's lock before the next
    one is looked at.
    """

    def __init__(self,
                 catalog,
                 default_language: str = DEFAULT_LANGUAGE,
                 default_settings: Optional[Settings] = None,
                 game_id: Optional[str] = None):
        self.catalog = catalog
        self.default_language = default_language
        self.default_settings = default_settings or Settings()
        self.game_id = game_id
        self.history = HistoryTracker()
        self._stack: List[GameState] = [GameState.loading()]
        self._input: List[str] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._stack[-1]

    @property
    def state_stack(self) -> Tuple[GameState, ...]:
        return tuple(self._stack)

    @property
    def options(self) -> Optional[RoundOptions]:
        return self.state.options

    @property
    def current_input(self) -> str:
        return "".join(self._input)

    @serialized
    def assets_loaded(self) -> bool:
        """
        Leaves the loading state once the catalog is ready.

        Returns:
            bool: True if a round was started

        Raises:
            NoWordAvailableError: If no secret word can be drawn at all
        """
        if self.state != GameState.loading() or not self.catalog.ready:
            return False

        language = self.default_language
        if not self.catalog.has_language(language):
            fallback = self.catalog.languages[0].name
            game_logger.logger.warning(
                f"Game {self.game_id}: default language '{language}' not loaded, using '{fallback}'"
            )
            language = fallback

        self._start_round(self._draw_round(language, self.default_settings))
        return True

    @serialized
    def open_settings(self) -> bool:
        """Play -> Menu, keeping the round underneath."""
        if self.state != GameState.play():
            return False
        self._push(GameState.menu(self.options))
        return True

    @serialized
    def go_back(self) -> bool:
        """Menu -> the exact state it was opened from."""
        if self.state != GameState.menu() or len(self._stack) < 2:
            return False
        menu = self._stack.pop()
        self._log_transition(menu, self.state)
        return True

    @serialized
    def start_game(self, language: str, word_length: int, max_attempts: int) -> bool:
        """
        Menu -> Play with a fresh round built from the menu selection.

        Raises:
            ValueError: If the language is unknown or the settings are out of range
            NoWordAvailableError: If the language has no word of the fallback length either
        """
        if self.state != GameState.menu():
            return False

        validate_settings(word_length, max_attempts)
        if not self.catalog.has_language(language):
            raise ValueError(f"Unknown language '{language}'")

        settings = Settings(word_length=word_length, max_attempts=max_attempts)
        self._start_round(self._draw_round(language, settings))
        return True

    @serialized
    def retry(self) -> bool:
        """Win/Loss -> Play with the same secret word."""
        if not self.state.round_over:
            return False
        self._start_round(self.options)
        return True

    @serialized
    def new_game(self) -> bool:
        """Win/Loss -> Play with a new secret word in the same language and settings."""
        if not self.state.round_over:
            return False
        options = self.options
        self._start_round(self._draw_round(options.language, options.settings))
        return True

    @serialized
    def apply_action(self,
                     action: str,
                     language: Optional[str] = None,
                     word_length: Optional[int] = None,
                     max_attempts: Optional[int] = None) -> bool:
        """
        Dispatches a menu action by name.

        ``start_game`` fills missing selections from the round the menu was
        opened over.

        Raises:
            ValueError: If the action is unknown (or start_game rejects its input)
        """
        if action == 'start_game':
            current = self.options or RoundOptions(self.default_settings, '', self.default_language)
            return self.start_game(
                language or current.language,
                current.settings.word_length if word_length is None else word_length,
                current.settings.max_attempts if max_attempts is None else max_attempts,
            )

        handlers = {
            'open_settings': self.open_settings,
            'go_back': self.go_back,
            'retry': self.retry,
            'new_game': self.new_game,
        }
        if action not in handlers:
            raise ValueError(f"Unknown action '{action}'")
        return handlers[action]()

    @serialized
    def submit_guess(self, text: str) -> GuessOutcome:
        """
        Scores a guess and moves to Win or Loss when the round is decided.

        Invalid guesses change nothing; the returned outcome says why.
        """
        if self.state != GameState.play():
            return GuessOutcome.NOT_PLAYING

        options = self.options
        guess_text = (text or "").lower()

        if len(guess_text) != options.settings.word_length:
            return GuessOutcome.INVALID_LENGTH

        if not self.catalog.contains(options.language, guess_text):
            return GuessOutcome.UNKNOWN_WORD

        guess = score_guess(options.word, guess_text)
        if guess is None:
            return GuessOutcome.INVALID_LENGTH

        self.history.record(guess)
        self._input = []

        if guess.is_correct():
            self._push(GameState.win(options))
            return GuessOutcome.WON

        if self.history.attempts >= options.settings.max_attempts:
            self._push(GameState.loss(options))
            return GuessOutcome.LOST

        return GuessOutcome.ACCEPTED

    @serialized
    def submit_guesses(self, texts: Iterable[str]) -> List[GuessOutcome]:
        """Applies queued guesses in order; ones arriving after the round ends are NOT_PLAYING."""
        return [self.submit_guess(text) for text in texts]

    @serialized
    def type_character(self, character: str) -> bool:
        """Appends a letter to the input buffer while it is shorter than the word."""
        if self.state != GameState.play():
            return False
        if len(character) != 1 or not character.isalpha():
            return False
        if len(self._input) >= self.options.settings.word_length:
            return False
        self._input.append(character.lower())
        return True

    @serialized
    def backspace(self) -> bool:
        if self.state != GameState.play() or not self._input:
            return False
        self._input.pop()
        return True

    @serialized
    def submit_input(self) -> GuessOutcome:
        """Submits the input buffer as a guess (the Enter key)."""
        return self.submit_guess(self.current_input)

    @serialized
    def share_code(self) -> Optional[str]:
        options = self.options
        if options is None:
            return None
        return share.generate(options.word, self.history, options.settings)

    @serialized
    def snapshot(self) -> Dict:
        """
        JSON-serializable view for clients.

        The secret word is only included once the round is over.
        """
        state = self.state
        options = state.options
        keyboard = None
        if options is not None and self.catalog.has_language(options.language):
            layout = self.catalog.keyboard_for(options.language)
            keyboard = [list(row) for row in layout.layout] if layout else None

        return {
            'game_id': self.game_id,
            'state': state.kind.value,
            'options': options.to_dict(reveal_word=state.round_over) if options else None,
            'attempts': self.history.attempts,
            'max_attempts': options.settings.max_attempts if options else None,
            'game_over': state.round_over,
            'won': state == GameState.win(),
            'current_input': self.current_input,
            'keyboard': keyboard,
            **self.history.to_dict(),
        }

    def _draw_round(self, language: str, settings: Settings) -> RoundOptions:
        """
        Builds the options of a new round with a freshly drawn word.

        When no word of the requested length exists, falls back to the default
        length in the same language before giving up.
        """
        try:
            word = self.catalog.random_word(language, settings.word_length)
        except NoWordAvailableError as e:
            if settings.word_length == DEFAULT_WORD_LENGTH:
                game_logger.logger.error(f"Game {self.game_id}: {e}")
                raise
            game_logger.logger.warning(
                f"Game {self.game_id}: {e}; falling back to {DEFAULT_WORD_LENGTH} letters"
            )
            settings = replace(settings, word_length=DEFAULT_WORD_LENGTH)
            word = self.catalog.random_word(language, settings.word_length)

        return RoundOptions(settings=settings, word=word, language=language)

    def _start_round(self, options: RoundOptions) -> None:
        previous = self.state
        self.history.clear()
        self._input = []
        self._stack = [GameState.play(options)]
        self._log_transition(previous, self.state)

    def _push(self, state: GameState) -> None:
        previous = self.state
        self._stack.append(state)
        self._log_transition(previous, state)

    def _log_transition(self, previous: GameState, current: GameState) -> None:
        game_logger.logger.info(
            f"Game {self.game_id}: {previous.kind.value} -> {current.kind.value}"
        )
