"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ..config.game_settings import DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH


class GuessVerdict(Enum):
    """
    Per-character evaluation outcome.

    Members are ordered by how much they tell the player about a character:
    UNKNOWN < ABSENT < MISPLACED < CORRECT.
    """
    UNKNOWN = "UNKNOWN"
    ABSENT = "ABSENT"
    MISPLACED = "MISPLACED"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _VERDICT_RANK[self]

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return self.rank >= other.rank
        return NotImplemented


_VERDICT_RANK: Dict[GuessVerdict, int] = {
    GuessVerdict.UNKNOWN: 0,
    GuessVerdict.ABSENT: 1,
    GuessVerdict.MISPLACED: 2,
    GuessVerdict.CORRECT: 3,
}


@dataclass(frozen=True)
class Guess:
    """A scored guess: one (character, verdict) pair per position."""
    letters: Tuple[Tuple[str, GuessVerdict], ...]

    @property
    def word(self) -> str:
        return "".join(letter for letter, _ in self.letters)

    @property
    def verdicts(self) -> Tuple[GuessVerdict, ...]:
        return tuple(verdict for _, verdict in self.letters)

    def is_correct(self) -> bool:
        """True when every position is CORRECT."""
        return all(verdict is GuessVerdict.CORRECT for _, verdict in self.letters)

    def to_list(self) -> List[Tuple[str, str]]:
        # Verdict as string for JSON serialization
        return [(letter, verdict.value) for letter, verdict in self.letters]

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[Tuple[str, GuessVerdict]]:
        return iter(self.letters)


@dataclass(frozen=True)
class Settings:
    """Rules of a round."""
    word_length: int = DEFAULT_WORD_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True)
class RoundOptions:
    """Everything needed to play or redraw a round: rules, secret word and language."""
    settings: Settings
    word: str
    language: str

    def to_dict(self, reveal_word: bool = False) -> Dict:
        return {
            "language": self.language,
            "word_length": self.settings.word_length,
            "max_attempts": self.settings.max_attempts,
            "word": self.word if reveal_word else None,
        }


class StateKind(Enum):
    """Discriminant of GameState."""
    LOADING = "loading"
    MENU = "menu"
    PLAY = "play"
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Game-flow state: a tag plus the round it belongs to.

    Equality and hashing look at the tag only, so ``state == GameState.play()``
    answers "are we playing" regardless of which round. Compare ``options``
    explicitly when the round matters.
    """
    kind: StateKind
    options: Optional[RoundOptions] = field(default=None)

    @classmethod
    def loading(cls) -> "GameState":
        return cls(StateKind.LOADING)

    @classmethod
    def menu(cls, options: Optional[RoundOptions] = None) -> "GameState":
        return cls(StateKind.MENU, options)

    @classmethod
    def play(cls, options: Optional[RoundOptions] = None) -> "GameState":
        return cls(StateKind.PLAY, options)

    @classmethod
    def win(cls, options: Optional[RoundOptions] = None) -> "GameState":
        return cls(StateKind.WIN, options)

    @classmethod
    def loss(cls, options: Optional[RoundOptions] = None) -> "GameState":
        return cls(StateKind.LOSS, options)

    @property
    def round_over(self) -> bool:
        return self.kind in (StateKind.WIN, StateKind.LOSS)

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return f"GameState.{self.kind.value}({self.options!r})"


class GuessOutcome(Enum):
    """Result of submitting a guess."""
    ACCEPTED = "ACCEPTED"
    WON = "WON"
    LOST = "LOST"
    INVALID_LENGTH = "INVALID_LENGTH"
    UNKNOWN_WORD = "UNKNOWN_WORD"
    NOT_PLAYING = "NOT_PLAYING"

    @property
    def accepted(self) -> bool:
        return self in (GuessOutcome.ACCEPTED, GuessOutcome.WON, GuessOutcome.LOST)
