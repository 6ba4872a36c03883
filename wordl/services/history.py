"""
Guess History

Keeps the guesses of the current round and the best verdict seen for each
character, which is what an on-screen keyboard colours its keys with.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..models.game import Guess, GuessVerdict


class HistoryTracker:
    """
    Ordered guess history plus a per-character aggregate verdict.

    The aggregate only ever moves up the UNKNOWN < ABSENT < MISPLACED < CORRECT
    ladder; a later, less informative verdict never overwrites an earlier one.
    """

    def __init__(self):
        self._guesses: List[Guess] = []
        self._aggregate: Dict[str, GuessVerdict] = {}

    def record(self, guess: Guess) -> None:
        """
        Adds a guess to the history and folds its verdicts into the aggregate.

        No validation happens here; the caller only records guesses it has
        already accepted.
        """
        for letter, verdict in guess:
            current = self._aggregate.get(letter)

            # Correct is never replaced; everything else only upgrades
            if current is None:
                self._aggregate[letter] = verdict
            elif current is not GuessVerdict.CORRECT and verdict > current:
                self._aggregate[letter] = verdict

        self._guesses.append(guess)

    def clear(self) -> None:
        """Forgets all guesses and aggregate verdicts."""
        self._guesses = []
        self._aggregate = {}

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def aggregate(self) -> Mapping[str, GuessVerdict]:
        """Read-only view; characters never guessed are missing (treat as UNKNOWN)."""
        return MappingProxyType(self._aggregate)

    def verdict_for(self, letter: str) -> GuessVerdict:
        return self._aggregate.get(letter, GuessVerdict.UNKNOWN)

    @property
    def attempts(self) -> int:
        return len(self._guesses)

    @property
    def last(self) -> Optional[Guess]:
        return self._guesses[-1] if self._guesses else None

    def to_dict(self) -> Dict:
        return {
            "guesses": [guess.word for guess in self._guesses],
            "guess_results": [guess.to_list() for guess in self._guesses],
            "letter_status": {letter: verdict.value for letter, verdict in self._aggregate.items()},
        }
