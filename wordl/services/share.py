"""
Share Codes

Builds the text a player pastes to show how a round went without giving the
word away.
"""

import hashlib

from ..models.game import GuessVerdict, Settings
from .history import HistoryTracker

SHARE_PREFIX = "wordl"

VERDICT_BLOCKS = {
    GuessVerdict.UNKNOWN: "\u2b1b",        # black square
    GuessVerdict.ABSENT: "\u2b1b",
    GuessVerdict.MISPLACED: "\U0001f7e8",  # yellow square
    GuessVerdict.CORRECT: "\U0001f7e9",    # green square
}


def word_fingerprint(word: str) -> str:
    """Fixed-width digest of the secret word (16 hex digits)."""
    return hashlib.blake2b(word.encode('utf-8'), digest_size=8).hexdigest()


def generate(word: str, history: HistoryTracker, settings: Settings) -> str:
    """
    Returns the share text for a round.

    Format::

        wordl <fingerprint> <attempts>/<max_attempts>
        <one line of coloured blocks per guess>

    Args:
        word: The secret word; only its fingerprint is emitted
        history: Guesses made so far
        settings: Round rules (for max_attempts)
    """
    blocks = "".join(
        "".join(VERDICT_BLOCKS[verdict] for verdict in guess.verdicts) + "\n"
        for guess in history.guesses
    )
    header = f"{SHARE_PREFIX} {word_fingerprint(word)} {history.attempts}/{settings.max_attempts}"
    return f"{header}\n{blocks}"
