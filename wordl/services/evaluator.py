"""
Guess Evaluation

Scores a guess against the secret word, one verdict per position.
"""

from typing import List, Optional, Sequence

from ..models.game import Guess, GuessVerdict


def evaluate(secret: Sequence[str], guess: Sequence[str]) -> List[GuessVerdict]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their slot of the secret, so a
    repeated letter in the guess is only MISPLACED while an unconsumed copy is
    left in the secret. Both passes run left to right.

    Args:
        secret: The secret word (any sequence of characters)
        guess: The guess, same length as the secret

    Returns:
        List[GuessVerdict]: One verdict per position

    Raises:
        ValueError: If the lengths differ
    """
    secret_chars: List[Optional[str]] = list(secret)
    guess_chars = list(guess)

    if len(secret_chars) != len(guess_chars):
        raise ValueError(
            f"Guess has {len(guess_chars)} characters, secret has {len(secret_chars)}"
        )

    result: List[Optional[GuessVerdict]] = [None] * len(guess_chars)

    # First pass: exact position matches
    for i, letter in enumerate(guess_chars):
        if letter == secret_chars[i]:
            result[i] = GuessVerdict.CORRECT
            # Mark as consumed to prevent double-counting
            secret_chars[i] = None

    # Second pass: present letters and misses
    for i, letter in enumerate(guess_chars):
        if result[i] is not None:
            continue
        if letter in secret_chars:
            result[i] = GuessVerdict.MISPLACED
            # Remove first occurrence
            secret_chars[secret_chars.index(letter)] = None
        else:
            result[i] = GuessVerdict.ABSENT

    return [verdict for verdict in result if verdict is not None]


def score_guess(secret: str, guess: str) -> Optional[Guess]:
    """
    Builds a scored Guess, or returns None when the lengths differ.
    """
    if len(secret) != len(guess):
        return None
    return Guess(tuple(zip(guess, evaluate(secret, guess))))
