"""
Testing share code generation.
"""

import re

from wordl.models.game import Settings
from wordl.services import share
from wordl.services.evaluator import score_guess
from wordl.services.history import HistoryTracker

GREEN = "\U0001f7e9"
YELLOW = "\U0001f7e8"
BLACK = "\u2b1b"


def history_of(secret, *words):
    history = HistoryTracker()
    for word in words:
        history.record(score_guess(secret, word))
    return history


def test_header_has_fingerprint_and_attempts():
    code = share.generate("hello", history_of("hello", "world", "hello"), Settings(5, 6))
    header = code.splitlines()[0]

    assert re.fullmatch(r"wordl [0-9a-f]{16} 2/6", header)
    assert "hello" not in code


def test_lines_encode_each_guess_verdicts():
    code = share.generate("hello", history_of("hello", "lolly", "hello"), Settings())

    assert code.splitlines()[1:] == [
        BLACK + YELLOW + GREEN + GREEN + BLACK,
        GREEN * 5,
    ]


def test_generate_is_deterministic():
    history = history_of("hello", "world", "crane")

    assert share.generate("hello", history, Settings()) == share.generate("hello", history, Settings())


def test_fingerprint_is_fixed_width_and_word_specific():
    assert len(share.word_fingerprint("hello")) == 16
    assert len(share.word_fingerprint("слово")) == 16
    assert share.word_fingerprint("hello") != share.word_fingerprint("world")


def test_empty_history():
    code = share.generate("hello", HistoryTracker(), Settings(5, 5))

    assert code == f"wordl {share.word_fingerprint('hello')} 0/5\n"
