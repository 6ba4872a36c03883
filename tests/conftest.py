import os
import tempfile

# Keep test logs out of the working tree; must happen before wordl is imported
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordl-test-logs'))

import pytest

from wordl.models.game import Settings
from wordl.models.language import KeyboardLayout, Language
from wordl.services.catalog import LanguageCatalog
from wordl.services.game_flow import GameFlowController

QWERTY = KeyboardLayout(
    name="qwerty",
    layout=(tuple("qwertyuiop"), tuple("asdfghjkl"), tuple("zxcvbnm")),
)

DICTIONARY = ["hello", "world", "crane", "house", "lemon", "llama", "lolly", "abca", "aabb"]


@pytest.fixture
def make_catalog():
    """
    Builds an in-memory catalog for "english-us".

    With a single word per length in the list, the secret word is predictable.
    """
    def _make(wordlist=("hello", "abca"), dictionary=DICTIONARY, extra_languages=()):
        languages = [Language("english-us", ("qwerty",), ("classic",), "english-us")]
        wordlists = {"classic": list(wordlist)}
        dictionaries = {"english-us": list(dictionary)}
        for name, words in extra_languages:
            languages.append(Language(name, ("qwerty",), (name,), name))
            wordlists[name] = list(words)
            dictionaries[name] = list(words)
        return LanguageCatalog(
            languages=languages,
            keyboards={"qwerty": QWERTY},
            dictionaries=dictionaries,
            wordlists=wordlists,
        )

    return _make


@pytest.fixture
def catalog(make_catalog):
    return make_catalog(extra_languages=[("alt", ["zebra", "ox"])])


@pytest.fixture
def game(catalog):
    """A controller already playing a round whose secret word is "hello"."""
    controller = GameFlowController(catalog, game_id="test-game")
    assert controller.assets_loaded()
    return controller


@pytest.fixture
def short_game(catalog):
    """Like ``game`` but with only two attempts."""
    controller = GameFlowController(catalog, default_settings=Settings(word_length=5, max_attempts=2))
    controller.assets_loaded()
    return controller
