"""
Language Catalog

Loads languages, keyboard layouts, dictionaries and word lists from the assets
directory, and answers the two questions the game asks of them: "give me a
random word" and "is this a word".
"""

import json
import os
import random
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.language import KeyboardLayout, Language
from ..utils.game_logger import game_logger


class NoWordAvailableError(LookupError):
    """Raised when a language has no word of the requested length."""

    def __init__(self, language: str, length: int):
        super().__init__(f"No {length}-letter word available for language '{language}'")
        self.language = language
        self.length = length


def _normalize(word: str) -> str:
    return word.strip().lower()


def _read_words(path: str) -> List[str]:
    """Reads a whitespace-separated word file."""
    with open(path, 'r', encoding='utf-8') as f:
        return [_normalize(word) for word in f.read().split()]


def _read_json(path: str) -> Dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


class LanguageCatalog:
    """
    In-memory catalog of everything a language needs.

    A catalog is ``ready`` once it holds at least one language; game sessions
    stay in the loading state until then.
    """

    def __init__(self,
                 languages: Iterable[Language] = (),
                 keyboards: Optional[Dict[str, KeyboardLayout]] = None,
                 dictionaries: Optional[Dict[str, Iterable[str]]] = None,
                 wordlists: Optional[Dict[str, Iterable[str]]] = None,
                 rng: Optional[random.Random] = None):
        self._languages: Dict[str, Language] = {}
        self._keyboards: Dict[str, KeyboardLayout] = dict(keyboards or {})
        self._dictionaries: Dict[str, frozenset] = {
            name: frozenset(_normalize(w) for w in words)
            for name, words in (dictionaries or {}).items()
        }
        self._wordlists: Dict[str, Tuple[str, ...]] = {
            name: tuple(_normalize(w) for w in words)
            for name, words in (wordlists or {}).items()
        }
        self._rng = rng or random.Random()

        for language in languages:
            self.add_language(language)

    @classmethod
    def from_directory(cls, assets_dir: str, rng: Optional[random.Random] = None) -> "LanguageCatalog":
        catalog = cls(rng=rng)
        catalog.load_directory(assets_dir)
        return catalog

    @property
    def ready(self) -> bool:
        return bool(self._languages)

    @property
    def languages(self) -> Tuple[Language, ...]:
        return tuple(self._languages.values())

    def add_language(self, language: Language) -> None:
        """
        Registers a language whose keyboards, word lists and dictionary are
        already loaded.

        Raises:
            ValueError: If any referenced asset is missing
        """
        if language.dictionary not in self._dictionaries:
            raise ValueError(f"Language '{language.name}' has no dictionary '{language.dictionary}'")
        if not language.wordlists:
            raise ValueError(f"Language '{language.name}' has no word lists")
        for wordlist in language.wordlists:
            if wordlist not in self._wordlists:
                raise ValueError(f"Language '{language.name}' references unknown word list '{wordlist}'")
        for keyboard in language.keyboards:
            if keyboard not in self._keyboards:
                raise ValueError(f"Language '{language.name}' references unknown keyboard '{keyboard}'")

        self._languages[language.name] = language

    def load_directory(self, assets_dir: str) -> None:
        """
        Loads every asset under ``assets_dir``.

        Layout::

            keyboards/<name>.json      {"name": ..., "layout": [[...], ...]}
            lists/<name>.list          whitespace-separated words
            dictionaries/<lang>.dict   whitespace-separated words
            languages/<lang>.json      {"name": ..., "keyboards": [...], "wordlists": [...]}

        A language's dictionary is the .dict file named after the language file.

        Raises:
            FileNotFoundError: If the directory or a required subdirectory is missing
            ValueError: If an asset is malformed or references a missing asset
        """
        if not os.path.isdir(assets_dir):
            raise FileNotFoundError(f"Assets directory not found: {assets_dir}")

        for stem, path in self._asset_files(assets_dir, 'keyboards', '.json'):
            data = _read_json(path)
            layout = data.get('layout')
            if not isinstance(layout, list) or not all(isinstance(row, list) for row in layout):
                raise ValueError(f"Keyboard '{stem}' must have a list of rows")
            name = data.get('name', stem)
            self._keyboards[name] = KeyboardLayout(
                name=name,
                layout=tuple(tuple(str(key) for key in row) for row in layout),
            )

        for stem, path in self._asset_files(assets_dir, 'lists', '.list'):
            self._wordlists[stem] = tuple(_read_words(path))

        for stem, path in self._asset_files(assets_dir, 'dictionaries', '.dict'):
            self._dictionaries[stem] = frozenset(_read_words(path))

        for stem, path in self._asset_files(assets_dir, 'languages', '.json'):
            data = _read_json(path)
            self.add_language(Language(
                name=data.get('name', stem),
                keyboards=tuple(data.get('keyboards', [])),
                wordlists=tuple(data.get('wordlists', [])),
                dictionary=stem,
            ))

        game_logger.logger.info(
            f"Loaded {len(self._languages)} language(s), {len(self._keyboards)} keyboard(s), "
            f"{len(self._wordlists)} word list(s) from {assets_dir}"
        )

    @staticmethod
    def _asset_files(assets_dir: str, kind: str, extension: str) -> List[Tuple[str, str]]:
        folder = os.path.join(assets_dir, kind)
        if not os.path.isdir(folder):
            raise FileNotFoundError(f"Asset folder not found: {folder}")

        files = []
        for file_name in sorted(os.listdir(folder)):
            stem, ext = os.path.splitext(file_name)
            if ext == extension:
                files.append((stem, os.path.join(folder, file_name)))
        return files

    def get_language(self, name: str) -> Language:
        """
        Raises:
            ValueError: If the language is not in the catalog
        """
        try:
            return self._languages[name]
        except KeyError:
            raise ValueError(f"Unknown language '{name}'") from None

    def has_language(self, name: str) -> bool:
        return name in self._languages

    def keyboard_for(self, language: str) -> Optional[KeyboardLayout]:
        """First keyboard layout of a language, if it has one."""
        keyboards = self.get_language(language).keyboards
        return self._keyboards[keyboards[0]] if keyboards else None

    def candidate_words(self, language: str, length: int) -> List[str]:
        """Words of ``length`` characters across the language's word lists, deduplicated."""
        seen = set()
        words = []
        for wordlist in self.get_language(language).wordlists:
            for word in self._wordlists[wordlist]:
                if len(word) == length and word not in seen:
                    seen.add(word)
                    words.append(word)
        return words

    def word_lengths(self, language: str) -> List[int]:
        lengths = set()
        for wordlist in self.get_language(language).wordlists:
            lengths.update(len(word) for word in self._wordlists[wordlist])
        return sorted(lengths)

    def random_word(self, language: str, length: int) -> str:
        """
        Picks a random secret word.

        Raises:
            ValueError: If the language is unknown
            NoWordAvailableError: If no word of that length exists
        """
        candidates = self.candidate_words(language, length)
        if not candidates:
            raise NoWordAvailableError(language, length)
        return self._rng.choice(candidates)

    def contains(self, language: str, word: str) -> bool:
        """Dictionary lookup; unknown languages contain nothing."""
        if language not in self._languages:
            return False
        return _normalize(word) in self._dictionaries[self._languages[language].dictionary]
