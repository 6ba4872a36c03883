"""
Language Data Models

Contains the language and keyboard layout structures built from assets.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class KeyboardLayout:
    """On-screen keyboard: rows of keys."""
    name: str
    layout: Tuple[Tuple[str, ...], ...]

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for row in self.layout for key in row)


@dataclass(frozen=True)
class Language:
    """A language resolved to its keyboards, word lists and dictionary."""
    name: str
    keyboards: Tuple[str, ...]
    wordlists: Tuple[str, ...]
    dictionary: str

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "keyboards": list(self.keyboards),
            "wordlists": list(self.wordlists),
        }
