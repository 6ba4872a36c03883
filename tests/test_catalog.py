"""
Testing asset loading and word lookups.
"""

import json
import random

import pytest

from wordl.config import Config
from wordl.models.language import Language
from wordl.services.catalog import LanguageCatalog, NoWordAvailableError


@pytest.fixture(scope="module")
def bundled():
    return LanguageCatalog.from_directory(Config.ASSETS_DIR, rng=random.Random(7))


def test_bundled_assets_load(bundled):
    assert bundled.ready
    assert {language.name for language in bundled.languages} == {"english-us", "русский"}


def test_bundled_random_words_are_dictionary_words(bundled):
    for _ in range(20):
        word = bundled.random_word("english-us", 5)
        assert len(word) == 5
        assert bundled.contains("english-us", word)

    russian = bundled.random_word("русский", 5)
    assert bundled.contains("русский", russian)


def test_bundled_keyboards(bundled):
    assert bundled.keyboard_for("english-us").name == "qwerty"
    assert "й" in bundled.keyboard_for("русский").keys()


def test_contains_is_case_insensitive(catalog):
    assert catalog.contains("english-us", "HELLO")
    assert not catalog.contains("english-us", "zzzzz")


def test_unknown_language_contains_nothing(catalog):
    assert not catalog.contains("klingon", "hello")


def test_random_word_filters_by_length(catalog):
    assert catalog.random_word("english-us", 5) == "hello"
    assert catalog.random_word("english-us", 4) == "abca"


def test_random_words_come_from_every_word_list():
    catalog = LanguageCatalog(
        languages=[Language("xx", (), ("first", "second"), "xx")],
        dictionaries={"xx": ["apple", "zebra"]},
        wordlists={"first": ["apple", "ox"], "second": ["zebra", "apple"]},
        rng=random.Random(3),
    )

    assert catalog.candidate_words("xx", 5) == ["apple", "zebra"]
    assert catalog.word_lengths("xx") == [2, 5]
    assert {catalog.random_word("xx", 5) for _ in range(50)} == {"apple", "zebra"}


def test_no_word_of_requested_length(catalog):
    with pytest.raises(NoWordAvailableError) as excinfo:
        catalog.random_word("english-us", 9)

    assert excinfo.value.length == 9
    assert excinfo.value.language == "english-us"


def test_unknown_language_raises_value_error(catalog):
    with pytest.raises(ValueError):
        catalog.random_word("klingon", 5)


def test_word_lengths(catalog):
    assert catalog.word_lengths("english-us") == [4, 5]


def test_empty_catalog_is_not_ready():
    assert not LanguageCatalog().ready


def test_language_with_missing_dictionary_is_rejected():
    catalog = LanguageCatalog(wordlists={"list": ["hello"]})

    with pytest.raises(ValueError):
        catalog.add_language(Language("english-us", (), ("list",), "english-us"))


def test_missing_directory():
    with pytest.raises(FileNotFoundError):
        LanguageCatalog.from_directory("/nonexistent/assets")


def write_assets(root, keyboard_layout):
    for folder in ("keyboards", "lists", "dictionaries", "languages"):
        (root / folder).mkdir()
    (root / "keyboards" / "abc.json").write_text(
        json.dumps({"name": "abc", "layout": keyboard_layout}), encoding="utf-8"
    )
    (root / "lists" / "tiny.list").write_text("cat dog\nbird", encoding="utf-8")
    (root / "dictionaries" / "tiny-lang.dict").write_text("cat dog bird cow", encoding="utf-8")
    (root / "languages" / "tiny-lang.json").write_text(
        json.dumps({"name": "tiny-lang", "keyboards": ["abc"], "wordlists": ["tiny"]}), encoding="utf-8"
    )


def test_load_directory(tmp_path):
    write_assets(tmp_path, [["a", "b"], ["c"]])

    catalog = LanguageCatalog.from_directory(str(tmp_path))

    assert catalog.get_language("tiny-lang").dictionary == "tiny-lang"
    assert catalog.contains("tiny-lang", "cow")
    assert catalog.candidate_words("tiny-lang", 3) == ["cat", "dog"]
    assert catalog.keyboard_for("tiny-lang").layout == (("a", "b"), ("c",))


def test_malformed_keyboard_is_rejected(tmp_path):
    write_assets(tmp_path, "abc")

    with pytest.raises(ValueError):
        LanguageCatalog.from_directory(str(tmp_path))
