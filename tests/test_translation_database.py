import logging

import pytest

from linguaar.default_translations import DEFAULT_TRANSLATIONS
from linguaar.models import MultiLanguageTranslation, TargetLanguage, TranslationEntry
from linguaar.translation_database import TranslationDatabase, format_category_name


@pytest.fixture
def cat_table():
    table = TranslationDatabase()
    table.insert("cat", "Cat", "Chat", "Katze", "Gatto")
    table.rebuild_index()
    return table


def test_lookup_returns_stored_string_for_every_language(cat_table):
    assert cat_table.lookup("cat", TargetLanguage.ENGLISH) == "Cat"
    assert cat_table.lookup("cat", TargetLanguage.FRENCH) == "Chat"
    assert cat_table.lookup("cat", TargetLanguage.GERMAN) == "Katze"
    assert cat_table.lookup("cat", TargetLanguage.ITALIAN) == "Gatto"


def test_lookup_miss_falls_back_to_formatted_identifier(cat_table):
    assert cat_table.lookup("dog", TargetLanguage.ITALIAN) == "Dog"
    for lang in TargetLanguage:
        assert cat_table.lookup("traffic_light", lang) == "Traffic light"


def test_lookup_miss_is_logged_not_raised(cat_table, caplog):
    with caplog.at_level(logging.INFO, logger="linguaar.translation_database"):
        assert cat_table.lookup("fire_hydrant", TargetLanguage.GERMAN) == "Fire hydrant"
    assert "fire_hydrant" in caplog.text


def test_lookup_is_case_sensitive(cat_table):
    assert cat_table.lookup("Cat", TargetLanguage.FRENCH) == "Cat"
    assert not cat_table.has("CAT")


def test_format_category_name_edge_cases():
    assert format_category_name("") == ""
    assert format_category_name("_x") == " x"
    assert format_category_name("tv") == "Tv"
    assert format_category_name("already Fine") == "Already Fine"


def test_duplicate_insert_keeps_first_entry(cat_table, caplog):
    with caplog.at_level(logging.WARNING, logger="linguaar.translation_database"):
        assert cat_table.insert("cat", "Kitty", "Minou", "Mieze", "Micio") is False
    assert "Duplicate" in caplog.text
    assert len(cat_table) == 1
    assert cat_table.lookup("cat", TargetLanguage.ITALIAN) == "Gatto"


def test_empty_category_is_rejected():
    table = TranslationDatabase()
    assert table.insert("", "a", "b", "c", "d") is False
    assert len(table) == 0


def test_missing_language_is_rejected_at_construction():
    with pytest.raises(ValueError):
        MultiLanguageTranslation(english="Cat", french=None, german="Katze", italian="Gatto")


def test_empty_translation_string_is_returned_as_is():
    table = TranslationDatabase()
    table.insert("bench", "Bench", "", "Bank", "Panchina")
    assert table.lookup("bench", TargetLanguage.FRENCH) == ""


def test_index_is_built_lazily_and_invalidated_by_clear(cat_table):
    assert not cat_table.index_dirty
    cat_table.insert("dog", "Dog", "Chien", "Hund", "Cane")
    assert cat_table.index_dirty
    assert cat_table.has("dog")
    assert not cat_table.index_dirty

    cat_table.clear()
    assert cat_table.index_dirty
    assert cat_table.all_categories() == set()
    assert cat_table.lookup("cat", TargetLanguage.ITALIAN) == "Cat"


def test_all_categories_and_contains(cat_table):
    cat_table.insert("dog", "Dog", "Chien", "Hund", "Cane")
    assert cat_table.all_categories() == {"cat", "dog"}
    assert cat_table.sorted_categories() == ["cat", "dog"]
    assert "dog" in cat_table
    assert "horse" not in cat_table


def test_constructor_entries_skip_duplicates():
    first = TranslationEntry("cup", MultiLanguageTranslation("Cup", "Tasse", "Tasse", "Tazza"))
    second = TranslationEntry("cup", MultiLanguageTranslation("Mug", "Mug", "Becher", "Boccale"))
    table = TranslationDatabase([first, second])
    assert len(table) == 1
    assert table.entry("cup") == first.translations


def test_default_data_set():
    table = TranslationDatabase.with_defaults()
    assert len(table) == len(DEFAULT_TRANSLATIONS) == 206
    assert table.lookup("chair", TargetLanguage.ITALIAN) == "Sedia"
    assert table.lookup("traffic_light", TargetLanguage.GERMAN) == "Ampel"
    assert table.validate() == {"total": 206, "empty": 0, "duplicates": []}
