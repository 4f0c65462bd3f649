"""
Тесты для компонента Lexicon и встроенных данных словаря.
"""

import pytest

from malagasy_analyser.components.lexicon import Lexicon
from malagasy_analyser.dictionary import (
    MALAGASY_LEXICON,
    MALAGASY_CITIES,
    MALAGASY_PERSONALITIES,
)
from malagasy_analyser.interfaces.analyzer import LexiconEntry, WordCategory, Sentiment


class TestLexicon:
    """Тесты для Lexicon."""

    def test_builtin_lexicon_invariants(self):
        """Слова уникальны после приведения к нижнему регистру, поля непустые."""
        lexicon = Lexicon(MALAGASY_LEXICON)
        words = [entry.word.lower() for entry in lexicon]

        assert len(lexicon) == 26
        assert len(set(words)) == len(words)
        assert all(entry.word and entry.translation for entry in lexicon)

    def test_gazetteers(self):
        assert len(MALAGASY_CITIES) == 8
        assert MALAGASY_CITIES[0] == "Antananarivo"
        assert len(MALAGASY_PERSONALITIES) == 5

    def test_find_is_case_insensitive(self):
        lexicon = Lexicon(MALAGASY_LEXICON)

        assert lexicon.find("trano").translation == "maison"
        assert lexicon.find("TRANO").translation == "maison"
        assert lexicon.find("Tanàna").root == "tanàna"

    def test_find_unknown_and_empty(self):
        lexicon = Lexicon(MALAGASY_LEXICON)

        assert lexicon.find("unknownword") is None
        assert lexicon.find("") is None
        assert lexicon.find(None) is None
        # Поиск точный: пробелы не обрезаются
        assert lexicon.find(" trano") is None

    def test_contains(self):
        lexicon = Lexicon(MALAGASY_LEXICON)

        assert "Tsara" in lexicon
        assert "tsara!" not in lexicon
        assert 42 not in lexicon

    def test_starting_with_keeps_declaration_order(self):
        lexicon = Lexicon(MALAGASY_LEXICON)
        words = [entry.word for entry in lexicon.starting_with("mi")]

        assert words == ["mihira", "mitady", "mihinana", "misotro", "miasa", "mianatra"]
        assert len(lexicon.starting_with("")) == len(lexicon)

    def test_by_category(self):
        lexicon = Lexicon(MALAGASY_LEXICON)

        verbs = lexicon.by_category(WordCategory.VERB)
        assert len(verbs) == 10
        assert lexicon.by_category(WordCategory.ADVERB) == []

    def test_duplicate_word_rejected(self):
        entries = [
            LexiconEntry("trano", "trano", "maison", WordCategory.NOUN),
            LexiconEntry("Trano", "trano", "maison", WordCategory.NOUN),
        ]
        with pytest.raises(ValueError):
            Lexicon(entries)

    def test_empty_fields_rejected(self):
        with pytest.raises(ValueError):
            Lexicon([LexiconEntry("", "x", "y", WordCategory.OTHER)])
        with pytest.raises(ValueError):
            Lexicon([LexiconEntry("x", "x", "", WordCategory.OTHER)])

    def test_entries_are_immutable(self):
        entry = MALAGASY_LEXICON[0]
        with pytest.raises(AttributeError):
            entry.word = "other"  # type: ignore[misc]

    def test_to_dataframe(self):
        lexicon = Lexicon(MALAGASY_LEXICON)
        df = lexicon.to_dataframe()

        assert list(df.columns) == ["word", "root", "translation", "category", "sentiment"]
        assert len(df) == 26
        assert df.iloc[0]["word"] == "manao"
        assert df.iloc[0]["category"] == "verb"
        assert (df["sentiment"] == Sentiment.NEGATIVE.value).sum() == 4
