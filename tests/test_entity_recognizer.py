"""
Тесты для компонента EntityRecognizer.
"""

from malagasy_analyser.components.entity_recognizer import EntityRecognizer


class TestEntityRecognizer:
    """Тесты для EntityRecognizer."""

    def test_city_and_personality_found_once(self, sample_texts):
        """Повторное упоминание не дублирует результат."""
        recognizer = EntityRecognizer()
        result = recognizer.recognize(sample_texts["entities"])

        assert result.cities == ["Antananarivo", "Toamasina"]
        assert result.personalities == ["Ravalomanana", "Rajoelina"]

    def test_output_follows_gazetteer_order(self):
        recognizer = EntityRecognizer()
        result = recognizer.recognize("Morondava sy Antsirabe, Ratsiraka sy Ravalomanana")

        assert result.cities == ["Antsirabe", "Morondava"]
        assert result.personalities == ["Ravalomanana", "Ratsiraka"]

    def test_case_sensitive(self):
        recognizer = EntityRecognizer()
        result = recognizer.recognize("antananarivo RAJOELINA")

        assert result.is_empty()

    def test_empty_text(self):
        recognizer = EntityRecognizer()

        assert recognizer.recognize("").to_dict() == {"cities": [], "personalities": []}
        assert recognizer.recognize(None).is_empty()

    def test_substring_match_by_default(self):
        """Буквальная проверка подстроки находит имя внутри длинного слова."""
        recognizer = EntityRecognizer()
        result = recognizer.recognize("NyAntsirabeko")

        assert result.cities == ["Antsirabe"]

    def test_word_boundaries_mode(self):
        recognizer = EntityRecognizer(word_boundaries=True)

        assert recognizer.recognize("NyAntsirabeko").cities == []
        assert recognizer.recognize("Any Antsirabe, ary").cities == ["Antsirabe"]

    def test_custom_gazetteers(self):
        recognizer = EntityRecognizer(cities=["Nosy Be"], personalities=[])
        result = recognizer.recognize("Tonga tany Nosy Be izahay")

        assert result.cities == ["Nosy Be"]
        assert result.personalities == []
