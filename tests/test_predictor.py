"""
Тесты для компонента WordPredictor.
"""

import pytest

from malagasy_analyser.components.lexicon import Lexicon
from malagasy_analyser.components.predictor import WordPredictor
from malagasy_analyser.dictionary import MALAGASY_LEXICON


@pytest.fixture
def predictor():
    return WordPredictor(Lexicon(MALAGASY_LEXICON))


class TestWordPredictor:
    """Тесты для WordPredictor."""

    def test_predict_prefix_in_declaration_order(self, predictor):
        words = predictor.predict("ma")

        assert words == ["manao", "manosika", "mandeha", "manana", "mahafinaritra"]
        assert words.index("manao") < words.index("manosika")

    def test_predict_is_case_insensitive(self, predictor):
        assert predictor.predict("FA") == ["fahatezerana", "fahasambarana"]

    def test_predict_caps_at_five(self, predictor):
        assert len(predictor.predict("m")) == 5
        assert predictor.predict("") == ["manao", "manosika", "mihira", "mandeha", "mitady"]

    def test_predict_no_match(self, predictor):
        assert predictor.predict("xyz") == []

    def test_predict_full_word(self, predictor):
        assert predictor.predict("tsara") == ["tsara"]

    def test_custom_limit(self):
        predictor = WordPredictor(Lexicon(MALAGASY_LEXICON), max_suggestions=2)
        assert predictor.predict("mi") == ["mihira", "mitady"]

    def test_current_word(self, predictor):
        assert predictor.current_word("Tsara ny tra") == "tra"
        assert predictor.current_word("Tsara ny ") == ""
        assert predictor.current_word("Tsara ny trano", cursor=8) == "ny"
        assert predictor.current_word("") == ""

    def test_suggest(self, predictor):
        assert predictor.suggest("Mihira ny tr") == ["trano"]
        assert predictor.suggest("Mihira ny ") == []
        assert predictor.suggest(None) == []

    def test_insert_suggestion_at_end(self, predictor):
        assert predictor.insert_suggestion("Tsara ny tra", None, "trano") == "Tsara ny trano "

    def test_insert_suggestion_in_middle(self, predictor):
        text = "Tsara ny tr sy olona"
        assert predictor.insert_suggestion(text, 11, "trano") == "Tsara ny trano  sy olona"

    def test_insert_suggestion_after_space(self, predictor):
        assert predictor.insert_suggestion("Tsara ny ", None, "trano") == "Tsara ny trano "

    def test_cursor_is_clamped(self, predictor):
        assert predictor.current_word("olona", cursor=100) == "olona"
        assert predictor.current_word("olona", cursor=-3) == ""
