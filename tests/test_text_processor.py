"""
Тесты для модуля text_processor
"""

import unittest

from malagasy_analyser.text_processor import MalagasyTextProcessor


class TestMalagasyTextProcessor(unittest.TestCase):
    """Тесты для класса MalagasyTextProcessor"""

    def setUp(self):
        """Настройка перед каждым тестом"""
        self.processor = MalagasyTextProcessor()

    def test_remove_html_tags(self):
        """Тест удаления HTML тегов"""
        # Тест с простыми тегами
        self.assertEqual(self.processor.remove_html_tags("<p>Tsara ny trano</p>"), "Tsara ny trano")

        # Тест с вложенными тегами
        self.assertEqual(self.processor.remove_html_tags("<div><span>Olona</span></div>"), "Olona")

        # Тест без тегов
        self.assertEqual(self.processor.remove_html_tags("Tsara ny trano"), "Tsara ny trano")

        # Тест с пустой строкой
        self.assertEqual(self.processor.remove_html_tags(""), "")
        self.assertEqual(self.processor.remove_html_tags(None), "")

    def test_clean_text(self):
        """Тест полной очистки текста"""
        result = self.processor.clean_text("  <p>Ratsy&nbsp;ny andro</p>  ")
        self.assertEqual(result, "Ratsy ny andro")

        result = self.processor.clean_text("Tsara\xa0be")
        self.assertEqual(result, "Tsara be")

    def test_extract_words(self):
        """Тест извлечения слов"""
        result = self.processor.extract_words("Tsara ny trano! Mihira, izy.")
        self.assertEqual(result, ["tsara", "ny", "trano", "mihira", "izy"])

        self.assertEqual(self.processor.extract_words(""), [])
        self.assertEqual(self.processor.extract_words("123 !!"), [])

    def test_foreign_letter_ratio(self):
        """Доля букв вне малагасийского алфавита"""
        self.assertEqual(self.processor.foreign_letter_ratio("tsara ny trano"), 0.0)
        self.assertEqual(self.processor.foreign_letter_ratio("quux"), 1.0)
        self.assertAlmostEqual(self.processor.foreign_letter_ratio("waka"), 0.25)
        self.assertEqual(self.processor.foreign_letter_ratio(""), 0.0)


if __name__ == '__main__':
    unittest.main()
