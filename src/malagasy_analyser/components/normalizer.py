"""
Компонент для нормализации малагасийских слов.

Приводит слово к ключу поиска в словаре: нижний регистр и
(опционально) Unicode-нормализация NFC, чтобы «tanàna», набранное
с комбинируемым акцентом, совпадало с записью словаря. По умолчанию
NFC выключена и слово только переводится в нижний регистр.
"""

import unicodedata
from typing import List, Optional

from ..interfaces.analyzer import WordNormalizerInterface


class WordNormalizer(WordNormalizerInterface):
    """Нормализатор для малагасийских слов."""

    def __init__(self, unicode_nfc: bool = False):
        """
        Инициализирует нормализатор.

        Args:
            unicode_nfc: Применять ли Unicode-нормализацию NFC
        """
        self.unicode_nfc = unicode_nfc

    def normalize(self, word: Optional[str]) -> str:
        """
        Нормализует слово для поиска в словаре.

        Пробелы не обрезаются: поиск в словаре точный.

        Args:
            word: Исходное слово

        Returns:
            Нормализованное слово ('' для пустого значения)
        """
        if not word:
            return ""
        if self.unicode_nfc:
            word = unicodedata.normalize('NFC', word)
        return word.lower()

    def normalize_batch(self, words: List[str]) -> List[str]:
        """
        Нормализует список слов.

        Args:
            words: Список слов для нормализации

        Returns:
            Список нормализованных слов
        """
        if not words:
            return []
        return [self.normalize(word) for word in words]
