"""
Компонент для перевода малагасийских слов на французский.
"""

from typing import Dict, List, Optional

from ..interfaces.analyzer import TranslatorInterface
from .lexicon import Lexicon


class Translator(TranslatorInterface):
    """Переводчик по точному совпадению со словарём."""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def translate(self, word: str) -> Optional[str]:
        """
        Переводит слово.

        Args:
            word: Слово (регистр не важен)

        Returns:
            Перевод или None, если слова нет в словаре
        """
        entry = self.lexicon.find(word)
        return entry.translation if entry else None

    def translate_batch(self, words: List[str]) -> Dict[str, Optional[str]]:
        """Переводит список слов; ключи — исходные слова."""
        return {word: self.translate(word) for word in words or []}
