"""
Компонент автодополнения.

Предлагает слова словаря, начинающиеся с введённого префикса, и
содержит вспомогательные операции для позиции курсора в редакторе:
текущее слово перед курсором и вставка выбранной подсказки.
"""

from typing import List, Optional

from ..interfaces.analyzer import WordPredictorInterface
from .lexicon import Lexicon
from .tokenizer import TokenProcessor


class WordPredictor(WordPredictorInterface):
    """Автодополнение по префиксу в порядке объявления словаря."""

    def __init__(self, lexicon: Lexicon, max_suggestions: int = 5,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует автодополнение.

        Args:
            lexicon: Словарь
            max_suggestions: Максимальное количество подсказок
            tokenizer: Токенизатор для поиска текущего слова
        """
        self.lexicon = lexicon
        self.max_suggestions = max_suggestions
        self.tokenizer = tokenizer or TokenProcessor()

    def predict(self, prefix: str) -> List[str]:
        """
        Возвращает слова, начинающиеся с префикса.

        Args:
            prefix: Префикс (регистр не важен); пустой префикс подходит всем словам

        Returns:
            Не более max_suggestions слов в порядке словаря
        """
        matches = self.lexicon.starting_with(prefix)
        return [entry.word for entry in matches[:self.max_suggestions]]

    def current_word(self, text: Optional[str], cursor: Optional[int] = None) -> str:
        """
        Возвращает слово, которое набирается перед курсором.

        Args:
            text: Текст редактора
            cursor: Позиция курсора (по умолчанию — конец текста)

        Returns:
            Последний токен текста до курсора ('' после пробела)
        """
        text = text or ""
        return self.tokenizer.last_token(text[:self._clamp(text, cursor)])

    def suggest(self, text: Optional[str], cursor: Optional[int] = None) -> List[str]:
        """Подсказки для слова перед курсором; пусто, если слово не начато."""
        word = self.current_word(text, cursor)
        if not word:
            return []
        return self.predict(word)

    def insert_suggestion(self, text: Optional[str], cursor: Optional[int], suggestion: str) -> str:
        """
        Заменяет слово перед курсором выбранной подсказкой.

        Args:
            text: Текст редактора
            cursor: Позиция курсора (по умолчанию — конец текста)
            suggestion: Выбранное слово

        Returns:
            Новый текст: подсказка и пробел на месте текущего слова
        """
        text = text or ""
        position = self._clamp(text, cursor)
        before = text[:position]
        word_start = before.rfind(self.tokenizer.last_token(before))
        return text[:word_start] + suggestion + ' ' + text[position:]

    @staticmethod
    def _clamp(text: str, cursor: Optional[int]) -> int:
        if cursor is None:
            return len(text)
        return max(0, min(cursor, len(text)))
