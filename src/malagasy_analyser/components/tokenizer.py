"""
Компонент для токенизации малагасийского текста.

Разбивает текст по пробельным символам без удаления пунктуации:
анализаторы сравнивают с словарём именно «сырые» токены.
"""

import re
from typing import Dict, List, Optional

from ..interfaces.analyzer import TokenProcessorInterface


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста по пробелам."""

    def __init__(self):
        self.whitespace_pattern = re.compile(r'\s+')

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Разбивает текст на непустые токены по пробельным символам.

        Args:
            text: Исходный текст

        Returns:
            Список токенов (регистр и пунктуация сохраняются)
        """
        if not text:
            return []
        return [token for token in self.whitespace_pattern.split(text) if token]

    def count_words(self, text: Optional[str]) -> int:
        """Подсчитывает количество непустых токенов."""
        return len(self.tokenize(text))

    def last_token(self, text: Optional[str]) -> str:
        """
        Возвращает последний фрагмент текста после пробельного символа.

        Если текст заканчивается пробелом, результат — пустая строка.
        """
        if not text:
            return ""
        return self.whitespace_pattern.split(text)[-1]

    def get_token_statistics(self, tokens: List[str]) -> Dict[str, object]:
        """
        Возвращает статистику по токенам.

        Args:
            tokens: Список токенов

        Returns:
            Словарь со статистикой
        """
        if not tokens:
            return {
                'total_tokens': 0,
                'unique_tokens': 0,
                'avg_length': 0.0,
            }

        lengths = [len(t) for t in tokens]
        return {
            'total_tokens': len(tokens),
            'unique_tokens': len(set(t.lower() for t in tokens)),
            'avg_length': round(sum(lengths) / len(lengths), 1),
        }
