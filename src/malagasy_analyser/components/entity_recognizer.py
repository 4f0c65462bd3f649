"""
Компонент для распознавания именованных сущностей (NER).

Проверяет присутствие каждого элемента газеттира в тексте. По умолчанию
используется буквальная проверка вхождения подстроки с учётом регистра,
поэтому имя внутри более длинного слова тоже находится. Режим
word_boundaries требует совпадения целого слова.
"""

import re
from typing import Dict, List, Optional, Pattern, Sequence

from ..dictionary import MALAGASY_CITIES, MALAGASY_PERSONALITIES
from ..interfaces.analyzer import EntityRecognizerInterface, EntityResult


class EntityRecognizer(EntityRecognizerInterface):
    """Распознаватель городов и персоналий по газеттирам."""

    def __init__(self,
                 cities: Sequence[str] = MALAGASY_CITIES,
                 personalities: Sequence[str] = MALAGASY_PERSONALITIES,
                 word_boundaries: bool = False):
        """
        Инициализирует распознаватель.

        Args:
            cities: Газеттир городов в порядке объявления
            personalities: Газеттир персоналий в порядке объявления
            word_boundaries: Искать только целые слова
        """
        self.cities = tuple(cities)
        self.personalities = tuple(personalities)
        self.word_boundaries = word_boundaries
        self._patterns: Dict[str, Pattern[str]] = {}
        if word_boundaries:
            for name in self.cities + self.personalities:
                self._patterns[name] = re.compile(r'\b' + re.escape(name) + r'\b')

    def recognize(self, text: Optional[str]) -> EntityResult:
        """
        Находит сущности в тексте.

        Args:
            text: Исходный текст

        Returns:
            Города и персоналии, каждая не более одного раза, в порядке газеттира
        """
        text = text or ""
        return EntityResult(
            cities=self._find_all(self.cities, text),
            personalities=self._find_all(self.personalities, text),
        )

    def _find_all(self, names: Sequence[str], text: str) -> List[str]:
        return [name for name in names if self._contains(name, text)]

    def _contains(self, name: str, text: str) -> bool:
        if self.word_boundaries:
            return self._patterns[name].search(text) is not None
        return name in text
