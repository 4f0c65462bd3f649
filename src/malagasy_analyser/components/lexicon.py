"""
Компонент словаря: упорядоченная неизменяемая таблица записей.

Отвечает за:
- Проверку инвариантов таблицы (уникальность слов, непустые поля)
- Регистронезависимый точный поиск по слову
- Поиск по префиксу с сохранением порядка объявления
- Представление словаря в виде таблицы pandas
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from ..interfaces.analyzer import LexiconEntry, WordCategory
from .normalizer import WordNormalizer
import logging

logger = logging.getLogger(__name__)


class Lexicon:
    """Словарь малагасийских слов."""

    def __init__(self, entries: Iterable[LexiconEntry], normalizer: Optional[WordNormalizer] = None):
        """
        Инициализирует словарь и проверяет инварианты.

        Args:
            entries: Записи словаря в порядке объявления
            normalizer: Нормализатор для ключей поиска

        Raises:
            ValueError: если запись пустая или слово повторяется
        """
        self.normalizer = normalizer or WordNormalizer()
        self._entries: Tuple[LexiconEntry, ...] = tuple(entries)
        self._index: Dict[str, LexiconEntry] = {}

        for entry in self._entries:
            if not entry.word:
                raise ValueError("Запись словаря с пустым словом")
            if not entry.translation:
                raise ValueError(f"Пустой перевод у слова '{entry.word}'")
            key = self.normalizer.normalize(entry.word)
            if key in self._index:
                raise ValueError(f"Слово '{entry.word}' встречается в словаре повторно")
            self._index[key] = entry

        logger.debug(f"Словарь загружен: {len(self._entries)} записей")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.find(word) is not None

    @property
    def entries(self) -> Tuple[LexiconEntry, ...]:
        return self._entries

    def find(self, word: Optional[str]) -> Optional[LexiconEntry]:
        """
        Ищет запись по точному совпадению слова без учёта регистра.

        Args:
            word: Слово для поиска

        Returns:
            Запись словаря или None
        """
        return self._index.get(self.normalizer.normalize(word))

    def starting_with(self, prefix: Optional[str]) -> List[LexiconEntry]:
        """
        Возвращает записи, слово которых начинается с префикса.

        Порядок — порядок объявления в словаре; пустой префикс даёт все записи.
        """
        key = self.normalizer.normalize(prefix)
        return [entry for entry in self._entries if entry.word.startswith(key)]

    def by_category(self, category: WordCategory) -> List[LexiconEntry]:
        """Возвращает записи заданной категории в порядке объявления."""
        return [entry for entry in self._entries if entry.category == category]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Представляет словарь в виде таблицы.

        Returns:
            DataFrame с колонками word, root, translation, category, sentiment
        """
        return pd.DataFrame(
            [entry.to_dict() for entry in self._entries],
            columns=['word', 'root', 'translation', 'category', 'sentiment'],
        )
