"""
Компонент для лемматизации малагасийских слов.

Отвечает за приведение слова к корню: сначала точный поиск в словаре,
затем отсечение первого подходящего префикса (mi-, ma-, fa-).
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..dictionary import LEMMA_PREFIXES
from ..interfaces.analyzer import LemmaProcessorInterface
from .lexicon import Lexicon
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)


class LemmaProcessor(LemmaProcessorInterface):
    """Процессор для лемматизации по словарю и префиксным правилам."""

    def __init__(self, lexicon: Lexicon, prefixes: Sequence[str] = LEMMA_PREFIXES,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует процессор лемматизации.

        Args:
            lexicon: Словарь для точного поиска
            prefixes: Префиксы в порядке приоритета
            tokenizer: Токенизатор для лемматизации текста
        """
        self.lexicon = lexicon
        self.prefixes = tuple(prefixes)
        self.tokenizer = tokenizer or TokenProcessor()

    def lemmatize(self, word: str) -> str:
        """
        Приводит слово к корню.

        Args:
            word: Исходное слово (регистр не важен)

        Returns:
            Корень из словаря, слово без префикса или слово в нижнем регистре
        """
        lower_word = self.lexicon.normalizer.normalize(word)
        entry = self.lexicon.find(lower_word)
        if entry:
            return entry.root

        # Срабатывает только первое подходящее правило
        for prefix in self.prefixes:
            if lower_word.startswith(prefix):
                logger.debug(f"Лемматизация '{lower_word}': отсечён префикс '{prefix}'")
                return lower_word[len(prefix):]

        return lower_word

    def lemmatize_batch(self, words: List[str]) -> List[str]:
        """
        Приводит список слов к корням.

        Args:
            words: Список слов

        Returns:
            Список корней той же длины
        """
        if not words:
            return []
        return [self.lemmatize(word) for word in words]

    def lemmatize_text(self, text: str) -> List[Tuple[str, str]]:
        """
        Лемматизирует каждый токен текста.

        Args:
            text: Исходный текст

        Returns:
            Пары (исходный токен, корень) в порядке следования
        """
        return [(token, self.lemmatize(token)) for token in self.tokenizer.tokenize(text)]

    def get_word_analysis(self, word: str) -> Dict[str, Optional[str]]:
        """
        Возвращает сведения о слове для всплывающей подсказки редактора.

        Args:
            word: Выбранное слово

        Returns:
            Словарь с корнем, переводом, категорией и тональностью
        """
        entry = self.lexicon.find(word)
        return {
            'word': word,
            'root': self.lemmatize(word),
            'translation': entry.translation if entry else None,
            'category': entry.category.value if entry else None,
            'sentiment': entry.sentiment.value if entry and entry.sentiment else None,
        }
