"""
Компонент для анализа тональности малагасийского текста.

Каждый токен (без удаления пунктуации и без лемматизации) сравнивается
со словарём; учитываются только записи с положительной или отрицательной
тональностью. Итоговая оценка лежит в диапазоне [-1, 1].
"""

from typing import Optional

from ..interfaces.analyzer import Sentiment, SentimentAnalyzerInterface, SentimentResult
from .lexicon import Lexicon
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)

LABEL_POSITIVE = "Positive"
LABEL_NEGATIVE = "Negative"
LABEL_NEUTRAL = "Neutral"


class SentimentAnalyzer(SentimentAnalyzerInterface):
    """Анализатор тональности по словарю."""

    def __init__(self, lexicon: Lexicon,
                 positive_threshold: float = 0.2,
                 negative_threshold: float = -0.2,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует анализатор.

        Args:
            lexicon: Словарь с пометками тональности
            positive_threshold: Оценка строго выше порога — "Positive"
            negative_threshold: Оценка строго ниже порога — "Negative"
            tokenizer: Токенизатор текста
        """
        self.lexicon = lexicon
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold
        self.tokenizer = tokenizer or TokenProcessor()

    def analyze(self, text: str) -> SentimentResult:
        """
        Оценивает тональность текста.

        Args:
            text: Исходный текст

        Returns:
            Оценка (pos - neg) / (pos + neg) и метка
        """
        positive_count = 0
        negative_count = 0

        for token in self.tokenizer.tokenize(text):
            entry = self.lexicon.find(token)
            if entry is None:
                continue
            if entry.sentiment == Sentiment.POSITIVE:
                positive_count += 1
            elif entry.sentiment == Sentiment.NEGATIVE:
                negative_count += 1

        total = positive_count + negative_count
        if total == 0:
            return SentimentResult(score=0.0, label=LABEL_NEUTRAL)

        score = (positive_count - negative_count) / total
        logger.debug(f"Тональность: +{positive_count} / -{negative_count} → {score:.2f}")
        return SentimentResult(
            score=score,
            label=self.get_label(score),
            positive_count=positive_count,
            negative_count=negative_count,
        )

    def get_label(self, score: float) -> str:
        """Возвращает метку для оценки; граничные значения — нейтральные."""
        if score > self.positive_threshold:
            return LABEL_POSITIVE
        if score < self.negative_threshold:
            return LABEL_NEGATIVE
        return LABEL_NEUTRAL
