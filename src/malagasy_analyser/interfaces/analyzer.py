"""
Структуры данных и абстрактные интерфейсы лексического анализатора.

Определяет записи словаря, правила орфографии, результаты анализа
и контракты компонентов, обеспечивая единообразный API.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Pattern, Tuple


class WordCategory(str, Enum):
    """Грамматическая категория слова."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    OTHER = "other"


class Sentiment(str, Enum):
    """Полярность тональности слова."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class LexiconEntry:
    """Запись словаря: словоформа, корень, перевод, категория, тональность."""
    word: str
    root: str
    translation: str
    category: WordCategory
    sentiment: Optional[Sentiment] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'root': self.root,
            'translation': self.translation,
            'category': self.category.value,
            'sentiment': self.sentiment.value if self.sentiment else None,
        }


@dataclass(frozen=True)
class SpellingRule:
    """Орфографическое правило: регулярное выражение и пояснение."""
    pattern: Pattern[str]
    description: str

    @classmethod
    def from_regex(cls, regex: str, description: str) -> "SpellingRule":
        """Создаёт правило с регистронезависимым шаблоном."""
        return cls(pattern=re.compile(regex, re.IGNORECASE), description=description)


@dataclass(frozen=True)
class SpellingIssue:
    """Найденный фрагмент, нарушающий орфографическое правило."""
    matched_text: str
    start_offset: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'matchedText': self.matched_text,
            'startOffset': self.start_offset,
            'description': self.description,
        }


@dataclass(frozen=True)
class SentimentResult:
    """Результат анализа тональности."""
    score: float
    label: str
    positive_count: int = 0
    negative_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'label': self.label}


@dataclass
class EntityResult:
    """Найденные именованные сущности (города и персоналии)."""
    cities: List[str] = field(default_factory=list)
    personalities: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.cities and not self.personalities

    def to_dict(self) -> Dict[str, List[str]]:
        return {'cities': list(self.cities), 'personalities': list(self.personalities)}


@dataclass(frozen=True)
class GraphNode:
    """Узел графа знаний."""
    id: str
    label: str
    category: str


@dataclass(frozen=True)
class GraphLink:
    """Связь графа знаний."""
    source: str
    target: str
    relation: str


@dataclass
class TextReport:
    """Сводный результат анализа текста для редактора."""
    text: str
    word_count: int
    sentiment: SentimentResult
    entities: EntityResult
    spelling_issues: List[SpellingIssue]
    lemmas: List[Tuple[str, str]]
    metadata: Optional[Dict[str, Any]] = None

    @property
    def has_spelling_issues(self) -> bool:
        return bool(self.spelling_issues)


class LemmaProcessorInterface(ABC):
    """Интерфейс для лемматизации слов."""

    @abstractmethod
    def lemmatize(self, word: str) -> str:
        """Приводит слово к корню."""
        pass

    @abstractmethod
    def lemmatize_batch(self, words: List[str]) -> List[str]:
        """Приводит список слов к корням."""
        pass


class TranslatorInterface(ABC):
    """Интерфейс для перевода слов."""

    @abstractmethod
    def translate(self, word: str) -> Optional[str]:
        """Возвращает перевод слова или None."""
        pass


class SentimentAnalyzerInterface(ABC):
    """Интерфейс для анализа тональности."""

    @abstractmethod
    def analyze(self, text: str) -> SentimentResult:
        """Оценивает тональность текста."""
        pass


class EntityRecognizerInterface(ABC):
    """Интерфейс для распознавания именованных сущностей."""

    @abstractmethod
    def recognize(self, text: str) -> EntityResult:
        """Находит города и персоналии в тексте."""
        pass


class WordPredictorInterface(ABC):
    """Интерфейс для автодополнения."""

    @abstractmethod
    def predict(self, prefix: str) -> List[str]:
        """Возвращает слова, начинающиеся с префикса."""
        pass


class SpellCheckerInterface(ABC):
    """Интерфейс для орфографической проверки."""

    @abstractmethod
    def check(self, text: str) -> List[SpellingIssue]:
        """Возвращает найденные нарушения правил."""
        pass


class WordNormalizerInterface(ABC):
    """Интерфейс для нормализации слов."""

    @abstractmethod
    def normalize(self, word: str) -> str:
        """Нормализует слово для сравнения."""
        pass

    @abstractmethod
    def normalize_batch(self, words: List[str]) -> List[str]:
        """Нормализует список слов."""
        pass


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass
