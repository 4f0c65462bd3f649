"""
Интерфейсы и структуры данных лексического анализатора малагасийского языка.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .analyzer import (
    WordCategory,
    Sentiment,
    LexiconEntry,
    SpellingRule,
    SpellingIssue,
    SentimentResult,
    EntityResult,
    GraphNode,
    GraphLink,
    TextReport,
    LemmaProcessorInterface,
    TranslatorInterface,
    SentimentAnalyzerInterface,
    EntityRecognizerInterface,
    WordPredictorInterface,
    SpellCheckerInterface,
    WordNormalizerInterface,
    TokenProcessorInterface,
)

__all__ = [
    'WordCategory',
    'Sentiment',
    'LexiconEntry',
    'SpellingRule',
    'SpellingIssue',
    'SentimentResult',
    'EntityResult',
    'GraphNode',
    'GraphLink',
    'TextReport',
    'LemmaProcessorInterface',
    'TranslatorInterface',
    'SentimentAnalyzerInterface',
    'EntityRecognizerInterface',
    'WordPredictorInterface',
    'SpellCheckerInterface',
    'WordNormalizerInterface',
    'TokenProcessorInterface',
]
