"""
Компоненты для анализа малагасийского текста.

Каждый компонент отвечает за одну конкретную задачу:
- Lexicon - словарь и поиск по нему
- WordNormalizer - нормализация слов
- TokenProcessor - токенизация текста
- LemmaProcessor - лемматизация слов
- Translator - перевод слов
- SentimentAnalyzer - анализ тональности
- EntityRecognizer - распознавание сущностей
- WordPredictor - автодополнение
- SpellChecker - орфографическая проверка
- LexiconAssistant - помощник редактора
- KnowledgeGraph - граф знаний
- ResultExporter - экспорт результатов
"""

from .lexicon import Lexicon
from .normalizer import WordNormalizer
from .tokenizer import TokenProcessor
from .lemmatizer import LemmaProcessor
from .translator import Translator
from .sentiment import SentimentAnalyzer
from .entity_recognizer import EntityRecognizer
from .predictor import WordPredictor
from .spell_checker import SpellChecker
from .assistant import LexiconAssistant
from .knowledge_graph import KnowledgeGraph
from .exporter import ResultExporter

__all__ = [
    'Lexicon',
    'WordNormalizer',
    'TokenProcessor',
    'LemmaProcessor',
    'Translator',
    'SentimentAnalyzer',
    'EntityRecognizer',
    'WordPredictor',
    'SpellChecker',
    'LexiconAssistant',
    'KnowledgeGraph',
    'ResultExporter',
]
