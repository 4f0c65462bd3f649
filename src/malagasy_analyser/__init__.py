"""
Malagasy Analyser - лексический анализ малагасийского текста для веб-редактора

Этот модуль предоставляет инструменты для:
- Лемматизации и перевода слов (малагасийский → французский)
- Анализа тональности
- Распознавания городов и персоналий
- Автодополнения
- Орфографической проверки
- Графа знаний и экспорта отчётов
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .lexical_analyzer import (
    LexicalAnalyzer,
    analyze_sentiment,
    check_spelling,
    lemmatize,
    predict_next_word,
    recognize_entities,
    translate,
)
from .text_processor import MalagasyTextProcessor

__all__ = [
    "LexicalAnalyzer",
    "MalagasyTextProcessor",
    "lemmatize",
    "translate",
    "analyze_sentiment",
    "recognize_entities",
    "predict_next_word",
    "check_spelling",
]
