"""
Модуль лексического анализа малагасийского текста

Предоставляет функциональность для:
- Лемматизации и перевода слов
- Анализа тональности
- Распознавания городов и персоналий
- Автодополнения
- Орфографической проверки
- Сводного отчёта по тексту редактора

Все операции чистые: анализатор не хранит изменяемого состояния,
словарь и правила загружаются один раз и не меняются.
"""

from typing import Any, Dict, List, Optional, Tuple

from .config import Config, config
from .dictionary import MALAGASY_LEXICON, MALAGASY_CITIES, MALAGASY_PERSONALITIES, SPELLING_RULES
from .components.lexicon import Lexicon
from .components.normalizer import WordNormalizer
from .components.tokenizer import TokenProcessor
from .components.lemmatizer import LemmaProcessor
from .components.translator import Translator
from .components.sentiment import SentimentAnalyzer
from .components.entity_recognizer import EntityRecognizer
from .components.predictor import WordPredictor
from .components.spell_checker import SpellChecker
from .components.assistant import LexiconAssistant
from .components.knowledge_graph import KnowledgeGraph
from .components.exporter import ResultExporter
from .interfaces.analyzer import EntityResult, SentimentResult, SpellingIssue, TextReport
from .text_processor import MalagasyTextProcessor
import logging

logger = logging.getLogger(__name__)


class LexicalAnalyzer:
    """Лексический анализатор малагасийского текста по встроенному словарю"""

    def __init__(self, cfg: Optional[Config] = None, lexicon: Optional[Lexicon] = None):
        """
        Инициализация анализатора

        Args:
            cfg: Конфигурация (по умолчанию глобальная)
            lexicon: Словарь (по умолчанию встроенный)
        """
        cfg = cfg or config
        self.normalizer = WordNormalizer(unicode_nfc=cfg.is_unicode_nfc_enabled())
        self.lexicon = lexicon or Lexicon(MALAGASY_LEXICON, normalizer=self.normalizer)
        self.tokenizer = TokenProcessor()

        self.lemmatizer = LemmaProcessor(self.lexicon, tokenizer=self.tokenizer)
        self.translator = Translator(self.lexicon)
        self.sentiment_analyzer = SentimentAnalyzer(
            self.lexicon,
            positive_threshold=cfg.get_positive_threshold(),
            negative_threshold=cfg.get_negative_threshold(),
            tokenizer=self.tokenizer,
        )
        self.entity_recognizer = EntityRecognizer(
            MALAGASY_CITIES,
            MALAGASY_PERSONALITIES,
            word_boundaries=cfg.use_entity_word_boundaries(),
        )
        self.predictor = WordPredictor(
            self.lexicon,
            max_suggestions=cfg.get_max_suggestions(),
            tokenizer=self.tokenizer,
        )
        self.spell_checker = SpellChecker(SPELLING_RULES)
        self.assistant = LexiconAssistant(
            self.lexicon,
            max_synonyms=cfg.get_max_synonyms(),
            tokenizer=self.tokenizer,
        )
        self.knowledge_graph = KnowledgeGraph()
        self.text_processor = MalagasyTextProcessor()
        self.exporter = ResultExporter(
            self.lexicon,
            lemma_sheet_name=cfg.get_lemma_sheet_name(),
            decimal_places=cfg.get_float_decimal_places(),
        )
        logger.debug(f"LexicalAnalyzer готов: {len(self.lexicon)} слов в словаре")

    # ===== Основные операции =====

    def lemmatize(self, word: str) -> str:
        """Приводит слово к корню"""
        return self.lemmatizer.lemmatize(word)

    def translate(self, word: str) -> Optional[str]:
        """Переводит слово на французский; None, если слова нет в словаре"""
        return self.translator.translate(word)

    def analyze_sentiment(self, text: str) -> SentimentResult:
        """Оценивает тональность текста"""
        return self.sentiment_analyzer.analyze(text)

    def recognize_entities(self, text: str) -> EntityResult:
        """Находит города и персоналии"""
        return self.entity_recognizer.recognize(text)

    def predict_next_word(self, prefix: str) -> List[str]:
        """Возвращает не более max_suggestions слов, начинающихся с префикса"""
        return self.predictor.predict(prefix)

    def check_spelling(self, text: str) -> List[SpellingIssue]:
        """Находит нарушения орфографических правил"""
        return self.spell_checker.check(text)

    # ===== Операции редактора =====

    def lemmatize_text(self, text: str) -> List[Tuple[str, str]]:
        """Пары (токен, корень) для каждого токена текста"""
        return self.lemmatizer.lemmatize_text(text)

    def word_details(self, word: str) -> Dict[str, Optional[str]]:
        """Сведения о выбранном слове: корень, перевод, категория, тональность"""
        return self.lemmatizer.get_word_analysis(word)

    def count_words(self, text: str) -> int:
        """Количество слов в тексте"""
        return self.tokenizer.count_words(text)

    def current_word(self, text: str, cursor: Optional[int] = None) -> str:
        """Слово перед курсором"""
        return self.predictor.current_word(text, cursor)

    def suggest(self, text: str, cursor: Optional[int] = None) -> List[str]:
        """Подсказки автодополнения для слова перед курсором"""
        return self.predictor.suggest(text, cursor)

    def suggest_with_translations(self, prefix: str) -> List[Tuple[str, Optional[str]]]:
        """Подсказки вместе с переводами"""
        return [(word, self.translate(word)) for word in self.predict_next_word(prefix)]

    def insert_suggestion(self, text: str, cursor: Optional[int], suggestion: str) -> str:
        """Вставляет подсказку на место слова перед курсором"""
        return self.predictor.insert_suggestion(text, cursor, suggestion)

    def ask_assistant(self, message: str) -> Optional[str]:
        """Ответ помощника на сообщение пользователя"""
        return self.assistant.respond(message)

    def get_knowledge_graph(self) -> Dict[str, List[Dict[str, Any]]]:
        """Данные графа знаний для отрисовки"""
        return self.knowledge_graph.to_dict()

    def analyze_text(self, text: str, clean_html: bool = False) -> TextReport:
        """
        Выполняет полный анализ текста редактора

        Args:
            text: Исходный текст
            clean_html: Удалить ли HTML разметку перед анализом

        Returns:
            Сводный отчёт: количество слов, тональность, сущности, орфография, корни
        """
        text = text or ""
        if clean_html:
            text = self.text_processor.clean_text(text)

        report = TextReport(
            text=text,
            word_count=self.count_words(text),
            sentiment=self.analyze_sentiment(text),
            entities=self.recognize_entities(text),
            spelling_issues=self.check_spelling(text),
            lemmas=self.lemmatize_text(text),
            metadata={
                'known_words': sum(1 for token in self.tokenizer.tokenize(text) if token in self.lexicon),
                'foreign_letter_ratio': round(self.text_processor.foreign_letter_ratio(text), 4),
            },
        )
        logger.debug(
            f"Анализ текста: {report.word_count} слов, тональность {report.sentiment.label}, "
            f"ошибок {len(report.spelling_issues)}"
        )
        return report


# Анализатор по умолчанию для функций уровня модуля
default_analyzer = LexicalAnalyzer()


def lemmatize(word: str) -> str:
    return default_analyzer.lemmatize(word)


def translate(word: str) -> Optional[str]:
    return default_analyzer.translate(word)


def analyze_sentiment(text: str) -> SentimentResult:
    return default_analyzer.analyze_sentiment(text)


def recognize_entities(text: str) -> EntityResult:
    return default_analyzer.recognize_entities(text)


def predict_next_word(prefix: str) -> List[str]:
    return default_analyzer.predict_next_word(prefix)


def check_spelling(text: str) -> List[SpellingIssue]:
    return default_analyzer.check_spelling(text)
