"""
Помощник редактора: простой чат-бот по словарю.

Понимает три вида запросов (по ключевым словам во французском сообщении):
- «synonyme» — слова той же категории для последнего слова сообщения
- «conjugaison» — краткая справка о глагольных префиксах
- «traduire» — перевод последнего слова сообщения
Ответы формулируются по-французски, как и переводы словаря.
"""

import re
from typing import List, Optional

from ..interfaces.analyzer import LexiconEntry
from .lexicon import Lexicon
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)

CONJUGATION_HINT = (
    "La conjugaison en malgache utilise des préfixes: "
    "mi- (actif), ma- (causatif), -na (passé), -vao (futur)"
)
HELP_MESSAGE = (
    "Je peux vous aider avec les synonymes, les conjugaisons et les traductions. "
    "Essayez \"synonyme de [mot]\" ou \"conjugaison\""
)
UNKNOWN_WORD = "Je ne connais pas ce mot"
NO_SYNONYMS = "Je n'ai pas trouvé de synonymes"
CANNOT_TRANSLATE = "Je ne peux pas traduire ce mot"

_TRAILING_PUNCTUATION = re.compile(r'[?.,!]')


class LexiconAssistant:
    """Чат-бот с ответами по словарю."""

    def __init__(self, lexicon: Lexicon, max_synonyms: int = 3,
                 tokenizer: Optional[TokenProcessor] = None):
        self.lexicon = lexicon
        self.max_synonyms = max_synonyms
        self.tokenizer = tokenizer or TokenProcessor()

    def synonyms(self, word: str, limit: Optional[int] = None) -> List[str]:
        """
        Возвращает слова той же категории, кроме самого слова.

        Args:
            word: Слово из словаря
            limit: Максимум слов (по умолчанию max_synonyms)

        Returns:
            Слова в порядке словаря; пусто для неизвестного слова
        """
        entry = self.lexicon.find(word)
        if entry is None:
            return []
        limit = self.max_synonyms if limit is None else limit
        return [e.word for e in self._same_category(entry)][:limit]

    def respond(self, message: Optional[str]) -> Optional[str]:
        """
        Формирует ответ на сообщение пользователя.

        Args:
            message: Сообщение

        Returns:
            Текст ответа или None для пустого сообщения
        """
        message = (message or "").strip()
        if not message:
            return None

        lowered = message.lower()
        if 'synonyme' in lowered:
            reply = self._reply_synonyms(self._last_word(message))
        elif 'conjugaison' in lowered:
            reply = CONJUGATION_HINT
        elif 'traduire' in lowered:
            reply = self._reply_translation(self._last_word(message))
        else:
            reply = HELP_MESSAGE

        logger.debug(f"Помощник: '{message}' → '{reply}'")
        return reply

    def _reply_synonyms(self, word: str) -> str:
        entry = self.lexicon.find(word)
        if entry is None:
            return UNKNOWN_WORD
        found = self.synonyms(word)
        if not found:
            return NO_SYNONYMS
        return f"Voici quelques synonymes: {', '.join(found)}"

    def _reply_translation(self, word: str) -> str:
        entry = self.lexicon.find(word)
        if entry is None:
            return CANNOT_TRANSLATE
        return f"\"{word}\" signifie \"{entry.translation}\" en français"

    def _last_word(self, message: str) -> str:
        return _TRAILING_PUNCTUATION.sub('', self.tokenizer.last_token(message))

    def _same_category(self, entry: LexiconEntry) -> List[LexiconEntry]:
        return [e for e in self.lexicon.by_category(entry.category) if e.word != entry.word]
