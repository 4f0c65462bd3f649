"""
Компонент орфографической проверки.

Сканирует текст всеми правилами по порядку и собирает все
непересекающиеся совпадения каждого правила.
"""

from typing import List, Optional, Sequence

from ..dictionary import SPELLING_RULES
from ..interfaces.analyzer import SpellCheckerInterface, SpellingIssue, SpellingRule
import logging

logger = logging.getLogger(__name__)


class SpellChecker(SpellCheckerInterface):
    """Проверка текста по фиксированному набору правил."""

    def __init__(self, rules: Sequence[SpellingRule] = SPELLING_RULES):
        self.rules = tuple(rules)

    def check(self, text: Optional[str]) -> List[SpellingIssue]:
        """
        Находит фрагменты, нарушающие правила.

        Args:
            text: Исходный текст

        Returns:
            Нарушения в порядке правил, внутри правила — в порядке появления
        """
        if not text:
            return []

        issues: List[SpellingIssue] = []
        for rule in self.rules:
            for match in rule.pattern.finditer(text):
                issues.append(SpellingIssue(
                    matched_text=match.group(0),
                    start_offset=match.start(),
                    description=rule.description,
                ))

        if issues:
            logger.debug(f"Орфография: найдено нарушений {len(issues)}")
        return issues

    def is_valid(self, text: Optional[str]) -> bool:
        """Проверяет, что текст не нарушает ни одного правила."""
        return not self.check(text)
