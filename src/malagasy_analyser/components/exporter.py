"""
Компонент для экспорта результатов анализа.

Строит таблицы pandas по отчёту редактора и сериализует их в памяти
(Excel через openpyxl, CSV, JSON), чтобы редактор мог предложить
пользователю скачать отчёт. На диск библиотека ничего не пишет.
"""

import io
import json
from datetime import datetime
from typing import Any, Dict, Optional

import pandas as pd

from ..interfaces.analyzer import TextReport
from .lexicon import Lexicon
import logging

logger = logging.getLogger(__name__)


class ResultExporter:
    """Экспортёр отчётов анализа текста."""

    def __init__(self, lexicon: Optional[Lexicon] = None,
                 lemma_sheet_name: str = "Lemmes",
                 decimal_places: int = 2):
        """
        Инициализирует экспортёр.

        Args:
            lexicon: Словарь для колонки перевода
            lemma_sheet_name: Название основного листа Excel
            decimal_places: Знаков после запятой для оценок
        """
        self.lexicon = lexicon
        self.lemma_sheet_name = lemma_sheet_name
        self.decimal_places = decimal_places

    def lemmas_frame(self, report: TextReport) -> pd.DataFrame:
        """Таблица токенов: слово, корень, перевод."""
        rows = []
        for original, root in report.lemmas:
            entry = self.lexicon.find(original) if self.lexicon else None
            rows.append({
                'Mot': original,
                'Racine': root,
                'Traduction': entry.translation if entry else '',
            })
        return pd.DataFrame(rows, columns=['Mot', 'Racine', 'Traduction'])

    def entities_frame(self, report: TextReport) -> pd.DataFrame:
        """Таблица сущностей: тип и имя."""
        rows = [{'Type': 'Ville', 'Nom': city} for city in report.entities.cities]
        rows += [{'Type': 'Personnalité', 'Nom': person} for person in report.entities.personalities]
        return pd.DataFrame(rows, columns=['Type', 'Nom'])

    def spelling_frame(self, report: TextReport) -> pd.DataFrame:
        """Таблица орфографических нарушений."""
        rows = [
            {'Fragment': issue.matched_text, 'Position': issue.start_offset, 'Description': issue.description}
            for issue in report.spelling_issues
        ]
        return pd.DataFrame(rows, columns=['Fragment', 'Position', 'Description'])

    def statistics_frame(self, report: TextReport) -> pd.DataFrame:
        """Сводная статистика отчёта."""
        stats = {
            'Paramètre': [
                'Nombre de mots',
                'Score de sentiment',
                'Sentiment',
                'Villes',
                'Personnalités',
                'Erreurs d\'orthographe',
            ],
            'Valeur': [
                report.word_count,
                round(report.sentiment.score, self.decimal_places),
                report.sentiment.label,
                len(report.entities.cities),
                len(report.entities.personalities),
                len(report.spelling_issues),
            ],
        }
        return pd.DataFrame(stats)

    def to_excel_bytes(self, report: TextReport) -> bytes:
        """
        Сериализует отчёт в книгу Excel.

        Args:
            report: Отчёт анализа

        Returns:
            Содержимое файла .xlsx
        """
        buffer = io.BytesIO()
        try:
            with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
                self.lemmas_frame(report).to_excel(writer, sheet_name=self.lemma_sheet_name, index=False)
                self.entities_frame(report).to_excel(writer, sheet_name='Entités', index=False)
                self.spelling_frame(report).to_excel(writer, sheet_name='Orthographe', index=False)
                self.statistics_frame(report).to_excel(writer, sheet_name='Statistiques', index=False)
        except Exception as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise
        logger.info(f"Отчёт экспортирован в Excel ({report.word_count} слов)")
        return buffer.getvalue()

    def to_csv(self, report: TextReport) -> str:
        """Сериализует таблицу токенов в CSV."""
        return self.lemmas_frame(report).to_csv(index=False)

    def to_dict(self, report: TextReport) -> Dict[str, Any]:
        """Представляет отчёт в виде словаря для JSON."""
        return {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'word_count': report.word_count,
                **(report.metadata or {}),
            },
            'sentiment': report.sentiment.to_dict(),
            'entities': report.entities.to_dict(),
            'spelling': [issue.to_dict() for issue in report.spelling_issues],
            'lemmas': [{'word': word, 'root': root} for word, root in report.lemmas],
        }

    def to_json(self, report: TextReport) -> str:
        """Сериализует отчёт в JSON."""
        try:
            return json.dumps(self.to_dict(report), ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise
