"""
Тесты для экспорта отчётов анализа.
"""

import io
import json

import pandas as pd
import pytest

from malagasy_analyser.components.exporter import ResultExporter


@pytest.fixture
def simple_report(analyzer, sample_texts):
    return analyzer.analyze_text(sample_texts["simple"])


@pytest.fixture
def misspelled_report(analyzer, sample_texts):
    return analyzer.analyze_text(sample_texts["misspelled"])


class TestResultExporter:
    """Тесты для ResultExporter."""

    def test_lemmas_frame(self, analyzer, simple_report):
        frame = analyzer.exporter.lemmas_frame(simple_report)

        assert list(frame.columns) == ["Mot", "Racine", "Traduction"]
        assert len(frame) == 7
        assert frame.iloc[0].tolist() == ["Tsara", "tsara", "bon/bien"]
        assert frame.iloc[3].tolist() == ["Mihira", "hira", "chanter"]
        # Токен с пунктуацией не находится в словаре
        assert frame.iloc[2].tolist() == ["trano.", "trano.", ""]

    def test_lemmas_frame_without_lexicon(self, simple_report):
        frame = ResultExporter().lemmas_frame(simple_report)
        assert set(frame["Traduction"]) == {""}

    def test_spelling_frame(self, analyzer, misspelled_report):
        frame = analyzer.exporter.spelling_frame(misspelled_report)

        assert frame["Fragment"].tolist() == ["nb", "mk", "q"]
        assert frame["Position"].tolist() == [2, 15, 22]

    def test_entities_frame_empty(self, analyzer, simple_report):
        frame = analyzer.exporter.entities_frame(simple_report)

        assert list(frame.columns) == ["Type", "Nom"]
        assert frame.empty

    def test_statistics_frame(self, analyzer, simple_report):
        frame = analyzer.exporter.statistics_frame(simple_report)
        values = dict(zip(frame["Paramètre"], frame["Valeur"]))

        assert values["Nombre de mots"] == 7
        assert values["Score de sentiment"] == 1.0
        assert values["Sentiment"] == "Positive"
        assert values["Erreurs d'orthographe"] == 0

    def test_to_excel_bytes(self, analyzer, misspelled_report):
        content = analyzer.exporter.to_excel_bytes(misspelled_report)
        assert content[:2] == b"PK"

        sheets = pd.read_excel(io.BytesIO(content), sheet_name=None)
        assert list(sheets) == ["Lemmes", "Entités", "Orthographe", "Statistiques"]
        assert sheets["Orthographe"]["Fragment"].tolist() == ["nb", "mk", "q"]
        assert sheets["Lemmes"]["Mot"].tolist()[0] == "Manba"

    def test_custom_sheet_name(self, simple_report):
        exporter = ResultExporter(lemma_sheet_name="Racines")
        sheets = pd.read_excel(io.BytesIO(exporter.to_excel_bytes(simple_report)), sheet_name=None)
        assert "Racines" in sheets

    def test_to_csv(self, analyzer, simple_report):
        lines = analyzer.exporter.to_csv(simple_report).splitlines()

        assert lines[0] == "Mot,Racine,Traduction"
        assert lines[1] == "Tsara,tsara,bon/bien"
        assert len(lines) == 8

    def test_to_json(self, analyzer, misspelled_report):
        data = json.loads(analyzer.exporter.to_json(misspelled_report))

        assert data["metadata"]["word_count"] == 6
        assert "timestamp" in data["metadata"]
        assert data["sentiment"] == {"score": 0.0, "label": "Neutral"}
        assert data["spelling"][0] == {
            "matchedText": "nb",
            "startOffset": 2,
            "description": "La séquence \"nb\" n'existe pas en Malgache",
        }
        assert data["lemmas"][0] == {"word": "Manba", "root": "nba"}
