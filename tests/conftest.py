from pathlib import Path
from typing import Dict, Any

import pytest

from malagasy_analyser.config import Config
from malagasy_analyser.lexical_analyzer import LexicalAnalyzer


@pytest.fixture(scope="session")
def test_config() -> Dict[str, Any]:
    """Возвращает настройки из config.yaml в корне проекта."""
    cfg = Config(config_path=str(Path(__file__).parent.parent / "config.yaml"))
    return cfg.config_data


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы малагасийских текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_ENTITIES_TEXT,
        SAMPLE_MISSPELLED_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "entities": SAMPLE_ENTITIES_TEXT,
        "misspelled": SAMPLE_MISSPELLED_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


@pytest.fixture
def analyzer() -> LexicalAnalyzer:
    """Анализатор с настройками по умолчанию (без влияния config.yaml и ENV)."""
    cfg = Config(config_path=str(Path(__file__).parent / "fixtures" / "missing.yaml"))
    return LexicalAnalyzer(cfg=cfg)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
