"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс MALAGASY_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'MALAGASY_ANALYSER_'
ENV_PROFILE = 'MALAGASY_ANALYSER_ENV'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, str] = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    raise ValueError("корень YAML должен быть словарём")
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        logger.debug("Переменные окружения загружены из .env (если есть)")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (MALAGASY_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет диапазоны значений."""
        try:
            if int(self.get('autocomplete.max_suggestions', 5)) < 1:
                logger.warning("max_suggestions < 1 — принудительно установлено в 1")
                self._set_nested(self.config_data, 'autocomplete.max_suggestions', 1)
        except (TypeError, ValueError):
            self._set_nested(self.config_data, 'autocomplete.max_suggestions', 5)

        try:
            if int(self.get('assistant.max_synonyms', 3)) < 0:
                logger.warning("max_synonyms < 0 — принудительно установлено в 0")
                self._set_nested(self.config_data, 'assistant.max_synonyms', 0)
        except (TypeError, ValueError):
            self._set_nested(self.config_data, 'assistant.max_synonyms', 3)

        try:
            if int(self.get('export.float_decimal_places', 2)) < 0:
                logger.warning("float_decimal_places < 0 — принудительно установлено в 0")
                self._set_nested(self.config_data, 'export.float_decimal_places', 0)
        except (TypeError, ValueError):
            logger.warning("Некорректное float_decimal_places — используется значение по умолчанию")
            self._set_nested(self.config_data, 'export.float_decimal_places', 2)

        try:
            if int(self.get('logging.max_log_files', 10)) < 1:
                logger.warning("max_log_files < 1 — принудительно установлено в 1")
                self._set_nested(self.config_data, 'logging.max_log_files', 1)
        except (TypeError, ValueError):
            logger.warning("Некорректное max_log_files — используется значение по умолчанию")
            self._set_nested(self.config_data, 'logging.max_log_files', 10)

        try:
            positive = float(self.get('sentiment.positive_threshold', 0.2))
            negative = float(self.get('sentiment.negative_threshold', -0.2))
            valid = negative <= positive
        except (TypeError, ValueError):
            valid = False
        if not valid:
            logger.warning("Некорректные пороги тональности — используются значения по умолчанию")
            self._set_nested(self.config_data, 'sentiment.positive_threshold', 0.2)
            self._set_nested(self.config_data, 'sentiment.negative_threshold', -0.2)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        level_name = str(self.get_logging_level()).upper()
        level = getattr(logging, level_name, logging.INFO)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_malagasy_analyser_configured", False) and not force:
            if (
                getattr(root, "_malagasy_analyser_level", None) == level_name and
                getattr(root, "_malagasy_analyser_format", None) == desired_fmt and
                getattr(root, "_malagasy_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(logging.DEBUG)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = logging.DEBUG if len(handlers) > 1 else level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_malagasy_analyser_configured", True)
        setattr(root, "_malagasy_analyser_level", level_name)
        setattr(root, "_malagasy_analyser_format", desired_fmt)
        setattr(root, "_malagasy_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'text_analysis': {
                # NFC-нормализация перед поиском в словаре
                'unicode_nfc': False,
            },
            'sentiment': {
                'positive_threshold': 0.2,
                'negative_threshold': -0.2,
            },
            'entities': {
                # False — буквальная проверка подстроки, True — только целые слова
                'word_boundaries': False,
            },
            'autocomplete': {
                'max_suggestions': 5,
            },
            'assistant': {
                'max_synonyms': 3,
            },
            'export': {
                'lemma_sheet_name': "Lemmes",
                'float_decimal_places': 2,
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/malagasy_analyser_{timestamp}.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """
        Получает значение переменной окружения

        Args:
            key: Ключ переменной окружения
            default: Значение по умолчанию

        Returns:
            Значение переменной окружения или default
        """
        return self.env_data.get(key, os.getenv(key, default))

    def is_unicode_nfc_enabled(self) -> bool:
        """Включена ли NFC-нормализация слов"""
        return bool(self.get('text_analysis.unicode_nfc', False))

    def get_positive_threshold(self) -> float:
        """Порог положительной тональности"""
        return float(self.get('sentiment.positive_threshold', 0.2))

    def get_negative_threshold(self) -> float:
        """Порог отрицательной тональности"""
        return float(self.get('sentiment.negative_threshold', -0.2))

    def use_entity_word_boundaries(self) -> bool:
        """Искать ли сущности только как целые слова"""
        return bool(self.get('entities.word_boundaries', False))

    def get_max_suggestions(self) -> int:
        """Максимальное количество подсказок автодополнения"""
        return int(self.get('autocomplete.max_suggestions', 5))

    def get_max_synonyms(self) -> int:
        """Максимальное количество синонимов в ответе помощника"""
        return int(self.get('assistant.max_synonyms', 3))

    def get_lemma_sheet_name(self) -> str:
        """Название основного листа Excel"""
        return self.get('export.lemma_sheet_name', "Lemmes")

    def get_float_decimal_places(self) -> int:
        """Количество знаков после запятой в экспорте"""
        return int(self.get('export.float_decimal_places', 2))

    def get_logging_level(self) -> str:
        """Получает уровень логирования"""
        return self.get('logging.level', "INFO")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} заменяется меткой времени сессии)"""
        log_file_template = self.get('logging.log_file', "logs/malagasy_analyser_{timestamp}.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("malagasy_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые — последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
