"""
Модуль для предварительной обработки текста редактора

Содержит функции для:
- Удаления HTML тегов из вставленного текста
- Очистки текста от неразрывных пробелов
- Извлечения слов
"""

from typing import List, Optional

from bs4 import BeautifulSoup


class MalagasyTextProcessor:
    """Класс для очистки текста перед анализом"""

    def __init__(self) -> None:
        # Малагасийский алфавит (без c, q, u, w, x) и диакритика
        self.malagasy_alphabet = set("abdefghijklmnoprstvyzàâèéêëìîïñòôù")
        self.nbsp_variants = ("\xa0", "&nbsp;")

    def remove_html_tags(self, text: Optional[str]) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            return soup.get_text()
        return text

    def clean_text(self, text: Optional[str]) -> str:
        """
        Полная очистка текста: HTML теги, неразрывные пробелы, края строки

        Args:
            text: Исходный текст

        Returns:
            Очищенный текст
        """
        cleaned_text = self.remove_html_tags(text)
        for variant in self.nbsp_variants:
            cleaned_text = cleaned_text.replace(variant, " ")
        return cleaned_text.strip()

    def extract_words(self, text: Optional[str]) -> List[str]:
        """
        Извлекает слова из текста в нижнем регистре без знаков препинания

        Args:
            text: Исходный текст

        Returns:
            Список слов
        """
        if not text:
            return []
        clean_words = []
        for word in text.lower().split():
            clean_word = ''.join(c for c in word if c.isalpha())
            if clean_word:
                clean_words.append(clean_word)
        return clean_words

    def foreign_letter_ratio(self, text: Optional[str]) -> float:
        """
        Доля букв текста, не входящих в малагасийский алфавит

        Args:
            text: Исходный текст

        Returns:
            Значение от 0.0 до 1.0 (0.0 для текста без букв)
        """
        letters = [c for c in (text or "").lower() if c.isalpha()]
        if not letters:
            return 0.0
        return sum(1 for c in letters if c not in self.malagasy_alphabet) / len(letters)
