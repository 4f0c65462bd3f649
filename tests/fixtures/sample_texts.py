"""Наборы малагасийских текстов для тестирования.

Содержит простой текст, текст с именами собственными, текст
с орфографическими ошибками и HTML-текст для проверки очистки.
"""

SAMPLE_SIMPLE_TEXT = """
Tsara ny trano. Mihira ny olona sambatra.
""".strip()


SAMPLE_ENTITIES_TEXT = """
Nandeha tany Antananarivo i Ravalomanana, avy eo niverina tany Antananarivo indray
ary nihaona tamin'i Rajoelina tao Toamasina.
""".strip()


SAMPLE_MISSPELLED_TEXT = """
Manba ny trano mkely, quoi ve?
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>Tsara ny <strong>trano</strong> any Antsirabe.</p>
  <p>Ratsy&nbsp;ny andro.</p>
</div>
""".strip()
