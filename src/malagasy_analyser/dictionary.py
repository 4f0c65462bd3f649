"""
Встроенные данные малагасийского словаря.

Содержит:
- Словарь (словоформа → корень, французский перевод, категория, тональность)
- Газеттиры городов и персоналий для распознавания сущностей
- Орфографические правила
- Узлы и связи графа знаний
- Префиксы для эвристической лемматизации

Все таблицы — неизменяемые кортежи, загружаются один раз при импорте.
"""

from typing import Tuple

from .interfaces.analyzer import (
    GraphLink,
    GraphNode,
    LexiconEntry,
    Sentiment,
    SpellingRule,
    WordCategory,
)

_V = WordCategory.VERB
_N = WordCategory.NOUN
_A = WordCategory.ADJECTIVE

_POS = Sentiment.POSITIVE
_NEG = Sentiment.NEGATIVE
_NEU = Sentiment.NEUTRAL


MALAGASY_LEXICON: Tuple[LexiconEntry, ...] = (
    # Глаголы
    LexiconEntry('manao', 'hao', 'faire', _V, _NEU),
    LexiconEntry('manosika', 'tosika', 'pousser', _V, _NEU),
    LexiconEntry('mihira', 'hira', 'chanter', _V, _POS),
    LexiconEntry('mandeha', 'leha', 'aller', _V, _NEU),
    LexiconEntry('mitady', 'tady', 'chercher', _V, _NEU),
    LexiconEntry('manana', 'hana', 'avoir', _V, _NEU),
    LexiconEntry('mihinana', 'hana', 'manger', _V, _POS),
    LexiconEntry('misotro', 'sotro', 'boire', _V, _NEU),
    LexiconEntry('miasa', 'asa', 'travailler', _V, _NEU),
    LexiconEntry('mianatra', 'anatra', 'apprendre', _V, _POS),

    # Существительные
    LexiconEntry('trano', 'trano', 'maison', _N, _NEU),
    LexiconEntry('olona', 'olona', 'personne', _N, _NEU),
    LexiconEntry('fitiavana', 'tia', 'amour', _N, _POS),
    LexiconEntry('fahatezerana', 'tezitra', 'colère', _N, _NEG),
    LexiconEntry('fahasambarana', 'sambatra', 'bonheur', _N, _POS),
    LexiconEntry('alahelo', 'alahelo', 'tristesse', _N, _NEG),
    LexiconEntry('tanàna', 'tanàna', 'ville', _N, _NEU),
    LexiconEntry('zavatra', 'zavatra', 'chose', _N, _NEU),

    # Прилагательные
    LexiconEntry('tsara', 'tsara', 'bon/bien', _A, _POS),
    LexiconEntry('ratsy', 'ratsy', 'mauvais', _A, _NEG),
    LexiconEntry('lehibe', 'lehibe', 'grand', _A, _NEU),
    LexiconEntry('kely', 'kely', 'petit', _A, _NEU),
    LexiconEntry('mahafinaritra', 'finaritra', 'agréable', _A, _POS),
    LexiconEntry('mahagaga', 'gaga', 'étonnant', _A, _POS),
    LexiconEntry('malahelo', 'alahelo', 'triste', _A, _NEG),
    LexiconEntry('sambatra', 'sambatra', 'heureux', _A, _POS),
)

# Города Мадагаскара
MALAGASY_CITIES: Tuple[str, ...] = (
    'Antananarivo', 'Antsirabe', 'Toamasina', 'Mahajanga',
    'Toliara', 'Fianarantsoa', 'Antsiranana', 'Morondava',
)

# Персоналии
MALAGASY_PERSONALITIES: Tuple[str, ...] = (
    'Ravalomanana', 'Ratsiraka', 'Rajoelina', 'Rainilaiarivony', 'DinaRasamimanana',
)

# Порядок важен: результаты проверки выдаются в порядке правил
SPELLING_RULES: Tuple[SpellingRule, ...] = (
    SpellingRule.from_regex(r'nb', 'La séquence "nb" n\'existe pas en Malgache'),
    SpellingRule.from_regex(r'mk', 'La séquence "mk" n\'existe pas en Malgache'),
    SpellingRule.from_regex(r'[qwx]', 'Les lettres q, w, x ne sont pas utilisées en Malgache'),
)

# Префиксы в порядке приоритета: mi- (активные глаголы), ma- (глаголы), fa- (производные существительные)
LEMMA_PREFIXES: Tuple[str, ...] = ('mi', 'ma', 'fa')

KNOWLEDGE_GRAPH_NODES: Tuple[GraphNode, ...] = (
    GraphNode('manao', 'manao (faire)', 'verb'),
    GraphNode('trano', 'trano (maison)', 'noun'),
    GraphNode('tsara', 'tsara (bon)', 'adjective'),
    GraphNode('olona', 'olona (personne)', 'noun'),
    GraphNode('fitiavana', 'fitiavana (amour)', 'noun'),
    GraphNode('mihira', 'mihira (chanter)', 'verb'),
    GraphNode('sambatra', 'sambatra (heureux)', 'adjective'),
    GraphNode('Antananarivo', 'Antananarivo', 'city'),
    GraphNode('Antsirabe', 'Antsirabe', 'city'),
)

KNOWLEDGE_GRAPH_LINKS: Tuple[GraphLink, ...] = (
    GraphLink('manao', 'trano', 'construit'),
    GraphLink('olona', 'fitiavana', 'ressent'),
    GraphLink('mihira', 'sambatra', 'provoque'),
    GraphLink('Antananarivo', 'Antsirabe', 'proche de'),
    GraphLink('trano', 'tsara', 'peut être'),
)
