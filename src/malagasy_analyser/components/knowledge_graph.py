"""
Граф знаний: семантические связи между словами и городами.

Данные описательные и не выводятся из словаря; компонент лишь
проверяет целостность связей и отдаёт данные для отрисовки.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..dictionary import KNOWLEDGE_GRAPH_LINKS, KNOWLEDGE_GRAPH_NODES
from ..interfaces.analyzer import GraphLink, GraphNode


class KnowledgeGraph:
    """Неизменяемый граф знаний."""

    def __init__(self,
                 nodes: Iterable[GraphNode] = KNOWLEDGE_GRAPH_NODES,
                 links: Iterable[GraphLink] = KNOWLEDGE_GRAPH_LINKS):
        """
        Инициализирует граф.

        Raises:
            ValueError: если узел повторяется или связь ссылается на неизвестный узел
        """
        self.nodes: Tuple[GraphNode, ...] = tuple(nodes)
        self.links: Tuple[GraphLink, ...] = tuple(links)
        self._by_id: Dict[str, GraphNode] = {}

        for node in self.nodes:
            if node.id in self._by_id:
                raise ValueError(f"Узел '{node.id}' объявлен повторно")
            self._by_id[node.id] = node

        for link in self.links:
            for endpoint in (link.source, link.target):
                if endpoint not in self._by_id:
                    raise ValueError(f"Связь '{link.relation}' ссылается на неизвестный узел '{endpoint}'")

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._by_id.get(node_id)

    def links_for(self, node_id: str) -> List[GraphLink]:
        """Связи, в которых участвует узел (в любом направлении)."""
        return [link for link in self.links if node_id in (link.source, link.target)]

    def neighbors(self, node_id: str) -> List[str]:
        """Идентификаторы соседних узлов в порядке объявления связей."""
        result: List[str] = []
        for link in self.links_for(node_id):
            other = link.target if link.source == node_id else link.source
            if other not in result:
                result.append(other)
        return result

    def nodes_by_category(self, category: str) -> List[GraphNode]:
        return [node for node in self.nodes if node.category == category]

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Данные графа для отрисовки: {'nodes': [...], 'links': [...]}."""
        return {
            'nodes': [
                {'id': n.id, 'label': n.label, 'category': n.category} for n in self.nodes
            ],
            'links': [
                {'source': l.source, 'target': l.target, 'relation': l.relation} for l in self.links
            ],
        }
