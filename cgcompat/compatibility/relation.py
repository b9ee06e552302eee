"""
Compatibility relation - which selected columns may be kept together.

The relation maps each qualifying column to the other columns it is linked
to. It preserves insertion order, which is the order records are written in.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set

import networkx as nx


class CompatibilityRelation:
    """
    Mapping from a qualifying column to the columns it is linked to.

    A column may be a key with no links (it qualifies but has no partner).
    A link A -> B does not imply B -> A; use is_symmetric() to check.

    Example:
        >>> relation = CompatibilityRelation()
        >>> relation.add("R_1_2", ["R_3_4"])
        >>> relation.add("R_3_4", ["R_1_2"])
        >>> sorted(relation.identifiers())
        ['R_1_2', 'R_3_4']
    """

    def __init__(self, links: Optional[Dict[str, Iterable[str]]] = None):
        self._links: Dict[str, List[str]] = {}
        for column_id, linked in (links or {}).items():
            self.add(column_id, linked)

    def add(self, column_id: str, linked: Iterable[str] = ()) -> None:
        """
        Add a qualifying column and its links.

        Adding the same column twice extends its links (duplicates ignored).
        """
        current = self._links.setdefault(column_id, [])
        for other in linked:
            if other not in current:
                current.append(other)

    def linked(self, column_id: str) -> List[str]:
        """Columns linked to column_id (empty if it is not a key)."""
        return list(self._links.get(column_id, ()))

    def identifiers(self) -> Set[str]:
        """Every identifier appearing as a key or as a link."""
        ids = set(self._links)
        for linked in self._links.values():
            ids.update(linked)
        return ids

    @property
    def num_links(self) -> int:
        return sum(len(linked) for linked in self._links.values())

    def is_symmetric(self) -> bool:
        """True if every link A -> B has a matching B -> A."""
        for column_id, linked in self._links.items():
            for other in linked:
                if column_id not in self._links.get(other, ()):
                    return False
        return True

    def to_graph(self) -> nx.DiGraph:
        """Directed graph with one node per identifier and one edge per link."""
        graph = nx.DiGraph()
        for column_id, linked in self._links.items():
            graph.add_node(column_id)
            for other in linked:
                graph.add_edge(column_id, other)
        return graph

    def cliques(self) -> List[Set[str]]:
        """
        Maximal groups of columns that are all linked to each other.

        Only links present in both directions are considered. Groups are
        returned largest first.
        """
        graph = self.to_graph()
        undirected = nx.Graph()
        undirected.add_nodes_from(self._links)
        undirected.add_edges_from(
            (u, v) for u, v in graph.edges()
            if u != v and graph.has_edge(v, u)
        )
        groups = [set(clique) for clique in nx.find_cliques(undirected)]
        groups.sort(key=lambda group: (-len(group), sorted(group)))
        return groups

    def to_dict(self) -> Dict[str, List[str]]:
        return {column_id: list(linked) for column_id, linked in self._links.items()}

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompatibilityRelation):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"CompatibilityRelation(columns={len(self)}, links={self.num_links})"
