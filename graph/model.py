"""Graph data model for storing definition dependency relationships."""

from typing import Dict, Iterable, Iterator, List, Set, Tuple


class DefinitionGraph:
    """
    A directed graph of schema definitions.

    Nodes are definition names, kept in the order they were added, and edges
    represent 'definition -> referenced type name' relationships. Edge
    targets need not be defined: primitive and external types show up as
    undefined targets.
    """

    def __init__(self):
        self._nodes: Dict[str, None] = {}
        self._edges: Dict[str, Set[str]] = {}

    @property
    def nodes(self) -> List[str]:
        """Return defined names in definition order."""
        return list(self._nodes)

    @property
    def edges(self) -> Dict[str, Set[str]]:
        """Return adjacency list representation of edges."""
        return {k: v.copy() for k, v in self._edges.items()}

    def add_definition(self, name: str, dependencies: Iterable[str] = ()) -> None:
        """
        Add a definition node and an edge to each of its dependencies.

        A name that is already present is merged with the existing node.

        Args:
            name: The definition's name.
            dependencies: Type names the definition references.
        """
        self._nodes.setdefault(name, None)
        targets = self._edges.setdefault(name, set())
        targets.update(dependencies)

    def is_defined(self, name: str) -> bool:
        """Check whether a name has a definition in the graph."""
        return name in self._nodes

    def get_targets(self, source: str) -> Set[str]:
        """Get all type names that the source definition references."""
        return self._edges.get(source, set()).copy()

    def get_sources(self, target: str) -> Set[str]:
        """Get all definitions that reference the target name."""
        sources = set()
        for source, targets in self._edges.items():
            if target in targets:
                sources.add(source)
        return sources

    def get_roots(self) -> Set[str]:
        """
        Get definitions that are never referenced by other definitions.

        A definition that only references itself still counts as a root.
        """
        referenced: Set[str] = set()
        for source, targets in self._edges.items():
            referenced.update(target for target in targets if target != source)

        return set(self._nodes) - referenced

    def get_undefined(self) -> Set[str]:
        """Get referenced names that have no definition in the graph."""
        undefined: Set[str] = set()
        for targets in self._edges.values():
            undefined.update(target for target in targets if target not in self._nodes)
        return undefined

    def iter_edges(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all edges as (source, target) tuples."""
        for source, targets in self._edges.items():
            for target in sorted(targets):
                yield source, target

    def __len__(self) -> int:
        """Return the number of definitions in the graph."""
        return len(self._nodes)

    def __contains__(self, name: str) -> bool:
        """Check if a definition is in the graph."""
        return name in self._nodes

    def __repr__(self) -> str:
        edge_count = sum(len(t) for t in self._edges.values())
        return f"DefinitionGraph(nodes={len(self._nodes)}, edges={edge_count}, undefined={len(self.get_undefined())})"
