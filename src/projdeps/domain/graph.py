"""DependencyGraph — case-insensitive graph of projects and packages.

Backed by a NetworkX ``MultiDiGraph`` keyed by canonical (lower-cased)
identifiers. The display-cased name lives on the :class:`Node` stored as a
node attribute and is the only form ever printed.

Every edge carries a ``seq`` attribute, so outgoing edges can be replayed
in the order the builder added them, parallel edges included.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import networkx as nx

from projdeps.domain.types import NodeKind

type _Graph = nx.MultiDiGraph


def canonical_key(identifier: str) -> str:
    """Return the lookup key for *identifier* (case-insensitive identity)."""
    return identifier.lower()


def sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive ordinal sort key; ties fall back to the raw name."""
    return name.upper(), name


@dataclass(frozen=True, slots=True)
class Node:
    """A project or package vertex."""

    name: str
    kind: NodeKind

    @property
    def key(self) -> str:
        return canonical_key(self.name)

    @property
    def is_project(self) -> bool:
        return self.kind is NodeKind.PROJECT


class DependencyGraph:
    """Mapping from case-insensitive identifier to exactly one :class:`Node`.

    Populated by :func:`projdeps.infrastructure.graph.builder.build_graph`
    and frozen afterwards; every query is a pure read.
    """

    def __init__(self) -> None:
        self._g: _Graph = nx.MultiDiGraph()
        self._seq = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, identifier: str, kind: NodeKind) -> Node:
        """Create a node unless one with the same key exists; return the stored node.

        The first node created for a key wins. Later calls with a differently
        cased identifier or another kind return the original node unchanged.
        """
        key = canonical_key(identifier)
        if key not in self._g:
            self._g.add_node(key, node=Node(identifier, kind))
        return self._node(key)

    def add_edge(self, source: Node, target: Node) -> None:
        """Append a dependency edge ``source -> target``."""
        self._g.add_edge(source.key, target.key, seq=self._seq)
        self._seq += 1

    def freeze(self) -> DependencyGraph:
        """Make the underlying graph immutable and return ``self``."""
        nx.freeze(self._g)
        return self

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._g)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _node(self, key: str) -> Node:
        node: Node = self._g.nodes[key]["node"]
        return node

    def get(self, identifier: str) -> Node | None:
        """Return the node for *identifier* (any casing), or None."""
        key = canonical_key(identifier)
        if key not in self._g:
            return None
        return self._node(key)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and canonical_key(identifier) in self._g

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __iter__(self) -> Iterator[Node]:
        for key in self._g:
            yield self._node(key)

    @property
    def edge_count(self) -> int:
        return self._g.number_of_edges()

    def projects(self) -> list[Node]:
        """All project nodes in case-insensitive ordinal order."""
        return sorted(
            (n for n in self if n.kind is NodeKind.PROJECT),
            key=lambda n: sort_key(n.name),
        )

    def packages(self) -> list[Node]:
        """All package nodes in case-insensitive ordinal order."""
        return sorted(
            (n for n in self if n.kind is NodeKind.PACKAGE),
            key=lambda n: sort_key(n.name),
        )

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def dependencies(self, node: Node) -> list[Node]:
        """Outgoing edge targets of *node* in insertion order (may repeat)."""
        out = sorted(self._g.out_edges(node.key, data="seq"), key=lambda e: e[2])
        return [self._node(target) for _, target, _ in out]

    def sorted_dependencies(self, node: Node) -> list[Node]:
        """Outgoing edge targets of *node* in case-insensitive ordinal order."""
        return sorted(self.dependencies(node), key=lambda n: sort_key(n.name))

    def can_reach(self, source: Node, target: Node) -> bool:
        """Whether a directed path leads from *source* to *target*.

        A node always reaches itself.
        """
        return bool(nx.has_path(self._g, source.key, target.key))

    def descendants(self, node: Node) -> set[Node]:
        """Every node reachable from *node* through one or more edges, excluding it."""
        return {self._node(key) for key in nx.descendants(self._g, node.key)}
