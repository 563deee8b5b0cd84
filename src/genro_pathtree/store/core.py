# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""GraphStore - node/edge storage backing a PathTree.

This module provides the GraphStore class, a thin wrapper over a networkx
graph that exposes exactly the operations a PathTree needs: node and edge
CRUD, successor/predecessor/sink queries, and predicate filtering.

Nodes are keyed by canonical path strings; their content is kept in the
networkx node attribute ``content``.

Graph kinds:
    - ``directed=True, multigraph=False`` -> ``nx.DiGraph`` (the only kind
      a PathTree accepts)
    - ``directed=False`` -> ``nx.Graph``
    - ``multigraph=True`` -> ``nx.MultiDiGraph`` / ``nx.MultiGraph``
    - ``compound`` is a flag only: networkx has no compound graphs, the
      flag lets a store describe itself as one so it can be rejected.

Example:
    >>> store = GraphStore()
    >>> store.add_node('/', None)
    >>> store.add_node('/a', 'x')
    >>> store.add_edge('/', '/a')
    >>> store.successors('/')
    ['/a']
    >>> store.sinks()
    ['/a']
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

import networkx as nx

logger = logging.getLogger(__name__)

CONTENT = 'content'


class GraphStore:
    """A graph of content-bearing nodes keyed by id.

    Attributes:
        graph: The underlying networkx graph. Exposed so several holders
            can share one store.
    """

    __slots__ = ('graph', '_compound')

    def __init__(
        self,
        directed: bool = True,
        multigraph: bool = False,
        compound: bool = False,
    ) -> None:
        """Initialize an empty GraphStore.

        Args:
            directed: Use a directed graph.
            multigraph: Allow parallel edges between the same nodes.
            compound: Mark the store as compound (clustered) graph.
        """
        if multigraph:
            graph = nx.MultiDiGraph() if directed else nx.MultiGraph()
        else:
            graph = nx.DiGraph() if directed else nx.Graph()
        self.graph = graph
        self._compound = compound

    @classmethod
    def from_graph(cls, graph: nx.Graph, compound: bool = False) -> GraphStore:
        """Wrap an existing networkx graph without copying it.

        Args:
            graph: Any networkx graph instance.
            compound: Mark the store as compound.

        Returns:
            A GraphStore sharing `graph`.
        """
        store = cls.__new__(cls)
        store.graph = graph
        store._compound = compound
        return store

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        kind = type(self.graph).__name__
        return f"GraphStore({kind}, nodes={self.graph.number_of_nodes()})"

    def __len__(self) -> int:
        """Return the number of nodes."""
        return self.graph.number_of_nodes()

    def __contains__(self, node_id: object) -> bool:
        return self.graph.has_node(node_id)

    def __iter__(self) -> Iterator[str]:
        """Iterate over node ids in insertion order."""
        return iter(self.graph.nodes)

    # ==================== Graph Kind ====================

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def is_multigraph(self) -> bool:
        return self.graph.is_multigraph()

    def is_compound(self) -> bool:
        return self._compound

    # ==================== Nodes ====================

    def add_node(self, node_id: str, content: Any = None) -> None:
        """Create a node, or overwrite the content of an existing one."""
        self.graph.add_node(node_id, **{CONTENT: content})

    def remove_node(self, node_id: str) -> None:
        """Remove a node and all its incident edges. Missing nodes are ignored."""
        if self.graph.has_node(node_id):
            self.graph.remove_node(node_id)

    def remove_nodes(self, node_ids: list[str]) -> None:
        """Remove several nodes at once. Missing nodes are ignored."""
        self.graph.remove_nodes_from(node_ids)

    def has_node(self, node_id: str) -> bool:
        return self.graph.has_node(node_id)

    def node(self, node_id: str) -> Any:
        """Return the content of a node.

        Raises:
            KeyError: If the node does not exist.
        """
        return self.graph.nodes[node_id].get(CONTENT)

    def nodes(self) -> list[str]:
        """Return all node ids in insertion order."""
        return list(self.graph.nodes)

    @property
    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    # ==================== Edges ====================

    def add_edge(self, source: str, target: str) -> None:
        """Add an edge. Missing endpoint nodes are created without content."""
        self.graph.add_edge(source, target)

    def remove_edge(self, source: str, target: str) -> None:
        """Remove an edge. Missing edges are ignored."""
        if self.graph.has_edge(source, target):
            self.graph.remove_edge(source, target)

    def has_edge(self, source: str, target: str) -> bool:
        return self.graph.has_edge(source, target)

    def edges(self) -> list[tuple[str, str]]:
        """Return all edges as (source, target) pairs."""
        return [(u, v) for u, v in self.graph.edges()]

    # ==================== Queries ====================

    def successors(self, node_id: str) -> list[str]:
        """Return the targets of the edges leaving `node_id`, in insertion order."""
        if self.graph.is_directed():
            return list(self.graph.successors(node_id))
        return list(self.graph.neighbors(node_id))

    def predecessors(self, node_id: str) -> list[str]:
        """Return the sources of the edges entering `node_id`, in insertion order."""
        if self.graph.is_directed():
            return list(self.graph.predecessors(node_id))
        return list(self.graph.neighbors(node_id))

    def sinks(self) -> list[str]:
        """Return the nodes with no outgoing edges."""
        if self.graph.is_directed():
            return [n for n, degree in self.graph.out_degree() if degree == 0]
        return [n for n, degree in self.graph.degree() if degree == 0]

    def filter_nodes(self, predicate: Callable[[str], bool]) -> GraphStore:
        """Return a new store restricted to the nodes satisfying `predicate`.

        Edges are kept when both endpoints survive. Node contents are shared
        with this store, not copied.

        Args:
            predicate: Called with each node id.

        Returns:
            A new GraphStore of the same kind.
        """
        kept = {n: data for n, data in self.graph.nodes(data=True) if predicate(n)}
        graph = self.graph.__class__()
        graph.add_nodes_from(kept.items())
        graph.add_edges_from(
            (u, v) for u, v in self.graph.edges() if u in kept and v in kept
        )
        filtered = GraphStore.from_graph(graph, compound=self._compound)
        logger.debug(
            "Filtered store: kept %d of %d nodes", len(kept), self.node_count
        )
        return filtered
