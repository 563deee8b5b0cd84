# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for GraphStore."""

import networkx as nx
import pytest

from genro_pathtree import GraphStore


@pytest.fixture
def store():
    """A small store: / -> /a -> /a/b, / -> /c."""
    s = GraphStore()
    for node_id in ('/', '/a', '/a/b', '/c'):
        s.add_node(node_id, node_id.upper())
    s.add_edge('/', '/a')
    s.add_edge('/a', '/a/b')
    s.add_edge('/', '/c')
    return s


class TestGraphStoreKind:
    """Tests for graph kind flags."""

    def test_default_is_directed_simple(self):
        """Test the default store is a simple directed graph."""
        s = GraphStore()
        assert s.is_directed()
        assert not s.is_multigraph()
        assert not s.is_compound()
        assert isinstance(s.graph, nx.DiGraph)

    @pytest.mark.parametrize('kwargs, graph_class', [
        ({'directed': False}, nx.Graph),
        ({'multigraph': True}, nx.MultiDiGraph),
        ({'directed': False, 'multigraph': True}, nx.MultiGraph),
    ])
    def test_graph_classes(self, kwargs, graph_class):
        """Test kind flags select the networkx graph class."""
        assert type(GraphStore(**kwargs).graph) is graph_class

    def test_compound_flag(self):
        """Test the compound flag is reported."""
        assert GraphStore(compound=True).is_compound()

    def test_from_graph_shares_graph(self):
        """Test from_graph wraps the graph without copying."""
        graph = nx.DiGraph()
        s = GraphStore.from_graph(graph)
        s.add_node('/x', 1)
        assert graph.nodes['/x']['content'] == 1

    def test_repr(self, store):
        """Test string representation."""
        assert repr(store) == "GraphStore(DiGraph, nodes=4)"


class TestGraphStoreNodes:
    """Tests for node operations."""

    def test_add_and_read(self, store):
        """Test node creation and content lookup."""
        assert store.has_node('/a')
        assert store.node('/a') == '/A'
        assert '/a' in store
        assert len(store) == 4
        assert store.node_count == 4

    def test_add_overwrites_content(self, store):
        """Test re-adding a node replaces content and keeps edges."""
        store.add_node('/a', 'new')
        assert store.node('/a') == 'new'
        assert store.successors('/a') == ['/a/b']

    def test_missing_node_raises(self, store):
        """Test reading a missing node raises KeyError."""
        with pytest.raises(KeyError):
            store.node('/missing')

    def test_remove_node_drops_edges(self, store):
        """Test removing a node removes its incident edges."""
        store.remove_node('/a')
        assert not store.has_node('/a')
        assert not store.has_edge('/', '/a')
        assert store.predecessors('/a/b') == []

    def test_remove_missing_node_is_noop(self, store):
        """Test removing a missing node does nothing."""
        store.remove_node('/missing')
        assert len(store) == 4

    def test_remove_nodes(self, store):
        """Test bulk removal ignores missing nodes."""
        store.remove_nodes(['/a', '/a/b', '/missing'])
        assert store.nodes() == ['/', '/c']

    def test_iteration_order(self, store):
        """Test iteration follows insertion order."""
        assert list(store) == ['/', '/a', '/a/b', '/c']


class TestGraphStoreEdges:
    """Tests for edge operations and queries."""

    def test_edges(self, store):
        """Test edge listing and lookup."""
        assert store.edges() == [('/', '/a'), ('/', '/c'), ('/a', '/a/b')]
        assert store.has_edge('/', '/a')
        assert not store.has_edge('/a', '/')

    def test_add_edge_creates_nodes(self):
        """Test add_edge creates missing endpoints without content."""
        s = GraphStore()
        s.add_edge('x', 'y')
        assert s.has_node('x')
        assert s.node('y') is None

    def test_remove_edge(self, store):
        """Test edge removal keeps nodes and ignores missing edges."""
        store.remove_edge('/', '/c')
        assert not store.has_edge('/', '/c')
        assert store.has_node('/c')
        store.remove_edge('/', '/c')

    def test_successors_and_predecessors(self, store):
        """Test neighbor queries on a directed store."""
        assert store.successors('/') == ['/a', '/c']
        assert store.predecessors('/a/b') == ['/a']
        assert store.predecessors('/') == []

    def test_sinks(self, store):
        """Test sinks are the nodes without outgoing edges."""
        assert store.sinks() == ['/a/b', '/c']

    def test_undirected_queries(self):
        """Test neighbor queries on an undirected store."""
        s = GraphStore(directed=False)
        s.add_edge('x', 'y')
        assert s.successors('y') == ['x']
        assert s.predecessors('x') == ['y']
        assert s.sinks() == []


class TestGraphStoreFilter:
    """Tests for filter_nodes."""

    def test_filter_returns_new_store(self, store):
        """Test filter_nodes leaves the original store intact."""
        filtered = store.filter_nodes(lambda n: not n.startswith('/a'))
        assert filtered is not store
        assert filtered.nodes() == ['/', '/c']
        assert filtered.edges() == [('/', '/c')]
        assert len(store) == 4

    def test_filter_keeps_content_and_kind(self, store):
        """Test filtered stores keep content, kind and inner edges."""
        filtered = store.filter_nodes(lambda n: n != '/c')
        assert filtered.node('/a/b') == '/A/B'
        assert filtered.is_directed()
        assert filtered.edges() == [('/', '/a'), ('/a', '/a/b')]

    def test_filter_all(self, store):
        """Test a predicate rejecting everything gives an empty store."""
        assert len(store.filter_nodes(lambda n: False)) == 0
