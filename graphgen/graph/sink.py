"""Minimal mutable graph abstraction consumed by the generators.

Generators only need a handful of capabilities from the graph they fill:
clearing, node and edge creation, edge removal (for rewiring), edge and
degree queries, and node iteration. ``networkx.Graph`` provides all of them
and is the default sink, but any object with the same surface works.
"""

from typing import Any, Hashable, Iterator, Protocol, runtime_checkable

import networkx as nx


@runtime_checkable
class GraphSink(Protocol):
    """Capability interface a generator writes into.

    ``degree`` follows the networkx convention: ``graph.degree(v)`` returns
    the degree of a single node.
    """

    degree: Any

    def clear(self) -> None: ...

    def add_node(self, node_for_adding: Hashable, **attr: Any) -> None: ...

    def add_edge(self, u_of_edge: Hashable, v_of_edge: Hashable, **attr: Any) -> None: ...

    def remove_edge(self, u: Hashable, v: Hashable) -> None: ...

    def remove_node(self, n: Hashable) -> None: ...

    def has_node(self, n: Hashable) -> bool: ...

    def has_edge(self, u: Hashable, v: Hashable) -> bool: ...

    def number_of_nodes(self) -> int: ...

    def number_of_edges(self) -> int: ...

    def __iter__(self) -> Iterator[Hashable]: ...


def new_graph() -> nx.Graph:
    """Create an empty default sink."""
    return nx.Graph()


def reset_graph(graph: GraphSink, n: int) -> None:
    """Clear ``graph`` and populate it with nodes ``0..n-1``."""
    graph.clear()
    for v in range(n):
        graph.add_node(v)


def add_fresh_node(graph: GraphSink) -> int:
    """Add a node with an integer id not yet used in ``graph`` and return it."""
    candidate = graph.number_of_nodes()
    while graph.has_node(candidate):
        candidate += 1
    graph.add_node(candidate)
    return candidate
