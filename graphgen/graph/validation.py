"""Structural checks for generated graphs and intermediate edge lists.

Checks return a list of error strings (empty = valid) so callers can decide
whether a failure is fatal, logged, or a reason to restart.
"""

import logging

import networkx as nx
import numpy as np
import scipy.sparse

from graphgen.graph.sink import GraphSink

log = logging.getLogger(__name__)


def pair_errors(edges: np.ndarray) -> list[str]:
    """Find self-loops and repeated unordered pairs in an edge array.

    Args:
        edges: Integer array of shape (m, 2).

    Returns:
        List of error strings (empty = the edges form a simple graph).
    """
    errors: list[str] = []
    if len(edges) == 0:
        return errors

    loops = int(np.count_nonzero(edges[:, 0] == edges[:, 1]))
    if loops:
        errors.append(f"Self-loops detected: {loops}")

    canonical = np.sort(edges, axis=1)
    distinct = len(np.unique(canonical, axis=0))
    if distinct != len(canonical):
        errors.append(f"Parallel edges detected: {len(canonical) - distinct}")

    return errors


def adjacency_matrix(graph: GraphSink) -> scipy.sparse.csr_matrix:
    """Sparse symmetric adjacency matrix with rows in sorted node order."""
    nodelist = sorted(graph)
    return scipy.sparse.csr_matrix(
        nx.to_scipy_sparse_array(graph, nodelist=nodelist, format="csr")
    )


def degree_sequence(graph: GraphSink) -> np.ndarray:
    """Degrees in sorted node order."""
    return np.array([graph.degree(v) for v in sorted(graph)], dtype=np.int64)


def validate_simple(graph: GraphSink) -> list[str]:
    """Check that ``graph`` has no self-loops and no parallel edges.

    Returns:
        List of error strings (empty = simple graph).
    """
    errors: list[str] = []

    loops = [v for v in graph if graph.has_edge(v, v)]
    if loops:
        errors.append(f"Self-loops detected at {len(loops)} nodes")

    if getattr(graph, "is_multigraph", lambda: False)():
        edges = list(graph.edges())
        canonical = {frozenset(e) for e in edges}
        if len(canonical) != len(edges):
            errors.append(
                f"Parallel edges detected: {len(edges) - len(canonical)}"
            )

    return errors


def validate_regular(graph: GraphSink, k: int) -> list[str]:
    """Check that ``graph`` is simple and every node has degree exactly k.

    Returns:
        List of error strings (empty = simple k-regular graph).
    """
    errors = validate_simple(graph)
    degrees = degree_sequence(graph)
    off = np.flatnonzero(degrees != k)
    if len(off):
        errors.append(
            f"{len(off)} nodes have degree != {k} "
            f"(min={degrees.min()}, max={degrees.max()})"
        )
    log.debug("Regularity check for k=%d: %d errors", k, len(errors))
    return errors
