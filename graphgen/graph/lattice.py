"""Watts-Strogatz small-world graphs (Watts & Strogatz 1998).

A ring lattice in which every node links to its k nearest neighbours on
each side is rewired edge by edge: with probability p, edge (u, v) is
replaced by (u, v') for a uniformly random v' != u, unless (u, v') already
exists, in which case the edge is left alone.
"""

import logging

from graphgen.graph.errors import InvalidParameterError
from graphgen.graph.params import check_count, check_open_probability
from graphgen.graph.sink import GraphSink, reset_graph
from graphgen.graph.types import GenerationResult
from graphgen.reproducibility.seed import SeedLike, make_rng

log = logging.getLogger(__name__)


def _check_ring(n: int, k: int) -> tuple[int, int]:
    n = check_count("n", n)
    k = check_count("k", k)
    if n <= 2:
        raise InvalidParameterError(f"a ring needs n > 2 nodes, got {n}")
    if k > n // 2:
        raise InvalidParameterError(f"k must satisfy 0 <= k <= {n // 2}, got {k}")
    return n, k


def ring_lattice(graph: GraphSink, n: int, k: int) -> list[tuple[int, int]]:
    """Clear ``graph`` and build the ring lattice on nodes 0..n-1.

    Node i is joined to (i - j) mod n and (i + j) mod n for j = 1..k,
    skipping pairs that are already connected. For k < n / 2 every node ends
    with degree 2k; for k == n / 2 opposite nodes share a single edge.

    Returns:
        The inserted edges as (u, v) tuples in insertion order, with u the
        node whose neighbourhood created the edge.
    """
    n, k = _check_ring(n, k)
    reset_graph(graph, n)

    edges: list[tuple[int, int]] = []
    for i in range(n):
        for j in range(1, k + 1):
            for t in ((i - j) % n, (i + j) % n):
                if t != i and not graph.has_edge(i, t):
                    graph.add_edge(i, t)
                    edges.append((i, t))
    return edges


def generate_watts_strogatz(
    graph: GraphSink,
    n: int,
    k: int,
    probability_rewire: float,
    seed: SeedLike = None,
) -> GenerationResult:
    """Watts-Strogatz small-world graph.

    Rewiring walks a snapshot of the lattice edges, so edges created during
    rewiring are never themselves rewired. The edge count never changes.

    Args:
        graph: Sink to fill; prior content is cleared.
        n: Number of nodes, > 2.
        k: Neighbours on each side of the ring, 0 <= k <= n // 2.
        probability_rewire: Per-edge rewiring probability in (0, 1).
        seed: Integer seed, numpy Generator or None.

    Raises:
        InvalidParameterError: On a violated precondition.
    """
    n, k = _check_ring(n, k)
    probability_rewire = check_open_probability("probability_rewire", probability_rewire)

    rng = make_rng(seed)
    snapshot = ring_lattice(graph, n, k)

    rewired = 0
    collisions = 0
    for u, v in snapshot:
        if rng.random() >= probability_rewire:
            continue
        # Uniform over the n - 1 nodes other than u
        target = int(rng.integers(0, n - 1))
        if target >= u:
            target += 1
        if graph.has_edge(u, target):
            collisions += 1
            continue
        graph.remove_edge(u, v)
        graph.add_edge(u, target)
        rewired += 1

    log.info(
        "Generated Watts-Strogatz graph (n=%d, k=%d, p=%.3f, edges=%d, "
        "rewired=%d, skipped=%d)",
        n,
        k,
        probability_rewire,
        len(snapshot),
        rewired,
        collisions,
    )
    return GenerationResult(
        model="watts_strogatz",
        n_nodes=graph.number_of_nodes(),
        n_edges=len(snapshot),
        seed=seed if isinstance(seed, int) else None,
    )
