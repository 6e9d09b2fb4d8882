"""Sequential attachment models.

Preferential attachment (Barabasi & Albert 1999): starting from an existing
seed graph, new nodes arrive one at a time and link to existing node v with
probability proportional to its degree, deg(v) / (2|E|), until they reach a
minimum degree d.

Bipartite preferential attachment (Batagelj & Brandes 2005): two node sets
of size n grow in lockstep; each new endpoint copies a uniformly chosen
endpoint from the already-built edge list, which selects nodes in
proportion to their degree without ever computing one.
"""

import logging

import numpy as np

from graphgen.graph.errors import InvalidParameterError, ResourceExhaustedError
from graphgen.graph.params import check_count
from graphgen.graph.sink import GraphSink, add_fresh_node
from graphgen.graph.types import GenerationResult
from graphgen.reproducibility.seed import SeedLike, make_rng

log = logging.getLogger(__name__)

# Candidate draws allowed per new node before giving up
DEFAULT_MAX_PROBES = 1_000_000


def attach_preferential(
    graph: GraphSink,
    n: int,
    d: int,
    seed: SeedLike = None,
    max_probes: int = DEFAULT_MAX_PROBES,
) -> GenerationResult:
    """Grow ``graph`` by ``n`` nodes with preferential attachment.

    For each new node w, until deg(w) == d: draw a node v uniformly from the
    graph; if v != w and (v, w) is not yet an edge, accept it with
    probability deg(v) / (2|E|), where |E| is the edge count before this
    candidate edge is inserted.

    Unlike the other generators this one extends the caller's graph instead
    of clearing it.

    Args:
        graph: Seed graph with at least d nodes and at least one edge.
        n: Number of nodes to add. 0 is a no-op.
        d: Minimum degree of every new node, 1 <= d <= nodes in seed graph.
        seed: Integer seed, numpy Generator or None.
        max_probes: Candidate draws allowed per new node.

    Returns:
        GenerationResult describing the grown graph.

    Raises:
        InvalidParameterError: On a violated precondition (graph untouched).
        ResourceExhaustedError: If a new node cannot reach degree d within
            max_probes draws. Every node added by this call is removed
            again, restoring the seed graph.
    """
    n = check_count("n", n)
    d = check_count("d", d)
    if d < 1:
        raise InvalidParameterError(f"d must satisfy d >= 1, got {d}")
    max_probes = check_count("max_probes", max_probes, minimum=1)
    if n == 0:
        return GenerationResult(
            model="preferential_attachment",
            n_nodes=graph.number_of_nodes(),
            n_edges=graph.number_of_edges(),
            seed=seed if isinstance(seed, int) else None,
        )

    existing = graph.number_of_nodes()
    if not 1 <= d <= existing:
        raise InvalidParameterError(
            f"d must satisfy 1 <= d <= {existing} (nodes in seed graph), got {d}"
        )
    n_edges = graph.number_of_edges()
    if n_edges == 0:
        raise InvalidParameterError(
            "seed graph must contain at least one edge, "
            "otherwise every attachment probability is zero"
        )

    rng = make_rng(seed)
    nodes = list(graph)
    added: list = []

    for step in range(n):
        w = add_fresh_node(graph)
        nodes.append(w)
        added.append(w)

        probes = 0
        while graph.degree(w) < d:
            if probes >= max_probes:
                reached = graph.degree(w)
                for v in added:
                    graph.remove_node(v)
                raise ResourceExhaustedError(
                    f"Node {step} of {n} reached degree {reached} < d={d} "
                    f"after {max_probes} probes"
                )
            probes += 1

            v = nodes[int(rng.integers(len(nodes)))]
            if v == w or graph.has_edge(v, w):
                continue
            probability = graph.degree(v) / (2 * n_edges)
            if rng.random() <= probability:
                graph.add_edge(v, w)
                n_edges += 1

        log.debug("Node %s attached after %d probes", w, probes)

    log.info(
        "Preferential attachment added %d nodes (d=%d, total nodes=%d, edges=%d)",
        n,
        d,
        graph.number_of_nodes(),
        n_edges,
    )
    return GenerationResult(
        model="preferential_attachment",
        n_nodes=graph.number_of_nodes(),
        n_edges=n_edges,
        seed=seed if isinstance(seed, int) else None,
    )


def bipartite_endpoints(
    n: int, d: int, rng: np.random.Generator
) -> tuple[np.ndarray, np.ndarray]:
    """Build the two endpoint arrays of the bipartite attachment process.

    Slot 2t of M1 holds a left node and slot 2t + 1 a right node; M2 mirrors
    this with the sides swapped, so edges (M[2t], M[2t + 1]) always cross
    sides. For position p = 2(v*d + i), the odd slot copies slot r of the
    filled prefix, r uniform in [0, p]: an even r reads the other array's
    even slot, an odd r reads the own array's odd slot, both of which hold
    a node of the required side.

    Args:
        n: Nodes per side; left nodes are 0..n-1, right nodes n..2n-1.
        d: Edges started per node per side.
        rng: numpy random Generator for reproducibility.

    Returns:
        (M1, M2) integer arrays of length 2*n*d.
    """
    size = 2 * n * d
    M1 = np.zeros(size, dtype=np.int64)
    M2 = np.zeros(size, dtype=np.int64)

    for v in range(n):
        for i in range(d):
            p = 2 * (v * d + i)
            M1[p] = v
            M2[p] = n + v

            r = int(rng.integers(0, p, endpoint=True))
            M1[p + 1] = M2[r] if r % 2 == 0 else M1[r]

            r = int(rng.integers(0, p, endpoint=True))
            M2[p + 1] = M1[r] if r % 2 == 0 else M2[r]

    return M1, M2


def attach_bipartite_preferential(
    graph: GraphSink, n: int, d: int, seed: SeedLike = None
) -> GenerationResult:
    """Bipartite preferential attachment graph with n nodes per side.

    Repeated endpoint pairs collapse into a single edge, so the output is
    simple. Left nodes carry ``bipartite=0`` and right nodes ``bipartite=1``
    (the networkx convention).

    Args:
        graph: Sink to fill; prior content is cleared.
        n: Nodes per side.
        d: Edges started per node per side, 1 <= d <= n.
        seed: Integer seed, numpy Generator or None.

    Raises:
        InvalidParameterError: On a violated precondition.
    """
    n = check_count("n", n)
    d = check_count("d", d)
    if n > 0 and not 1 <= d <= n:
        raise InvalidParameterError(f"d must satisfy 1 <= d <= {n}, got {d}")

    rng = make_rng(seed)
    graph.clear()
    for v in range(n):
        graph.add_node(v, bipartite=0)
    for v in range(n, 2 * n):
        graph.add_node(v, bipartite=1)

    if n > 0:
        M1, M2 = bipartite_endpoints(n, d, rng)
        for M in (M1, M2):
            for u, v in M.reshape(-1, 2).tolist():
                graph.add_edge(u, v)

    n_edges = graph.number_of_edges()
    log.info(
        "Generated bipartite preferential graph (n=%d per side, d=%d, edges=%d)",
        n,
        d,
        n_edges,
    )
    return GenerationResult(
        model="bipartite_preferential",
        n_nodes=graph.number_of_nodes(),
        n_edges=n_edges,
        seed=seed if isinstance(seed, int) else None,
    )
