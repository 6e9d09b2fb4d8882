"""Random k-regular graphs via the configuration (pairing) model.

Algorithm (Bollobas 1980):
1. Create n*k stubs in n buckets of k; bucket b owns stubs b*k .. b*k+k-1
2. Pair stubs into a uniformly random perfect matching
3. Collapse every stub onto its bucket, turning stub pairs into edges
4. Accept if the collapsed multigraph is simple, otherwise discard it and
   restart from step 1 with fresh stubs

Acceptance probability falls roughly like exp(-(k^2 - 1) / 4), so the
restart loop is bounded by an attempt budget and an optional wall-clock
timeout.
"""

import logging
import time

import numpy as np

from graphgen.graph.errors import InvalidParameterError, ResourceExhaustedError
from graphgen.graph.params import check_count
from graphgen.graph.sink import GraphSink, reset_graph
from graphgen.graph.types import GenerationResult
from graphgen.graph.validation import pair_errors
from graphgen.reproducibility.seed import SeedLike, make_rng

log = logging.getLogger(__name__)

DEFAULT_MAX_RESTARTS = 10_000

# Attempt count after which a still-running sampler warns once
SLOW_ATTEMPT_WARNING = 1_000


def pair_stubs(n: int, k: int, rng: np.random.Generator) -> np.ndarray:
    """Uniformly random perfect matching over n*k stubs.

    Repeatedly takes the lowest-indexed unpaired stub and pairs it with a
    stub drawn uniformly from the remaining unpaired ones. Two stubs of the
    same bucket may be paired; that becomes a self-loop after collapsing.

    Args:
        n: Number of buckets.
        k: Stubs per bucket; n*k must be even.
        rng: numpy random Generator for reproducibility.

    Returns:
        Integer array of shape (n*k // 2, 2) of stub index pairs.
    """
    total = n * k
    paired = [False] * total
    # Unpaired stubs in arbitrary order, with each stub's slot in the pool
    pool = list(range(total))
    slot = list(range(total))

    def take(stub: int) -> None:
        idx = slot[stub]
        last = pool.pop()
        if last != stub:
            pool[idx] = last
            slot[last] = idx
        paired[stub] = True

    pairs = np.empty((total // 2, 2), dtype=np.int64)
    lowest = 0
    for t in range(total // 2):
        while paired[lowest]:
            lowest += 1
        take(lowest)
        partner = pool[int(rng.integers(len(pool)))]
        take(partner)
        pairs[t] = (lowest, partner)

    return pairs


def collapse_pairs(pairs: np.ndarray, k: int) -> np.ndarray:
    """Map stub pairs onto bucket (node) pairs."""
    return pairs // k


def generate_random_regular(
    graph: GraphSink,
    n: int,
    k: int,
    seed: SeedLike = None,
    max_restarts: int = DEFAULT_MAX_RESTARTS,
    timeout: float | None = None,
) -> GenerationResult:
    """Simple random k-regular graph on n nodes by pairing with restarts.

    The sink is only written once an attempt is accepted, so rejected
    attempts never leave partial state behind.

    Args:
        graph: Sink to fill; prior content is cleared on success.
        n: Number of nodes.
        k: Degree of every node. n*k must be even and k < n.
        seed: Integer seed, numpy Generator or None.
        max_restarts: Maximum number of pairing attempts.
        timeout: Optional wall-clock budget in seconds.

    Returns:
        GenerationResult whose ``attempts`` counts pairing attempts.

    Raises:
        InvalidParameterError: On a violated precondition.
        ResourceExhaustedError: If no simple pairing is found within
            max_restarts attempts or before the timeout.
    """
    n = check_count("n", n)
    k = check_count("k", k)
    max_restarts = check_count("max_restarts", max_restarts, minimum=1)
    if (n * k) % 2 != 0:
        raise InvalidParameterError(
            f"n * k must be even for a perfect stub matching, got {n} * {k} = {n * k}"
        )
    if n > 0 and k >= n:
        raise InvalidParameterError(
            f"k must be < n for a simple k-regular graph, got n={n}, k={k}"
        )
    if timeout is not None and not timeout > 0:
        raise InvalidParameterError(f"timeout must be > 0, got {timeout}")

    rng = make_rng(seed)
    int_seed = seed if isinstance(seed, int) else None

    if n == 0 or k == 0:
        reset_graph(graph, n)
        return GenerationResult(
            model="random_regular", n_nodes=n, n_edges=0, seed=int_seed
        )

    start = time.monotonic()
    for attempt in range(1, max_restarts + 1):
        edges = collapse_pairs(pair_stubs(n, k, rng), k)
        errors = pair_errors(edges)

        if not errors:
            reset_graph(graph, n)
            for u, v in edges.tolist():
                graph.add_edge(u, v)
            log.info(
                "Random regular graph accepted on attempt %d (n=%d, k=%d, edges=%d)",
                attempt,
                n,
                k,
                len(edges),
            )
            return GenerationResult(
                model="random_regular",
                n_nodes=n,
                n_edges=len(edges),
                attempts=attempt,
                seed=int_seed,
            )

        log.debug("Pairing attempt %d rejected: %s", attempt, "; ".join(errors))
        if attempt == SLOW_ATTEMPT_WARNING:
            log.warning(
                "Random regular sampler still rejecting after %d attempts "
                "(n=%d, k=%d); large k makes simple pairings rare",
                attempt,
                n,
                k,
            )
        if timeout is not None and time.monotonic() - start > timeout:
            raise ResourceExhaustedError(
                f"No simple pairing found within {timeout}s "
                f"({attempt} attempts, n={n}, k={k})"
            )

    raise ResourceExhaustedError(
        f"No simple pairing found after {max_restarts} attempts (n={n}, k={k})"
    )
