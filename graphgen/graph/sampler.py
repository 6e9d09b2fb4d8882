"""Generic pairwise edge sampler.

Drives any PairwiseScoreModel over every unordered node pair exactly once.
Pairs are enumerated as the strict upper triangle (i < j) in row-major
order, so visiting (j, i) after (i, j) cannot happen and the output is a
simple graph by construction.
"""

import logging

import numpy as np

from graphgen.graph.scores import PairwiseScoreModel, probability_matrix
from graphgen.graph.sink import GraphSink

log = logging.getLogger(__name__)


def pair_indices(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Row-major enumeration of all pairs i < j among ``n`` nodes."""
    return np.triu_indices(n, k=1)


def sample_pairs(
    model: PairwiseScoreModel, rng: np.random.Generator
) -> np.ndarray:
    """Decide every pair under ``model``.

    Stochastic models consume exactly one uniform draw per pair, in
    enumeration order, and accept a pair iff draw <= p. The deterministic
    threshold model consumes no draws and accepts iff p > 0.

    Args:
        model: Validated score model.
        rng: numpy random Generator for reproducibility.

    Returns:
        Integer array of shape (m, 2) with the accepted pairs (i < j).
    """
    n = model.n
    iu, ju = pair_indices(n)
    if len(iu) == 0:
        return np.empty((0, 2), dtype=np.int64)

    P = probability_matrix(model)
    p = P[iu, ju]

    if model.deterministic:
        accepted = p > 0.0
    else:
        draws = rng.random(len(p))
        accepted = draws <= p

    return np.column_stack([iu[accepted], ju[accepted]])


def sample_edges(
    graph: GraphSink, model: PairwiseScoreModel, rng: np.random.Generator
) -> int:
    """Insert the pairs accepted under ``model`` into ``graph``.

    Nodes ``0..n-1`` must already exist in ``graph``. Insertion is serial;
    only the probability evaluation is vectorized.

    Returns:
        Number of edges inserted.
    """
    pairs = sample_pairs(model, rng)
    for i, j in pairs.tolist():
        graph.add_edge(i, j)

    log.debug(
        "Sampled %d edges over %d pairs (kind=%s)",
        len(pairs),
        model.n * (model.n - 1) // 2,
        model.kind.value,
    )
    return len(pairs)
