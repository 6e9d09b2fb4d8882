"""Pairwise random-graph generators: Chung-Lu, Norros-Reittu, geographical
threshold and Waxman.

Each generator follows the same pipeline:
1. Validate parameters (nothing is touched on failure)
2. Draw node attributes (weights, positions) from the call's random source
3. Freeze them into a PairwiseScoreModel
4. Clear the sink, create nodes 0..n-1 and let the edge sampler decide
   every pair exactly once
"""

import logging
from enum import Enum

import numpy as np

from graphgen.graph.errors import InvalidParameterError
from graphgen.graph.params import (
    check_count,
    check_positive,
    check_unit_interval,
)
from graphgen.graph.placement import (
    max_pairwise_distance,
    normalize_by_max,
    pairwise_distances,
    place_exponential,
    place_grid,
    place_unit_square,
    random_pair_distances,
    sample_weights,
)
from graphgen.graph.sampler import sample_edges
from graphgen.graph.scores import (
    PairwiseScoreModel,
    distance_decay_model,
    distance_threshold_model,
    negative_exponential_model,
    validate_weights,
    weight_product_model,
)
from graphgen.graph.sink import GraphSink, reset_graph
from graphgen.graph.types import GenerationResult
from graphgen.reproducibility.seed import SeedLike, make_rng

log = logging.getLogger(__name__)


class WaxmanPlacement(str, Enum):
    """How Waxman distances and the scale L are obtained.

    PLANE and GRID place real points and use the largest realized pairwise
    distance as L. RANDOM and FIXED place no points: every pair gets an
    independent distance drawn uniformly in [0, L), with L drawn once per
    call (RANDOM) or supplied by the caller (FIXED).
    """

    PLANE = "plane"
    GRID = "grid"
    RANDOM = "random"
    FIXED = "fixed"


def _int_seed(seed: SeedLike) -> int | None:
    return seed if isinstance(seed, int) else None


def _caller_weights(n: int, weights) -> np.ndarray | None:
    """Validate caller weights against ``n``; None when the caller gave none."""
    if weights is None:
        return None
    w = validate_weights(weights)
    if len(w) != n:
        raise InvalidParameterError(
            f"weights has {len(w)} entries but n is {n}"
        )
    return w


def _run(
    graph: GraphSink,
    name: str,
    model: PairwiseScoreModel,
    rng: np.random.Generator,
    seed: SeedLike,
) -> GenerationResult:
    reset_graph(graph, model.n)
    n_edges = sample_edges(graph, model, rng)
    log.info(
        "Generated %s graph (n=%d, edges=%d)", name, model.n, n_edges
    )
    return GenerationResult(
        model=name,
        n_nodes=graph.number_of_nodes(),
        n_edges=n_edges,
        seed=_int_seed(seed),
    )


def generate_chung_lu(
    graph: GraphSink, n: int, weights=None, seed: SeedLike = None
) -> GenerationResult:
    """Chung-Lu graph: edge (i, j) present with probability min(w_i w_j / Wk, 1).

    Args:
        graph: Sink to fill; prior content is cleared.
        n: Number of nodes.
        weights: Optional length-n sequence of non-negative weights. Drawn
            uniformly from (0, 1) when omitted.
        seed: Integer seed, numpy Generator or None.

    Raises:
        InvalidParameterError: On a negative n or invalid weights.
    """
    n = check_count("n", n)
    w = _caller_weights(n, weights)
    rng = make_rng(seed)
    if w is None:
        w = sample_weights(n, rng)
    model = weight_product_model(w)
    return _run(graph, "chung_lu", model, rng, seed)


def generate_norros_reittu(
    graph: GraphSink, n: int, weights=None, seed: SeedLike = None
) -> GenerationResult:
    """Norros-Reittu graph: edge (i, j) present with probability
    1 - exp(-w_i w_j / Wk).

    Parameters and errors as for generate_chung_lu.
    """
    n = check_count("n", n)
    w = _caller_weights(n, weights)
    rng = make_rng(seed)
    if w is None:
        w = sample_weights(n, rng)
    model = negative_exponential_model(w)
    return _run(graph, "norros_reittu", model, rng, seed)


def generate_geographical_threshold(
    graph: GraphSink,
    n: int | None = None,
    *,
    weights=None,
    alpha: float,
    theta: float,
    lam: float = 1.0,
    dimension: int = 2,
    seed: SeedLike = None,
) -> GenerationResult:
    """Geographical threshold graph.

    Nodes are placed in ``dimension``-dimensional space with i.i.d.
    exponential(lam) coordinates. Edge (i, j) exists, without any random
    draw, iff w_i + w_j > theta * dist(i, j)^alpha.

    Args:
        graph: Sink to fill; prior content is cleared.
        n: Number of nodes. May be omitted when ``weights`` is given.
        weights: Optional raw weights, normalized by their maximum before
            use. Uniform(0, 1) weights are drawn when omitted.
        alpha: Distance exponent, > 0.
        theta: Threshold parameter, > 0.
        lam: Rate of the exponential placement distribution, > 0.
        dimension: Dimension of the placement space, >= 1.
        seed: Integer seed, numpy Generator or None.

    Raises:
        InvalidParameterError: On any violated precondition.
    """
    alpha = check_positive("alpha", alpha)
    theta = check_positive("theta", theta)
    lam = check_positive("lam", lam)
    dimension = check_count("dimension", dimension, minimum=1)

    if weights is None and n is None:
        raise InvalidParameterError("either n or weights must be given")
    if weights is not None:
        w = validate_weights(weights)
        if n is not None and check_count("n", n) != len(w):
            raise InvalidParameterError(
                f"weights has {len(w)} entries but n is {n}"
            )
        n = len(w)
        weights = normalize_by_max(w)
    else:
        n = check_count("n", n)

    rng = make_rng(seed)
    if weights is None:
        weights = sample_weights(n, rng)
    points = place_exponential(n, dimension, lam, rng)
    distances = pairwise_distances(points)

    model = distance_threshold_model(weights, distances, alpha, theta)
    return _run(graph, "geographical_threshold", model, rng, seed)


def generate_waxman(
    graph: GraphSink,
    n: int,
    alpha: float,
    beta: float,
    *,
    placement: WaxmanPlacement | str = WaxmanPlacement.PLANE,
    width: int | None = None,
    height: int | None = None,
    max_distance: float | None = None,
    seed: SeedLike = None,
) -> GenerationResult:
    """Waxman graph: edge (i, j) present with probability
    alpha * exp(-d(i, j) / (beta * L)).

    Args:
        graph: Sink to fill; prior content is cleared.
        n: Number of nodes.
        alpha: Density parameter in (0, 1].
        beta: Edge-length parameter in (0, 1].
        placement: Which distance/L policy to use, see WaxmanPlacement.
        width: Grid width, required for and only accepted with GRID.
        height: Grid height, required for and only accepted with GRID.
        max_distance: L, required for and only accepted with FIXED.
        seed: Integer seed, numpy Generator or None.

    Raises:
        InvalidParameterError: On any violated precondition.
    """
    n = check_count("n", n)
    alpha = check_unit_interval("alpha", alpha)
    beta = check_unit_interval("beta", beta)
    try:
        placement = WaxmanPlacement(placement)
    except ValueError:
        raise InvalidParameterError(
            f"Unknown Waxman placement: {placement!r}"
        ) from None

    is_grid = placement is WaxmanPlacement.GRID
    is_fixed = placement is WaxmanPlacement.FIXED
    if is_grid:
        if width is None or height is None:
            raise InvalidParameterError("grid placement requires width and height")
        width = check_count("width", width)
        height = check_count("height", height)
    elif width is not None or height is not None:
        raise InvalidParameterError(
            f"width/height only apply to grid placement, not {placement.value}"
        )
    if is_fixed:
        if max_distance is None:
            raise InvalidParameterError("fixed placement requires max_distance")
        max_distance = check_positive("max_distance", max_distance)
    elif max_distance is not None:
        raise InvalidParameterError(
            f"max_distance only applies to fixed placement, not {placement.value}"
        )

    rng = make_rng(seed)
    if n == 0:
        reset_graph(graph, 0)
        return GenerationResult(
            model="waxman", n_nodes=0, n_edges=0, seed=_int_seed(seed)
        )

    if placement is WaxmanPlacement.PLANE:
        distances = pairwise_distances(place_unit_square(n, rng))
        L = max_pairwise_distance(distances)
    elif is_grid:
        distances = pairwise_distances(place_grid(n, width, height, rng))
        L = max_pairwise_distance(distances)
    else:
        L = float(rng.random()) if placement is WaxmanPlacement.RANDOM else max_distance
        distances = random_pair_distances(n, L, rng)

    log.debug("Waxman placement=%s, L=%.6f", placement.value, L)
    model = distance_decay_model(distances, alpha, beta, L)
    return _run(graph, "waxman", model, rng, seed)
