"""Config-driven entry point: one GenerationConfig in, one populated graph out.

Builds the call's random source from ``config.seed``, dispatches to exactly
one generator, re-checks that the output is simple and stamps the result
with the config hash for provenance.
"""

import logging
from dataclasses import replace

import networkx as nx

from graphgen.config.generation import GenerationConfig
from graphgen.config.hashing import full_config_hash
from graphgen.graph.errors import GraphGenerationError
from graphgen.graph.growth import attach_bipartite_preferential, attach_preferential
from graphgen.graph.lattice import generate_watts_strogatz
from graphgen.graph.pairwise import (
    generate_chung_lu,
    generate_geographical_threshold,
    generate_norros_reittu,
    generate_waxman,
)
from graphgen.graph.regular import generate_random_regular
from graphgen.graph.sink import GraphSink, new_graph
from graphgen.graph.types import GenerationResult
from graphgen.graph.validation import validate_simple
from graphgen.reproducibility.seed import make_rng

log = logging.getLogger(__name__)


def seed_graph(d: int) -> nx.Graph:
    """Complete graph on d + 1 nodes, the smallest seed that admits degree d."""
    return nx.complete_graph(d + 1)


def _weights(values):
    return None if values is None else list(values)


def generate_from_config(
    config: GenerationConfig, graph: GraphSink | None = None
) -> tuple[GraphSink, GenerationResult]:
    """Generate the graph described by ``config``.

    Args:
        config: Generation configuration; ``config.model`` selects the generator.
        graph: Optional sink to fill. A fresh networkx Graph is created when
            omitted; for preferential attachment that fresh graph is first
            seeded with a complete graph on d + 1 nodes.

    Returns:
        (graph, GenerationResult) with the result carrying the full config hash.

    Raises:
        InvalidParameterError: If the selected parameters are invalid.
        ResourceExhaustedError: If a bounded generator runs out of budget.
        GraphGenerationError: If the output is unexpectedly not simple.
    """
    params = config.params
    rng = make_rng(config.seed)

    if graph is None:
        if config.model == "preferential_attachment":
            graph = seed_graph(params.d)
        else:
            graph = new_graph()

    log.info("Generating %s graph (seed=%d)", config.model, config.seed)

    if config.model == "chung_lu":
        result = generate_chung_lu(graph, params.n, _weights(params.weights), seed=rng)
    elif config.model == "norros_reittu":
        result = generate_norros_reittu(graph, params.n, _weights(params.weights), seed=rng)
    elif config.model == "geographical_threshold":
        result = generate_geographical_threshold(
            graph,
            params.n,
            weights=_weights(params.weights),
            alpha=params.alpha,
            theta=params.theta,
            lam=params.lam,
            dimension=params.dimension,
            seed=rng,
        )
    elif config.model == "waxman":
        result = generate_waxman(
            graph,
            params.n,
            params.alpha,
            params.beta,
            placement=params.placement,
            width=params.width,
            height=params.height,
            max_distance=params.max_distance,
            seed=rng,
        )
    elif config.model == "preferential_attachment":
        result = attach_preferential(
            graph, params.n, params.d, seed=rng, max_probes=params.max_probes
        )
    elif config.model == "bipartite_preferential":
        result = attach_bipartite_preferential(graph, params.n, params.d, seed=rng)
    elif config.model == "watts_strogatz":
        result = generate_watts_strogatz(
            graph, params.n, params.k, params.probability_rewire, seed=rng
        )
    elif config.model == "random_regular":
        result = generate_random_regular(
            graph,
            params.n,
            params.k,
            seed=rng,
            max_restarts=params.max_restarts,
            timeout=params.timeout,
        )
    else:
        raise GraphGenerationError(f"No generator registered for {config.model!r}")

    errors = validate_simple(graph)
    if errors:
        raise GraphGenerationError(
            f"{config.model} produced a non-simple graph: {'; '.join(errors)}"
        )

    result = replace(result, seed=config.seed, config_hash=full_config_hash(config))
    return graph, result
