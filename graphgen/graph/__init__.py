"""Random graph generators sharing a graph-sink and random-source contract."""

from graphgen.graph.errors import (
    GraphGenerationError,
    InvalidParameterError,
    ResourceExhaustedError,
)
from graphgen.graph.growth import (
    DEFAULT_MAX_PROBES,
    attach_bipartite_preferential,
    attach_preferential,
)
from graphgen.graph.lattice import generate_watts_strogatz, ring_lattice
from graphgen.graph.pairwise import (
    WaxmanPlacement,
    generate_chung_lu,
    generate_geographical_threshold,
    generate_norros_reittu,
    generate_waxman,
)
from graphgen.graph.regular import (
    DEFAULT_MAX_RESTARTS,
    collapse_pairs,
    generate_random_regular,
    pair_stubs,
)
from graphgen.graph.sampler import sample_edges, sample_pairs
from graphgen.graph.scores import (
    PairwiseScoreModel,
    ScoreKind,
    distance_decay_model,
    distance_threshold_model,
    negative_exponential_model,
    probability_matrix,
    score,
    weight_product_model,
)
from graphgen.graph.sink import GraphSink, new_graph
from graphgen.graph.types import GenerationResult
from graphgen.graph.validation import (
    adjacency_matrix,
    degree_sequence,
    validate_regular,
    validate_simple,
)

__all__ = [
    "DEFAULT_MAX_PROBES",
    "DEFAULT_MAX_RESTARTS",
    "GenerationResult",
    "GraphGenerationError",
    "GraphSink",
    "InvalidParameterError",
    "PairwiseScoreModel",
    "ResourceExhaustedError",
    "ScoreKind",
    "WaxmanPlacement",
    "adjacency_matrix",
    "attach_bipartite_preferential",
    "attach_preferential",
    "collapse_pairs",
    "degree_sequence",
    "distance_decay_model",
    "distance_threshold_model",
    "generate_chung_lu",
    "generate_geographical_threshold",
    "generate_norros_reittu",
    "generate_random_regular",
    "generate_waxman",
    "generate_watts_strogatz",
    "negative_exponential_model",
    "new_graph",
    "pair_stubs",
    "probability_matrix",
    "ring_lattice",
    "sample_edges",
    "sample_pairs",
    "score",
    "validate_regular",
    "validate_simple",
    "weight_product_model",
]
