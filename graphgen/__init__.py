"""Reproducible generators for classical random-graph models."""

from graphgen.config import DEFAULT_CONFIG, GenerationConfig
from graphgen.graph import (
    GenerationResult,
    GraphGenerationError,
    InvalidParameterError,
    ResourceExhaustedError,
    WaxmanPlacement,
    attach_bipartite_preferential,
    attach_preferential,
    generate_chung_lu,
    generate_geographical_threshold,
    generate_norros_reittu,
    generate_random_regular,
    generate_watts_strogatz,
    generate_waxman,
    new_graph,
)
from graphgen.pipeline import generate_from_config

__all__ = [
    "DEFAULT_CONFIG",
    "GenerationConfig",
    "GenerationResult",
    "GraphGenerationError",
    "InvalidParameterError",
    "ResourceExhaustedError",
    "WaxmanPlacement",
    "attach_bipartite_preferential",
    "attach_preferential",
    "generate_chung_lu",
    "generate_from_config",
    "generate_geographical_threshold",
    "generate_norros_reittu",
    "generate_random_regular",
    "generate_watts_strogatz",
    "generate_waxman",
    "new_graph",
]
