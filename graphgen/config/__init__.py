"""Generation configuration system with frozen, hashable, serializable dataclasses."""

from graphgen.config.generation import (
    MODEL_NAMES,
    BipartiteConfig,
    ChungLuConfig,
    GenerationConfig,
    NorrosReittuConfig,
    PreferentialAttachmentConfig,
    RandomRegularConfig,
    ThresholdConfig,
    WattsStrogatzConfig,
    WaxmanConfig,
)
from graphgen.config.defaults import DEFAULT_CONFIG
from graphgen.config.hashing import config_hash, model_config_hash, full_config_hash
from graphgen.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MODEL_NAMES",
    "BipartiteConfig",
    "ChungLuConfig",
    "GenerationConfig",
    "NorrosReittuConfig",
    "PreferentialAttachmentConfig",
    "RandomRegularConfig",
    "ThresholdConfig",
    "WattsStrogatzConfig",
    "WaxmanConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "model_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
