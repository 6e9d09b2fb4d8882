"""Default generation configuration."""

from graphgen.config.generation import GenerationConfig

# All-default values: Chung-Lu on n=100 nodes with uniform(0, 1) weights,
# seed=42.
DEFAULT_CONFIG = GenerationConfig()
