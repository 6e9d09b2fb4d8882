"""GenerationConfig <-> JSON and plain dicts."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from graphgen.config.generation import GenerationConfig

# JSON arrays come back as tuples (weights, tags); unknown keys are errors.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: GenerationConfig) -> str:
    """Pretty-printed JSON with sorted keys."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GenerationConfig:
    """Parse JSON produced by config_to_json.

    Cross-parameter checks in GenerationConfig.__post_init__ run on load,
    so an invalid file raises ValueError here rather than at generation time.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GenerationConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GenerationConfig:
    return from_dict(data_class=GenerationConfig, data=d, config=_DACITE_CONFIG)
