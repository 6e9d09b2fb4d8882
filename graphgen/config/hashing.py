"""Stable short digests of generation configs.

A digest is the first 16 hex characters of SHA-256 over compact,
key-sorted JSON, so it does not depend on field declaration order.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from graphgen.config.generation import GenerationConfig


def _drop_path(tree: dict[str, Any], dotted: str) -> None:
    """Delete ``tree["a"]["b"]`` for ``dotted == "a.b"``; missing paths are ignored."""
    *parents, leaf = dotted.split(".")
    node: Any = tree
    for key in parents:
        node = node.get(key) if isinstance(node, dict) else None
    if isinstance(node, dict):
        node.pop(leaf, None)


def _digest(payload: dict[str, Any]) -> str:
    text = json.dumps(payload, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Digest of any config dataclass, optionally ignoring dotted field paths
    such as ``"seed"`` or ``"waxman.beta"``."""
    payload = asdict(config)
    for dotted in exclude_fields or ():
        _drop_path(payload, dotted)
    return _digest(payload)


def model_config_hash(config: GenerationConfig) -> str:
    """Hash of the selected model and its parameters only.

    Seed, description, tags and the sub-configs of unselected models are
    ignored, so two configs that would draw from the same distribution
    share a hash.
    """
    return _digest({"model": config.model, "params": asdict(config.params)})


def full_config_hash(config: GenerationConfig) -> str:
    """Digest of the whole config; two runs with equal hashes produce the same graph."""
    return config_hash(config)
