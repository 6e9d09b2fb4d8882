"""Reproducibility infrastructure: explicit per-call random sources."""

from graphgen.reproducibility.seed import SeedLike, make_rng, verify_seed_determinism

__all__ = [
    "SeedLike",
    "make_rng",
    "verify_seed_determinism",
]
