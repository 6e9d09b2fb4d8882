"""Result record returned by every generator."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Read-only summary of one generator call.

    The graph itself lives in the caller's sink; this record only carries
    what a caller would otherwise have to recompute or could not observe at
    all, such as how many configuration-model attempts were needed.
    """

    model: str  # generator name, e.g. "chung_lu"
    n_nodes: int  # nodes in the sink after the call
    n_edges: int  # edges in the sink after the call
    attempts: int = 1  # restarts + 1 for rejection samplers, else 1
    seed: int | None = None  # integer seed if one was supplied
    config_hash: str = ""  # set by the config pipeline
