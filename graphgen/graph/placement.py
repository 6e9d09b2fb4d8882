"""Node attribute draws: weights, point placements and pairwise distances.

Attributes are drawn once per generation call, before any edge decision,
and returned as read-only arrays.
"""

import numpy as np
from scipy.spatial.distance import pdist, squareform


def _frozen(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


def sample_weights(n: int, rng: np.random.Generator) -> np.ndarray:
    """Draw ``n`` independent uniform(0, 1) node weights."""
    return _frozen(rng.random(n))


def normalize_by_max(weights: np.ndarray) -> np.ndarray:
    """Scale weights so the largest equals 1; all-zero weights stay zero."""
    peak = float(weights.max()) if len(weights) else 0.0
    if peak == 0.0:
        return _frozen(np.array(weights, dtype=np.float64))
    return _frozen(np.asarray(weights, dtype=np.float64) / peak)


def place_unit_square(n: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform points in [0, 1) x [0, 1), shape (n, 2)."""
    return _frozen(rng.random((n, 2)))


def place_grid(
    n: int, width: int, height: int, rng: np.random.Generator
) -> np.ndarray:
    """Uniform integer points on the grid [0, width] x [0, height], shape (n, 2)."""
    xs = rng.integers(0, width, size=n, endpoint=True)
    ys = rng.integers(0, height, size=n, endpoint=True)
    return _frozen(np.column_stack([xs, ys]).astype(np.float64))


def place_exponential(
    n: int, dimension: int, lam: float, rng: np.random.Generator
) -> np.ndarray:
    """Points with i.i.d. exponential(lam) coordinates, shape (n, dimension).

    ``lam`` is the rate of the distribution, so the mean coordinate is 1/lam.
    """
    return _frozen(rng.exponential(scale=1.0 / lam, size=(n, dimension)))


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """Euclidean distance matrix of shape (n, n) for ``points`` of shape (n, d)."""
    n = points.shape[0]
    if n < 2:
        return _frozen(np.zeros((n, n), dtype=np.float64))
    return _frozen(squareform(pdist(points, metric="euclidean")))


def max_pairwise_distance(distances: np.ndarray) -> float:
    """Largest realized distance; 0.0 for fewer than two points."""
    if distances.size == 0:
        return 0.0
    return float(distances.max())


def random_pair_distances(
    n: int, max_distance: float, rng: np.random.Generator
) -> np.ndarray:
    """Symmetric matrix of per-pair distances drawn uniformly in [0, L).

    No geometry backs these distances. Draws are taken in row-major order of
    the upper triangle so a fixed seed always yields the same matrix.
    """
    D = np.zeros((n, n), dtype=np.float64)
    iu, ju = np.triu_indices(n, k=1)
    D[iu, ju] = rng.random(len(iu)) * max_distance
    D[ju, iu] = D[iu, ju]
    return _frozen(D)
