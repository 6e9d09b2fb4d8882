"""Pairwise edge-probability models.

Each model maps the attributes of two nodes (weights, mutual distance) plus a
per-call context (the weight normalizer Wk, or fixed alpha/beta/theta/L
parameters) to the probability that the edge between them exists:

    weight product        p = min(w_i * w_j / Wk, 1)              (Chung-Lu)
    negative exponential  p = 1 - exp(-w_i * w_j / Wk)            (Norros-Reittu)
    distance threshold    p = 1 if w_i + w_j > theta * d^alpha    (geographical threshold)
    distance decay        p = alpha * exp(-d / (beta * L))        (Waxman)

Models are built once per generation call by the validating constructors
below and are frozen afterwards, so the normalizer can never drift while
edges are being inserted.
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from graphgen.graph.errors import InvalidParameterError
from graphgen.graph.params import check_positive, check_unit_interval


class ScoreKind(str, Enum):
    """Which probability formula a PairwiseScoreModel evaluates."""

    WEIGHT_PRODUCT = "weight_product"
    NEGATIVE_EXPONENTIAL = "negative_exponential"
    DISTANCE_THRESHOLD = "distance_threshold"
    DISTANCE_DECAY = "distance_decay"


@dataclass(frozen=True)
class PairwiseScoreModel:
    """Tagged parameter bundle for one of the four pairwise models.

    Array fields are read-only copies of the caller's data. Fields a kind
    does not use keep their defaults.
    """

    kind: ScoreKind
    weights: np.ndarray | None = None  # float array of length n
    distances: np.ndarray | None = None  # symmetric (n x n) float array
    normalizer: float = 0.0  # Wk = sum of weights
    alpha: float = 1.0
    beta: float = 1.0
    theta: float = 1.0
    max_distance: float = 0.0  # L for the decay model

    @property
    def deterministic(self) -> bool:
        """True when edges are decided without a random draw."""
        return self.kind is ScoreKind.DISTANCE_THRESHOLD

    @property
    def n(self) -> int:
        if self.weights is not None:
            return int(self.weights.shape[0])
        if self.distances is not None:
            return int(self.distances.shape[0])
        return 0


# ---------------------------------------------------------------------------
# Scalar scores
# ---------------------------------------------------------------------------


def weight_product_score(w_i: float, w_j: float, wk: float) -> float:
    """Chung-Lu probability, clamped to 1."""
    if wk == 0.0:
        return 0.0
    return min(w_i * w_j / wk, 1.0)


def negative_exponential_score(w_i: float, w_j: float, wk: float) -> float:
    """Norros-Reittu probability; bounded in [0, 1) without clamping."""
    if wk == 0.0:
        return 0.0
    return -math.expm1(-w_i * w_j / wk)


def distance_threshold_score(
    w_i: float, w_j: float, distance: float, alpha: float, theta: float
) -> float:
    """Geographical threshold indicator: 1.0 if the edge exists, else 0.0."""
    return 1.0 if w_i + w_j > theta * distance**alpha else 0.0


def distance_decay_score(
    distance: float, alpha: float, beta: float, max_distance: float
) -> float:
    """Waxman probability.

    When every point coincides (L = 0) all distances are zero and the
    probability is alpha.
    """
    if max_distance == 0.0:
        return alpha
    return alpha * math.exp(-distance / (beta * max_distance))


def score(model: PairwiseScoreModel, i: int, j: int) -> float:
    """Edge probability between nodes ``i`` and ``j`` under ``model``."""
    if i == j:
        return 0.0

    if model.kind is ScoreKind.WEIGHT_PRODUCT:
        return weight_product_score(
            float(model.weights[i]), float(model.weights[j]), model.normalizer
        )
    if model.kind is ScoreKind.NEGATIVE_EXPONENTIAL:
        return negative_exponential_score(
            float(model.weights[i]), float(model.weights[j]), model.normalizer
        )
    if model.kind is ScoreKind.DISTANCE_THRESHOLD:
        return distance_threshold_score(
            float(model.weights[i]),
            float(model.weights[j]),
            float(model.distances[i, j]),
            model.alpha,
            model.theta,
        )
    if model.kind is ScoreKind.DISTANCE_DECAY:
        return distance_decay_score(
            float(model.distances[i, j]), model.alpha, model.beta, model.max_distance
        )
    raise InvalidParameterError(f"Unknown score kind: {model.kind!r}")


def probability_matrix(model: PairwiseScoreModel) -> np.ndarray:
    """Vectorized edge probabilities for every node pair.

    Args:
        model: A validated score model.

    Returns:
        Symmetric float matrix of shape (n, n) with values in [0, 1] and a
        zero diagonal.
    """
    n = model.n

    if model.kind in (ScoreKind.WEIGHT_PRODUCT, ScoreKind.NEGATIVE_EXPONENTIAL):
        if model.normalizer == 0.0:
            P = np.zeros((n, n), dtype=np.float64)
        else:
            ratio = np.outer(model.weights, model.weights) / model.normalizer
            if model.kind is ScoreKind.WEIGHT_PRODUCT:
                P = np.minimum(ratio, 1.0)
            else:
                P = -np.expm1(-ratio)
    elif model.kind is ScoreKind.DISTANCE_THRESHOLD:
        w = model.weights
        reach = w[:, None] + w[None, :]
        P = (reach > model.theta * model.distances**model.alpha).astype(np.float64)
    elif model.kind is ScoreKind.DISTANCE_DECAY:
        if model.max_distance == 0.0:
            P = np.full((n, n), model.alpha, dtype=np.float64)
        else:
            P = model.alpha * np.exp(
                -model.distances / (model.beta * model.max_distance)
            )
    else:
        raise InvalidParameterError(f"Unknown score kind: {model.kind!r}")

    # Rounding can leave values a hair outside [0, 1]
    np.clip(P, 0.0, 1.0, out=P)
    np.fill_diagonal(P, 0.0)
    return P


# ---------------------------------------------------------------------------
# Validating constructors
# ---------------------------------------------------------------------------


def _frozen(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


def validate_weights(weights) -> np.ndarray:
    """Copy ``weights`` into a read-only float array after checking its domain.

    Raises:
        InvalidParameterError: If weights are not a 1-D sequence of finite,
            non-negative numbers.
    """
    w = np.array(weights, dtype=np.float64)
    if w.ndim != 1:
        raise InvalidParameterError(
            f"weights must be a 1-D sequence, got shape {w.shape}"
        )
    if not np.all(np.isfinite(w)):
        raise InvalidParameterError("weights must be finite")
    if np.any(w < 0):
        raise InvalidParameterError(
            f"weights must be non-negative, got minimum {w.min()}"
        )
    return _frozen(w)


def _validate_distances(distances, n: int | None = None) -> np.ndarray:
    D = np.array(distances, dtype=np.float64)
    if D.ndim != 2 or D.shape[0] != D.shape[1]:
        raise InvalidParameterError(
            f"distances must be a square matrix, got shape {D.shape}"
        )
    if n is not None and D.shape[0] != n:
        raise InvalidParameterError(
            f"distances shape {D.shape} does not match {n} nodes"
        )
    if not np.all(np.isfinite(D)) or np.any(D < 0):
        raise InvalidParameterError("distances must be finite and non-negative")
    if not np.allclose(D, D.T):
        raise InvalidParameterError("distances must be symmetric")
    return _frozen(D)


def _weight_model(kind: ScoreKind, weights) -> PairwiseScoreModel:
    w = validate_weights(weights)
    wk = float(w.sum())
    if wk <= 0.0 and np.any(w > 0):
        raise InvalidParameterError(f"weight normalizer must be > 0, got {wk}")
    return PairwiseScoreModel(kind=kind, weights=w, normalizer=wk)


def weight_product_model(weights) -> PairwiseScoreModel:
    """Chung-Lu model over ``weights`` with Wk fixed at their sum."""
    return _weight_model(ScoreKind.WEIGHT_PRODUCT, weights)


def negative_exponential_model(weights) -> PairwiseScoreModel:
    """Norros-Reittu model over ``weights`` with Wk fixed at their sum."""
    return _weight_model(ScoreKind.NEGATIVE_EXPONENTIAL, weights)


def distance_threshold_model(
    weights, distances, alpha: float, theta: float
) -> PairwiseScoreModel:
    """Geographical threshold model.

    Args:
        weights: Per-node weights, already normalized to the caller's scale.
        distances: Symmetric pairwise distance matrix.
        alpha: Distance exponent, > 0.
        theta: Threshold scale, > 0.
    """
    alpha = check_positive("alpha", alpha)
    theta = check_positive("theta", theta)
    w = validate_weights(weights)
    D = _validate_distances(distances, len(w))
    return PairwiseScoreModel(
        kind=ScoreKind.DISTANCE_THRESHOLD,
        weights=w,
        distances=D,
        normalizer=float(w.sum()),
        alpha=alpha,
        theta=theta,
    )


def distance_decay_model(
    distances, alpha: float, beta: float, max_distance: float
) -> PairwiseScoreModel:
    """Waxman model.

    Args:
        distances: Symmetric pairwise distance matrix.
        alpha: Edge density parameter in (0, 1].
        beta: Short-to-long edge ratio parameter in (0, 1].
        max_distance: L, held fixed for the whole call.
    """
    alpha = check_unit_interval("alpha", alpha)
    beta = check_unit_interval("beta", beta)
    max_distance = float(max_distance)
    if not math.isfinite(max_distance) or max_distance < 0.0:
        raise InvalidParameterError(
            f"max_distance must be finite and >= 0, got {max_distance}"
        )
    D = _validate_distances(distances)
    return PairwiseScoreModel(
        kind=ScoreKind.DISTANCE_DECAY,
        distances=D,
        alpha=alpha,
        beta=beta,
        max_distance=max_distance,
    )
