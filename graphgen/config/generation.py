"""Generation configuration dataclasses, frozen and slotted."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ChungLuConfig:
    """Weight-product model parameters."""

    n: int = 100
    weights: tuple[float, ...] | None = None  # uniform(0, 1) draws when None


@dataclass(frozen=True, slots=True)
class NorrosReittuConfig:
    """Negative-exponential model parameters."""

    n: int = 100
    weights: tuple[float, ...] | None = None


@dataclass(frozen=True, slots=True)
class ThresholdConfig:
    """Geographical threshold model parameters."""

    n: int | None = 100  # may be None when weights are given
    weights: tuple[float, ...] | None = None  # raw, normalized by their max
    alpha: float = 2.0  # distance exponent
    theta: float = 2.0  # threshold
    lam: float = 1.0  # exponential placement rate
    dimension: int = 2


@dataclass(frozen=True, slots=True)
class WaxmanConfig:
    """Waxman model parameters."""

    n: int = 100
    alpha: float = 0.5
    beta: float = 0.5
    placement: str = "plane"  # plane | grid | random | fixed
    width: int | None = None  # grid only
    height: int | None = None  # grid only
    max_distance: float | None = None  # fixed only


@dataclass(frozen=True, slots=True)
class PreferentialAttachmentConfig:
    """Preferential attachment growth parameters."""

    n: int = 100  # nodes to add
    d: int = 2  # minimum degree of each new node
    max_probes: int = 1_000_000


@dataclass(frozen=True, slots=True)
class BipartiteConfig:
    """Bipartite preferential attachment parameters."""

    n: int = 100  # nodes per side
    d: int = 2


@dataclass(frozen=True, slots=True)
class WattsStrogatzConfig:
    """Ring lattice rewiring parameters."""

    n: int = 100
    k: int = 2  # neighbours on each side
    probability_rewire: float = 0.1


@dataclass(frozen=True, slots=True)
class RandomRegularConfig:
    """Configuration model parameters."""

    n: int = 10
    k: int = 3
    max_restarts: int = 10_000
    timeout: float | None = None  # seconds


MODEL_NAMES = (
    "chung_lu",
    "norros_reittu",
    "geographical_threshold",
    "waxman",
    "preferential_attachment",
    "bipartite_preferential",
    "watts_strogatz",
    "random_regular",
)

WAXMAN_PLACEMENTS = ("plane", "grid", "random", "fixed")


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Top-level generation configuration composing all model sub-configs.

    ``model`` selects which sub-config is used. Cross-parameter validation
    of the selected model runs in __post_init__ to reject invalid
    configurations early; per-value domain checks stay with the generators.
    """

    model: str = "chung_lu"
    seed: int = 42
    chung_lu: ChungLuConfig = field(default_factory=ChungLuConfig)
    norros_reittu: NorrosReittuConfig = field(default_factory=NorrosReittuConfig)
    geographical_threshold: ThresholdConfig = field(default_factory=ThresholdConfig)
    waxman: WaxmanConfig = field(default_factory=WaxmanConfig)
    preferential_attachment: PreferentialAttachmentConfig = field(
        default_factory=PreferentialAttachmentConfig
    )
    bipartite_preferential: BipartiteConfig = field(default_factory=BipartiteConfig)
    watts_strogatz: WattsStrogatzConfig = field(default_factory=WattsStrogatzConfig)
    random_regular: RandomRegularConfig = field(default_factory=RandomRegularConfig)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.model not in MODEL_NAMES:
            raise ValueError(
                f"model must be one of {MODEL_NAMES}, got {self.model!r}"
            )
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")

        if self.model == "random_regular":
            rr = self.random_regular
            if (rr.n * rr.k) % 2 != 0:
                raise ValueError(
                    f"random_regular n * k ({rr.n} * {rr.k}) must be even"
                )
        elif self.model == "watts_strogatz":
            ws = self.watts_strogatz
            if 2 * ws.k > ws.n:
                raise ValueError(
                    f"watts_strogatz k ({ws.k}) must be <= n // 2 ({ws.n // 2})"
                )
            if not 0.0 < ws.probability_rewire < 1.0:
                raise ValueError(
                    f"watts_strogatz probability_rewire must be in (0, 1), "
                    f"got {ws.probability_rewire}"
                )
        elif self.model == "waxman":
            if self.waxman.placement not in WAXMAN_PLACEMENTS:
                raise ValueError(
                    f"waxman placement must be one of {WAXMAN_PLACEMENTS}, "
                    f"got {self.waxman.placement!r}"
                )
        elif self.model == "geographical_threshold":
            gt = self.geographical_threshold
            if gt.n is None and gt.weights is None:
                raise ValueError(
                    "geographical_threshold needs n or weights"
                )

    @property
    def params(self):
        """The sub-config of the selected model."""
        return getattr(self, self.model)
