"""Tests for the edge sampler and the pairwise generators built on it."""

from unittest.mock import patch

import networkx as nx
import numpy as np
import pytest

from graphgen.graph.errors import InvalidParameterError
from graphgen.graph.pairwise import (
    WaxmanPlacement,
    generate_chung_lu,
    generate_geographical_threshold,
    generate_norros_reittu,
    generate_waxman,
)
from graphgen.graph.sampler import pair_indices, sample_edges, sample_pairs
from graphgen.graph.scores import (
    distance_decay_model,
    distance_threshold_model,
    weight_product_model,
)
from graphgen.graph.validation import validate_simple


def _edge_set(graph: nx.Graph) -> set[frozenset]:
    return {frozenset(e) for e in graph.edges()}


class TestEdgeSampler:
    """Pair enumeration, draw consumption and simplicity."""

    def test_pairs_enumerated_once(self) -> None:
        iu, ju = pair_indices(7)
        pairs = list(zip(iu.tolist(), ju.tolist()))
        assert len(pairs) == 21
        assert all(i < j for i, j in pairs)
        assert len({frozenset(p) for p in pairs}) == 21

    def test_row_major_order(self) -> None:
        iu, ju = pair_indices(4)
        assert list(zip(iu.tolist(), ju.tolist())) == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
        ]

    def test_one_draw_per_pair(self) -> None:
        model = weight_product_model(np.full(10, 0.5))
        rng = np.random.default_rng(5)
        sample_pairs(model, rng)
        reference = np.random.default_rng(5)
        reference.random(45)
        assert rng.random() == reference.random()

    def test_deterministic_model_consumes_no_draws(self) -> None:
        D = np.ones((5, 5)) - np.eye(5)
        model = distance_threshold_model(np.ones(5), D, alpha=1.0, theta=1.0)
        rng = np.random.default_rng(5)
        sample_pairs(model, rng)
        assert rng.random() == np.random.default_rng(5).random()

    def test_certain_pairs_always_accepted(self) -> None:
        model = weight_product_model(np.full(12, 100.0))
        graph = nx.Graph()
        graph.add_nodes_from(range(12))
        inserted = sample_edges(graph, model, np.random.default_rng(0))
        assert inserted == 66
        assert graph.number_of_edges() == 66

    def test_sampled_pairs_unique(self) -> None:
        model = weight_product_model(np.random.default_rng(1).random(60) * 10)
        pairs = sample_pairs(model, np.random.default_rng(2))
        assert np.all(pairs[:, 0] < pairs[:, 1])
        assert len(np.unique(pairs, axis=0)) == len(pairs)


class TestChungLu:
    """Weight-product generator."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_equal_weights_give_complete_triangle(self, seed) -> None:
        """Wk = 12, every pair has min(16/12, 1) = 1."""
        graph = nx.Graph()
        result = generate_chung_lu(graph, 3, weights=[4, 4, 4], seed=seed)
        assert graph.number_of_edges() == 3
        assert result.n_edges == 3
        assert result.n_nodes == 3

    def test_zero_nodes(self) -> None:
        graph = nx.path_graph(4)
        generate_chung_lu(graph, 0, seed=0)
        assert graph.number_of_nodes() == 0
        assert graph.number_of_edges() == 0

    def test_empty_weights(self) -> None:
        graph = nx.Graph()
        generate_chung_lu(graph, 0, weights=[], seed=0)
        assert graph.number_of_nodes() == 0

    def test_clears_prior_content(self) -> None:
        graph = nx.complete_graph(10)
        generate_chung_lu(graph, 5, weights=[0.0] * 5, seed=0)
        assert sorted(graph.nodes) == [0, 1, 2, 3, 4]
        assert graph.number_of_edges() == 0

    def test_output_simple(self) -> None:
        graph = nx.Graph()
        generate_chung_lu(graph, 80, seed=3)
        assert validate_simple(graph) == []

    def test_expected_edge_count(self) -> None:
        """Unit weights on 200 nodes: p = 1/200, about 99.5 expected edges."""
        graph = nx.Graph()
        generate_chung_lu(graph, 200, weights=np.ones(200), seed=0)
        assert 55 <= graph.number_of_edges() <= 145

    def test_same_seed_same_graph(self) -> None:
        g1, g2 = nx.Graph(), nx.Graph()
        generate_chung_lu(g1, 50, seed=11)
        generate_chung_lu(g2, 50, seed=11)
        assert _edge_set(g1) == _edge_set(g2)

    def test_weight_length_mismatch(self) -> None:
        graph = nx.path_graph(3)
        with pytest.raises(InvalidParameterError, match="entries"):
            generate_chung_lu(graph, 4, weights=[1.0, 1.0])
        assert graph.number_of_edges() == 2

    def test_negative_n(self) -> None:
        with pytest.raises(InvalidParameterError, match="n must be"):
            generate_chung_lu(nx.Graph(), -1)


class TestNorrosReittu:
    """Negative-exponential generator."""

    def test_huge_weights_give_complete_graph(self) -> None:
        graph = nx.Graph()
        generate_norros_reittu(graph, 6, weights=[1000.0] * 6, seed=0)
        assert graph.number_of_edges() == 15

    def test_zero_weights_give_no_edges(self) -> None:
        graph = nx.Graph()
        generate_norros_reittu(graph, 6, weights=[0.0] * 6, seed=0)
        assert graph.number_of_edges() == 0

    def test_zero_nodes(self) -> None:
        graph = nx.Graph()
        result = generate_norros_reittu(graph, 0, seed=0)
        assert result.n_nodes == 0
        assert result.n_edges == 0

    def test_output_simple(self) -> None:
        graph = nx.Graph()
        generate_norros_reittu(graph, 80, seed=4)
        assert validate_simple(graph) == []
        assert graph.number_of_nodes() == 80

    def test_negative_weight_rejected_before_mutation(self) -> None:
        graph = nx.path_graph(3)
        with pytest.raises(InvalidParameterError):
            generate_norros_reittu(graph, 2, weights=[1.0, -1.0])
        assert graph.number_of_nodes() == 3


class TestGeographicalThreshold:
    """Deterministic distance-threshold generator."""

    def test_huge_theta_gives_no_edges(self) -> None:
        graph = nx.Graph()
        generate_geographical_threshold(graph, 20, alpha=1.0, theta=1e6, seed=0)
        assert graph.number_of_nodes() == 20
        assert graph.number_of_edges() == 0

    def test_tiny_theta_gives_complete_graph(self) -> None:
        graph = nx.Graph()
        generate_geographical_threshold(graph, 15, alpha=1.0, theta=1e-12, seed=0)
        assert graph.number_of_edges() == 105

    def test_weights_define_node_count(self) -> None:
        graph = nx.Graph()
        result = generate_geographical_threshold(
            graph, weights=[4, 4, 4, 4], alpha=2.0, theta=2.0, lam=4.0, seed=0
        )
        assert result.n_nodes == 4

    def test_raw_weights_normalized(self) -> None:
        """Weights [8, 8] normalize to [1, 1]: reach 2 against theta * d^alpha."""
        g_raw, g_unit = nx.Graph(), nx.Graph()
        generate_geographical_threshold(g_raw, weights=[8, 8, 8], alpha=1.0, theta=1.0, seed=9)
        generate_geographical_threshold(g_unit, weights=[1, 1, 1], alpha=1.0, theta=1.0, seed=9)
        assert _edge_set(g_raw) == _edge_set(g_unit)

    def test_zero_weights_give_no_edges(self) -> None:
        graph = nx.Graph()
        generate_geographical_threshold(graph, weights=[0, 0, 0], alpha=1.0, theta=1.0, seed=0)
        assert graph.number_of_edges() == 0

    def test_zero_nodes(self) -> None:
        graph = nx.path_graph(3)
        generate_geographical_threshold(graph, 0, alpha=1.0, theta=1.0, seed=0)
        assert graph.number_of_nodes() == 0

    def test_higher_dimension(self) -> None:
        graph = nx.Graph()
        generate_geographical_threshold(graph, 25, alpha=1.0, theta=1.0, dimension=4, seed=2)
        assert validate_simple(graph) == []

    def test_requires_n_or_weights(self) -> None:
        with pytest.raises(InvalidParameterError, match="n or weights"):
            generate_geographical_threshold(nx.Graph(), alpha=1.0, theta=1.0)

    def test_n_weights_mismatch(self) -> None:
        with pytest.raises(InvalidParameterError, match="entries"):
            generate_geographical_threshold(nx.Graph(), 3, weights=[1, 1], alpha=1.0, theta=1.0)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"alpha": 0.0, "theta": 1.0},
            {"alpha": 1.0, "theta": 0.0},
            {"alpha": 1.0, "theta": 1.0, "lam": -1.0},
            {"alpha": 1.0, "theta": 1.0, "dimension": 0},
        ],
    )
    def test_invalid_parameters(self, kwargs) -> None:
        graph = nx.path_graph(3)
        with pytest.raises(InvalidParameterError):
            generate_geographical_threshold(graph, 10, **kwargs)
        assert graph.number_of_edges() == 2


class TestWaxman:
    """Distance-decay generator with its four L policies."""

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 40])
    def test_node_count_plane(self, n) -> None:
        graph = nx.Graph()
        generate_waxman(graph, n, 0.5, 0.5, seed=n)
        assert graph.number_of_nodes() == n

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 40])
    def test_node_count_grid(self, n) -> None:
        graph = nx.Graph()
        generate_waxman(graph, n, 0.5, 0.5, placement="grid", width=10, height=10, seed=n)
        assert graph.number_of_nodes() == n

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 40])
    def test_node_count_random(self, n) -> None:
        graph = nx.Graph()
        generate_waxman(graph, n, 0.5, 0.5, placement=WaxmanPlacement.RANDOM, seed=n)
        assert graph.number_of_nodes() == n

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 40])
    def test_node_count_fixed(self, n) -> None:
        graph = nx.Graph()
        generate_waxman(graph, n, 0.5, 0.5, placement="fixed", max_distance=10.0, seed=n)
        assert graph.number_of_nodes() == n

    def test_coincident_points_use_alpha(self) -> None:
        """A 0 x 0 grid puts every node on one point: p = alpha = 1."""
        graph = nx.Graph()
        generate_waxman(graph, 8, 1.0, 1.0, placement="grid", width=0, height=0, seed=0)
        assert graph.number_of_edges() == 28

    def test_output_simple(self) -> None:
        for placement, extra in [
            ("plane", {}),
            ("grid", {"width": 5, "height": 3}),
            ("random", {}),
            ("fixed", {"max_distance": 2.5}),
        ]:
            graph = nx.Graph()
            generate_waxman(graph, 60, 0.9, 0.9, placement=placement, seed=1, **extra)
            assert validate_simple(graph) == []

    def test_zero_nodes(self) -> None:
        graph = nx.path_graph(3)
        generate_waxman(graph, 0, 0.5, 0.5, seed=0)
        assert graph.number_of_nodes() == 0
        assert graph.number_of_edges() == 0

    @pytest.mark.parametrize("alpha,beta", [(0.0, 0.5), (0.5, 0.0), (-0.5, 0.5), (0.5, 1.1)])
    def test_invalid_alpha_beta_leave_graph_untouched(self, alpha, beta) -> None:
        graph = nx.path_graph(3)
        with pytest.raises(InvalidParameterError):
            generate_waxman(graph, 10, alpha, beta)
        assert graph.number_of_nodes() == 3
        assert graph.number_of_edges() == 2

    def test_grid_requires_dimensions(self) -> None:
        with pytest.raises(InvalidParameterError, match="width and height"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="grid", width=10)

    def test_fixed_requires_max_distance(self) -> None:
        with pytest.raises(InvalidParameterError, match="max_distance"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="fixed")

    def test_fixed_rejects_non_positive_scale(self) -> None:
        with pytest.raises(InvalidParameterError, match="max_distance"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="fixed", max_distance=0.0)

    def test_parameters_from_other_policy_rejected(self) -> None:
        with pytest.raises(InvalidParameterError, match="grid"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, width=3, height=3)
        with pytest.raises(InvalidParameterError, match="fixed"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="random", max_distance=1.0)

    def test_unknown_placement(self) -> None:
        with pytest.raises(InvalidParameterError, match="placement"):
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="sphere")


class TestWaxmanScale:
    """Which distances and which L reach the distance-decay model."""

    def _decay_args(self, **kwargs):
        with patch(
            "graphgen.graph.pairwise.distance_decay_model", wraps=distance_decay_model
        ) as mock_model:
            generate_waxman(nx.Graph(), 30, 0.5, 0.5, **kwargs)
        distances, _, _, L = mock_model.call_args.args
        return distances, L

    def test_plane_uses_largest_realized_distance(self) -> None:
        distances, L = self._decay_args(seed=3)
        points = np.random.default_rng(3).random((30, 2))
        diff = points[:, None, :] - points[None, :, :]
        expected = np.sqrt((diff**2).sum(axis=-1))
        assert np.allclose(distances, expected)
        assert L == pytest.approx(expected.max())

    def test_grid_uses_largest_realized_distance(self) -> None:
        distances, L = self._decay_args(placement="grid", width=20, height=20, seed=4)
        assert L == distances.max()
        assert L <= np.hypot(20, 20)

    def test_random_draws_scale_first(self) -> None:
        distances, L = self._decay_args(placement="random", seed=7)
        rng = np.random.default_rng(7)
        assert L == rng.random()
        iu = np.triu_indices(30, k=1)
        assert distances[iu].tolist() == pytest.approx((rng.random(len(iu[0])) * L).tolist())
        assert distances.max() < L

    def test_random_draws_scale_once_per_call(self) -> None:
        rng = np.random.default_rng(11)
        with patch(
            "graphgen.graph.pairwise.distance_decay_model", wraps=distance_decay_model
        ) as mock_model:
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="random", seed=rng)
            generate_waxman(nx.Graph(), 10, 0.5, 0.5, placement="random", seed=rng)
        first, second = (c.args[3] for c in mock_model.call_args_list)
        assert mock_model.call_count == 2
        assert first != second

    def test_fixed_uses_caller_scale(self) -> None:
        distances, L = self._decay_args(placement="fixed", max_distance=2.5, seed=5)
        assert L == 2.5
        assert distances.max() < 2.5
        assert distances.max() > 1.0
