import numpy as np
import pytest

from TSPBench.errors import CityCountError, InvariantViolation
from TSPBench.graph import CityGraph, generate_cities, iter_visit_set, visit_set_of


def test_square_distances(square):
    assert square.num_cities == 4
    assert square.distance(0, 1) == 10
    assert square.distance(1, 2) == 10
    assert square.distance(2, 3) == 10
    assert square.distance(0, 3) == 10
    assert square.distance(0, 2) == 14
    assert square.distance(1, 3) == 14


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_distances_symmetric_with_zero_diagonal(seed):
    graph = CityGraph.random(12, seed=seed)
    n = graph.num_cities
    for i in range(n):
        assert graph.distance(i, i) == 0
        for j in range(n):
            assert graph.distance(i, j) == graph.distance(j, i)
            assert graph.distance(i, j) >= 0


def test_distance_truncates_toward_zero():
    graph = CityGraph.build([(0, 0), (1, 1), (3, 4)])
    assert graph.distance(0, 1) == 1  # sqrt(2)
    assert graph.distance(0, 2) == 5
    assert graph.distance(1, 2) == 3  # sqrt(13)


def test_neighbor_order_nearest_first_lowest_index_on_ties(square):
    assert square.neighbors_by_distance(0) == (0, 1, 3, 2)
    assert square.neighbors_by_distance(1) == (1, 0, 2, 3)
    assert square.neighbors_by_distance(2) == (2, 1, 3, 0)
    assert square.neighbors_by_distance(3) == (3, 0, 2, 1)


@pytest.mark.parametrize("seed", [3, 11])
def test_neighbor_order_is_sorted_permutation(seed):
    graph = CityGraph.random(20, seed=seed)
    for i in range(graph.num_cities):
        order = graph.neighbors_by_distance(i)
        assert sorted(order) == list(range(graph.num_cities))
        dists = [graph.distance(i, j) for j in order]
        assert dists == sorted(dists)


def test_build_rejects_city_counts_outside_range():
    with pytest.raises(CityCountError):
        CityGraph.build([(0, 0)])
    with pytest.raises(CityCountError):
        CityGraph.build([])
    with pytest.raises(CityCountError):
        CityGraph.build([(i, i) for i in range(65)])
    with pytest.raises(CityCountError):
        CityGraph.random(1, seed=0)


def test_build_accepts_limits():
    assert CityGraph.build([(0, 0), (3, 4)]).num_cities == 2
    assert CityGraph.random(64, seed=5).num_cities == 64


def test_build_rejects_malformed_coordinates():
    with pytest.raises(ValueError):
        CityGraph.build([(0, 0, 0), (1, 1, 1)])
    with pytest.raises(ValueError):
        CityGraph.build([(0.5, 0), (1, 1)])
    graph = CityGraph.build([(0.0, 0.0), (3.0, 4.0)])
    assert graph.distance(0, 1) == 5


def test_graph_is_read_only(square):
    with pytest.raises(ValueError):
        square.distances[0, 1] = 99
    with pytest.raises(ValueError):
        square.coordinates[0, 0] = 5
    assert square.distance(0, 1) == 10


def test_full_visit_set(square):
    assert square.full_visit_set(0) == 0b1110
    assert square.full_visit_set(2) == 0b1011
    with pytest.raises(InvariantViolation):
        square.full_visit_set(4)


def test_visit_set_helpers():
    assert visit_set_of([1, 3]) == 0b1010
    assert list(iter_visit_set(0b1011)) == [0, 1, 3]
    assert list(iter_visit_set(0)) == []


def test_random_rejects_seed_with_rng():
    with pytest.raises(ValueError):
        CityGraph.random(5, seed=1, rng=np.random.default_rng(1))
    from_rng = CityGraph.random(5, rng=np.random.default_rng(1))
    from_seed = CityGraph.random(5, seed=1)
    assert np.array_equal(from_rng.coordinates, from_seed.coordinates)


def test_generate_cities_in_grid_and_seeded():
    coords = generate_cities(30, np.random.default_rng(9), grid_size=1000)
    assert coords.shape == (30, 2)
    assert coords.min() >= 0
    assert coords.max() < 1000
    again = generate_cities(30, np.random.default_rng(9), grid_size=1000)
    assert np.array_equal(coords, again)


def test_path_length(square):
    assert square.path_length([0, 1, 2, 3]) == 30
    assert square.path_length([0, 2]) == 14
    assert square.path_length([3]) == 0
