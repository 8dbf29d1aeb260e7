import pytest

from TSPBench.config import MAX_CITY_BRUTE_FORCE, MAX_CITY_DYN_PROG, MAX_CITY_MEMO_TABLE, BenchmarkConfig
from TSPBench.core import Benchmark
from TSPBench.graph import CityGraph
from TSPBench.solvers import SOLVER_SPECS, get_solver
from TSPBench.utils.taxonomy import AlgorithmFamily


def test_registry_order_and_limits():
    assert list(SOLVER_SPECS) == ["brute_force", "dyn_prog", "bounded", "nearest_neighbor"]
    assert SOLVER_SPECS["brute_force"].max_city == MAX_CITY_BRUTE_FORCE
    assert SOLVER_SPECS["dyn_prog"].max_city == MAX_CITY_DYN_PROG
    assert SOLVER_SPECS["bounded"].max_city == 64
    assert SOLVER_SPECS["nearest_neighbor"].family is AlgorithmFamily.HEURISTIC


def test_get_solver():
    assert get_solver("bounded", lookahead=3).lookahead == 3
    assert get_solver("dyn_prog").name == "dyn_prog"
    with pytest.raises(KeyError):
        get_solver("christofides")


def test_run_all_algorithms_on_square(square):
    results = Benchmark(BenchmarkConfig(counts=[4])).run(square)
    assert [r.name for r in results] == ["brute_force", "dyn_prog", "bounded", "nearest_neighbor"]
    assert all(r.status == "complete" for r in results)
    assert [r.cost for r in results] == [30, 30, 30, 30]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_exact_results_agree_and_heuristics_do_not_beat_them(seed):
    graph = CityGraph.random(7, seed=seed)
    results = {r.name: r for r in Benchmark(BenchmarkConfig(counts=[7], lookahead=3)).run(graph)}
    assert results["brute_force"].cost == results["dyn_prog"].cost
    assert results["bounded"].cost >= results["dyn_prog"].cost
    assert results["nearest_neighbor"].cost >= results["dyn_prog"].cost


def test_algorithms_above_their_limit_are_not_run():
    graph = CityGraph.random(6, seed=0)
    config = BenchmarkConfig(counts=[6], city_limits={"brute_force": 5, "dyn_prog": 5})
    results = {r.name: r for r in Benchmark(config).run(graph)}
    assert results["brute_force"].status == "not_run"
    assert results["brute_force"].cost is None
    assert results["brute_force"].metadata == {"num_cities": 6, "max_city": 5}
    assert results["dyn_prog"].status == "not_run"
    assert results["bounded"].status == "complete"
    assert results["nearest_neighbor"].status == "complete"


def test_default_limits_skip_exact_solvers_on_large_graphs():
    graph = CityGraph.random(30, seed=5)
    config = BenchmarkConfig(counts=[30], lookahead=2)
    results = {r.name: r for r in Benchmark(config).run(graph)}
    assert results["brute_force"].status == "not_run"
    assert results["dyn_prog"].status == "not_run"
    assert sorted(results["bounded"].path) == list(range(30))


def test_algorithm_subset_and_start_city(square):
    config = BenchmarkConfig(counts=[4], algorithms=["nearest_neighbor"], start_city=2)
    (result,) = Benchmark(config).run(square)
    assert result.name == "nearest_neighbor"
    assert result.path[0] == 2


def test_unknown_algorithm_rejected():
    with pytest.raises(KeyError):
        Benchmark(BenchmarkConfig(algorithms=["two_opt"]))


def test_run_many_is_seeded():
    config = BenchmarkConfig(counts=[4, 6], instances_per_count=2, seed=11, algorithms=["dyn_prog"])
    first = [(i, g.num_cities, [r.cost for r in rs]) for i, g, rs in Benchmark(config).run_many()]
    second = [(i, g.num_cities, [r.cost for r in rs]) for i, g, rs in Benchmark(config).run_many()]
    assert [(i, n) for i, n, _ in first] == [(1, 4), (2, 4), (1, 6), (2, 6)]
    assert first == second


@pytest.mark.parametrize(
    "kwargs",
    [
        {"counts": []},
        {"counts": [1]},
        {"counts": [65]},
        {"lookahead": 0},
        {"instances_per_count": 0},
        {"counts": [4], "start_city": 4},
        {"city_limits": {"dyn_prog": -1}},
        {"city_limits": {"dyn_prog": MAX_CITY_MEMO_TABLE + 1}},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs).validate()


def test_default_limits_stay_within_python_runtime():
    assert MAX_CITY_BRUTE_FORCE <= 10
    assert MAX_CITY_DYN_PROG <= 15
    assert MAX_CITY_DYN_PROG <= MAX_CITY_MEMO_TABLE
    graph = CityGraph.random(MAX_CITY_DYN_PROG + 1, seed=2)
    config = BenchmarkConfig(counts=[graph.num_cities], algorithms=["brute_force", "dyn_prog"])
    results = Benchmark(config).run(graph)
    assert [r.status for r in results] == ["not_run", "not_run"]
    assert results[1].metadata == {"num_cities": MAX_CITY_DYN_PROG + 1, "max_city": MAX_CITY_DYN_PROG}


def test_brute_force_not_run_just_above_its_limit():
    graph = CityGraph.random(MAX_CITY_BRUTE_FORCE + 1, seed=4)
    config = BenchmarkConfig(counts=[graph.num_cities], algorithms=["brute_force"])
    (result,) = Benchmark(config).run(graph)
    assert result.status == "not_run"


def test_config_options_reach_solver_constructor():
    assert SOLVER_SPECS["bounded"].config_options == ("lookahead",)
    assert SOLVER_SPECS["dyn_prog"].config_options == ()
    graph = CityGraph.random(6, seed=7)
    config = BenchmarkConfig(counts=[6], lookahead=3, algorithms=["bounded", "nearest_neighbor"])
    bounded, nearest = Benchmark(config).run(graph)
    assert bounded.metadata["lookahead"] == 3
    assert nearest.metadata["lookahead"] == 1
