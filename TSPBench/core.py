from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

import numpy as np

from TSPBench.config import BenchmarkConfig
from TSPBench.graph import CityGraph
from TSPBench.solvers import SOLVER_LIMITS, SOLVER_SPECS, AlgorithmResult, get_solver
from TSPBench.solvers.base import not_run_result

logger = logging.getLogger(__name__)


class Benchmark:
    """Runs every selected algorithm on a graph: limit check -> solver -> result."""

    def __init__(self, config: BenchmarkConfig | None = None):
        self.config = (config or BenchmarkConfig()).validate()
        self.algorithms = list(self.config.algorithms or SOLVER_SPECS.keys())
        for name in self.algorithms:
            if name not in SOLVER_SPECS:
                raise KeyError(f"Unknown solver: {name}")

    def max_city(self, name: str) -> int:
        return self.config.city_limits.get(name, SOLVER_LIMITS[name])

    def run_algorithm(self, name: str, graph: CityGraph) -> AlgorithmResult:
        limit = self.max_city(name)
        if graph.num_cities > limit:
            logger.info("%s not run: %d cities exceeds limit %d", name, graph.num_cities, limit)
            return not_run_result(name, graph.num_cities, limit)

        kwargs = {option: getattr(self.config, option) for option in SOLVER_SPECS[name].config_options}
        solver = get_solver(name, **kwargs)
        start_city = self.config.start_city
        result = solver.solve(graph, start_city=start_city, visit_set=graph.full_visit_set(start_city))
        logger.debug("%s distance=%s elapsed=%.6f", name, result.cost, result.elapsed)
        return result

    def run(self, graph: CityGraph) -> List[AlgorithmResult]:
        return [self.run_algorithm(name, graph) for name in self.algorithms]

    def run_many(self) -> Iterator[Tuple[int, CityGraph, List[AlgorithmResult]]]:
        """Yield ``(instance, graph, results)`` for every configured count and repeat."""
        rng = np.random.default_rng(self.config.seed)
        for count in self.config.counts:
            for instance in range(1, self.config.instances_per_count + 1):
                graph = CityGraph.random(count, rng=rng, grid_size=self.config.grid_size)
                yield instance, graph, self.run(graph)


__all__ = ["Benchmark"]
