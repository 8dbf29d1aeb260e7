from __future__ import annotations

from typing import Optional

from TSPBench.config import MAX_CITY_BRUTE_FORCE
from TSPBench.graph import CityGraph
from TSPBench.solvers.base import STATUS_COMPLETE, AlgorithmResult, BaseSolver, current_time
from TSPBench.solvers.exact.recurrence import ExactSolver
from TSPBench.utils.taxonomy import AlgorithmFamily


class BruteForceSolver(BaseSolver):
    name = "brute_force"
    family = AlgorithmFamily.EXACT
    max_city = MAX_CITY_BRUTE_FORCE

    def solve(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:
        visit_set = self._prepare(graph, start_city, visit_set)
        exact = ExactSolver(graph)
        start_time = current_time()
        distance = exact.solve(start_city, visit_set, use_memo=False)
        return AlgorithmResult(
            name=self.name,
            path=None,
            cost=distance,
            elapsed=current_time() - start_time,
            status=STATUS_COMPLETE,
            metadata={"calls": exact.calls},
        )


__all__ = ["BruteForceSolver"]
