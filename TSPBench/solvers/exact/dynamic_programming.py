from __future__ import annotations

from typing import Optional

from TSPBench.config import MAX_CITY_DYN_PROG
from TSPBench.graph import CityGraph
from TSPBench.solvers.base import STATUS_COMPLETE, AlgorithmResult, BaseSolver, current_time
from TSPBench.solvers.exact.recurrence import ExactSolver
from TSPBench.utils.taxonomy import AlgorithmFamily


class DynamicProgrammingSolver(BaseSolver):
    name = "dyn_prog"
    family = AlgorithmFamily.EXACT
    max_city = MAX_CITY_DYN_PROG

    def solve(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:
        visit_set = self._prepare(graph, start_city, visit_set)
        exact = ExactSolver(graph)
        start_time = current_time()
        distance = exact.solve(start_city, visit_set, use_memo=True)
        elapsed = current_time() - start_time
        calls = exact.calls
        # Path recovery only reads the memo filled above; it is not timed.
        path = exact.route(start_city, visit_set)
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=distance,
            elapsed=elapsed,
            status=STATUS_COMPLETE,
            metadata={"calls": calls, "memo_entries": exact.memo_entries},
        )


__all__ = ["DynamicProgrammingSolver"]
