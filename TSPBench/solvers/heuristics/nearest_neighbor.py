from __future__ import annotations

from typing import Optional

from TSPBench.config import MAX_CITY_NEAREST_NEIGHBOR
from TSPBench.graph import CityGraph
from TSPBench.solvers.base import STATUS_COMPLETE, AlgorithmResult, BaseSolver, current_time
from TSPBench.solvers.heuristics.lookahead import RouteAssembler
from TSPBench.utils.taxonomy import AlgorithmFamily


class NearestNeighborSolver(BaseSolver):
    name = "nearest_neighbor"
    family = AlgorithmFamily.HEURISTIC
    max_city = MAX_CITY_NEAREST_NEIGHBOR

    def solve(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:
        visit_set = self._prepare(graph, start_city, visit_set)
        assembler = RouteAssembler(graph, lookahead=1)
        start_time = current_time()
        route = assembler.assemble(start_city, visit_set)
        return AlgorithmResult(
            name=self.name,
            path=route.path,
            cost=route.total_distance,
            elapsed=current_time() - start_time,
            status=STATUS_COMPLETE,
            metadata={"steps": route.steps, "calls": assembler.heuristic.calls, "lookahead": 1},
        )


__all__ = ["NearestNeighborSolver"]
