from __future__ import annotations

from typing import Optional

from TSPBench.config import DEFAULT_LOOKAHEAD, MAX_CITY_BOUNDED
from TSPBench.graph import CityGraph
from TSPBench.solvers.base import STATUS_COMPLETE, AlgorithmResult, BaseSolver, current_time
from TSPBench.solvers.heuristics.lookahead import RouteAssembler
from TSPBench.utils.taxonomy import AlgorithmFamily


class BoundedLookaheadSolver(BaseSolver):
    """Step-by-step route construction with a shrinking lookahead budget.

    Every hop examines the ``lookahead`` nearest unvisited cities, each
    scored with one fewer candidate per level of recursion.
    """

    name = "bounded"
    family = AlgorithmFamily.HEURISTIC
    max_city = MAX_CITY_BOUNDED
    config_options = ("lookahead",)

    def __init__(self, lookahead: int = DEFAULT_LOOKAHEAD):
        if lookahead < 1:
            raise ValueError(f"lookahead must be at least 1, got {lookahead}")
        self.lookahead = lookahead

    def solve(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:
        visit_set = self._prepare(graph, start_city, visit_set)
        assembler = RouteAssembler(graph, lookahead=self.lookahead)
        start_time = current_time()
        route = assembler.assemble(start_city, visit_set)
        return AlgorithmResult(
            name=self.name,
            path=route.path,
            cost=route.total_distance,
            elapsed=current_time() - start_time,
            status=STATUS_COMPLETE,
            metadata={"steps": route.steps, "calls": assembler.heuristic.calls, "lookahead": self.lookahead},
        )


__all__ = ["BoundedLookaheadSolver"]
