from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type

from TSPBench.errors import contract_failure
from TSPBench.graph import CityGraph
from TSPBench.utils.taxonomy import AlgorithmFamily

STATUS_COMPLETE = "complete"
STATUS_NOT_RUN = "not_run"


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a TSP solver."""

    name: str
    path: List[int] | None
    cost: int | None
    elapsed: float
    status: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def not_run_result(name: str, num_cities: int, max_city: int) -> AlgorithmResult:
    return AlgorithmResult(
        name=name,
        path=None,
        cost=None,
        elapsed=0.0,
        status=STATUS_NOT_RUN,
        metadata={"num_cities": num_cities, "max_city": max_city},
    )


def check_visit_set(graph: CityGraph, start_city: int, visit_set: int) -> None:
    """Validate an entry-point visit set against the graph."""
    if start_city < 0 or start_city >= graph.num_cities:
        raise contract_failure(f"start_city={start_city} not in range 0 to {graph.num_cities - 1}")
    if visit_set < 0 or visit_set >> graph.num_cities:
        raise contract_failure(f"visit_city_bits=0x{visit_set:x} names cities beyond {graph.num_cities - 1}")
    if visit_set & (1 << start_city):
        raise contract_failure(f"start_city={start_city} visit_city_bits=0x{visit_set:x}")


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily
    max_city: int
    # BenchmarkConfig fields passed to the constructor by the harness.
    config_options: Tuple[str, ...] = ()


class BaseSolver:
    """Common interface for TSPBench solvers.

    ``solve`` finds an open path from ``start_city`` through every city in
    ``visit_set``; when ``visit_set`` is omitted every other city is visited.
    """

    name: str
    family: AlgorithmFamily
    max_city: int
    config_options: Tuple[str, ...] = ()

    def solve(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:  # noqa: D401
        """Solve an open-path TSP instance on ``graph``."""
        raise NotImplementedError

    def __call__(self, graph: CityGraph, start_city: int = 0, visit_set: Optional[int] = None) -> AlgorithmResult:
        return self.solve(graph, start_city=start_city, visit_set=visit_set)

    def _prepare(self, graph: CityGraph, start_city: int, visit_set: Optional[int]) -> int:
        if visit_set is None:
            visit_set = graph.full_visit_set(start_city)
        check_visit_set(graph, start_city, visit_set)
        return visit_set


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "STATUS_COMPLETE",
    "STATUS_NOT_RUN",
    "SolverSpec",
    "check_visit_set",
    "current_time",
    "not_run_result",
]
