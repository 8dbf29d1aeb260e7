from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from TSPBench.errors import contract_failure
from TSPBench.graph import CityGraph
from TSPBench.solvers.base import check_visit_set

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    distance: int
    chosen_city: Optional[int]


@dataclass
class Route:
    path: List[int] = field(default_factory=list)
    total_distance: int = 0
    steps: int = 0


class HeuristicSolver:
    """Bounded-lookahead recursion over each city's nearest-first ranking.

    At every depth only the ``lookahead`` nearest unvisited cities are tried
    and each of them is scored by recursing with a budget one smaller,
    never below one. A budget of one everywhere follows the nearest
    unvisited city and never looks ahead.
    """

    def __init__(self, graph: CityGraph):
        self.graph = graph
        self.calls = 0

    def solve_next_step(self, current_city: int, visit_set: int, lookahead: int) -> StepResult:
        """Estimate the remaining distance from ``current_city`` and pick the next hop.

        The distance is the lookahead-bounded estimate used to rank candidates;
        ``chosen_city`` is ``None`` once ``visit_set`` is empty.
        """
        check_visit_set(self.graph, current_city, visit_set)
        distance, chosen = self._search(current_city, visit_set, lookahead)
        return StepResult(distance=distance, chosen_city=chosen)

    def _search(self, city: int, visit_set: int, lookahead: int) -> Tuple[int, Optional[int]]:
        self.calls += 1

        if visit_set & (1 << city):
            raise contract_failure(f"start_city={city} visit_city_bits=0x{visit_set:x}")
        if lookahead < 1:
            raise contract_failure(f"num_cities_to_check {lookahead}")

        if not visit_set:
            return 0, None

        distance_from = self.graph.distance
        deeper = lookahead - 1 if lookahead > 1 else 1
        checked = 0
        min_distance = float("inf")
        best_city: Optional[int] = None

        for next_city in self.graph.neighbors_by_distance(city):
            bit = 1 << next_city
            if not visit_set & bit:
                continue

            remaining, _ = self._search(next_city, visit_set & ~bit, deeper)
            distance = distance_from(city, next_city) + remaining
            if distance < min_distance:
                min_distance = distance
                best_city = next_city

            checked += 1
            if checked == lookahead:
                break

        if best_city is None:
            raise contract_failure(f"best_city not set for city={city} visit_city_bits=0x{visit_set:x}")
        return int(min_distance), best_city


class RouteAssembler:
    """Builds a route one hop at a time from fresh lookahead searches.

    Each step asks the heuristic for the best next city from the current
    position, moves there and clears its bit. The reported total adds the
    actual edges travelled, not the lookahead estimates.
    """

    def __init__(self, graph: CityGraph, lookahead: int):
        self.graph = graph
        self.lookahead = lookahead
        self.heuristic = HeuristicSolver(graph)

    def assemble(self, start_city: int, visit_set: int) -> Route:
        check_visit_set(self.graph, start_city, visit_set)
        route = Route(path=[start_city])
        route_city = start_city

        while visit_set:
            step = self.heuristic.solve_next_step(route_city, visit_set, self.lookahead)
            chosen = step.chosen_city
            if chosen is None or not visit_set & (1 << chosen):
                raise contract_failure(f"city_chosen {chosen}")

            hop = self.graph.distance(route_city, chosen)
            route.total_distance += hop
            route.steps += 1
            logger.debug(
                "%d -> %d dist=%d total_dist=%d estimate=%d",
                route_city,
                chosen,
                hop,
                route.total_distance,
                step.distance,
            )

            route_city = chosen
            route.path.append(chosen)
            visit_set &= ~(1 << chosen)

        return route


__all__ = ["HeuristicSolver", "Route", "RouteAssembler", "StepResult"]
