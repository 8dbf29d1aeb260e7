from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from TSPBench.config import MAX_CITY_MEMO_TABLE, MEMO_UNSET
from TSPBench.errors import contract_failure
from TSPBench.graph import CityGraph, iter_visit_set
from TSPBench.solvers.base import check_visit_set

logger = logging.getLogger(__name__)


class ExactSolver:
    """Shortest open path from a start city through every city of a visit set.

    Both variants evaluate the same recurrence over ``(city, visit_set)``
    states, scanning candidate next cities in ascending index order and
    keeping the first minimum found. With ``use_memo`` each state is solved
    once and cached for the rest of the run; without it every state is
    recomputed each time it is reached.

    The memo is an ``(N, 2**N)`` int32 table indexed by city and visit set.
    ``MEMO_UNSET`` marks states not yet solved, so an optimum of 0 is cached
    like any other value.
    """

    def __init__(self, graph: CityGraph):
        self.graph = graph
        self.calls = 0
        self._memo: Optional[np.ndarray] = None

    @property
    def memo_table(self) -> Optional[np.ndarray]:
        return self._memo

    @property
    def memo_entries(self) -> int:
        if self._memo is None:
            return 0
        return int(np.count_nonzero(self._memo != MEMO_UNSET))

    def solve(self, start_city: int, visit_set: int, use_memo: bool = False) -> int:
        check_visit_set(self.graph, start_city, visit_set)
        self.calls = 0
        self._memo = self._new_memo() if use_memo else None
        distance = self._search(start_city, visit_set)
        logger.debug(
            "exact start_city=%d use_memo=%s distance=%d calls=%d memo_entries=%d",
            start_city,
            use_memo,
            distance,
            self.calls,
            self.memo_entries,
        )
        return distance

    def _new_memo(self) -> np.ndarray:
        n = self.graph.num_cities
        if n > MAX_CITY_MEMO_TABLE:
            raise ValueError(f"Memo table for {n} cities exceeds the {MAX_CITY_MEMO_TABLE} city maximum.")
        return np.full((n, 1 << n), MEMO_UNSET, dtype=np.int32)

    def route(self, start_city: int, visit_set: int) -> List[int]:
        """Reconstruct one optimal path, preferring the lowest next index on ties."""
        if self._memo is None or (visit_set and self._memo[start_city, visit_set] == MEMO_UNSET):
            self.solve(start_city, visit_set, use_memo=True)

        path = [start_city]
        city = start_city
        while visit_set:
            target = self._search(city, visit_set)
            for next_city in iter_visit_set(visit_set):
                rest = visit_set & ~(1 << next_city)
                if self.graph.distance(city, next_city) + self._search(next_city, rest) == target:
                    break
            else:
                raise contract_failure(f"no next city reproduces distance {target} from city {city}")
            path.append(next_city)
            city = next_city
            visit_set = rest
        return path

    def _search(self, city: int, visit_set: int) -> int:
        self.calls += 1

        if visit_set & (1 << city):
            raise contract_failure(f"start_city={city} visit_city_bits=0x{visit_set:x}")

        if not visit_set:
            return 0

        memo = self._memo
        if memo is not None:
            cached = int(memo[city, visit_set])
            if cached != MEMO_UNSET:
                return cached

        distance_from = self.graph.distance
        min_distance = float("inf")
        for next_city in iter_visit_set(visit_set):
            distance = distance_from(city, next_city) + self._search(next_city, visit_set & ~(1 << next_city))
            if distance < min_distance:
                min_distance = distance

        if min_distance == float("inf"):
            raise contract_failure(f"min_distance not set for city={city} visit_city_bits=0x{visit_set:x}")

        result = int(min_distance)
        if memo is not None:
            memo[city, visit_set] = result
        return result


__all__ = ["ExactSolver"]
