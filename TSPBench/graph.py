from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from TSPBench.config import GRID_SIZE, MAX_CITY
from TSPBench.errors import CityCountError, contract_failure


def generate_cities(num_cities: int, rng: np.random.Generator, grid_size: int = GRID_SIZE) -> np.ndarray:
    """Draw integer city coordinates uniformly from ``[0, grid_size)`` on both axes."""
    return rng.integers(0, grid_size, size=(num_cities, 2), dtype=np.int64)


def visit_set_of(cities: Iterable[int]) -> int:
    mask = 0
    for city in cities:
        mask |= 1 << city
    return mask


def iter_visit_set(visit_set: int) -> Iterator[int]:
    """Yield the cities whose bit is set, lowest index first."""
    city = 0
    while visit_set:
        if visit_set & 1:
            yield city
        visit_set >>= 1
        city += 1


def _as_coordinates(coordinates: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    coords = np.asarray(coordinates)
    if coords.size == 0:
        raise CityCountError(f"City count 0 outside range 2 to {MAX_CITY}.")
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Coordinates must have shape (n, 2), got {coords.shape}.")
    if not np.issubdtype(coords.dtype, np.integer):
        if not np.issubdtype(coords.dtype, np.number) or not np.all(np.floor(coords) == coords):
            raise ValueError("Coordinates must be integers.")
    return coords.astype(np.int64)


@dataclass(frozen=True, eq=False)
class CityGraph:
    """Cities on an integer grid with truncated Euclidean distances.

    ``neighbor_order[i]`` lists every city (``i`` included) by non-decreasing
    distance from ``i``; equal distances keep the lower index first.
    """

    coordinates: np.ndarray
    distances: np.ndarray
    neighbor_order: Tuple[Tuple[int, ...], ...]
    _rows: Tuple[Tuple[int, ...], ...] = field(repr=False, compare=False)

    @classmethod
    def build(cls, coordinates: Sequence[Sequence[int]] | np.ndarray) -> "CityGraph":
        coords = _as_coordinates(coordinates)
        n = coords.shape[0]
        if n < 2 or n > MAX_CITY:
            raise CityCountError(f"City count {n} outside range 2 to {MAX_CITY}.")

        diff = coords[:, None, :] - coords[None, :, :]
        distances = np.linalg.norm(diff, axis=-1).astype(np.int64)
        order = np.argsort(distances, axis=1, kind="stable")

        coords.setflags(write=False)
        distances.setflags(write=False)
        return cls(
            coordinates=coords,
            distances=distances,
            neighbor_order=tuple(tuple(int(c) for c in row) for row in order),
            _rows=tuple(tuple(int(d) for d in row) for row in distances),
        )

    @classmethod
    def random(
        cls,
        num_cities: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        grid_size: int = GRID_SIZE,
    ) -> "CityGraph":
        if num_cities < 2 or num_cities > MAX_CITY:
            raise CityCountError(f"City count {num_cities} outside range 2 to {MAX_CITY}.")
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both.")
        if rng is None:
            rng = np.random.default_rng(seed)
        return cls.build(generate_cities(num_cities, rng, grid_size))

    @property
    def num_cities(self) -> int:
        return len(self._rows)

    def distance(self, i: int, j: int) -> int:
        return self._rows[i][j]

    def neighbors_by_distance(self, i: int) -> Tuple[int, ...]:
        return self.neighbor_order[i]

    def full_visit_set(self, start_city: int) -> int:
        """Every city bit set except ``start_city``'s."""
        if start_city < 0 or start_city >= self.num_cities:
            raise contract_failure(f"start_city={start_city} not in range 0 to {self.num_cities - 1}")
        return ((1 << self.num_cities) - 1) & ~(1 << start_city)

    def path_length(self, path: Sequence[int]) -> int:
        """Sum of edge distances along an open path."""
        return sum(self._rows[a][b] for a, b in zip(path, path[1:]))

    def to_records(self) -> List[List[int]]:
        return self.coordinates.tolist()


__all__ = ["CityGraph", "generate_cities", "iter_visit_set", "visit_set_of"]
