from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

MAX_CITY = 64
MAX_CITY_BRUTE_FORCE = 10
MAX_CITY_DYN_PROG = 15
MAX_CITY_NEAREST_NEIGHBOR = MAX_CITY
MAX_CITY_BOUNDED = MAX_CITY
# Largest graph whose (city, visit set) memo table is allocated in full.
MAX_CITY_MEMO_TABLE = 22
MEMO_UNSET = -1

DEFAULT_LOOKAHEAD = 10
DEFAULT_START_CITY = 0
DEFAULT_SEED = 42
GRID_SIZE = 1000


@dataclass
class BenchmarkConfig:
    """Settings for one benchmarking session."""

    counts: List[int] = field(default_factory=lambda: [10])
    instances_per_count: int = 1
    seed: int = DEFAULT_SEED
    grid_size: int = GRID_SIZE
    start_city: int = DEFAULT_START_CITY
    lookahead: int = DEFAULT_LOOKAHEAD
    algorithms: Optional[List[str]] = None
    # Overrides for the per-algorithm city limits in the solver registry.
    city_limits: Dict[str, int] = field(default_factory=dict)

    def validate(self) -> "BenchmarkConfig":
        if not self.counts:
            raise ValueError("At least one city count is required.")
        for count in self.counts:
            if count < 2 or count > MAX_CITY:
                raise ValueError(f"City count {count} outside range 2 to {MAX_CITY}.")
        if self.instances_per_count < 1:
            raise ValueError("instances_per_count must be at least 1.")
        if self.grid_size < 1:
            raise ValueError("grid_size must be positive.")
        if self.lookahead < 1:
            raise ValueError(f"lookahead must be at least 1, got {self.lookahead}.")
        if self.start_city < 0 or self.start_city >= min(self.counts):
            raise ValueError(f"start_city {self.start_city} is not a valid city for every count.")
        for name, limit in self.city_limits.items():
            if limit < 0:
                raise ValueError(f"City limit for {name} must not be negative.")
        if self.city_limits.get("dyn_prog", 0) > MAX_CITY_MEMO_TABLE:
            raise ValueError(f"dyn_prog city limit must not exceed {MAX_CITY_MEMO_TABLE}.")
        return self


__all__ = [
    "BenchmarkConfig",
    "DEFAULT_LOOKAHEAD",
    "DEFAULT_SEED",
    "DEFAULT_START_CITY",
    "GRID_SIZE",
    "MAX_CITY",
    "MAX_CITY_BOUNDED",
    "MAX_CITY_BRUTE_FORCE",
    "MAX_CITY_DYN_PROG",
    "MAX_CITY_MEMO_TABLE",
    "MAX_CITY_NEAREST_NEIGHBOR",
    "MEMO_UNSET",
]
