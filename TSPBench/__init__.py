from TSPBench.config import BenchmarkConfig
from TSPBench.core import Benchmark
from TSPBench.errors import CityCountError, InvariantViolation
from TSPBench.graph import CityGraph, generate_cities, iter_visit_set, visit_set_of
from TSPBench.solvers import (
    AlgorithmResult,
    BaseSolver,
    BoundedLookaheadSolver,
    BruteForceSolver,
    DynamicProgrammingSolver,
    ExactSolver,
    HeuristicSolver,
    NearestNeighborSolver,
    Route,
    RouteAssembler,
    SOLVER_FAMILIES,
    SOLVER_LIMITS,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    StepResult,
    get_solver,
)
from TSPBench.utils.taxonomy import AlgorithmFamily

__all__ = [
    "AlgorithmFamily",
    "AlgorithmResult",
    "BaseSolver",
    "Benchmark",
    "BenchmarkConfig",
    "BoundedLookaheadSolver",
    "BruteForceSolver",
    "CityCountError",
    "CityGraph",
    "DynamicProgrammingSolver",
    "ExactSolver",
    "HeuristicSolver",
    "InvariantViolation",
    "NearestNeighborSolver",
    "Route",
    "RouteAssembler",
    "SOLVER_FAMILIES",
    "SOLVER_LIMITS",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "StepResult",
    "generate_cities",
    "get_solver",
    "iter_visit_set",
    "visit_set_of",
]
