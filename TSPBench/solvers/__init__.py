from __future__ import annotations

from TSPBench.solvers.base import AlgorithmResult, BaseSolver, SolverSpec
from TSPBench.solvers.exact import BruteForceSolver, DynamicProgrammingSolver, ExactSolver
from TSPBench.solvers.heuristics import (
    BoundedLookaheadSolver,
    HeuristicSolver,
    NearestNeighborSolver,
    Route,
    RouteAssembler,
    StepResult,
)
from TSPBench.utils.taxonomy import AlgorithmFamily

# Order matches the benchmark table: exact solvers first, then heuristics.
SOLVER_SPECS: dict[str, SolverSpec] = {
    BruteForceSolver.name: SolverSpec(
        name=BruteForceSolver.name,
        cls=BruteForceSolver,
        family=BruteForceSolver.family,
        max_city=BruteForceSolver.max_city,
        config_options=BruteForceSolver.config_options,
    ),
    DynamicProgrammingSolver.name: SolverSpec(
        name=DynamicProgrammingSolver.name,
        cls=DynamicProgrammingSolver,
        family=DynamicProgrammingSolver.family,
        max_city=DynamicProgrammingSolver.max_city,
        config_options=DynamicProgrammingSolver.config_options,
    ),
    BoundedLookaheadSolver.name: SolverSpec(
        name=BoundedLookaheadSolver.name,
        cls=BoundedLookaheadSolver,
        family=BoundedLookaheadSolver.family,
        max_city=BoundedLookaheadSolver.max_city,
        config_options=BoundedLookaheadSolver.config_options,
    ),
    NearestNeighborSolver.name: SolverSpec(
        name=NearestNeighborSolver.name,
        cls=NearestNeighborSolver,
        family=NearestNeighborSolver.family,
        max_city=NearestNeighborSolver.max_city,
        config_options=NearestNeighborSolver.config_options,
    ),
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}
SOLVER_LIMITS: dict[str, int] = {name: spec.max_city for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str, **kwargs) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls(**kwargs)


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "BoundedLookaheadSolver",
    "BruteForceSolver",
    "DynamicProgrammingSolver",
    "ExactSolver",
    "HeuristicSolver",
    "NearestNeighborSolver",
    "Route",
    "RouteAssembler",
    "SOLVER_FAMILIES",
    "SOLVER_LIMITS",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SolverSpec",
    "StepResult",
    "get_solver",
]
