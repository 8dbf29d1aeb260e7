from TSPBench.solvers.heuristics.bounded import BoundedLookaheadSolver
from TSPBench.solvers.heuristics.lookahead import HeuristicSolver, Route, RouteAssembler, StepResult
from TSPBench.solvers.heuristics.nearest_neighbor import NearestNeighborSolver

__all__ = [
    "BoundedLookaheadSolver",
    "HeuristicSolver",
    "NearestNeighborSolver",
    "Route",
    "RouteAssembler",
    "StepResult",
]
