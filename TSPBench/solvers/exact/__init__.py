from TSPBench.solvers.exact.brute_force import BruteForceSolver
from TSPBench.solvers.exact.dynamic_programming import DynamicProgrammingSolver
from TSPBench.solvers.exact.recurrence import ExactSolver

__all__ = [
    "BruteForceSolver",
    "DynamicProgrammingSolver",
    "ExactSolver",
]
