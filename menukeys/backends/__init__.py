from menukeys.backends.base import SolverBackend
from menukeys.backends.cnf import CNFBackend
from menukeys.backends.smt import Z3Backend
from menukeys.backends.registry import BackendRegistry

__all__ = ["SolverBackend", "CNFBackend", "Z3Backend", "BackendRegistry"]
