"""
menukeys: keyboard mnemonics for menu entries via SAT.
"""
from menukeys.config import SolveConfig
from menukeys.sat_manager import SATManager, solve_menu
from menukeys.solution.types import Assignment, Unsatisfiable, SatStatus
from menukeys.core.errors import (
    MnemonicError, EmptyLabelError, EncodingInvariantViolation, SolverUnknown
)

__all__ = [
    "SolveConfig", "SATManager", "solve_menu",
    "Assignment", "Unsatisfiable", "SatStatus",
    "MnemonicError", "EmptyLabelError", "EncodingInvariantViolation", "SolverUnknown",
]
