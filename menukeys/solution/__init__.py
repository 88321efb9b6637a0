from menukeys.solution.types import SatStatus, SatResult, Assignment, Unsatisfiable, MnemonicResult

__all__ = ["SatStatus", "SatResult", "Assignment", "Unsatisfiable", "MnemonicResult"]
