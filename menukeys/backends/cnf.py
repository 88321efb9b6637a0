import io
from typing import Dict, List, Sequence

from pysat.formula import CNF
from pysat.solvers import Solver, NoSuchSolverError

from menukeys.backends.base import SolverBackend
from menukeys.solution.types import SatStatus
from menukeys.core.errors import BackendError


class CNFBackend(SolverBackend):
    """
    Pass-through to a PySAT solver. Disjunctions become one clause and an
    implication a -> AND(NOT t) becomes one binary clause (-a, -t) per t.
    """

    def __init__(self, solver_name: str = "g3"):
        super().__init__()
        self.solver_name = solver_name
        try:
            self._solver = Solver(name=solver_name)
        except NoSuchSolverError as e:
            raise BackendError(f"Unknown PySAT solver '{solver_name}': {e}") from e
        # Mirror of every clause, kept for DIMACS export
        self._formula = CNF()

    @property
    def name(self) -> str:
        return "pysat"

    def _register_var(self, vid: int, name: str) -> None:
        # PySAT variables are plain integers; nothing to allocate.
        pass

    def _add_clause(self, clause: List[int]) -> None:
        self._formula.append(clause)
        self._solver.add_clause(clause)

    def assert_or(self, vids: Sequence[int], group: str = "default") -> None:
        clause = list(vids)
        self._require_declared(clause)
        if not clause:
            raise ValueError("Cannot assert an empty disjunction")
        self._add_clause(clause)
        self.stats.record(group, 1)

    def assert_implication(self, antecedent: int, negated: Sequence[int], group: str = "default") -> None:
        self._require_declared([antecedent] + list(negated))
        for vid in negated:
            self._add_clause([-antecedent, -vid])
        self.stats.record(group, len(negated))

    def _check(self) -> SatStatus:
        # solve_limited returns None when the engine gives up
        try:
            outcome = self._solver.solve_limited()
        except NotImplementedError:
            # Lingeling has no limited mode; a plain solve always decides
            outcome = self._solver.solve()
        if outcome is None:
            return SatStatus.UNKNOWN
        return SatStatus.SAT if outcome else SatStatus.UNSAT

    def _model(self) -> Dict[int, bool]:
        model = {vid: False for vid in range(1, self.var_manager.max_id + 1)}
        for lit in self._solver.get_model() or []:
            if abs(lit) in model:
                model[abs(lit)] = lit > 0
        return model

    def generate_code(self) -> str:
        comments = [f"c {vid} {name}" for vid, name in sorted(self.var_manager.get_id_to_name().items())]
        out = io.StringIO()
        self._formula.to_fp(out, comments=comments)
        return out.getvalue()

    def _release(self) -> None:
        self._solver.delete()
