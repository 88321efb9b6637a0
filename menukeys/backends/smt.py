from typing import Dict, Sequence

import z3

from menukeys.backends.base import SolverBackend
from menukeys.solution.types import SatStatus


class Z3Backend(SolverBackend):
    """
    Z3 session with its own context. Constraints are asserted as Or / Implies
    terms, one assertion per constraint.
    """

    def __init__(self):
        super().__init__()
        self._ctx = z3.Context()
        self._solver = z3.Solver(ctx=self._ctx)
        self._vars: Dict[int, z3.BoolRef] = {}

    @property
    def name(self) -> str:
        return "z3"

    def _register_var(self, vid: int, name: str) -> None:
        self._vars[vid] = z3.Bool(name, ctx=self._ctx)

    def assert_or(self, vids: Sequence[int], group: str = "default") -> None:
        vids = list(vids)
        self._require_declared(vids)
        if not vids:
            raise ValueError("Cannot assert an empty disjunction")
        self._solver.add(z3.Or([self._vars[v] for v in vids]))
        self.stats.record(group, 1)

    def assert_implication(self, antecedent: int, negated: Sequence[int], group: str = "default") -> None:
        negated = list(negated)
        self._require_declared([antecedent] + negated)
        if not negated:
            # a -> AND() is a tautology
            self.stats.record(group, 0)
            return
        tail = z3.And([z3.Not(self._vars[v]) for v in negated])
        self._solver.add(z3.Implies(self._vars[antecedent], tail))
        self.stats.record(group, 1)

    def _check(self) -> SatStatus:
        result = self._solver.check()
        if result == z3.sat:
            return SatStatus.SAT
        if result == z3.unsat:
            return SatStatus.UNSAT
        return SatStatus.UNKNOWN

    def _model(self) -> Dict[int, bool]:
        m = self._solver.model()
        return {
            vid: z3.is_true(m.eval(var, model_completion=True))
            for vid, var in self._vars.items()
        }

    def generate_code(self) -> str:
        return self._solver.sexpr()

    def _release(self) -> None:
        self._solver.reset()
        self._vars.clear()
