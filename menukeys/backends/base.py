import abc
from typing import Dict, List, Optional, Sequence

from menukeys.vars import VarManager
from menukeys.compilation.artifact import EncodingStats
from menukeys.solution.types import SatStatus
from menukeys.core.errors import SolverStateError


class SolverBackend(abc.ABC):
    """
    A single solver session. Variables are declared by name, constraints are
    only ever appended, and one satisfiability check is expected per session.
    Use as a context manager so the engine is released on every exit path.
    """

    def __init__(self):
        self.var_manager = VarManager()
        self.stats = EncodingStats()
        self._status: Optional[SatStatus] = None
        self._closed = False

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    def declare_bool(self, name: str) -> int:
        """Declare a named boolean. Idempotent per name within this session."""
        if name in self.var_manager:
            return self.var_manager.declare(name)
        vid = self.var_manager.declare(name)
        self._register_var(vid, name)
        self.stats.num_vars = len(self.var_manager)
        return vid

    @abc.abstractmethod
    def _register_var(self, vid: int, name: str) -> None:
        pass

    @abc.abstractmethod
    def assert_or(self, vids: Sequence[int], group: str = "default") -> None:
        """Assert the disjunction of vids."""
        pass

    @abc.abstractmethod
    def assert_implication(self, antecedent: int, negated: Sequence[int], group: str = "default") -> None:
        """Assert antecedent -> AND(NOT v for v in negated)."""
        pass

    @abc.abstractmethod
    def _check(self) -> SatStatus:
        pass

    @abc.abstractmethod
    def _model(self) -> Dict[int, bool]:
        pass

    @abc.abstractmethod
    def generate_code(self) -> str:
        """Return the representation sent to the engine so far."""
        pass

    @abc.abstractmethod
    def _release(self) -> None:
        pass

    def check_sat(self) -> SatStatus:
        if self._closed:
            raise SolverStateError(f"{self.name} session is closed")
        self._status = self._check()
        return self._status

    def get_model(self) -> Dict[int, bool]:
        if self._status != SatStatus.SAT:
            raise SolverStateError(f"No model available (last check: {self._status})")
        return self._model()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._release()

    def __enter__(self) -> "SolverBackend":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_declared(self, vids: List[int]) -> None:
        for vid in vids:
            if vid < 1 or vid > self.var_manager.max_id:
                raise ValueError(f"Variable id {vid} was not declared in this session")
