from typing import Callable, Dict, List

from menukeys.backends.base import SolverBackend
from menukeys.backends.cnf import CNFBackend
from menukeys.backends.smt import Z3Backend
from menukeys.config import SolveConfig
from menukeys.core.errors import BackendError

BackendFactory = Callable[[SolveConfig], SolverBackend]


class BackendRegistry:
    def __init__(self):
        self._factories: Dict[str, BackendFactory] = {}
        self.register("pysat", lambda config: CNFBackend(solver_name=config.solver_name))
        self.register("z3", lambda config: Z3Backend())

    def register(self, name: str, factory: BackendFactory):
        self._factories[name] = factory

    def create(self, config: SolveConfig) -> SolverBackend:
        if config.backend not in self._factories:
            raise BackendError(
                f"Backend '{config.backend}' not found. Available: {', '.join(self.list_backends())}"
            )
        return self._factories[config.backend](config)

    def list_backends(self) -> List[str]:
        return list(self._factories.keys())
