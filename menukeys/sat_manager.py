import dataclasses
import time
from typing import List, Optional, Sequence

from menukeys.backends.base import SolverBackend
from menukeys.backends.registry import BackendRegistry
from menukeys.config import SolveConfig
from menukeys.decoder import decode
from menukeys.encoder import Candidate, parse_entries, add_coverage_and_uniqueness, add_cross_entry_exclusion
from menukeys.solution.types import SatStatus, SatResult, Unsatisfiable, MnemonicResult
from menukeys.core.errors import SolverUnknown
from menukeys.core.logging import get_logger

logger = get_logger(__name__)


class SATManager:
    def __init__(self, config: Optional[SolveConfig] = None, registry: Optional[BackendRegistry] = None):
        self.config = config if config else SolveConfig()
        self.registry = registry if registry else BackendRegistry()

    def encode(self, labels: Sequence[str], backend: SolverBackend) -> List[List[Candidate]]:
        entries = parse_entries(labels, backend)
        add_coverage_and_uniqueness(entries, backend)
        if self.config.enforce_cross_entry_uniqueness:
            add_cross_entry_exclusion(entries, backend)
        else:
            logger.info("Cross-entry uniqueness disabled; characters may repeat across entries")
        return entries

    def check(self, backend: SolverBackend) -> SatResult:
        start_time = time.time()
        status = backend.check_sat()
        result = SatResult(status=status, time_taken=(time.time() - start_time) * 1000)
        logger.info(f"Problem was determined to be {status.value} in {result.time_taken:.1f} ms")
        if status == SatStatus.SAT:
            result.model = backend.get_model()
        return result

    def solve(self, labels: Sequence[str]) -> MnemonicResult:
        """
        Encode, check and decode one menu inside a single solver session.
        The session is closed on every exit path.
        """
        labels = list(labels)
        with self.registry.create(self.config) as backend:
            logger.info(f"Solving {len(labels)} menu entries with backend {backend.name}")
            entries = self.encode(labels, backend)
            stats = backend.stats
            logger.debug(f"Encoded {stats.num_vars} variables, {stats.num_constraints} constraints, {stats.num_clauses} clauses")

            result = self.check(backend)

            if result.status == SatStatus.UNKNOWN:
                raise SolverUnknown(f"Backend {backend.name} could not decide the instance")
            if result.status == SatStatus.UNSAT:
                return Unsatisfiable(labels=tuple(labels), stats=stats, time_taken=result.time_taken)

            assignment = decode(entries, result.model, labels)
            return dataclasses.replace(assignment, stats=stats, time_taken=result.time_taken)

    def generate_code(self, labels: Sequence[str]) -> str:
        """Encode the menu and return the solver input without solving it."""
        with self.registry.create(self.config) as backend:
            self.encode(labels, backend)
            return backend.generate_code()


def solve_menu(labels: Sequence[str], config: Optional[SolveConfig] = None) -> MnemonicResult:
    return SATManager(config).solve(labels)
