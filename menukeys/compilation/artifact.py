from dataclasses import dataclass, field, asdict
from typing import Dict, Any

# Constraint groups emitted by the encoder
COVERAGE = "coverage"
EXCLUSIVITY = "exclusivity"
CROSS_ENTRY = "cross_entry"


@dataclass
class EncodingStats:
    """
    Counters for a single encoding pass.
    A constraint is one encoder-level assertion (a disjunction or an
    implication); a clause is one primitive item handed to the engine.
    """
    num_vars: int = 0
    num_clauses: int = 0
    constraints_by_group: Dict[str, int] = field(default_factory=dict)
    clauses_by_group: Dict[str, int] = field(default_factory=dict)

    def record(self, group: str, clauses: int) -> None:
        self.constraints_by_group[group] = self.constraints_by_group.get(group, 0) + 1
        self.clauses_by_group[group] = self.clauses_by_group.get(group, 0) + clauses
        self.num_clauses += clauses

    @property
    def num_constraints(self) -> int:
        return sum(self.constraints_by_group.values())

    def serialize(self) -> Dict[str, Any]:
        return asdict(self)
