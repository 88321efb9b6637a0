from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple, Union

from menukeys.compilation.artifact import EncodingStats


class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"


@dataclass
class SatResult:
    """
    Raw result from the solver backend.
    """
    status: SatStatus
    # var_id -> bool, only present for SAT
    model: Optional[Dict[int, bool]] = None
    time_taken: float = 0.0


@dataclass(frozen=True)
class Assignment:
    """
    One mnemonic character per menu entry, keyed by entry index.
    """
    labels: Tuple[str, ...]
    mnemonics: Dict[int, str]
    stats: Optional[EncodingStats] = None
    time_taken: float = 0.0

    is_valid = True

    def __getitem__(self, entry_index: int) -> str:
        return self.mnemonics[entry_index]

    def __len__(self) -> int:
        return len(self.mnemonics)

    def pairs(self) -> List[Tuple[str, str]]:
        """Ordered (label, mnemonic) pairs."""
        return [(self.labels[i], self.mnemonics[i]) for i in range(len(self.labels))]

    def serialize(self) -> Dict[str, Any]:
        return {
            "status": SatStatus.SAT.value,
            "mnemonics": [{"label": label, "mnemonic": char} for label, char in self.pairs()],
            "stats": self.stats.serialize() if self.stats else None,
        }


@dataclass(frozen=True)
class Unsatisfiable:
    """
    No mnemonic assignment satisfies the constraints for these labels.
    """
    labels: Tuple[str, ...]
    stats: Optional[EncodingStats] = None
    time_taken: float = 0.0

    is_valid = False

    def serialize(self) -> Dict[str, Any]:
        return {
            "status": SatStatus.UNSAT.value,
            "labels": list(self.labels),
            "stats": self.stats.serialize() if self.stats else None,
        }


MnemonicResult = Union[Assignment, Unsatisfiable]
