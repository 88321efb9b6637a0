"""
Encoding of the mnemonic assignment problem.

For options "undo", "copy", "mod" the candidates are

    Uu0, Un0, Ud0, Uo0
    Uc1, Uo1, Up1, Uy1
    Um2, Uo2, Ud2

and three constraint families are emitted:

1. Coverage, each option has a mnemonic:
       Uu0 v Un0 v Ud0 v Uo0
2. Exclusivity, an option has at most one mnemonic:
       Uu0 -> ~Un0 ^ ~Ud0 ^ ~Uo0   (one implication per candidate)
3. Cross-entry exclusion, a character is the mnemonic of at most one option:
       Uo0 -> ~Uo1 ^ ~Uo2
       Ud0 -> ~Ud2
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence

from menukeys.backends.base import SolverBackend
from menukeys.compilation.artifact import COVERAGE, EXCLUSIVITY, CROSS_ENTRY
from menukeys.core.errors import EmptyLabelError
from menukeys.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Candidate:
    """The decision "character is the mnemonic of entry_index"."""
    character: str
    entry_index: int
    position: int  # index of the character in the deduplicated label
    variable: int

    @property
    def var_name(self) -> str:
        return candidate_name(self.character, self.entry_index)


def candidate_name(character: str, entry_index: int) -> str:
    return f"U{character}{entry_index}"


def distinct_characters(label: str) -> List[str]:
    """Characters of label without repeats, in first-occurrence order."""
    return list(dict.fromkeys(label))


def parse_entries(labels: Sequence[str], backend: SolverBackend) -> List[List[Candidate]]:
    """
    Transform every menu label into its list of candidates.

    All labels are validated before any variable is declared, so an empty
    label leaves the session untouched.

    Example: ["undo", "copy"] -> [[Uu0, Un0, Ud0, Uo0], [Uc1, Uo1, Up1, Uy1]]
    """
    for i, label in enumerate(labels):
        if not label:
            raise EmptyLabelError(i)

    entries = []
    for i, label in enumerate(labels):
        entry = []
        for position, character in enumerate(distinct_characters(label)):
            vid = backend.declare_bool(candidate_name(character, i))
            entry.append(Candidate(character=character, entry_index=i, position=position, variable=vid))
        entries.append(entry)

    logger.debug(f"Declared {sum(len(e) for e in entries)} candidates for {len(entries)} entries")
    return entries


def _assert_pairwise_exclusion(candidates: List[Candidate], backend: SolverBackend, group: str) -> None:
    # c_m -> AND(~c_t for t != m), once per member
    for m, first in enumerate(candidates):
        tail = candidates[:m] + candidates[m + 1:]
        backend.assert_implication(first.variable, [c.variable for c in tail], group=group)


def add_coverage_and_uniqueness(entries: List[List[Candidate]], backend: SolverBackend) -> None:
    """Each option has exactly one mnemonic: one disjunction and k implications per entry."""
    for entry in entries:
        backend.assert_or([c.variable for c in entry], group=COVERAGE)

    for entry in entries:
        _assert_pairwise_exclusion(entry, backend, EXCLUSIVITY)

    logger.debug(
        f"Coverage: {backend.stats.constraints_by_group.get(COVERAGE, 0)} disjunctions, "
        f"exclusivity: {backend.stats.constraints_by_group.get(EXCLUSIVITY, 0)} implications"
    )


def find_repeated_candidates(entries: List[List[Candidate]]) -> List[Candidate]:
    """
    Candidates whose character shows up in at least two entries.

    Each later match is consumed once paired, so three or more entries sharing
    a character still contribute every occurrence exactly once.
    """
    flat = [c for entry in entries for c in entry]
    consumed = set()
    repeated: Dict[Candidate, None] = {}
    for i in range(len(flat) - 1):
        if i in consumed:
            continue
        current = flat[i]
        for j in range(i + 1, len(flat)):
            if j not in consumed and flat[j].character == current.character:
                repeated[current] = None
                repeated[flat[j]] = None
                consumed.add(j)
    return list(repeated)


def group_by_character(candidates: List[Candidate]) -> Dict[str, List[Candidate]]:
    grouped: Dict[str, List[Candidate]] = {}
    for c in candidates:
        grouped.setdefault(c.character, []).append(c)
    return grouped


def add_cross_entry_exclusion(entries: List[List[Candidate]], backend: SolverBackend) -> None:
    """A given character cannot be the mnemonic of two different options."""
    grouped = group_by_character(find_repeated_candidates(entries))
    for candidates in grouped.values():
        _assert_pairwise_exclusion(candidates, backend, CROSS_ENTRY)

    logger.debug(
        f"Cross-entry: {len(grouped)} shared characters, "
        f"{backend.stats.constraints_by_group.get(CROSS_ENTRY, 0)} implications"
    )
