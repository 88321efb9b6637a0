from typing import Dict, List, Sequence

from menukeys.encoder import Candidate
from menukeys.solution.types import Assignment
from menukeys.core.errors import EncodingInvariantViolation


def decode(entries: List[List[Candidate]], model: Dict[int, bool], labels: Sequence[str]) -> Assignment:
    """
    Read the chosen mnemonic of every entry out of a satisfying model.
    Anything but exactly one true candidate per entry is an encoding defect.
    """
    mnemonics = {}
    for i, entry in enumerate(entries):
        chosen = [c.character for c in entry if model.get(c.variable, False)]
        if len(chosen) != 1:
            raise EncodingInvariantViolation(i, chosen)
        mnemonics[i] = chosen[0]
    return Assignment(labels=tuple(labels), mnemonics=mnemonics)
