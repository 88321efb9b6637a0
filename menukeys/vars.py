from typing import Dict


class VarManager:
    """
    Centralized manager for SAT variable allocation.
    Ensures deterministic ID assignment: declaring the same names in the same
    order always yields the same IDs, and redeclaring a name is a no-op.
    """
    def __init__(self):
        self._var_map: Dict[str, int] = {}
        self._id_to_name: Dict[int, str] = {}
        self._next_id: int = 1

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    def __len__(self) -> int:
        return len(self._var_map)

    def __contains__(self, name: str) -> bool:
        return name in self._var_map

    def declare(self, name: str) -> int:
        """
        Declare a variable. Returns existing ID if already declared.
        """
        if not name:
            raise ValueError("Variable name cannot be empty")
        if name in self._var_map:
            return self._var_map[name]

        vid = self._next_id
        self._var_map[name] = vid
        self._id_to_name[vid] = name
        self._next_id += 1
        return vid

    def get_id_to_name(self) -> Dict[int, str]:
        return self._id_to_name.copy()
