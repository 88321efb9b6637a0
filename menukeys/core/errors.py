from typing import List


class MnemonicError(Exception):
    """Base exception for all menukeys related errors."""
    pass


class EmptyLabelError(MnemonicError):
    """Raised when a menu entry has no characters to draw a mnemonic from."""

    def __init__(self, entry_index: int):
        self.entry_index = entry_index
        super().__init__(f"Menu entry {entry_index} has an empty label")


class EncodingInvariantViolation(MnemonicError):
    """
    Raised when a model does not set exactly one candidate true for an entry.
    This points at a defect in constraint construction, never at the menu.
    """

    def __init__(self, entry_index: int, true_characters: List[str]):
        self.entry_index = entry_index
        self.true_characters = list(true_characters)
        super().__init__(
            f"Entry {entry_index} has {len(self.true_characters)} true candidates "
            f"{self.true_characters}, expected exactly one"
        )


class SolverUnknown(MnemonicError):
    """Raised when the solver could not decide satisfiability."""
    pass


class SolverStateError(MnemonicError):
    """Raised when the solver session is used out of order."""
    pass


class BackendError(MnemonicError):
    """Raised when a solver backend cannot be created or used."""
    pass


class ConfigError(MnemonicError):
    """Raised when configuration cannot be loaded."""
    pass
