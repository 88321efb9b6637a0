"""
Core module for menukeys.
Provides error handling and logging.
"""
from menukeys.core.errors import (
    MnemonicError, EmptyLabelError, EncodingInvariantViolation, SolverUnknown,
    SolverStateError, BackendError, ConfigError
)
from menukeys.core.logging import get_logger

__all__ = [
    "MnemonicError", "EmptyLabelError", "EncodingInvariantViolation", "SolverUnknown",
    "SolverStateError", "BackendError", "ConfigError",
    "get_logger",
]
