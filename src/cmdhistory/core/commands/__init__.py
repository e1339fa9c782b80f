"""
History Command System.

Provides Command pattern infrastructure:
- Operation: Reversible unit of work with apply/revert
- HistoryEngine: Bounded, linear undo/redo management
- Reusable operations for common patterns
"""
from .base import Operation, OperationError, InapplicableOperationError
from .history import (
    HistoryEngine,
    HistorySignals,
    HistoryError,
    NothingToUndoError,
    NothingToRedoError,
)
from .examples import SetPropertyOperation, CompositeOperation

__all__ = [
    # Base interfaces
    "Operation",
    "OperationError",
    "InapplicableOperationError",
    # Engine
    "HistoryEngine",
    "HistorySignals",
    "HistoryError",
    "NothingToUndoError",
    "NothingToRedoError",
    # Reusable implementations
    "SetPropertyOperation",
    "CompositeOperation",
]
