"""
History Core - Undo/redo infrastructure.

Provides:
- HistoryEngine: Bounded, linear undo/redo over a host-owned target
- Operation: Base class for reversible operations
- HistoryBuilder: Fluent engine construction
- ConfigManager: Configuration with persistence
- Signal: Synchronous observer notifications

Usage:
    from cmdhistory.core import HistoryBuilder, ConfigManager
    
    history = HistoryBuilder(document).with_config(ConfigManager()).build()
    history.execute(SetPropertyOperation("title", "Draft 2"))
    history.undo()
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    HistorySettings,
    HistoryOptions,
)
from .events import Signal, ObserverEvent
from .commands import (
    Operation,
    OperationError,
    InapplicableOperationError,
    HistoryEngine,
    HistorySignals,
    HistoryError,
    NothingToUndoError,
    NothingToRedoError,
    SetPropertyOperation,
    CompositeOperation,
)
from .bootstrap import HistoryBuilder
from .logging import setup_logging

__all__ = [
    # Configuration
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "HistorySettings",
    "HistoryOptions",
    
    # Events
    "Signal",
    "ObserverEvent",
    
    # Commands
    "Operation",
    "OperationError",
    "InapplicableOperationError",
    "HistoryEngine",
    "HistorySignals",
    "HistoryError",
    "NothingToUndoError",
    "NothingToRedoError",
    "SetPropertyOperation",
    "CompositeOperation",
    
    # Bootstrap
    "HistoryBuilder",
    "setup_logging",
]
