"""
cmdhistory - Bounded linear undo/redo command history.

Execute reversible operations against a host-owned target and walk back
and forth through them.
"""

from cmdhistory.core.config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    HistorySettings,
    HistoryOptions,
)
from cmdhistory.core.events import Signal
from cmdhistory.core.logging import setup_logging
from cmdhistory.core.bootstrap import HistoryBuilder
from cmdhistory.core.commands import (
    Operation,
    OperationError,
    InapplicableOperationError,
    HistoryEngine,
    HistoryError,
    NothingToUndoError,
    NothingToRedoError,
    SetPropertyOperation,
    CompositeOperation,
)
from cmdhistory.text import TextBuffer, InsertText, DeleteRange, ReplaceRange

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "HistorySettings",
    "HistoryOptions",
    "Signal",
    "setup_logging",
    "HistoryBuilder",
    
    # Commands
    "Operation",
    "OperationError",
    "InapplicableOperationError",
    "HistoryEngine",
    "HistoryError",
    "NothingToUndoError",
    "NothingToRedoError",
    "SetPropertyOperation",
    "CompositeOperation",
    
    # Text
    "TextBuffer",
    "InsertText",
    "DeleteRange",
    "ReplaceRange",
]
