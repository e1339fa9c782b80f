"""
History Engine - Bounded, linear undo/redo management.

Keeps executed Operations in chronological order with a cursor pointing at
the last applied one. Executing mid-history drops the redo tail; exceeding
the capacity evicts the oldest applied entry.
"""
from typing import Any, List, Optional, Tuple

from loguru import logger

from .base import Operation
from ..config import HistoryOptions
from ..events import Signal


class HistoryError(Exception):
    """Base exception for out-of-range cursor requests."""
    pass


class NothingToUndoError(HistoryError):
    """Raised by undo() when no operation is applied."""
    pass


class NothingToRedoError(HistoryError):
    """Raised by redo() when the cursor is at the end of the record."""
    pass


class HistorySignals:
    """Signal holder for UI binding."""

    def __init__(self):
        self.can_undo_changed = Signal("CanUndoChanged")
        self.can_redo_changed = Signal("CanRedoChanged")
        self.state_changed = Signal("HistoryStateChanged")


class HistoryEngine:
    """
    Executes Operations against a target and walks them back and forth.

    Invariants:
    - Entries 0..index are applied, entries after index are redo-available
    - A new execute discards the redo-available tail for good
    - At most max_history entries are kept (None means unbounded)
    - index always lies in [-1, len - 1]

    The engine is single-writer: hosts calling it from several threads must
    serialize access themselves.

    Usage:
        buffer = TextBuffer()
        history = HistoryEngine(buffer, HistoryOptions(max_history=100))

        history.execute(InsertText("Hello"))
        history.undo()  # buffer is empty again
        history.redo()  # buffer is "Hello"

        # Connect UI via signals property
        history.signals.can_undo_changed.connect(undo_action.setEnabled)
    """

    def __init__(self, target: Any, options: Optional[HistoryOptions] = None):
        """
        Initialize HistoryEngine.

        Args:
            target: Object every operation is applied to; owned by the host
            options: HistoryOptions (default: unbounded history)
        """
        if options is None:
            options = HistoryOptions()

        self._target = target
        self._max_history = options.max_history

        self._record: List[Operation] = []
        self._index = -1

        self._signals = HistorySignals()

        # Track previous state for signal emission
        self._last_can_undo = False
        self._last_can_redo = False

    @property
    def signals(self) -> HistorySignals:
        return self._signals

    @property
    def target(self) -> Any:
        return self._target

    @property
    def max_history(self) -> Optional[int]:
        return self._max_history

    @property
    def index(self) -> int:
        """Position of the last applied operation, -1 when none is applied."""
        return self._index

    @property
    def current_length(self) -> int:
        return len(self._record)

    def __len__(self) -> int:
        return len(self._record)

    @property
    def entries(self) -> Tuple[Operation, ...]:
        """Read-only snapshot of the record, oldest first."""
        return tuple(self._record)

    @property
    def can_undo(self) -> bool:
        return self._index >= 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._record) - 1

    @property
    def undo_count(self) -> int:
        return self._index + 1

    @property
    def redo_count(self) -> int:
        return len(self._record) - 1 - self._index

    @property
    def undo_description(self) -> Optional[str]:
        """Get description of next undo action."""
        if self.can_undo:
            return self._record[self._index].description
        return None

    @property
    def redo_description(self) -> Optional[str]:
        """Get description of next redo action."""
        if self.can_redo:
            return self._record[self._index + 1].description
        return None

    def execute(self, operation: Operation) -> None:
        """
        Apply an operation and record it.

        If apply raises, nothing is recorded and the error propagates.
        An instance may be recorded only once; it keeps the state of its
        latest apply, so a second activation would lose the first.

        Args:
            operation: Operation to apply against the target

        Raises:
            ValueError: If the operation is already among the applied entries
        """
        # Entries past the cursor are about to be discarded, so only the
        # applied part counts
        if any(op is operation for op in self._record[:self._index + 1]):
            raise ValueError(f"Operation already in history: {operation.description}")

        try:
            operation.apply(self._target)
        except Exception as e:
            logger.error(f"Operation failed: {operation.description}: {e}")
            raise

        # Drop redo-available tail
        if self.can_redo:
            dropped = len(self._record) - (self._index + 1)
            del self._record[self._index + 1:]
            logger.debug(f"Discarded {dropped} redo entries")

        self._record.append(operation)
        self._index += 1

        # Enforce max history
        if self._max_history is not None and len(self._record) > self._max_history:
            evicted = self._record.pop(0)
            self._index -= 1
            logger.debug(f"Evicted: {evicted.description}")

        logger.debug(f"Executed: {operation.description}")
        self._emit_state_changes()

    def undo(self) -> None:
        """
        Revert the operation at the cursor and step back.

        Raises:
            NothingToUndoError: If no operation is applied
        """
        if not self.can_undo:
            raise NothingToUndoError("Nothing to undo")

        operation = self._record[self._index]

        try:
            operation.revert(self._target)
        except Exception as e:
            logger.error(f"Undo failed: {operation.description}: {e}")
            raise

        self._index -= 1
        logger.debug(f"Undone: {operation.description}")
        self._emit_state_changes()

    def redo(self) -> None:
        """
        Step forward and re-apply the operation there.

        Raises:
            NothingToRedoError: If there is no redo-available entry
        """
        if not self.can_redo:
            raise NothingToRedoError("Nothing to redo")

        self._index += 1
        operation = self._record[self._index]

        try:
            operation.apply(self._target)
        except Exception as e:
            logger.error(f"Redo failed: {operation.description}: {e}")
            self._index -= 1
            raise

        logger.debug(f"Redone: {operation.description}")
        self._emit_state_changes()

    def clear(self) -> None:
        """Forget all history without touching the target."""
        self._record.clear()
        self._index = -1
        logger.debug("History cleared")
        self._emit_state_changes()

    def _emit_state_changes(self) -> None:
        """Emit signals if can_undo/can_redo state changed."""
        current_can_undo = self.can_undo
        current_can_redo = self.can_redo

        if current_can_undo != self._last_can_undo:
            self._last_can_undo = current_can_undo
            self._signals.can_undo_changed.emit(current_can_undo)

        if current_can_redo != self._last_can_redo:
            self._last_can_redo = current_can_redo
            self._signals.can_redo_changed.emit(current_can_redo)

        self._signals.state_changed.emit()

    def __repr__(self) -> str:
        return (
            f"<HistoryEngine index={self._index} length={len(self._record)} "
            f"max_history={self._max_history}>"
        )
