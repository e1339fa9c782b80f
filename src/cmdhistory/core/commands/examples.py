"""
Reusable Operations - Generic operation implementations.

Provides common operation patterns for typical use cases:
- SetPropertyOperation: Generic attribute setter with undo
- CompositeOperation: Group multiple operations as one history entry
"""
from typing import Any, List, Sequence

from loguru import logger

from .base import Operation, InapplicableOperationError

_UNSET = object()


class SetPropertyOperation(Operation):
    """
    Generic operation to set an attribute on the target with undo support.
    
    The previous value is captured on every apply, unless old_value is
    given explicitly.
    
    Example:
        # Change file rating
        history.execute(SetPropertyOperation("rating", 5))
        
        # Later: undo restores original rating
        history.undo()
    """
    
    def __init__(self, property_name: str, new_value: Any, old_value: Any = _UNSET):
        """
        Initialize property change operation.
        
        Args:
            property_name: Name of attribute to change
            new_value: New value to set
            old_value: Value restored on revert (auto-captured if omitted)
        """
        self.property_name = property_name
        self.new_value = new_value
        self._explicit_old = old_value is not _UNSET
        self.old_value = None if old_value is _UNSET else old_value
    
    @property
    def description(self) -> str:
        return f"Set {self.property_name} to {self.new_value!r}"
    
    def apply(self, target: Any) -> None:
        if not hasattr(target, self.property_name):
            raise InapplicableOperationError(
                f"{type(target).__name__} has no attribute '{self.property_name}'"
            )
        if not self._explicit_old:
            self.old_value = getattr(target, self.property_name)
        setattr(target, self.property_name, self.new_value)
    
    def revert(self, target: Any) -> None:
        if not hasattr(target, self.property_name):
            raise InapplicableOperationError(
                f"{type(target).__name__} has no attribute '{self.property_name}'"
            )
        setattr(target, self.property_name, self.old_value)


class CompositeOperation(Operation):
    """
    Groups multiple operations as a single history entry.
    
    All sub-operations apply together and revert together.
    Revert happens in reverse order of apply. If a sub-operation fails,
    the ones already applied are reverted before the error propagates.
    A rollback step that fails itself is logged and skipped, and the
    caller still receives the original error.
    
    Example:
        # Move file (rename + update path)
        composite = CompositeOperation([
            SetPropertyOperation("name", new_name),
            SetPropertyOperation("path", new_path),
        ], "Move file")
        history.execute(composite)
        
        # Single undo reverts both changes
        history.undo()
    """
    
    def __init__(self, operations: Sequence[Operation],
                 description: str = "Composite Operation"):
        """
        Initialize composite operation.
        
        Args:
            operations: Operations to apply together
            description: Description for this composite
        """
        self._operations: tuple = tuple(operations)
        self._description = description
    
    @property
    def description(self) -> str:
        return self._description
    
    @property
    def operations(self) -> tuple:
        return self._operations
    
    def apply(self, target: Any) -> None:
        """Apply all sub-operations in order."""
        applied: List[Operation] = []
        try:
            for op in self._operations:
                op.apply(target)
                applied.append(op)
        except Exception:
            logger.warning(f"{self._description}: rolling back {len(applied)} applied step(s)")
            for op in reversed(applied):
                self._compensate(op.revert, op, target)
            raise
    
    def revert(self, target: Any) -> None:
        """Revert all sub-operations in reverse order."""
        reverted: List[Operation] = []
        try:
            for op in reversed(self._operations):
                op.revert(target)
                reverted.append(op)
        except Exception:
            logger.warning(f"{self._description}: re-applying {len(reverted)} reverted step(s)")
            for op in reversed(reverted):
                self._compensate(op.apply, op, target)
            raise
    
    def _compensate(self, step, op: Operation, target: Any) -> None:
        """Run one rollback step; a failure is logged so the original error still propagates."""
        try:
            step(target)
        except Exception as e:
            logger.error(f"{self._description}: rollback of {op.description} failed: {e}")
