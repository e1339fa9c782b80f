"""
History Command Pattern - Base Interfaces.

Provides:
- Operation: Reversible unit of work applied against a target
- OperationError: Base error raised by operations
- InapplicableOperationError: Target state does not allow apply/revert
"""
from abc import ABC, abstractmethod
from typing import Any


class OperationError(Exception):
    """Base exception raised by an Operation against its target."""
    pass


class InapplicableOperationError(OperationError):
    """
    Raised when the target's current state makes the forward or reverse
    effect impossible (e.g. the target was mutated out-of-band).
    """
    pass


class Operation(ABC):
    """
    Reversible operation executed through a HistoryEngine.
    
    The engine owns the target reference and passes it to apply/revert,
    so the same operation class can serve any target of the right shape.
    An operation must keep everything it needs to revert exactly what
    apply did, and apply must produce the same effect on every redo.
    
    Example:
        class RenameOperation(Operation):
            def __init__(self, old_name, new_name):
                self.old_name = old_name
                self.new_name = new_name
            
            @property
            def description(self) -> str:
                return f"Rename to {self.new_name}"
            
            def apply(self, target):
                target.name = self.new_name
            
            def revert(self, target):
                target.name = self.old_name
    """
    
    @property
    def description(self) -> str:
        """
        Human-readable description for UI display.
        
        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__
    
    @abstractmethod
    def apply(self, target: Any) -> None:
        """
        Perform the forward effect.
        
        Called on the initial execute and again on every redo.
        
        Raises:
            InapplicableOperationError: If the target cannot take the effect
        """
        pass
    
    @abstractmethod
    def revert(self, target: Any) -> None:
        """
        Reverse the most recent apply().
        
        Must restore the target to exactly the observable state it had
        immediately before that apply().
        
        Raises:
            InapplicableOperationError: If the target diverged since apply
        """
        pass
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.description}>"
