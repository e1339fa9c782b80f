"""
Text Operations - Reversible edits on a TextBuffer.

Provides:
- InsertText: Insert (or type at the end) a run of text
- DeleteRange: Remove a span, restoring it on revert
- ReplaceRange: Swap a span for new text

Each operation remembers the buffer text its apply produced. Revert
refuses to run unless the buffer still holds exactly that text, so an
edit made outside the history is reported instead of corrupting the
buffer.
"""
from typing import Optional

from ..core.commands.base import Operation, InapplicableOperationError
from .buffer import TextBuffer


def _preview(text: str, limit: int = 20) -> str:
    if len(text) > limit:
        return repr(text[:limit] + "...")
    return repr(text)


def _check_unchanged(target: TextBuffer, after: Optional[str], description: str) -> None:
    if after is None:
        raise InapplicableOperationError("Revert called before apply")
    if target.text != after:
        raise InapplicableOperationError(
            f"Cannot revert {description}: buffer changed since it was applied"
        )


class InsertText(Operation):
    """
    Insert text at a position, or at the end of the buffer when position
    is None (typing).
    """

    def __init__(self, text: str, position: Optional[int] = None):
        if position is not None and position < 0:
            raise ValueError(f"position must be >= 0, got {position}")
        self._text = text
        self._position = position
        self._applied_at: Optional[int] = None
        self._after: Optional[str] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> Optional[int]:
        return self._position

    @property
    def description(self) -> str:
        if self._position is None:
            return f"Type {_preview(self._text)}"
        return f"Insert {_preview(self._text)} at {self._position}"

    def apply(self, target: TextBuffer) -> None:
        position = len(target) if self._position is None else self._position
        if position > len(target):
            raise InapplicableOperationError(
                f"Cannot insert at {position}: buffer has {len(target)} characters"
            )
        target.insert(position, self._text)
        self._applied_at = position
        self._after = target.text

    def revert(self, target: TextBuffer) -> None:
        _check_unchanged(target, self._after, self.description)
        start = self._applied_at
        target.delete(start, start + len(self._text))
        self._applied_at = None
        self._after = None


class DeleteRange(Operation):
    """Delete the span [start, end)."""

    def __init__(self, start: int, end: int):
        if not 0 <= start <= end:
            raise ValueError(f"Invalid range [{start}, {end})")
        self._start = start
        self._end = end
        self._removed: Optional[str] = None
        self._after: Optional[str] = None

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def removed(self) -> Optional[str]:
        """Text removed by the most recent apply, None while not applied."""
        return self._removed

    @property
    def description(self) -> str:
        return f"Delete [{self._start}, {self._end})"

    def apply(self, target: TextBuffer) -> None:
        if self._end > len(target):
            raise InapplicableOperationError(
                f"Cannot delete [{self._start}, {self._end}): buffer has {len(target)} characters"
            )
        self._removed = target.delete(self._start, self._end)
        self._after = target.text

    def revert(self, target: TextBuffer) -> None:
        _check_unchanged(target, self._after, self.description)
        target.insert(self._start, self._removed)
        self._removed = None
        self._after = None


class ReplaceRange(Operation):
    """Replace the span [start, end) with new text."""

    def __init__(self, start: int, end: int, text: str):
        if not 0 <= start <= end:
            raise ValueError(f"Invalid range [{start}, {end})")
        self._start = start
        self._end = end
        self._text = text
        self._replaced: Optional[str] = None
        self._after: Optional[str] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def description(self) -> str:
        return f"Replace [{self._start}, {self._end}) with {_preview(self._text)}"

    def apply(self, target: TextBuffer) -> None:
        if self._end > len(target):
            raise InapplicableOperationError(
                f"Cannot replace [{self._start}, {self._end}): buffer has {len(target)} characters"
            )
        self._replaced = target.delete(self._start, self._end)
        target.insert(self._start, self._text)
        self._after = target.text

    def revert(self, target: TextBuffer) -> None:
        _check_unchanged(target, self._after, self.description)
        target.delete(self._start, self._start + len(self._text))
        target.insert(self._start, self._replaced)
        self._replaced = None
        self._after = None
