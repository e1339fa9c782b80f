"""
TextBuffer - Mutable text target for text operations.
"""
from loguru import logger


class TextBuffer:
    """
    In-memory text buffer.

    Positions are character offsets; ``end`` bounds are exclusive.
    Out-of-range positions raise IndexError instead of being clamped.
    """

    def __init__(self, text: str = ""):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        return NotImplemented

    def _check_span(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise IndexError(
                f"Span [{start}, {end}) out of range for buffer of length {len(self._text)}"
            )

    def slice(self, start: int, end: int) -> str:
        self._check_span(start, end)
        return self._text[start:end]

    def insert(self, position: int, text: str) -> None:
        self._check_span(position, position)
        self._text = self._text[:position] + text + self._text[position:]
        logger.trace(f"Current text: {self._text!r}")

    def append(self, text: str) -> None:
        self.insert(len(self._text), text)

    def delete(self, start: int, end: int) -> str:
        """Remove [start, end) and return the removed text."""
        self._check_span(start, end)
        removed = self._text[start:end]
        self._text = self._text[:start] + self._text[end:]
        logger.trace(f"Current text after delete: {self._text!r}")
        return removed

    def reset(self, text: str = "") -> None:
        """Replace the whole content (host-side, outside any history)."""
        self._text = text
