"""
Text editing support: a mutable TextBuffer target and the reversible
operations that edit it.
"""
from .buffer import TextBuffer
from .operations import InsertText, DeleteRange, ReplaceRange

__all__ = ["TextBuffer", "InsertText", "DeleteRange", "ReplaceRange"]
