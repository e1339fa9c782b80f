"""Replays the typing demo: two inserts, an undo and a redo."""
import sys

from cmdhistory.core.bootstrap import HistoryBuilder
from cmdhistory.core.logging import setup_logging
from cmdhistory.text import TextBuffer, InsertText


def main(argv=None) -> int:
    verbose = "-v" in (sys.argv[1:] if argv is None else argv)
    setup_logging(debug_mode=verbose, log_dir=None)

    buffer = TextBuffer()
    history = HistoryBuilder(buffer).build()

    print("--- 1. Type ---")
    history.execute(InsertText("Hello"))
    print(f"Current Text: {buffer.text}")
    history.execute(InsertText(" World!"))
    print(f"Current Text: {buffer.text}")

    print("--- 2. Undo ---")
    history.undo()
    print(f"Current Text after undo: {buffer.text}")

    print("--- 3. Redo ---")
    history.redo()
    print(f"Current Text after redo: {buffer.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
