"""Terminal implementation of the display/input surface."""
from __future__ import annotations

from storyscript.domain.state import ExecutionState
from storyscript.presentation.cli.render import render_clear, render_line

INPUT_PROMPT = "> "
PAUSE_PROMPT = "[Press Enter to continue]"


class TerminalSurface:
    """Line-based console front end built on print/input."""

    def __init__(self) -> None:
        self._state: ExecutionState | None = None

    def attach(self, state: ExecutionState) -> None:
        """Track a run so debug output can show source line numbers."""
        self._state = state

    def display_text(self, content: str) -> None:
        line_number = self._state.cursor + 1 if self._state is not None else None
        render_line(content, line_number=line_number)

    def clear_screen(self) -> None:
        render_clear()

    def request_input(self) -> str:
        return input(INPUT_PROMPT)

    def await_keypress(self) -> None:
        input(PAUSE_PROMPT)
