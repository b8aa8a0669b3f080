"""Display/input surface the execution engine drives."""
from __future__ import annotations

from typing import Protocol


class DisplaySurface(Protocol):
    """Capabilities a front end must provide.

    `display_text` and `clear_screen` are called by the engine while it
    advances. `request_input` and `await_keypress` are only used by the
    blocking `ExecutionEngine.run` driver; event-driven front ends resume the
    engine themselves instead.
    """

    def display_text(self, content: str) -> None: ...

    def clear_screen(self) -> None: ...

    def request_input(self) -> str: ...

    def await_keypress(self) -> None: ...
