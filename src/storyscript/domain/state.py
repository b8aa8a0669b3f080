"""Per-run execution state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set

from storyscript.core.types import RunStatus
from storyscript.domain.story import Story

VariableStore = Dict[str, str]


@dataclass
class ExecutionState:
    """Cursor, variables and status for a single run of a story.

    The story is borrowed read-only; everything else belongs to the run. A
    cursor equal to ``len(story)`` means the run has terminated.
    """

    story: Story
    cursor: int = 0
    variables: VariableStore = field(default_factory=dict)
    status: RunStatus = "running"
    pending_variable: str | None = None
    warned_undefined: Set[str] = field(default_factory=set)

    @property
    def is_terminated(self) -> bool:
        return self.status == "terminated"

    @property
    def is_suspended(self) -> bool:
        return self.status in ("awaiting_input", "awaiting_keypress")
