"""Service layer exports."""

from .errors import InvalidStateError
from .execution_service import ExecutionEngine
from .story_checker import Issue, check_story, format_issue
from .surface import DisplaySurface

__all__ = [
    "DisplaySurface",
    "ExecutionEngine",
    "InvalidStateError",
    "Issue",
    "check_story",
    "format_issue",
]
