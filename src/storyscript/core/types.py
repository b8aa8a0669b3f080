"""Shared type aliases for the core and domain layers."""
from typing import Literal

RunStatus = Literal["running", "awaiting_input", "awaiting_keypress", "terminated"]
UndefinedPolicy = Literal["empty", "placeholder"]
TextDisplayMode = Literal["instant", "typewriter"]
Severity = Literal["WARNING", "INFO"]

__all__ = ["RunStatus", "Severity", "TextDisplayMode", "UndefinedPolicy"]
