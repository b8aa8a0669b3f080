"""Interpreter for the `.story` interactive text-adventure scripting language."""

from storyscript.data import ParseError, load_story, parse
from storyscript.services import ExecutionEngine, InvalidStateError

__all__ = ["ExecutionEngine", "InvalidStateError", "ParseError", "load_story", "parse"]
__version__ = "0.1.0"
