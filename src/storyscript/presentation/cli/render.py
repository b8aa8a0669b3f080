"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import shutil
import sys
import textwrap
import time
from typing import Iterable, TextIO

from storyscript.core.types import TextDisplayMode

_CLEAR_SEQUENCE = "\033[2J\033[H"
_TYPEWRITER_DELAY_SECONDS = 0.02
_text_display_mode: TextDisplayMode = "instant"


def debug_enabled() -> bool:
    """Return True only when STORYSCRIPT_DEBUG is explicitly set to '1'."""
    return os.getenv("STORYSCRIPT_DEBUG") == "1"


def set_text_display_mode(mode: TextDisplayMode) -> None:
    global _text_display_mode
    _text_display_mode = "typewriter" if mode == "typewriter" else "instant"


def get_text_display_mode() -> TextDisplayMode:
    return _text_display_mode


def terminal_width(default: int = 80) -> int:
    return shutil.get_terminal_size((default, 24)).columns


def wrap_text(text: str, width: int) -> list[str]:
    """
    Wrap narrative text on word boundaries.

    Args:
        text: The text to wrap
        width: Maximum width per line

    Returns:
        List of wrapped lines. Empty or whitespace-only text is returned
        unchanged as a single line so blank story lines stay blank.
    """
    if not text.strip() or width <= 0:
        return [text]
    return textwrap.wrap(
        text,
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
        drop_whitespace=True,
    ) or [text]


def render_line(
    text: str,
    *,
    line_number: int | None = None,
    width: int | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print one resolved story line using the active display mode."""
    out = stream or sys.stdout
    if debug_enabled() and line_number is not None:
        out.write(f"[{line_number}] ")
    for wrapped in wrap_text(text, width if width is not None else terminal_width()):
        if _text_display_mode == "typewriter":
            _type_out(wrapped, out)
        else:
            out.write(wrapped)
        out.write("\n")
    out.flush()


def render_clear(stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(_CLEAR_SEQUENCE)
    out.flush()


def render_issues(lines: Iterable[str]) -> None:
    """Print bullet-prefixed report lines."""
    for line in lines:
        print(f"- {line}")


def _type_out(text: str, out: TextIO) -> None:
    for char in text:
        out.write(char)
        out.flush()
        time.sleep(_TYPEWRITER_DELAY_SECONDS)
