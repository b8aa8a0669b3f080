"""Tests for CLI rendering utilities."""
import io

from storyscript.presentation.cli import render
from storyscript.presentation.cli.render import render_clear, render_line, set_text_display_mode, wrap_text


def test_wrap_text_short_text() -> None:
    """Short text should not be wrapped."""
    assert wrap_text("Hello world", width=50) == ["Hello world"]


def test_wrap_text_long_text_wraps() -> None:
    """Long text should wrap at word boundaries."""
    text = "This is a very long line that definitely needs to be wrapped because it exceeds the width"
    result = wrap_text(text, width=40)

    assert len(result) > 1
    for line in result:
        assert len(line) <= 40
    assert " ".join(result) == text


def test_wrap_text_blank_lines_stay_blank() -> None:
    assert wrap_text("", width=50) == [""]
    assert wrap_text("   ", width=50) == ["   "]


def test_render_line_instant(monkeypatch) -> None:
    monkeypatch.delenv("STORYSCRIPT_DEBUG", raising=False)
    set_text_display_mode("instant")
    out = io.StringIO()

    render_line("Hello, Rin", line_number=3, width=80, stream=out)

    assert out.getvalue() == "Hello, Rin\n"


def test_render_line_debug_prefix(monkeypatch) -> None:
    monkeypatch.setenv("STORYSCRIPT_DEBUG", "1")
    set_text_display_mode("instant")
    out = io.StringIO()

    render_line("Hello", line_number=7, width=80, stream=out)

    assert out.getvalue() == "[7] Hello\n"


def test_render_line_typewriter_reveals_each_character(monkeypatch) -> None:
    monkeypatch.delenv("STORYSCRIPT_DEBUG", raising=False)
    sleeps: list[float] = []
    monkeypatch.setattr(render.time, "sleep", sleeps.append)
    set_text_display_mode("typewriter")
    out = io.StringIO()
    try:
        render_line("Hey", width=80, stream=out)
    finally:
        set_text_display_mode("instant")

    assert out.getvalue() == "Hey\n"
    assert len(sleeps) == 3


def test_set_text_display_mode_normalizes_unknown() -> None:
    set_text_display_mode("bogus")  # type: ignore[arg-type]
    assert render.get_text_display_mode() == "instant"


def test_render_clear_writes_ansi_sequence() -> None:
    out = io.StringIO()
    render_clear(stream=out)
    assert out.getvalue() == "\033[2J\033[H"
