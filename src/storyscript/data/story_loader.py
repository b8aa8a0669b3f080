"""File helpers for reading `.story` sources."""
from __future__ import annotations

from pathlib import Path

from storyscript.data.errors import StoryLoadError
from storyscript.data.story_parser import parse
from storyscript.domain.story import Story


def read_story_text(path: Path) -> str:
    """Read a story file as UTF-8 and raise StoryLoadError on failure."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise StoryLoadError(f"Story file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise StoryLoadError(f"Story file is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise StoryLoadError(f"Unable to read story file: {path}") from exc


def load_story(path: Path | str) -> Story:
    """Read and parse a story file."""
    story_path = Path(path)
    return parse(read_story_text(story_path), source_name=str(story_path))
