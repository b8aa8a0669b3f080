"""Helpers for resolving story file locations."""
from __future__ import annotations

from pathlib import Path

_DEFAULT_STORY_NAME = "entry.story"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_stories_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing bundled story files."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "stories"


def get_default_story_path(base_path: Path | str | None = None) -> Path:
    """Return the story played when none is given on the command line."""
    return get_stories_path(base_path) / _DEFAULT_STORY_NAME
