"""Data layer: loading and parsing story files."""

from .errors import (
    DataError,
    InvalidInputNameError,
    MissingInputNameError,
    ParseError,
    StoryLoadError,
    UnexpectedArgumentError,
    UnknownDirectiveError,
)
from .paths import get_default_story_path, get_repo_root, get_stories_path
from .story_loader import load_story
from .story_parser import parse

__all__ = [
    "DataError",
    "InvalidInputNameError",
    "MissingInputNameError",
    "ParseError",
    "StoryLoadError",
    "UnexpectedArgumentError",
    "UnknownDirectiveError",
    "get_default_story_path",
    "get_repo_root",
    "get_stories_path",
    "load_story",
    "parse",
]
