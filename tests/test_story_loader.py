from pathlib import Path

import pytest

from storyscript.data import StoryLoadError, UnknownDirectiveError, load_story
from storyscript.data import paths
from storyscript.domain.story import InputInstruction


def test_load_story_reads_and_parses(tmp_path: Path) -> None:
    story_file = tmp_path / "intro.story"
    story_file.write_text("Hello\n+INPUT: hero\n", encoding="utf-8")

    story = load_story(story_file)

    assert len(story) == 2
    assert story[1] == InputInstruction(variable_name="hero")
    assert story.source_name == str(story_file)


def test_load_story_tolerates_utf8_bom(tmp_path: Path) -> None:
    story_file = tmp_path / "bom.story"
    story_file.write_bytes("\ufeff+CLEAR\n".encode("utf-8"))

    assert len(load_story(story_file)) == 1


def test_load_story_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StoryLoadError, match="not found"):
        load_story(tmp_path / "missing.story")


def test_load_story_rejects_invalid_utf8(tmp_path: Path) -> None:
    story_file = tmp_path / "latin1.story"
    story_file.write_bytes("caf\xe9".encode("latin-1"))

    with pytest.raises(StoryLoadError, match="UTF-8"):
        load_story(story_file)


def test_load_story_propagates_parse_errors(tmp_path: Path) -> None:
    story_file = tmp_path / "bad.story"
    story_file.write_text("+JUMP\n", encoding="utf-8")

    with pytest.raises(UnknownDirectiveError):
        load_story(story_file)


def test_get_stories_path_base_path(tmp_path: Path) -> None:
    assert paths.get_stories_path(tmp_path) == tmp_path


def test_default_story_exists_and_parses() -> None:
    story_path = paths.get_default_story_path()
    assert story_path.name == "entry.story"
    assert story_path.exists()
    assert len(load_story(story_path)) > 0
