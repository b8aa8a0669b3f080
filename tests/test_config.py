import json
from pathlib import Path

import pytest

from storyscript.presentation.cli import config
from storyscript.presentation.cli.config import CliConfig


def test_load_config_missing_returns_defaults(tmp_path: Path) -> None:
    loaded = config.load_config(tmp_path / "missing.json")

    assert loaded == CliConfig()
    assert loaded.text_display_mode == "instant"
    assert loaded.undefined_variables == "empty"


def test_load_config_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert config.load_config(path) == CliConfig()


def test_load_config_non_dict_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert config.load_config(path) == CliConfig()


def test_unknown_values_fall_back_to_defaults() -> None:
    assert CliConfig.from_mapping({"text_display_mode": "fast", "undefined_variables": "loud"}) == CliConfig()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    written = config.save_config(CliConfig("typewriter", "placeholder"), path)

    assert written == path
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "text_display_mode": "typewriter",
        "undefined_variables": "placeholder",
    }
    assert config.load_config(path) == CliConfig("typewriter", "placeholder")


def test_with_overrides_applies_only_given_choices() -> None:
    base = CliConfig(text_display_mode="typewriter")

    assert base.with_overrides() == base
    assert base.with_overrides(text_display_mode="instant").text_display_mode == "instant"
    assert base.with_overrides(placeholders=True) == CliConfig("typewriter", "placeholder")


def test_config_path_posix(monkeypatch, tmp_path: Path) -> None:
    if config.os.name == "nt":
        pytest.skip("POSIX layout only")
    monkeypatch.setattr(config.Path, "home", lambda: tmp_path)

    assert config.get_config_path() == tmp_path / ".config" / "storyscript" / "config.json"
