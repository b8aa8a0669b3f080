"""Persisted player options for the terminal front end."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Mapping

from storyscript.core.types import TextDisplayMode, UndefinedPolicy

_APP_DIR_NAME = "StoryScript"


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Options that survive between sessions; unknown values fall back to defaults."""

    text_display_mode: TextDisplayMode = "instant"
    undefined_variables: UndefinedPolicy = "empty"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "CliConfig":
        text_mode = raw.get("text_display_mode")
        undefined = raw.get("undefined_variables")
        return cls(
            text_display_mode="typewriter" if text_mode == "typewriter" else "instant",
            undefined_variables="placeholder" if undefined == "placeholder" else "empty",
        )

    def with_overrides(
        self,
        *,
        text_display_mode: TextDisplayMode | None = None,
        placeholders: bool = False,
    ) -> "CliConfig":
        """Return a copy with command-line choices applied on top."""
        updated = self
        if text_display_mode is not None:
            updated = replace(updated, text_display_mode=text_display_mode)
        if placeholders:
            updated = replace(updated, undefined_variables="placeholder")
        return updated


def get_config_path() -> Path:
    """Return ~/.config/storyscript/config.json, or %APPDATA%\\StoryScript\\config.json on Windows."""
    if os.name == "nt":
        root = Path(os.environ.get("APPDATA") or Path.home()) / _APP_DIR_NAME
    else:
        root = Path.home() / ".config" / _APP_DIR_NAME.lower()
    return root / "config.json"


def load_config(path: Path | None = None) -> CliConfig:
    """Read options from disk; a missing, unreadable or malformed file yields defaults."""
    try:
        raw = json.loads((path or get_config_path()).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return CliConfig()
    return CliConfig.from_mapping(raw) if isinstance(raw, dict) else CliConfig()


def save_config(config: CliConfig, path: Path | None = None) -> Path:
    """Write options as JSON and return the file written."""
    target = path or get_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(asdict(config), indent=2, sort_keys=True), encoding="utf-8")
    return target
