"""Console entry point that plays a `.story` file in the terminal."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from storyscript.data import ParseError, StoryLoadError, get_default_story_path, load_story
from storyscript.domain.state import ExecutionState
from storyscript.domain.story import Story
from storyscript.presentation.cli.config import load_config, save_config
from storyscript.presentation.cli.render import render_issues, set_text_display_mode
from storyscript.presentation.cli.terminal import TerminalSurface
from storyscript.services import ExecutionEngine, check_story, format_issue

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_LOAD_ERROR = 2

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(verbose=args.verbose)

    options = load_config(args.config).with_overrides(
        text_display_mode=args.text_mode,
        placeholders=args.placeholders,
    )
    if args.remember:
        save_config(options, args.config)

    story_path = Path(args.story) if args.story else get_default_story_path()
    try:
        story = load_story(story_path)
    except StoryLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except ParseError as exc:
        print(f"Parse error in {story_path}: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.check:
        _report_check(story)
        return EXIT_OK

    set_text_display_mode(options.text_display_mode)
    surface = TerminalSurface()
    engine = ExecutionEngine(surface, undefined_policy=options.undefined_variables)
    try:
        _play(engine, surface, story)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
    return EXIT_OK


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storyscript", description="Play an interactive .story file.")
    parser.add_argument("story", nargs="?", help="Path to a .story file (defaults to the bundled entry story).")
    parser.add_argument("--check", action="store_true", help="Report variable issues without playing.")
    parser.add_argument("--text-mode", choices=("instant", "typewriter"), help="How narrative lines appear.")
    parser.add_argument(
        "--placeholders",
        action="store_true",
        help="Show undefined variables as $name instead of an empty string.",
    )
    parser.add_argument("--remember", action="store_true", help="Save the effective options as defaults.")
    parser.add_argument("--config", type=Path, default=None, help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.getenv("STORYSCRIPT_DEBUG") == "1" else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _report_check(story: Story) -> None:
    issues = check_story(story)
    print(f"{story.source_name}: {len(story)} line(s), {len(issues)} issue(s)")
    render_issues(format_issue(issue) for issue in issues)


def _play(engine: ExecutionEngine, surface: TerminalSurface, story: Story) -> ExecutionState:
    state = engine.start(story)
    surface.attach(state)
    engine.run(story, state=state)
    logger.debug("Finished %s with variables %s", story.source_name, sorted(state.variables))
    return state
