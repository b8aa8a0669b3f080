"""Line-oriented parser turning `.story` text into a Story.

Each source line becomes exactly one instruction. A line whose first
non-whitespace character is ``+`` is a directive::

    +CLEAR
    +INPUT: hero
    +PAUSE

Every other line is narrative text. ``$name`` inside narrative text is an
interpolation marker, where ``name`` is an ASCII identifier
(``[A-Za-z_][A-Za-z0-9_]*``). A ``$`` not followed by an identifier start is
kept as a literal character, so ``Price: $5`` displays unchanged.
"""
from __future__ import annotations

import logging
import re
from typing import List

from storyscript.data.errors import (
    InvalidInputNameError,
    MissingInputNameError,
    UnexpectedArgumentError,
    UnknownDirectiveError,
)
from storyscript.domain.story import (
    ClearInstruction,
    InputInstruction,
    Instruction,
    LiteralSegment,
    PauseInstruction,
    Segment,
    Story,
    TextInstruction,
    VariableRef,
)

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = "+"
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INTERPOLATION_PATTERN = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")
_KEYWORD_PATTERN = re.compile(r"[^\s:]*")


def parse(source: str, *, source_name: str = "<string>") -> Story:
    """Parse story text, raising a ParseError subclass on the first malformed directive."""
    instructions: List[Instruction] = []
    for line_number, line in enumerate(split_lines(source), start=1):
        instructions.append(parse_line(line, line_number=line_number))
    logger.debug("Parsed %d instruction(s) from %s", len(instructions), source_name)
    return Story(instructions=tuple(instructions), source_name=source_name)


def split_lines(source: str) -> List[str]:
    """Split on LF, dropping a CR before it and the empty tail after a final newline."""
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_line(line: str, *, line_number: int | None = None) -> Instruction:
    """Classify a single source line."""
    stripped = line.lstrip()
    if stripped.startswith(DIRECTIVE_PREFIX):
        return _parse_directive(stripped[len(DIRECTIVE_PREFIX):], line, line_number)
    return TextInstruction(segments=segment_text(line))


def segment_text(text: str) -> tuple[Segment, ...]:
    """Split narrative text into literal and variable-reference segments."""
    if not text:
        return (LiteralSegment(""),)
    segments: List[Segment] = []
    position = 0
    for match in _INTERPOLATION_PATTERN.finditer(text):
        if match.start() > position:
            segments.append(LiteralSegment(text[position:match.start()]))
        segments.append(VariableRef(match.group(1)))
        position = match.end()
    if position < len(text):
        segments.append(LiteralSegment(text[position:]))
    return tuple(segments)


def is_identifier(name: str) -> bool:
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def _parse_directive(body: str, line: str, line_number: int | None) -> Instruction:
    context = {"line_number": line_number, "line": line}
    body = body.strip()
    keyword = _KEYWORD_PATTERN.match(body).group(0)
    rest = body[len(keyword):].strip()

    if keyword == "CLEAR":
        if rest:
            raise UnexpectedArgumentError(keyword, rest, **context)
        return ClearInstruction()
    if keyword == "PAUSE":
        if rest:
            raise UnexpectedArgumentError(keyword, rest, **context)
        return PauseInstruction()
    if keyword == "INPUT":
        if not rest:
            raise UnknownDirectiveError(keyword, **context)
        if not rest.startswith(":"):
            raise UnexpectedArgumentError(keyword, rest, **context)
        name = rest[1:].strip()
        if not name:
            raise MissingInputNameError(**context)
        if not is_identifier(name):
            raise InvalidInputNameError(name, **context)
        return InputInstruction(variable_name=name)
    raise UnknownDirectiveError(keyword, **context)
