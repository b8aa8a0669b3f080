"""Parsed story structures consumed by the execution engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Plain text copied to the display as-is."""

    value: str


@dataclass(frozen=True, slots=True)
class VariableRef:
    """A `$name` marker resolved against the variable store at display time."""

    name: str


Segment = Union[LiteralSegment, VariableRef]


@dataclass(frozen=True, slots=True)
class TextInstruction:
    """One line of narrative prose."""

    segments: Tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class ClearInstruction:
    """Clear everything displayed so far."""


@dataclass(frozen=True, slots=True)
class InputInstruction:
    """Capture a line of player input into `variable_name`."""

    variable_name: str


@dataclass(frozen=True, slots=True)
class PauseInstruction:
    """Wait for the player to acknowledge before continuing."""


Instruction = Union[TextInstruction, ClearInstruction, InputInstruction, PauseInstruction]


@dataclass(frozen=True, slots=True)
class Story:
    """Immutable, ordered instruction sequence; index i comes from source line i + 1."""

    instructions: Tuple[Instruction, ...] = ()
    source_name: str = "<string>"

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)
