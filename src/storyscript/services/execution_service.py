"""Execution engine that walks a parsed story."""
from __future__ import annotations

import logging
from typing import Iterable

from storyscript.core.types import RunStatus, UndefinedPolicy
from storyscript.domain.state import ExecutionState
from storyscript.domain.story import (
    ClearInstruction,
    InputInstruction,
    LiteralSegment,
    PauseInstruction,
    Segment,
    Story,
    TextInstruction,
    VariableRef,
)
from storyscript.services.errors import InvalidStateError
from storyscript.services.surface import DisplaySurface

logger = logging.getLogger(__name__)

_UNDEFINED_POLICIES = ("empty", "placeholder")


class ExecutionEngine:
    """Pull-based state machine over a story.

    The engine never blocks. `advance` executes instructions until the run
    suspends on ``+INPUT``/``+PAUSE`` or reaches the end; the caller then
    resumes with `supply_input` or `acknowledge_keypress`. All per-run data
    lives in the `ExecutionState` passed to each call, so one engine can serve
    any number of independent runs.

    Resuming a terminated run, or resuming with the wrong kind of response,
    raises `InvalidStateError` and leaves the state untouched. Calling
    `advance` on a suspended or terminated run is a no-op.
    """

    def __init__(self, surface: DisplaySurface, *, undefined_policy: UndefinedPolicy = "empty") -> None:
        if undefined_policy not in _UNDEFINED_POLICIES:
            raise ValueError(f"Unknown undefined-variable policy '{undefined_policy}'.")
        self._surface = surface
        self._undefined_policy = undefined_policy

    @property
    def undefined_policy(self) -> UndefinedPolicy:
        return self._undefined_policy

    def start(self, story: Story) -> ExecutionState:
        """Create a fresh run positioned at the first instruction."""
        return ExecutionState(story=story)

    def advance(self, state: ExecutionState) -> RunStatus:
        """Execute instructions until the run suspends or terminates."""
        if state.status != "running":
            return state.status
        story = state.story
        while state.cursor < len(story):
            instruction = story[state.cursor]
            if isinstance(instruction, InputInstruction):
                state.status = "awaiting_input"
                state.pending_variable = instruction.variable_name
                logger.debug("Awaiting input for '%s' at index %d", instruction.variable_name, state.cursor)
                return state.status
            if isinstance(instruction, PauseInstruction):
                state.status = "awaiting_keypress"
                logger.debug("Awaiting keypress at index %d", state.cursor)
                return state.status
            if isinstance(instruction, TextInstruction):
                self._surface.display_text(self.resolve_text(state, instruction.segments))
            elif isinstance(instruction, ClearInstruction):
                self._surface.clear_screen()
            else:
                raise TypeError(f"Unsupported instruction: {instruction!r}")
            state.cursor += 1
        state.status = "terminated"
        logger.debug("Run of %s terminated", story.source_name)
        return state.status

    def supply_input(self, state: ExecutionState, value: str) -> RunStatus:
        """Store the player's input for the pending ``+INPUT`` and continue."""
        if state.status != "awaiting_input" or state.pending_variable is None:
            raise InvalidStateError(f"Cannot supply input while run is {state.status}.")
        state.variables[state.pending_variable] = value
        state.pending_variable = None
        self._resume(state)
        return self.advance(state)

    def acknowledge_keypress(self, state: ExecutionState) -> RunStatus:
        """Release a pending ``+PAUSE`` and continue."""
        if state.status != "awaiting_keypress":
            raise InvalidStateError(f"Cannot acknowledge a keypress while run is {state.status}.")
        self._resume(state)
        return self.advance(state)

    def run(self, story: Story, *, state: ExecutionState | None = None) -> ExecutionState:
        """Drive a story to the end using the surface's blocking input calls.

        Pass `state` to continue a run created with `start` (or one that is
        already suspended); it must belong to `story`.
        """
        if state is None:
            state = self.start(story)
        elif state.story is not story:
            raise ValueError("ExecutionState belongs to a different story.")
        status = self.advance(state)
        while status != "terminated":
            if status == "awaiting_input":
                status = self.supply_input(state, self._surface.request_input())
            else:
                self._surface.await_keypress()
                status = self.acknowledge_keypress(state)
        return state

    def resolve_text(self, state: ExecutionState, segments: Iterable[Segment]) -> str:
        """Concatenate segments, substituting variables from the run's store."""
        parts = []
        for segment in segments:
            if isinstance(segment, LiteralSegment):
                parts.append(segment.value)
            elif isinstance(segment, VariableRef):
                parts.append(self._resolve_variable(state, segment.name))
            else:
                raise TypeError(f"Unsupported segment: {segment!r}")
        return "".join(parts)

    def _resolve_variable(self, state: ExecutionState, name: str) -> str:
        try:
            return state.variables[name]
        except KeyError:
            pass
        if name not in state.warned_undefined:
            state.warned_undefined.add(name)
            logger.warning("Variable '%s' is not defined; using %s policy", name, self._undefined_policy)
        if self._undefined_policy == "placeholder":
            return f"${name}"
        return ""

    @staticmethod
    def _resume(state: ExecutionState) -> None:
        state.cursor += 1
        state.status = "running"
