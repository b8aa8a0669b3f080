"""Static variable-flow checks for parsed stories."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set

from storyscript.core.types import Severity
from storyscript.domain.story import InputInstruction, Story, TextInstruction, VariableRef


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: Dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def check_story(story: Story) -> list[Issue]:
    """Report references to never-assigned variables and inputs that are never shown.

    Issues come back in source order. Neither kind stops a story from running.
    """
    issues: list[Issue] = []
    assigned: Set[str] = set()
    input_lines: Dict[str, int] = {}
    referenced_after_input: Set[str] = set()
    reported_unassigned: Set[str] = set()

    for index, instruction in enumerate(story):
        line_number = index + 1
        if isinstance(instruction, InputInstruction):
            name = instruction.variable_name
            assigned.add(name)
            input_lines.setdefault(name, line_number)
            continue
        if not isinstance(instruction, TextInstruction):
            continue
        for segment in instruction.segments:
            if not isinstance(segment, VariableRef):
                continue
            if segment.name in assigned:
                referenced_after_input.add(segment.name)
                continue
            if segment.name in reported_unassigned:
                continue
            reported_unassigned.add(segment.name)
            issues.append(
                Issue(
                    severity="WARNING",
                    code="UNASSIGNED_VARIABLE",
                    message="Variable is referenced before any INPUT assigns it.",
                    context={"line": str(line_number), "name": segment.name},
                )
            )

    unused: List[Issue] = [
        Issue(
            severity="INFO",
            code="UNUSED_INPUT",
            message="Input is never displayed after it is collected.",
            context={"line": str(line_number), "name": name},
        )
        for name, line_number in input_lines.items()
        if name not in referenced_after_input
    ]
    issues.extend(unused)
    issues.sort(key=lambda issue: int(issue.context["line"]))
    return issues
