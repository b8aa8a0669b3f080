"""Custom exceptions for story loading and parsing."""
from __future__ import annotations


class DataError(Exception):
    """Base exception for the data layer."""


class StoryLoadError(DataError):
    """Raised when a story file is missing, unreadable or not valid UTF-8."""


class ParseError(DataError):
    """Raised when a directive line is malformed."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}")


class UnknownDirectiveError(ParseError):
    """Raised for a `+` line whose keyword is not a known directive."""

    def __init__(self, keyword: str, **kwargs) -> None:
        self.keyword = keyword
        super().__init__(f"Unknown directive '+{keyword}'.", **kwargs)


class MissingInputNameError(ParseError):
    """Raised when `+INPUT:` has no variable name."""

    def __init__(self, **kwargs) -> None:
        super().__init__("INPUT directive requires a variable name.", **kwargs)


class InvalidInputNameError(ParseError):
    """Raised when the `+INPUT:` name is not a valid identifier."""

    def __init__(self, name: str, **kwargs) -> None:
        self.name = name
        super().__init__(f"'{name}' is not a valid variable name.", **kwargs)


class UnexpectedArgumentError(UnknownDirectiveError):
    """Raised when a known keyword is followed by text its grammar does not allow.

    `keyword` is the known keyword (`CLEAR`, `PAUSE`, `INPUT`) and `argument`
    the trailing text that made the line unrecognisable.
    """

    def __init__(self, keyword: str, argument: str, **kwargs) -> None:
        self.keyword = keyword
        self.argument = argument
        ParseError.__init__(self, f"Malformed directive '+{keyword} {argument}'.", **kwargs)
