"""envsmart exceptions."""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Every way a resolution can fail."""
    SOURCE_READ_FAILURE = "source_read_failure"
    SOURCE_MALFORMED_LINE = "source_malformed_line"
    SOURCE_DUPLICATE_KEY = "source_duplicate_key"
    MISSING_CLOSING_BRACKET = "missing_closing_bracket"
    BRACKET_ESCAPE_INVALID = "bracket_escape_invalid"
    MISSING_VALUE = "missing_value"
    BARE_NAME_NOT_FOUND = "bare_name_not_found"
    INPUT_NOT_STRING_LITERAL = "input_not_string_literal"
    MISSING_INPUT = "missing_input"


class ResolutionError(Exception):
    """Raised when a template cannot be resolved.

    Every kind is terminal for the resolution that raised it. The message
    is the diagnostic shown to the user, built from the kind and whichever
    of ``name``, ``position`` or ``reason`` applies.
    """

    exit_code = 2

    def __init__(
        self,
        kind: ErrorKind,
        name: Optional[str] = None,
        position: Optional[int] = None,
        reason: Optional[str] = None
    ):
        self.kind = kind
        self.name = name
        self.position = position
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        kind = self.kind
        if kind == ErrorKind.MISSING_VALUE:
            return f"env:{self.name}: missing value"
        if kind == ErrorKind.BARE_NAME_NOT_FOUND:
            return f"env:{self.name}: Cannot fetch env value"
        if kind == ErrorKind.MISSING_CLOSING_BRACKET:
            return f"Missing bracket at position {self.position}"
        if kind == ErrorKind.BRACKET_ESCAPE_INVALID:
            return f"Unsupported bracket escape at position {self.position}"
        if kind == ErrorKind.SOURCE_MALFORMED_LINE:
            return f".env file has '{self.name}' without value"
        if kind == ErrorKind.SOURCE_DUPLICATE_KEY:
            return f".env file has multiple instances of '{self.name}'"
        if kind == ErrorKind.SOURCE_READ_FAILURE:
            return f".env: Cannot open: {self.reason}"
        if kind == ErrorKind.INPUT_NOT_STRING_LITERAL:
            return f"Expected string literal, got {self.reason}"
        if kind == ErrorKind.MISSING_INPUT:
            return "Missing input string"
        return kind.value


class SourceLoadError(ResolutionError):
    """Raised when the variable source file cannot be read or parsed."""

    def __init__(
        self,
        kind: ErrorKind,
        path: Union[str, Path],
        name: Optional[str] = None,
        line_number: Optional[int] = None,
        reason: Optional[str] = None
    ):
        self.path = Path(path)
        self.line_number = line_number
        super().__init__(kind, name=name, reason=reason)


class TemplateSyntaxError(ResolutionError):
    """Raised for unterminated placeholders and doubled brackets."""

    def __init__(self, kind: ErrorKind, position: int):
        super().__init__(kind, position=position)


class MissingVariableError(ResolutionError):
    """Raised when a placeholder or bare name has no value."""

    def __init__(self, kind: ErrorKind, name: str):
        super().__init__(kind, name=name)


class InvalidInputError(ResolutionError):
    """Raised when the literal argument is absent or not a quoted string."""

    def __init__(self, kind: ErrorKind, token: Optional[str] = None):
        self.token = token
        super().__init__(kind, reason=token)


class ConfigError(ValueError):
    """Raised when the envsmart configuration file is invalid."""
    exit_code = 2
