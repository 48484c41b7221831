"""
Placeholder scanner.

Splits a template into plain text runs and resolved ``{NAME}`` values, one
part per step. Doubled brackets are never an escape: ``{{`` and a
placeholder followed by ``}}`` are always rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Optional

from envsmart.exceptions import ErrorKind, MissingVariableError, TemplateSyntaxError


ARG_START = '{'
ARG_END = '}'


class PartKind(str, Enum):
    """Kinds of scanned parts."""
    PLAIN = "plain"
    ARGUMENT = "argument"


@dataclass(frozen=True)
class Part:
    """One scan step: a plain span of the template or a variable's value."""
    kind: PartKind
    text: str
    name: Optional[str] = None  # Set for arguments only


class TemplateScanner:
    """
    Lazy cursor over a template.

    Each step is a function of the cursor position, the template and the
    variable table only; neither input is modified. Once a step raises, the
    scanner must not be used further.

    Attributes:
        template: Template being scanned
        variables: Table placeholders are resolved against
        consumed: Characters consumed so far; error positions are offsets
            into the original template
    """

    def __init__(self, template: str, variables: Mapping[str, str]):
        self.template = template
        self.variables = variables
        self.consumed = 0

    def __iter__(self) -> Iterator[Part]:
        return self

    def __next__(self) -> Part:
        part = self.next_part()
        if part is None:
            raise StopIteration
        return part

    def next_part(self) -> Optional[Part]:
        """
        Advance one step.

        Returns:
            The next Part, or None once the template is exhausted

        Raises:
            TemplateSyntaxError: On ``{{``, ``}}`` after a placeholder, or an
                unterminated placeholder
            MissingVariableError: If a placeholder names an undefined variable
        """
        template = self.template
        start = self.consumed

        if start >= len(template):
            return None

        if template[start] == ARG_START:
            return self._scan_argument(start)

        end = template.find(ARG_START, start)
        if end == -1:
            end = len(template)
        self.consumed = end
        return Part(PartKind.PLAIN, template[start:end])

    def _scan_argument(self, start: int) -> Part:
        template = self.template

        if template.startswith(ARG_START, start + 1):
            raise TemplateSyntaxError(ErrorKind.BRACKET_ESCAPE_INVALID, start + 1)

        end = template.find(ARG_END, start + 1)
        if end == -1:
            raise TemplateSyntaxError(ErrorKind.MISSING_CLOSING_BRACKET, start)

        name = template[start + 1:end]
        if name not in self.variables:
            raise MissingVariableError(ErrorKind.MISSING_VALUE, name)

        if template.startswith(ARG_END, end + 1):
            raise TemplateSyntaxError(ErrorKind.BRACKET_ESCAPE_INVALID, start + len(name) + 1)

        self.consumed = start + len(name) + 2
        return Part(PartKind.ARGUMENT, self.variables[name], name)
