"""
String literal handling around template resolution.

The template arrives as the raw text of a quoted literal and the result
leaves as one. Only a double-quoted literal is accepted as input.
"""

from typing import Optional, Sequence

from envsmart.exceptions import ErrorKind, InvalidInputError
from envsmart.variables.renderer import TemplateRenderer, env


QUOTE = '"'


def parse_literal_argument(tokens: Sequence[str]) -> str:
    """
    Extract the template from the first argument token.

    Args:
        tokens: Raw argument tokens; the first must be a double-quoted literal

    Returns:
        The literal's text without its quotes

    Raises:
        InvalidInputError: If there is no token or the first one is not a
            double-quoted string literal
    """
    if not tokens:
        raise InvalidInputError(ErrorKind.MISSING_INPUT)

    token = tokens[0]
    text = token.strip(QUOTE)
    if not token.startswith(QUOTE) or len(text) + 2 != len(token):
        raise InvalidInputError(ErrorKind.INPUT_NOT_STRING_LITERAL, token)
    return text


def emit_literal(value: str) -> str:
    """Quote a resolved string as a double-quoted literal."""
    escaped = value.replace('\\', '\\\\').replace(QUOTE, '\\' + QUOTE)
    return f'{QUOTE}{escaped}{QUOTE}'


def env_literal(tokens: Sequence[str], renderer: Optional[TemplateRenderer] = None) -> str:
    """Resolve the template held in ``tokens`` and return it as a literal."""
    template = parse_literal_argument(tokens)
    value = renderer.resolve(template) if renderer is not None else env(template)
    return emit_literal(value)
