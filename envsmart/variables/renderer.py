"""
Template rendering.

Drives the scanner over a template and joins the parts. A template with no
placeholders is a bare variable name and is looked up in the live process
environment only, not in the merged table: a name defined solely by the
source file resolves as ``{NAME}`` but not as ``NAME``.
"""

import logging
import os
from typing import Mapping, Optional

from envsmart.exceptions import ErrorKind, MissingVariableError
from envsmart.sources.cache import VariableCache, process_cache
from .scanner import PartKind, TemplateScanner


logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Resolves templates against a cached variable table."""

    def __init__(
        self,
        cache: Optional[VariableCache] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the renderer.

        Args:
            cache: Variable table cache; the process-wide cache when omitted
            environ: Environment for bare-name lookups; live os.environ when omitted
        """
        self.cache = cache
        self.environ = environ

    def resolve(self, template: str) -> str:
        """
        Resolve a template against the cached variable table.

        Raises:
            ResolutionError: If the table cannot be loaded or the template
                cannot be resolved
        """
        cache = self.cache if self.cache is not None else process_cache()
        return self.render(template, cache.get())

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """
        Render a template against an explicit variable table.

        Args:
            template: Template text with ``{NAME}`` placeholders
            variables: Table placeholders are resolved against

        Returns:
            The fully resolved string

        Raises:
            TemplateSyntaxError: If the template is malformed
            MissingVariableError: If a placeholder or bare name has no value
        """
        output = []
        plain_count = 0
        argument_count = 0

        for part in TemplateScanner(template, variables):
            if part.kind == PartKind.ARGUMENT:
                argument_count += 1
            else:
                plain_count += 1
            output.append(part.text)

        rendered = ''.join(output)
        if argument_count:
            logger.debug(
                f"Rendered {plain_count} plain spans and {argument_count} placeholders"
            )
            return rendered

        return self._lookup_bare_name(rendered)

    def _lookup_bare_name(self, name: str) -> str:
        environ = os.environ if self.environ is None else self.environ
        value = environ.get(name)
        if value is None:
            raise MissingVariableError(ErrorKind.BARE_NAME_NOT_FOUND, name)
        logger.debug(f"Resolved bare name from environment: {name}")
        return value


_default_renderer = TemplateRenderer()


def env(template: str) -> str:
    """Resolve a template using the process-wide variable table."""
    return _default_renderer.resolve(template)
