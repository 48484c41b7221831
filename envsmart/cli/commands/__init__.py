"""CLI command handlers."""

from .render import render_templates
from .vars import show_variables

__all__ = ['render_templates', 'show_variables']
