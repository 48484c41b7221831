"""
Template resolution.
Scans ``{NAME}`` placeholders and renders templates against a variable table.
"""

from .scanner import Part, PartKind, TemplateScanner
from .renderer import TemplateRenderer, env

__all__ = ['Part', 'PartKind', 'TemplateScanner', 'TemplateRenderer', 'env']
