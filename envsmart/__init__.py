"""
envsmart - resolve ``{NAME}`` templates against a ``.env`` file and the
process environment.
"""

from envsmart.exceptions import ErrorKind, ResolutionError
from envsmart.literal import env_literal
from envsmart.variables import TemplateRenderer, env

__version__ = "1.0.0"

__all__ = ['ErrorKind', 'ResolutionError', 'TemplateRenderer', 'env', 'env_literal']
