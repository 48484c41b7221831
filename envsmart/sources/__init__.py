"""
Variable sources.
Builds the merged variable table from the source file and the process
environment, and memoizes it for the lifetime of the process.
"""

from .loader import VariableSourceLoader, parse_source_lines
from .cache import VariableCache, process_cache

__all__ = ['VariableSourceLoader', 'parse_source_lines', 'VariableCache', 'process_cache']
