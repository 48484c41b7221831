"""
Variable source loading.

Reads ``NAME=VALUE`` records from the local source file and merges the
process environment into them. The file is authoritative: environment
entries only fill names the file does not define.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

from envsmart.exceptions import ErrorKind, SourceLoadError


logger = logging.getLogger(__name__)


def parse_source_lines(lines: Iterable[str], path: Union[str, Path] = ".env") -> Dict[str, str]:
    """
    Parse source file records into a table.

    Args:
        lines: Lines of the source file, with or without trailing newlines
        path: File the lines came from, for error reporting

    Returns:
        Mapping of every name defined by the lines to its value

    Raises:
        SourceLoadError: On a line without a value or a repeated name
    """
    table: Dict[str, str] = {}

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        stripped = line.strip()
        # Blank lines and comments carry no record
        if not stripped or stripped.startswith('#'):
            continue

        name, sep, value = line.partition('=')
        if not sep or not name:
            raise SourceLoadError(
                ErrorKind.SOURCE_MALFORMED_LINE, path,
                name=name, line_number=line_number
            )

        if name in table:
            raise SourceLoadError(
                ErrorKind.SOURCE_DUPLICATE_KEY, path,
                name=name, line_number=line_number
            )
        table[name] = value

    return table


class VariableSourceLoader:
    """Builds the merged variable table from a source file and an environment."""

    def __init__(
        self,
        path: Union[str, Path] = ".env",
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the loader.

        Args:
            path: Source file to read; a missing file is not an error
            environ: Environment to merge; the live os.environ when omitted
        """
        self.path = Path(path)
        self.environ = environ

    def read_source(self) -> Dict[str, str]:
        """Read and parse the source file, or return {} if it does not exist."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                table = parse_source_lines(f, self.path)
        except FileNotFoundError:
            logger.debug(f"Source file not found, using environment only: {self.path}")
            return {}
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(ErrorKind.SOURCE_READ_FAILURE, self.path, reason=str(e))

        logger.debug(f"Read {len(table)} variables from {self.path}")
        return table

    def load(self) -> Dict[str, str]:
        """
        Build the merged table.

        Returns:
            Source file records plus every environment variable the file
            does not define

        Raises:
            SourceLoadError: If the source file exists but cannot be used
        """
        table = self.read_source()
        environ = os.environ if self.environ is None else self.environ

        for name, value in environ.items():
            if name not in table:
                table[name] = value

        logger.debug(f"Merged variable table holds {len(table)} names")
        return table
