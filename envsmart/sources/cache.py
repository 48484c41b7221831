"""Process-lifetime memoization of the merged variable table."""

import logging
import threading
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from envsmart.config import load_config
from .loader import VariableSourceLoader


logger = logging.getLogger(__name__)


class VariableCache:
    """
    Computes the variable table at most once and serves it forever after.

    The first caller runs ``load``; callers racing it block on the lock
    until it finishes. Success is frozen into a read-only mapping and the
    same object is handed to everyone. A load failure is remembered and
    the identical exception is raised to every later caller.
    """

    def __init__(self, load: Callable[[], Mapping[str, str]]):
        self._load = load
        self._lock = threading.Lock()
        self._loaded = False
        self._table: Mapping[str, str] = MappingProxyType({})
        self._error: Optional[Exception] = None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get(self) -> Mapping[str, str]:
        """
        Return the variable table, computing it on first use.

        Raises:
            ResolutionError: The cached load failure, if loading failed
            ConfigError: The cached configuration failure

        Any other exception raised by the loader is cached and re-raised the
        same way.
        """
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._compute()

        if self._error is not None:
            # Fresh traceback per caller on the shared exception object
            raise self._error.with_traceback(None)
        return self._table

    def _compute(self) -> None:
        logger.debug("Building variable table")
        try:
            self._table = MappingProxyType(dict(self._load()))
        except Exception as e:
            logger.debug(f"Variable table load failed: {e}")
            self._error = e
        # Published last so lock-free readers never see a partial state
        self._loaded = True


def _load_process_variables() -> Mapping[str, str]:
    config = load_config()
    return VariableSourceLoader(config.source_file).load()


_process_cache = VariableCache(_load_process_variables)


def process_cache() -> VariableCache:
    """Return the cache shared by every resolution in this process."""
    return _process_cache
