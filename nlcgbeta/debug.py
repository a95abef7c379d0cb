"""Debug switch for the beta-update strategies.

When enabled, :meth:`nlcgbeta.beta.BetaUpdate.update` logs a warning for every
non-finite beta it returns. The returned value is never altered, so turning
the switch on cannot change the path taken by an outer solver.

The initial state is read once from ``NLCGBETA_DEBUG`` at import time.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "NLCGBETA_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True if non-finite beta values are being reported."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn non-finite beta reporting on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state. Overrides whatever ``NLCGBETA_DEBUG`` selected at import.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch reporting to ``enabled`` for the duration of a ``with`` block.

    The previous state is restored on exit, also when the block raises, so
    contexts nest.

    Example
    -------
    >>> from nlcgbeta.beta import FletcherReeves
    >>> with debug_context(True):
    ...     beta = FletcherReeves().update([0.0], [1.0], [1.0])
    """
    global _debug_enabled
    saved = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = saved


__all__ = ["debug_context", "is_debug_enabled", "set_debug_enabled"]
