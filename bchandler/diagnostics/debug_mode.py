"""
Switch for the insertion-time ordering checks of `BCSet`.

A sorted collection only stays duplicate-free if the name ordering is a
strict weak ordering. That is a precondition and is not checked by default.
With debug mode on, every `BCSet.add` (and so every `BCSet.reidentify`)
tests the ordering against the neighbours of the insertion point and raises
``ValueError`` on the first inconsistency.

The initial state comes from the ``BCHANDLER_DEBUG`` environment variable;
any of ``1``, ``true``, ``yes`` or ``on`` (any case) enables it.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "BCHANDLER_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return True while collections verify the name ordering on insertion."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the insertion-time ordering checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state; overrides whatever ``BCHANDLER_DEBUG`` selected.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set the debug flag, restoring the previous state on exit.

    Example
    -------
    >>> from bchandler.bc import BCSet, BoundaryCondition, BCType
    >>> bcs = BCSet()
    >>> with debug_context(True):
    ...     bcs.add(BoundaryCondition(BCType.NEUMANN, "Inlet"))
    True
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
