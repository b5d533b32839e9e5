"""Diagnostics and debugging utilities for bchandler."""

from .core import (
    check_neighbours,
    check_strict_weak_ordering,
    is_strict_weak_ordering,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_neighbours",
    "check_strict_weak_ordering",
    "is_strict_weak_ordering",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
