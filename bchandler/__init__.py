"""bchandler - boundary-condition identity and storage for finite-element solvers."""

__version__ = "0.1.0"

from . import evaluators
from .bc import (
    BCFun,
    BCId,
    BCSet,
    BCType,
    BoundaryCondition,
    IdEqual,
    IdLess,
    IsBCNameEqual,
    IsBCTypeEqual,
    compare_on_type,
    count_if,
    find_if,
    id_equal,
    id_less,
    make_bcid,
    partition,
    sort_on_type,
)
from .diagnostics import (
    check_strict_weak_ordering,
    debug_context,
    is_debug_enabled,
    is_strict_weak_ordering,
    set_debug_enabled,
)
from .evaluators import constant, zero_function
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "evaluators",
    "BCType",
    "BCId",
    "make_bcid",
    "IdLess",
    "IdEqual",
    "id_less",
    "id_equal",
    "BCFun",
    "BoundaryCondition",
    "BCSet",
    "IsBCTypeEqual",
    "IsBCNameEqual",
    "compare_on_type",
    "sort_on_type",
    "count_if",
    "find_if",
    "partition",
    "zero_function",
    "constant",
    "check_strict_weak_ordering",
    "is_strict_weak_ordering",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
