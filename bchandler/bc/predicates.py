"""
Predicates and helpers for searching collections of boundary conditions.

`IsBCTypeEqual` and `IsBCNameEqual` test a single record and are meant to be
passed to `count_if`, `find_if`, `partition`, `filter` or `BCSet.count`.

`compare_on_type` orders records by type alone. It is NOT the ordering used
by `BCSet`, which also orders by name; records with the same type are
equivalent under `compare_on_type` even when their names differ.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Tuple

from .boundary import BoundaryCondition
from .ids import BCType

Predicate = Callable[[BoundaryCondition], bool]


class IsBCTypeEqual:
    """True for records of the given type."""

    def __init__(self, bc_type: BCType) -> None:
        self.bc_type = bc_type

    def __call__(self, bc: BoundaryCondition) -> bool:
        return bc.type == self.bc_type

    def __repr__(self) -> str:
        return f"IsBCTypeEqual({self.bc_type.name})"


class IsBCNameEqual:
    """True for records with the given name, whatever their type."""

    def __init__(self, name: Any) -> None:
        self.name = name

    def __call__(self, bc: BoundaryCondition) -> bool:
        return bc.name == self.name

    def __repr__(self) -> str:
        return f"IsBCNameEqual({self.name!r})"


def compare_on_type(a: BoundaryCondition, b: BoundaryCondition) -> bool:
    """Strict weak ordering on the type only: True if ``a``'s type precedes ``b``'s."""
    return a.type < b.type


def sort_on_type(bcs: Iterable[BoundaryCondition]) -> List[BoundaryCondition]:
    """Return the records grouped by type; the sort is stable within a type."""
    return sorted(bcs, key=lambda bc: bc.type)


def count_if(bcs: Iterable[BoundaryCondition], predicate: Predicate) -> int:
    """Number of records satisfying ``predicate``."""
    return sum(1 for bc in bcs if predicate(bc))


def find_if(
    bcs: Iterable[BoundaryCondition], predicate: Predicate
) -> Optional[BoundaryCondition]:
    """First record satisfying ``predicate``, or None."""
    for bc in bcs:
        if predicate(bc):
            return bc
    return None


def partition(
    bcs: Iterable[BoundaryCondition], predicate: Predicate
) -> Tuple[List[BoundaryCondition], List[BoundaryCondition]]:
    """
    Split records into those satisfying ``predicate`` and the rest.

    Relative order is preserved in both lists.
    """
    matched: List[BoundaryCondition] = []
    rest: List[BoundaryCondition] = []
    for bc in bcs:
        (matched if predicate(bc) else rest).append(bc)
    return matched, rest


__all__ = [
    "Predicate",
    "IsBCTypeEqual",
    "IsBCNameEqual",
    "compare_on_type",
    "sort_on_type",
    "count_if",
    "find_if",
    "partition",
]
