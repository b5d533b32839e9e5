"""
Boundary-condition identifiers and their ordering.

A `BCId` pairs a `BCType` with a user-chosen name, e.g. ``(DIRICHLET,
"Wall")``. Identifiers are ordered lexicographically with the type first, so
that all conditions of one type are adjacent in a sorted collection. Equality
is derived from the ordering: two identifiers are equal when neither precedes
the other.

Names can be any type with a strict ``<`` (usually ``str`` or ``int``). A
custom name comparison can be supplied through `IdLess`; it must be a strict
weak ordering, otherwise sorted collections silently lose their uniqueness
guarantee.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Generic, Hashable, TypeVar

NameT = TypeVar("NameT", bound=Hashable)

NameLess = Callable[[Any, Any], bool]


class BCType(IntEnum):
    """Kind of boundary condition, in ordering precedence."""

    DIRICHLET = 0
    NEUMANN = 1
    ROBIN = 2
    GENERIC = 3
    OTHER = 4


@dataclass(frozen=True)
class BCId(Generic[NameT]):
    """
    Immutable ``(type, name)`` key of a boundary condition.

    ``==`` and ``hash`` on a `BCId` are structural (field by field). They
    agree with `id_equal` for the default ordering on well-behaved names
    (strings, integers). Collections never use them: `BCSet` compares
    identifiers only through its `IdLess`, so a custom name ordering (or a
    NaN name) is honoured there even where ``==`` would differ.

    Attributes:
        type: Category of the condition.
        name: User-chosen name, unique within the owning collection.
    """

    type: BCType
    name: NameT

    def __post_init__(self) -> None:
        if not isinstance(self.type, BCType):
            raise TypeError(
                f"BCId type must be a BCType, got {type(self.type).__name__}."
            )

    def __str__(self) -> str:
        return f"{self.type.name.capitalize()}:{self.name}"


def make_bcid(bc_type: BCType, name: NameT) -> BCId[NameT]:
    """Build a `BCId` from a type and a name."""
    return BCId(bc_type, name)


class IdLess:
    """
    Strict weak ordering on `BCId`: type first, then name.

    Parameters
    ----------
    name_less:
        Strict less-than on names. Defaults to ``operator.lt``.

    Example
    -------
    >>> less = IdLess()
    >>> less(BCId(BCType.DIRICHLET, "Wall"), BCId(BCType.NEUMANN, "Inlet"))
    True
    """

    def __init__(self, name_less: NameLess = operator.lt) -> None:
        self.name_less = name_less

    def __call__(self, a: BCId, b: BCId) -> bool:
        if a.type < b.type:
            return True
        if b.type < a.type:
            return False
        return bool(self.name_less(a.name, b.name))

    def __repr__(self) -> str:
        return f"IdLess(name_less={self.name_less!r})"


class IdEqual:
    """Equality derived from an `IdLess`: neither identifier precedes the other."""

    def __init__(self, less: IdLess | None = None) -> None:
        self.less = less if less is not None else IdLess()

    def __call__(self, a: BCId, b: BCId) -> bool:
        return not self.less(a, b) and not self.less(b, a)


id_less = IdLess()
id_equal = IdEqual(id_less)


__all__ = [
    "BCType",
    "BCId",
    "make_bcid",
    "IdLess",
    "IdEqual",
    "id_less",
    "id_equal",
]
