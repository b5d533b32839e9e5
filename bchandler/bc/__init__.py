"""
Boundary-condition identifiers, records and collections.

The module provides:

* `BCType` and `BCId`: the ``(type, name)`` key of a boundary condition and
  its type-major, name-minor ordering (`IdLess`, `IdEqual`).
* `BoundaryCondition`: a keyed record holding entity indices and an
  evaluator ``fun(t, coord)``.
* `BCSet`: a sorted collection that never holds two equal identifiers.
* Predicates (`IsBCTypeEqual`, `IsBCNameEqual`) and the type-only ordering
  `compare_on_type`.

Example
-------
>>> from bchandler.bc import BCId, BCSet, BoundaryCondition, BCType, IsBCTypeEqual
>>> from bchandler.evaluators import constant
>>> bcs = BCSet([
...     BoundaryCondition(BCType.DIRICHLET, "Wall"),
...     BoundaryCondition(BCType.NEUMANN, "Inlet", constant(1.5)),
... ])
>>> bcs.count(IsBCTypeEqual(BCType.NEUMANN))
1
>>> bcs.find(BCId(BCType.NEUMANN, "Inlet")).apply(0.0, [0.0, 0.0])
1.5
"""

from .boundary import BCFun, BoundaryCondition
from .collection import BCSet
from .ids import BCId, BCType, IdEqual, IdLess, id_equal, id_less, make_bcid
from .predicates import (
    IsBCNameEqual,
    IsBCTypeEqual,
    Predicate,
    compare_on_type,
    count_if,
    find_if,
    partition,
    sort_on_type,
)

__all__ = [
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
    "Predicate",
    "IsBCTypeEqual",
    "IsBCNameEqual",
    "compare_on_type",
    "sort_on_type",
    "count_if",
    "find_if",
    "partition",
]
