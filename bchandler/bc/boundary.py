"""
Boundary-condition record for finite-element solvers.

A `BoundaryCondition` is identified by a `BCId` (type and name) and holds the
indices of the geometric entities it applies to (nodes for Dirichlet
conditions, faces or edges for Neumann and Robin conditions) together with an
evaluator ``fun(t, coord)`` computing its value.

Ordering and equality only look at the identifier. Entities and evaluator
live in a separate payload and may be changed while the record is stored in
a sorted collection, since they never move it. Changing the identifier of a
stored record does move it, so `set_id` must be paired with removal and
reinsertion (see `BCSet.reidentify`).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Callable, Optional, Sequence, TextIO

import numpy as np

from ..evaluators import zero_function
from .ids import BCId, BCType, id_equal, id_less

BCFun = Callable[[float, np.ndarray], float]


def _empty_entities() -> np.ndarray:
    arr = np.empty(0, dtype=np.int64)
    arr.setflags(write=False)
    return arr


@dataclass
class _Payload:
    entities: np.ndarray = field(default_factory=_empty_entities)
    fun: BCFun = zero_function


def _normalize_name(name: Any) -> Any:
    # Integer names, numpy scalars included, are stored as plain ints.
    if isinstance(name, (int, np.integer)) and not isinstance(name, bool):
        return int(name)
    return name


def _check_callable(fun: Any) -> BCFun:
    if not callable(fun):
        raise TypeError(f"Boundary condition function must be callable, got {fun!r}.")
    return fun


@total_ordering
class BoundaryCondition:
    """
    A named boundary condition with its entities and evaluator.

    Args:
        bc_type: Kind of condition. Defaults to Dirichlet.
        name: Name within the type, a string or an integer.
        fun: Evaluator ``fun(t, coord) -> float``. Defaults to the zero
            function.

    Example:
        >>> bc = BoundaryCondition(BCType.DIRICHLET, "Wall")
        >>> bc.set_entities([3, 4, 7])
        >>> bc.apply(0.0, [1.0, 2.0])
        0.0
    """

    __slots__ = ("_id", "_payload")

    def __init__(
        self,
        bc_type: BCType = BCType.DIRICHLET,
        name: Any = "Homogeneous",
        fun: BCFun = zero_function,
    ) -> None:
        self._id = BCId(bc_type, _normalize_name(name))
        self._payload = _Payload(fun=_check_callable(fun))

    def get_id(self) -> BCId:
        """Return the identifier. `BCId` is immutable, so this is a snapshot."""
        return self._id

    def set_id(self, bcid: BCId) -> None:
        """
        Replace the identifier.

        Does not touch any container the record is stored in; the caller
        must remove the record first and reinsert it afterwards.
        """
        if not isinstance(bcid, BCId):
            raise TypeError(f"Expected a BCId, got {type(bcid).__name__}.")
        self._id = BCId(bcid.type, _normalize_name(bcid.name))

    @property
    def name(self) -> Any:
        return self._id.name

    @property
    def type(self) -> BCType:
        return self._id.type

    @property
    def fun(self) -> BCFun:
        return self._payload.fun

    def set_fun(self, fun: BCFun) -> None:
        """Replace the evaluator. Safe while the record is stored in a collection."""
        self._payload.fun = _check_callable(fun)

    def apply(self, t: float, coord: Sequence[float] | np.ndarray) -> float:
        """Evaluate the condition at time ``t`` and point ``coord``."""
        point = np.atleast_1d(np.asarray(coord, dtype=float))
        return float(self._payload.fun(float(t), point))

    def set_entities(self, entities: Sequence[int] | np.ndarray) -> None:
        """
        Replace the entity indices wholesale.

        Indices are stored as a read-only 1-D integer array. They are not
        checked against any mesh.

        Raises:
            ValueError: If ``entities`` is not 1-D or not integer valued.
        """
        arr = np.asarray(entities)
        if arr.ndim != 1:
            raise ValueError(
                f"Entities must be a 1-D sequence of indices, got shape {arr.shape}."
            )
        # An empty list comes through as float64.
        if arr.size == 0:
            self._payload.entities = _empty_entities()
            return
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Entities must be integers, got dtype {arr.dtype}.")
        arr = arr.astype(np.int64, copy=True)
        arr.setflags(write=False)
        self._payload.entities = arr

    @property
    def entities(self) -> np.ndarray:
        """Read-only array of entity indices."""
        return self._payload.entities

    def show(self, stream: Optional[TextIO] = None) -> None:
        """Write a short human-readable description to ``stream`` (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(f"Boundary condition {self._id.name!r}\n")
        stream.write(f"  type:     {self._id.type.name.capitalize()}\n")
        stream.write(f"  entities: {self._payload.entities.size}\n")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoundaryCondition):
            return NotImplemented
        return id_less(self._id, other._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryCondition):
            return NotImplemented
        return id_equal(self._id, other._id)

    def __hash__(self) -> int:
        return hash((self._id.type, self._id.name))

    def __repr__(self) -> str:
        return (
            f"BoundaryCondition({self._id.type.name}, {self._id.name!r}, "
            f"entities={self._payload.entities.size})"
        )


__all__ = ["BCFun", "BoundaryCondition"]
