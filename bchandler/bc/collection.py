"""
Sorted, duplicate-free collection of boundary conditions.

`BCSet` keeps its records ordered by an explicit identifier comparator (an
`IdLess`, type first then name). Because all records of a type are adjacent,
``of_type`` finds them by binary search instead of a full pass.

Inserting a record whose identifier is equal to a stored one leaves the
collection unchanged and returns False; it is not an error. Entities and
evaluators of stored records may be changed freely. Identifiers must only be
changed through `BCSet.reidentify`.

Example
-------
>>> from bchandler.bc import BCSet, BoundaryCondition, BCType
>>> bcs = BCSet()
>>> bcs.add(BoundaryCondition(BCType.DIRICHLET, "Wall"))
True
>>> bcs.add(BoundaryCondition(BCType.NEUMANN, "Inlet"))
True
>>> bcs.add(BoundaryCondition(BCType.DIRICHLET, "Floor"))
True
>>> [bc.name for bc in bcs]
['Floor', 'Wall', 'Inlet']
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Union

from ..diagnostics import check_neighbours, is_debug_enabled
from ..logging import get_logger
from .boundary import BoundaryCondition
from .ids import BCId, BCType, IdLess, id_less
from .predicates import Predicate

logger = get_logger(__name__)

Key = Union[BoundaryCondition, BCId]


def _as_id(key: Key) -> BCId:
    if isinstance(key, BoundaryCondition):
        return key.get_id()
    if isinstance(key, BCId):
        return key
    raise TypeError(
        f"Expected a BoundaryCondition or a BCId, got {type(key).__name__}."
    )


class BCSet:
    """
    Ordered set of `BoundaryCondition` records keyed by their `BCId`.

    Args:
        bcs: Initial records. Duplicates are dropped, first one wins.
        less: Identifier ordering. Defaults to type-major, name-minor with
            the names' own ``<``.
        unique_names: If True, a name may appear only once across all
            types, not only once per type.

    Complexity:
        - add / remove / find: O(log n) search, O(n) list shift
        - of_type: O(log n + k) for k matching records
    """

    def __init__(
        self,
        bcs: Iterable[BoundaryCondition] = (),
        less: IdLess = id_less,
        unique_names: bool = False,
    ) -> None:
        self._less = less
        self._items: List[BoundaryCondition] = []
        self.unique_names = unique_names
        self.update(bcs)

    @property
    def less(self) -> IdLess:
        return self._less

    def _partition_point(self, pred: Callable[[BoundaryCondition], bool]) -> int:
        # First index where pred is False; pred must hold on a prefix.
        lo, hi = 0, len(self._items)
        while lo < hi:
            mid = (lo + hi) // 2
            if pred(self._items[mid]):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _lower_bound(self, bcid: BCId) -> int:
        return self._partition_point(lambda bc: self._less(bc.get_id(), bcid))

    def _index(self, bcid: BCId) -> int:
        i = self._lower_bound(bcid)
        if i < len(self._items) and not self._less(bcid, self._items[i].get_id()):
            return i
        return -1

    def _names_equal(self, a: object, b: object) -> bool:
        # Names of different types (e.g. "Wall" and 3) may not be comparable.
        name_less = self._less.name_less
        try:
            return not name_less(a, b) and not name_less(b, a)
        except TypeError:
            return False

    def _name_taken(self, bcid: BCId) -> bool:
        return any(
            bc.type != bcid.type and self._names_equal(bc.name, bcid.name)
            for bc in self._items
        )

    def add(self, bc: BoundaryCondition) -> bool:
        """
        Insert ``bc`` at its sorted position.

        Returns:
            True if inserted, False if an equal identifier is already stored
            (or, with ``unique_names``, if the name is used by another type).

        Raises:
            TypeError: If ``bc`` is not a `BoundaryCondition`.
            ValueError: In debug mode, if the name ordering is found to be
                inconsistent around the insertion point.
        """
        if not isinstance(bc, BoundaryCondition):
            raise TypeError(f"Expected a BoundaryCondition, got {type(bc).__name__}.")

        bcid = bc.get_id()
        i = self._lower_bound(bcid)

        if is_debug_enabled():
            neighbours = [item.get_id() for item in self._items[max(i - 1, 0) : i + 1]]
            check_neighbours(bcid, neighbours, self._less)

        if i < len(self._items) and not self._less(bcid, self._items[i].get_id()):
            logger.debug("Rejected duplicate boundary condition %s", bcid)
            return False
        if self.unique_names and self._name_taken(bcid):
            logger.debug("Rejected %s: name already used by another type", bcid)
            return False

        self._items.insert(i, bc)
        logger.debug("Added boundary condition %s at position %d", bcid, i)
        return True

    def update(self, bcs: Iterable[BoundaryCondition]) -> int:
        """Add every record of ``bcs``; return how many were inserted."""
        return sum(1 for bc in bcs if self.add(bc))

    def find(self, key: Key) -> Optional[BoundaryCondition]:
        """Return the stored record with an identifier equal to ``key``, or None."""
        i = self._index(_as_id(key))
        return self._items[i] if i >= 0 else None

    def remove(self, key: Key) -> BoundaryCondition:
        """
        Remove and return the record matching ``key``.

        Raises:
            KeyError: If no stored record matches.
        """
        bcid = _as_id(key)
        i = self._index(bcid)
        if i < 0:
            raise KeyError(str(bcid))
        logger.debug("Removed boundary condition %s", bcid)
        return self._items.pop(i)

    def discard(self, key: Key) -> None:
        """Remove the record matching ``key`` if present."""
        i = self._index(_as_id(key))
        if i >= 0:
            del self._items[i]

    def clear(self) -> None:
        self._items.clear()

    def reidentify(self, bc: BoundaryCondition, bcid: BCId) -> bool:
        """
        Change the identifier of the stored record ``bc`` and re-sort it.

        If another record already holds ``bcid``, ``bc`` keeps its old
        identifier and position and False is returned.

        If inserting under the new identifier raises, ``bc`` is restored
        the same way before the exception propagates.

        Raises:
            TypeError: If ``bcid`` is not a `BCId`.
            KeyError: If ``bc`` itself is not stored in this collection.
        """
        if not isinstance(bcid, BCId):
            raise TypeError(f"Expected a BCId, got {type(bcid).__name__}.")

        old = bc.get_id()
        i = self._index(old)
        if i < 0 or self._items[i] is not bc:
            raise KeyError(str(old))

        del self._items[i]
        try:
            bc.set_id(bcid)
            inserted = self.add(bc)
        except Exception:
            bc.set_id(old)
            self._items.insert(i, bc)
            raise

        if inserted:
            logger.debug("Re-identified boundary condition %s as %s", old, bcid)
            return True

        bc.set_id(old)
        self._items.insert(i, bc)
        return False

    def of_type(self, bc_type: BCType) -> List[BoundaryCondition]:
        """Return the records of ``bc_type``, sorted by name."""
        lo = self._partition_point(lambda bc: bc.type < bc_type)
        hi = self._partition_point(lambda bc: bc.type <= bc_type)
        return self._items[lo:hi]

    def filter(self, predicate: Predicate) -> List[BoundaryCondition]:
        """Return the records satisfying ``predicate``, in sorted order."""
        return [bc for bc in self._items if predicate(bc)]

    def count(self, predicate: Predicate) -> int:
        """Number of records satisfying ``predicate``."""
        return sum(1 for bc in self._items if predicate(bc))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (BoundaryCondition, BCId)):
            return False
        return self._index(_as_id(key)) >= 0

    def __iter__(self) -> Iterator[BoundaryCondition]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> BoundaryCondition:
        return self._items[index]

    def __repr__(self) -> str:
        ids = ", ".join(str(bc.get_id()) for bc in self._items)
        return f"BCSet([{ids}])"


__all__ = ["BCSet"]
