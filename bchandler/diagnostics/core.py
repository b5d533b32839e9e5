"""Consistency checks for ordering relations used as container keys."""

from __future__ import annotations

from itertools import combinations
from typing import Any, Callable, Iterable

Less = Callable[[Any, Any], bool]


def is_strict_weak_ordering(values: Iterable[Any], less: Less) -> bool:
    """
    Return True if ``less`` behaves as a strict weak ordering on ``values``.

    The check is exhaustive over the sample (cubic in its size), so it is
    meant for small samples in tests and debugging sessions.

    Parameters
    ----------
    values:
        Sample of values to test the relation on.
    less:
        Binary predicate ``less(a, b)``.
    """
    try:
        check_strict_weak_ordering(values, less)
    except ValueError:
        return False
    return True


def check_strict_weak_ordering(values: Iterable[Any], less: Less) -> None:
    """
    Verify irreflexivity, asymmetry, transitivity and transitivity of
    incomparability of ``less`` over ``values``.

    Raises
    ------
    ValueError
        Describing the first violated property and the offending values.
    """
    sample = list(values)

    for a in sample:
        if less(a, a):
            raise ValueError(f"Ordering is not irreflexive: less({a!r}, {a!r}) is True.")

    for a, b in combinations(sample, 2):
        if less(a, b) and less(b, a):
            raise ValueError(
                f"Ordering is not asymmetric for {a!r} and {b!r}."
            )

    for a in sample:
        for b in sample:
            for c in sample:
                if less(a, b) and less(b, c) and not less(a, c):
                    raise ValueError(
                        f"Ordering is not transitive: {a!r} < {b!r} < {c!r} "
                        f"but not {a!r} < {c!r}."
                    )
                a_eq_b = not less(a, b) and not less(b, a)
                b_eq_c = not less(b, c) and not less(c, b)
                a_eq_c = not less(a, c) and not less(c, a)
                if a_eq_b and b_eq_c and not a_eq_c:
                    raise ValueError(
                        f"Incomparability is not transitive for {a!r}, {b!r}, {c!r}."
                    )


def check_neighbours(value: Any, neighbours: Iterable[Any], less: Less) -> None:
    """
    Cheap local check used when inserting ``value`` next to ``neighbours``.

    Raises
    ------
    ValueError
        If ``less`` is reflexive on ``value`` or not asymmetric against a
        neighbour.
    """
    if less(value, value):
        raise ValueError(f"Ordering is not irreflexive on {value!r}.")
    for other in neighbours:
        if less(value, other) and less(other, value):
            raise ValueError(
                f"Ordering is not asymmetric for {value!r} and {other!r}."
            )
