"""
Scalar evaluators ``f(t, coord) -> float`` for boundary conditions.

An evaluator receives the time ``t`` and the coordinate of a point as a 1-D
float array. `zero_function` is the default evaluator of every
`BoundaryCondition`; the others are small examples for exercising
`BoundaryCondition.apply`.

Example
-------
>>> import numpy as np
>>> from bchandler.evaluators import constant, sincos
>>> constant(2.5)(0.0, np.zeros(2))
2.5
>>> round(sincos(0.0, np.array([np.pi / 4])), 12)
0.5
"""

from __future__ import annotations

from typing import Callable

import numpy as np

Evaluator = Callable[[float, np.ndarray], float]


def zero_function(t: float, coord: np.ndarray) -> float:
    """Return 0.0 for any time and coordinate."""
    return 0.0


def constant(value: float) -> Evaluator:
    """Return an evaluator that ignores its arguments and yields ``value``."""
    value = float(value)

    def _constant(t: float, coord: np.ndarray) -> float:
        return value

    return _constant


def sincos(t: float, coord: np.ndarray) -> float:
    """Return ``sin(x) * cos(x)`` of the first coordinate."""
    x = float(np.asarray(coord, dtype=float)[0])
    return float(np.sin(x) * np.cos(x))


def square(t: float, coord: np.ndarray) -> float:
    """Return the square of the first coordinate."""
    x = float(np.asarray(coord, dtype=float)[0])
    return x * x


__all__ = ["Evaluator", "zero_function", "constant", "sincos", "square"]
