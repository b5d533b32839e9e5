"""Pytest configuration and shared fixtures for bchandler tests.

This module provides:
- A deterministic numpy RNG fixture
- Sample collections of boundary conditions
- Automatic restoration of the global debug flag between tests
"""

import os
from typing import Iterator, List

import numpy as np
import pytest

from bchandler.bc import BCType, BoundaryCondition
from bchandler.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Reset the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def five_bcs() -> List[BoundaryCondition]:
    """Two Dirichlet, two Neumann and one Robin condition, in arbitrary order."""
    return [
        BoundaryCondition(BCType.NEUMANN, "Outlet"),
        BoundaryCondition(BCType.DIRICHLET, "Wall"),
        BoundaryCondition(BCType.ROBIN, "Skin"),
        BoundaryCondition(BCType.NEUMANN, "Inlet"),
        BoundaryCondition(BCType.DIRICHLET, "Floor"),
    ]
