"""
Example: registering and querying boundary conditions

Builds a small collection of boundary conditions for a unit square, attaches
entity indices after registration, then counts, filters and evaluates them
the way a solver would during assembly.
"""

import sys

import numpy as np

from bchandler import (
    BCId,
    BCSet,
    BCType,
    BoundaryCondition,
    IsBCNameEqual,
    IsBCTypeEqual,
)
from bchandler.evaluators import constant, sincos


def build_collection() -> BCSet:
    """Register the conditions of a channel flow on the unit square."""
    bcs = BCSet()
    bcs.add(BoundaryCondition(BCType.DIRICHLET, "Wall"))
    bcs.add(BoundaryCondition(BCType.NEUMANN, "Inlet", constant(1.0)))
    bcs.add(BoundaryCondition(BCType.DIRICHLET, "Floor", sincos))
    bcs.add(BoundaryCondition(BCType.NEUMANN, "Outlet"))
    bcs.add(BoundaryCondition(BCType.ROBIN, 3, lambda t, x: t * x[0]))

    duplicate = BoundaryCondition(BCType.DIRICHLET, "Wall", constant(9.0))
    print(f"Second 'Wall' inserted: {bcs.add(duplicate)}")

    # Entities are known only once the mesh is read.
    bcs.find(BCId(BCType.DIRICHLET, "Wall")).set_entities([0, 1, 2, 3])
    bcs.find(BCId(BCType.DIRICHLET, "Floor")).set_entities([4, 5])
    bcs.find(BCId(BCType.NEUMANN, "Inlet")).set_entities([10, 11, 12])
    return bcs


def main() -> None:
    print("=" * 60)
    print("Boundary conditions in storage order")
    print("=" * 60)
    bcs = build_collection()
    for bc in bcs:
        bc.show(sys.stdout)
    print()

    print(f"Neumann conditions: {bcs.count(IsBCTypeEqual(BCType.NEUMANN))}")
    print(f"Dirichlet names: {[bc.name for bc in bcs.of_type(BCType.DIRICHLET)]}")
    print(f"Conditions named 'Inlet': {len(bcs.filter(IsBCNameEqual('Inlet')))}")
    print()

    point = np.array([np.pi / 4, 0.0])
    for bc in bcs:
        print(f"{str(bc.get_id()):>16s} at t=2: {bc.apply(2.0, point):.4f}")


if __name__ == "__main__":
    main()
