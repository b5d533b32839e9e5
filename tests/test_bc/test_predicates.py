"""Tests for boundary-condition predicates and search helpers."""

from bchandler.bc import (
    BCType,
    BoundaryCondition,
    IsBCNameEqual,
    IsBCTypeEqual,
    compare_on_type,
    count_if,
    find_if,
    partition,
    sort_on_type,
)


def test_type_predicate_counts_neumann(five_bcs):
    assert count_if(five_bcs, IsBCTypeEqual(BCType.NEUMANN)) == 2
    assert count_if(five_bcs, IsBCTypeEqual(BCType.ROBIN)) == 1
    assert count_if(five_bcs, IsBCTypeEqual(BCType.OTHER)) == 0


def test_name_predicate_finds_wall(five_bcs):
    wall = find_if(five_bcs, IsBCNameEqual("Wall"))
    assert wall is five_bcs[1]
    assert find_if(five_bcs, IsBCNameEqual("Roof")) is None


def test_name_predicate_matches_across_types():
    bcs = [
        BoundaryCondition(BCType.DIRICHLET, "Wall"),
        BoundaryCondition(BCType.NEUMANN, "Wall"),
    ]
    assert count_if(bcs, IsBCNameEqual("Wall")) == 2


def test_partition_preserves_order(five_bcs):
    dirichlet, rest = partition(five_bcs, IsBCTypeEqual(BCType.DIRICHLET))
    assert [bc.name for bc in dirichlet] == ["Wall", "Floor"]
    assert [bc.name for bc in rest] == ["Outlet", "Skin", "Inlet"]


def test_compare_on_type_ignores_names():
    wall = BoundaryCondition(BCType.DIRICHLET, "Wall")
    floor = BoundaryCondition(BCType.DIRICHLET, "Floor")
    inlet = BoundaryCondition(BCType.NEUMANN, "Inlet")

    assert compare_on_type(wall, inlet)
    assert not compare_on_type(inlet, wall)
    # Same type: equivalent under compare_on_type but ordered by the record ordering.
    assert not compare_on_type(wall, floor) and not compare_on_type(floor, wall)
    assert floor < wall


def test_sort_on_type_groups_and_is_stable(five_bcs):
    ordered = sort_on_type(five_bcs)
    assert [bc.type for bc in ordered] == [
        BCType.DIRICHLET,
        BCType.DIRICHLET,
        BCType.NEUMANN,
        BCType.NEUMANN,
        BCType.ROBIN,
    ]
    assert [bc.name for bc in ordered[:2]] == ["Wall", "Floor"]
