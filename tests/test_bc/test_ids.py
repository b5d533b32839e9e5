from __future__ import annotations

import itertools

import pytest

from bchandler.bc import BCId, BCType, IdEqual, IdLess, id_equal, id_less, make_bcid
from bchandler.diagnostics import is_strict_weak_ordering

IDS = [
    BCId(BCType.DIRICHLET, "Wall"),
    BCId(BCType.DIRICHLET, "Floor"),
    BCId(BCType.NEUMANN, "Inlet"),
    BCId(BCType.NEUMANN, "Wall"),
    BCId(BCType.ROBIN, "Skin"),
    BCId(BCType.GENERIC, "Aux"),
    BCId(BCType.OTHER, "Aux"),
]


def test_bctype_declaration_order() -> None:
    assert list(BCType) == [
        BCType.DIRICHLET,
        BCType.NEUMANN,
        BCType.ROBIN,
        BCType.GENERIC,
        BCType.OTHER,
    ]
    assert BCType.DIRICHLET < BCType.OTHER


def test_make_bcid_builds_equal_identifier() -> None:
    bcid = make_bcid(BCType.ROBIN, 7)
    assert bcid == BCId(BCType.ROBIN, 7)
    assert bcid.type is BCType.ROBIN
    assert bcid.name == 7


def test_bcid_is_immutable() -> None:
    bcid = BCId(BCType.DIRICHLET, "Wall")
    with pytest.raises(AttributeError):
        bcid.name = "Floor"  # type: ignore[misc]


def test_bcid_rejects_non_bctype() -> None:
    with pytest.raises(TypeError):
        BCId("dirichlet", "Wall")  # type: ignore[arg-type]


def test_less_is_strict_weak_ordering() -> None:
    assert is_strict_weak_ordering(IDS, id_less)
    for a in IDS:
        assert not id_less(a, a)
    for a, b in itertools.permutations(IDS, 2):
        assert not (id_less(a, b) and id_less(b, a))


def test_equal_is_equivalence() -> None:
    for a in IDS:
        assert id_equal(a, a)
    for a, b in itertools.product(IDS, repeat=2):
        assert id_equal(a, b) == id_equal(b, a)
        assert id_equal(a, b) == (a.type == b.type and a.name == b.name)


def test_same_type_orders_by_name() -> None:
    floor = BCId(BCType.DIRICHLET, "Floor")
    wall = BCId(BCType.DIRICHLET, "Wall")
    assert id_less(floor, wall)
    assert not id_less(wall, floor)


def test_different_types_ignore_names() -> None:
    for a, b in itertools.permutations(IDS, 2):
        if a.type != b.type:
            assert id_less(a, b) == (a.type < b.type)


def test_same_name_under_different_types_is_not_equal() -> None:
    assert not id_equal(BCId(BCType.DIRICHLET, "Wall"), BCId(BCType.NEUMANN, "Wall"))


def test_custom_name_ordering() -> None:
    ci_less = IdLess(lambda a, b: a.lower() < b.lower())
    ci_equal = IdEqual(ci_less)
    assert ci_equal(BCId(BCType.NEUMANN, "wall"), BCId(BCType.NEUMANN, "WALL"))
    assert ci_less(BCId(BCType.NEUMANN, "apex"), BCId(BCType.NEUMANN, "Base"))


def test_integer_names() -> None:
    assert id_less(BCId(BCType.DIRICHLET, 2), BCId(BCType.DIRICHLET, 10))
    assert id_equal(BCId(BCType.DIRICHLET, 3), BCId(BCType.DIRICHLET, 3))


def test_structural_equality_matches_default_ordering() -> None:
    for a, b in itertools.product(IDS, repeat=2):
        assert (a == b) == id_equal(a, b)
        if a == b:
            assert hash(a) == hash(b)


def test_custom_ordering_equality_is_independent_of_eq() -> None:
    ci_equal = IdEqual(IdLess(lambda a, b: a.lower() < b.lower()))
    lower = BCId(BCType.ROBIN, "skin")
    upper = BCId(BCType.ROBIN, "SKIN")
    assert ci_equal(lower, upper)
    assert lower != upper
