from __future__ import annotations

import pytest

from perlver import Version, parse
from tests.vectors import VECTOR_IDS, VECTORS, Vector


@pytest.mark.parametrize("vec", VECTORS, ids=VECTOR_IDS)
def test_formatting(vec: Vector) -> None:
    v = parse(vec.text)
    assert v.normal() == vec.normal
    assert v.numify() == vec.numify
    assert v.stringify() == vec.stringify
    assert str(v) == vec.stringify
    assert v.raw() == vec.text


def test_numify_keeps_wide_components() -> None:
    v = Version(original="x", alpha=False, qv=True, components=(1, 2345, 6))
    assert v.numify() == 1.2345006


def test_normal_never_truncates() -> None:
    v = Version(original="x", alpha=False, qv=True, components=(1, 2, 3, 4, 5))
    assert v.normal() == "v1.2.3.4.5"


def test_components_must_not_be_empty() -> None:
    with pytest.raises(ValueError):
        Version(original="x", alpha=False, qv=False, components=())


def test_components_are_stored_as_tuple() -> None:
    v = Version(original="x", alpha=False, qv=False, components=[1, 2])  # type: ignore[arg-type]
    assert v.components == (1, 2)


def test_version_is_immutable() -> None:
    v = parse("1.2")
    with pytest.raises(AttributeError):
        v.alpha = True  # type: ignore[misc]


# (left, right, expected compare)
_ORDERING = [
    ("undef", "0", 0),
    ("undef", "v1.2.3", -1),
    ("undef", "v1.2.3_0", -1),
    ("0", "v1.2.3", -1),
    ("0", "v1.2.3_0", -1),
    ("v1.2.3", "v1.2.3_0", -1),
    ("v1.2.3", "v1.2.3", 0),
    ("v1.2.3_0", "v1.2.3_0", 0),
    ("1.2.3", "v1.2.3", 0),
    ("1.2", "v1.2.0", 1),
    ("5.034", "v5.34.1", 0),
    ("v5.34", "v5.34.1", -1),
]


@pytest.mark.parametrize(("left", "right", "expected"), _ORDERING)
def test_relational_operators_agree_with_compare(left: str, right: str, expected: int) -> None:
    a, b = parse(left), parse(right)
    assert a.compare(b) == expected
    assert b.compare(a) == -expected

    assert (a < b) is (expected < 0)
    assert (a > b) is (expected > 0)
    assert (a == b) is (expected == 0)
    assert (a != b) is (expected != 0)
    assert (a <= b) is (expected <= 0)
    assert (a >= b) is (expected >= 0)

    assert a.less_than(b) is (expected < 0)
    assert a.greater_than(b) is (expected > 0)
    assert a.equal(b) is (expected == 0)
    assert a.not_equal(b) is (expected != 0)
    assert a.less_equal(b) is (expected <= 0)
    assert a.greater_equal(b) is (expected >= 0)


def test_equality_is_not_transitive() -> None:
    five = Version(original="5", alpha=False, qv=False, components=(5,))
    five_one = Version(original="5.1", alpha=False, qv=False, components=(5, 1))
    five_two = Version(original="5.2", alpha=False, qv=False, components=(5, 2))

    assert five == five_one
    assert five_one == five
    assert five == five_two
    assert five_two == five
    assert five_one != five_two
    assert five_one < five_two


def test_equal_versions_hash_alike() -> None:
    assert hash(parse("5.034")) == hash(parse("v5.34.1"))
    assert parse("v5.34.1") in {parse("5.034")}


def test_comparison_with_other_types() -> None:
    v = parse("1.2")
    assert (v == "1.2") is False
    assert v != 1.2
    with pytest.raises(TypeError):
        _ = v < "1.3"  # type: ignore[operator]
