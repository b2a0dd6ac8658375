"""Data structure unit tests."""

from __future__ import annotations

from autotable.data_structures import DiFloat, to_di


def test_DiFloat() -> None:
    """Test the DiFloat data structure."""
    d = DiFloat(top=1, right=2, bottom=3, left=4)
    assert d.top == 1
    assert d.right == 2
    assert d.bottom == 3
    assert d.left == 4
    assert d.horizontal == 6
    assert d.vertical == 4

    d2 = DiFloat.from_value(5)
    assert d2 == DiFloat(5, 5, 5, 5)


def test_to_di_number() -> None:
    """A single number applies to every edge."""
    assert to_di(3) == DiFloat(3, 3, 3, 3)
    assert to_di(2.5) == DiFloat(2.5, 2.5, 2.5, 2.5)


def test_to_di_sequence() -> None:
    """Sequences follow the CSS shorthand."""
    assert to_di([1]) == DiFloat(1, 1, 1, 1)
    assert to_di([1, 2]) == DiFloat(1, 2, 1, 2)
    assert to_di([1, 2, 3]) == DiFloat(1, 2, 3, 2)
    assert to_di([1, 2, 3, 4]) == DiFloat(1, 2, 3, 4)


def test_to_di_mapping() -> None:
    """Mappings may give edges or horizontal and vertical values."""
    assert to_di({"top": 1}, default=7) == DiFloat(1, 7, 7, 7)
    assert to_di({"horizontal": 2, "vertical": 3}) == DiFloat(3, 2, 3, 2)
    assert to_di({"horizontal": 2, "left": 9}) == DiFloat(0, 2, 0, 9)


def test_to_di_default() -> None:
    """Missing values use the default."""
    assert to_di(None, default=4) == DiFloat(4, 4, 4, 4)
    assert to_di("nonsense", default=1) == DiFloat(1, 1, 1, 1)
    existing = DiFloat(1, 2, 3, 4)
    assert to_di(existing) is existing
