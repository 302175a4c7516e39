import pytest
from hypothesis import given
from hypothesis import strategies as st

from ndspan.accessor import AccessorBasic, ElementPointer


def test_pointer_add_moves_offset():
    buf = [10, 20, 30, 40]
    p = ElementPointer(buf)
    q = p + 2
    assert q.offset == 2
    assert q.buffer is buf
    assert q[0] == buf[2]


def test_pointer_equality_by_identity_of_buffer():
    a = [1, 2, 3]
    b = [1, 2, 3]
    assert ElementPointer(a, 1) == ElementPointer(a) + 1
    assert not ElementPointer(a) == ElementPointer(b)


def test_pointer_out_of_range_raises():
    p = ElementPointer([1, 2, 3], 1)
    assert p[1] == 3
    assert p[-1] == 1
    with pytest.raises(IndexError):
        _ = p[2]
    with pytest.raises(IndexError):
        _ = p[-2]


def test_access_reads_element():
    buf = [5, 6, 7, 8]
    acc = AccessorBasic()
    assert acc.access(ElementPointer(buf), 3) == buf[3]


def test_store_then_access_round_trip():
    buf = [0] * 5
    acc = AccessorBasic()
    p = ElementPointer(buf)
    acc.store(p, 4, "x")
    assert acc.access(p, 4) == "x"
    assert buf[4] == "x"


def test_offset_matches_pointer_add():
    buf = list(range(6))
    acc = AccessorBasic()
    p = ElementPointer(buf)
    assert acc.offset(p, 3) == p + 3
    assert acc.access(acc.offset(p, 3), 1) == acc.access(p, 4)


def test_decay_returns_same_pointer():
    p = ElementPointer([1])
    assert AccessorBasic().decay(p) is p


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_offset_composition(values, data):
    i = data.draw(st.integers(0, len(values) - 1))
    j = data.draw(st.integers(0, len(values) - 1 - i))
    acc = AccessorBasic()
    p = ElementPointer(values)
    assert acc.access(acc.offset(p, i), j) == values[i + j]