import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ndspan.extents import DYNAMIC_EXTENT, Extents
from ndspan.layouts import LayoutLeft, LayoutRight

D = DYNAMIC_EXTENT

shapes = st.lists(st.integers(min_value=1, max_value=4), min_size=0, max_size=4)
layout_types = st.sampled_from([LayoutLeft, LayoutRight])


def _sum_2d(data, mapping, add_to_row):
    result = 0
    for col in range(3):
        for row in range(3):
            result += data[mapping(row, col)] * (row + add_to_row)
    return result


def test_static_right_sum():
    data = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    m = LayoutRight(Extents([3, 3]))
    assert _sum_2d(data, m, 1) == 108
    assert _sum_2d(data, m, -1) == 18


def test_dynamic_right_sum():
    data = [1, 2, 3, 0, 4, 5, 6, 0, 7, 8, 9, 0]
    m = LayoutRight(Extents([D, D], 3, 4))
    assert _sum_2d(data, m, 1) == 108
    assert _sum_2d(data, m, -1) == 18


def test_dynamic_left_sum():
    data = [1, 4, 7, 2, 5, 8, 3, 6, 9, 0, 0, 0]
    m = LayoutLeft(Extents([D, D], 3, 4))
    assert _sum_2d(data, m, 1) == 108


def test_one_dimensional_lookup():
    data = list(range(1, 19))
    m = LayoutRight(Extents([18]))
    assert data[m(3)] + data[m(13)] + data[m(17)] + data[m(0)] == 37
    assert m.extents().extent(0) == 18


@given(layout_types, shapes)
def test_mapping_is_bijection(layout, shape):
    m = layout(Extents([D] * len(shape), *shape))
    offsets = sorted(m(*idx) for idx in itertools.product(*(range(e) for e in shape)))
    assert offsets == list(range(m.required_span_size()))


@given(layout_types, shapes)
def test_stride_matches_offsets(layout, shape):
    m = layout(Extents(shape))
    zero = (0,) * len(shape)
    for r in range(len(shape)):
        unit = tuple(1 if i == r else 0 for i in range(len(shape)))
        assert m.stride(r) == m(*unit) - m(*zero)


@given(shapes, st.data())
def test_left_is_right_reversed(shape, data):
    left = LayoutLeft(Extents(shape))
    right = LayoutRight(Extents(list(reversed(shape))))
    idx = tuple(data.draw(st.integers(0, e - 1)) for e in shape)
    assert left(*idx) == right(*reversed(idx))


def test_required_span_size_is_product():
    m = LayoutLeft(Extents([2, D, 3], 5))
    assert m.required_span_size() == 2 * 5 * 3


def test_first_and_last_strides_are_one():
    assert LayoutLeft(Extents([3, 4, 5])).stride(0) == 1
    assert LayoutRight(Extents([3, 4, 5])).stride(2) == 1


def test_properties_are_true():
    for layout in (LayoutLeft, LayoutRight):
        m = layout(Extents([2, 2]))
        assert (m.is_unique(), m.is_contiguous(), m.is_strided()) == (True, True, True)
        assert layout.is_always_unique() is True
        assert layout.is_always_contiguous() is True
        assert layout.is_always_strided() is True


def test_wrong_index_count_raises():
    m = LayoutRight(Extents([3, 3]))
    with pytest.raises(TypeError):
        m(1)
    with pytest.raises(TypeError):
        m(1, 2, 0)


def test_stride_out_of_range_raises():
    m = LayoutLeft(Extents([3, 3]))
    with pytest.raises(IndexError):
        m.stride(2)


def test_constructor_requires_extents():
    with pytest.raises(TypeError):
        LayoutLeft([3, 3])


def test_convert_keeps_offsets():
    m = LayoutRight(Extents([D, D], 2, 3))
    converted = m.convert([2, 3])
    assert converted.extents().static_extents() == (2, 3)
    assert converted == m
    assert converted(1, 2) == m(1, 2)


def test_convert_rejects_mismatch():
    m = LayoutLeft(Extents([D, D], 2, 3))
    with pytest.raises(ValueError):
        m.convert([3, 3])
    with pytest.raises(TypeError):
        LayoutLeft(Extents([2, 3])).convert([3, D])


def test_equality_and_hash():
    a = LayoutLeft(Extents([2, D], 3))
    b = LayoutLeft(Extents([D, 3], 2))
    assert a == b
    assert hash(a) == hash(b)
    assert a != LayoutLeft(Extents([2, D], 4))
    assert a != LayoutRight(Extents([2, D], 3))


def test_rank_zero_maps_to_zero():
    m = LayoutRight(Extents([]))
    assert m() == 0
    assert m.required_span_size() == 1