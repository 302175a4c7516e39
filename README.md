# ndspan

`ndspan` provides multidimensional views over flat, mutable Python sequences
such as lists. The views do not copy the data. A view has three parts:

- **Extents** (`ndspan.extents.Extents`) describe the shape. Each dimension is
  either static, meaning it is fixed in the pattern, or dynamic, meaning it is
  marked with `DYNAMIC_EXTENT` and its size is given when the view is built.
- **A layout mapping** turns a multidimensional index into an offset in the
  flat storage. `ndspan.layouts.LayoutRight` is row-major and
  `ndspan.layouts.LayoutLeft` is column-major.
- **An accessor** (`ndspan.accessor.AccessorBasic`) reads and writes elements
  through an `ElementPointer`, which is a position inside a mutable sequence.

The package has no dependencies outside the standard library.

## Installation

```
pip install ndspan
```

For the tests, install the test extra with `pip install ndspan[test]` and then
run `pytest`.

## Partially static sizes

`ndspan.static_sizes.PartiallyStaticSizes` is the storage that sits under
extents. It holds a fixed-length list of sizes, and each size is either static
or dynamic:

```python
from ndspan.static_sizes import DYNAMIC_EXTENT, PartiallyStaticSizes, as_sizes

sizes = PartiallyStaticSizes((4, DYNAMIC_EXTENT, 2), (7,))
list(sizes)                 # [4, 7, 2]
sizes.size_dynamic()        # 1
sizes.get_static(1, 0)      # 0, the default, because entry 1 is dynamic
sizes.set(0, 99)            # entry 0 is static, so nothing changes
PartiallyStaticSizes.from_all_sizes((4, DYNAMIC_EXTENT), (4, 9))  # takes one value for every entry
as_sizes((DYNAMIC_EXTENT,), 5)
```

A static size must be zero or more. The only negative value allowed is
`DYNAMIC_EXTENT`, which is `-1`.

## Extents

```python
from ndspan.extents import Extents, is_compatible
from ndspan.static_sizes import DYNAMIC_EXTENT

ext = Extents((2, DYNAMIC_EXTENT), 3)   # a 2 x 3 shape whose second dimension is dynamic
ext.rank()            # 2
ext.rank_dynamic()    # 1
ext.extent(1)         # 3
ext.static_extent(1)  # DYNAMIC_EXTENT
list(ext)             # [2, 3]

Extents.from_dynamic((DYNAMIC_EXTENT, DYNAMIC_EXTENT), [2, 3])
Extents((DYNAMIC_EXTENT, DYNAMIC_EXTENT), ext)   # built from compatible extents

is_compatible((2, DYNAMIC_EXTENT), (2, 3))   # True
ext.is_convertible_to((3, 3))                # False
ext.convert((2, 3))
```

Two extents are equal when they have the same rank and the same actual sizes,
whatever their static patterns are.

## Layouts

```python
from ndspan.layouts import LayoutLeft, LayoutRight

right = LayoutRight(ext)
right(1, 2)                  # 5, row-major
left = LayoutLeft(ext)
left(1, 2)                   # 5, column-major: 1 + 2 * 2
left.required_span_size()    # 6
left.stride(1)               # 2
left.convert((2, 3))         # the same mapping, with fully static extents
```

Both layouts are unique, contiguous and strided. The layout call does not
check that each index is within range.

## Views

```python
from ndspan.mdspan import MdSpan
from ndspan.layouts import LayoutLeft
from ndspan.static_sizes import DYNAMIC_EXTENT

data = [1, 2, 3, 4, 5, 6, 7, 8, 9]
s = MdSpan.from_extents(data, (3, 3))       # row-major by default
s(1, 2)          # 6
s([1, 2])        # 6, with the indices given as one sequence
s[1, 2] = 60     # writes through to data
data[5]          # 60

col_major = MdSpan.from_extents(data, (DYNAMIC_EXTENT, DYNAMIC_EXTENT), 3, 3,
                                layout=LayoutLeft)
col_major(2, 0)            # 3
col_major.size()           # 9
col_major.stride(1)        # 3
col_major.is_contiguous()  # True

fixed = col_major.converted((3, 3))   # the same view with static extents
```

`MdSpan(data, mapping, accessor)` takes a mapping and an optional accessor
directly. `data` may be an `ElementPointer`, a mutable sequence, or `None`.
Reading from a view whose data is `None` raises `ValueError`.

## Errors

- The number of dynamic extents must match the number of `DYNAMIC_EXTENT`
  entries. A wrong count raises `TypeError`.
- Building extents from, or converting to, an incompatible static pattern
  raises `TypeError`. A run-time size that contradicts a static size of the
  target raises `ValueError`.
- Indexing a view with the wrong number of indices raises `TypeError`. An index
  outside its dimension raises `IndexError`.

## What the package does not do

- There is no slicing or sub-view function. `ndspan.extents.ALL`, the only
  `AllType` instance, is provided as a marker that selects a whole dimension,
  but nothing in the package consumes it.
- Only the row-major and column-major layouts exist. There is no layout with
  arbitrary strides.
- The package does not own or allocate storage. The caller supplies it.