"""Multidimensional views over flat sequences with partially static extents, row- and column-major layouts, and a basic accessor."""

__version__ = "0.1.0"
__all__ = ["accessor", "extents", "layouts", "mdspan", "static_sizes"]