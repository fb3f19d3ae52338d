"""Sorting, radix string sorts, substring search, string symbol tables and binary search trees."""

__version__ = "0.1.0"