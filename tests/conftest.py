# tests/conftest.py
"""
Shared fixtures and Hypothesis strategies for the satrange test suite.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import strategies as st

from satrange.range import ConstantRange, make_range


def every_range(width: int) -> List[ConstantRange]:
    """Every distinct range of *width*: empty, full and all [lo, hi), lo != hi."""
    modulus = 1 << width
    ranges = [ConstantRange.empty_set(width), ConstantRange.full_set(width)]
    ranges.extend(
        ConstantRange(width, lo, hi)
        for lo in range(modulus)
        for hi in range(modulus)
        if lo != hi
    )
    return ranges


@st.composite
def ranges(draw, min_width: int = 1, max_width: int = 8, width=None):
    """Arbitrary ranges, including wrapped, full and empty ones."""
    if width is None:
        width = draw(st.integers(min_value=min_width, max_value=max_width))
    if draw(st.integers(min_value=0, max_value=19)) == 0:
        return ConstantRange.empty_set(width)
    modulus = 1 << width
    lo = draw(st.integers(min_value=0, max_value=modulus - 1))
    hi = draw(st.integers(min_value=0, max_value=modulus))
    return make_range(width, lo, hi)


@st.composite
def range_pairs(draw, min_width: int = 1, max_width: int = 8):
    """Two ranges of the same width."""
    width = draw(st.integers(min_value=min_width, max_value=max_width))
    return draw(ranges(width=width)), draw(ranges(width=width))


@pytest.fixture
def every_range_w2() -> List[ConstantRange]:
    return every_range(2)


@pytest.fixture
def every_range_w3() -> List[ConstantRange]:
    return every_range(3)
