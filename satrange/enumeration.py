"""
satrange/enumeration.py — every non-empty, non-full, non-wrapping range.

For width ``w`` with ``maxVal = 2ʷ - 1`` the ranges are ``[lo, hi)`` with
``0 <= lo < hi <= maxVal``, ordered by ``lo`` then ``hi``.  Note that
``hi`` stops at ``maxVal``: ranges containing the maximum value are not
generated.

    w = 3  →   28 ranges
    w = 6  → 2016 ranges
"""

from __future__ import annotations

from typing import Iterable, List

from satrange.range import MAX_WIDTH, ConstantRange, check_width


def max_value(width: int) -> int:
    """``2ʷ - 1`` for ``1 <= width <= MAX_WIDTH``."""
    check_width(width, MAX_WIDTH)
    return (1 << width) - 1


def range_count(width: int) -> int:
    """``Σ_{lo=0}^{maxVal} (maxVal - lo)``, i.e. ``maxVal (maxVal + 1) / 2``."""
    top = max_value(width)
    return top * (top + 1) // 2


def ranges_with_lower(width: int, lows: Iterable[int]) -> List[ConstantRange]:
    """All enumerated ranges whose lower bound is in *lows*, in order of *lows*."""
    top = max_value(width)
    return [
        ConstantRange(width, lo, hi)
        for lo in lows
        for hi in range(lo + 1, top + 1)
    ]


def all_ranges(width: int) -> List[ConstantRange]:
    """Every range ``[lo, hi)`` with ``0 <= lo < hi <= 2ʷ - 1``."""
    return ranges_with_lower(width, range(max_value(width) + 1))
