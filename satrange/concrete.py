"""
satrange/concrete.py — materialise the concrete set γ(r) of a range.

Only used to measure precision.  Widths are small enough that listing
every value is feasible, but :func:`cardinality` answers the same
question arithmetically and is what the harness calls.
"""

from __future__ import annotations

from typing import Iterator

from satrange.range import ConstantRange


def concretize(r: ConstantRange) -> Iterator[int]:
    """
    Yield every element of *r*, starting at ``r.lower``.

    Wrapped ranges run up to 2ʷ-1 and continue from 0.  Full ranges
    yield ``0 … 2ʷ-1``; the empty range yields nothing.
    """
    if r.is_empty():
        return
    start = r.lower
    for k in range(r.size()):
        yield (start + k) % r.modulus


def cardinality(r: ConstantRange) -> int:
    """``len(list(concretize(r)))`` without building the list."""
    return r.size()


def hull_cardinality(r: ConstantRange) -> int:
    """
    Count of ``unsigned_min … unsigned_max``.

    Equal to :func:`cardinality` unless *r* wraps through 0, where the
    hull also counts the gap.
    """
    return r.unsigned_max() - r.unsigned_min() + 1
