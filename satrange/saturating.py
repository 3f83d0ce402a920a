"""
satrange/saturating.py
══════════════════════

Unsigned saturating addition over :class:`~satrange.range.ConstantRange`.

Scalar saturating add ``a ⊕ b = min(a + b, 2ʷ - 1)`` is monotone in both
arguments, so the smallest result comes from the two minima and the
largest from the two maxima.  The algorithms below reach that fact by
different routes:

    direct        — saturate(min x + min y) … saturate(max x + max y)
    decomposed    — zero-extend by one bit, wrapping add (which cannot
                    wrap at w + 1), clamp both bounds to 2ʷ - 1, narrow
    decomposed-exclusive
                  — as ``decomposed`` but the clamped maximum is used as
                    an exclusive bound.  Unsound; kept to exercise the
                    better/worse classes of the harness.
    exact         — abstraction of every concrete saturating sum

All of them take and return ranges of the same width.
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, Tuple

from satrange.concrete import concretize
from satrange.errors import ConfigError, ErrorCodes, WidthMismatch
from satrange.range import ConstantRange, make_range

SatAlgorithm = Callable[[ConstantRange, ConstantRange], ConstantRange]


def saturate(value: int, width: int) -> int:
    """Clamp an unbounded non-negative int to ``2ʷ - 1``."""
    return min(value, (1 << width) - 1)


def _check_operands(x: ConstantRange, y: ConstantRange, operation: str) -> None:
    if x.width != y.width:
        raise WidthMismatch(x.width, y.width, operation)


def _from_bounds(width: int, lower: int, upper: int) -> ConstantRange:
    """Range holding ``lower … upper`` inclusive."""
    if lower == upper:
        return ConstantRange.single(width, lower)
    return make_range(width, lower, upper + 1)


def direct_uadd_sat(x: ConstantRange, y: ConstantRange) -> ConstantRange:
    """Saturating add from the unsigned extrema of both operands."""
    _check_operands(x, y, "direct_uadd_sat")
    width = x.width
    if x.is_empty() or y.is_empty():
        return ConstantRange.empty_set(width)
    lower = saturate(x.unsigned_min() + y.unsigned_min(), width)
    upper = saturate(x.unsigned_max() + y.unsigned_max(), width)
    return _from_bounds(width, lower, upper)


def _decomposed_bounds(x: ConstantRange, y: ConstantRange) -> Tuple[int, int]:
    # One extra bit holds any sum of two w-bit values, so add() cannot wrap.
    wide = x.extend_width().add(y.extend_width())
    limit = x.max_value
    return min(wide.unsigned_min(), limit), min(wide.unsigned_max(), limit)


def decomposed_uadd_sat(x: ConstantRange, y: ConstantRange) -> ConstantRange:
    """Saturating add as widen → add → clamp → narrow."""
    _check_operands(x, y, "decomposed_uadd_sat")
    if x.is_empty() or y.is_empty():
        return ConstantRange.empty_set(x.width)
    lower, upper = _decomposed_bounds(x, y)
    return _from_bounds(x.width, lower, upper)


def decomposed_uadd_sat_exclusive(x: ConstantRange, y: ConstantRange) -> ConstantRange:
    """
    Widen → add → clamp → narrow, with the clamped maximum taken as the
    exclusive upper bound of the result.

    This drops the largest sum from every non-singleton result, so it is
    smaller than ``direct_uadd_sat`` and unsound.
    """
    _check_operands(x, y, "decomposed_uadd_sat_exclusive")
    if x.is_empty() or y.is_empty():
        return ConstantRange.empty_set(x.width)
    lower, upper = _decomposed_bounds(x, y)
    if lower == upper:
        return ConstantRange.single(x.width, lower)
    return make_range(x.width, lower, upper)


def exact_uadd_sat(x: ConstantRange, y: ConstantRange) -> ConstantRange:
    """Best range over every concrete ``saturate(a + b)``.  Enumerates."""
    _check_operands(x, y, "exact_uadd_sat")
    width = x.width
    sums = (
        saturate(a + b, width)
        for a, b in itertools.product(concretize(x), list(concretize(y)))
    )
    return ConstantRange.abstract(width, sums)


def is_sound(result: ConstantRange, x: ConstantRange, y: ConstantRange) -> bool:
    """Does *result* contain ``saturate(a + b)`` for every ``a ∈ x, b ∈ y``?"""
    _check_operands(x, y, "is_sound")
    ys = list(concretize(y))
    return all(
        result.contains(saturate(a + b, x.width))
        for a in concretize(x)
        for b in ys
    )


# ═══════════════════════════════════════════════════════════════════════════
#  Algorithm registry
# ═══════════════════════════════════════════════════════════════════════════

ALGORITHMS: Dict[str, SatAlgorithm] = {
    "direct": direct_uadd_sat,
    "decomposed": decomposed_uadd_sat,
    "decomposed-exclusive": decomposed_uadd_sat_exclusive,
    "exact": exact_uadd_sat,
}


def get_algorithm(name: str) -> SatAlgorithm:
    """Look up a saturating-add algorithm by registry name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ConfigError(
            f"unknown algorithm {name!r}",
            code=ErrorCodes.UNKNOWN_ALGORITHM,
            hint=f"choose one of: {', '.join(sorted(ALGORITHMS))}",
        ) from None
