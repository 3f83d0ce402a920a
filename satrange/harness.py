"""
satrange/harness.py
═══════════════════

Exhaustive precision comparison of two saturating-add algorithms.

For every ordered pair ``(x, y)`` of ``all_ranges(w) × all_ranges(w)``
the *reference* and *candidate* results are classified:

    ┌────────────────────────────────────────────────────────────────┐
    │  results do not overlap            →  INCOMPARABLE              │
    │  |candidate| == |reference|        →  EQUAL                     │
    │  |candidate| <  |reference|        →  DECOMPOSED_BETTER         │
    │  |candidate| >  |reference|        →  DECOMPOSED_WORSE          │
    └────────────────────────────────────────────────────────────────┘

Two sound results for the same pair always share the exact answer, so a
non-overlapping pair means at least one algorithm is unsound there.

Every pair is independent.  :func:`run_partitioned` splits the outer
loop by lower bound, runs the parts in worker processes and sums the
counters; the totals are the same as a sequential run.
"""

from __future__ import annotations

import enum
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Optional, Sequence

from satrange.concrete import cardinality
from satrange.config import HarnessConfig
from satrange.enumeration import (
    all_ranges,
    max_value,
    range_count,
    ranges_with_lower,
)
from satrange.range import ConstantRange
from satrange.saturating import (
    SatAlgorithm,
    decomposed_uadd_sat,
    direct_uadd_sat,
    get_algorithm,
)

logger = logging.getLogger(__name__)


class Classification(enum.Enum):
    """Relative precision of the candidate result against the reference."""
    EQUAL = "equal"
    DECOMPOSED_BETTER = "decomposed_better"
    DECOMPOSED_WORSE = "decomposed_worse"
    INCOMPARABLE = "incomparable"


@dataclass
class ClassificationCounters:
    """Per-run tallies.  ``+`` merges the counters of two partitions."""
    total: int = 0
    equal: int = 0
    decomposed_better: int = 0
    decomposed_worse: int = 0
    incomparable: int = 0

    def record(self, classification: Classification) -> None:
        field_name = classification.value
        setattr(self, field_name, getattr(self, field_name) + 1)
        self.total += 1

    def is_conserved(self) -> bool:
        """Do the four classes add up to ``total``?"""
        return (
            self.equal + self.decomposed_better
            + self.decomposed_worse + self.incomparable
        ) == self.total

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __add__(self, other: ClassificationCounters) -> ClassificationCounters:
        if not isinstance(other, ClassificationCounters):
            return NotImplemented
        return ClassificationCounters(
            **{
                f.name: getattr(self, f.name) + getattr(other, f.name)
                for f in fields(self)
            }
        )


# ═══════════════════════════════════════════════════════════════════════════
#  Classification
# ═══════════════════════════════════════════════════════════════════════════

def classify(reference: ConstantRange, candidate: ConstantRange) -> Classification:
    """Compare two results for the same operand pair."""
    if (
        reference.unsigned_max() < candidate.unsigned_min()
        or candidate.unsigned_max() < reference.unsigned_min()
    ):
        return Classification.INCOMPARABLE
    ref_size = cardinality(reference)
    cand_size = cardinality(candidate)
    if cand_size == ref_size:
        return Classification.EQUAL
    if cand_size < ref_size:
        return Classification.DECOMPOSED_BETTER
    return Classification.DECOMPOSED_WORSE


def compare_pair(
    x: ConstantRange,
    y: ConstantRange,
    reference: SatAlgorithm = direct_uadd_sat,
    candidate: SatAlgorithm = decomposed_uadd_sat,
) -> Classification:
    return classify(reference(x, y), candidate(x, y))


# ═══════════════════════════════════════════════════════════════════════════
#  Drivers
# ═══════════════════════════════════════════════════════════════════════════

def run_comparison(
    width: int,
    reference: SatAlgorithm = direct_uadd_sat,
    candidate: SatAlgorithm = decomposed_uadd_sat,
    outer: Optional[Sequence[ConstantRange]] = None,
) -> ClassificationCounters:
    """
    Classify every pair ``(x, y)`` with ``x`` from *outer* (default: all
    ranges of *width*) and ``y`` from all ranges of *width*.
    """
    ranges = all_ranges(width)
    if outer is None:
        outer = ranges
    counters = ClassificationCounters()
    current_lower = None
    for x in outer:
        if x.lower != current_lower:
            current_lower = x.lower
            logger.debug("width %d: outer lower bound %d", width, current_lower)
        for y in ranges:
            counters.record(classify(reference(x, y), candidate(x, y)))
    return counters


def _run_lows(
    width: int, reference: str, candidate: str, lows: List[int]
) -> ClassificationCounters:
    # Worker entry point; algorithms travel by name so the call pickles.
    return run_comparison(
        width,
        get_algorithm(reference),
        get_algorithm(candidate),
        outer=ranges_with_lower(width, lows),
    )


def partition_lows(width: int, parts: int) -> List[List[int]]:
    """
    Split the lower bounds ``0 … maxVal`` into *parts* strided groups.

    Small lower bounds own the most ranges, so striding keeps the groups
    roughly even.  Empty groups are dropped.
    """
    lows = list(range(max_value(width) + 1))
    groups = [lows[i::parts] for i in range(parts)]
    return [g for g in groups if g]


def run_partitioned(config: HarnessConfig) -> ClassificationCounters:
    """Run the comparison described by *config*, in parallel if asked."""
    config.validate()
    started = time.perf_counter()
    logger.info(
        "Comparing %s against %s at width %d (%d ranges, %d worker(s))",
        config.candidate, config.reference, config.width,
        range_count(config.width), config.workers,
    )
    if config.workers == 1:
        counters = run_comparison(
            config.width,
            get_algorithm(config.reference),
            get_algorithm(config.candidate),
        )
    else:
        groups = partition_lows(config.width, config.workers)
        with ProcessPoolExecutor(max_workers=len(groups)) as pool:
            futures = [
                pool.submit(
                    _run_lows, config.width, config.reference,
                    config.candidate, group,
                )
                for group in groups
            ]
            counters = merge(f.result() for f in futures)
    logger.info(
        "Classified %d pairs in %.3fs", counters.total,
        time.perf_counter() - started,
    )
    return counters


def merge(parts: Iterable[ClassificationCounters]) -> ClassificationCounters:
    """Sum the counters of independent partitions."""
    total = ClassificationCounters()
    for part in parts:
        total = total + part
    return total
