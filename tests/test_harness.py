# tests/test_harness.py
"""
Tests for pair classification, counters and the comparison drivers.
"""

import pytest

from satrange.config import HarnessConfig
from satrange.enumeration import max_value
from satrange.errors import ConfigError, EmptyRangeError
from satrange.harness import (
    Classification,
    ClassificationCounters,
    classify,
    compare_pair,
    merge,
    partition_lows,
    run_comparison,
    run_partitioned,
)
from satrange.range import ConstantRange, empty, make_range
from satrange.saturating import (
    decomposed_uadd_sat_exclusive,
    direct_uadd_sat,
)


def _always_max(x, y):
    return ConstantRange.single(x.width, x.max_value)


class TestClassify:

    def test_equal_sizes(self):
        assert classify(make_range(4, 1, 5), make_range(4, 2, 6)) is Classification.EQUAL

    def test_smaller_candidate_is_better(self):
        assert (
            classify(make_range(4, 1, 5), make_range(4, 2, 4))
            is Classification.DECOMPOSED_BETTER
        )

    def test_larger_candidate_is_worse(self):
        assert (
            classify(make_range(4, 2, 4), make_range(4, 1, 5))
            is Classification.DECOMPOSED_WORSE
        )

    @pytest.mark.parametrize(
        "reference, candidate",
        [
            (make_range(4, 0, 3), make_range(4, 3, 5)),
            (make_range(4, 9, 12), make_range(4, 1, 9)),
        ],
    )
    def test_disjoint_results_are_incomparable(self, reference, candidate):
        assert classify(reference, candidate) is Classification.INCOMPARABLE

    def test_touching_results_are_comparable(self):
        assert (
            classify(make_range(4, 0, 4), make_range(4, 3, 4))
            is Classification.DECOMPOSED_BETTER
        )

    def test_empty_result_is_a_contract_violation(self):
        with pytest.raises(EmptyRangeError):
            classify(empty(4), make_range(4, 0, 1))

    def test_worked_example_pair(self):
        x, y = make_range(2, 1, 3), make_range(2, 2, 4)
        assert compare_pair(x, y) is Classification.EQUAL


class TestCounters:

    def test_record(self):
        c = ClassificationCounters()
        c.record(Classification.EQUAL)
        c.record(Classification.INCOMPARABLE)
        c.record(Classification.DECOMPOSED_WORSE)
        assert c.as_dict() == {
            "total": 3,
            "equal": 1,
            "decomposed_better": 0,
            "decomposed_worse": 1,
            "incomparable": 1,
        }
        assert c.is_conserved()

    def test_add_merges_fieldwise(self):
        a = ClassificationCounters(total=3, equal=2, decomposed_better=1)
        b = ClassificationCounters(total=2, decomposed_worse=1, incomparable=1)
        assert a + b == ClassificationCounters(5, 2, 1, 1, 1)
        assert merge([a, b]) == a + b == b + a
        assert merge([]) == ClassificationCounters()

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            ClassificationCounters() + 1

    def test_unbalanced_counters_detected(self):
        assert not ClassificationCounters(total=2, equal=1).is_conserved()


class TestRunComparison:

    def test_width_two_all_equal(self):
        assert run_comparison(2) == ClassificationCounters(36, 36, 0, 0, 0)

    def test_width_three_all_equal(self):
        counters = run_comparison(3)
        assert counters.total == 28 * 28
        assert counters.equal == counters.total
        assert counters.is_conserved()

    def test_exclusive_variant_width_two(self):
        counters = run_comparison(2, direct_uadd_sat, decomposed_uadd_sat_exclusive)
        assert counters == ClassificationCounters(
            total=36, equal=11, decomposed_better=25,
            decomposed_worse=0, incomparable=0,
        )

    def test_swapped_roles_flip_better_and_worse(self):
        forward = run_comparison(3, direct_uadd_sat, decomposed_uadd_sat_exclusive)
        backward = run_comparison(3, decomposed_uadd_sat_exclusive, direct_uadd_sat)
        assert forward.decomposed_better == backward.decomposed_worse > 0
        assert forward.equal == backward.equal
        assert forward.is_conserved() and backward.is_conserved()

    def test_unsound_candidate_yields_incomparable(self):
        counters = run_comparison(2, candidate=_always_max)
        assert counters == ClassificationCounters(
            total=36, equal=5, decomposed_better=16,
            decomposed_worse=0, incomparable=15,
        )

    def test_deterministic(self):
        first = run_comparison(3, direct_uadd_sat, decomposed_uadd_sat_exclusive)
        second = run_comparison(3, direct_uadd_sat, decomposed_uadd_sat_exclusive)
        assert first == second

    def test_outer_subset(self):
        counters = run_comparison(3, outer=[make_range(3, 0, 1)])
        assert counters.total == 28


class TestPartitioning:

    @pytest.mark.parametrize("parts", [1, 2, 3, 8, 20])
    def test_partition_covers_each_lower_once(self, parts):
        groups = partition_lows(3, parts)
        flat = sorted(lo for group in groups for lo in group)
        assert flat == list(range(max_value(3) + 1))
        assert all(groups)
        assert len(groups) == min(parts, 8)

    def test_groups_are_strided(self):
        assert partition_lows(3, 3) == [[0, 3, 6], [1, 4, 7], [2, 5]]

    def test_sequential_config(self):
        config = HarnessConfig(width=3, candidate="decomposed-exclusive")
        assert run_partitioned(config) == run_comparison(
            3, direct_uadd_sat, decomposed_uadd_sat_exclusive
        )

    def test_parallel_matches_sequential(self):
        config = HarnessConfig(width=3, candidate="decomposed-exclusive", workers=3)
        assert run_partitioned(config) == run_comparison(
            3, direct_uadd_sat, decomposed_uadd_sat_exclusive
        )

    def test_invalid_config_rejected_before_running(self):
        with pytest.raises(ConfigError):
            run_partitioned(HarnessConfig(width=0))


class TestHarnessConfig:

    def test_defaults(self):
        config = HarnessConfig().validate()
        assert (config.width, config.reference, config.candidate, config.workers) == (
            6, "direct", "decomposed", 1,
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0},
            {"width": 33},
            {"width": True},
            {"reference": "llvm"},
            {"candidate": "nope"},
            {"workers": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            HarnessConfig(**kwargs).validate()
