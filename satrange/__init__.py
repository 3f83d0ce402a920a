"""
satrange — Precision of saturating addition over constant ranges
=================================================================

This package compares two ways of computing unsigned saturating addition
over the constant-range abstract domain (half-open, possibly wrapping
intervals of fixed-width unsigned integers), by enumerating every range
pair of a small bit width and classifying which result is tighter.

Core modules
------------
errors
    Error hierarchy and structured error codes.
range
    The ``ConstantRange`` domain: construction, min/max, wrapping add,
    zero-extension.
concrete
    Concrete sets and cardinality of a range.
saturating
    ``direct_uadd_sat``, ``decomposed_uadd_sat`` and friends.
enumeration
    Every non-empty, non-full, non-wrapping range of a width.
config
    ``HarnessConfig``.
harness
    Pair classification and the counting loop.
report
    Plain / labelled / JSON rendering of the counters.

Quick start
-----------
>>> from satrange import make_range, direct_uadd_sat, decomposed_uadd_sat
>>> x, y = make_range(2, 1, 3), make_range(2, 2, 4)
>>> direct_uadd_sat(x, y) == decomposed_uadd_sat(x, y)
True
>>> from satrange import run_comparison
>>> run_comparison(2).as_dict()["total"]
36
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING, List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__license__ = "MIT"
__all__: List[str] = []          # populated below

_log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# (module_name, list_of_names_to_re-export).  Order matters: later modules
# import earlier ones.
# ---------------------------------------------------------------------------

_CORE_MODULES = {
    "errors": [
        "SatRangeError",
        "DomainError",
        "EmptyRangeError",
        "WidthMismatch",
        "ConfigError",
        "ErrorCode",
        "ErrorCodes",
    ],
    "range": [
        "ConstantRange",
        "MAX_WIDTH",
        "make_range",
        "empty",
        "full",
    ],
    "concrete": [
        "concretize",
        "cardinality",
        "hull_cardinality",
    ],
    "saturating": [
        "saturate",
        "direct_uadd_sat",
        "decomposed_uadd_sat",
        "decomposed_uadd_sat_exclusive",
        "exact_uadd_sat",
        "is_sound",
        "ALGORITHMS",
        "get_algorithm",
    ],
    "enumeration": [
        "all_ranges",
        "max_value",
        "range_count",
        "ranges_with_lower",
    ],
    "config": [
        "HarnessConfig",
    ],
    "harness": [
        "Classification",
        "ClassificationCounters",
        "classify",
        "compare_pair",
        "run_comparison",
        "run_partitioned",
        "merge",
    ],
    "report": [
        "write_report",
        "format_plain",
        "format_labeled",
        "format_json",
    ],
}


def _import_names(module_rel_name: str, names: List[str]) -> None:
    """Import *names* from a submodule and bind them in the package namespace."""
    fq_name = f"{__name__}.{module_rel_name}"
    try:
        mod = importlib.import_module(fq_name)
    except ImportError as exc:
        raise ImportError(
            f"satrange: required submodule '{module_rel_name}' "
            f"failed to import: {exc}"
        ) from exc

    current_module = sys.modules[__name__]
    for name in names:
        if not hasattr(mod, name):
            raise AttributeError(f"satrange.{module_rel_name} does not export '{name}'")
        setattr(current_module, name, getattr(mod, name))
        __all__.append(name)
    _log.debug("Loaded satrange.%s (%d names)", module_rel_name, len(names))


for _mod, _names in _CORE_MODULES.items():
    _import_names(_mod, _names)

del _mod, _names


def list_submodules() -> List[str]:
    """Return the names of the re-exported submodules."""
    return sorted(_CORE_MODULES)


__all__ += ["list_submodules", "__version__"]

# ---------------------------------------------------------------------------
# TYPE_CHECKING block: full visibility for static checkers.
# ---------------------------------------------------------------------------

if TYPE_CHECKING:
    from .errors import (
        SatRangeError as SatRangeError,
        DomainError as DomainError,
        EmptyRangeError as EmptyRangeError,
        WidthMismatch as WidthMismatch,
        ConfigError as ConfigError,
        ErrorCode as ErrorCode,
        ErrorCodes as ErrorCodes,
    )
    from .range import (
        ConstantRange as ConstantRange,
        MAX_WIDTH as MAX_WIDTH,
        make_range as make_range,
        empty as empty,
        full as full,
    )
    from .concrete import (
        concretize as concretize,
        cardinality as cardinality,
        hull_cardinality as hull_cardinality,
    )
    from .saturating import (
        saturate as saturate,
        direct_uadd_sat as direct_uadd_sat,
        decomposed_uadd_sat as decomposed_uadd_sat,
        decomposed_uadd_sat_exclusive as decomposed_uadd_sat_exclusive,
        exact_uadd_sat as exact_uadd_sat,
        is_sound as is_sound,
        ALGORITHMS as ALGORITHMS,
        get_algorithm as get_algorithm,
    )
    from .enumeration import (
        all_ranges as all_ranges,
        max_value as max_value,
        range_count as range_count,
        ranges_with_lower as ranges_with_lower,
    )
    from .config import HarnessConfig as HarnessConfig
    from .harness import (
        Classification as Classification,
        ClassificationCounters as ClassificationCounters,
        classify as classify,
        compare_pair as compare_pair,
        run_comparison as run_comparison,
        run_partitioned as run_partitioned,
        merge as merge,
    )
    from .report import (
        write_report as write_report,
        format_plain as format_plain,
        format_labeled as format_labeled,
        format_json as format_json,
    )
