"""
satrange/report.py — render classification counters.

Formats
-------
plain
    The five counters, one integer per line: total, equal,
    decomposed-better, decomposed-worse, incomparable.
labeled
    The same five values with a human-readable label on each line.  The
    worse count is labelled "decomposed worse" and every line takes a
    colon.
json
    A JSON object keyed by counter name.
"""

from __future__ import annotations

import json
from typing import Callable, Dict, TextIO

from satrange.harness import ClassificationCounters

_ORDER = ("total", "equal", "decomposed_better", "decomposed_worse", "incomparable")

_LABELS = {
    "total": "Num abstract value pairs tested",
    "equal": "Num with equal result",
    "decomposed_better": "Num decomposed better",
    "decomposed_worse": "Num decomposed worse",
    "incomparable": "Num incomparable results",
}


def format_plain(counters: ClassificationCounters) -> str:
    values = counters.as_dict()
    return "".join(f"{values[name]}\n" for name in _ORDER)


def format_labeled(counters: ClassificationCounters) -> str:
    values = counters.as_dict()
    return "".join(f"{_LABELS[name]}: {values[name]}\n" for name in _ORDER)


def format_json(counters: ClassificationCounters) -> str:
    values = counters.as_dict()
    return json.dumps({name: values[name] for name in _ORDER}, indent=2) + "\n"


FORMATTERS: Dict[str, Callable[[ClassificationCounters], str]] = {
    "plain": format_plain,
    "labeled": format_labeled,
    "json": format_json,
}


def write_report(
    counters: ClassificationCounters, stream: TextIO, fmt: str = "plain"
) -> None:
    """Write *counters* to *stream* in format *fmt*."""
    stream.write(FORMATTERS[fmt](counters))
