"""
satrange/config.py — harness configuration.

A single frozen record; the CLI builds one from its parsed arguments and
the harness consumes it.  There are no environment variables.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from satrange.errors import ConfigError
from satrange.range import MAX_WIDTH
from satrange.saturating import ALGORITHMS, get_algorithm

DEFAULT_WIDTH: int = 6


@dataclass(frozen=True)
class HarnessConfig:
    """Parameters of one comparison run."""
    width: int = DEFAULT_WIDTH
    reference: str = "direct"
    candidate: str = "decomposed"
    workers: int = 1

    def validate(self) -> "HarnessConfig":
        """Raise :class:`ConfigError` on invalid values; return ``self``."""
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigError(f"width must be an int, got {self.width!r}")
        if not 1 <= self.width <= MAX_WIDTH:
            raise ConfigError(
                f"width {self.width} outside [1, {MAX_WIDTH}]",
                hint="the harness materialises every range of the width",
            )
        for name in (self.reference, self.candidate):
            get_algorithm(name)
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "HarnessConfig":
        return cls(
            width=args.width,
            reference=args.reference,
            candidate=args.candidate,
            workers=args.workers,
        ).validate()


def algorithm_names() -> list:
    return sorted(ALGORITHMS)
