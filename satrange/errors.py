# satrange/errors.py
"""
Error types for the satrange range domain and comparison harness.

Error Hierarchy:
────────────────
┌─────────────────────────────────────────────────────────────────────────┐
│  SatRangeError (base)                                                    │
│  ├── DomainError        - Invalid construction parameters / widths       │
│  │   ├── EmptyRangeError - min/max requested on the empty range          │
│  │   └── WidthMismatch   - Ranges of different bit widths combined       │
│  └── ConfigError        - Invalid harness or CLI configuration           │
└─────────────────────────────────────────────────────────────────────────┘

Error Codes:
────────────
Each error has a code following the pattern SATR-XXXX:
  - 1000-1999: Range domain errors
  - 2000-2999: Configuration errors

Domain errors are contract violations: they are raised at construction or
operation boundaries and propagate to the caller.  The harness has no
recovery path for them.  A pair of results whose ranges do not overlap is
*not* an error; it is counted as ``incomparable``.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES
# ═══════════════════════════════════════════════════════════════════════════════

class ErrorCode:
    """Structured error code ``PREFIX-NNNN``."""

    __slots__ = ("prefix", "number", "summary")

    def __init__(self, prefix: str, number: int, summary: str) -> None:
        self.prefix = prefix
        self.number = number
        self.summary = summary

    @property
    def code(self) -> str:
        """Get the full error code string."""
        return f"{self.prefix}-{self.number:04d}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.summary!r})"

    def __hash__(self) -> int:
        return hash((self.prefix, self.number))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.prefix == other.prefix and self.number == other.number
        if isinstance(other, str):
            return self.code == other
        return False


class ErrorCodes:
    """Predefined error codes."""

    # ── Range domain (1000-1999) ─────────────────────────────────────────
    INVALID_WIDTH = ErrorCode("SATR", 1001, "bit width out of range")
    BOUND_OUT_OF_RANGE = ErrorCode("SATR", 1002, "bound outside [0, 2^w)")
    EMPTY_RANGE = ErrorCode("SATR", 1003, "operation undefined on empty range")
    WIDTH_MISMATCH = ErrorCode("SATR", 1004, "ranges have different bit widths")

    # ── Configuration (2000-2999) ────────────────────────────────────────
    INVALID_OPTION = ErrorCode("SATR", 2001, "invalid configuration value")
    UNKNOWN_ALGORITHM = ErrorCode("SATR", 2002, "unknown algorithm name")
    OUTPUT_UNWRITABLE = ErrorCode("SATR", 2003, "report destination cannot be opened")


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

class SatRangeError(Exception):
    """
    Base exception for all satrange errors.

    Carries a structured :class:`ErrorCode` and an optional hint, and
    renders as ``[SATR-NNNN] message``.
    """

    default_code: ErrorCode = ErrorCodes.INVALID_OPTION

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        hint: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.hint = hint

    def with_hint(self, hint: str) -> "SatRangeError":
        """Add a hint to this error."""
        self.hint = hint
        return self

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.hint:
            text += f" (hint: {self.hint})"
        return text


# ───────────────────────────────────────────────────────────────────────────────
# RANGE DOMAIN ERRORS
# ───────────────────────────────────────────────────────────────────────────────

class DomainError(SatRangeError):
    """Invalid construction parameters for a range."""

    default_code = ErrorCodes.BOUND_OUT_OF_RANGE


class EmptyRangeError(DomainError):
    """An operation that needs at least one element was given the empty range."""

    default_code = ErrorCodes.EMPTY_RANGE

    def __init__(self, operation: str, **kwargs) -> None:
        super().__init__(
            f"{operation}() is undefined on the empty range", **kwargs
        )
        self.operation = operation


class WidthMismatch(DomainError):
    """Two ranges of different bit widths were combined."""

    default_code = ErrorCodes.WIDTH_MISMATCH

    def __init__(self, left: int, right: int, operation: str = "", **kwargs) -> None:
        where = f" in {operation}()" if operation else ""
        super().__init__(
            f"bit width mismatch{where}: {left} vs {right}", **kwargs
        )
        self.left = left
        self.right = right


# ───────────────────────────────────────────────────────────────────────────────
# CONFIGURATION ERRORS
# ───────────────────────────────────────────────────────────────────────────────

class ConfigError(SatRangeError):
    """Invalid harness or command-line configuration."""

    default_code = ErrorCodes.INVALID_OPTION
