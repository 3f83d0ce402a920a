"""
satrange/range.py
═════════════════

Constant-range abstract domain over fixed-width unsigned integers.

A :class:`ConstantRange` of bit width ``w`` denotes one of

    ┌──────────────────────────────────────────────────────────────────┐
    │  Empty                   — ∅                                     │
    │  Full                    — {0, …, 2ʷ-1}                          │
    │  [lo, hi),  lo < hi      — {lo, …, hi-1}                         │
    │  [lo, hi),  lo > hi      — {lo, …, 2ʷ-1} ∪ {0, …, hi-1}          │
    └──────────────────────────────────────────────────────────────────┘

The upper bound is exclusive, so equal bounds cannot describe a finite
interval; they describe the Full set.  Empty is a separate flag.  Both
special values are stored with ``lower == upper == 0`` so that equality
of two ranges is equality of the sets they denote.

Concretisation:
    γ(Empty)      = ∅
    γ(Full)       = ℤ / 2ʷℤ
    γ([lo, hi))   = { (lo + k) mod 2ʷ  |  0 ≤ k < (hi - lo) mod 2ʷ }

Bounds are plain Python ints, so every intermediate sum or comparison
is done in unbounded arithmetic and reduced modulo 2ʷ explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Optional

from satrange.errors import (
    DomainError,
    EmptyRangeError,
    ErrorCodes,
    WidthMismatch,
)

# Largest width the enumeration harness accepts.
MAX_WIDTH: Final[int] = 32

# Ranges may be one bit wider than MAX_WIDTH: extend_width() needs the
# headroom to add two MAX_WIDTH ranges without wrapping.
MAX_DOMAIN_WIDTH: Final[int] = MAX_WIDTH + 1


def check_width(width: int, limit: int = MAX_DOMAIN_WIDTH) -> int:
    """Validate a bit width, returning it unchanged."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise DomainError(
            f"bit width must be an int, got {type(width).__name__}",
            code=ErrorCodes.INVALID_WIDTH,
        )
    if not 1 <= width <= limit:
        raise DomainError(
            f"bit width {width} outside [1, {limit}]",
            code=ErrorCodes.INVALID_WIDTH,
        )
    return width


@dataclass(frozen=True, slots=True)
class ConstantRange:
    """
    Half-open, possibly wrapping interval ``[lower, upper)`` modulo 2ʷ.

    Examples
    --------
    >>> r = ConstantRange(3, 1, 4)
    >>> r
    ConstantRange<3>[1, 4)
    >>> r.unsigned_min(), r.unsigned_max()
    (1, 3)
    >>> r.add(ConstantRange(3, 6, 7))
    ConstantRange<3>[7, 2)
    >>> ConstantRange(3, 5, 5).is_full()
    True
    """
    width: int
    lower: int
    upper: int
    empty: bool = False

    def __post_init__(self) -> None:
        check_width(self.width)
        modulus = 1 << self.width
        for name, value in (("lower", self.lower), ("upper", self.upper)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise DomainError(f"{name} bound must be an int, got {value!r}")
            if not 0 <= value < modulus:
                raise DomainError(
                    f"{name} bound {value} outside [0, {modulus}) "
                    f"for width {self.width}"
                )
        # Canonical form for Empty / Full.  frozen=True, hence object.__setattr__.
        if self.empty or self.lower == self.upper:
            object.__setattr__(self, "lower", 0)
            object.__setattr__(self, "upper", 0)

    # ---- Constructors ----------------------------------------------------

    @classmethod
    def empty_set(cls, width: int) -> ConstantRange:
        """The empty range ∅."""
        return cls(width, 0, 0, empty=True)

    @classmethod
    def full_set(cls, width: int) -> ConstantRange:
        """Every value of the given width."""
        return cls(width, 0, 0)

    @classmethod
    def single(cls, width: int, value: int) -> ConstantRange:
        """Singleton ``{value}``, i.e. ``[value, value + 1)``."""
        check_width(width)
        if not 0 <= value < (1 << width):
            raise DomainError(
                f"value {value} outside [0, {1 << width}) for width {width}"
            )
        return cls(width, value, (value + 1) % (1 << width))

    @classmethod
    def non_empty(cls, width: int, lower: int, upper: int) -> ConstantRange:
        """``[lower, upper)``, Full when the bounds are equal."""
        return make_range(width, lower, upper)

    @classmethod
    def abstract(cls, width: int, values: Iterable[int]) -> ConstantRange:
        """
        Smallest non-wrapping range holding every value in *values*.

        An empty iterable gives the empty range.
        """
        check_width(width)
        lo: Optional[int] = None
        hi: Optional[int] = None
        for v in values:
            if not 0 <= v < (1 << width):
                raise DomainError(
                    f"value {v} outside [0, {1 << width}) for width {width}"
                )
            if lo is None or v < lo:
                lo = v
            if hi is None or v > hi:
                hi = v
        if lo is None:
            return cls.empty_set(width)
        # hi + 1 may equal 2ʷ; make_range reduces it.
        return make_range(width, lo, hi + 1)

    # ---- Properties -------------------------------------------------------

    @property
    def modulus(self) -> int:
        """2ʷ."""
        return 1 << self.width

    @property
    def max_value(self) -> int:
        """Largest representable value, 2ʷ - 1."""
        return (1 << self.width) - 1

    # ---- Predicates ------------------------------------------------------

    def is_empty(self) -> bool:
        return self.empty

    def is_full(self) -> bool:
        return not self.empty and self.lower == self.upper

    def is_upper_wrapped(self) -> bool:
        """``lower > upper``; includes ``[lo, 0)`` which reaches 2ʷ-1 only."""
        return self.lower > self.upper

    def is_wrapped(self) -> bool:
        """Does the set actually contain both 2ʷ-1 and 0?"""
        return self.lower > self.upper and self.upper != 0

    def is_single(self) -> bool:
        return self.size() == 1

    def single_value(self) -> Optional[int]:
        """The element of a singleton range, else ``None``."""
        if self.is_single():
            return self.lower
        return None

    def contains(self, value: int) -> bool:
        """Is the concrete value *value* an element of this range?"""
        if self.empty or not 0 <= value < self.modulus:
            return False
        if self.is_full():
            return True
        if self.lower < self.upper:
            return self.lower <= value < self.upper
        return value >= self.lower or value < self.upper

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def size(self) -> int:
        """Number of concrete values in the range."""
        if self.empty:
            return 0
        if self.is_full():
            return self.modulus
        return (self.upper - self.lower) % self.modulus

    # ---- Unsigned bounds -------------------------------------------------

    def unsigned_min(self) -> int:
        """Smallest element.  Raises :class:`EmptyRangeError` on ∅."""
        if self.empty:
            raise EmptyRangeError("unsigned_min")
        if self.is_full() or self.is_wrapped():
            return 0
        return self.lower

    def unsigned_max(self) -> int:
        """Largest element.  Raises :class:`EmptyRangeError` on ∅."""
        if self.empty:
            raise EmptyRangeError("unsigned_max")
        if self.is_full() or self.is_upper_wrapped():
            return self.max_value
        return self.upper - 1

    # ---- Width changes ---------------------------------------------------

    def extend_width(self, bits: int = 1) -> ConstantRange:
        """
        Zero-extend to ``width + bits``.

        A range that does not cross 2ʷ-1 → 0 keeps its numeric bounds.
        Full and wrapped ranges become ``[0, 2ʷ)`` in the wider width,
        and ``[lo, 0)`` becomes ``[lo, 2ʷ)``.
        """
        if bits < 1:
            raise DomainError(f"extend_width() needs bits >= 1, got {bits}")
        new_width = check_width(self.width + bits)
        if self.empty:
            return ConstantRange.empty_set(new_width)
        if self.is_full() or self.is_wrapped():
            return ConstantRange(new_width, 0, self.modulus)
        if self.is_upper_wrapped():
            return ConstantRange(new_width, self.lower, self.modulus)
        return ConstantRange(new_width, self.lower, self.upper)

    # ---- Abstract arithmetic ---------------------------------------------

    def add(self, other: ConstantRange) -> ConstantRange:
        """
        Wrapping sum ``{(a + b) mod 2ʷ | a ∈ self, b ∈ other}``.

        The image of two contiguous modular intervals is contiguous, of
        size ``|self| + |other| - 1``; once that reaches 2ʷ every value
        is hit.
        """
        if self.width != other.width:
            raise WidthMismatch(self.width, other.width, "add")
        if self.empty or other.empty:
            return ConstantRange.empty_set(self.width)
        if self.is_full() or other.is_full():
            return ConstantRange.full_set(self.width)
        size = self.size() + other.size() - 1
        if size >= self.modulus:
            return ConstantRange.full_set(self.width)
        lower = (self.lower + other.lower) % self.modulus
        return ConstantRange(self.width, lower, (lower + size) % self.modulus)

    def __add__(self, other: ConstantRange) -> ConstantRange:
        return self.add(other)

    def __repr__(self) -> str:
        if self.empty:
            return f"ConstantRange<{self.width}>(empty)"
        if self.is_full():
            return f"ConstantRange<{self.width}>(full)"
        return f"ConstantRange<{self.width}>[{self.lower}, {self.upper})"


# ═══════════════════════════════════════════════════════════════════════════
#  Module-level constructors
# ═══════════════════════════════════════════════════════════════════════════

def make_range(width: int, lo: int, hi: int) -> ConstantRange:
    """
    Build ``[lo, hi)`` at *width*.

    *hi* may be 2ʷ, meaning "through the maximum value"; it is reduced
    to 0.  ``lo == hi`` gives the Full set.
    """
    check_width(width)
    modulus = 1 << width
    if not 0 <= lo < modulus:
        raise DomainError(f"lower bound {lo} outside [0, {modulus}) for width {width}")
    if not 0 <= hi <= modulus:
        raise DomainError(f"upper bound {hi} outside [0, {modulus}] for width {width}")
    return ConstantRange(width, lo, hi % modulus)


def empty(width: int) -> ConstantRange:
    return ConstantRange.empty_set(width)


def full(width: int) -> ConstantRange:
    return ConstantRange.full_set(width)
