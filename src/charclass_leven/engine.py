from __future__ import annotations

"""Levenshtein distance with costs weighted by character class.

A mismatch costs the configured penalty when the classification rule flags
either of the two characters in the cell, and 1 otherwise. Matches are always
free, and the first row and column of the table keep unit costs.
"""

from collections import abc
from typing import Callable, List, Optional, Sequence, Union

from .config import CharClassConfig, CharClassMode
from .utils.logging import get_logger

SequenceLike = Union[str, bytes, bytearray, memoryview, Sequence[int]]
Predicate = Callable[[int], bool]

logger = get_logger("engine")


class LengthOverflowError(OverflowError):
    """Raised when a trimmed operand is too long to index the distance table."""


def as_code_units(seq: SequenceLike) -> Sequence[int]:
    """Return *seq* as an indexable sequence of integer code units."""

    if isinstance(seq, str):
        return [ord(ch) for ch in seq]
    if isinstance(seq, (bytes, bytearray)):
        return seq
    if isinstance(seq, memoryview):
        return seq.tobytes()
    if not isinstance(seq, abc.Sequence):
        raise TypeError(f"Cannot compute a distance over {type(seq).__name__}")
    units = list(seq)
    for unit in units:
        if not isinstance(unit, int) or isinstance(unit, bool) or unit < 0:
            raise TypeError(f"Code units must be non-negative ints, got {unit!r}")
    return units


def classification_rule(config: CharClassConfig) -> Predicate:
    """Build the ``penalized(unit)`` predicate for *config*.

    In ``BOTH`` mode the whitelist rule is applied after the blacklist rule
    and neither can lift a penalty set by the other.
    """

    blacklist = config.blacklist_chars
    whitelist = config.whitelist_chars
    if config.mode is CharClassMode.BLACKLIST:
        return lambda unit: unit in blacklist
    if config.mode is CharClassMode.WHITELIST:
        return lambda unit: unit not in whitelist
    if config.mode is CharClassMode.BOTH:
        return lambda unit: unit in blacklist or unit not in whitelist
    return lambda unit: False


class WeightedLevenshtein:
    """Distance engine bound to one immutable configuration."""

    def __init__(self, config: Optional[CharClassConfig] = None) -> None:
        self.config = config or CharClassConfig()
        self._penalized = classification_rule(self.config)

    def penalized(self, unit: Union[int, str]) -> bool:
        if isinstance(unit, str):
            unit = ord(unit)
        return self._penalized(unit)

    def distance(self, a: SequenceLike, b: SequenceLike) -> int:
        units_a = as_code_units(a)
        units_b = as_code_units(b)
        m, n = len(units_a), len(units_b)

        # Keep the shorter operand as the row width.
        if m > n:
            units_a, units_b = units_b, units_a
            m, n = n, m

        start = 0
        while start < m and units_a[start] == units_b[start]:
            start += 1
        m -= start
        n -= start
        while m > 0 and units_a[start + m - 1] == units_b[start + n - 1]:
            m -= 1
            n -= 1

        limit = self.config.max_length
        if m > limit or n > limit:
            logger.warning("Trimmed operand length %d exceeds table limit %d", n, limit)
            raise LengthOverflowError(
                f"String too long in Levenshtein distance: {n} > {limit}"
            )
        if m == 0:
            return n

        logger.debug("Filling %d x %d table (%d common prefix units)", m, n, start)
        row_units = units_a[start : start + m]
        col_units = units_b[start : start + n]
        row_flags = [self._penalized(unit) for unit in row_units]
        penalty = self.config.penalty

        previous: List[int] = list(range(m + 1))
        current: List[int] = [0] * (m + 1)
        for j in range(1, n + 1):
            unit_b = col_units[j - 1]
            flag_b = self._penalized(unit_b)
            current[0] = j
            for i in range(1, m + 1):
                if row_units[i - 1] == unit_b:
                    current[i] = previous[i - 1]
                else:
                    weight = penalty if flag_b or row_flags[i - 1] else 1
                    current[i] = weight + min(current[i - 1], previous[i], previous[i - 1])
            previous, current = current, previous
        return previous[m]

    def normalized_distance(self, a: SequenceLike, b: SequenceLike) -> float:
        """Distance scaled into ``[0, 1]`` by the worst case for these lengths."""

        longest = max(len(as_code_units(a)), len(as_code_units(b)))
        if longest == 0:
            return 0.0
        worst = self.config.penalty if self.config.mode is not CharClassMode.NONE else 1
        return self.distance(a, b) / (worst * longest)

    __call__ = distance


def distance(
    a: SequenceLike, b: SequenceLike, config: Optional[CharClassConfig] = None
) -> int:
    """Weighted Levenshtein distance between *a* and *b* under *config*."""

    return WeightedLevenshtein(config).distance(a, b)


def normalized_distance(
    a: SequenceLike, b: SequenceLike, config: Optional[CharClassConfig] = None
) -> float:
    return WeightedLevenshtein(config).normalized_distance(a, b)


def levenshtein(a: SequenceLike, b: SequenceLike) -> int:
    """Classic unit-cost distance, computed by the same trimmed two-row routine."""

    return WeightedLevenshtein().distance(a, b)
