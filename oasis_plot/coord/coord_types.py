################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Value types shared by the temporal coordinates
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any
from typing import Optional
from typing import Tuple

import numpy as np


# Nanoseconds per microsecond, the resolution of datetime values
NS_PER_US: int = 1_000

# Nanoseconds per second
NS_PER_S: int = 1_000_000_000

# Nanoseconds per day
NS_PER_DAY: int = 86_400 * NS_PER_S

# Nanoseconds per week
NS_PER_WEEK: int = 7 * NS_PER_DAY

# Bounds of a signed 64-bit nanosecond count
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

# Bounds of a signed 32-bit pixel coordinate
I32_MIN: int = -(2**31)
I32_MAX: int = 2**31 - 1


# Device coordinate interval (lo, hi) with lo inclusive
PixelRange = Tuple[int, int]


def fits_i64(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX


def saturate_i32(value: int) -> int:
    """Clamp an integer to the signed 32-bit range."""
    return max(I32_MIN, min(I32_MAX, value))


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient: int = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def timedelta_to_ns(delta: timedelta) -> int:
    return (
        delta.days * NS_PER_DAY
        + delta.seconds * NS_PER_S
        + delta.microseconds * NS_PER_US
    )


@dataclass(frozen=True, order=True)
class Duration:
    """
    Signed elapsed time with exact nanosecond precision

    The count itself is unbounded, but the accessors behave like a
    fixed-width duration: the nanosecond view is only available while the
    count fits a signed 64-bit integer, which limits it to roughly 292 years.

    Fields:
        ns: Elapsed time in nanoseconds, negative for spans before the origin
    """

    ns: int

    @classmethod
    def of_days(cls, days: int) -> Duration:
        return cls(ns=days * NS_PER_DAY)

    @classmethod
    def of_weeks(cls, weeks: int) -> Duration:
        return cls(ns=weeks * NS_PER_WEEK)

    @classmethod
    def of_seconds(cls, seconds: int) -> Duration:
        return cls(ns=seconds * NS_PER_S)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        return cls(ns=timedelta_to_ns(delta))

    @classmethod
    def from_timedelta64(cls, delta: np.timedelta64) -> Duration:
        """Convert a numpy timedelta, rejecting NaT."""
        if np.isnat(delta):
            raise ValueError("Duration cannot be built from NaT")
        return cls(ns=int(delta.astype("timedelta64[ns]").astype(np.int64)))

    def num_nanoseconds(self) -> Optional[int]:
        """Return the nanosecond count, or None if it overflows 64 bits."""
        if not fits_i64(self.ns):
            return None
        return self.ns

    def num_days(self) -> int:
        """Return the number of whole days, truncated toward zero."""
        return trunc_div(self.ns, NS_PER_DAY)

    def num_weeks(self) -> int:
        """Return the number of whole weeks, truncated toward zero."""
        return trunc_div(self.ns, NS_PER_WEEK)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, dropping sub-microsecond precision."""
        return timedelta(microseconds=trunc_div(self.ns, NS_PER_US))

    def __add__(self, other: Duration) -> Duration:
        return Duration(ns=self.ns + other.ns)

    def __sub__(self, other: Duration) -> Duration:
        return Duration(ns=self.ns - other.ns)

    def __neg__(self) -> Duration:
        return Duration(ns=-self.ns)


def as_duration(value: Any) -> Duration:
    """Coerce a Duration, timedelta or numpy timedelta64 to a Duration."""
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    if isinstance(value, np.timedelta64):
        return Duration.from_timedelta64(value)
    raise TypeError(f"Unsupported duration type: {type(value).__name__}")
