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
Calendar instant capability used by the temporal coordinates

Any calendar-bound instant type is handled through a TimeValue: an object
that knows how to floor and ceil an instant to a date, build the earliest
instant on a date, subtract two instants and report the timezone. The linear
pixel mapping shared by every coordinate is written once against this
interface.
"""

from __future__ import annotations

import abc
import math
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta
from datetime import timezone
from datetime import tzinfo
from typing import Any
from typing import Generic
from typing import Optional
from typing import TypeVar

from oasis_plot.coord.coord_params import ROUNDING_EPSILON
from oasis_plot.coord.coord_types import NS_PER_S
from oasis_plot.coord.coord_types import NS_PER_US
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.coord_types import saturate_i32
from oasis_plot.coord.coord_types import trunc_div


T = TypeVar("T")


def project(
    offset: int, total: int, limit: PixelRange, epsilon: float = ROUNDING_EPSILON
) -> int:
    """
    Project an offset within a total span onto a pixel range

    Epsilon is added away from zero before the scaled position is truncated
    toward zero, so a reversed pixel range is the exact mirror of the forward
    one. The result is shifted by the lower pixel bound. A zero-width span
    maps to the lower bound.
    """
    lo, hi = limit
    if total == 0:
        return lo
    scaled: float = float(hi - lo) * float(offset) / float(total)
    return saturate_i32(lo + int(scaled + math.copysign(epsilon, scaled)))


def map_span(
    value_span: Duration,
    total_span: Duration,
    limit: PixelRange,
    epsilon: float = ROUNDING_EPSILON,
) -> int:
    """
    Map an offset duration onto a pixel range

    Nanosecond precision is used while the total span fits 64 bits, with the
    exact offset however far it lies outside the span. Beyond that the span is
    centuries long and the sub-day part is dropped.
    """
    total_ns: Optional[int] = total_span.num_nanoseconds()
    if total_ns is not None:
        return project(value_span.ns, total_ns, limit, epsilon)

    return project(value_span.num_days(), total_span.num_days(), limit, epsilon)


class TimeValue(abc.ABC, Generic[T]):
    """Capability contract for an instant type bound to a calendar."""

    # Finest step the instant type can represent
    resolution_ns: int = 1

    @abc.abstractmethod
    def date_floor(self, value: T) -> date:
        """Return the latest date not after the value."""

    @abc.abstractmethod
    def date_ceil(self, value: T) -> date:
        """Return the earliest date not before the value."""

    @abc.abstractmethod
    def earliest_after_date(self, day: date, tz: Optional[tzinfo]) -> T:
        """Return the earliest instant on the given date."""

    @abc.abstractmethod
    def subtract(self, value: T, other: T) -> Duration:
        """Return value - other."""

    @abc.abstractmethod
    def timezone(self, value: T) -> Optional[tzinfo]:
        """Return the timezone the value is bound to."""

    def map_coord(
        self,
        value: T,
        begin: T,
        end: T,
        limit: PixelRange,
        epsilon: float = ROUNDING_EPSILON,
    ) -> int:
        """Map a value linearly from [begin, end) onto the pixel range."""
        total_span: Duration = self.subtract(end, begin)
        value_span: Duration = self.subtract(value, begin)
        return map_span(value_span, total_span, limit, epsilon)


class DateValue(TimeValue[date]):
    """
    Date-only instants

    Plain dates carry no timezone, so they report None and every date
    operation is the identity.
    """

    def date_floor(self, value: date) -> date:
        return value

    def date_ceil(self, value: date) -> date:
        return value

    def earliest_after_date(self, day: date, tz: Optional[tzinfo]) -> date:
        return day

    def subtract(self, value: date, other: date) -> Duration:
        return Duration.of_days((value - other).days)

    def timezone(self, value: date) -> Optional[tzinfo]:
        return None


class DateTimeValue(TimeValue[datetime]):
    """
    Date-time instants, naive or timezone-aware

    Differences between aware values are absolute elapsed time. Dates are
    taken in the value's own timezone.
    """

    resolution_ns = NS_PER_US

    def date_floor(self, value: datetime) -> date:
        return value.date()

    def date_ceil(self, value: datetime) -> date:
        if value.time() > time(0):
            return value.date() + timedelta(days=1)
        return value.date()

    def earliest_after_date(self, day: date, tz: Optional[tzinfo]) -> datetime:
        return datetime.combine(day, time(0), tzinfo=tz)

    def subtract(self, value: datetime, other: datetime) -> Duration:
        if value.tzinfo is not None and other.tzinfo is not None:
            value = value.astimezone(timezone.utc)
            other = other.astimezone(timezone.utc)
        return Duration.from_timedelta(value - other)

    def timezone(self, value: datetime) -> Optional[tzinfo]:
        return value.tzinfo

    def time_of_day_ns(self, value: datetime) -> int:
        """Return the wall-clock time since midnight in nanoseconds."""
        seconds: int = value.hour * 3_600 + value.minute * 60 + value.second
        return seconds * NS_PER_S + value.microsecond * NS_PER_US

    def add_wall_clock(self, value: datetime, offset_ns: int) -> datetime:
        """Advance the wall-clock reading, ignoring offset transitions."""
        return value + timedelta(microseconds=trunc_div(offset_ns, NS_PER_US))

    def add_elapsed(self, value: datetime, offset_ns: int) -> datetime:
        """Advance by absolute elapsed time, keeping the value's timezone."""
        step: timedelta = timedelta(microseconds=trunc_div(offset_ns, NS_PER_US))
        if value.tzinfo is None:
            return value + step
        return (value.astimezone(timezone.utc) + step).astimezone(value.tzinfo)


DATE_VALUE: DateValue = DateValue()
DATETIME_VALUE: DateTimeValue = DateTimeValue()


def time_value_for(value: Any) -> TimeValue[Any]:
    """Return the capability for an instant, checking datetime before date."""
    if isinstance(value, datetime):
        return DATETIME_VALUE
    if isinstance(value, date):
        return DATE_VALUE
    raise TypeError(f"Unsupported time value type: {type(value).__name__}")