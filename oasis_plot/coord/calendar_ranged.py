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
Calendar-aligned decorators for date and date-time intervals

Monthly and Yearly wrap an interval of any supported instant type and
replace its key points with ticks on the first day of a month. Both first
normalize the interval to whole days: begin is ceiled to a date and moved to
the first of the following month unless it already is a first, and end is
floored to a date.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from datetime import tzinfo
from typing import Any
from typing import Optional
from typing import Sequence
from typing import TypeVar

from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_params import YEARLY_MULTIPLIERS
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.ranged import DiscreteRanged
from oasis_plot.coord.time_value import TimeValue
from oasis_plot.coord.time_value import time_value_for


_LOG: logging.Logger = logging.getLogger(__name__)


T = TypeVar("T")


def carry_month(year: int, month: int) -> tuple[int, int]:
    """Fold a month number outside 1..12 into the year."""
    return year + (month - 1) // 12, (month - 1) % 12 + 1


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the length of the month."""
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def generate_monthly_key_points(
    time_value: TimeValue[T],
    start_year: int,
    start_month: int,
    end_year: int,
    end_month: int,
    step: int,
    tz: Optional[tzinfo],
) -> list[T]:
    """Emit the first of every step-th month from start through end."""
    points: list[T] = []
    year: int = start_year
    month: int = start_month
    while end_year > year or (end_year == year and end_month >= month):
        points.append(time_value.earliest_after_date(date(year, month, 1), tz))
        year, month = carry_month(year, month + step)
    return points


def generate_yearly_key_points(
    time_value: TimeValue[T],
    max_points: int,
    start_year: int,
    start_month: int,
    end_year: int,
    end_month: int,
    tz: Optional[tzinfo],
    multipliers: Sequence[int] = YEARLY_MULTIPLIERS,
) -> list[T]:
    """
    Emit yearly ticks stepping by 1, 2, 5 or 10 times a power of ten

    Every tick falls on the first of start_month. A trailing partial year,
    where the end month is before the start month, is not counted.

    Args:
        time_value: Capability of the instant type to emit
        max_points: Desired upper bound on the number of ticks
        start_year: Year of the first tick
        start_month: Month every tick is placed in
        end_year: Year of the last normalized date
        end_month: Month of the last normalized date
        tz: Timezone of the emitted instants
        multipliers: Multipliers of each power of ten, ending at 10

    Returns:
        The increasing list of ticks
    """
    if max_points <= 0:
        return []

    if start_month > end_month:
        end_year -= 1

    total_years: int = end_year - start_year + 1

    exp10: int = 1
    while total_years // (exp10 * 10) > max_points:
        exp10 *= 10

    freq: int = exp10 * multipliers[-1]
    for multiplier in multipliers:
        if total_years // (exp10 * multiplier) <= max_points:
            freq = exp10 * multiplier
            break

    points: list[T] = []
    year: int = start_year
    while year <= end_year:
        points.append(time_value.earliest_after_date(date(year, start_month, 1), tz))
        year += freq
    return points


class _CalendarRanged(DiscreteRanged[T]):
    """Shared state of the calendar decorators."""

    def __init__(self, begin: T, end: T, params: Optional[CoordParams] = None) -> None:
        super().__init__(begin, end, params)
        self._time_value: TimeValue[Any] = time_value_for(begin)

    def map(self, value: T, limit: PixelRange) -> int:
        return self._time_value.map_coord(
            value, self._begin, self._end, limit, self._params.rounding_epsilon
        )

    def _timezone(self) -> Optional[tzinfo]:
        return self._time_value.timezone(self._begin)

    def _normalized_months(self) -> tuple[int, int, int, int]:
        """Return start year/month and end year/month of the whole-day span."""
        start_date: date = self._time_value.date_ceil(self._begin)
        end_date: date = self._time_value.date_floor(self._end)

        start_year: int = start_date.year
        start_month: int = start_date.month
        if start_date.day != 1:
            start_year, start_month = carry_month(start_year, start_month + 1)

        return start_year, start_month, end_date.year, end_date.month


class Monthly(_CalendarRanged[T]):
    """
    Interval with month resolution

    Ticks fall on the first of every month, quarter or half year, whichever
    is the first to fit the point budget. Longer spans fall back to yearly
    ticks.
    """

    def key_points(self, max_points: int) -> list[T]:
        if max_points <= 0 or self.is_empty():
            _LOG.debug("No monthly key points for budget=%d", max_points)
            return []

        start_year, start_month, end_year, end_month = self._normalized_months()
        total_months: int = (end_year - start_year) * 12 + end_month - start_month

        for step in self._params.monthly_steps:
            if total_months <= max_points * step:
                return generate_monthly_key_points(
                    self._time_value,
                    start_year,
                    start_month,
                    end_year,
                    end_month,
                    step,
                    self._timezone(),
                )

        _LOG.debug(
            "Span of %d months exceeds monthly ticks, using yearly ticks",
            total_months,
        )
        return generate_yearly_key_points(
            self._time_value,
            max_points,
            start_year,
            start_month,
            end_year,
            end_month,
            self._timezone(),
            self._params.yearly_multipliers,
        )

    def next_value(self, value: T) -> T:
        """Advance one month, clamping the day to the target month."""
        ceil: date = self._time_value.date_ceil(value)
        year, month = carry_month(ceil.year, ceil.month + 1)
        return self._time_value.earliest_after_date(
            clamp_day(year, month, ceil.day), self._time_value.timezone(value)
        )

    def previous_value(self, value: T) -> T:
        """Retreat one month, clamping the day to the target month."""
        floor: date = self._time_value.date_floor(value)
        year, month = carry_month(floor.year, floor.month - 1)
        return self._time_value.earliest_after_date(
            clamp_day(year, month, floor.day), self._time_value.timezone(value)
        )


class Yearly(_CalendarRanged[T]):
    """Interval with year resolution."""

    def key_points(self, max_points: int) -> list[T]:
        if max_points <= 0 or self.is_empty():
            _LOG.debug("No yearly key points for budget=%d", max_points)
            return []

        start_year, start_month, end_year, end_month = self._normalized_months()
        return generate_yearly_key_points(
            self._time_value,
            max_points,
            start_year,
            start_month,
            end_year,
            end_month,
            self._timezone(),
            self._params.yearly_multipliers,
        )

    def next_value(self, value: T) -> T:
        year: int = self._time_value.date_floor(value).year + 1
        return self._time_value.earliest_after_date(
            date(year, 1, 1), self._time_value.timezone(value)
        )

    def previous_value(self, value: T) -> T:
        year: int = self._time_value.date_ceil(value).year - 1
        return self._time_value.earliest_after_date(
            date(year, 1, 1), self._time_value.timezone(value)
        )
