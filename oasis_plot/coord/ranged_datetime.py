################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Coordinate over date-times with nanosecond to day resolution ticks."""

from __future__ import annotations

import logging
from datetime import date
from datetime import datetime
from datetime import tzinfo
from typing import Optional

from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.period import compute_period_per_point
from oasis_plot.coord.ranged import Ranged
from oasis_plot.coord.ranged_date import RangedDate
from oasis_plot.coord.time_value import DATETIME_VALUE


_LOG: logging.Logger = logging.getLogger(__name__)


def align_up(value: int, period: int) -> int:
    """Round a non-negative value up to the next multiple of period."""
    remainder: int = value % period
    if remainder > 0:
        return value + (period - remainder)
    return value


class RangedDateTime(Ranged[datetime]):
    """
    Coordinate over an interval of date-times

    Spans that fit nanosecond arithmetic and need sub-day ticks get ticks
    aligned to multiples of the period within the day. Longer spans behave
    like a date coordinate over the whole days inside the interval, with each
    tick at midnight.
    """

    def map(self, value: datetime, limit: PixelRange) -> int:
        return DATETIME_VALUE.map_coord(
            value, self._begin, self._end, limit, self._params.rounding_epsilon
        )

    def key_points(self, max_points: int) -> list[datetime]:
        if max_points <= 0 or self.is_empty():
            _LOG.debug("No date-time key points for budget=%d", max_points)
            return []

        total_span: Duration = DATETIME_VALUE.subtract(self._end, self._begin)
        total_ns: Optional[int] = total_span.num_nanoseconds()

        period_ns: Optional[int] = None
        if total_ns is not None:
            period_ns = compute_period_per_point(total_ns, max_points, True)

        if period_ns is not None:
            return self._sub_daily_key_points(
                max(period_ns, DATETIME_VALUE.resolution_ns)
            )

        _LOG.debug("Date-time span %s needs day ticks", total_span)
        return self._daily_key_points(max_points)

    def _sub_daily_key_points(self, period_ns: int) -> list[datetime]:
        tz: Optional[tzinfo] = DATETIME_VALUE.timezone(self._begin)
        midnight: datetime = DATETIME_VALUE.earliest_after_date(
            DATETIME_VALUE.date_floor(self._begin), tz
        )

        # The first tick may carry past midnight into the next day
        start_ns: int = align_up(DATETIME_VALUE.time_of_day_ns(self._begin), period_ns)
        current: datetime = DATETIME_VALUE.add_wall_clock(midnight, start_ns)

        points: list[datetime] = []
        while current < self._end:
            points.append(current)
            current = DATETIME_VALUE.add_elapsed(current, period_ns)
        return points

    def _daily_key_points(self, max_points: int) -> list[datetime]:
        tz: Optional[tzinfo] = DATETIME_VALUE.timezone(self._begin)
        date_range: RangedDate = RangedDate(
            DATETIME_VALUE.date_ceil(self._begin),
            DATETIME_VALUE.date_floor(self._end),
            self._params,
        )
        days: list[date] = date_range.key_points(max_points)
        return [DATETIME_VALUE.earliest_after_date(day, tz) for day in days]
