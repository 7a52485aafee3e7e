################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Coordinate over elapsed time that is not anchored to a calendar."""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional

from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_types import NS_PER_DAY
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.coord_types import as_duration
from oasis_plot.coord.period import compute_period_per_point
from oasis_plot.coord.ranged import Ranged
from oasis_plot.coord.time_value import map_span


_LOG: logging.Logger = logging.getLogger(__name__)


def align_to_period(value_ns: int, period_ns: int) -> int:
    """
    Return the nearest multiple of the period at or after a value

    Positive values round up to the next multiple and negative values round
    toward zero, so ticks never start before the value.
    """
    if value_ns >= 0:
        return -(-value_ns // period_ns) * period_ns
    return -((-value_ns) // period_ns) * period_ns


class RangedDuration(Ranged[Duration]):
    """
    Coordinate over an interval of durations

    The interval may straddle zero. Bounds and mapped values may be given as
    Duration, timedelta or numpy timedelta64.
    """

    def __init__(
        self, begin: Any, end: Any, params: Optional[CoordParams] = None
    ) -> None:
        super().__init__(as_duration(begin), as_duration(end), params)

    def map(self, value: Any, limit: PixelRange) -> int:
        return map_span(
            as_duration(value) - self._begin,
            self._end - self._begin,
            limit,
            self._params.rounding_epsilon,
        )

    def key_points(self, max_points: int) -> list[Duration]:
        if max_points <= 0 or self.is_empty():
            _LOG.debug("No duration key points for budget=%d", max_points)
            return []

        total_ns: Optional[int] = (self._end - self._begin).num_nanoseconds()
        if total_ns is not None:
            period_ns: Optional[int] = compute_period_per_point(
                total_ns, max_points, False
            )
            if period_ns is not None:
                return self._period_key_points(period_ns)

        _LOG.debug("Duration span overflows nanoseconds, using day ticks")
        return self._daily_key_points(max_points)

    def _period_key_points(self, period_ns: int) -> list[Duration]:
        current_ns: int = align_to_period(self._begin.ns, period_ns)
        points: list[Duration] = []
        while current_ns < self._end.ns:
            points.append(Duration(ns=current_ns))
            current_ns += period_ns
        return points

    def _daily_key_points(self, max_points: int) -> list[Duration]:
        multipliers: tuple[int, ...] = self._params.duration_day_multipliers
        total_days: int = self._end.num_days() - self._begin.num_days()

        days_per_tick: int = 1
        index: int = 0
        while total_days // (days_per_tick * multipliers[index]) > max_points:
            index += 1
            if index == len(multipliers):
                index = 0
                days_per_tick *= 10
        days_per_tick *= multipliers[index]

        step_ns: int = days_per_tick * NS_PER_DAY
        current_ns: int = align_to_period(self._begin.ns, NS_PER_DAY)
        points: list[Duration] = []
        while current_ns < self._end.ns:
            points.append(Duration(ns=current_ns))
            current_ns += step_ns
        return points
