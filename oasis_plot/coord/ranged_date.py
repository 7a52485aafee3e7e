################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Coordinate over calendar dates with daily and weekly key points."""

from __future__ import annotations

import logging
from datetime import date
from datetime import timedelta

from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.ranged import DiscreteRanged
from oasis_plot.coord.time_value import DATE_VALUE


_LOG: logging.Logger = logging.getLogger(__name__)


class RangedDate(DiscreteRanged[date]):
    """
    Coordinate over an interval of dates

    Key points are every day when the budget allows it, otherwise every week
    or every few weeks, always anchored at begin. The end date is emitted when
    it lands on a step.
    """

    def map(self, value: date, limit: PixelRange) -> int:
        return DATE_VALUE.map_coord(
            value, self._begin, self._end, limit, self._params.rounding_epsilon
        )

    def key_points(self, max_points: int) -> list[date]:
        if max_points <= 0 or self.is_empty():
            _LOG.debug(
                "No date key points for budget=%d range=%s..%s",
                max_points,
                self._begin,
                self._end,
            )
            return []

        span: Duration = DATE_VALUE.subtract(self._end, self._begin)
        total_days: int = span.num_days()
        total_weeks: int = span.num_weeks()

        if 0 < total_days <= max_points:
            return [self._begin + timedelta(days=idx) for idx in range(total_days + 1)]

        if 0 < total_weeks <= max_points:
            return [
                self._begin + timedelta(weeks=idx) for idx in range(total_weeks + 1)
            ]

        # Ceiling division, at least one week per point
        weeks_per_point: int = max(1, -(-total_weeks // max_points))

        return [
            self._begin + timedelta(weeks=idx * weeks_per_point)
            for idx in range(total_weeks // weeks_per_point + 1)
        ]

    def next_value(self, value: date) -> date:
        return value + timedelta(days=1)

    def previous_value(self, value: date) -> date:
        return value - timedelta(days=1)
