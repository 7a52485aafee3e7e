################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the calendar instant capability and shared pixel mapping."""

from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone

import pytest

from oasis_plot.coord.coord_types import I32_MAX
from oasis_plot.coord.coord_types import I32_MIN
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.time_value import DATE_VALUE
from oasis_plot.coord.time_value import DATETIME_VALUE
from oasis_plot.coord.time_value import DateTimeValue
from oasis_plot.coord.time_value import DateValue
from oasis_plot.coord.time_value import map_span
from oasis_plot.coord.time_value import project
from oasis_plot.coord.time_value import time_value_for


UTC_PLUS_2: timezone = timezone(timedelta(hours=2))


def test_project_truncates_after_epsilon() -> None:
    """Projection should add epsilon away from zero and truncate toward zero."""
    assert project(0, 10, (0, 100)) == 0
    assert project(10, 10, (0, 100)) == 100
    assert project(1, 3, (0, 100)) == 33
    assert project(5, 10, (100, 0)) == 50
    assert project(-5, 10, (0, 100)) == -50
    assert project(1, 10, (0, 5), epsilon=0.5) == 1
    assert project(1, 10, (5, 0), epsilon=0.5) == 4


def test_project_reversed_range_mirrors() -> None:
    """A reversed pixel range should mirror the forward one exactly."""
    for offset in range(-7, 18):
        forward: int = project(offset, 10, (0, 333))
        assert project(offset, 10, (333, 0)) == 333 - forward


def test_project_zero_span() -> None:
    """A zero-width span should map to the lower pixel bound."""
    assert project(5, 0, (20, 80)) == 20


def test_map_span_day_fallback() -> None:
    """Spans overflowing nanoseconds should map with whole days."""
    total: Duration = Duration.of_days(200_000)
    value: Duration = Duration.of_days(50_000) + Duration(ns=1)

    assert total.num_nanoseconds() is None
    assert map_span(value, total, (0, 1_000)) == 250


def test_map_span_far_offset_on_short_span() -> None:
    """Offsets far outside a short span should saturate on the matching side."""
    total: Duration = Duration.of_seconds(10)
    value: Duration = Duration.of_days(150_000)

    assert value.num_nanoseconds() is None
    assert map_span(value, total, (0, 100)) == I32_MAX
    assert map_span(-value, total, (0, 100)) == I32_MIN


def test_date_value_capability() -> None:
    """Dates should floor, ceil and build instants as the identity."""
    day: date = date(2021, 3, 14)

    assert DATE_VALUE.date_floor(day) == day
    assert DATE_VALUE.date_ceil(day) == day
    assert DATE_VALUE.earliest_after_date(day, None) == day
    assert DATE_VALUE.timezone(day) is None
    assert DATE_VALUE.subtract(date(2021, 3, 16), day) == Duration.of_days(2)


def test_datetime_floor_and_ceil() -> None:
    """Any time past midnight should ceil to the next date."""
    midnight: datetime = datetime(2021, 3, 14)
    later: datetime = datetime(2021, 3, 14, 0, 0, 0, 1)

    assert DATETIME_VALUE.date_floor(later) == date(2021, 3, 14)
    assert DATETIME_VALUE.date_ceil(later) == date(2021, 3, 15)
    assert DATETIME_VALUE.date_ceil(midnight) == date(2021, 3, 14)


def test_datetime_earliest_after_date_keeps_timezone() -> None:
    """Earliest instant on a date should be midnight in the given zone."""
    value: datetime = DATETIME_VALUE.earliest_after_date(date(2021, 3, 14), UTC_PLUS_2)

    assert value == datetime(2021, 3, 14, tzinfo=UTC_PLUS_2)
    assert value.tzinfo is UTC_PLUS_2


def test_datetime_subtract_is_absolute() -> None:
    """Aware differences should account for UTC offsets."""
    utc_noon: datetime = datetime(2021, 3, 14, 12, tzinfo=timezone.utc)
    local_noon: datetime = datetime(2021, 3, 14, 12, tzinfo=UTC_PLUS_2)

    assert DATETIME_VALUE.subtract(utc_noon, local_noon) == Duration.of_seconds(7_200)


def test_datetime_time_of_day() -> None:
    """Time of day should include microseconds."""
    value: datetime = datetime(2021, 3, 14, 1, 2, 3, 4)
    expected_ns: int = (3_600 + 120 + 3) * 1_000_000_000 + 4_000

    assert DATETIME_VALUE.time_of_day_ns(value) == expected_ns


def test_datetime_add_elapsed() -> None:
    """Elapsed additions should keep the value's timezone."""
    value: datetime = datetime(2021, 3, 14, 23, 30, tzinfo=UTC_PLUS_2)
    later: datetime = DATETIME_VALUE.add_elapsed(value, 3_600_000_000_000)

    assert later == datetime(2021, 3, 15, 0, 30, tzinfo=UTC_PLUS_2)
    assert later.tzinfo is UTC_PLUS_2


def test_time_value_for_dispatch() -> None:
    """Datetimes should dispatch before dates, other types should fail."""
    assert isinstance(time_value_for(datetime(2021, 1, 1)), DateTimeValue)
    assert isinstance(time_value_for(date(2021, 1, 1)), DateValue)
    with pytest.raises(TypeError):
        time_value_for(5)


def test_map_coord_boundaries() -> None:
    """Begin should map to lo and end to hi."""
    begin: date = date(2021, 1, 1)
    end: date = date(2021, 1, 11)

    assert DATE_VALUE.map_coord(begin, begin, end, (0, 100)) == 0
    assert DATE_VALUE.map_coord(end, begin, end, (0, 100)) == 100
    assert DATE_VALUE.map_coord(date(2021, 1, 6), begin, end, (0, 100)) == 50


def test_map_coord_across_timezones() -> None:
    """Mapping should use absolute time for aware values."""
    begin: datetime = datetime(2021, 1, 1, tzinfo=timezone.utc)
    end: datetime = begin + timedelta(hours=10)
    value: datetime = datetime(2021, 1, 1, 7, tzinfo=UTC_PLUS_2)

    assert DATETIME_VALUE.map_coord(value, begin, end, (0, 100)) == 50


def test_map_coord_centuries_use_days() -> None:
    """Four centuries overflow nanoseconds and map by whole days."""
    begin: date = date(1600, 1, 1)
    end: date = date(2000, 1, 1)

    assert DATE_VALUE.subtract(end, begin).num_nanoseconds() is None
    assert DATE_VALUE.map_coord(date(1800, 1, 1), begin, end, (0, 1_000)) == 500


def test_map_coord_saturates() -> None:
    """Far extrapolation should saturate to the 32-bit pixel range."""
    begin: date = date(2000, 1, 1)
    end: date = date(2000, 1, 2)

    assert DATE_VALUE.map_coord(date(9000, 1, 1), begin, end, (0, 10_000)) == I32_MAX
