################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Temporal axis coordinates: pixel mapping and key point selection."""

from __future__ import annotations

from oasis_plot.coord.calendar_ranged import Monthly
from oasis_plot.coord.calendar_ranged import Yearly
from oasis_plot.coord.coord_factory import make_coord
from oasis_plot.coord.coord_factory import monthly
from oasis_plot.coord.coord_factory import yearly
from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_params import CoordParamsError
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.coord_types import PixelRange
from oasis_plot.coord.period import compute_period_per_point
from oasis_plot.coord.ranged import DiscreteRanged
from oasis_plot.coord.ranged import Ranged
from oasis_plot.coord.ranged_date import RangedDate
from oasis_plot.coord.ranged_datetime import RangedDateTime
from oasis_plot.coord.ranged_duration import RangedDuration
from oasis_plot.coord.time_value import DateTimeValue
from oasis_plot.coord.time_value import DateValue
from oasis_plot.coord.time_value import TimeValue
from oasis_plot.coord.time_value import time_value_for


__all__ = [
    "CoordParams",
    "CoordParamsError",
    "DateTimeValue",
    "DateValue",
    "DiscreteRanged",
    "Duration",
    "Monthly",
    "PixelRange",
    "Ranged",
    "RangedDate",
    "RangedDateTime",
    "RangedDuration",
    "TimeValue",
    "Yearly",
    "compute_period_per_point",
    "make_coord",
    "monthly",
    "time_value_for",
    "yearly",
]
