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
Builders choosing a coordinate for an interval's value type
"""

from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Any
from typing import Optional

import numpy as np

from oasis_plot.coord.calendar_ranged import Monthly
from oasis_plot.coord.calendar_ranged import Yearly
from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.ranged import Ranged
from oasis_plot.coord.ranged_date import RangedDate
from oasis_plot.coord.ranged_datetime import RangedDateTime
from oasis_plot.coord.ranged_duration import RangedDuration


def make_coord(
    begin: Any, end: Any, params: Optional[CoordParams] = None
) -> Ranged[Any]:
    """Return the natural coordinate for the type of the interval bounds."""
    if isinstance(begin, datetime):
        return RangedDateTime(begin, end, params)
    if isinstance(begin, date):
        return RangedDate(begin, end, params)
    if isinstance(begin, (Duration, timedelta, np.timedelta64)):
        return RangedDuration(begin, end, params)
    raise TypeError(f"No temporal coordinate for {type(begin).__name__}")


def monthly(begin: Any, end: Any, params: Optional[CoordParams] = None) -> Monthly[Any]:
    """Wrap a date or date-time interval with month resolution."""
    return Monthly(begin, end, params)


def yearly(begin: Any, end: Any, params: Optional[CoordParams] = None) -> Yearly[Any]:
    """Wrap a date or date-time interval with year resolution."""
    return Yearly(begin, end, params)
