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
Nice-number tick period selection over nanosecond spans

The search seeds a candidate at the power of ten below the minimum period
that keeps the tick count within the budget, then walks a table of
human-friendly multipliers for the regime the seed falls in. When a table is
exhausted, the base unit is multiplied by the regime's carry base and the
walk restarts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from oasis_plot.coord.coord_types import NS_PER_DAY
from oasis_plot.coord.coord_types import NS_PER_S


# Nanoseconds per hour
NS_PER_HOUR: int = 3_600 * NS_PER_S


@dataclass(frozen=True)
class PeriodRegime:
    """
    Candidate table for one scale of tick periods

    Fields:
        limit_ns: Seeds below this value select the regime
        unit_ns: Base unit in nanoseconds, or 0 to start from the seed
        multipliers: Multipliers of the base unit tried in order
        carry: Factor applied to the base unit when the table is exhausted
    """

    limit_ns: int
    unit_ns: int
    multipliers: tuple[int, ...]
    carry: int


# Regimes shared by every caller, in ascending scale
SUB_DAILY_REGIMES: tuple[PeriodRegime, ...] = (
    PeriodRegime(limit_ns=NS_PER_S, unit_ns=0, multipliers=(1, 2, 5), carry=10),
    PeriodRegime(
        limit_ns=NS_PER_HOUR,
        unit_ns=NS_PER_S,
        multipliers=(1, 2, 5, 10, 15, 20, 30),
        carry=60,
    ),
    PeriodRegime(
        limit_ns=NS_PER_DAY,
        unit_ns=NS_PER_HOUR,
        multipliers=(1, 2, 4, 8, 12),
        carry=24,
    ),
)

# Regimes only available when day-scale periods are allowed
DAILY_REGIMES: tuple[PeriodRegime, ...] = (
    PeriodRegime(
        limit_ns=10 * NS_PER_DAY,
        unit_ns=NS_PER_DAY,
        multipliers=(1, 2, 5, 7),
        carry=10,
    ),
    PeriodRegime(
        limit_ns=0,
        unit_ns=10 * NS_PER_DAY,
        multipliers=(1, 2, 5),
        carry=10,
    ),
)


def seed_period(total_ns: int, max_points: int) -> int:
    """Return the power of ten at or below the minimum period per point."""
    min_ns_per_point: float = total_ns / max_points
    if min_ns_per_point < 1.0:
        return 1
    exponent: int = int(math.floor(math.log10(min_ns_per_point)))
    return 10**exponent


def walk_regime(
    total_ns: int, unit_ns: int, regime: PeriodRegime, max_points: int
) -> int:
    """Return the first multiple of the unit keeping ticks within budget."""
    index: int = 0
    while total_ns // unit_ns > max_points * regime.multipliers[index]:
        index += 1
        if index == len(regime.multipliers):
            index = 0
            unit_ns *= regime.carry
    return regime.multipliers[index] * unit_ns


def compute_period_per_point(
    total_ns: int, max_points: int, sub_daily: bool
) -> Optional[int]:
    """
    Choose a tick period in nanoseconds for a span and point budget

    Args:
        total_ns: Length of the span in nanoseconds
        max_points: Desired upper bound on the number of ticks
        sub_daily: True to refuse periods of a day or more

    Returns:
        The period in nanoseconds, or None if the budget is empty, the span
        is empty, or a sub-daily period was requested for a span that needs
        day-scale ticks
    """
    if max_points <= 0 or total_ns <= 0:
        return None

    seed_ns: int = seed_period(total_ns, max_points)

    for regime in SUB_DAILY_REGIMES:
        if seed_ns < regime.limit_ns:
            return walk_regime(total_ns, regime.unit_ns or seed_ns, regime, max_points)

    if sub_daily:
        return None

    day_regime: PeriodRegime = DAILY_REGIMES[0]
    if seed_ns < day_regime.limit_ns:
        return walk_regime(total_ns, day_regime.unit_ns, day_regime, max_points)

    ten_day_regime: PeriodRegime = DAILY_REGIMES[1]
    return walk_regime(total_ns, ten_day_regime.unit_ns, ten_day_regime, max_points)
