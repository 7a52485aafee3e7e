################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for coordinate parameters."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from oasis_plot.coord.calendar_ranged import Monthly
from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_params import CoordParamsError
from oasis_plot.coord.coord_types import Duration
from oasis_plot.coord.ranged_date import RangedDate
from oasis_plot.coord.ranged_duration import RangedDuration


def test_defaults() -> None:
    """Default parameters should validate and expose the standard tables."""
    params: CoordParams = CoordParams.defaults()
    params.validate()

    assert params.rounding_epsilon == 1e-10
    assert params.monthly_steps == (1, 3, 6)
    assert params.yearly_multipliers == (1, 2, 5, 10)
    assert params.duration_day_multipliers == (1, 2, 5)


def test_from_dict_round_trip() -> None:
    """Mappings should convert lists to tuples and back."""
    params: CoordParams = CoordParams.from_dict(
        {"rounding_epsilon": 0.0, "monthly_steps": [1, 2, 4]}
    )

    assert params.rounding_epsilon == 0.0
    assert params.monthly_steps == (1, 2, 4)
    assert params.yearly_multipliers == (1, 2, 5, 10)

    data: dict[str, Any] = params.as_dict()
    assert data["monthly_steps"] == [1, 2, 4]
    assert CoordParams.from_dict(data) == params


def test_from_dict_rejects_unknown_keys() -> None:
    """Unknown keys should be rejected."""
    with pytest.raises(CoordParamsError):
        CoordParams.from_dict({"rounding_epsilon": 0.0, "tick_color": "red"})


def test_replace_keeps_other_fields() -> None:
    """Replacing a field should keep the rest unchanged."""
    params: CoordParams = CoordParams.defaults().replace(monthly_steps=(1, 4))

    assert params.monthly_steps == (1, 4)
    assert params.rounding_epsilon == CoordParams.defaults().rounding_epsilon


@pytest.mark.parametrize("epsilon", [-1e-3, 1.0, float("nan"), float("inf"), True])
def test_invalid_epsilon(epsilon: Any) -> None:
    """Epsilon outside [0, 1) should be rejected."""
    with pytest.raises(CoordParamsError):
        CoordParams(rounding_epsilon=epsilon).validate()


@pytest.mark.parametrize(
    "data",
    [
        {"monthly_steps": []},
        {"monthly_steps": [2, 3]},
        {"monthly_steps": [1, 3, 3]},
        {"monthly_steps": [1, 0]},
        {"monthly_steps": [1, 2.5]},
        {"monthly_steps": 6},
        {"yearly_multipliers": [1, 2, 5]},
        {"yearly_multipliers": [2, 5, 10]},
        {"duration_day_multipliers": [1, 2, 10]},
        {"duration_day_multipliers": [2, 5]},
    ],
)
def test_invalid_step_tables(data: dict[str, Any]) -> None:
    """Malformed step tables should be rejected."""
    with pytest.raises(CoordParamsError):
        CoordParams.from_dict(data)


def test_coordinate_rejects_invalid_params() -> None:
    """Coordinates should validate their parameters on construction."""
    params: CoordParams = CoordParams(rounding_epsilon=2.0)

    with pytest.raises(CoordParamsError):
        RangedDate(date(2021, 1, 1), date(2021, 2, 1), params)


def test_custom_monthly_steps() -> None:
    """Monthly ticks should try the configured steps in order."""
    begin: date = date(2020, 1, 1)
    end: date = date(2021, 1, 1)

    quarterly: list[date] = Monthly(begin, end).key_points(6)
    assert quarterly == [date(2020, month, 1) for month in (1, 4, 7, 10)] + [
        date(2021, 1, 1)
    ]

    params: CoordParams = CoordParams(monthly_steps=(1, 2))
    bimonthly: list[date] = Monthly(begin, end, params).key_points(6)
    assert bimonthly == [date(2020, month, 1) for month in range(1, 13, 2)] + [
        date(2021, 1, 1)
    ]


def test_rounding_epsilon() -> None:
    """Epsilon should push positions away from zero on either pixel direction."""
    begin: Duration = Duration(ns=0)
    end: Duration = Duration.of_seconds(10)
    value: Duration = Duration.of_seconds(1)

    assert RangedDuration(begin, end).map(value, (0, 5)) == 0
    assert RangedDuration(begin, end).map(value, (5, 0)) == 5

    params: CoordParams = CoordParams(rounding_epsilon=0.5)
    assert RangedDuration(begin, end, params).map(value, (0, 5)) == 1
    assert RangedDuration(begin, end, params).map(value, (5, 0)) == 4
