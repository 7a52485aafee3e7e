################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tunable parameters for temporal key point selection and mapping."""

from __future__ import annotations

import math
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Offset added before truncating a projected pixel position
ROUNDING_EPSILON: float = 1e-10

# Month steps tried in order for monthly key points
MONTHLY_STEPS: tuple[int, ...] = (1, 3, 6)

# Year multipliers tried per power of ten for yearly key points
YEARLY_MULTIPLIERS: tuple[int, ...] = (1, 2, 5, 10)

# Day multipliers tried per power of ten for very long durations
DURATION_DAY_MULTIPLIERS: tuple[int, ...] = (1, 2, 5)


class CoordParamsError(Exception):
    """Raised when coordinate parameter validation fails."""


def _require_steps(value: Any, name: str) -> tuple[int, ...]:
    """Coerce a sequence of step sizes to a strictly increasing int tuple."""
    try:
        steps: tuple[int, ...] = tuple(value)
    except TypeError as exc:
        raise CoordParamsError(f"{name} must be a sequence of ints") from exc
    if not steps:
        raise CoordParamsError(f"{name} must not be empty")
    for step in steps:
        if isinstance(step, bool) or not isinstance(step, int):
            raise CoordParamsError(f"{name} must contain ints")
        if step <= 0:
            raise CoordParamsError(f"{name} must contain positive values")
    if any(b <= a for a, b in zip(steps, steps[1:])):
        raise CoordParamsError(f"{name} must be strictly increasing")
    return steps


@dataclass(frozen=True)
class CoordParams:
    """Parameters shared by the temporal coordinates.

    Attributes:
        rounding_epsilon: Offset added to a projected pixel position before it
            is truncated toward zero
        monthly_steps: Month steps tried in order, the first one fitting the
            point budget wins
        yearly_multipliers: Multipliers applied to each power of ten of years,
            ending with the multiplier that reaches the next power
        duration_day_multipliers: Multipliers applied to each power of ten of
            days when a duration span overflows nanoseconds
    """

    rounding_epsilon: float = ROUNDING_EPSILON
    monthly_steps: tuple[int, ...] = MONTHLY_STEPS
    yearly_multipliers: tuple[int, ...] = YEARLY_MULTIPLIERS
    duration_day_multipliers: tuple[int, ...] = DURATION_DAY_MULTIPLIERS

    @classmethod
    def defaults(cls) -> CoordParams:
        """Return the default parameter set."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CoordParams:
        """Build parameters from a mapping, using defaults for missing keys."""
        known: set[str] = {field_info.name for field_info in fields(cls)}
        unknown: set[str] = set(data) - known
        if unknown:
            raise CoordParamsError(f"Unknown parameters: {sorted(unknown)}")

        kwargs: dict[str, Any] = dict(data)
        for name in ("monthly_steps", "yearly_multipliers", "duration_day_multipliers"):
            if name in kwargs:
                kwargs[name] = _require_steps(kwargs[name], name)

        params: CoordParams = cls(**kwargs)
        params.validate()
        return params

    def as_dict(self) -> dict[str, Any]:
        """Return a plain mapping of the parameters."""
        data: dict[str, Any] = asdict(self)
        for name in ("monthly_steps", "yearly_multipliers", "duration_day_multipliers"):
            data[name] = list(data[name])
        return data

    def replace(self, **kwargs: Any) -> CoordParams:
        """Return a copy with selected fields replaced."""
        return replace(self, **kwargs)

    def validate(self) -> None:
        """Validate parameter ranges."""
        if isinstance(self.rounding_epsilon, bool) or not isinstance(
            self.rounding_epsilon, (int, float)
        ):
            raise CoordParamsError("rounding_epsilon must be a float")
        if not math.isfinite(self.rounding_epsilon):
            raise CoordParamsError("rounding_epsilon must be finite")
        if not 0.0 <= self.rounding_epsilon < 1.0:
            raise CoordParamsError("rounding_epsilon must be in [0, 1)")

        monthly_steps: tuple[int, ...] = _require_steps(
            self.monthly_steps, "monthly_steps"
        )
        yearly_multipliers: tuple[int, ...] = _require_steps(
            self.yearly_multipliers, "yearly_multipliers"
        )
        day_multipliers: tuple[int, ...] = _require_steps(
            self.duration_day_multipliers, "duration_day_multipliers"
        )

        if monthly_steps[0] != 1:
            raise CoordParamsError("monthly_steps must start at 1")
        if yearly_multipliers[0] != 1 or yearly_multipliers[-1] != 10:
            raise CoordParamsError("yearly_multipliers must start at 1 and end at 10")
        if day_multipliers[0] != 1:
            raise CoordParamsError("duration_day_multipliers must start at 1")
        if day_multipliers[-1] >= 10:
            raise CoordParamsError("duration_day_multipliers must stay below 10")
