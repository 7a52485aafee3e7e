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
Coordinate contracts consumed by layout and rendering code

A ranged coordinate covers a half-open interval [begin, end), projects
values onto device pixels and proposes key points for tick marks. Discrete
coordinates can additionally step one unit forward or back.
"""

from __future__ import annotations

import abc
from typing import Any
from typing import Generic
from typing import Iterable
from typing import Iterator
from typing import Optional
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_plot.coord.coord_params import CoordParams
from oasis_plot.coord.coord_types import PixelRange


V = TypeVar("V")


class Ranged(abc.ABC, Generic[V]):
    """Coordinate over a half-open interval of values."""

    def __init__(self, begin: V, end: V, params: Optional[CoordParams] = None) -> None:
        """Initialize the interval and validate the parameters."""
        self._begin: V = begin
        self._end: V = end
        self._params: CoordParams = params if params is not None else CoordParams()
        self._params.validate()

    @property
    def params(self) -> CoordParams:
        return self._params

    def range(self) -> tuple[V, V]:
        """Return the (begin, end) pair this coordinate covers."""
        return self._begin, self._end

    def is_empty(self) -> bool:
        """Return True for an empty or inverted interval."""
        begin: Any = self._begin
        return not begin < self._end

    @abc.abstractmethod
    def map(self, value: V, limit: PixelRange) -> int:
        """Project a value onto the pixel range, extrapolating outside it."""

    @abc.abstractmethod
    def key_points(self, max_points: int) -> list[V]:
        """Return increasing tick values, aiming for at most max_points."""

    def map_many(self, values: Iterable[V], limit: PixelRange) -> NDArray[np.int32]:
        """Project a batch of values onto the pixel range."""
        pixels: NDArray[np.int64] = np.fromiter(
            (self.map(value, limit) for value in values), dtype=np.int64
        )
        return pixels.astype(np.int32)

    def key_point_pixels(
        self, max_points: int, limit: PixelRange
    ) -> tuple[list[V], NDArray[np.int32]]:
        """Return the key points together with their pixel positions."""
        points: list[V] = self.key_points(max_points)
        return points, self.map_many(points, limit)


class DiscreteRanged(Ranged[V]):
    """Coordinate whose values advance in whole units."""

    @abc.abstractmethod
    def next_value(self, value: V) -> V:
        """Return the value one unit later."""

    @abc.abstractmethod
    def previous_value(self, value: V) -> V:
        """Return the value one unit earlier."""

    def values(self) -> Iterator[V]:
        """Step from begin by whole units while before end."""
        current: Any = self._begin
        while current < self._end:
            yield current
            current = self.next_value(current)
