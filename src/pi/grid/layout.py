"""Rectangles, width constraints and a one-dimensional layout solver.

``Layout.split`` divides an area along one axis into one sub-area per
constraint.  Sizes are solved as fractions, shrunk by priority when they
overflow, grown according to a :class:`SegmentSize` policy when they leave
space over, and finally snapped to whole cells by rounding the cumulative
positions.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: Rect) -> Rect:
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SegmentSize(str, Enum):
    """How space left over after satisfying every constraint is handed out."""

    NONE = "None"
    LAST_TAKES_REMAINDER = "LastTakesRemainder"
    EVEN_DISTRIBUTION = "EvenDistribution"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Length:
    value: int


@dataclass(frozen=True)
class Max:
    value: int


@dataclass(frozen=True)
class Min:
    value: int


@dataclass(frozen=True)
class Percentage:
    value: int


@dataclass(frozen=True)
class Ratio:
    numerator: int
    denominator: int


Constraint = Union[Length, Max, Min, Percentage, Ratio]

# Overflow is taken from the weakest tier first.
_SHRINK_TIERS: tuple[tuple[type, ...], ...] = (
    (Max, Percentage, Ratio),
    (Length,),
    (Min,),
)

_GROWABLE = (Min, Percentage, Ratio)


def _desired_size(constraint: Constraint, total: int) -> float:
    if isinstance(constraint, (Length, Min)):
        return float(constraint.value)
    if isinstance(constraint, Max):
        return float(min(constraint.value, total))
    if isinstance(constraint, Percentage):
        return total * constraint.value / 100
    if isinstance(constraint, Ratio):
        if constraint.denominator == 0:
            return 0.0
        return total * constraint.numerator / constraint.denominator
    raise TypeError(f"unsupported constraint: {constraint!r}")


def _shrink(sizes: list[float], constraints: Sequence[Constraint], excess: float) -> None:
    for tier in _SHRINK_TIERS:
        for i in reversed(range(len(sizes))):
            if excess <= 0:
                return
            if isinstance(constraints[i], tier):
                taken = min(sizes[i], excess)
                sizes[i] -= taken
                excess -= taken


def _water_fill(sizes: list[float], indexes: list[int], extra: float) -> None:
    """Raise the smallest of ``sizes[indexes]`` to a common level using *extra*."""
    pending = sorted(indexes, key=lambda i: sizes[i])
    pool = extra + sum(sizes[i] for i in pending)
    while pending:
        level = pool / len(pending)
        # A segment already above the level keeps its size.
        if sizes[pending[-1]] > level:
            pool -= sizes[pending.pop()]
            continue
        for i in pending:
            sizes[i] = level
        return


def solve_sizes(
    total: int,
    constraints: Sequence[Constraint],
    segment_size: SegmentSize = SegmentSize.NONE,
) -> list[tuple[int, int]]:
    """Solve *constraints* over *total* cells.

    Returns one ``(start, size)`` pair per constraint, relative to the start
    of the split axis.
    """
    total = max(total, 0)
    sizes = [_desired_size(c, total) for c in constraints]

    demand = sum(sizes)
    if demand > total:
        logger.debug("layout overflow: demand %.2f exceeds %d, shrinking", demand, total)
        _shrink(sizes, constraints, demand - total)
    elif demand < total and sizes:
        leftover = total - demand
        if segment_size is SegmentSize.LAST_TAKES_REMAINDER:
            sizes[-1] += leftover
        elif segment_size is SegmentSize.EVEN_DISTRIBUTION:
            growable = [i for i, c in enumerate(constraints) if isinstance(c, _GROWABLE)]
            if growable:
                _water_fill(sizes, growable, leftover)

    result: list[tuple[int, int]] = []
    position = 0.0
    start = 0
    for size in sizes:
        position += size
        end = min(math.floor(position + 0.5), total)
        result.append((start, max(end - start, 0)))
        start = max(start, end)
    return result


@dataclass(frozen=True)
class Layout:
    """Split an area into sub-areas along one direction."""

    direction: Direction = Direction.VERTICAL
    constraints: tuple[Constraint, ...] = ()
    segment_size: SegmentSize = SegmentSize.NONE

    def split(self, area: Rect) -> list[Rect]:
        horizontal = self.direction is Direction.HORIZONTAL
        total = area.width if horizontal else area.height
        spans = solve_sizes(total, self.constraints, self.segment_size)
        if horizontal:
            return [Rect(area.x + start, area.y, size, area.height) for start, size in spans]
        return [Rect(area.x, area.y + start, area.width, size) for start, size in spans]
