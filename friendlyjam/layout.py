"""Two-dimensional vectors and axis-aligned boxes with layout helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def _vec(value: Vec2 | Sequence[Number]) -> Vec2:
    if isinstance(value, Vec2):
        return value
    x, y = value
    return Vec2(float(x), float(y))


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector; arithmetic is element-wise."""

    x: float
    y: float

    @classmethod
    def splat(cls, value: Number) -> Vec2:
        return cls(value, value)

    def _pair(self, other: Vec2 | Number) -> tuple[float, float]:
        if isinstance(other, Vec2):
            return other.x, other.y
        if isinstance(other, (int, float)):
            return other, other
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | Number) -> Vec2:
        pair = self._pair(other)
        if pair is NotImplemented:
            return NotImplemented
        return Vec2(self.x * pair[0], self.y * pair[1])

    __rmul__ = __mul__

    def __truediv__(self, other: Vec2 | Number) -> Vec2:
        pair = self._pair(other)
        if pair is NotImplemented:
            return NotImplemented
        return Vec2(self.x / pair[0], self.y / pair[1])

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> Vec2:
        """Rotate counter-clockwise by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)


@dataclass
class Aabb:
    """An axis-aligned box. Cutting methods shrink the box in place."""

    min: Vec2
    max: Vec2

    def __post_init__(self) -> None:
        self.min = _vec(self.min)
        self.max = _vec(self.max)

    @classmethod
    def point(cls, pos: Vec2 | Sequence[Number]) -> Aabb:
        pos = _vec(pos)
        return cls(pos, pos)

    @classmethod
    def from_corners(cls, a: Vec2 | Sequence[Number], b: Vec2 | Sequence[Number]) -> Aabb:
        a, b = _vec(a), _vec(b)
        return cls(Vec2(min(a.x, b.x), min(a.y, b.y)), Vec2(max(a.x, b.x), max(a.y, b.y)))

    def _set(self, other: Aabb) -> None:
        self.min = other.min
        self.max = other.max

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def size(self) -> Vec2:
        return Vec2(self.width(), self.height())

    def center(self) -> Vec2:
        return (self.min + self.max) / 2

    def bottom_left(self) -> Vec2:
        return self.min

    def bottom_right(self) -> Vec2:
        return Vec2(self.max.x, self.min.y)

    def top_left(self) -> Vec2:
        return Vec2(self.min.x, self.max.y)

    def top_right(self) -> Vec2:
        return self.max

    def corners(self) -> list[Vec2]:
        """Corners counter-clockwise, starting at the bottom left."""
        return [self.bottom_left(), self.bottom_right(), self.top_right(), self.top_left()]

    def contains(self, pos: Vec2 | Sequence[Number]) -> bool:
        """Half-open containment: the min edges are inside, the max edges are not."""
        pos = _vec(pos)
        return self.min.x <= pos.x < self.max.x and self.min.y <= pos.y < self.max.y

    def translate(self, offset: Vec2 | Sequence[Number]) -> Aabb:
        offset = _vec(offset)
        return Aabb(self.min + offset, self.max + offset)

    def extend_positive(self, size: Vec2 | Sequence[Number]) -> Aabb:
        return Aabb(self.min, self.max + _vec(size))

    def extend_symmetric(self, size: Vec2 | Sequence[Number]) -> Aabb:
        size = _vec(size)
        return Aabb(self.min - size, self.max + size)

    def extend_uniform(self, amount: Number) -> Aabb:
        return self.extend_symmetric(Vec2.splat(amount))

    def extend_left(self, amount: Number) -> Aabb:
        return Aabb(Vec2(self.min.x - amount, self.min.y), self.max)

    def extend_right(self, amount: Number) -> Aabb:
        return Aabb(self.min, Vec2(self.max.x + amount, self.max.y))

    def extend_up(self, amount: Number) -> Aabb:
        return Aabb(self.min, Vec2(self.max.x, self.max.y + amount))

    def extend_down(self, amount: Number) -> Aabb:
        return Aabb(Vec2(self.min.x, self.min.y - amount), self.max)

    def square_longside(self) -> Aabb:
        d = self.width() - self.height()
        if d > 0:
            return Aabb(
                Vec2(self.min.x, self.min.y - d / 2),
                Vec2(self.max.x, self.max.y + d / 2),
            )
        d = -d
        return Aabb(
            Vec2(self.min.x - d / 2, self.min.y),
            Vec2(self.max.x + d / 2, self.max.y),
        )

    def square_shortside(self) -> Aabb:
        d = self.width() - self.height()
        if d > 0:
            return Aabb(
                Vec2(self.min.x + d / 2, self.min.y),
                Vec2(self.max.x - d / 2, self.max.y),
            )
        d = -d
        return Aabb(
            Vec2(self.min.x, self.min.y + d / 2),
            Vec2(self.max.x, self.max.y - d / 2),
        )

    def zero_size(self, align: Vec2 | Sequence[Number]) -> Aabb:
        return Aabb.point(self.align_pos(align))

    def cut_left(self, width: Number) -> Aabb:
        left = self.extend_right(width - self.width())
        self._set(self.extend_left(-width))
        return left

    def split_left(self, ratio: Number) -> Aabb:
        return self.cut_left(self.width() * ratio)

    def cut_right(self, width: Number) -> Aabb:
        right = self.extend_left(width - self.width())
        self._set(self.extend_right(-width))
        return right

    def split_right(self, ratio: Number) -> Aabb:
        return self.cut_right(self.width() * ratio)

    def cut_top(self, height: Number) -> Aabb:
        top = self.extend_down(height - self.height())
        self._set(self.extend_up(-height))
        return top

    def split_top(self, ratio: Number) -> Aabb:
        return self.cut_top(self.height() * ratio)

    def cut_bottom(self, height: Number) -> Aabb:
        bottom = self.extend_up(height - self.height())
        self._set(self.extend_down(-height))
        return bottom

    def split_bottom(self, ratio: Number) -> Aabb:
        return self.cut_bottom(self.height() * ratio)

    def split_rows(self, rows: int) -> list[Aabb]:
        """Split into equal rows, ordered from the top down."""
        if rows <= 0:
            return []
        row_height = self.height() / rows
        top_left = self.top_left()
        return [
            Aabb.point(top_left - Vec2(0.0, row_height * (i + 1))).extend_positive(
                Vec2(self.width(), row_height)
            )
            for i in range(rows)
        ]

    def split_columns(self, columns: int) -> list[Aabb]:
        """Split into equal columns, ordered from the left."""
        if columns <= 0:
            return []
        column_width = self.width() / columns
        bottom_left = self.bottom_left()
        return [
            Aabb.point(bottom_left + Vec2(column_width * i, 0.0)).extend_positive(
                Vec2(column_width, self.height())
            )
            for i in range(columns)
        ]

    def stack(self, offset: Vec2 | Sequence[Number], cells: int) -> list[Aabb]:
        offset = _vec(offset)
        return [self.translate(offset * i) for i in range(cells)]

    def stack_aligned(
        self, offset: Vec2 | Sequence[Number], cells: int, align: Vec2 | Sequence[Number]
    ) -> list[Aabb]:
        align = _vec(align)
        stacked = self.stack(offset, cells)
        total = Aabb(self.min, self.max)
        if stacked:
            last = stacked[-1]
            total = Aabb(
                Vec2(min(total.min.x, last.min.x), min(total.min.y, last.min.y)),
                Vec2(max(total.max.x, last.max.x), max(total.max.y, last.max.y)),
            )
        shift = self.size() * align - total.size() * align
        return [cell.translate(shift) for cell in stacked]

    def with_width(self, width: Number, align: Number) -> Aabb:
        return self.align_aabb(Vec2(width, self.height()), Vec2(align, 0.5))

    def with_height(self, height: Number, align: Number) -> Aabb:
        return self.align_aabb(Vec2(self.width(), height), Vec2(0.5, align))

    def align_pos(self, align: Vec2 | Sequence[Number]) -> Vec2:
        """A point inside the box: (0, 0) is ``min`` and (1, 1) is ``max``."""
        return self.min + self.size() * _vec(align)

    def align_aabb(
        self, size: Vec2 | Sequence[Number], align: Vec2 | Sequence[Number]
    ) -> Aabb:
        """Place a box of the given size inside this one."""
        size = _vec(size)
        pos_aabb = self.extend_symmetric(-size * 0.5)
        pos = pos_aabb.align_pos(align)
        return Aabb.point(pos).extend_symmetric(size * 0.5)

    def fit_aabb(self, size: Vec2 | Sequence[Number], align: Vec2 | Sequence[Number]) -> Aabb:
        """Scale a box of the given size to fit inside this one, keeping its aspect."""
        size = _vec(size)
        ratio = self.size() / size
        scale = ratio.x if ratio.x < ratio.y else ratio.y
        return self.align_aabb(size * scale, align)

    def fit_aabb_width(self, size: Vec2 | Sequence[Number], align: Number) -> Aabb:
        size = _vec(size)
        scale = self.width() / size.x
        return self.align_aabb(size * scale, Vec2(0.0, align))

    def fit_aabb_height(self, size: Vec2 | Sequence[Number], align: Number) -> Aabb:
        size = _vec(size)
        scale = self.height() / size.y
        return self.align_aabb(size * scale, Vec2(align, 0.0))