"""Colours, text rendering options and pixel scaling."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass, field

from .layout import Vec2

TARGET_SIZE: tuple[int, int] = (640, 360)


def get_pixel_scale(framebuffer_size: Sequence[float]) -> float:
    """How many screen pixels one pixel of the 640x360 target covers."""
    width, height = framebuffer_size
    return min(width / TARGET_SIZE[0], height / TARGET_SIZE[1])


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)  # type: ignore[attr-defined]
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)  # type: ignore[attr-defined]
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)  # type: ignore[attr-defined]
Color.TRANSPARENT_BLACK = Color(0.0, 0.0, 0.0, 0.0)  # type: ignore[attr-defined]


@dataclass
class TextRenderOptions:
    size: float = 1.0
    align: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))
    hover_color: Color = field(default_factory=lambda: Color(0.7, 0.7, 0.7, 1.0))
    press_color: Color = field(default_factory=lambda: Color(0.5, 0.5, 0.5, 1.0))
    rotation: float = 0.0

    @classmethod
    def with_size(cls, size: float) -> TextRenderOptions:
        return cls(size=size)

    def aligned(self, align: Vec2 | Sequence[float]) -> TextRenderOptions:
        return dataclasses.replace(self, align=Vec2(*align))

    def colored(self, color: Color) -> TextRenderOptions:
        return dataclasses.replace(self, color=color)