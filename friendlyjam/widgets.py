"""Widgets: text labels, textured buttons and text inputs."""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from .atlas import SubTexture
from .geometry import Geometry
from .layout import Aabb, Vec2
from .rendering import Color, TextRenderOptions
from .ui import UiContext, WidgetState

_DIGITS = "0123456789"


class Widget(ABC):
    """A retained widget; it owns a ``WidgetState`` and produces geometry."""

    state: WidgetState

    def draw_top(self, context: UiContext) -> Geometry:
        """Geometry drawn before the widget's children."""
        return Geometry()

    @abstractmethod
    def draw(self, context: UiContext) -> Geometry:
        """Geometry drawn after the widget's children."""


def _signum(value: float) -> float:
    return math.copysign(1.0, value)


class TextWidget(Widget):
    def __init__(self, text: str = "") -> None:
        self.state = WidgetState()
        self.text = text
        self.options = TextRenderOptions(size=1000.0)

    def align(self, align: Vec2 | Sequence[float]) -> None:
        self.options.align = Vec2(*align)

    def update(self, position: Aabb, context: UiContext) -> None:
        self.state.update(position, context)

    def draw_colored(self, context: UiContext, color: Color) -> Geometry:
        """Text shrunk to fit 90% of the widget's (rotated) width."""
        measure = context.font.measure(self.text, 1.0)

        size = self.state.position.size()
        right = Vec2(size.x, 0.0).rotate(self.options.rotation).x
        left = Vec2(0.0, size.y).rotate(self.options.rotation).x
        if _signum(left) != _signum(right):
            width = abs(left) + abs(right)
        else:
            width = max(abs(left), abs(right))

        max_width = width * 0.9
        text_size = self.options.size
        if measure.width() != 0:
            text_size = min(text_size, max_width / measure.width())

        options = dataclasses.replace(self.options, size=text_size, color=color)
        return context.geometry.text(
            self.text, self.state.position.align_pos(options.align), options
        )

    def draw(self, context: UiContext) -> Geometry:
        return self.draw_colored(context, self.options.color)


class ButtonWidget(Widget):
    def __init__(self, texture: SubTexture) -> None:
        self.state = WidgetState()
        self.texture = texture
        self.text = TextWidget("")

    def with_text(self, text: str) -> ButtonWidget:
        self.text.text = text
        return self

    def update(self, position: Aabb, context: UiContext) -> None:
        self.state.update(position, context)
        self.text.update(position, context)

    def draw(self, context: UiContext) -> Geometry:
        geometry = Geometry()
        geometry.merge(context.geometry.texture(self.state.position, Color.WHITE, self.texture))
        geometry.merge(self.text.draw(context))
        return geometry


class InputFormat(Enum):
    ANY = "any"
    INTEGER = "integer"
    FLOAT = "float"
    RATIO = "ratio"

    def fix(self, text: str) -> str:
        """Drop the characters this format does not allow."""
        if self is InputFormat.ANY:
            return text
        if self is InputFormat.INTEGER:
            return "".join(c for c in text if c in _DIGITS)
        if self is InputFormat.FLOAT:
            negative = text.startswith("-")
            if negative:
                text = text[1:]
            kept = "".join(c for c in text if c == "." or c in _DIGITS)
            whole, dot, fraction = kept.partition(".")
            if dot:
                kept = whole + "." + fraction.replace(".", "")
            return "-" + kept if negative else kept
        num, slash, den = text.partition("/")
        if slash:
            return InputFormat.INTEGER.fix(num) + "/" + InputFormat.INTEGER.fix(den)
        return InputFormat.INTEGER.fix(text)


class InputWidget(Widget):
    def __init__(self, name: str = "") -> None:
        self.state = WidgetState()
        self.name = TextWidget(name)
        self.text = TextWidget("")
        self.edit_id: Optional[int] = None
        self.raw = ""
        self.editing = False

        self.hide_input = False
        self.format = InputFormat.ANY
        self.layout_vertical = False

    def with_format(self, format: InputFormat) -> InputWidget:
        self.format = format
        return self

    def vertical(self) -> InputWidget:
        self.layout_vertical = True
        return self

    def sync(self, text: str, context: UiContext) -> None:
        """Replace the contents from outside, keeping an active edit in step."""
        if self.raw == text:
            return
        self.raw = text
        self.text.text = self.raw
        self.editing = self.edit_id is not None and context.text_edit.is_active(self.edit_id)
        if self.editing:
            self.edit_id = context.text_edit.edit(self.raw)

    def update(self, position: Aabb, context: UiContext) -> None:
        self.state.update(position, context)

        if self.state.mouse_left.clicked:
            self.edit_id = context.text_edit.edit(self.text.text)

        text_edit = context.text_edit
        if self.edit_id is not None and text_edit.is_active(self.edit_id):
            if self.raw != text_edit.text:
                self.raw = self.format.fix(text_edit.text)
                self.edit_id = text_edit.edit(self.raw)
                self.text.text = "*" * len(self.raw) if self.hide_input else self.raw
            self.editing = True
        else:
            self.editing = False

        main = Aabb(position.min, position.max)
        centered = Vec2(0.5, 0.5)
        if self.layout_vertical:
            if self.name.text:
                name_area = main.split_top(0.5)
                self.name.align(centered)
                self.name.update(name_area, context)
            self.text.align(centered)
        elif self.name.text:
            name_width = min(context.layout_size * 5.0, main.width() / 2.0)
            name_area = main.cut_left(name_width)
            self.name.align(Vec2(0.0, 0.5))
            self.name.update(name_area, context)
            self.text.align(Vec2(1.0, 0.5))
        else:
            self.text.align(centered)
        self.text.update(main, context)

        self.name.options.color = Color.WHITE
        self.text.options.color = Color.BLUE if self.editing else Color.WHITE

    def draw_colored(self, context: UiContext, color: Color) -> Geometry:
        geometry = self.name.draw_colored(context, color)
        geometry.merge(self.text.draw_colored(context, color))
        if self.editing:
            pos = self.text.state.position
            underline = Aabb.point(pos.center() - Vec2(0.0, context.font_size * 0.5)).extend_symmetric(
                Vec2(pos.width(), context.font_size * 0.1) / 2
            )
            geometry.merge(context.geometry.quad(underline, Color.BLUE))
        return geometry

    def draw(self, context: UiContext) -> Geometry:
        return self.draw_colored(context, self.name.options.color)