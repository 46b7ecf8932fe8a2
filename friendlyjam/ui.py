"""Per-frame input state for the immediate-mode UI: cursor, widget presses and text editing."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from .layout import Aabb, Vec2
from .ui_state import ROOT, UiState, WidgetId

MAX_CLICK_DISTANCE = 5.0
"""Max distance the cursor may travel for a press and release to count as a click."""

SFX_VOLUME = 0.5


def _zero() -> Vec2:
    return Vec2(0.0, 0.0)


@dataclass
class MouseButtonContext:
    down: bool = False
    was_down: bool = False

    def update(self, is_down: bool) -> None:
        self.was_down = self.down
        self.down = is_down


@dataclass
class CursorContext:
    """Cursor state; moves are buffered in ``next_position`` until ``update``."""

    next_position: Vec2 = field(default_factory=_zero)
    position: Vec2 = field(default_factory=_zero)
    last_position: Vec2 = field(default_factory=_zero)
    left: MouseButtonContext = field(default_factory=MouseButtonContext)
    right: MouseButtonContext = field(default_factory=MouseButtonContext)
    scroll: float = 0.0

    def scroll_dir(self) -> int:
        if self.scroll == 0.0 or math.isnan(self.scroll):
            return 0
        return 1 if self.scroll > 0 else -1

    def cursor_move(self, pos: Vec2) -> None:
        self.next_position = Vec2(*pos)

    def reset(self) -> None:
        fresh = CursorContext()
        for f in dataclasses.fields(self):
            setattr(self, f.name, getattr(fresh, f.name))

    def delta(self) -> Vec2:
        """How far the cursor travelled since the last frame."""
        return self.position - self.last_position

    def update(self, is_down: bool, right_down: bool) -> None:
        self.last_position = self.position
        self.position = self.next_position
        self.left.update(is_down)
        self.right.update(right_down)


@dataclass
class WidgetPressState:
    press_position: Vec2
    duration: float = 0.0


@dataclass
class WidgetMouseState:
    just_pressed: bool = False
    pressed: Optional[WidgetPressState] = None
    just_released: bool = False
    clicked: bool = False

    def update(self, context: UiContext, hovered: bool, mouse: MouseButtonContext) -> None:
        was_pressed = self.pressed is not None
        pressed = mouse.down and (was_pressed or (hovered and not mouse.was_down))
        self.just_pressed = not was_pressed and pressed
        self.just_released = was_pressed and not pressed
        self.clicked = (
            self.just_released
            and self.pressed is not None
            and (self.pressed.press_position - context.cursor.position).length()
            < MAX_CLICK_DISTANCE
        )
        if not pressed:
            self.pressed = None
        elif self.pressed is None:
            self.pressed = WidgetPressState(context.cursor.position, 0.0)
        else:
            self.pressed = WidgetPressState(
                self.pressed.press_position, self.pressed.duration + context.delta_time
            )


@dataclass
class WidgetSfxConfig:
    hover: bool = False
    left_click: bool = False

    @classmethod
    def hover_only(cls) -> WidgetSfxConfig:
        return cls(hover=True)

    @classmethod
    def hover_left(cls) -> WidgetSfxConfig:
        return cls(hover=True, left_click=True)


def _default_position() -> Aabb:
    return Aabb.point(Vec2(0.0, 0.0)).extend_uniform(1.0)


@dataclass
class WidgetState:
    id: WidgetId = ROOT
    position: Aabb = field(default_factory=_default_position)
    visible: bool = True
    hovered: bool = False
    mouse_left: WidgetMouseState = field(default_factory=WidgetMouseState)
    mouse_right: WidgetMouseState = field(default_factory=WidgetMouseState)
    sfx_config: WidgetSfxConfig = field(default_factory=WidgetSfxConfig)

    def with_sfx(self, sfx_config: WidgetSfxConfig) -> WidgetState:
        return dataclasses.replace(self, sfx_config=sfx_config)

    def update(self, position: Aabb, context: UiContext) -> None:
        self.position = position
        if not self.visible:
            self.hovered = False
            self.mouse_left = WidgetMouseState()
            self.mouse_right = WidgetMouseState()
            return

        was_hovered = self.hovered
        self.hovered = self.position.contains(context.cursor.position)
        self.mouse_left.update(context, self.hovered, context.cursor.left)
        self.mouse_right.update(context, self.hovered, context.cursor.right)

        if self.mouse_left.clicked and self.sfx_config.left_click:
            context.play("click", SFX_VOLUME)
        if not was_hovered and self.hovered and self.sfx_config.hover:
            context.play("hover", SFX_VOLUME)


class TextEdit:
    """Tracks which edit session owns text input; each session gets an id.

    A disabled editor (no window to edit in) never starts a session.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.text = ""
        self.counter = 0
        self.editing = False

    def __repr__(self) -> str:
        return f"TextEdit(enabled={self.enabled}, editing={self.editing})"

    def edit(self, text: str) -> int:
        """Start editing ``text`` and return the id of the session."""
        if not self.enabled:
            return 0
        if self.editing:
            self.editing = False
            self.counter += 1
        self.editing = True
        self.text = text
        return self.counter

    def stop(self) -> None:
        if not self.enabled or not self.editing:
            return
        self.editing = False
        self.counter += 1

    def is_active(self, edit_id: int) -> bool:
        return self.enabled and edit_id == self.counter

    def any_active(self) -> bool:
        return self.enabled and self.editing


@dataclass
class UiContext:
    """Everything widgets see while laying out one frame."""

    state: UiState = field(default_factory=UiState)
    cursor: CursorContext = field(default_factory=CursorContext)
    text_edit: TextEdit = field(default_factory=TextEdit)
    real_time: float = 0.0
    delta_time: float = 0.1
    screen: Aabb = field(
        default_factory=lambda: Aabb.point(Vec2(0.0, 0.0)).extend_positive(Vec2(1.0, 1.0))
    )
    font_size: float = 1.0
    layout_size: float = 1.0
    geometry: Any = None
    font: Any = None
    play_sound: Optional[Callable[[str, float], None]] = None

    def play(self, name: str, volume: float) -> None:
        if self.play_sound is not None:
            self.play_sound(name, volume)

    def update(self, delta_time: float, left_down: bool, right_down: bool) -> None:
        """Advance time and take in this frame's button states; call before layout."""
        self.real_time += delta_time
        self.delta_time = delta_time
        self.cursor.update(left_down, right_down)

    def frame_end(self) -> None:
        """Reset accumulators after layout."""
        self.cursor.scroll = 0.0