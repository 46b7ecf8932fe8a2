"""The dispatcher's room: views on four sides, items in them and the turn buttons."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .layout import Aabb, Vec2
from .model import DispatcherState

SCREEN_SIZE: tuple[int, int] = (1920, 1080)
TURN_BUTTON_SIZE = Vec2(50.0, 50.0)


def _parse_vec(raw: Any, name: str) -> Vec2:
    if isinstance(raw, Mapping):
        raw = (raw.get("x"), raw.get("y"))
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{name} must be a pair of numbers")
    x, y = raw
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a pair of numbers")
    return Vec2(float(x), float(y))


class DispatcherViewSide(Enum):
    FRONT = "Front"
    LEFT = "Left"
    RIGHT = "Right"
    BACK = "Back"

    def cycle_left(self) -> DispatcherViewSide:
        return _CYCLE_LEFT[self]

    def cycle_right(self) -> DispatcherViewSide:
        return _CYCLE_RIGHT[self]


_CYCLE_LEFT = {
    DispatcherViewSide.FRONT: DispatcherViewSide.LEFT,
    DispatcherViewSide.LEFT: DispatcherViewSide.BACK,
    DispatcherViewSide.BACK: DispatcherViewSide.RIGHT,
    DispatcherViewSide.RIGHT: DispatcherViewSide.FRONT,
}
_CYCLE_RIGHT = {after: before for before, after in _CYCLE_LEFT.items()}


class DispatcherItem(Enum):
    DOOR_SIGN = "DoorSign"
    TABLE = "Table"
    MONITOR = "Monitor"


@dataclass
class DispatcherItemPosition:
    """Placement in screen space at the fixed 1920x1080 resolution."""

    anchor: Vec2
    alignment: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    size: Optional[Vec2] = None
    hitbox: Aabb = field(default_factory=lambda: Aabb.point(Vec2(0.0, 0.0)))

    @classmethod
    def from_dict(cls, data: Any) -> DispatcherItemPosition:
        if not isinstance(data, Mapping):
            raise ValueError("item position must be a mapping")
        if "anchor" not in data:
            raise ValueError("item position requires an anchor")
        anchor = _parse_vec(data["anchor"], "anchor")
        alignment = (
            _parse_vec(data["alignment"], "alignment")
            if "alignment" in data
            else Vec2(0.5, 0.5)
        )
        raw_size = data.get("size")
        size = None if raw_size is None else _parse_vec(raw_size, "size")
        return cls(anchor=anchor, alignment=alignment, size=size)


@dataclass
class DispatcherView:
    items: list[tuple[DispatcherItem, DispatcherItemPosition]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> DispatcherView:
        if not isinstance(data, Mapping) or not isinstance(data.get("items"), list):
            raise ValueError("view must be a mapping with a list of items")
        items = []
        for entry in data["items"]:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise ValueError("each item must be an (item, position) pair")
            name, position = entry
            try:
                item = DispatcherItem(name)
            except ValueError:
                raise ValueError(f"unknown dispatcher item: {name!r}") from None
            items.append((item, DispatcherItemPosition.from_dict(position)))
        return cls(items)


@dataclass
class DispatcherLevel:
    front: DispatcherView = field(default_factory=DispatcherView)
    left: DispatcherView = field(default_factory=DispatcherView)
    right: DispatcherView = field(default_factory=DispatcherView)
    back: DispatcherView = field(default_factory=DispatcherView)

    def get_side(self, side: DispatcherViewSide) -> DispatcherView:
        return {
            DispatcherViewSide.FRONT: self.front,
            DispatcherViewSide.LEFT: self.left,
            DispatcherViewSide.RIGHT: self.right,
            DispatcherViewSide.BACK: self.back,
        }[side]


def _sprite_for(item: DispatcherItem, state: DispatcherState) -> str:
    if item is DispatcherItem.DOOR_SIGN:
        return "sign_open" if state.door_sign_open else "sign_closed"
    return {DispatcherItem.TABLE: "table", DispatcherItem.MONITOR: "monitor"}[item]


class GameDispatcher:
    """Input handling and item layout of the dispatcher's game screen."""

    def __init__(self, level: DispatcherLevel) -> None:
        self.level = copy.deepcopy(level)
        self.state = DispatcherState()
        self.active_side = DispatcherViewSide.BACK
        self.screen = Aabb.point(Vec2(0.0, 0.0)).extend_positive(Vec2(1.0, 1.0))
        self.texture_scaling = 1.0
        self.cursor_position_raw = Vec2(0.0, 0.0)
        self.cursor_position_game = Vec2(0.0, 0.0)

        width, height = SCREEN_SIZE
        half = TURN_BUTTON_SIZE / 2
        self.turn_left = Aabb.point(Vec2(half.x, height / 2)).extend_symmetric(half)
        self.turn_right = Aabb.point(Vec2(width - half.x, height / 2)).extend_symmetric(half)

    def set_screen(self, screen: Aabb) -> None:
        """Set where the game texture is shown on the window."""
        self.screen = screen

    def cursor_move(self, position: Vec2 | Sequence[float]) -> Vec2:
        """Record a window cursor position and return it in game coordinates."""
        position = Vec2(*position)
        self.cursor_position_raw = position
        self.cursor_position_game = (
            (position - self.screen.bottom_left()) / self.screen.size() * Vec2(*SCREEN_SIZE)
        )
        return self.cursor_position_game

    def layout_items(
        self, texture_sizes: Mapping[str, tuple[float, float]]
    ) -> list[tuple[str, Aabb]]:
        """Place the active side's items and update their hitboxes.

        ``texture_sizes`` maps sprite names to pixel sizes. Returns the sprite
        and target box of each item in drawing order.
        """
        placed = []
        for item, positioning in self.level.get_side(self.active_side).items:
            sprite = _sprite_for(item, self.state)
            texture_size = Vec2(*texture_sizes[sprite])
            size = (
                positioning.size
                if positioning.size is not None
                else texture_size * self.texture_scaling
            )
            pos = Aabb.point(positioning.anchor - size * positioning.alignment).extend_positive(
                size
            )
            positioning.hitbox = pos.fit_aabb(texture_size, Vec2(0.5, 0.5))
            placed.append((sprite, positioning.hitbox))
        return placed

    def cursor_press(self) -> None:
        cursor = self.cursor_position_game
        if self.turn_left.contains(cursor):
            self.active_side = self.active_side.cycle_left()
            return
        if self.turn_right.contains(cursor):
            self.active_side = self.active_side.cycle_right()
            return
        for item, positioning in self.level.get_side(self.active_side).items:
            if positioning.hitbox.contains(cursor) and item is DispatcherItem.DOOR_SIGN:
                self.state.door_sign_open = not self.state.door_sign_open