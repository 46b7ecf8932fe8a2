"""Retained widget storage keyed by call site, rebuilt into a tree every frame."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, TypeVar


@dataclass(frozen=True)
class WidgetId:
    """A widget's key plus how many times that key was already used this frame."""

    key: Optional[Hashable]
    index: int = 0


ROOT = WidgetId(None, 0)


class _HasState(Protocol):
    state: Any


W = TypeVar("W", bound=_HasState)


@dataclass
class _Cell:
    next: int = 0
    widgets: list[Any] = field(default_factory=list)


class UiState:
    """Keeps widgets alive between frames and records their parent-child tree.

    Each request with the same key in one frame yields a separate widget; the
    widgets persist across frames and are reused in the same order.
    """

    def __init__(self) -> None:
        self._children: dict[WidgetId, list[WidgetId]] = {}
        self._active: dict[Hashable, int] = {}
        self._widgets: dict[Hashable, _Cell] = {}

    def frame_start(self) -> None:
        """Forget this frame's tree; stored widgets are handed out again from the first."""
        self._children.clear()
        self._active.clear()
        for cell in self._widgets.values():
            cell.next = 0

    def get_root_or(self, key: Hashable, default: Callable[[], W]) -> W:
        return self.get_or(ROOT, key, default)

    def get_or(self, parent: WidgetId, key: Hashable, default: Callable[[], W]) -> W:
        """Fetch the next widget stored under ``key``, creating it with ``default``."""
        if key is None:
            raise ValueError("widget key must not be None")
        count = self._active.get(key, 0)
        widget_id = WidgetId(key, count)
        self._active[key] = count + 1

        self._children.setdefault(parent, []).append(widget_id)

        cell = self._widgets.setdefault(key, _Cell())
        if len(cell.widgets) <= cell.next:
            cell.widgets.append(default())
        widget = cell.widgets[cell.next]
        cell.next += 1

        widget.state.id = widget_id
        return widget

    def iter_widgets(
        self, f_pre: Callable[[Any], None], f_post: Callable[[Any], None]
    ) -> None:
        """Walk this frame's tree depth-first, calling ``f_pre`` before and ``f_post`` after children."""
        self._visit(ROOT, f_pre, f_post)

    def _widget(self, widget_id: WidgetId) -> Any:
        cell = self._widgets.get(widget_id.key)
        if cell is None or widget_id.index >= len(cell.widgets):
            raise RuntimeError("active widget id is not present in the stored widgets")
        return cell.widgets[widget_id.index]

    def _visit(
        self,
        parent: WidgetId,
        f_pre: Callable[[Any], None],
        f_post: Callable[[Any], None],
    ) -> None:
        for child in self._children.get(parent, ()):
            f_pre(self._widget(child))
            self._visit(child, f_pre, f_post)
            f_post(self._widget(child))