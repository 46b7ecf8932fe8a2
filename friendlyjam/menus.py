"""Main menu and lobby: screen layout, button handling and lobby messaging."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Union

from .atlas import SubTexture
from .layout import Aabb
from .model import ClientMessage, GameRole, RoomInfo, ServerMessage
from .ui import UiContext
from .widgets import ButtonWidget, InputWidget, TextWidget

log = logging.getLogger(__name__)

CREATE_ROOM_LABEL = "Создать комнату"
JOIN_ROOM_LABEL = "Присоединиться"
ROOM_CODE_LABEL = "Код комнаты: {}"
DISPATCHER_LABEL = "Диспетчер"
SOLVER_LABEL = "Беглец"

FONT_SIZE_RATIO = 0.05
LAYOUT_SIZE_RATIO = 0.07


@dataclass(frozen=True)
class CreateRoom:
    """The player asked to create a new room."""


@dataclass(frozen=True)
class JoinRoom:
    """The player asked to join the room with ``code``."""

    code: str


MainMenuAction = Union[CreateRoom, JoinRoom]


@dataclass
class MainMenuState:
    action: Optional[MainMenuAction] = None

    def take_action(self) -> Optional[MainMenuAction]:
        """Return the pending action and clear it."""
        action, self.action = self.action, None
        return action


def _begin_layout(screen: Aabb, context: UiContext) -> Aabb:
    context.screen = screen
    context.font_size = screen.height() * FONT_SIZE_RATIO
    context.layout_size = screen.height() * LAYOUT_SIZE_RATIO
    return Aabb(screen.min, screen.max)


class MainMenuUi:
    """Create-room and join-room buttons with a room code input."""

    def __init__(self, button_texture: SubTexture) -> None:
        self.button_texture = button_texture

    def layout(self, state: MainMenuState, screen: Aabb, context: UiContext) -> None:
        create = _begin_layout(screen, context)
        join = create.split_bottom(0.5)
        code = join.split_right(0.5)

        texture = self.button_texture
        button = context.state.get_root_or(
            "main.create", lambda: ButtonWidget(texture).with_text(CREATE_ROOM_LABEL)
        )
        button.update(create, context)
        if button.state.mouse_left.clicked:
            state.action = CreateRoom()

        join_button = context.state.get_root_or(
            "main.join", lambda: ButtonWidget(texture).with_text(JOIN_ROOM_LABEL)
        )
        join_button.update(join, context)

        code_input = context.state.get_root_or("main.code", lambda: InputWidget(""))
        code_input.update(code, context)

        if join_button.state.mouse_left.clicked:
            state.action = JoinRoom(code_input.raw)


@dataclass
class LobbyState:
    """A joined room; ``send`` delivers messages to the server."""

    send: Callable[[ClientMessage], None]
    room_info: RoomInfo
    selected_role: Optional[GameRole] = None
    starting_role: Optional[GameRole] = field(default=None, init=False)

    def __post_init__(self) -> None:
        log.info("Joined room %s", self.room_info.code)

    def select_role(self, role: GameRole) -> None:
        self.selected_role = role
        self.send(ClientMessage.select_role(role))

    def handle_server_message(self, message: ServerMessage) -> Optional[GameRole]:
        """React to a server message; returns the role when the game starts."""
        if message.kind == "Ping":
            self.send(ClientMessage.pong())
        elif message.kind == "Error":
            log.error("Error: %s", message.value)
        elif message.kind == "StartGame":
            log.info("Starting game as %s", message.value)
            self.starting_role = message.value
            return message.value
        return None


class LobbyUi:
    """The room code and one button per role."""

    def __init__(self, button_texture: SubTexture) -> None:
        self.button_texture = button_texture

    def layout(self, state: LobbyState, screen: Aabb, context: UiContext) -> None:
        code = _begin_layout(screen, context)
        solver = code.split_bottom(0.66)
        dispatcher = solver.split_right(0.5)

        code_text = context.state.get_root_or("lobby.code", lambda: TextWidget(""))
        code_text.text = ROOM_CODE_LABEL.format(state.room_info.code)
        code_text.update(code, context)

        texture = self.button_texture
        button = context.state.get_root_or(
            "lobby.dispatcher", lambda: ButtonWidget(texture).with_text(DISPATCHER_LABEL)
        )
        button.update(dispatcher, context)
        if button.state.mouse_left.clicked:
            state.select_role(GameRole.DISPATCHER)

        button = context.state.get_root_or(
            "lobby.solver", lambda: ButtonWidget(texture).with_text(SOLVER_LABEL)
        )
        button.update(solver, context)
        if button.state.mouse_left.clicked:
            state.select_role(GameRole.SOLVER)