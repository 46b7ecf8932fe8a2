"""Game roles, dispatcher state and the messages exchanged with the server."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, NamedTuple

ClientId = int


class GameRole(Enum):
    DISPATCHER = "Dispatcher"
    SOLVER = "Solver"


@dataclass
class DispatcherState:
    door_sign_open: bool = False


@dataclass
class RoomInfo:
    code: str
    players: list[ClientId] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "players": list(self.players)}

    @classmethod
    def from_dict(cls, data: Any) -> RoomInfo:
        if not isinstance(data, Mapping):
            raise ValueError("room info must be a mapping")
        code = data.get("code")
        players = data.get("players")
        if not isinstance(code, str):
            raise ValueError("room code must be a string")
        if not isinstance(players, list) or not all(
            isinstance(p, int) and not isinstance(p, bool) for p in players
        ):
            raise ValueError("room players must be a list of client ids")
        return cls(code, list(players))


class _Codec(NamedTuple):
    kind: type
    encode: Callable[[Any], Any]
    decode: Callable[[Any], Any]


def _decode_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError("expected a string payload")
    return raw


_STR = _Codec(str, lambda value: value, _decode_str)
_ROLE = _Codec(GameRole, lambda role: role.value, GameRole)
_ROOM = _Codec(RoomInfo, RoomInfo.to_dict, RoomInfo.from_dict)


@dataclass(frozen=True)
class _Message:
    kind: str
    value: Any = None

    _VARIANTS: ClassVar[dict[str, _Codec | None]] = {}

    def __post_init__(self) -> None:
        if self.kind not in self._VARIANTS:
            raise ValueError(f"unknown {type(self).__name__} variant: {self.kind!r}")
        codec = self._VARIANTS[self.kind]
        if codec is None:
            if self.value is not None:
                raise ValueError(f"variant {self.kind} carries no payload")
        elif not isinstance(self.value, codec.kind):
            raise ValueError(
                f"variant {self.kind} expects {codec.kind.__name__}, "
                f"got {type(self.value).__name__}"
            )

    def _encode(self) -> dict[str, Any]:
        codec = self._VARIANTS[self.kind]
        return {self.kind: None if codec is None else codec.encode(self.value)}

    @classmethod
    def _decode(cls, data: Any):
        """Decode an externally tagged message; a bare string names a unit variant."""
        if isinstance(data, str):
            kind, raw = data, None
        elif isinstance(data, Mapping) and len(data) == 1:
            ((kind, raw),) = data.items()
        else:
            raise ValueError("message must be a variant name or a single-key mapping")
        if kind not in cls._VARIANTS:
            raise ValueError(f"unknown {cls.__name__} variant: {kind!r}")
        codec = cls._VARIANTS[kind]
        if codec is None:
            if raw is not None:
                raise ValueError(f"variant {kind} carries no payload")
            return cls(kind)
        if raw is None:
            raise ValueError(f"variant {kind} requires a payload")
        return cls(kind, codec.decode(raw))


@dataclass(frozen=True)
class ServerMessage(_Message):
    """A message sent by the server to a client."""

    _VARIANTS: ClassVar[dict[str, _Codec | None]] = {
        "Ping": None,
        "Error": _STR,
        "RoomJoined": _ROOM,
        "StartGame": _ROLE,
    }

    def to_dict(self) -> dict[str, Any]:
        return self._encode()

    @classmethod
    def from_dict(cls, data: Any) -> ServerMessage:
        return cls._decode(data)

    @classmethod
    def ping(cls) -> ServerMessage:
        return cls("Ping")

    @classmethod
    def error(cls, text: str) -> ServerMessage:
        return cls("Error", text)

    @classmethod
    def room_joined(cls, info: RoomInfo) -> ServerMessage:
        return cls("RoomJoined", info)

    @classmethod
    def start_game(cls, role: GameRole) -> ServerMessage:
        return cls("StartGame", role)


@dataclass(frozen=True)
class ClientMessage(_Message):
    """A message sent by a client to the server."""

    _VARIANTS: ClassVar[dict[str, _Codec | None]] = {
        "Pong": None,
        "CreateRoom": None,
        "JoinRoom": _STR,
        "SelectRole": _ROLE,
    }

    def to_dict(self) -> dict[str, Any]:
        return self._encode()

    @classmethod
    def from_dict(cls, data: Any) -> ClientMessage:
        return cls._decode(data)

    @classmethod
    def pong(cls) -> ClientMessage:
        return cls("Pong")

    @classmethod
    def create_room(cls) -> ClientMessage:
        return cls("CreateRoom")

    @classmethod
    def join_room(cls, code: str) -> ClientMessage:
        return cls("JoinRoom", code)

    @classmethod
    def select_role(cls, role: GameRole) -> ClientMessage:
        return cls("SelectRole", role)