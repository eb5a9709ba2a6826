"""Room records and lookup."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any

from hushbot.errors import RoomNotFoundError


@dataclass
class Room:
    """A conversation room (channel, group chat, thread ...)."""

    id: str
    name: str
    source: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class RoomStore(abc.ABC):
    """Resolve rooms by id."""

    @abc.abstractmethod
    async def get_room(self, room_id: str) -> Room:
        """Return the room or raise :class:`RoomNotFoundError`."""
        ...

    @abc.abstractmethod
    async def create_room(self, room: Room) -> None:
        ...


class InMemoryRoomStore(RoomStore):
    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._rooms: dict[str, Room] = {r.id: r for r in rooms or []}

    async def get_room(self, room_id: str) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    async def create_room(self, room: Room) -> None:
        self._rooms[room.id] = room
