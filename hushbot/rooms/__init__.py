"""Room lookup."""

from hushbot.rooms.store import InMemoryRoomStore, Room, RoomStore

__all__ = ["Room", "RoomStore", "InMemoryRoomStore"]
