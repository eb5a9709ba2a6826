"""Exceptions raised by the hushbot workflow and its stores."""


class HushbotError(Exception):
    """Base class for hushbot errors."""


class StateRequiredError(HushbotError):
    """Raised when an action needs a composed conversation state but got none."""


class RoomNotFoundError(HushbotError, LookupError):
    """Raised when a room id cannot be resolved."""

    def __init__(self, room_id: str) -> None:
        super().__init__(f"Room not found: {room_id}")
        self.room_id = room_id
