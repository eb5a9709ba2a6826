"""Per-room participant state."""

from hushbot.participants.store import (
    FileParticipantStore,
    InMemoryParticipantStore,
    ParticipantState,
    ParticipantStateStore,
)

__all__ = [
    "ParticipantState",
    "ParticipantStateStore",
    "InMemoryParticipantStore",
    "FileParticipantStore",
]
