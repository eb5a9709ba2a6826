"""Memory records: the append-only unit of conversation history."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from hushbot.utils.helpers import now_ms

# Table (channel) for chat messages and action audit records.
MESSAGES_TABLE = "messages"


@dataclass(frozen=True)
class Content:
    """Payload of a memory record."""

    text: str = ""
    thought: str | None = None
    actions: tuple[str, ...] = ()
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text, "actions": list(self.actions)}
        if self.thought is not None:
            data["thought"] = self.thought
        if self.source is not None:
            data["source"] = self.source
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Content:
        return cls(
            text=data.get("text") or "",
            thought=data.get("thought"),
            actions=tuple(data.get("actions") or ()),
            source=data.get("source"),
        )


@dataclass(frozen=True)
class Memory:
    """
    A single immutable memory record.

    ``entity_id`` is the actor the record originates from, ``agent_id`` the
    agent that wrote it.  Records are only ever appended to a store, never
    updated in place.
    """

    entity_id: str
    agent_id: str
    room_id: str
    content: Content = field(default_factory=Content)
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: int = field(default_factory=now_ms)

    @property
    def source(self) -> str | None:
        return self.content.source

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "entity_id": self.entity_id,
            "agent_id": self.agent_id,
            "room_id": self.room_id,
            "content": self.content.to_dict(),
            "metadata": dict(self.metadata),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Memory:
        return cls(
            id=data["id"],
            entity_id=data["entity_id"],
            agent_id=data["agent_id"],
            room_id=data["room_id"],
            content=Content.from_dict(data.get("content") or {}),
            metadata=dict(data.get("metadata") or {}),
            created_at=int(data.get("created_at") or 0),
        )
