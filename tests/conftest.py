"""Shared fixtures: scripted LLM provider and in-memory stores."""

from __future__ import annotations

from typing import Any

import pytest

from hushbot.agent.runtime import AgentRuntime
from hushbot.bus.events import Content, Memory
from hushbot.config.schema import Config
from hushbot.memory.store import InMemoryMemoryStore
from hushbot.participants.store import InMemoryParticipantStore
from hushbot.providers.base import LLMProvider, LLMResponse
from hushbot.rooms.store import InMemoryRoomStore, Room

AGENT_ID = "agent-g"
ROOM_ID = "room-r"
USER_ID = "user-u"


class ScriptedProvider(LLMProvider):
    """Returns canned replies in order and records every call."""

    def __init__(self, replies: list[str] | None = None) -> None:
        super().__init__()
        self.replies = list(replies or [])
        self.calls: list[dict[str, Any]] = []

    async def chat(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        self.calls.append(
            {"messages": messages, "model": model, "stop": stop, "max_tokens": max_tokens}
        )
        return LLMResponse(content=self.replies.pop(0) if self.replies else "")

    def get_default_model(self) -> str:
        return "scripted"


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def participants() -> InMemoryParticipantStore:
    return InMemoryParticipantStore()


@pytest.fixture
def rooms() -> InMemoryRoomStore:
    return InMemoryRoomStore([Room(id=ROOM_ID, name="general", source="discord")])


@pytest.fixture
def memories() -> InMemoryMemoryStore:
    return InMemoryMemoryStore()


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def runtime(provider, participants, rooms, memories, config) -> AgentRuntime:
    return AgentRuntime(
        provider=provider,
        participants=participants,
        rooms=rooms,
        memories=memories,
        config=config,
        agent_id=AGENT_ID,
    )


def make_message(text: str = "please be quiet", room_id: str = ROOM_ID) -> Memory:
    return Memory(
        entity_id=USER_ID,
        agent_id=AGENT_ID,
        room_id=room_id,
        content=Content(text=text, source="discord"),
        metadata={"entity_name": "alice"},
    )


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    from loguru import logger

    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
