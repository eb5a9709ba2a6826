"""Agent runtime: the collaborators an action talks to."""

from __future__ import annotations

import uuid

from loguru import logger

from hushbot.agent.state import State, format_messages
from hushbot.bus.events import MESSAGES_TABLE, Memory
from hushbot.config.loader import get_data_dir
from hushbot.config.schema import Config
from hushbot.errors import RoomNotFoundError
from hushbot.memory.store import JsonlMemoryStore, MemoryStore
from hushbot.participants.store import FileParticipantStore, ParticipantState, ParticipantStateStore
from hushbot.providers.base import LLMProvider, ModelType
from hushbot.rooms.store import InMemoryRoomStore, Room, RoomStore


class AgentRuntime:
    """
    Bundles the agent identity with its injected stores and LLM provider.

    Actions never touch the stores directly; they go through the runtime
    so tests can swap every collaborator for an in-memory fake.
    """

    def __init__(
        self,
        provider: LLMProvider,
        participants: ParticipantStateStore,
        rooms: RoomStore,
        memories: MemoryStore,
        config: Config | None = None,
        agent_id: str | None = None,
    ):
        self.config = config or Config()
        self.provider = provider
        self.participants = participants
        self.rooms = rooms
        self.memories = memories
        self.agent_id = agent_id or self.config.agent.id or str(uuid.uuid4())
        self.agent_name = self.config.agent.name

    @classmethod
    def from_config(
        cls,
        provider: LLMProvider,
        config: Config,
        rooms: RoomStore | None = None,
        agent_id: str | None = None,
    ) -> AgentRuntime:
        """Build a runtime on the file-backed stores under the config's data dir.

        Participant states go to ``<data_dir>/participants.json`` and memories
        to ``<data_dir>/memories/``.  Rooms default to an empty in-memory store.
        """
        data_dir = get_data_dir(config)
        logger.debug(f"Using data dir {data_dir}")
        return cls(
            provider=provider,
            participants=FileParticipantStore(data_dir),
            rooms=rooms or InMemoryRoomStore(),
            memories=JsonlMemoryStore(data_dir / "memories"),
            config=config,
            agent_id=agent_id,
        )

    # -- participant state -------------------------------------------------

    async def get_participant_user_state(
        self, room_id: str, entity_id: str
    ) -> ParticipantState:
        return await self.participants.get_state(room_id, entity_id)

    async def set_participant_user_state(
        self, room_id: str, entity_id: str, state: ParticipantState
    ) -> None:
        await self.participants.set_state(room_id, entity_id, state)
        logger.info(f"Participant state for {entity_id} in {room_id} -> {state.value}")

    # -- rooms / memories ----------------------------------------------------

    async def get_room(self, room_id: str) -> Room:
        return await self.rooms.get_room(room_id)

    async def create_memory(self, memory: Memory, table: str = MESSAGES_TABLE) -> None:
        await self.memories.create_memory(memory, table)
        logger.debug(
            f"Memory {memory.id} -> {table} "
            f"(room={memory.room_id}, actions={list(memory.content.actions)})"
        )

    # -- models --------------------------------------------------------------

    def _model_for(self, model_type: ModelType) -> str:
        if model_type == ModelType.TEXT_SMALL:
            return self.config.models.text_small
        return self.config.models.text_large

    async def use_model(
        self,
        model_type: ModelType,
        prompt: str,
        stop_sequences: list[str] | None = None,
    ) -> str:
        """Run a single-prompt completion and return the reply text.

        Provider errors propagate unchanged; there is no retry here.
        """
        model = self._model_for(model_type)
        logger.debug(f"use_model {model_type.value} ({model}), prompt {len(prompt)} chars")
        response = await self.provider.chat(
            messages=[{"role": "user", "content": prompt}],
            tools=None,
            model=model,
            max_tokens=self.config.models.max_tokens,
            temperature=self.config.models.temperature,
            stop=stop_sequences or None,
        )
        return response.content or ""

    # -- state ---------------------------------------------------------------

    async def compose_state(self, message: Memory, recent_count: int | None = None) -> State:
        """Assemble a :class:`State` for *message* from the memory store.

        The room is cached in ``state.data["room"]`` when it resolves; an
        unknown room is left for the caller to deal with.
        """
        count = recent_count or self.config.mute.recent_messages
        recent = await self.memories.get_memories(message.room_id, MESSAGES_TABLE, count)
        if not any(m.id == message.id for m in recent):
            recent = (recent + [message])[-count:]

        state = State(
            values={
                "agent_name": self.agent_name,
                "recent_messages": format_messages(recent, self.agent_id, self.agent_name),
            },
            text=message.content.text,
        )
        try:
            room = await self.get_room(message.room_id)
        except RoomNotFoundError:
            logger.debug(f"compose_state: room {message.room_id} not found")
        else:
            state.data["room"] = room
            state.values["room_name"] = room.name
        return state
