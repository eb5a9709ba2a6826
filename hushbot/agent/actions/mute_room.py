"""MUTE_ROOM action: decide whether to go quiet in a room, then do it.

Flow for one incoming message::

    validate (already muted? -> stop)
      -> ask the small model YES/NO
      -> classify the reply, write an audit memory
      -> on YES: set participant state to MUTED
      -> closing audit memory + self-authored acknowledgment message
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from hushbot.agent.actions.base import Action, HandlerCallback
from hushbot.agent.decision import MuteDecision, classify_response
from hushbot.agent.runtime import AgentRuntime
from hushbot.agent.state import State, compose_prompt_from_state
from hushbot.bus.events import MESSAGES_TABLE, Content, Memory
from hushbot.errors import StateRequiredError
from hushbot.participants.store import ParticipantState
from hushbot.providers.base import ModelType
from hushbot.rooms.store import Room

# -----------------------------------------------------------------------
# Prompt template
# -----------------------------------------------------------------------

BOOLEAN_FOOTER = "Respond with only a YES or a NO."

SHOULD_MUTE_TEMPLATE = (
    "# Task: Decide if {agent_name} should mute this room and stop responding "
    "unless explicitly mentioned.\n\n"
    "{recent_messages}\n\n"
    "Should {agent_name} mute this room and stop responding unless explicitly "
    "mentioned?\n\n"
    "Respond with YES if:\n"
    "- The user is being aggressive, rude, or inappropriate\n"
    "- The user has directly asked {agent_name} to stop responding or be quiet\n"
    "- {agent_name}'s responses are not well-received or are annoying the user(s)\n\n"
    "Otherwise, respond with NO.\n"
    f"{BOOLEAN_FOOTER}"
)

# -----------------------------------------------------------------------
# Audit tags and thoughts
# -----------------------------------------------------------------------

ACTION_MUTE_ROOM = "MUTE_ROOM"
ACTION_MUTE_STARTED = "MUTE_ROOM_STARTED"
ACTION_MUTE_FAILED = "MUTE_ROOM_FAILED"
ACTION_MUTE_START = "MUTE_ROOM_START"

_THOUGHT_WILL_MUTE = "I will now mute this room"
_THOUGHT_WONT_MUTE = "I decided to not mute this room"
_THOUGHT_MUTED = "I muted the room {room_name}"


class MuteRoomAction(Action):
    """Mute a room: ignore its messages unless explicitly mentioned.

    Only meant for when the agent is asked to be quiet or is annoying
    people.  The LLM makes the final call.
    """

    name = ACTION_MUTE_ROOM
    similes = ("MUTE_CHAT", "MUTE_CONVERSATION", "MUTE_ROOM", "MUTE_THREAD", "MUTE_CHANNEL")
    description = (
        "Mutes a room, ignoring all messages unless explicitly mentioned. "
        "Only do this if explicitly asked to, or if you're annoying people."
    )

    def __init__(self, template: str | None = None) -> None:
        self._template = template

    def template_for(self, runtime: AgentRuntime) -> str:
        return self._template or runtime.config.mute.template or SHOULD_MUTE_TEMPLATE

    # -- eligibility ------------------------------------------------------

    async def validate(self, runtime: AgentRuntime, message: Memory) -> bool:
        room_state = await runtime.get_participant_user_state(message.room_id, runtime.agent_id)
        return room_state != ParticipantState.MUTED

    # -- handler ----------------------------------------------------------

    async def handler(
        self,
        runtime: AgentRuntime,
        message: Memory,
        state: State | None = None,
        options: dict[str, Any] | None = None,
        callback: HandlerCallback | None = None,
        responses: list[Memory] | None = None,
    ) -> None:
        if not await self.validate(runtime, message):
            logger.debug(f"MUTE_ROOM: room {message.room_id} already muted, skipping")
            return

        if state is None:
            logger.error("State is required for muting a room")
            raise StateRequiredError("State is required for muting a room")

        decision = await self._should_mute(runtime, message, state)

        if decision == MuteDecision.MUTE:
            await runtime.set_participant_user_state(
                message.room_id, runtime.agent_id, ParticipantState.MUTED
            )
        elif not runtime.config.mute.acknowledge_without_mute:
            return

        room = await self._resolve_room(runtime, message, state)
        thought = _THOUGHT_MUTED.format(room_name=room.name)

        await runtime.create_memory(
            Memory(
                entity_id=message.entity_id,
                agent_id=message.agent_id,
                room_id=message.room_id,
                content=Content(thought=thought, actions=(ACTION_MUTE_START,)),
            ),
            MESSAGES_TABLE,
        )

        mute_message = Memory(
            entity_id=runtime.agent_id,
            agent_id=runtime.agent_id,
            room_id=message.room_id,
            content=Content(
                text="",
                thought=thought,
                actions=(ACTION_MUTE_ROOM,),
                source=message.source,
            ),
        )
        await runtime.create_memory(mute_message, MESSAGES_TABLE)
        if responses is not None:
            responses.append(mute_message)

    # -- stages -----------------------------------------------------------

    async def _should_mute(
        self, runtime: AgentRuntime, message: Memory, state: State
    ) -> MuteDecision:
        """Ask the small model, classify the reply, record the outcome."""
        values = {"agent_name": runtime.agent_name, "recent_messages": ""}
        values.update(state.values)
        prompt = compose_prompt_from_state(State(values=values), self.template_for(runtime))

        response = await runtime.use_model(
            ModelType.TEXT_SMALL, prompt=prompt, stop_sequences=[]
        )
        decision = classify_response(response)
        logger.debug(f"MUTE_ROOM: model said {response[:60]!r} -> {decision.value}")

        if decision == MuteDecision.MUTE:
            await self._record_outcome(runtime, message, _THOUGHT_WILL_MUTE, ACTION_MUTE_STARTED)
        elif decision == MuteDecision.NO_MUTE:
            await self._record_outcome(runtime, message, _THOUGHT_WONT_MUTE, ACTION_MUTE_FAILED)
        return decision

    @staticmethod
    async def _record_outcome(
        runtime: AgentRuntime, message: Memory, thought: str, action: str
    ) -> None:
        await runtime.create_memory(
            Memory(
                entity_id=message.entity_id,
                agent_id=message.agent_id,
                room_id=message.room_id,
                content=Content(source=message.source, thought=thought, actions=(action,)),
                metadata={"type": ACTION_MUTE_ROOM},
            ),
            MESSAGES_TABLE,
        )

    @staticmethod
    async def _resolve_room(runtime: AgentRuntime, message: Memory, state: State) -> Room:
        room = state.data.get("room")
        if isinstance(room, Room):
            return room
        return await runtime.get_room(message.room_id)
