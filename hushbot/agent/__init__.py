"""Agent core module."""

from hushbot.agent.runtime import AgentRuntime
from hushbot.agent.state import State
from hushbot.agent.decision import MuteDecision, classify_response
from hushbot.agent.actions import Action, MuteRoomAction

__all__ = [
    "AgentRuntime",
    "State",
    "MuteDecision",
    "classify_response",
    "Action",
    "MuteRoomAction",
]
