"""Agent actions."""

from hushbot.agent.actions.base import Action, HandlerCallback
from hushbot.agent.actions.mute_room import MuteRoomAction, SHOULD_MUTE_TEMPLATE

__all__ = ["Action", "HandlerCallback", "MuteRoomAction", "SHOULD_MUTE_TEMPLATE"]
