"""Message records exchanged between the agent and its stores."""

from hushbot.bus.events import Content, Memory, MESSAGES_TABLE

__all__ = ["Content", "Memory", "MESSAGES_TABLE"]
