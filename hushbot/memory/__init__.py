"""Append-only memory (message / audit) stores."""

from hushbot.memory.store import InMemoryMemoryStore, JsonlMemoryStore, MemoryStore

__all__ = ["MemoryStore", "InMemoryMemoryStore", "JsonlMemoryStore"]
