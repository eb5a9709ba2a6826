"""Memory stores.

Records are appended to a named table (``"messages"`` for chat traffic and
action audit records).  Nothing is ever updated or deleted.
"""

from __future__ import annotations

import abc
import json
import threading
from pathlib import Path

from hushbot.bus.events import MESSAGES_TABLE, Memory
from hushbot.utils.helpers import ensure_dir, safe_filename


class MemoryStore(abc.ABC):
    """Append-only store of :class:`Memory` records."""

    @abc.abstractmethod
    async def create_memory(self, memory: Memory, table: str = MESSAGES_TABLE) -> None:
        ...

    @abc.abstractmethod
    async def get_memories(
        self, room_id: str, table: str = MESSAGES_TABLE, count: int = 20
    ) -> list[Memory]:
        """Return up to *count* most recent records for a room, oldest first."""
        ...


class InMemoryMemoryStore(MemoryStore):
    def __init__(self) -> None:
        self._tables: dict[str, list[Memory]] = {}
        self._lock = threading.Lock()

    async def create_memory(self, memory: Memory, table: str = MESSAGES_TABLE) -> None:
        with self._lock:
            self._tables.setdefault(table, []).append(memory)

    async def get_memories(
        self, room_id: str, table: str = MESSAGES_TABLE, count: int = 20
    ) -> list[Memory]:
        rows = [m for m in self._tables.get(table, []) if m.room_id == room_id]
        return rows[-count:] if count > 0 else []

    def all(self, table: str = MESSAGES_TABLE) -> list[Memory]:
        """Every record in *table*, in insertion order."""
        return list(self._tables.get(table, []))


class JsonlMemoryStore(MemoryStore):
    """
    File-backed store: one JSONL file per ``(table, room_id)``.

    Lets several agent processes share the same room history.  Readers skip
    malformed lines and de-duplicate by record id, since the same inbound
    message may be appended by more than one process.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = ensure_dir(base_dir)
        self._lock = threading.Lock()

    def _get_path(self, table: str, room_id: str) -> Path:
        table_dir = ensure_dir(self.base_dir / safe_filename(table))
        return table_dir / f"{safe_filename(room_id.replace(':', '_'))}.jsonl"

    async def create_memory(self, memory: Memory, table: str = MESSAGES_TABLE) -> None:
        line = json.dumps(memory.to_dict(), ensure_ascii=False) + "\n"
        path = self._get_path(table, memory.room_id)
        with self._lock:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line)

    async def get_memories(
        self, room_id: str, table: str = MESSAGES_TABLE, count: int = 20
    ) -> list[Memory]:
        path = self._get_path(table, room_id)
        if not path.exists() or count <= 0:
            return []

        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()

        parsed: list[Memory] = []
        seen_ids: set[str] = set()
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                memory = Memory.from_dict(json.loads(line))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError):
                continue
            if memory.id in seen_ids:
                continue
            seen_ids.add(memory.id)
            parsed.append(memory)

        return sorted(parsed, key=lambda m: m.created_at)[-count:]
