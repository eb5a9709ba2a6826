"""Participant state stores.

A participant state is kept per ``(room_id, entity_id)`` pair.  A pair with
no stored entry reads as :attr:`ParticipantState.ACTIVE`.
"""

from __future__ import annotations

import abc
import json
import threading
import uuid
from enum import Enum
from pathlib import Path

from loguru import logger

from hushbot.utils.helpers import ensure_dir


class ParticipantState(str, Enum):
    """How an entity participates in a room."""

    ACTIVE = "ACTIVE"
    FOLLOWED = "FOLLOWED"
    MUTED = "MUTED"


class ParticipantStateStore(abc.ABC):
    """Read and write participant state for a room/entity pair."""

    @abc.abstractmethod
    async def get_state(self, room_id: str, entity_id: str) -> ParticipantState:
        ...

    @abc.abstractmethod
    async def set_state(
        self, room_id: str, entity_id: str, state: ParticipantState
    ) -> None:
        """Set the state. Setting the current value again is a no-op."""
        ...


class InMemoryParticipantStore(ParticipantStateStore):
    """Dict-backed store, one lock for all writes."""

    def __init__(self) -> None:
        self._states: dict[tuple[str, str], ParticipantState] = {}
        self._lock = threading.Lock()

    async def get_state(self, room_id: str, entity_id: str) -> ParticipantState:
        return self._states.get((room_id, entity_id), ParticipantState.ACTIVE)

    async def set_state(
        self, room_id: str, entity_id: str, state: ParticipantState
    ) -> None:
        with self._lock:
            self._states[(room_id, entity_id)] = ParticipantState(state)


class FileParticipantStore(ParticipantStateStore):
    """
    JSON-file store.

    The whole table lives in one file (``participants.json``) mapping
    ``"<room_id>|<entity_id>"`` to a state name.  Reads always go to disk so
    changes written by other processes (an external unmute, say) are seen.
    Writes re-read the file and merge the one changed entry.
    """

    FILENAME = "participants.json"

    def __init__(self, base_dir: Path) -> None:
        self.path = ensure_dir(base_dir) / self.FILENAME
        self._lock = threading.Lock()

    @staticmethod
    def _key(room_id: str, entity_id: str) -> str:
        return f"{room_id}|{entity_id}"

    def _load(self) -> dict[str, ParticipantState]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load participant states from {self.path}: {e}")
            return {}

        states: dict[str, ParticipantState] = {}
        for key, value in raw.items():
            try:
                states[key] = ParticipantState(value)
            except ValueError:
                logger.warning(f"Ignoring unknown participant state {value!r} for {key}")
        return states

    def _save(self, states: dict[str, ParticipantState]) -> None:
        data = {key: state.value for key, state in states.items()}
        tmp = self.path.with_name(f"{self.FILENAME}.{uuid.uuid4().hex[:12]}.tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp.replace(self.path)

    async def get_state(self, room_id: str, entity_id: str) -> ParticipantState:
        return self._load().get(self._key(room_id, entity_id), ParticipantState.ACTIVE)

    async def set_state(
        self, room_id: str, entity_id: str, state: ParticipantState
    ) -> None:
        state = ParticipantState(state)
        key = self._key(room_id, entity_id)
        with self._lock:
            states = self._load()
            if states.get(key) == state:
                return
            states[key] = state
            self._save(states)
