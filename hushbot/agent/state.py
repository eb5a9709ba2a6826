"""Request-scoped conversation state and prompt composition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hushbot.bus.events import Memory

# Longest message body shown per line in a rendered history.
_MAX_LINE_CHARS = 300


@dataclass
class State:
    """
    Snapshot of a conversation assembled for one incoming message.

    ``values`` holds named template substitutions (``agent_name``,
    ``recent_messages`` ...).  ``data`` caches objects already looked up
    while composing, e.g. the ``room``.
    """

    values: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)
    text: str = ""


class _Defaulting(dict):
    def __missing__(self, key: str) -> str:
        return ""


def compose_prompt_from_state(state: State, template: str) -> str:
    """Fill ``{name}`` fields in *template* from ``state.values``.

    Unknown fields render as empty strings.
    """
    return template.format_map(_Defaulting(state.values))


def format_messages(
    memories: list[Memory], agent_id: str, agent_name: str
) -> str:
    """Render memories one per line as ``name: text (actions: ...)``."""
    lines: list[str] = []
    for m in memories:
        if m.entity_id == agent_id:
            name = agent_name
        else:
            name = m.metadata.get("entity_name") or m.entity_id
        text = m.content.text[:_MAX_LINE_CHARS]
        line = f"{name}: {text}"
        if m.content.actions:
            line += f" (actions: {', '.join(m.content.actions)})"
        lines.append(line)
    return "\n".join(lines)
