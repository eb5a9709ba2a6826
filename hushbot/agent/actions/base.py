"""Base class for agent actions.

An action is a self-contained capability the agent can take in reaction to
an incoming message.  Each action implements two hooks:

* :meth:`Action.validate` – cheap, side-effect free eligibility check.
* :meth:`Action.handler` – do the work; may call the LLM and write memories.
"""

from __future__ import annotations

import abc
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from hushbot.agent.state import State
from hushbot.bus.events import Content, Memory

if TYPE_CHECKING:
    from hushbot.agent.runtime import AgentRuntime

# Invoked by an action that wants to send a reply through the channel.
HandlerCallback = Callable[[Content], Awaitable[list[Memory]]]


class Action(abc.ABC):
    """Base class for agent actions."""

    name: str = ""
    similes: tuple[str, ...] = ()
    description: str = ""

    @abc.abstractmethod
    async def validate(self, runtime: AgentRuntime, message: Memory) -> bool:
        """Return ``True`` if the action may run for *message* right now."""
        ...

    @abc.abstractmethod
    async def handler(
        self,
        runtime: AgentRuntime,
        message: Memory,
        state: State | None = None,
        options: dict[str, Any] | None = None,
        callback: HandlerCallback | None = None,
        responses: list[Memory] | None = None,
    ) -> None:
        """Run the action.

        Errors propagate to the caller; the dispatcher decides what to do
        with them.
        """
        ...

    def matches(self, action_name: str) -> bool:
        """True if *action_name* names this action or one of its similes."""
        key = action_name.strip().upper()
        return key == self.name or key in self.similes
