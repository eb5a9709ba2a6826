"""Base LLM provider interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ModelType(str, Enum):
    """Model tiers an action can ask for."""

    TEXT_SMALL = "TEXT_SMALL"
    TEXT_LARGE = "TEXT_LARGE"


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str | None
    reasoning_content: str | None = None
    finish_reason: str = "stop"
    usage: dict[str, int] | None = None


class LLMProvider(abc.ABC):
    """
    Abstract base class for LLM providers.

    Implementations wrap a chat-completion backend; errors raised by the
    backend are expected to propagate to the caller.
    """

    def __init__(self, api_key: str | None = None, api_base: str | None = None):
        self.api_key = api_key
        self.api_base = api_base

    @abc.abstractmethod
    async def chat(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        """
        Send a chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            tools: Optional list of tool definitions.
            model: Model identifier (provider-specific).
            max_tokens: Maximum tokens in response.
            temperature: Sampling temperature.
            stop: Stop sequences; ``None`` or empty means none.

        Returns:
            LLMResponse with content.
        """
        ...

    @abc.abstractmethod
    def get_default_model(self) -> str:
        """Get the default model for this provider."""
        ...
