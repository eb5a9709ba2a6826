"""LLM provider abstraction."""

from hushbot.providers.base import LLMProvider, LLMResponse, ModelType

__all__ = ["LLMProvider", "LLMResponse", "ModelType"]
