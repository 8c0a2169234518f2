"""Generation backend adapters."""

from .client import GenerationClient, PromptRequest

__all__ = ["GenerationClient", "PromptRequest"]
