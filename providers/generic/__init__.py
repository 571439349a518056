"""Generic OpenAI-compatible provider (completions and embeddings)."""

from .request import CompletionsRequestShaper, EmbeddingsRequestShaper

__all__ = ["CompletionsRequestShaper", "EmbeddingsRequestShaper"]
