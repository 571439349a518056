"""Anthropic provider - Claude models over the Messages API."""

from .catalog import CLAUDE_MODELS, ClaudeModelCatalog
from .request import (
    ANTHROPIC_MESSAGES_URL,
    ANTHROPIC_VERSION,
    THINKING_BETA_FEATURE,
    AnthropicRequestShaper,
    CacheRetention,
    cache_control_marker,
    inject_cache_control,
)

__all__ = [
    "ANTHROPIC_MESSAGES_URL",
    "ANTHROPIC_VERSION",
    "CLAUDE_MODELS",
    "THINKING_BETA_FEATURE",
    "AnthropicRequestShaper",
    "CacheRetention",
    "ClaudeModelCatalog",
    "cache_control_marker",
    "inject_cache_control",
]
