"""Curated catalog of Anthropic Claude models."""

from providers.base import Capability, ModelFamily
from providers.catalog import ModelSpec, StaticModelCatalog

_CLAUDE_3_CAPABILITIES = frozenset(
    {
        Capability.INPUT_MESSAGES,
        Capability.INPUT_IMAGE,
        Capability.OUTPUT_TEXT,
        Capability.OUTPUT_STREAMING,
        Capability.TOOL_CALLING,
    }
)

_CLAUDE_THINKING_CAPABILITIES = _CLAUDE_3_CAPABILITIES | {
    Capability.INPUT_PDF,
    Capability.OUTPUT_STRUCTURED,
    Capability.THINKING,
}

CLAUDE_MODELS: dict[str, frozenset[Capability]] = {
    "claude-3-haiku-20240307": _CLAUDE_3_CAPABILITIES,
    "claude-3-5-haiku-latest": _CLAUDE_3_CAPABILITIES,
    "claude-3-5-haiku-20241022": _CLAUDE_3_CAPABILITIES,
    "claude-3-5-sonnet-latest": _CLAUDE_3_CAPABILITIES,
    "claude-3-5-sonnet-20241022": _CLAUDE_3_CAPABILITIES,
    "claude-3-7-sonnet-latest": _CLAUDE_THINKING_CAPABILITIES,
    "claude-3-7-sonnet-20250219": _CLAUDE_THINKING_CAPABILITIES,
    "claude-sonnet-4-0": _CLAUDE_THINKING_CAPABILITIES,
    "claude-sonnet-4-20250514": _CLAUDE_THINKING_CAPABILITIES,
    "claude-opus-4-0": _CLAUDE_THINKING_CAPABILITIES,
    "claude-opus-4-20250514": _CLAUDE_THINKING_CAPABILITIES,
    "claude-opus-4-1": _CLAUDE_THINKING_CAPABILITIES,
    "claude-opus-4-1-20250805": _CLAUDE_THINKING_CAPABILITIES,
    "claude-sonnet-4-5": _CLAUDE_THINKING_CAPABILITIES,
    "claude-sonnet-4-5-20250929": _CLAUDE_THINKING_CAPABILITIES,
    "claude-haiku-4-5": _CLAUDE_THINKING_CAPABILITIES,
    "claude-haiku-4-5-20251001": _CLAUDE_THINKING_CAPABILITIES,
}


class ClaudeModelCatalog(StaticModelCatalog):
    def __init__(self, models: dict[str, frozenset[Capability]] | None = None):
        entries = CLAUDE_MODELS if models is None else models
        super().__init__(
            {
                name: ModelSpec(capabilities=caps, family=ModelFamily.claude)
                for name, caps in entries.items()
            }
        )
