"""Curated catalog of Meta Llama models deployed on Azure."""

from providers.base import Capability, ModelFamily
from providers.catalog import ModelSpec, StaticModelCatalog

_LLAMA_CAPABILITIES = frozenset(
    {
        Capability.INPUT_MESSAGES,
        Capability.OUTPUT_TEXT,
        Capability.OUTPUT_STREAMING,
    }
)

_LLAMA_VISION_CAPABILITIES = _LLAMA_CAPABILITIES | {Capability.INPUT_IMAGE}

LLAMA_MODELS: dict[str, frozenset[Capability]] = {
    "llama-3.3-70B-Instruct": _LLAMA_CAPABILITIES,
    "llama-3.2-90b-vision-instruct": _LLAMA_VISION_CAPABILITIES,
    "llama-3.2-11b-vision-instruct": _LLAMA_VISION_CAPABILITIES,
    "llama-3.2-3b": _LLAMA_CAPABILITIES,
    "llama-3.2-3b-instruct": _LLAMA_CAPABILITIES,
    "llama-3.2-1b": _LLAMA_CAPABILITIES,
    "llama-3.2-1b-instruct": _LLAMA_CAPABILITIES,
    "llama-3.1-405b-instruct": _LLAMA_CAPABILITIES,
    "llama-3.1-70b": _LLAMA_CAPABILITIES,
    "llama-3.1-70b-instruct": _LLAMA_CAPABILITIES,
    "llama-3.1-8b": _LLAMA_CAPABILITIES,
    "llama-3.1-8b-instruct": _LLAMA_CAPABILITIES,
    "llama-3-70b": _LLAMA_CAPABILITIES,
    "llama-3-8b-instruct": _LLAMA_CAPABILITIES,
    "llama-3-8b": _LLAMA_CAPABILITIES,
}


class LlamaModelCatalog(StaticModelCatalog):
    def __init__(self):
        super().__init__(
            {
                name: ModelSpec(capabilities=caps, family=ModelFamily.llama)
                for name, caps in LLAMA_MODELS.items()
            }
        )
