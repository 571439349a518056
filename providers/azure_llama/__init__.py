"""Azure-hosted Meta Llama provider."""

from .catalog import LLAMA_MODELS, LlamaModelCatalog
from .request import AzureLlamaRequestShaper

__all__ = ["LLAMA_MODELS", "AzureLlamaRequestShaper", "LlamaModelCatalog"]
