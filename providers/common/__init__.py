"""Shared provider utilities used by the Anthropic, Azure Llama and generic shapers."""

from .error_mapping import get_user_facing_error_message, map_error
from .utils import merge_body, set_if_not_none

__all__ = [
    "get_user_facing_error_message",
    "map_error",
    "merge_body",
    "set_if_not_none",
]
