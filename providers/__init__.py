"""Model catalog and request shapers for LLM provider HTTP APIs."""

from .base import (
    ALL_CAPABILITIES,
    CAPABILITIES_VERSION,
    Capability,
    ModelDescriptor,
    ModelFamily,
    ModelRole,
    ProviderConfig,
    ProviderRequest,
    RequestShaper,
)
from .catalog import FallbackModelCatalog, ModelCatalog, ModelSpec, StaticModelCatalog
from .exceptions import (
    InvalidConfigurationError,
    InvalidPayloadError,
    ModelNameParseError,
    ModelNotFoundError,
    ProviderError,
    TransportError,
    UnsupportedModelError,
)
from .platform import Platform

__all__ = [
    "ALL_CAPABILITIES",
    "CAPABILITIES_VERSION",
    "Capability",
    "FallbackModelCatalog",
    "InvalidConfigurationError",
    "InvalidPayloadError",
    "ModelCatalog",
    "ModelDescriptor",
    "ModelFamily",
    "ModelNameParseError",
    "ModelNotFoundError",
    "ModelRole",
    "ModelSpec",
    "Platform",
    "ProviderConfig",
    "ProviderError",
    "ProviderRequest",
    "RequestShaper",
    "StaticModelCatalog",
    "TransportError",
    "UnsupportedModelError",
]
