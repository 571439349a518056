"""Core value types shared by catalogs, request shapers and the platform."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Protocol

# =============================================================================
# Capabilities and roles
# =============================================================================


class Capability(StrEnum):
    INPUT_MESSAGES = "input-messages"
    INPUT_TEXT = "input-text"
    INPUT_IMAGE = "input-image"
    INPUT_PDF = "input-pdf"
    INPUT_AUDIO = "input-audio"
    INPUT_MULTIPLE = "input-multiple"
    OUTPUT_TEXT = "output-text"
    OUTPUT_STREAMING = "output-streaming"
    OUTPUT_STRUCTURED = "output-structured"
    TOOL_CALLING = "tool-calling"
    THINKING = "thinking"
    EMBEDDINGS = "embeddings"


# Version of the capability universe below; bump when members change.
CAPABILITIES_VERSION = 1

ALL_CAPABILITIES: frozenset[Capability] = frozenset(Capability)


class ModelRole(StrEnum):
    completions = "completions"
    embeddings = "embeddings"


class ModelFamily(StrEnum):
    generic = "generic"
    claude = "claude"
    llama = "llama"


OptionValue = str | int | float


@dataclass(frozen=True)
class ModelDescriptor:
    """A resolved model: canonical name, role, capabilities and default options."""

    name: str
    role: ModelRole
    capabilities: frozenset[Capability] = frozenset()
    options: Mapping[str, OptionValue] = field(default_factory=dict, hash=False)
    family: ModelFamily = ModelFamily.generic

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", ModelRole(self.role))
        object.__setattr__(self, "family", ModelFamily(self.family))
        object.__setattr__(
            self, "capabilities", frozenset(Capability(c) for c in self.capabilities)
        )
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    @property
    def is_embeddings(self) -> bool:
        return self.role is ModelRole.embeddings


# =============================================================================
# Requests
# =============================================================================


@dataclass(frozen=True)
class ProviderRequest:
    """Everything the transport needs to issue one HTTP call."""

    method: str
    url: str
    headers: dict[str, str]
    body: dict[str, Any]


@dataclass
class ProviderConfig:
    """Connection settings handed to the HTTP transport."""

    api_key: str | None = None
    base_url: str | None = None
    http_read_timeout: float = 300.0
    http_write_timeout: float = 10.0
    http_connect_timeout: float = 2.0


class RequestShaper(Protocol):
    """Turns a descriptor, payload and options into a provider request."""

    def supports(self, model: ModelDescriptor) -> bool: ...

    def build_request(
        self,
        model: ModelDescriptor,
        payload: dict[str, Any] | str,
        options: dict[str, Any] | None = None,
    ) -> ProviderRequest: ...
