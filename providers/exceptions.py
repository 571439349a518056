"""Exception hierarchy for the model catalog and provider request shapers."""

from typing import Any


class ProviderError(Exception):
    """Base error for everything raised by the providers package."""

    def __init__(self, message: str, raw_error: Any = None):
        super().__init__(message)
        self.message = message
        self.raw_error = raw_error


class InvalidConfigurationError(ProviderError):
    """A shaper, transport or platform was constructed with bad settings."""


class InvalidPayloadError(ProviderError):
    """The payload has a shape the target provider cannot accept."""


class ModelNameParseError(ProviderError):
    """A model name carries a malformed option fragment."""


class ModelNotFoundError(ProviderError):
    """A catalog has no entry for the requested model."""


class UnsupportedModelError(ProviderError):
    """No configured request shaper accepts the resolved model."""


class TransportError(ProviderError):
    """The HTTP collaborator failed before a response was received."""

    def __init__(
        self, message: str, status_code: int | None = None, raw_error: Any = None
    ):
        super().__init__(message, raw_error=raw_error)
        self.status_code = status_code
