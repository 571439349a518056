"""Error mapping for the HTTP transport and user-facing error messages."""

import httpx

from providers.exceptions import (
    InvalidConfigurationError,
    InvalidPayloadError,
    ModelNameParseError,
    ModelNotFoundError,
    ProviderError,
    TransportError,
    UnsupportedModelError,
)


def get_user_facing_error_message(
    e: Exception,
    *,
    read_timeout_s: float | None = None,
) -> str:
    """Return a readable, non-empty error message for users."""
    message = str(e).strip()
    if message:
        return message

    if isinstance(e, httpx.ReadTimeout):
        if read_timeout_s is not None:
            return f"Provider request timed out after {read_timeout_s:g}s."
        return "Provider request timed out."
    if isinstance(e, httpx.ConnectTimeout):
        return "Could not connect to provider."
    if isinstance(e, TimeoutError):
        if read_timeout_s is not None:
            return f"Provider request timed out after {read_timeout_s:g}s."
        return "Request timed out."

    if isinstance(e, InvalidConfigurationError):
        return "Provider is misconfigured. Check your settings."
    if isinstance(e, InvalidPayloadError):
        return "Invalid request payload for provider."
    if isinstance(e, ModelNameParseError):
        return "Model name has malformed options."
    if isinstance(e, ModelNotFoundError):
        return "Model not found in catalog."
    if isinstance(e, UnsupportedModelError):
        return "Model is not supported by the configured provider."
    if isinstance(e, TransportError):
        if e.status_code in (502, 503, 504):
            return "Provider is temporarily unavailable. Please retry."
        return "Provider HTTP request failed."
    if isinstance(e, ProviderError):
        return "Provider request failed."

    return "Provider request failed unexpectedly."


def map_error(e: Exception, *, read_timeout_s: float | None = None) -> Exception:
    """Map an httpx exception to TransportError; anything else is returned as-is."""
    if isinstance(e, httpx.HTTPStatusError):
        return TransportError(
            get_user_facing_error_message(e, read_timeout_s=read_timeout_s),
            status_code=e.response.status_code,
            raw_error=str(e),
        )
    if isinstance(e, httpx.HTTPError):
        return TransportError(
            get_user_facing_error_message(e, read_timeout_s=read_timeout_s),
            raw_error=str(e),
        )
    return e
