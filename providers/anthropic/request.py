"""Request shaper for the Anthropic Messages API."""

from enum import StrEnum
from typing import Any

from loguru import logger

from providers.base import ModelDescriptor, ModelFamily, ModelRole, ProviderRequest
from providers.common.utils import merge_body
from providers.exceptions import InvalidConfigurationError, InvalidPayloadError

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
THINKING_BETA_FEATURE = "interleaved-thinking-2025-05-14"


class CacheRetention(StrEnum):
    """Anthropic prompt-caching retention.

    - short: 5-minute cache window (default ephemeral TTL)
    - long:  1-hour cache window; only available on api.anthropic.com
    - none:  prompt caching disabled
    """

    none = "none"
    short = "short"
    long = "long"


def cache_control_marker(retention: CacheRetention) -> dict[str, str] | None:
    """Return the cache_control marker for a retention, or None to skip caching."""
    if retention is CacheRetention.long:
        return {"type": "ephemeral", "ttl": "1h"}
    if retention is CacheRetention.short:
        return {"type": "ephemeral"}
    return None


def _extract_schema(response_format: Any) -> dict[str, Any]:
    if not isinstance(response_format, dict):
        return {}
    json_schema = response_format.get("json_schema")
    schema = json_schema.get("schema") if isinstance(json_schema, dict) else None
    return schema if isinstance(schema, dict) else {}


def inject_cache_control(
    payload: dict[str, Any], retention: CacheRetention
) -> dict[str, Any]:
    """
    Return a copy of payload with a prompt-caching marker on the last user turn.

    Anthropic prompt caching wants {"cache_control": {...}} on the last block
    of the last user message. Plain string content is promoted to a single
    text block. Only the containers on the annotated path are copied; the
    input payload is left untouched.

    Args:
        payload: Normalized Messages API payload
        retention: Retention policy selecting the marker shape

    Returns:
        The annotated payload, or payload itself when nothing was annotated
    """
    marker = cache_control_marker(retention)
    if marker is None:
        return payload

    messages = payload.get("messages") or []
    if not messages:
        return payload

    for i in range(len(messages) - 1, -1, -1):
        message = messages[i]
        if not isinstance(message, dict) or message.get("role") != "user":
            continue

        content = message.get("content")
        if isinstance(content, str):
            new_content = [{"type": "text", "text": content, "cache_control": marker}]
        elif isinstance(content, list) and content and isinstance(content[-1], dict):
            new_content = [*content[:-1], {**content[-1], "cache_control": marker}]
        else:
            # Empty or unusable content on the last user turn: leave as-is
            return payload

        new_messages = list(messages)
        new_messages[i] = {**message, "content": new_content}
        return {**payload, "messages": new_messages}

    return payload


class AnthropicRequestShaper:
    """Shapes requests for Claude models on api.anthropic.com."""

    def __init__(
        self,
        api_key: str,
        cache_retention: CacheRetention | str = CacheRetention.short,
    ):
        try:
            self._cache_retention = CacheRetention(cache_retention)
        except ValueError:
            raise InvalidConfigurationError(
                f'Invalid cache retention "{cache_retention}". '
                'Supported values are "none", "short" and "long".'
            ) from None
        self._api_key = api_key

    @property
    def cache_retention(self) -> CacheRetention:
        return self._cache_retention

    def supports(self, model: ModelDescriptor) -> bool:
        return (
            model.family is ModelFamily.claude and model.role is ModelRole.completions
        )

    def build_request(
        self,
        model: ModelDescriptor,
        payload: dict[str, Any] | str,
        options: dict[str, Any] | None = None,
    ) -> ProviderRequest:
        if isinstance(payload, str):
            raise InvalidPayloadError(
                "Payload must be a mapping, but a string was given to "
                f'"{type(self).__name__}".'
            )
        options = dict(options or {})
        logger.debug(
            "ANTHROPIC_REQUEST: shaping start model={} msgs={} tools={}",
            model.name,
            len(payload.get("messages") or []),
            len(options.get("tools") or []),
        )

        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

        payload = inject_cache_control(payload, self._cache_retention)

        if options.get("tools") is not None:
            options["tool_choice"] = {"type": "auto"}

        beta_features = options.pop("beta_features", None) or []
        if isinstance(beta_features, str):
            beta_features = [beta_features]
        beta_features = list(beta_features)
        if options.get("thinking") is not None:
            beta_features.append(THINKING_BETA_FEATURE)

        if options.get("response_format") is not None:
            schema = _extract_schema(options.pop("response_format"))
            options["output_config"] = {
                "format": {"type": "json_schema", "schema": schema},
            }

        if beta_features:
            headers["anthropic-beta"] = ",".join(beta_features)

        body = merge_body(payload, options)

        logger.debug(
            "ANTHROPIC_REQUEST: shaping done model={} beta={} keys={}",
            model.name,
            headers.get("anthropic-beta", "-"),
            sorted(body),
        )
        return ProviderRequest(
            method="POST",
            url=ANTHROPIC_MESSAGES_URL,
            headers=headers,
            body=body,
        )
