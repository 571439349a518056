"""Request shapers for generic OpenAI-compatible endpoints."""

from typing import Any

from loguru import logger

from providers.base import ModelDescriptor, ModelFamily, ModelRole, ProviderRequest
from providers.common.utils import merge_body, set_if_not_none
from providers.exceptions import InvalidPayloadError


def _build_headers(api_key: str | None) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    set_if_not_none(headers, "Authorization", f"Bearer {api_key}" if api_key else None)
    return headers


class CompletionsRequestShaper:
    """Chat completions against an OpenAI-compatible server (LiteLLM, vLLM, ...)."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        path: str = "/v1/chat/completions",
    ):
        self._url = base_url.rstrip("/") + path
        self._api_key = api_key

    def supports(self, model: ModelDescriptor) -> bool:
        return (
            model.family is ModelFamily.generic
            and model.role is ModelRole.completions
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

        body = merge_body(payload, dict(options or {}))
        logger.debug(
            "GENERIC_REQUEST: completions model={} msgs={} tools={}",
            model.name,
            len(body.get("messages") or []),
            len(body.get("tools") or []),
        )
        return ProviderRequest(
            method="POST",
            url=self._url,
            headers=_build_headers(self._api_key),
            body=body,
        )


class EmbeddingsRequestShaper:
    """Embeddings against an OpenAI-compatible server."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        path: str = "/v1/embeddings",
    ):
        self._url = base_url.rstrip("/") + path
        self._api_key = api_key

    def supports(self, model: ModelDescriptor) -> bool:
        return model.role is ModelRole.embeddings

    def build_request(
        self,
        model: ModelDescriptor,
        payload: Any,
        options: dict[str, Any] | None = None,
    ) -> ProviderRequest:
        body = {**(options or {}), "model": model.name, "input": payload}
        logger.debug(
            "GENERIC_REQUEST: embeddings model={} inputs={}",
            model.name,
            1 if isinstance(payload, str) else len(payload),
        )
        return ProviderRequest(
            method="POST",
            url=self._url,
            headers=_build_headers(self._api_key),
            body=body,
        )
