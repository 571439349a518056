"""Request shaper for Meta Llama models deployed on Azure AI."""

from typing import Any

from loguru import logger

from providers.base import ModelDescriptor, ModelFamily, ProviderRequest
from providers.common.utils import merge_body
from providers.exceptions import InvalidPayloadError


class AzureLlamaRequestShaper:
    """Shapes OpenAI-style chat completion requests for an Azure Llama deployment."""

    def __init__(self, base_url: str, api_key: str):
        self._base_url = base_url
        self._api_key = api_key

    def supports(self, model: ModelDescriptor) -> bool:
        return model.family is ModelFamily.llama

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
            "AZURE_LLAMA_REQUEST: model={} msgs={} base_url={}",
            model.name,
            len(body.get("messages") or []),
            self._base_url,
        )
        return ProviderRequest(
            method="POST",
            url=f"https://{self._base_url}/chat/completions",
            headers={
                "Content-Type": "application/json",
                "Authorization": self._api_key,
            },
            body=body,
        )
