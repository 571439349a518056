"""Platform: resolve a model, pick a request shaper, hand the request to transport."""

from collections.abc import Sequence
from typing import Any

import httpx
from loguru import logger

from providers.base import ModelDescriptor, ProviderRequest, RequestShaper
from providers.catalog import ModelCatalog
from providers.exceptions import UnsupportedModelError
from providers.transport import Transport


class Platform:
    def __init__(
        self,
        catalog: ModelCatalog,
        shapers: Sequence[RequestShaper],
        transport: Transport,
    ):
        self.catalog = catalog
        self._shapers = tuple(shapers)
        self._transport = transport

    def resolve(self, model: ModelDescriptor | str) -> ModelDescriptor:
        if isinstance(model, ModelDescriptor):
            return model
        return self.catalog.get_model(model)

    def _select_shaper(self, model: ModelDescriptor) -> RequestShaper:
        for shaper in self._shapers:
            if shaper.supports(model):
                return shaper
        raise UnsupportedModelError(
            f'No request shaper supports model "{model.name}" '
            f"(role={model.role}, family={model.family})."
        )

    def build_request(
        self,
        model: ModelDescriptor | str,
        payload: dict[str, Any] | str,
        options: dict[str, Any] | None = None,
    ) -> ProviderRequest:
        """
        Resolve model and shape the provider request.

        The model's default options sit under the caller's options; the
        canonical model name is added as "model" unless already given.
        """
        descriptor = self.resolve(model)
        merged = {**descriptor.options, **(options or {})}
        merged.setdefault("model", descriptor.name)
        shaper = self._select_shaper(descriptor)
        return shaper.build_request(descriptor, payload, merged)

    def invoke(
        self,
        model: ModelDescriptor | str,
        payload: dict[str, Any] | str,
        options: dict[str, Any] | None = None,
    ) -> httpx.Response:
        request = self.build_request(model, payload, options)
        logger.info("PLATFORM: {} {}", request.method, request.url)
        return self._transport.send(request)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()
