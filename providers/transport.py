"""HTTP transport that executes ProviderRequest objects."""

from typing import Protocol

import httpx
from loguru import logger

from providers.base import ProviderConfig, ProviderRequest
from providers.common.error_mapping import map_error


class Transport(Protocol):
    def send(self, request: ProviderRequest) -> httpx.Response: ...


class HttpxTransport:
    """
    Sends requests with httpx and returns the raw response.

    The response body and status are not inspected; that is left to the
    caller. httpx errors are mapped to TransportError.
    """

    def __init__(self, config: ProviderConfig, client: httpx.Client | None = None):
        self._read_timeout = config.http_read_timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(
                config.http_read_timeout,
                connect=config.http_connect_timeout,
                write=config.http_write_timeout,
            )
        )

    def send(self, request: ProviderRequest) -> httpx.Response:
        logger.debug("TRANSPORT: {} {}", request.method, request.url)
        try:
            return self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
            )
        except httpx.HTTPError as e:
            logger.error("TRANSPORT: {} {} failed: {}", request.method, request.url, e)
            raise map_error(e, read_timeout_s=self._read_timeout) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
