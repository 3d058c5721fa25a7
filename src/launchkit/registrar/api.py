"""
Authenticated request shaper for the registrar REST API.

Every call carries the bearer token, JSON content negotiation and a
no-store cache directive. Responses are decoded into an Envelope:

    {"data": <payload>, "message": "..."}   -> payload, message
    <any other JSON object or list>         -> the body itself
    empty body (e.g. 204 on DELETE)         -> None

Non-2xx replies and transport failures raise RegistrarTransportError
subclasses so the retry wrapper can pick them up.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from ..config import RegistrarConfig
from ..errors import (
    ConfigurationError,
    RegistrarConnectionError,
    RegistrarHTTPError,
    ResponseShapeError,
)

logger = logging.getLogger(__name__)


@dataclass
class Envelope:
    """Decoded registrar response."""
    data: Any = None
    message: Optional[str] = None
    status_code: int = 200


def decode_envelope(body: Any, status_code: int = 200) -> Envelope:
    """Unwrap the registrar's optional {"data": ..., "message": ...} wrapper."""
    if isinstance(body, dict):
        message = body.get("message")
        message = message if isinstance(message, str) else None
        if "data" in body:
            return Envelope(data=body["data"], message=message, status_code=status_code)
        return Envelope(data=body, message=message, status_code=status_code)
    return Envelope(data=body, status_code=status_code)


class RegistrarAPI:
    """
    Thin async HTTP layer over the registrar.

    The httpx client is created lazily; pass ``transport`` to swap the
    network out (httpx.MockTransport in tests).
    """

    def __init__(
        self,
        config: RegistrarConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def _get_client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None:
            if not self.config.api_token:
                raise ConfigurationError("OLA_API_TOKEN not configured")
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url.rstrip("/"),
                headers={
                    "Authorization": f"Bearer {self.config.api_token}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    "Cache-Control": "no-store",
                },
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json_body: Optional[Any] = None,
    ) -> Envelope:
        """
        Send one request and decode the response envelope.

        Args:
            method: HTTP verb
            path: Path relative to the configured base URL
            params: Query parameters
            json_body: JSON request body

        Returns:
            Envelope with the unwrapped payload

        Raises:
            ConfigurationError: No token configured
            RegistrarHTTPError: Non-2xx reply (body preserved when JSON)
            RegistrarConnectionError: No reply at all
            ResponseShapeError: 2xx reply that is not JSON
        """
        client = self._get_client()
        logger.debug(f"{method} {path}")

        try:
            response = await client.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as e:
            logger.error(f"Registrar request {method} {path} failed: {e!r}")
            raise RegistrarConnectionError(str(e)) from e

        body = self._parse_body(response)

        if not response.is_success:
            raise RegistrarHTTPError(
                response.status_code,
                body if body is not _NOT_JSON else None,
            )

        if body is _NOT_JSON:
            raise ResponseShapeError(f"{method} {path} returned a non-JSON body")

        return decode_envelope(body, response.status_code)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _NOT_JSON

    async def get(self, path: str, **kwargs) -> Envelope:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Envelope:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Envelope:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Envelope:
        return await self.request("DELETE", path, **kwargs)

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RegistrarAPI":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


_NOT_JSON = object()
