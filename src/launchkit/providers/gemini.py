"""
Google Gemini provider implementation

Calls the generateContent REST endpoint directly over httpx.
Response shape: {"candidates": [{"content": {"parts": [{"text": ...}]}}]}
"""

from typing import Optional

import httpx

from .base import ModelProvider, ModelResponse, ProviderError, RateLimitError, AuthenticationError


class GeminiProvider(ModelProvider):
    """
    Google Gemini provider.

    The API key is sent as the ``key`` query parameter.
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = "gemini-pro",
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key
            default_model: Default model to use
            base_url: API base URL (defaults to Google's v1beta API)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self._api_key = api_key
        self._default_model = default_model
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None:
            if not self._api_key:
                raise AuthenticationError("No Gemini API key provided. Set GEMINI_API_KEY.")
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def _get_url(self, model: str) -> str:
        """Get the API URL for a model."""
        return f"{self._base_url}/models/{model}:generateContent"

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.9,
        **kwargs
    ) -> ModelResponse:
        """Generate a response using Gemini."""
        client = self._get_client()
        model = model or self._default_model

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": max_tokens,
                "temperature": temperature,
            },
        }
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}

        try:
            response = await client.post(self._get_url(model), params={"key": self._api_key}, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                raise RateLimitError(f"Gemini rate limit exceeded (HTTP {status})")
            if status in (401, 403):
                raise AuthenticationError(f"Gemini authentication failed (HTTP {status})")
            raise ProviderError(f"Gemini API error (HTTP {status})")
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Gemini API error: {e}")

        try:
            content = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise ProviderError("Gemini response missing candidates[0].content.parts[0].text")
        if not isinstance(content, str):
            raise ProviderError("Gemini response text is not a string")

        usage = {}
        metadata = data.get("usageMetadata") or {}
        if metadata:
            usage = {
                "input_tokens": metadata.get("promptTokenCount", 0),
                "output_tokens": metadata.get("candidatesTokenCount", 0),
            }

        return ModelResponse(
            content=content,
            model=model,
            provider=self.name,
            usage=usage,
            raw_response=data,
        )

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
