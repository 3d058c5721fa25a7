"""
Claude (Anthropic) provider implementation

Alternative brand-generation backend using the Anthropic SDK.
"""

from typing import Optional

import anthropic

from .base import ModelProvider, ModelResponse, ProviderError, RateLimitError, AuthenticationError


class ClaudeProvider(ModelProvider):
    """Anthropic Claude provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = "claude-sonnet-4-20250514",
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            default_model: Default model to use
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._default_model = default_model
        self._timeout = timeout
        self._client = None

    def _get_client(self):
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            if not self._api_key:
                raise AuthenticationError("No Anthropic API key provided. Set ANTHROPIC_API_KEY.")
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key, timeout=self._timeout)
        return self._client

    @property
    def name(self) -> str:
        return "claude"

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
        """Generate a response using Claude."""
        client = self._get_client()
        model = model or self._default_model

        request_kwargs = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
            # Claude uses 0-1 scale
            "temperature": min(1.0, max(0.0, temperature)),
        }
        if system:
            request_kwargs["system"] = system

        try:
            response = await client.messages.create(**request_kwargs)
        except anthropic.RateLimitError as e:
            raise RateLimitError(f"Claude rate limit exceeded: {e}")
        except anthropic.AuthenticationError as e:
            raise AuthenticationError(f"Claude authentication failed: {e}")
        except anthropic.APIError as e:
            raise ProviderError(f"Claude API error: {e}")

        content = ""
        if response.content:
            text = getattr(response.content[0], "text", None)
            content = text if isinstance(text, str) else ""

        return ModelResponse(
            content=content,
            model=response.model,
            provider=self.name,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            raw_response=response,
        )

    async def close(self):
        """Close the Anthropic client."""
        if self._client:
            await self._client.close()
            self._client = None
