"""
Generative text provider contract

BrandGenerator only needs one thing from a provider: turn a prompt into
text. Credentials are checked up front through ``is_configured`` so a
missing key is reported without a network call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class ProviderError(Exception):
    """Generation call failed."""
    pass


class RateLimitError(ProviderError):
    """Provider throttled the request (HTTP 429)."""
    pass


class AuthenticationError(ProviderError):
    """Key missing or rejected."""
    pass


@dataclass
class ModelResponse:
    """Text returned by a provider plus token accounting."""
    content: str
    model: str
    provider: str
    usage: dict = field(default_factory=dict)
    raw_response: Optional[Any] = None

    @property
    def input_tokens(self) -> int:
        return self.usage.get("input_tokens", 0)

    @property
    def output_tokens(self) -> int:
        return self.usage.get("output_tokens", 0)

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class ModelProvider(ABC):
    """Interface shared by the Gemini, Claude and mock backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier ('gemini', 'claude', 'mock')."""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when generate() gets no override."""

    @property
    def is_configured(self) -> bool:
        """Whether an API key (or equivalent) is present."""
        return True

    @abstractmethod
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
        """
        Send one prompt and return the model's text.

        Args:
            prompt: User prompt
            system: Optional system instruction
            model: Model override
            max_tokens: Output token ceiling
            temperature: Sampling temperature

        Returns:
            ModelResponse whose ``content`` is always a string

        Raises:
            RateLimitError: Throttled
            AuthenticationError: Key missing or rejected
            ProviderError: Any other failure, including malformed replies
        """

    async def close(self):
        """Release any network resources."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.default_model!r})"
