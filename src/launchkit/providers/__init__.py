"""
Generative text providers for launchkit

Supports multiple providers with a common interface.
Providers: Gemini (Google), Claude (Anthropic), Mock
"""

from .base import (
    ModelProvider, ModelResponse, ProviderError, RateLimitError, AuthenticationError
)
from .claude import ClaudeProvider
from .gemini import GeminiProvider
from .mock import MockProvider
from ..config import GenerationConfig

__all__ = [
    # Base classes and types
    "ModelProvider",
    "ModelResponse",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    # Providers
    "ClaudeProvider",
    "GeminiProvider",
    "MockProvider",
    # Factories
    "get_provider",
    "provider_from_config",
]


def get_provider(name: str, **kwargs) -> ModelProvider:
    """
    Factory function to get a provider by name.

    Args:
        name: Provider name ('gemini', 'claude', 'mock')
        **kwargs: Provider-specific options

    Returns:
        Configured ModelProvider instance

    Raises:
        ValueError: If provider name is unknown
    """
    providers = {
        "gemini": GeminiProvider,
        "claude": ClaudeProvider,
        "mock": MockProvider,
    }

    if name not in providers:
        raise ValueError(f"Unknown provider: {name}. Valid options: {list(providers.keys())}")

    return providers[name](**kwargs)


def provider_from_config(cfg: GenerationConfig) -> ModelProvider:
    """Build the provider described by a GenerationConfig section."""
    if cfg.provider == "gemini":
        return GeminiProvider(
            api_key=cfg.api_key,
            default_model=cfg.get_model(),
            base_url=cfg.base_url,
            timeout=cfg.timeout_seconds,
        )
    if cfg.provider == "claude":
        return ClaudeProvider(api_key=cfg.api_key, default_model=cfg.get_model(), timeout=cfg.timeout_seconds)
    return get_provider(cfg.provider)
