"""
launchkit configuration

API endpoints, credentials, retry timings and model choices live here.
Environment variables are read once, in Config.from_env(), at startup;
operations only ever see the Config object they were built with.
"""

import os
from dataclasses import dataclass, field
from typing import Literal, Mapping, Optional


@dataclass
class RegistrarConfig:
    """Domain registrar (Ola.CV) API settings"""
    base_url: str = "https://developer.ola.cv/api/v1"
    api_token: str = ""
    tld: str = "cv"
    timeout_seconds: float = 30.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_token)


@dataclass
class RetryConfig:
    """Backoff for transient registrar failures"""
    max_retries: int = 3
    base_delay_seconds: float = 1.0
    max_delay_seconds: float = 10.0
    max_elapsed_seconds: Optional[float] = None  # None = no wall-clock budget


@dataclass
class GenerationConfig:
    """Generative text API used for brand identities"""
    provider: Literal["gemini", "claude", "mock"] = "gemini"
    api_key: str = ""
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = ""  # Empty = use provider default
    timeout_seconds: float = 60.0

    # Default models per provider
    PROVIDER_DEFAULTS = {
        "gemini": "gemini-pro",
        "claude": "claude-sonnet-4-20250514",
        "mock": "mock-model-v1",
    }

    def get_model(self) -> str:
        """Get model, falling back to provider default."""
        return self.model or self.PROVIDER_DEFAULTS.get(self.provider, "")


@dataclass
class Config:
    """Master config, built once and passed to the clients"""
    registrar: RegistrarConfig = field(default_factory=RegistrarConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Config with every section populated
        """
        env = os.environ if environ is None else environ
        provider = env.get("GENERATION_PROVIDER", "gemini")
        key_var = "ANTHROPIC_API_KEY" if provider == "claude" else "GEMINI_API_KEY"
        max_elapsed = env.get("RETRY_MAX_ELAPSED", "")

        return cls(
            registrar=RegistrarConfig(
                base_url=env.get("OLA_API_BASE_URL", RegistrarConfig.base_url),
                api_token=env.get("OLA_API_TOKEN", ""),
                timeout_seconds=float(env.get("REGISTRAR_TIMEOUT", "30.0")),
            ),
            retry=RetryConfig(
                max_retries=int(env.get("RETRY_MAX", "3")),
                base_delay_seconds=float(env.get("RETRY_BASE_DELAY", "1.0")),
                max_delay_seconds=float(env.get("RETRY_MAX_DELAY", "10.0")),
                max_elapsed_seconds=float(max_elapsed) if max_elapsed else None,
            ),
            generation=GenerationConfig(
                provider=provider,
                api_key=env.get(key_var, ""),
                base_url=env.get("GEMINI_API_BASE_URL", GenerationConfig.base_url),
                model=env.get("GENERATION_MODEL", ""),
            ),
        )

    # Quick presets
    @classmethod
    def fast_mode(cls) -> "Config":
        """For development/testing: no waiting between retries"""
        cfg = cls()
        cfg.retry.base_delay_seconds = 0.0
        cfg.retry.max_delay_seconds = 0.0
        cfg.registrar.timeout_seconds = 5.0
        return cfg
