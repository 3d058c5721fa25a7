"""
Mock provider for testing

Returns configurable responses without making API calls.
"""

import asyncio
import json
import random
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from .base import ModelProvider, ModelResponse, ProviderError


PALETTES = [
    {"primary": "#1B4332", "accent": "#F4A261", "neutral": "#F8F9FA"},
    {"primary": "#3A0CA3", "accent": "#F72585", "neutral": "#EDEDE9"},
    {"primary": "#0B3C5D", "accent": "#D9B310", "neutral": "#F5F5F5"},
]

SUFFIXES = ["Studio", "Works", "Lab"]


def generate_mock_brands(name: str, count: int = 3) -> List[dict]:
    """
    Build brand identities shaped like the real model's output.

    Args:
        name: Person's name, used to seed brand names
        count: Number of identities

    Returns:
        List of dicts with brandName, colors and tagline
    """
    base = re.sub(r"[^A-Za-z0-9]", "", name.split()[0] if name.split() else "") or "Nova"
    brands = []
    for i in range(count):
        brands.append({
            "brandName": f"{base.title()} {SUFFIXES[i % len(SUFFIXES)]}",
            "colors": dict(PALETTES[i % len(PALETTES)]),
            "tagline": "Bold work for people who ship",
        })
    return brands


@dataclass
class MockProvider(ModelProvider):
    """
    Mock provider for testing.

    Can be configured with custom response generators or fixed responses.
    """

    _name: str = "mock"
    _default_model: str = "mock-model-v1"
    fixed_response: Optional[str] = None
    response_generator: Optional[Callable[[str], str]] = None
    delay_seconds: float = 0.0
    fail_rate: float = 0.0  # Probability of raising an error
    token_count: int = 100
    configured: bool = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def is_configured(self) -> bool:
        return self.configured

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
        """Generate a mock response."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if self.fail_rate > 0 and random.random() < self.fail_rate:
            raise ProviderError("Simulated mock provider failure")

        if self.fixed_response is not None:
            content = self.fixed_response
        elif self.response_generator is not None:
            content = self.response_generator(prompt)
        else:
            content = self._default_response(prompt)

        return ModelResponse(
            content=content,
            model=model or self._default_model,
            provider=self.name,
            usage={
                "input_tokens": len(prompt.split()) * 2,
                "output_tokens": self.token_count,
            },
        )

    def _default_response(self, prompt: str) -> str:
        """Wrap mock brands in prose and a code fence, like a real model does."""
        match = re.search(r'User Name: "([^"]*)"', prompt)
        name = match.group(1) if match else "Nova"
        brands = json.dumps(generate_mock_brands(name), indent=2)
        return f"Here are three brand identities:\n```json\n{brands}\n```"
