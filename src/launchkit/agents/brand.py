"""
Brand Generator - turns a bio into brand identities

Asks the generation provider for a JSON array of identities, pulls the
array out of whatever prose or markdown the model wraps it in, and drops
entries that are not domain-friendly or whose tagline runs long.
"""

import json
import logging
import re
from typing import Any, List, Optional

from ..models import BrandColors, BrandIdentity
from ..providers.base import ModelProvider, ProviderError
from ..result import Result
from .prompts import MAX_NAME_WORDS, MAX_TAGLINE_WORDS, format_brand_prompt

logger = logging.getLogger(__name__)

NAME_CHARS_RE = re.compile(r"^[A-Za-z0-9 ]+$")
COLOR_KEYS = ("primary", "accent", "neutral")


def extract_json_array(text: str) -> list:
    """
    Parse the JSON array spanning the first '[' to the last ']'.

    Raises:
        ValueError: No array in the text, or it is not valid JSON
    """
    if not isinstance(text, str):
        raise ValueError("Model output is not text")
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end < start:
        raise ValueError("No JSON array found in model output")

    parsed = json.loads(text[start:end + 1])
    if not isinstance(parsed, list):
        raise ValueError("Model output is not a JSON array")
    return parsed


def is_domain_friendly(name: Any) -> bool:
    """1-2 words of plain letters, digits and spaces."""
    if not isinstance(name, str) or not name.strip():
        return False
    words = name.split()
    if len(words) > MAX_NAME_WORDS:
        return False
    return bool(NAME_CHARS_RE.match(name))


def is_tagline_valid(tagline: Any) -> bool:
    """At most ten words."""
    if not isinstance(tagline, str) or not tagline.strip():
        return False
    return len(tagline.split()) <= MAX_TAGLINE_WORDS


def _parse_colors(colors: Any) -> Optional[BrandColors]:
    if not isinstance(colors, dict):
        return None
    if not all(isinstance(colors.get(key), str) for key in COLOR_KEYS):
        return None
    return BrandColors(**{key: colors[key] for key in COLOR_KEYS})


def filter_identities(raw: list, tld: str = "cv") -> List[BrandIdentity]:
    """Keep entries that pass the name and tagline rules and carry a full palette."""
    identities = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        name = entry.get("brandName")
        tagline = entry.get("tagline")
        if not is_domain_friendly(name) or not is_tagline_valid(tagline):
            continue
        colors = _parse_colors(entry.get("colors"))
        if colors is None:
            continue
        identities.append(BrandIdentity(brand_name=name, colors=colors, tagline=tagline, tld=tld))
    return identities


class BrandGenerator:
    """
    Generates brand identities from a bio and a name.

    The result may hold anywhere from zero to three identities: entries
    failing the filters are dropped, never repaired.
    """

    def __init__(self, provider: ModelProvider, model: Optional[str] = None, tld: str = "cv"):
        """
        Initialize brand generator.

        Args:
            provider: Generation provider
            model: Model override (provider default if not given)
            tld: Suffix used for suggested domains
        """
        self.provider = provider
        self.model = model
        self.tld = tld
        self.last_usage: dict = {}

    async def generate(self, bio: str, name: str) -> Result[List[BrandIdentity]]:
        """
        Generate brand identities.

        Args:
            bio: The person's bio
            name: The person's name

        Returns:
            Result with the identities that survived filtering
        """
        if not self.provider.is_configured:
            return Result.fail("Generation API key not configured")

        if not bio or not name or not bio.strip() or not name.strip():
            return Result.fail("Bio and name are required")

        prompt = format_brand_prompt(bio, name)

        try:
            response = await self.provider.generate(prompt=prompt, model=self.model)
        except ProviderError as e:
            logger.error(f"Brand generation failed on {self.provider.name}: {e}")
            return Result.fail("Failed to generate brand identities from the generation API.")

        self.last_usage = {
            "input_tokens": response.input_tokens,
            "output_tokens": response.output_tokens,
        }

        try:
            raw = extract_json_array(response.content)
        except ValueError as e:
            logger.error(f"Could not parse brand identities: {e}")
            return Result.fail("An error occurred while generating brand identities.")

        identities = filter_identities(raw, self.tld)
        if len(identities) < len(raw):
            logger.debug(f"Dropped {len(raw) - len(identities)} of {len(raw)} generated identities")

        return Result.ok(identities)
