"""
Generation agents for launchkit

Brand generator turns a bio into brand identities.
"""

from .brand import BrandGenerator, extract_json_array, filter_identities, is_domain_friendly, is_tagline_valid
from .prompts import BRAND_GENERATE_PROMPT, format_brand_prompt

__all__ = [
    "BrandGenerator",
    "extract_json_array",
    "filter_identities",
    "is_domain_friendly",
    "is_tagline_valid",
    "BRAND_GENERATE_PROMPT",
    "format_brand_prompt",
]
