"""
Prompt templates for brand generation

All prompt engineering lives here. The brand prompt asks for:
1. Three memorable, domain-friendly brand names
2. A primary/accent/neutral hex palette for each
3. A punchy tagline of at most ten words
"""

# =============================================================================
# BRAND GENERATOR PROMPTS
# =============================================================================

BRAND_IDENTITY_COUNT = 3
MAX_NAME_WORDS = 2
MAX_TAGLINE_WORDS = 10

BRAND_GENERATE_PROMPT = """You are a world-class brand strategist. Given a person's bio and name, generate {count} brand identities that are memorable, domain-friendly, and culturally aware.
For each, provide a brand name (1-{max_name_words} words, no special characters), a color palette (primary, accent, neutral hex codes), and a punchy tagline (max {max_tagline_words} words).
Avoid generic tech startup vibes. Be bold and specific.

User Bio: "{bio}"
User Name: "{name}"

Return as a JSON array of objects, where each object has the following structure: {{brandName: string, colors: {{primary: string, accent: string, neutral: string}}, tagline: string}}.
"""


def format_brand_prompt(bio: str, name: str) -> str:
    """
    Format the brand generation prompt.

    Args:
        bio: The person's bio
        name: The person's name

    Returns:
        Formatted prompt string
    """
    return BRAND_GENERATE_PROMPT.format(
        count=BRAND_IDENTITY_COUNT,
        max_name_words=MAX_NAME_WORDS,
        max_tagline_words=MAX_TAGLINE_WORDS,
        bio=bio.strip(),
        name=name.strip(),
    )
