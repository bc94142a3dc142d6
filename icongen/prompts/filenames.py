"""Semantic filename suggestions derived from the user prompt."""

import re
from typing import FrozenSet

FALLBACK_FILENAME = "generated-icon"
MAX_KEYWORDS = 2
MIN_TOKEN_LENGTH = 3

STOP_WORDS: FrozenSet[str] = frozenset(
    {
        # generation verbs and requests
        "create", "generate", "make", "design", "draw", "build", "render",
        "produce", "show", "give", "need", "want", "please", "can", "could",
        "would", "should", "help",
        # articles, pronouns, conjunctions, prepositions
        "the", "and", "for", "with", "that", "this", "these", "those", "from",
        "into", "onto", "over", "under", "about", "using", "use", "its",
        "your", "our", "their", "some", "any", "but", "not", "all", "also",
        "like", "based", "has", "have", "are", "was", "were", "been", "will",
        "which", "what", "where", "when", "who", "how", "than", "then",
        # the word "icon" itself and format words
        "icon", "icons", "svg", "style", "styled", "styling", "version",
        # filler adjectives
        "simple", "minimalist", "minimal", "beautiful", "modern", "clean",
        "nice", "cool", "pretty", "elegant", "sleek", "stylish", "detailed",
        "basic", "flat", "colorful", "colourful", "cute", "professional",
        "new", "small", "large", "big", "little", "very",
    }
)

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def derive_filename(prompt: str) -> str:
    """Suggest a kebab-case filename from the first content words of a prompt.

    The suggestion is not unique; collisions are resolved when saving.
    """
    cleaned = _NON_WORD.sub("", prompt.lower())
    keywords = [
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
    if not keywords:
        return FALLBACK_FILENAME
    return "-".join(keywords[:MAX_KEYWORDS])
