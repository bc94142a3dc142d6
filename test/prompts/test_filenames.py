"""Tests for filename suggestions."""

import pytest

from icongen.prompts import FALLBACK_FILENAME, derive_filename


@pytest.mark.parametrize(
    "prompt,expected",
    [
        (
            "please generate a minimalist dog silhouette icon with black and white flat design elements",
            "dog-silhouette",
        ),
        ("user profile", "user-profile"),
        ("create a the and", "generated-icon"),
        ("cat on pillow", "cat-pillow"),
        ("Create a simple star icon", "star"),
        ("Shopping-cart, FAST checkout!", "shoppingcart-fast"),
    ],
)
def test_derive_filename(prompt: str, expected: str) -> None:
    assert derive_filename(prompt) == expected


def test_short_tokens_are_dropped() -> None:
    assert derive_filename("an ox at sea map") == "sea-map"


def test_only_stop_words_falls_back() -> None:
    assert derive_filename("") == FALLBACK_FILENAME
    assert derive_filename("!!! ???") == FALLBACK_FILENAME


def test_at_most_two_keywords_in_prompt_order() -> None:
    assert derive_filename("rocket planet galaxy nebula") == "rocket-planet"


@pytest.mark.parametrize(
    "prompt,expected",
    [
        ("line chart", "line-chart"),
        ("picture frame", "picture-frame"),
        ("black cat", "black-cat"),
        ("company logo with white symbol", "company-logo"),
    ],
)
def test_content_nouns_and_colours_are_kept(prompt: str, expected: str) -> None:
    assert derive_filename(prompt) == expected
