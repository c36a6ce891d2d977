"""
Field extraction helpers shared by feed ingestion and direct article authoring.

Supports:
- Plain text from HTML bodies (via BeautifulSoup)
- Lead image discovery
- Read-time estimation
- Description fallback
- Deterministic tag colors
"""

import math

from bs4 import BeautifulSoup

WORDS_PER_MINUTE = 200
DESCRIPTION_LENGTH = 200
PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1555066931-4365d14bab8c"

TAG_COLORS = [
    "#F7DF1E",
    "#61DAFB",
    "#4285F4",
    "#F29111",
    "#FF5722",
    "#9C27B0",
    "#E91E63",
    "#3776AB",
    "#05122A",
]


def html_to_text(html: str | None) -> str:
    """Strip markup and collapse whitespace."""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    return " ".join(soup.get_text(separator=" ").split())


def estimate_read_time(content: str | None) -> int:
    """
    Estimate reading time in minutes at 200 words per minute.

    Always at least one minute, even for empty content.
    """
    word_count = len(html_to_text(content).split())
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))


def make_description(summary: str | None, content: str | None) -> str:
    """Use the summary text, or the first 200 characters of the body."""
    summary_text = html_to_text(summary)
    if summary_text:
        return summary_text

    body_text = html_to_text(content)
    if not body_text:
        return ""
    return body_text[:DESCRIPTION_LENGTH] + "..."


def extract_first_image(html: str | None) -> str | None:
    """Return the src of the first <img> in an HTML fragment."""
    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img", src=True)
    if img is None:
        return None
    return img["src"] or None


def pick_image_url(
    media_url: str | None = None,
    enclosure_url: str | None = None,
    *html_bodies: str | None,
) -> str:
    """
    Choose an article image.

    Order: media attachment, enclosure, first <img> found in the given
    HTML bodies, then the placeholder image.
    """
    if media_url:
        return media_url
    if enclosure_url:
        return enclosure_url
    for body in html_bodies:
        found = extract_first_image(body)
        if found:
            return found
    return PLACEHOLDER_IMAGE_URL


def tag_color(tag_name: str) -> str:
    """Pick a palette color from the sum of the name's character codes."""
    index = sum(ord(char) for char in tag_name) % len(TAG_COLORS)
    return TAG_COLORS[index]
