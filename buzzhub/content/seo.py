"""
SEO heuristics for posts.

Everything here is plain string and regex arithmetic: slugs, meta
descriptions, a 0-100 score with per-area sub-scores, and the social meta
tags rendered for a post page. Tags are matched literally, so a tag such as
``C++`` never turns into a regex.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from ..core.models.io import SEOMetrics
from ..core.models.io.media import ContentAnalysis, DescriptionAnalysis, KeywordAnalysis, TitleAnalysis

SITE_NAME = "BuzzHub"

POWER_WORDS = ("ultimate", "guide", "best", "top", "amazing", "incredible", "shocking", "secret")
CTA_WORDS = ("learn", "discover", "find", "get", "read", "explore")
COMPELLING_WORDS = ("amazing", "incredible", "essential", "important", "critical")

_HTML_TAG = re.compile(r"<[^>]*>")
_HEADING_OPEN = re.compile(r"<h[1-6]>", re.IGNORECASE)
_HEADING_BLOCK = re.compile(r"<h[1-6][^>]*>(.*?)</h[1-6]>", re.IGNORECASE)
_IMAGE = re.compile(r"<img", re.IGNORECASE)
_LINK = re.compile(r"<a\s+(?:[^>]*?\s+)?href", re.IGNORECASE)
_SENTENCE_END = re.compile(r"[.!?]")


def strip_html(text: str) -> str:
    """Remove every ``<...>`` tag from ``text``."""
    return _HTML_TAG.sub("", text)


def word_count(text: str) -> int:
    """Count whitespace separated words of the text with HTML removed."""
    return len(strip_html(text).split())


def generate_slug(title: str) -> str:
    """Turn a title into a URL slug.

    >>> generate_slug("Hello, World!  2024")
    'hello-world-2024'
    """
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def generate_meta_description(content: str, max_length: int = 160) -> str:
    """Derive a meta description from HTML content.

    Returns the first sentence when it fits in ``max_length``, otherwise the
    text truncated to ``max_length - 3`` characters plus an ellipsis.
    """
    plain_text = strip_html(content)
    first_sentence = _SENTENCE_END.split(plain_text, maxsplit=1)[0]
    if len(first_sentence) <= max_length:
        return first_sentence.strip() + "."
    return plain_text[: max_length - 3].strip() + "..."


def _contains_any(text: str, needles: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(needle.lower() in lowered for needle in needles)


def _length_points(length: int, bands: List[tuple]) -> int:
    for low, high, points in bands:
        if low <= length <= high:
            return points
    return 0


def _title_score(title: str, tags: List[str]) -> int:
    score = _length_points(len(title), [(50, 60, 40), (30, 70, 25), (20, 80, 15)])
    if _contains_any(title, tags):
        score += 30
    if _contains_any(title, POWER_WORDS):
        score += 15
    if re.search(r"\d", title):
        score += 15
    return min(score, 100)


def _description_score(description: str, tags: List[str]) -> int:
    score = _length_points(len(description), [(150, 160, 40), (120, 170, 25), (100, 200, 15)])
    if _contains_any(description, tags):
        score += 30
    if _contains_any(description, CTA_WORDS):
        score += 15
    if _contains_any(description, COMPELLING_WORDS):
        score += 15
    return min(score, 100)


def _content_score(content: str, tags: List[str]) -> int:
    words = word_count(content)
    score = 0
    if 1000 <= words <= 2000:
        score += 30
    elif 500 <= words <= 3000:
        score += 20
    elif words >= 300:
        score += 10
    if _HEADING_OPEN.search(content):
        score += 20
    if _IMAGE.search(content):
        score += 15
    if _LINK.search(content):
        score += 10
    if any(re.search(re.escape(tag), content, re.IGNORECASE) for tag in tags if tag):
        score += 25
    return min(score, 100)


def keyword_density(content: str, tags: List[str]) -> float:
    """Whole-word tag occurrences as a percentage of the plain-text words."""
    plain_text = strip_html(content)
    words = word_count(plain_text)
    if words == 0:
        return 0.0
    matches = sum(
        len(re.findall(rf"\b{re.escape(tag)}\b", plain_text, re.IGNORECASE)) for tag in tags if tag
    )
    return matches / words * 100


def _keyword_score(content: str, tags: List[str]) -> int:
    density = keyword_density(content, tags)
    score = 0
    if 1 <= density <= 3:
        score += 50
    elif 0.5 <= density <= 5:
        score += 30
    elif density > 0:
        score += 15
    first_paragraph = content.split("</p>", 1)[0]
    if _contains_any(first_paragraph, tags):
        score += 25
    headings = [match.group(0) for match in _HEADING_BLOCK.finditer(content)]
    if any(_contains_any(heading, tags) for heading in headings):
        score += 25
    return min(score, 100)


def _suggestions(
    title: TitleAnalysis,
    description: DescriptionAnalysis,
    content: ContentAnalysis,
    keywords: KeywordAnalysis,
) -> List[str]:
    suggestions = []
    if title.length < 30:
        suggestions.append("Consider making your title longer (30-60 characters) for better SEO.")
    elif title.length > 70:
        suggestions.append("Your title might be too long. Consider shortening it to under 60 characters.")
    if not title.has_keywords:
        suggestions.append("Include your target keywords in the title for better relevance.")

    if description.length < 120:
        suggestions.append("Your meta description is too short. Aim for 150-160 characters.")
    elif description.length > 170:
        suggestions.append("Your meta description is too long and may be truncated in search results.")
    if not description.has_keywords:
        suggestions.append("Include your target keywords in the meta description.")

    if content.word_count < 300:
        suggestions.append("Consider adding more content. Longer articles tend to rank better.")
    if not content.has_headings:
        suggestions.append("Add headings (H1, H2, etc.) to improve content structure and readability.")
    if not content.has_images:
        suggestions.append("Consider adding relevant images to make your content more engaging.")

    if keywords.density < 0.5:
        suggestions.append(
            "Your keyword density is low. Consider mentioning your target keywords more naturally in the content."
        )
    elif keywords.density > 5:
        suggestions.append("Your keyword density is high. Avoid keyword stuffing by reducing keyword repetition.")
    return suggestions


def grade_for_score(score: int) -> str:
    """Letter grade for an overall score."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def calculate_seo_score(
    title: str = "",
    meta_description: str = "",
    content: str = "",
    tags: Optional[List[str]] = None,
) -> SEOMetrics:
    """Score a post on title, description, content and keyword usage.

    Each area is scored 0-100; the overall score is the rounded mean of the
    four.

    Args:
        title: Post title
        meta_description: Meta description / excerpt
        content: HTML body
        tags: Target keywords

    Returns:
        Full metrics including improvement suggestions
    """
    title = title or ""
    meta_description = meta_description or ""
    content = content or ""
    tags = [tag for tag in (tags or []) if tag]

    title_analysis = TitleAnalysis(
        length=len(title),
        has_keywords=_contains_any(title, tags),
        score=_title_score(title, tags),
    )
    description_analysis = DescriptionAnalysis(
        length=len(meta_description),
        has_keywords=_contains_any(meta_description, tags),
        score=_description_score(meta_description, tags),
    )
    content_analysis = ContentAnalysis(
        word_count=word_count(content),
        has_headings=bool(_HEADING_OPEN.search(content)),
        has_images=bool(_IMAGE.search(content)),
        score=_content_score(content, tags),
    )
    keyword_analysis = KeywordAnalysis(
        density=keyword_density(content, tags),
        score=_keyword_score(content, tags),
    )

    total = title_analysis.score + description_analysis.score + content_analysis.score + keyword_analysis.score
    # half-up rounding
    score = int(total / 4 + 0.5)

    return SEOMetrics(
        score=score,
        grade=grade_for_score(score),
        title=title_analysis,
        description=description_analysis,
        content=content_analysis,
        keywords=keyword_analysis,
        suggestions=_suggestions(title_analysis, description_analysis, content_analysis, keyword_analysis),
    )


def validate_url(url: str) -> bool:
    """Whether ``url`` is an absolute URL with a scheme and a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def generate_canonical_url(slug: str, base_url: str) -> str:
    """Canonical page URL for a post slug."""
    return f"{base_url.rstrip('/')}/post/{slug}"


def generate_open_graph_tags(
    title: str,
    description: str,
    image: Optional[str] = None,
    url: Optional[str] = None,
    type: str = "article",
) -> Dict[str, str]:
    """Open Graph ``<meta property=...>`` values for a page."""
    return {
        "og:title": title,
        "og:description": description,
        "og:image": image or "",
        "og:url": url or "",
        "og:type": type or "article",
        "og:site_name": SITE_NAME,
    }


def generate_twitter_card_tags(title: str, description: str, image: Optional[str] = None) -> Dict[str, str]:
    """Twitter card ``<meta name=...>`` values for a page."""
    return {
        "twitter:card": "summary_large_image",
        "twitter:title": title,
        "twitter:description": description,
        "twitter:image": image or "",
    }
