"""
Templated blog post generator.

Builds draft posts for a category from a fixed set of title templates and an
HTML body template. No language model is called; the Cohere API key accepted
by the generation endpoint is only checked for presence.
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..core.logging_config import get_logger
from ..core.models.enums import ContentTone, PostStatus
from ..core.models.io import PostCreate
from .seo import generate_meta_description, generate_slug

logger = get_logger(__name__)

MAX_POSTS_PER_BATCH = 30
SYSTEM_AUTHOR_ID = 1

TITLE_TEMPLATES = (
    "The Ultimate Guide to {category} in 2024",
    "{category}: Everything You Need to Know",
    "Breaking: Latest {category} Trends That Will Shock You",
    "10 Amazing {category} Facts That Will Blow Your Mind",
    "The Future of {category}: What Experts Predict",
)

KEY_TRENDS = (
    "Advanced automation and AI integration",
    "Sustainable and eco-friendly solutions",
    "Enhanced user experience and accessibility",
    "Data-driven decision making",
    "Mobile-first approaches",
)

CONTENT_TEMPLATE = """
<h1>{title}</h1>

<p>In today's fast-paced world of {category}, staying informed about the latest trends and developments is crucial. This comprehensive guide covers everything you need to know about {keyword_list} and more.</p>

<h2>Introduction</h2>
<p>The landscape of {category} has evolved dramatically over the past few years. With new innovations and breakthrough technologies emerging regularly, it's important to understand the key concepts and trends that are shaping this industry.</p>

<h2>Key Trends</h2>
<p>Several important trends are currently influencing the {category} sector:</p>
<ul>
{trend_items}
</ul>

<h2>Expert Insights</h2>
<p>Industry experts believe that {category} will continue to grow and evolve. The integration of {keyword_pair} is expected to drive significant innovation in the coming years.</p>

<h2>Future Predictions</h2>
<p>Looking ahead, we can expect to see continued growth and innovation in {category}. The focus will likely shift towards more sustainable and user-centric solutions.</p>

<h2>Conclusion</h2>
<p>As {category} continues to evolve, staying informed about the latest trends and developments is essential. By understanding these key concepts and preparing for future changes, individuals and businesses can position themselves for success in this dynamic field.</p>
"""

FEATURED_IMAGE_URL = "https://images.unsplash.com/photo-{photo_id}?w=800&h=400&fit=crop"


class BlogPostGenerator:
    """Generate draft posts from templates.

    Args:
        rng: Random source for title and image choice; pass a seeded
            ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def render_content(self, title: str, category: str, keywords: List[str]) -> str:
        """Render the HTML body for a generated post."""
        return CONTENT_TEMPLATE.format(
            title=title,
            category=category,
            keyword_list=", ".join(keywords),
            keyword_pair=" and ".join(keywords),
            trend_items="\n".join(f"  <li>{trend}</li>" for trend in KEY_TRENDS),
        )

    def generate(
        self,
        category: str,
        keywords: Optional[List[str]] = None,
        tone: ContentTone = ContentTone.professional,
        author_id: Optional[int] = SYSTEM_AUTHOR_ID,
    ) -> PostCreate:
        """Build one draft post for ``category``.

        Args:
            category: Category name, also used as the fallback tag
            keywords: Target keywords; they become the post tags
            tone: Requested writing tone (the templates are tone independent)
            author_id: Author of the draft; ``None`` leaves it unattributed

        Returns:
            Unsaved post payload with slug and excerpt filled in
        """
        keywords = [keyword for keyword in (keywords or []) if keyword]
        title = self._rng.choice(TITLE_TEMPLATES).format(category=category)
        content = self.render_content(title, category, keywords)
        photo_id = self._rng.randrange(10**12)

        logger.debug(f"Generated post '{title}' (tone={tone.value}, keywords={keywords})")
        return PostCreate(
            title=title,
            content=content,
            slug=generate_slug(title),
            excerpt=generate_meta_description(content),
            featured_image=FEATURED_IMAGE_URL.format(photo_id=photo_id),
            category=category,
            tags=keywords or [category],
            status=PostStatus.draft,
            author_id=author_id,
        )

    def generate_batch(
        self,
        category: str,
        count: int,
        keywords: Optional[List[str]] = None,
        tone: ContentTone = ContentTone.professional,
        author_id: Optional[int] = SYSTEM_AUTHOR_ID,
    ) -> List[PostCreate]:
        """Build ``min(count, MAX_POSTS_PER_BATCH)`` draft posts."""
        return [self.generate(category, keywords, tone, author_id) for _ in range(min(count, MAX_POSTS_PER_BATCH))]
