"""
Content tooling: SEO scoring, templated post generation and export.
"""

from .exporter import posts_to_csv, posts_to_json, posts_to_xml
from .generator import MAX_POSTS_PER_BATCH, BlogPostGenerator
from .seo import (
    calculate_seo_score,
    generate_canonical_url,
    generate_meta_description,
    generate_open_graph_tags,
    generate_slug,
    generate_twitter_card_tags,
    grade_for_score,
    validate_url,
)

__all__ = [
    "MAX_POSTS_PER_BATCH",
    "BlogPostGenerator",
    "calculate_seo_score",
    "generate_canonical_url",
    "generate_meta_description",
    "generate_open_graph_tags",
    "generate_slug",
    "generate_twitter_card_tags",
    "grade_for_score",
    "posts_to_csv",
    "posts_to_json",
    "posts_to_xml",
    "validate_url",
]
