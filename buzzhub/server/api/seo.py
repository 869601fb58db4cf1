"""
SEO helper endpoints: content analysis, social meta tags and slugs.
"""

from __future__ import annotations

from fastapi import APIRouter

from buzzhub.content import seo
from buzzhub.core.errors import InvalidInputError
from buzzhub.core.models.io import (
    MetaTagsRequest,
    MetaTagsResponse,
    SEOAnalyzeRequest,
    SEOMetrics,
    SlugRequest,
    SlugResponse,
)
from buzzhub.server.core.config import settings

router = APIRouter(prefix="/seo", tags=["seo"])


@router.post(
    "/analyze",
    response_model=SEOMetrics,
    summary="Analyze Content",
    description="Score title, meta description, content and keyword usage and suggest improvements.",
)
async def analyze(request: SEOAnalyzeRequest) -> SEOMetrics:
    """
    Analyze a draft for SEO.

    Each area is scored 0-100 and the overall score is their rounded mean,
    graded A (>= 90) to F (< 60).
    """
    return seo.calculate_seo_score(
        title=request.title,
        meta_description=request.meta_description,
        content=request.content,
        tags=request.tags,
    )


@router.post(
    "/meta-tags",
    response_model=MetaTagsResponse,
    summary="Social Meta Tags",
    description="Open Graph and Twitter card tags for a page, plus its canonical URL when a slug is given.",
    responses={400: {"description": "Invalid page or image URL"}},
)
async def meta_tags(request: MetaTagsRequest) -> MetaTagsResponse:
    for url in (request.url, request.image):
        if url and not seo.validate_url(url):
            raise InvalidInputError(f"Invalid URL: {url}")

    canonical = seo.generate_canonical_url(request.slug, settings.site_url) if request.slug else None
    return MetaTagsResponse(
        canonical_url=canonical,
        open_graph=seo.generate_open_graph_tags(
            title=request.title,
            description=request.description,
            image=request.image,
            url=request.url or canonical,
            type=request.type,
        ),
        twitter=seo.generate_twitter_card_tags(
            title=request.title,
            description=request.description,
            image=request.image,
        ),
    )


@router.post("/slug", response_model=SlugResponse, summary="Generate Slug")
async def slug(request: SlugRequest) -> SlugResponse:
    return SlugResponse(slug=seo.generate_slug(request.title))
