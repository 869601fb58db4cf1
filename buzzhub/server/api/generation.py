"""
Templated content generation endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from buzzhub.core.errors import InvalidInputError
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.io import GenerateContentRequest, GenerateContentResponse, PostRead
from buzzhub.core.monitoring import log_content_generation
from buzzhub.server.services.deps import GeneratorDep, PostServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["generation"])


@router.post(
    "/generate-content",
    response_model=GenerateContentResponse,
    summary="Generate Posts",
    description="Generate up to 30 draft posts for a category from templates.",
    responses={400: {"description": "Missing required parameters"}},
)
async def generate_content(
    request: GenerateContentRequest,
    generator: GeneratorDep,
    posts: PostServiceDep,
) -> GenerateContentResponse:
    """
    Generate draft posts.

    - **category**: Category the posts are written for (required).
    - **post_count**: Number of posts; capped at 30 (required, non-zero).
    - **cohere_api_key**: Required, but only checked for presence.
    - **keywords**: Become the post tags; the category is used when empty.
    - **tone**: Requested writing tone.

    Posts are created like any other post, so slugs stay unique and SEO
    scores are computed.
    """
    if not request.category or not request.post_count or not request.cohere_api_key:
        raise InvalidInputError("Missing required parameters")

    author_id = await posts.system_author_id()
    drafts = generator.generate_batch(request.category, request.post_count, request.keywords, request.tone, author_id)
    created = [await posts.create_post(draft) for draft in drafts]

    logger.info(f"Generated {len(created)} posts for '{request.category}' (requested {request.post_count})")
    log_content_generation(request.category, request.post_count, len(created))
    return GenerateContentResponse(
        success=True,
        posts_generated=len(created),
        posts=[PostRead.model_validate(post) for post in created],
    )
