"""
Post export endpoint (JSON, CSV, XML).
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, Response

from buzzhub.content.exporter import posts_to_csv, posts_to_json, posts_to_xml
from buzzhub.core.models.enums import ExportFormat, PostStatus
from buzzhub.server.services.deps import StorageDep

router = APIRouter(prefix="/export", tags=["export"])


@router.get(
    "/posts",
    summary="Export Posts",
    description="Export every matching post as JSON, CSV or Blogger/WordPress-style XML.",
    response_description="The export document; CSV and XML are sent as attachments.",
)
async def export_posts(
    storage: StorageDep,
    format: ExportFormat = Query(default=ExportFormat.json, description="json, csv or xml"),
    categories: Optional[str] = Query(default=None, description="Exact category name"),
    status: Optional[PostStatus] = None,
) -> Response:
    posts = await storage.get_posts(category=categories, status=status.value if status else None, limit=None)

    if format == ExportFormat.csv:
        return Response(
            content=posts_to_csv(posts),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="posts.csv"'},
        )
    if format == ExportFormat.xml:
        return Response(
            content=posts_to_xml(posts),
            media_type="application/xml",
            headers={"Content-Disposition": 'attachment; filename="posts.xml"'},
        )
    return JSONResponse(content=posts_to_json(posts))
